"""
Resource-set matching for bulk export scopes.
"""

from typing import Union

from ..core.config import Rule
from ..resources.catalog import base_resources, patient_compartment_resources
from ..types.operations import ExportType, FhirVersion


def matches_system_export(rule: Rule, fhir_version: Union[FhirVersion, str]) -> bool:
    """A system export needs the rule to grant exactly the version's base catalog."""
    return rule.resources == base_resources(fhir_version)


def matches_compartment_export(rule: Rule, fhir_version: Union[FhirVersion, str]) -> bool:
    """Patient and group exports need every patient compartment type; extras are fine."""
    return patient_compartment_resources(fhir_version) <= rule.resources


def matches_export(rule: Rule, export_type: Union[ExportType, str],
                   fhir_version: Union[FhirVersion, str]) -> bool:
    """Whether a read-capable rule satisfies the resource-set rule for an export scope."""
    if export_type == ExportType.SYSTEM:
        return matches_system_export(rule, fhir_version)
    if export_type in (ExportType.PATIENT, ExportType.GROUP):
        return matches_compartment_export(rule, fhir_version)
    return False
