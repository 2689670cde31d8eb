"""
Package resources provides the static FHIR resource catalogs used for bulk
export matching.
"""

from .catalog import (
    BASE_R4_RESOURCES,
    BASE_STU3_RESOURCES,
    R4_PATIENT_COMPARTMENT_RESOURCES,
    STU3_PATIENT_COMPARTMENT_RESOURCES,
    base_resources,
    patient_compartment_resources,
)

__all__ = [
    'BASE_R4_RESOURCES',
    'BASE_STU3_RESOURCES',
    'R4_PATIENT_COMPARTMENT_RESOURCES',
    'STU3_PATIENT_COMPARTMENT_RESOURCES',
    'base_resources',
    'patient_compartment_resources',
]
