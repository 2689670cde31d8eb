"""
Configuration module for the FHIR RBAC handler.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Mapping, Optional

from ..auth.claims import DEFAULT_GROUPS_CLAIM_KEY, DEFAULT_SUBJECT_CLAIM_KEY
from ..errors import RBACConfigError
from ..types.operations import RULE_OPERATIONS, FhirVersion, enum_value, parse_fhir_version
from ..util.config import get_config_value, load_config_file, validate_config


RBAC_CONFIG_SCHEMA = {
    'version': {'required': True, 'type': (int, float)},
    'groupRules': {'required': True, 'type': dict},
}


@dataclass(frozen=True)
class Rule:
    """Operations and resource types granted to one group."""
    operations: FrozenSet[str] = frozenset()
    resources: FrozenSet[str] = frozenset()

    def __post_init__(self):
        object.__setattr__(self, 'operations', frozenset(enum_value(op) for op in self.operations))
        object.__setattr__(self, 'resources', frozenset(self.resources))

    def allows_operation(self, operation: Any) -> bool:
        return enum_value(operation) in self.operations

    def covers(self, resource_type: str) -> bool:
        return resource_type in self.resources

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            'operations': sorted(self.operations),
            'resources': sorted(self.resources),
        }

    @classmethod
    def from_dict(cls, group: str, data: Any) -> 'Rule':
        """Create from dictionary representation, validating field shapes."""
        if not isinstance(data, dict):
            raise RBACConfigError(f"Rule for group '{group}' must be a mapping",
                                  config_key=f"groupRules.{group}")

        operations = _string_list(data.get('operations'), f"groupRules.{group}.operations")
        resources = _string_list(data.get('resources'), f"groupRules.{group}.resources")

        unknown = [op for op in operations if op not in RULE_OPERATIONS]
        if unknown:
            raise RBACConfigError(f"Rule for group '{group}' has unknown operations: {unknown}",
                                  config_key=f"groupRules.{group}.operations",
                                  config_value=unknown)

        return cls(operations=frozenset(operations), resources=frozenset(resources))


def _string_list(value: Any, key: str) -> list:
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise RBACConfigError(f"Field {key} must be a list of strings", config_key=key)
    return value


@dataclass(frozen=True)
class RBACConfig:
    """
    Versioned rule table mapping group names to rules.

    The group rule mapping is read-only; a policy change means building a new
    RBACConfig and a new handler.
    """
    version: float
    group_rules: Mapping[str, Rule] = field(default_factory=dict, hash=False)

    def __post_init__(self):
        if isinstance(self.version, bool) or not isinstance(self.version, (int, float)):
            raise RBACConfigError("Field version must be of type int or float",
                                  config_key='version', config_value=self.version)
        object.__setattr__(self, 'group_rules', MappingProxyType(dict(self.group_rules)))

    def rule_for(self, group: str) -> Optional[Rule]:
        return self.group_rules.get(group)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the rule document shape."""
        return {
            'version': self.version,
            'groupRules': {group: rule.to_dict() for group, rule in self.group_rules.items()},
        }

    @classmethod
    def from_dict(cls, data: Any) -> 'RBACConfig':
        """
        Create from a rule document of the form
        ``{version, groupRules: {group: {operations, resources}}}``.

        Raises:
            RBACConfigError: If the document is malformed
        """
        if not isinstance(data, dict):
            raise RBACConfigError("RBAC configuration must be a mapping")

        errors = validate_config(data, RBAC_CONFIG_SCHEMA)
        if errors:
            raise RBACConfigError(f"Invalid RBAC configuration: {'; '.join(errors)}",
                                  details={'errors': errors})

        group_rules = {
            str(group): Rule.from_dict(group, rule)
            for group, rule in data['groupRules'].items()
        }
        return cls(version=data['version'], group_rules=group_rules)


def load_rbac_config(file_path: str) -> RBACConfig:
    """Load and validate a JSON or YAML rule document."""
    return RBACConfig.from_dict(load_config_file(file_path))


@dataclass
class HandlerSettings:
    """Deployment settings for an RBAC handler."""
    fhir_version: FhirVersion = FhirVersion.R4
    groups_claim_key: str = DEFAULT_GROUPS_CLAIM_KEY
    subject_claim_key: str = DEFAULT_SUBJECT_CLAIM_KEY
    rules_path: Optional[str] = None

    def __post_init__(self):
        self.fhir_version = parse_fhir_version(self.fhir_version)

    @classmethod
    def from_env(cls) -> "HandlerSettings":
        """Create settings from FHIRRBAC_* environment variables"""
        return cls(
            fhir_version=get_config_value("fhir_version", FhirVersion.R4.value),
            groups_claim_key=get_config_value("groups_claim", DEFAULT_GROUPS_CLAIM_KEY),
            subject_claim_key=get_config_value("subject_claim", DEFAULT_SUBJECT_CLAIM_KEY),
            rules_path=get_config_value("rules_path"),
        )

    def validate(self) -> bool:
        """Validate the settings"""
        if not self.groups_claim_key:
            raise ValueError("groups_claim_key is required")
        if not self.subject_claim_key:
            raise ValueError("subject_claim_key is required")
        return True
