"""
Configuration utilities for the FHIR RBAC handler.
Provides rule document loading, environment lookups and schema validation.
"""

import json
import os
from pathlib import Path
from typing import Any, Dict, List

import yaml


ENV_PREFIX = "FHIRRBAC_"


def get_config_value(key: str, default: Any = None,
                     env_prefix: str = ENV_PREFIX) -> Any:
    """Get configuration value from environment or return default."""
    env_key = f"{env_prefix}{key.upper()}"
    return os.environ.get(env_key, default)


def _type_name(expected_type: Any) -> str:
    if isinstance(expected_type, tuple):
        return " or ".join(t.__name__ for t in expected_type)
    return expected_type.__name__


def validate_config(config: Dict[str, Any],
                    schema: Dict[str, Dict[str, Any]]) -> List[str]:
    """
    Validate configuration against a schema.
    Returns list of validation errors.

    Schema format:
    {
        'field_name': {
            'required': True/False,
            'type': type or tuple of types,
        }
    }
    """
    errors = []

    for field, rules in schema.items():
        if rules.get('required', False) and field not in config:
            errors.append(f"Missing required field: {field}")
            continue

        if field not in config:
            continue

        value = config[field]

        expected_type = rules.get('type')
        # bool is an int subclass but never a valid number here
        if expected_type and (not isinstance(value, expected_type) or
                              (isinstance(value, bool) and bool not in _as_tuple(expected_type))):
            errors.append(f"Field {field} must be of type {_type_name(expected_type)}")

    return errors


def _as_tuple(expected_type: Any) -> tuple:
    return expected_type if isinstance(expected_type, tuple) else (expected_type,)


def load_config_file(file_path: str) -> Dict[str, Any]:
    """Load configuration from a file (JSON or YAML)."""
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"Configuration file not found: {file_path}")

    file_ext = Path(file_path).suffix.lower()

    with open(file_path, 'r', encoding='utf-8') as f:
        if file_ext in ['.json']:
            return json.load(f)
        elif file_ext in ['.yaml', '.yml']:
            return yaml.safe_load(f)
        else:
            raise ValueError(f"Unsupported configuration file format: {file_ext}")
