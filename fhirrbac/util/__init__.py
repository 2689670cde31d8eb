"""
Utility package for the FHIR RBAC handler.
"""

from .config import (
    ENV_PREFIX,
    get_config_value,
    validate_config,
    load_config_file,
)

__all__ = [
    'ENV_PREFIX',
    'get_config_value',
    'validate_config',
    'load_config_file',
]
