"""
Core configuration: the versioned rule table and handler settings.
"""

from .config import (
    Rule,
    RBACConfig,
    HandlerSettings,
    load_rbac_config,
)

__all__ = [
    'Rule',
    'RBACConfig',
    'HandlerSettings',
    'load_rbac_config',
]
