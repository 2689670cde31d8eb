"""
Package authz implements role-based authorization decisions for FHIR
requests, batch bundles and bulk-data jobs.
"""

from .interface import Authorization

from .rbac import (
    RBACHandler,
    CAPABILITY_STATEMENT_RESOURCE,
)

from .bulk import (
    matches_export,
    matches_system_export,
    matches_compartment_export,
)

__all__ = [
    # Interface
    'Authorization',

    # Handler
    'RBACHandler',
    'CAPABILITY_STATEMENT_RESOURCE',

    # Export matching
    'matches_export',
    'matches_system_export',
    'matches_compartment_export',
]
