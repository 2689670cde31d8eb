"""
fhirrbac Python Package

Role-based access control for FHIR servers - Python Implementation
"""

__version__ = "0.1.0"

from .authz import Authorization, RBACHandler
from .core import RBACConfig, Rule, HandlerSettings, load_rbac_config
from .errors import UnauthorizedError, RBACConfigError, ConfigVersionMismatchError
from .types import (
    TypeOperation,
    SystemOperation,
    BulkDataOperation,
    ExportType,
    FhirVersion,
    BulkDataAuth,
    BatchReadWriteRequest,
    AuthorizationRequest,
    AuthorizationBundleRequest,
    AllowedResourceTypesForOperationRequest,
    ReadResponseAuthorizedRequest,
    WriteRequestAuthorizedRequest,
    AccessBulkDataJobRequest,
)

__all__ = [
    "Authorization",
    "RBACHandler",
    "RBACConfig",
    "Rule",
    "HandlerSettings",
    "load_rbac_config",
    "UnauthorizedError",
    "RBACConfigError",
    "ConfigVersionMismatchError",
    "TypeOperation",
    "SystemOperation",
    "BulkDataOperation",
    "ExportType",
    "FhirVersion",
    "BulkDataAuth",
    "BatchReadWriteRequest",
    "AuthorizationRequest",
    "AuthorizationBundleRequest",
    "AllowedResourceTypesForOperationRequest",
    "ReadResponseAuthorizedRequest",
    "WriteRequestAuthorizedRequest",
    "AccessBulkDataJobRequest",
]
