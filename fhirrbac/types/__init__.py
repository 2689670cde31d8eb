"""
Package types holds the operation vocabulary and request records shared by
the claims extractor, the rule table and the authorization handler.
"""

from .operations import (
    TypeOperation,
    SystemOperation,
    BulkDataOperation,
    ExportType,
    FhirVersion,
    Operation,
    ALL_OPERATIONS,
    RULE_OPERATIONS,
    BULK_HOUSEKEEPING_OPERATIONS,
    parse_fhir_version,
    enum_value,
)

from .requests import (
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
    # Operations
    'TypeOperation',
    'SystemOperation',
    'BulkDataOperation',
    'ExportType',
    'FhirVersion',
    'Operation',
    'ALL_OPERATIONS',
    'RULE_OPERATIONS',
    'BULK_HOUSEKEEPING_OPERATIONS',
    'parse_fhir_version',
    'enum_value',

    # Requests
    'BulkDataAuth',
    'BatchReadWriteRequest',
    'AuthorizationRequest',
    'AuthorizationBundleRequest',
    'AllowedResourceTypesForOperationRequest',
    'ReadResponseAuthorizedRequest',
    'WriteRequestAuthorizedRequest',
    'AccessBulkDataJobRequest',
]
