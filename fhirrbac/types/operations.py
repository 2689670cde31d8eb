"""
Operation vocabulary for FHIR role-based access control.
Type-level, system-level and bulk-data lifecycle operations.
"""

from enum import Enum
from typing import Union


class TypeOperation(str, Enum):
    """Operations scoped to a single resource type."""
    CREATE = "create"
    READ = "read"
    VREAD = "vread"
    UPDATE = "update"
    PATCH = "patch"
    DELETE = "delete"
    HISTORY_TYPE = "history-type"
    HISTORY_INSTANCE = "history-instance"
    SEARCH_TYPE = "search-type"

    def __str__(self) -> str:
        return self.value


class SystemOperation(str, Enum):
    """Operations that span the whole server."""
    TRANSACTION = "transaction"
    BATCH = "batch"
    SEARCH_SYSTEM = "search-system"
    HISTORY_SYSTEM = "history-system"

    def __str__(self) -> str:
        return self.value


class BulkDataOperation(str, Enum):
    """Bulk-data job lifecycle pseudo-operations."""
    INITIATE_EXPORT = "initiate-export"
    GET_STATUS_EXPORT = "get-status-export"
    CANCEL_EXPORT = "cancel-export"
    INITIATE_IMPORT = "initiate-import"
    GET_STATUS_IMPORT = "get-status-import"
    CANCEL_IMPORT = "cancel-import"

    def __str__(self) -> str:
        return self.value


class ExportType(str, Enum):
    """Breadth of a bulk export job."""
    SYSTEM = "system"
    PATIENT = "patient"
    GROUP = "group"

    def __str__(self) -> str:
        return self.value


class FhirVersion(str, Enum):
    """Supported FHIR API versions."""
    STU3 = "3.0.1"
    R4 = "4.0.1"

    def __str__(self) -> str:
        return self.value


Operation = Union[TypeOperation, SystemOperation]

# Job status/cancel checks are covered by the job ownership check
BULK_HOUSEKEEPING_OPERATIONS = frozenset(op.value for op in (
    BulkDataOperation.GET_STATUS_EXPORT,
    BulkDataOperation.CANCEL_EXPORT,
    BulkDataOperation.GET_STATUS_IMPORT,
    BulkDataOperation.CANCEL_IMPORT,
))

ALL_OPERATIONS = frozenset(
    [op.value for op in TypeOperation] + [op.value for op in SystemOperation]
)

# Operation names a group rule may list
RULE_OPERATIONS = ALL_OPERATIONS | frozenset(op.value for op in BulkDataOperation)


def parse_fhir_version(value: Union[str, FhirVersion]) -> FhirVersion:
    """Map a raw version string such as '4.0.1' to its enum member."""
    if isinstance(value, FhirVersion):
        return value
    try:
        return FhirVersion(value)
    except ValueError:
        raise ValueError(f"Unsupported FHIR version: {value!r}") from None


def enum_value(value) -> str:
    """Plain string form of an enum member or raw string."""
    return value.value if isinstance(value, Enum) else value
