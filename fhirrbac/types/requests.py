"""
Request records passed to the authorization handler.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from .operations import BulkDataOperation, ExportType, Operation


@dataclass
class BulkDataAuth:
    """Bulk-data job operation and, for exports, the export scope."""
    operation: Union[BulkDataOperation, str]
    export_type: Optional[Union[ExportType, str]] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            'operation': str(self.operation),
            'exportType': str(self.export_type) if self.export_type else None,
        }


@dataclass
class BatchReadWriteRequest:
    """One entry of a batch or transaction bundle."""
    operation: Union[Operation, str]
    resource_type: Optional[str] = None
    id: Optional[str] = None
    resource: Any = None


@dataclass
class AuthorizationRequest:
    """A single request presented with the caller's access token."""
    access_token: str
    operation: Union[Operation, str]
    resource_type: Optional[str] = None
    id: Optional[str] = None
    vid: Optional[str] = None
    bulk_data_auth: Optional[BulkDataAuth] = None


@dataclass
class AuthorizationBundleRequest:
    access_token: str
    requests: List[BatchReadWriteRequest] = field(default_factory=list)


@dataclass
class AllowedResourceTypesForOperationRequest:
    access_token: str
    operation: Union[Operation, str]


@dataclass
class ReadResponseAuthorizedRequest:
    access_token: str
    operation: Union[Operation, str]
    read_response: Any = None


@dataclass
class WriteRequestAuthorizedRequest:
    access_token: str
    operation: Union[Operation, str]
    resource_body: Any = None
    resource_type: Optional[str] = None
    id: Optional[str] = None


@dataclass
class AccessBulkDataJobRequest:
    """Identity pair compared by the bulk job ownership check."""
    job_owner_id: str
    requester_user_id: Optional[str]
