"""
Authorization capability interface implemented by RBAC handlers.
Host systems call the handler only through these methods.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional, Set

from ..types.requests import (
    AccessBulkDataJobRequest,
    AllowedResourceTypesForOperationRequest,
    AuthorizationBundleRequest,
    AuthorizationRequest,
    ReadResponseAuthorizedRequest,
    WriteRequestAuthorizedRequest,
)


class Authorization(ABC):
    """
    Base class for authorization handlers.
    """

    @abstractmethod
    async def is_authorized(self, request: AuthorizationRequest) -> bool:
        """
        Decide a single request.

        Args:
            request: Token, operation, optional resource type and optional bulk data auth

        Returns:
            True when allowed

        Raises:
            UnauthorizedError: When the caller's groups do not permit the request
        """
        pass

    @abstractmethod
    async def is_bundle_request_authorized(self, request: AuthorizationBundleRequest) -> bool:
        """
        Decide a batch or transaction bundle as a whole.

        Raises:
            UnauthorizedError: When any entry is not permitted
        """
        pass

    @abstractmethod
    async def get_allowed_resource_types_for_operation(
            self, request: AllowedResourceTypesForOperationRequest) -> Set[str]:
        """Resource types the caller's groups permit for an operation."""
        pass

    @abstractmethod
    async def authorize_and_filter_read_response(self, request: ReadResponseAuthorizedRequest) -> Any:
        """Authorize and filter a read or search response before it is returned."""
        pass

    @abstractmethod
    async def is_write_request_authorized(self, request: WriteRequestAuthorizedRequest) -> None:
        """Authorize a write request against its resource body."""
        pass

    @abstractmethod
    def is_access_bulk_data_job_allowed(self, request: AccessBulkDataJobRequest) -> bool:
        """Decide whether the requester may access a bulk data job."""
        pass

    @abstractmethod
    def get_requester_user_id(self, access_token: str) -> Optional[str]:
        """Subject identifier of the token holder."""
        pass
