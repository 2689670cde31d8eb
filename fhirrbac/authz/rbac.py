"""
Role-based access control handler for FHIR servers.
Evaluates a caller's token groups against a static, versioned rule table.
"""

import logging
from typing import Any, Dict, Iterable, Optional, Sequence, Set, Union

from ..auth.claims import (
    DEFAULT_GROUPS_CLAIM_KEY,
    DEFAULT_SUBJECT_CLAIM_KEY,
    ClaimsExtractor,
)
from ..core.config import HandlerSettings, RBACConfig, load_rbac_config
from ..errors import ConfigVersionMismatchError, UnauthorizedError
from ..resources.catalog import base_resources
from ..types.operations import (
    BULK_HOUSEKEEPING_OPERATIONS,
    BulkDataOperation,
    FhirVersion,
    TypeOperation,
    enum_value,
    parse_fhir_version,
)
from ..types.requests import (
    AccessBulkDataJobRequest,
    AllowedResourceTypesForOperationRequest,
    AuthorizationBundleRequest,
    AuthorizationRequest,
    BatchReadWriteRequest,
    BulkDataAuth,
    ReadResponseAuthorizedRequest,
    WriteRequestAuthorizedRequest,
)
from .bulk import matches_export
from .interface import Authorization


logger = logging.getLogger(__name__)

CAPABILITY_STATEMENT_RESOURCE = "metadata"


class RBACHandler(Authorization):
    """
    Group-rule authorization handler.

    The pure decision methods (``is_allowed``, ``is_bulk_data_allowed``,
    ``is_bundle_allowed``, ``allowed_resource_types``,
    ``is_job_access_allowed``) take group lists directly and return booleans
    or sets. The token-level entry points of :class:`Authorization` decode the
    caller's groups first and raise :class:`UnauthorizedError` on denial.

    The rule table is read-only for the handler's lifetime, so one handler
    can serve concurrent callers.
    """

    version: float = 1.0

    def __init__(self, rules: Union[RBACConfig, Dict[str, Any]],
                 fhir_version: Union[FhirVersion, str] = FhirVersion.R4,
                 groups_claim_key: str = DEFAULT_GROUPS_CLAIM_KEY,
                 subject_claim_key: str = DEFAULT_SUBJECT_CLAIM_KEY):
        if not isinstance(rules, RBACConfig):
            rules = RBACConfig.from_dict(rules)
        if rules.version != self.version:
            raise ConfigVersionMismatchError(self.version, rules.version)

        self.rules = rules
        self.fhir_version = parse_fhir_version(fhir_version)
        self.claims = ClaimsExtractor(groups_claim_key, subject_claim_key)

        self._warn_unknown_resources()
        logger.info(
            f"RBAC handler initialized: {len(self.rules.group_rules)} group rules, "
            f"FHIR {self.fhir_version}"
        )

    @classmethod
    def from_settings(cls, settings: HandlerSettings,
                      rules: Optional[RBACConfig] = None) -> 'RBACHandler':
        """Build a handler from settings, loading rules from ``settings.rules_path`` if not given."""
        settings.validate()
        if rules is None:
            if not settings.rules_path:
                raise ValueError("rules_path is required when no rules are given")
            rules = load_rbac_config(settings.rules_path)
        return cls(rules, settings.fhir_version,
                   settings.groups_claim_key, settings.subject_claim_key)

    @classmethod
    def from_file(cls, file_path: str,
                  fhir_version: Union[FhirVersion, str] = FhirVersion.R4,
                  **kwargs) -> 'RBACHandler':
        """Build a handler from a JSON or YAML rule document."""
        return cls(load_rbac_config(file_path), fhir_version, **kwargs)

    def _warn_unknown_resources(self) -> None:
        catalog = base_resources(self.fhir_version)
        for group, rule in self.rules.group_rules.items():
            unknown = rule.resources - catalog
            if unknown:
                logger.warning(
                    f"Group '{group}' grants resource types not in the FHIR {self.fhir_version} "
                    f"catalog: {sorted(unknown)}"
                )

    # Pure decisions

    def is_allowed(self, groups: Iterable[str], operation: Any,
                   resource_type: Optional[str] = None) -> bool:
        """
        Decide a single (operation, resource type) pair.

        Reading the capability statement is always allowed. Otherwise some group
        must have a rule granting the operation and, when a resource type is
        given, covering that type.
        """
        if enum_value(operation) == TypeOperation.READ.value and resource_type == CAPABILITY_STATEMENT_RESOURCE:
            return True

        for group in groups:
            rule = self.rules.rule_for(group)
            if rule is None or not rule.allows_operation(operation):
                continue
            if not resource_type or rule.covers(resource_type):
                return True
        return False

    def is_bulk_data_allowed(self, groups: Iterable[str], bulk_data_auth: BulkDataAuth) -> bool:
        """
        Decide a bulk-data job operation.

        Status and cancel are left to the job ownership check. Import
        initiation is not granted by any rule yet.
        """
        operation = enum_value(bulk_data_auth.operation)
        if operation in BULK_HOUSEKEEPING_OPERATIONS:
            return True
        if operation != BulkDataOperation.INITIATE_EXPORT.value:
            return False

        export_type = bulk_data_auth.export_type
        if not export_type:
            return False

        for group in groups:
            rule = self.rules.rule_for(group)
            if rule is None or not rule.allows_operation(TypeOperation.READ):
                continue
            if matches_export(rule, export_type, self.fhir_version):
                return True
        return False

    def is_bundle_allowed(self, groups: Sequence[str],
                          requests: Iterable[BatchReadWriteRequest]) -> bool:
        """
        Decide a bundle as a whole: every entry must be allowed on its own.

        All entries are evaluated so the number of denied entries can be logged.
        """
        groups = list(groups)
        results = [self.is_allowed(groups, entry.operation, entry.resource_type) for entry in requests]
        denied = results.count(False)
        if denied:
            logger.info(f"Bundle denied: {denied} of {len(results)} entries not permitted")
        return denied == 0

    def allowed_resource_types(self, groups: Iterable[str], operation: Any) -> Set[str]:
        """Union of resource types from every group whose rule grants the operation."""
        allowed: Set[str] = set()
        for group in groups:
            rule = self.rules.rule_for(group)
            if rule is not None and rule.allows_operation(operation):
                allowed.update(rule.resources)
        return allowed

    @staticmethod
    def is_job_access_allowed(job_owner_id: str, requester_user_id: Optional[str]) -> bool:
        """Only the user who started a bulk data job may access it."""
        return requester_user_id == job_owner_id

    # Token-level entry points

    async def is_authorized(self, request: AuthorizationRequest) -> bool:
        groups = self.claims.groups(request.access_token)

        if request.bulk_data_auth:
            allowed = self.is_bulk_data_allowed(groups, request.bulk_data_auth)
        else:
            allowed = self.is_allowed(groups, request.operation, request.resource_type)

        if not allowed:
            target = request.resource_type or "system"
            logger.info(f"Denied {enum_value(request.operation)} on {target}")
            raise UnauthorizedError()
        return True

    async def is_bundle_request_authorized(self, request: AuthorizationBundleRequest) -> bool:
        groups = self.claims.groups(request.access_token)
        if not self.is_bundle_allowed(groups, request.requests):
            raise UnauthorizedError()
        return True

    async def get_allowed_resource_types_for_operation(
            self, request: AllowedResourceTypesForOperationRequest) -> Set[str]:
        groups = self.claims.groups(request.access_token)
        return self.allowed_resource_types(groups, request.operation)

    async def authorize_and_filter_read_response(self, request: ReadResponseAuthorizedRequest) -> Any:
        # Extension point: RBAC needs no per-response filtering
        return request.read_response

    async def is_write_request_authorized(self, request: WriteRequestAuthorizedRequest) -> None:
        # Extension point: write requests are fully decided by is_authorized
        return None

    def is_access_bulk_data_job_allowed(self, request: AccessBulkDataJobRequest) -> bool:
        allowed = self.is_job_access_allowed(request.job_owner_id, request.requester_user_id)
        if not allowed:
            logger.info("Denied bulk data job access: requester is not the job owner")
        return allowed

    def get_requester_user_id(self, access_token: str) -> Optional[str]:
        return self.claims.subject(access_token)
