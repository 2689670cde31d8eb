"""
fhirrbac-check - evaluate one request against a rule document.

Exit codes: 0 allowed, 1 denied, 2 configuration error.
"""

import argparse
import asyncio
import logging
import sys
from dataclasses import replace
from typing import List, Optional

import yaml

from fhirrbac.authz.rbac import RBACHandler
from fhirrbac.core.config import HandlerSettings
from fhirrbac.errors import RBACConfigError, UnauthorizedError
from fhirrbac.types.requests import (
    AllowedResourceTypesForOperationRequest,
    AuthorizationRequest,
    BulkDataAuth,
)
from fhirrbac.util.config import get_config_value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fhirrbac-check",
        description="Evaluate a FHIR request against an RBAC rule document",
    )
    parser.add_argument("--rules", help="JSON or YAML rule document (default: $FHIRRBAC_RULES_PATH)")
    parser.add_argument("--token", required=True, help="Bearer token of the caller")
    parser.add_argument("--operation", required=True, help="Operation, e.g. read or search-type")
    parser.add_argument("--resource-type", help="Resource type, e.g. Patient")
    parser.add_argument("--bulk-operation", help="Bulk data operation, e.g. initiate-export")
    parser.add_argument("--export-type", choices=["system", "patient", "group"],
                        help="Export scope for initiate-export")
    parser.add_argument("--fhir-version", help="FHIR version (default: $FHIRRBAC_FHIR_VERSION or 4.0.1)")
    parser.add_argument("--log-level", default=get_config_value("log_level", "WARNING"),
                        help="Logging level")
    return parser


async def run(args: argparse.Namespace) -> int:
    try:
        settings = HandlerSettings.from_env()
        settings = replace(
            settings,
            rules_path=args.rules or settings.rules_path,
            fhir_version=args.fhir_version or settings.fhir_version,
        )
        handler = RBACHandler.from_settings(settings)
    except (RBACConfigError, ValueError, OSError, yaml.YAMLError) as e:
        print(f"✗ Could not load rules: {e}", file=sys.stderr)
        return 2

    bulk_data_auth = None
    if args.bulk_operation:
        bulk_data_auth = BulkDataAuth(operation=args.bulk_operation, export_type=args.export_type)

    request = AuthorizationRequest(
        access_token=args.token,
        operation=args.operation,
        resource_type=args.resource_type,
        bulk_data_auth=bulk_data_auth,
    )

    allowed_types = await handler.get_allowed_resource_types_for_operation(
        AllowedResourceTypesForOperationRequest(access_token=args.token, operation=args.operation)
    )

    try:
        await handler.is_authorized(request)
    except UnauthorizedError:
        print("DENY")
        exit_code = 1
    else:
        print("ALLOW")
        exit_code = 0

    print(f"  - Subject: {handler.get_requester_user_id(args.token) or '-'}")
    print(f"  - Groups: {', '.join(handler.claims.groups(args.token)) or '-'}")
    print(f"  - Resource types allowed for {args.operation}: {', '.join(sorted(allowed_types)) or '-'}")
    return exit_code


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    return asyncio.run(run(args))


if __name__ == "__main__":
    sys.exit(main())
