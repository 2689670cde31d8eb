"""
Basic fhirrbac usage example.

This example demonstrates the fundamental handler operations:
- Building a handler from a rule document
- Deciding single requests and bundles
- Bulk export authorization
- Allowed resource types for an operation
"""

import asyncio

import jwt

from fhirrbac import (
    AllowedResourceTypesForOperationRequest,
    AuthorizationBundleRequest,
    AuthorizationRequest,
    BatchReadWriteRequest,
    BulkDataAuth,
    RBACHandler,
    UnauthorizedError,
)
from fhirrbac.resources import R4_PATIENT_COMPARTMENT_RESOURCES


RULES = {
    'version': 1.0,
    'groupRules': {
        'practitioner': {
            'operations': ['create', 'read', 'update', 'delete', 'vread', 'search-type', 'transaction'],
            'resources': list(R4_PATIENT_COMPARTMENT_RESOURCES) + ['Practitioner'],
        },
        'auditor': {
            'operations': ['read', 'vread', 'search-type'],
            'resources': ['Patient', 'AuditEvent'],
        },
    },
}


async def basic_example():
    """Demonstrate basic handler usage"""
    print("Basic fhirrbac Example")
    print("=" * 30)

    # 1. Create handler
    handler = RBACHandler(RULES, '4.0.1')
    print("✓ Created RBAC handler")

    # 2. A token issued upstream; the handler only reads its claims
    token = jwt.encode(
        {'sub': 'user-1', 'cognito:groups': ['auditor']},
        'example-signing-key-not-for-production-use',
        algorithm='HS256',
    )

    # 3. Single requests
    await handler.is_authorized(AuthorizationRequest(access_token=token, operation='read',
                                                     resource_type='Patient'))
    print("✓ auditor may read Patient")

    try:
        await handler.is_authorized(AuthorizationRequest(access_token=token, operation='delete',
                                                         resource_type='Patient'))
    except UnauthorizedError:
        print("✓ auditor may not delete Patient")

    # 4. Bundle
    bundle = AuthorizationBundleRequest(access_token=token, requests=[
        BatchReadWriteRequest(operation='read', resource_type='Patient', id='1'),
        BatchReadWriteRequest(operation='read', resource_type='AuditEvent', id='2'),
    ])
    await handler.is_bundle_request_authorized(bundle)
    print("✓ read-only bundle allowed")

    # 5. Bulk export
    export = AuthorizationRequest(
        access_token=token,
        operation='read',
        bulk_data_auth=BulkDataAuth(operation='initiate-export', export_type='patient'),
    )
    try:
        await handler.is_authorized(export)
    except UnauthorizedError:
        print("✓ auditor may not export the patient compartment")

    allowed = handler.is_bulk_data_allowed(['practitioner'], export.bulk_data_auth)
    print(f"✓ practitioner patient export allowed: {allowed}")

    # 6. Allowed resource types
    types = await handler.get_allowed_resource_types_for_operation(
        AllowedResourceTypesForOperationRequest(access_token=token, operation='search-type')
    )
    print(f"✓ auditor can search: {', '.join(sorted(types))}")

    # 7. Job ownership
    requester = handler.get_requester_user_id(token)
    print(f"✓ requester {requester} owns job: {handler.is_job_access_allowed('user-1', requester)}")


if __name__ == "__main__":
    asyncio.run(basic_example())
