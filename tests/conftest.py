"""
Shared fixtures for fhirrbac tests.
"""

import jwt
import pytest

from fhirrbac import RBACHandler


TEST_SIGNING_KEY = "fhirrbac-test-signing-key-0123456789abcdef"

FINANCIAL_RESOURCES = [
    'Coverage',
    'CoverageEligibilityRequest',
    'CoverageEligibilityResponse',
    'EnrollmentRequest',
    'EnrollmentResponse',
    'Claim',
    'ClaimResponse',
    'Invoice',
    'PaymentNotice',
    'PaymentReconciliation',
    'Account',
    'ChargeItem',
    'ChargeItemDefinition',
    'Contract',
    'ExplanationOfBenefit',
    'InsurancePlan',
]


def make_token(claims: dict) -> str:
    """Mint an HS256 token; the handler never verifies the signature."""
    return jwt.encode(claims, TEST_SIGNING_KEY, algorithm="HS256")


@pytest.fixture
def rbac_rules():
    """Rule document with practitioner, non-practitioner and auditor groups"""
    return {
        'version': 1.0,
        'groupRules': {
            'practitioner': {
                'operations': ['create', 'read', 'update', 'delete', 'vread', 'search-type', 'transaction'],
                'resources': FINANCIAL_RESOURCES + ['Patient'],
            },
            'non-practitioner': {
                'operations': ['read', 'vread', 'search-type'],
                'resources': FINANCIAL_RESOURCES,
            },
            'auditor': {
                'operations': ['read', 'vread', 'search-type'],
                'resources': ['Patient'],
            },
        },
    }


@pytest.fixture
def handler(rbac_rules):
    return RBACHandler(rbac_rules, '4.0.1')


@pytest.fixture
def practitioner_token():
    return make_token({'sub': 'fake', 'cognito:groups': ['practitioner'], 'name': 'not real'})


@pytest.fixture
def non_pract_and_auditor_token():
    return make_token({'sub': 'fake', 'cognito:groups': ['non-practitioner', 'auditor'], 'name': 'not real'})


@pytest.fixture
def no_groups_token():
    return make_token({'sub': 'fake', 'name': 'not real'})


@pytest.fixture
def token_factory():
    return make_token
