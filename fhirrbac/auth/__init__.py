"""
Package auth decodes already-authenticated bearer tokens into the group
memberships and subject identifier the RBAC handler evaluates.
"""

from .claims import (
    Claims,
    ClaimsExtractor,
    decode_token_payload,
    DEFAULT_GROUPS_CLAIM_KEY,
    DEFAULT_SUBJECT_CLAIM_KEY,
)

__all__ = [
    'Claims',
    'ClaimsExtractor',
    'decode_token_payload',
    'DEFAULT_GROUPS_CLAIM_KEY',
    'DEFAULT_SUBJECT_CLAIM_KEY',
]
