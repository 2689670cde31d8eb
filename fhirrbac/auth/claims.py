"""
Claims extraction from bearer tokens.

Tokens reaching this module have already been authenticated upstream, so the
payload is decoded without verifying signature, issuer, audience or expiry.
A token that cannot be decoded yields empty claims instead of an exception;
the caller is then denied by policy.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import jwt

logger = logging.getLogger(__name__)

DEFAULT_GROUPS_CLAIM_KEY = "cognito:groups"
DEFAULT_SUBJECT_CLAIM_KEY = "sub"


@dataclass(frozen=True)
class Claims:
    """Group memberships and subject read from a token payload."""
    groups: List[str] = field(default_factory=list)
    subject: Optional[str] = None


def decode_token_payload(token: Any) -> Dict[str, Any]:
    """
    Decode a JWT payload without verification.

    Returns:
        The claims mapping, or an empty dict when the token is not a decodable JWT
    """
    if not isinstance(token, str) or not token:
        return {}

    try:
        payload = jwt.decode(token, options={"verify_signature": False})
    except jwt.PyJWTError as e:
        logger.debug(f"Could not decode access token: {e}")
        return {}

    if not isinstance(payload, dict):
        return {}
    return payload


class ClaimsExtractor:
    """Reads the group list and subject from a token using configurable claim keys."""

    def __init__(self, groups_claim_key: str = DEFAULT_GROUPS_CLAIM_KEY,
                 subject_claim_key: str = DEFAULT_SUBJECT_CLAIM_KEY):
        self.groups_claim_key = groups_claim_key
        self.subject_claim_key = subject_claim_key

    def extract(self, token: Any) -> Claims:
        """Extract claims; malformed fields resolve to empty groups and no subject."""
        payload = decode_token_payload(token)
        return Claims(
            groups=self._groups_from(payload),
            subject=self._subject_from(payload),
        )

    def groups(self, token: Any) -> List[str]:
        return self.extract(token).groups

    def subject(self, token: Any) -> Optional[str]:
        return self.extract(token).subject

    def _groups_from(self, payload: Dict[str, Any]) -> List[str]:
        raw = payload.get(self.groups_claim_key)
        if raw is None:
            return []
        if not isinstance(raw, list):
            logger.debug(f"Claim {self.groups_claim_key!r} is not a list: {type(raw).__name__}")
            return []
        return [group for group in raw if isinstance(group, str)]

    def _subject_from(self, payload: Dict[str, Any]) -> Optional[str]:
        subject = payload.get(self.subject_claim_key)
        return subject if isinstance(subject, str) else None
