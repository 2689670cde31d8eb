"""
Error types and error codes for the FHIR RBAC handler.

Denials are signalled with a single UnauthorizedError that never carries a
reason; configuration problems are fatal at handler construction.
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(str, Enum):
    """Error codes used across the handler."""
    UNAUTHORIZED = "unauthorized"
    CONFIGURATION_ERROR = "configuration_error"
    CONFIG_VERSION_MISMATCH = "config_version_mismatch"

    def __str__(self) -> str:
        return self.value


UNAUTHORIZED = ErrorCode.UNAUTHORIZED
CONFIGURATION_ERROR = ErrorCode.CONFIGURATION_ERROR
CONFIG_VERSION_MISMATCH = ErrorCode.CONFIG_VERSION_MISMATCH


class RBACError(Exception):
    """Base exception for all RBAC handler errors."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}

    def __str__(self) -> str:
        return f"{self.error_code.value}: {self.message}"


class UnauthorizedError(RBACError):
    """Raised when the caller's groups do not permit the request."""

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message, UNAUTHORIZED)


class RBACConfigError(RBACError):
    """Raised when a rule document is malformed."""

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        config_value: Optional[Any] = None,
        error_code: ErrorCode = CONFIGURATION_ERROR,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, error_code, details)
        self.config_key = config_key
        self.config_value = config_value

        if config_key:
            self.details['config_key'] = config_key
        if config_value is not None:
            self.details['config_value'] = str(config_value)


class ConfigVersionMismatchError(RBACConfigError):
    """Raised when a rule document targets a different handler version."""

    def __init__(self, expected: float, actual: Any):
        super().__init__(
            "Configuration version does not match handler version",
            config_key='version',
            config_value=actual,
            error_code=CONFIG_VERSION_MISMATCH,
            details={'expected_version': expected}
        )
        self.expected = expected
        self.actual = actual


__all__ = [
    'ErrorCode',
    'UNAUTHORIZED',
    'CONFIGURATION_ERROR',
    'CONFIG_VERSION_MISMATCH',
    'RBACError',
    'UnauthorizedError',
    'RBACConfigError',
    'ConfigVersionMismatchError',
]
