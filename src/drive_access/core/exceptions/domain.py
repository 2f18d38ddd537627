"""Domain and infrastructure exceptions for drive-access.

Remote rejections, transport failures, configuration problems and the
client-side checks run before a request is sent.
"""

from typing import Any, Dict, Optional

from .base import DriveAccessError


# Remote API Errors
class ApiError(DriveAccessError):
    """Raised when the access API rejects a request.

    The message is the server-provided message, surfaced verbatim.
    """

    def __init__(
        self,
        message: str,
        status: Optional[int] = None,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, error_code=code, details=details)
        self.status = status

    def __str__(self) -> str:
        if self.status is not None:
            return f"[{self.status}] {self.message}"
        return self.message


class TransportError(DriveAccessError):
    """Raised when a request cannot be delivered (network failure, timeout)."""
    pass


class InvalidResponseError(DriveAccessError):
    """Raised when a successful response does not match the expected result shape."""
    pass


# Configuration Errors
class ConfigurationError(DriveAccessError):
    """Raised when client configuration is missing or invalid."""
    pass


# Client-side Validation Errors
class AccessValidationError(DriveAccessError, ValueError):
    """Base class for errors raised before any request is sent."""
    pass


class InvalidRoleError(AccessValidationError):
    """Raised when a role name is not one of the known roles."""
    pass


class InvalidActionError(AccessValidationError):
    """Raised when a legacy action name is not one of the known actions."""
    pass


class RoleNotAllowedError(AccessValidationError):
    """Raised when a role is not legal for the target resource kind."""

    def __init__(self, role: str, resource_kind: str):
        super().__init__(
            f"Role {role} is not allowed on a {resource_kind}",
            details={"role": role, "resource_kind": resource_kind},
        )
        self.role = role
        self.resource_kind = resource_kind


# Resource Errors
class UnsavedResourceError(DriveAccessError):
    """Raised when an unsaved drive or item is asked for its access engine."""
    pass
