"""Exceptions module for drive-access.

This module provides the complete exception hierarchy and the error
normalizer every access operation reports failures through.
"""

from .base import DriveAccessError, create_error_response

from .domain import (
    # Remote API Errors
    ApiError,
    TransportError,
    InvalidResponseError,

    # Configuration Errors
    ConfigurationError,

    # Validation Errors
    AccessValidationError,
    InvalidRoleError,
    InvalidActionError,
    RoleNotAllowedError,

    # Resource Errors
    UnsavedResourceError,
)

from .normalizer import normalize_error

__all__ = [
    "DriveAccessError",
    "create_error_response",
    "ApiError",
    "TransportError",
    "InvalidResponseError",
    "ConfigurationError",
    "AccessValidationError",
    "InvalidRoleError",
    "InvalidActionError",
    "RoleNotAllowedError",
    "UnsavedResourceError",
    "normalize_error",
]
