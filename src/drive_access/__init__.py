"""drive-access - access control client for drives and drive items.

Grant and revoke roles (or legacy actions) to users, org users, agents and
OAuth clients on drives, directories and files, and list who has access.
"""

# Initialize logging configuration on import
from .config.logging_config import setup_logging
setup_logging()

from .__version__ import __version__

from .config import (
    DriveAccessSettings,
    get_settings,
    ResourceKind,
    AccessorType,
    AccessRole,
    AccessAction,
    GrantMode,
)

from .core.exceptions import (
    DriveAccessError,
    ApiError,
    TransportError,
    InvalidResponseError,
    ConfigurationError,
    AccessValidationError,
    InvalidRoleError,
    InvalidActionError,
    RoleNotAllowedError,
    UnsavedResourceError,
    normalize_error,
    create_error_response,
)

from .features.access import (
    Access,
    Accessor,
    AccessorBundle,
    Identifiable,
    RoleCatalog,
    GrantOptions,
    RoleGrant,
    ActionGrant,
    RevokeAll,
    RevokeAction,
    GrantResult,
    LegacyGrantResult,
    RevokeResult,
    LegacyRevokeResult,
    AccessorInfo,
    ListResult,
    PermissionResult,
    PermissionObject,
    normalize_accessor,
)

from .features.drives import Drive, DriveItem
from .transport import TransportProtocol, HttpxTransport
from .client import DriveAccessClient

__all__ = [
    "__version__",

    # Client
    "DriveAccessClient",
    "Access",
    "Drive",
    "DriveItem",

    # Configuration
    "DriveAccessSettings",
    "get_settings",
    "ResourceKind",
    "AccessorType",
    "AccessRole",
    "AccessAction",
    "GrantMode",

    # Accessors and roles
    "Accessor",
    "AccessorBundle",
    "Identifiable",
    "normalize_accessor",
    "RoleCatalog",

    # Requests and results
    "GrantOptions",
    "RoleGrant",
    "ActionGrant",
    "RevokeAll",
    "RevokeAction",
    "GrantResult",
    "LegacyGrantResult",
    "RevokeResult",
    "LegacyRevokeResult",
    "AccessorInfo",
    "ListResult",
    "PermissionResult",
    "PermissionObject",

    # Transport
    "TransportProtocol",
    "HttpxTransport",

    # Exceptions
    "DriveAccessError",
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
    "create_error_response",
]
