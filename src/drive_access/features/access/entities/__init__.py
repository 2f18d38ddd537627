"""Access entities package.

Accessor references, the role catalog, request variants and result models.
"""

from .accessor import Accessor, AccessorBundle, AccessorValue, Identifiable
from .roles import RoleCatalog, ROLE_ACTIONS, LEGAL_ROLES
from .requests import (
    GrantOptions,
    RoleGrant,
    ActionGrant,
    RevokeAll,
    RevokeAction,
    GrantRequest,
    RevokeRequest,
)
from .results import (
    PermissionObject,
    PermissionResult,
    FolderPermissions,
    ItemFailure,
    PropagationSummary,
    GrantResult,
    LegacyGrantResult,
    RevokeResult,
    LegacyRevokeResult,
    AccessorInfo,
    ListResult,
)

__all__ = [
    # Accessors
    "Accessor",
    "AccessorBundle",
    "AccessorValue",
    "Identifiable",

    # Roles
    "RoleCatalog",
    "ROLE_ACTIONS",
    "LEGAL_ROLES",

    # Requests
    "GrantOptions",
    "RoleGrant",
    "ActionGrant",
    "RevokeAll",
    "RevokeAction",
    "GrantRequest",
    "RevokeRequest",

    # Results
    "PermissionObject",
    "PermissionResult",
    "FolderPermissions",
    "ItemFailure",
    "PropagationSummary",
    "GrantResult",
    "LegacyGrantResult",
    "RevokeResult",
    "LegacyRevokeResult",
    "AccessorInfo",
    "ListResult",
]
