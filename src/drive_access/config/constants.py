"""Constants and enums for drive-access.

This module defines the constants, enums, and default configuration values
used throughout the drive-access library. The enum values correspond to the
strings the access API accepts and returns on the wire.
"""

from enum import Enum
from typing import Final


class ApiDefaults:
    """Default API connection values."""

    BASE_URL: Final[str] = "https://api.mosaia.ai"
    VERSION: Final[str] = "1"
    CONTENT_TYPE: Final[str] = "application/json"
    TOKEN_PREFIX: Final[str] = "Bearer"
    TIMEOUT_SECONDS: Final[float] = 30.0
    MAX_CONNECTIONS: Final[int] = 100


class ErrorDefaults:
    """Default error values."""

    UNKNOWN_ERROR: Final[str] = "Unknown error occurred"
    UNKNOWN_ERROR_CODE: Final[str] = "UNKNOWN_ERROR"


class AccessPaths:
    """URI fragments for access endpoints."""

    ACCESS_SUFFIX: Final[str] = "/access"
    DRIVE: Final[str] = "/drive"
    ITEM: Final[str] = "/item"


class ResourceKind(str, Enum):
    """Kinds of resource an access engine can be bound to."""

    DRIVE = "drive"
    DIRECTORY = "directory"
    FILE = "file"


class AccessorType(str, Enum):
    """Accessor kinds - keys of the accessor object on the wire."""

    USER = "user"
    ORG_USER = "org_user"
    AGENT = "agent"
    CLIENT = "client"


class AccessRole(str, Enum):
    """Roles for role-based access control."""

    READ_ONLY = "READ_ONLY"
    VIEWER = "VIEWER"
    CONTRIBUTOR = "CONTRIBUTOR"
    EDITOR = "EDITOR"
    MANAGER = "MANAGER"


class AccessAction(str, Enum):
    """Actions for the legacy action-based access model."""

    CREATE = "create"
    READ = "read"
    UPDATE = "update"
    DELETE = "delete"
    ALL = "*"


class GrantMode(str, Enum):
    """Propagation modes for item grants."""

    PATH = "path"          # Grant ancestor folders so the target is reachable
    RECURSIVE = "recursive"  # Grant the role down into descendants


class DriveItemType(str, Enum):
    """Item types reported by the drive item API."""

    FILE = "FILE"
    FOLDER = "FOLDER"
    SYMLINK = "SYMLINK"
