"""Access feature: grant, revoke and list access on drives and drive items."""

from .entities import *  # noqa: F401,F403
from .entities import __all__ as _entities_all
from .services import (
    Access,
    AccessEndpoint,
    AccessorDirectoryService,
    GrantService,
    RevocationService,
    normalize_accessor,
    resolve_identifier,
)

__all__ = list(_entities_all) + [
    "Access",
    "AccessEndpoint",
    "AccessorDirectoryService",
    "GrantService",
    "RevocationService",
    "normalize_accessor",
    "resolve_identifier",
]
