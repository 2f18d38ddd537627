"""Access services package."""

from .accessor_resolver import normalize_accessor, resolve_identifier
from .base import AccessEndpoint
from .grant_service import GrantService
from .revocation_service import RevocationService
from .directory_service import AccessorDirectoryService
from .access_service import Access

__all__ = [
    "normalize_accessor",
    "resolve_identifier",
    "AccessEndpoint",
    "GrantService",
    "RevocationService",
    "AccessorDirectoryService",
    "Access",
]
