"""Lists who has access to a drive or drive item."""

import logging

from ..entities.results import ListResult
from .base import AccessEndpoint

logger = logging.getLogger(__name__)


class AccessorDirectoryService(AccessEndpoint):
    """Read-only view of the accessors on the bound resource."""

    async def list(self) -> ListResult:
        """List all accessors with their roles; an empty list is a valid result."""
        result = await self._send("GET", result_model=ListResult)
        logger.debug(f"{self.uri} has {len(result.accessors)} accessor(s)")
        return result
