"""Revocation service for drives and drive items."""

import logging
import warnings
from typing import Any, Mapping, Union

from ....config.constants import AccessAction
from ..entities.accessor import Accessor
from ..entities.requests import RevokeAction, RevokeAll, RevokeRequest
from ..entities.results import LegacyRevokeResult, RevokeResult
from ..entities.roles import RoleCatalog
from .accessor_resolver import normalize_accessor
from .base import AccessEndpoint

logger = logging.getLogger(__name__)


class RevocationService(AccessEndpoint):
    """Revokes access on the bound resource."""

    async def revoke(self, accessor: Union[Accessor, Mapping[str, Any]]) -> RevokeResult:
        """Deactivate every permission the accessor holds on the resource.

        Idempotent: an accessor without access yields ``revoked_count == 0``.
        """
        return await self.submit(RevokeAll(accessor=normalize_accessor(accessor)))

    async def revoke_action(
        self,
        accessor: Union[Accessor, Mapping[str, Any]],
        action: Union[AccessAction, str]
    ) -> LegacyRevokeResult:
        """Revoke one action, leaving the accessor's other action grants intact.

        Deprecated: use revoke.
        """
        warnings.warn(
            "Action-based revoke is deprecated; use revoke instead",
            DeprecationWarning,
            stacklevel=2,
        )
        request = RevokeAction(
            accessor=normalize_accessor(accessor),
            action=RoleCatalog.coerce_action(action),
        )
        return await self.submit(request)

    async def submit(self, request: RevokeRequest) -> Union[RevokeResult, LegacyRevokeResult]:
        """Send a prepared revoke request."""
        if isinstance(request, RevokeAll):
            result = await self._send("DELETE", request.to_body(), RevokeResult)
            logger.info(f"Revoked {result.revoked_count} permission(s) on {self.uri} from {request.accessor}")
            return result

        if isinstance(request, RevokeAction):
            result = await self._send("DELETE", request.to_body(), LegacyRevokeResult)
            logger.info(
                f"Revoked action {request.action.value} on {self.uri} from {request.accessor} "
                f"({result.deleted_count} deleted)"
            )
            return result

        raise TypeError(f"Unsupported revoke request: {type(request).__name__}")
