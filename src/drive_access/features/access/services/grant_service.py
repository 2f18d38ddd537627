"""Grant service for drives and drive items.

Issues role-based grants (with optional cascade, path or recursive
propagation) and legacy action-based grants. One POST per grant; any
fan-out to sub-resources happens server-side.
"""

import logging
import warnings
from typing import Any, Mapping, Union

from ....config.constants import AccessAction, AccessRole
from ..entities.accessor import Accessor
from ..entities.requests import ActionGrant, GrantOptions, GrantRequest, RoleGrant
from ..entities.results import GrantResult, LegacyGrantResult
from ..entities.roles import RoleCatalog
from .accessor_resolver import normalize_accessor
from .base import AccessEndpoint

logger = logging.getLogger(__name__)

AccessorInput = Union[Accessor, Mapping[str, Any]]


class GrantService(AccessEndpoint):
    """Grants access on the bound resource."""

    async def grant_by_role(
        self,
        accessor: AccessorInput,
        role: Union[AccessRole, str],
        options: Union[GrantOptions, Mapping[str, Any], None] = None
    ) -> GrantResult:
        """Grant a role to an accessor.

        Args:
            accessor: Who receives the role (id strings or model objects)
            role: Role name; CONTRIBUTOR is not legal on files
            options: Cascade (drives) or path/recursive (items) options

        Returns:
            The grant result as projected by the server

        Raises:
            InvalidRoleError: Unknown role name
            RoleNotAllowedError: Role illegal for the bound resource kind
            DriveAccessError: Normalized transport or API failure
        """
        request = RoleGrant(
            accessor=normalize_accessor(accessor),
            role=self._check_role(role),
            options=GrantOptions.coerce(options),
        )
        return await self.submit(request)

    async def grant(
        self,
        accessor: AccessorInput,
        action: Union[AccessAction, str]
    ) -> LegacyGrantResult:
        """Grant a single action to an accessor.

        Deprecated: use grant_by_role.
        """
        warnings.warn(
            "Action-based grant is deprecated; use grant_by_role instead",
            DeprecationWarning,
            stacklevel=2,
        )
        request = ActionGrant(
            accessor=normalize_accessor(accessor),
            action=RoleCatalog.coerce_action(action),
        )
        return await self.submit(request)

    async def submit(self, request: GrantRequest) -> Union[GrantResult, LegacyGrantResult]:
        """Send a prepared grant request."""
        if isinstance(request, RoleGrant):
            logger.info(f"Granting {request.role.value} on {self.uri} to {request.accessor}")
            result = await self._send("POST", request.to_body(), GrantResult)
            failed = result.failed_results
            if failed:
                logger.warning(f"Grant on {self.uri} reported {len(failed)} failed action(s)")
            return result

        if isinstance(request, ActionGrant):
            logger.info(f"Granting action {request.action.value} on {self.uri} to {request.accessor}")
            return await self._send("POST", request.to_body(), LegacyGrantResult)

        raise TypeError(f"Unsupported grant request: {type(request).__name__}")
