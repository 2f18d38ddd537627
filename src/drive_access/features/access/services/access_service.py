"""Access control for drives and drive items.

The Access facade binds one resource URI and exposes grant, revoke and list
operations. It is normally obtained from a Drive or DriveItem::

    drive = client.drive("123")
    await drive.access.grant_by_role({"org_user": "orguser123"}, "EDITOR")
    await drive.access.grant_by_role(
        {"org_user": "orguser123"}, "MANAGER", {"cascade_to_items": True}
    )
    result = await drive.access.revoke({"org_user": "orguser123"})
    accessors = (await drive.access.list()).accessors

Roles per resource kind:

- drives and directories: READ_ONLY, VIEWER, CONTRIBUTOR, EDITOR, MANAGER
- files: READ_ONLY, VIEWER, EDITOR, MANAGER (no CONTRIBUTOR, files have no create)
"""

import logging
from typing import Any, Mapping, Optional, Union

from ....config.constants import AccessAction, AccessPaths, AccessRole, ResourceKind
from ....config.settings import DriveAccessSettings, get_settings
from ....transport.httpx_transport import HttpxTransport
from ....transport.protocols import TransportProtocol
from ..entities.accessor import Accessor
from ..entities.requests import (
    ActionGrant,
    GrantOptions,
    GrantRequest,
    RevokeAction,
    RevokeAll,
    RevokeRequest,
    RoleGrant,
)
from ..entities.results import (
    GrantResult,
    LegacyGrantResult,
    LegacyRevokeResult,
    ListResult,
    RevokeResult,
)
from .directory_service import AccessorDirectoryService
from .grant_service import GrantService
from .revocation_service import RevocationService

logger = logging.getLogger(__name__)

AccessorInput = Union[Accessor, Mapping[str, Any]]


class Access:
    """Grant, revoke and list access on one drive or drive item."""

    def __init__(
        self,
        uri: str = "",
        transport: Optional[TransportProtocol] = None,
        resource_kind: Optional[ResourceKind] = None,
        settings: Optional[DriveAccessSettings] = None
    ):
        """Create an access engine for a resource.

        Args:
            uri: URI of the owning resource, e.g. ``/drive/123``; ``/access``
                is appended
            transport: Transport to use; an HttpxTransport is created when omitted
            resource_kind: Kind of the owning resource, enables early role checks
            settings: Client settings; loaded from the environment when omitted
        """
        self._settings = settings or get_settings()
        self._transport = transport or HttpxTransport(self._settings)
        self._uri = f"{uri}{AccessPaths.ACCESS_SUFFIX}"

        bound = dict(
            resource_uri=self._uri,
            transport=self._transport,
            resource_kind=resource_kind,
            settings=self._settings,
        )
        self._grants = GrantService(**bound)
        self._revocations = RevocationService(**bound)
        self._directory = AccessorDirectoryService(**bound)

    @property
    def uri(self) -> str:
        return self._uri

    @property
    def resource_kind(self) -> Optional[ResourceKind]:
        return self._grants.resource_kind

    async def grant_by_role(
        self,
        accessor: AccessorInput,
        role: Union[AccessRole, str],
        options: Union[GrantOptions, Mapping[str, Any], None] = None
    ) -> GrantResult:
        """Grant a role; see GrantService.grant_by_role."""
        return await self._grants.grant_by_role(accessor, role, options)

    async def grant(
        self,
        accessor: AccessorInput,
        action: Union[AccessAction, str]
    ) -> LegacyGrantResult:
        """Grant a single action (deprecated); see GrantService.grant."""
        return await self._grants.grant(accessor, action)

    async def revoke(self, accessor: AccessorInput) -> RevokeResult:
        """Revoke every permission of an accessor."""
        return await self._revocations.revoke(accessor)

    async def revoke_action(
        self,
        accessor: AccessorInput,
        action: Union[AccessAction, str]
    ) -> LegacyRevokeResult:
        """Revoke a single action (deprecated)."""
        return await self._revocations.revoke_action(accessor, action)

    async def list(self) -> ListResult:
        """List every accessor and role on the resource."""
        return await self._directory.list()

    async def submit(
        self,
        request: Union[GrantRequest, RevokeRequest]
    ) -> Union[GrantResult, LegacyGrantResult, RevokeResult, LegacyRevokeResult]:
        """Send a prepared grant or revoke request."""
        if isinstance(request, (RoleGrant, ActionGrant)):
            return await self._grants.submit(request)
        if isinstance(request, (RevokeAll, RevokeAction)):
            return await self._revocations.submit(request)
        raise TypeError(f"Unsupported access request: {type(request).__name__}")

    def __repr__(self) -> str:
        kind = self.resource_kind.value if self.resource_kind else "unknown"
        return f"Access(uri={self._uri!r}, kind={kind})"
