"""
Entry point for the drive-access library.

Holds settings and one shared transport, and hands out drives, drive items
and access engines bound to them.
"""
import logging
from typing import Optional

from .config.constants import ResourceKind
from .config.settings import DriveAccessSettings, get_settings
from .core.exceptions import ConfigurationError
from .features.access.services.access_service import Access
from .features.drives.models import Drive, DriveItem
from .transport.httpx_transport import HttpxTransport
from .transport.protocols import TransportProtocol

logger = logging.getLogger(__name__)


class DriveAccessClient:
    """
    Client for access control on drives and drive items.

    Usage::

        async with DriveAccessClient(DriveAccessSettings(api_key="...")) as client:
            drive = client.drive("123")
            await drive.access.grant_by_role({"user": "u1"}, "EDITOR")
    """

    def __init__(
        self,
        settings: Optional[DriveAccessSettings] = None,
        transport: Optional[TransportProtocol] = None
    ):
        """
        Initialize the client.

        Args:
            settings: Client settings; loaded from the environment when omitted
            transport: Transport to share; an HttpxTransport is created when omitted

        Raises:
            ConfigurationError: If the settings fail validation
        """
        self.settings = settings or get_settings()

        validation = self.settings.validate_config()
        if not validation["valid"]:
            raise ConfigurationError(
                f"Invalid drive-access configuration: {'; '.join(validation['errors'])}",
                details=validation,
            )
        for warning in validation["warnings"]:
            logger.warning(warning)

        self.transport = transport or HttpxTransport(self.settings)
        logger.debug(f"Drive access client initialized for {self.settings.base_url}")

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

    async def close(self) -> None:
        await self.transport.close()

    def drive(self, drive_id: str) -> Drive:
        """Reference a drive by id."""
        return Drive(id=drive_id, transport=self.transport, settings=self.settings)

    def drive_item(self, drive_id: str, item_id: str, item_type: Optional[str] = None) -> DriveItem:
        """Reference a drive item; pass ``item_type`` (FILE/FOLDER) to enable role checks."""
        return self.drive(drive_id).item(item_id, item_type=item_type)

    def access(self, uri: str = "", resource_kind: Optional[ResourceKind] = None) -> Access:
        """Access engine for an arbitrary resource URI."""
        return Access(uri, transport=self.transport, resource_kind=resource_kind, settings=self.settings)
