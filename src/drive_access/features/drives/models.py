"""Drive and drive item resources.

These are the owners an access engine is bound to. They only carry what the
access layer needs: identity, URI and, for items, whether the item is a
file or a directory.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from ...config.constants import AccessPaths, DriveItemType, ResourceKind
from ...config.settings import DriveAccessSettings
from ...core.exceptions import UnsavedResourceError
from ...transport.protocols import TransportProtocol
from ..access.services.access_service import Access


@dataclass
class Drive:
    """A top-level storage container."""

    id: Optional[str]
    transport: TransportProtocol = field(repr=False)
    settings: Optional[DriveAccessSettings] = field(default=None, repr=False)
    name: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_payload(
        cls,
        payload: Mapping[str, Any],
        transport: TransportProtocol,
        settings: Optional[DriveAccessSettings] = None
    ) -> "Drive":
        """Build a drive from an API payload."""
        data = dict(payload)
        return cls(
            id=data.pop("id", None),
            transport=transport,
            settings=settings,
            name=data.pop("name", None),
            metadata=data,
        )

    @property
    def uri(self) -> str:
        if not self.id:
            raise UnsavedResourceError("Cannot build a URI for an unsaved drive")
        return f"{AccessPaths.DRIVE}/{self.id}"

    @property
    def access(self) -> Access:
        """Access engine bound to this drive."""
        if not self.id:
            raise UnsavedResourceError("Cannot access permissions for unsaved drive")
        return Access(
            self.uri,
            transport=self.transport,
            resource_kind=ResourceKind.DRIVE,
            settings=self.settings,
        )

    def item(self, item_id: str, item_type: Optional[str] = None) -> "DriveItem":
        """Reference an item inside this drive."""
        return DriveItem(
            id=item_id,
            drive_id=self.id,
            transport=self.transport,
            settings=self.settings,
            item_type=item_type,
        )


@dataclass
class DriveItem:
    """A file or directory within a drive."""

    id: Optional[str]
    drive_id: Optional[str]
    transport: TransportProtocol = field(repr=False)
    settings: Optional[DriveAccessSettings] = field(default=None, repr=False)
    name: Optional[str] = None
    path: Optional[str] = None
    item_type: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_payload(
        cls,
        payload: Mapping[str, Any],
        transport: TransportProtocol,
        settings: Optional[DriveAccessSettings] = None
    ) -> "DriveItem":
        """Build an item from an API payload; ``drive`` holds the drive id."""
        data = dict(payload)
        return cls(
            id=data.pop("id", None),
            drive_id=data.pop("drive", None),
            transport=transport,
            settings=settings,
            name=data.pop("name", None),
            path=data.pop("path", None),
            item_type=data.pop("item_type", None),
            metadata=data,
        )

    @property
    def resource_kind(self) -> Optional[ResourceKind]:
        """FILE or DIRECTORY when the item type is known, otherwise None."""
        if not self.item_type:
            return None
        item_type = self.item_type.upper()
        if item_type == DriveItemType.FILE.value:
            return ResourceKind.FILE
        if item_type == DriveItemType.FOLDER.value:
            return ResourceKind.DIRECTORY
        return None

    @property
    def uri(self) -> str:
        if not self.drive_id:
            raise UnsavedResourceError("Cannot build a URI for a drive item without a drive")
        if not self.id:
            raise UnsavedResourceError("Cannot build a URI for an unsaved drive item")
        return f"{AccessPaths.DRIVE}/{self.drive_id}{AccessPaths.ITEM}/{self.id}"

    @property
    def access(self) -> Access:
        """Access engine bound to this item."""
        if not self.id:
            raise UnsavedResourceError("Cannot access permissions for unsaved drive item")
        return Access(
            self.uri,
            transport=self.transport,
            resource_kind=self.resource_kind,
            settings=self.settings,
        )
