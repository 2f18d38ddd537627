"""Result models returned by access operations.

Which optional sections of a grant result are populated depends on the
resource kind and the grant options; that projection is decided by the
server. Unknown fields are kept so newer server responses still parse.
"""

from typing import Any, Iterator, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ....config.constants import AccessorType


class AccessSchema(BaseModel):
    """Base schema for access API payloads."""

    model_config = ConfigDict(
        extra="allow",
        populate_by_name=True,
    )


class RecordHistory(AccessSchema):
    created_at: Optional[str] = None
    created_by: Optional[str] = None
    created_by_type: Optional[str] = None
    updated_at: Optional[str] = None
    updated_by: Optional[str] = None
    updated_by_type: Optional[str] = None


class PermissionObject(AccessSchema):
    """A permission record as stored by the server."""

    id: str = Field(..., description="Permission ID")
    active: Optional[bool] = Field(None, description="Whether the permission is in force")
    org: Optional[str] = Field(None, description="Owning organization")
    user: Optional[str] = Field(None, description="Owning user")
    policy: Optional[str] = Field(None, description="Access policy ID")
    tags: List[str] = Field(default_factory=list, description="Permission tags")
    record_history: Optional[RecordHistory] = None


class PermissionResult(AccessSchema):
    """Outcome for one action a granted role expanded to."""

    action: str
    success: bool
    permission: Optional[PermissionObject] = None
    error: Optional[str] = None


class FolderPermissions(AccessSchema):
    """Ancestor folder grants produced by a path-mode grant."""

    folder_id: str
    folder_name: Optional[str] = None
    level: int = Field(0, description="Depth of the folder above the target")
    permissions: List[PermissionResult] = Field(default_factory=list)


class ItemFailure(AccessSchema):
    item_id: str
    action: Optional[str] = None
    error: Optional[str] = None


class PropagationSummary(AccessSchema):
    """Totals for grants fanned out to cascaded or nested items."""

    total: int = 0
    granted: int = 0
    failed: int = 0
    items: List[ItemFailure] = Field(default_factory=list)

    @property
    def has_failures(self) -> bool:
        return self.failed > 0


class GrantResult(AccessSchema):
    """Result of a role-based grant."""

    drive_id: Optional[str] = None
    item_id: Optional[str] = None
    accessor_id: str
    role: str
    permissions: Optional[List[PermissionResult]] = None
    drive_permissions: Optional[List[PermissionResult]] = None
    folder_permissions: Optional[List[FolderPermissions]] = None
    target_permissions: Optional[List[PermissionResult]] = None
    cascaded_items: Optional[PropagationSummary] = None
    nested_items: Optional[PropagationSummary] = None

    def iter_permission_results(self) -> Iterator[PermissionResult]:
        """Yield every per-action outcome across all populated sections."""
        for section in (self.permissions, self.drive_permissions, self.target_permissions):
            if section:
                yield from section
        for folder in self.folder_permissions or []:
            yield from folder.permissions

    @property
    def failed_results(self) -> List[PermissionResult]:
        return [result for result in self.iter_permission_results() if not result.success]


class LegacyGrantResult(AccessSchema):
    """Result of a legacy action-based grant."""

    permission: Any = None
    drive_id: Optional[str] = None
    item_id: Optional[str] = None
    accessor_id: str
    action: str


class RevokeResult(AccessSchema):
    """Result of a revoke-all; zero revoked permissions is a success."""

    drive_id: Optional[str] = None
    item_id: Optional[str] = None
    accessor_id: Optional[str] = None
    revoked_count: int = Field(0, ge=0)


class LegacyRevokeResult(AccessSchema):
    """Result of a legacy per-action revoke."""

    drive_id: Optional[str] = None
    item_id: Optional[str] = None
    accessor_id: Optional[str] = None
    action: Optional[str] = None
    deleted_count: int = Field(0, ge=0)


class AccessorInfo(AccessSchema):
    """One accessor on a resource; accessor types this client does not know stay plain strings."""

    accessor_id: str
    accessor_type: Union[AccessorType, str]
    role: str
    permissions: Optional[List[PermissionObject]] = None

    @field_validator("accessor_type", mode="before")
    @classmethod
    def known_accessor_type(cls, value: Any) -> Any:
        try:
            return AccessorType(value)
        except ValueError:
            return value


class ListResult(AccessSchema):
    """Every accessor with access to a resource; may be empty."""

    drive_id: Optional[str] = None
    item_id: Optional[str] = None
    accessors: List[AccessorInfo] = Field(default_factory=list)

    def by_type(self, accessor_type: AccessorType) -> List[AccessorInfo]:
        return [info for info in self.accessors if info.accessor_type == AccessorType(accessor_type)]
