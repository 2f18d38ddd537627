"""Request entities for grant and revoke operations.

Role-based and legacy action-based calls are separate request types so the
two models can never be mixed in one call.
"""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ....config.constants import AccessAction, AccessRole, GrantMode
from ....core.exceptions import AccessValidationError, InvalidRoleError
from .accessor import AccessorBundle

_ROLE_FIELDS = {"folder_role", "item_role"}


class GrantOptions(BaseModel):
    """Options controlling how the server propagates a role grant.

    ``cascade_to_items``/``cascade_to_folders`` apply to drives, ``mode`` and
    the role overrides apply to items. Combinations are not checked here;
    the server reports whatever it rejects.
    """

    model_config = ConfigDict(extra="allow", use_enum_values=True)

    cascade_to_items: Optional[bool] = Field(None, description="Grant on every existing item in the drive")
    cascade_to_folders: Optional[bool] = Field(None, description="Grant on existing folders only")
    mode: Optional[GrantMode] = Field(None, description="'path' or 'recursive' propagation for items")
    folder_role: Optional[AccessRole] = Field(None, description="Role for ancestor folders in path mode")
    item_role: Optional[AccessRole] = Field(None, description="Role for descendants in recursive mode")

    @field_validator("folder_role", "item_role", mode="before")
    @classmethod
    def uppercase_role(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @field_validator("mode", mode="before")
    @classmethod
    def lowercase_mode(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @classmethod
    def coerce(cls, options: Union["GrantOptions", Mapping[str, Any], None]) -> Optional["GrantOptions"]:
        """Build options from a mapping.

        Raises:
            InvalidRoleError: ``folder_role`` or ``item_role`` is not a known role
            AccessValidationError: Any other option has an invalid value
        """
        if options is None or isinstance(options, GrantOptions):
            return options
        try:
            return cls.model_validate(dict(options))
        except ValidationError as e:
            errors = e.errors(include_url=False, include_context=False)
            fields = sorted({str(error["loc"][0]) for error in errors if error["loc"]})
            error_class = InvalidRoleError if fields and set(fields) <= _ROLE_FIELDS else AccessValidationError
            raise error_class(
                f"Invalid grant options: {', '.join(fields) or 'options'}",
                details={"errors": errors},
            ) from e

    def to_payload(self) -> Dict[str, Any]:
        """Wire form with unset options left out."""
        return self.model_dump(mode="json", exclude_none=True)


@dataclass(frozen=True)
class RoleGrant:
    """Grant a role, optionally propagated per ``options``."""

    accessor: AccessorBundle
    role: AccessRole
    options: Optional[GrantOptions] = None

    def to_body(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {
            "accessor": self.accessor.to_payload(),
            "role": self.role.value.upper(),
        }
        if self.options is not None:
            body["options"] = self.options.to_payload()
        return body


@dataclass(frozen=True)
class ActionGrant:
    """Legacy grant of a single action."""

    accessor: AccessorBundle
    action: AccessAction

    def to_body(self) -> Dict[str, Any]:
        return {"accessor": self.accessor.to_payload(), "action": self.action.value}


@dataclass(frozen=True)
class RevokeAll:
    """Deactivate every permission the accessor holds on the resource."""

    accessor: AccessorBundle

    def to_body(self) -> Dict[str, Any]:
        return {"accessor": self.accessor.to_payload()}


@dataclass(frozen=True)
class RevokeAction:
    """Legacy revoke of a single action, leaving other action grants intact."""

    accessor: AccessorBundle
    action: AccessAction

    def to_body(self) -> Dict[str, Any]:
        return {"accessor": self.accessor.to_payload(), "action": self.action.value}


GrantRequest = Union[RoleGrant, ActionGrant]
RevokeRequest = Union[RevokeAll, RevokeAction]
