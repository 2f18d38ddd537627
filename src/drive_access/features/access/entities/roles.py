"""Role catalog for drive, directory and file access.

Static policy data mirroring the server-side role definitions: which roles
are legal on each resource kind and which actions each role implies. The
server expands roles into actions itself; the catalog lets callers validate
before making a round trip.
"""

from types import MappingProxyType
from typing import FrozenSet, Mapping, Union

from ....config.constants import AccessAction, AccessRole, ResourceKind
from ....core.exceptions import InvalidActionError, InvalidRoleError, RoleNotAllowedError


ROLE_ACTIONS: Mapping[AccessRole, FrozenSet[AccessAction]] = MappingProxyType({
    AccessRole.READ_ONLY: frozenset({AccessAction.READ}),
    AccessRole.VIEWER: frozenset({AccessAction.READ}),
    AccessRole.CONTRIBUTOR: frozenset({
        AccessAction.READ, AccessAction.CREATE, AccessAction.UPDATE,
    }),
    AccessRole.EDITOR: frozenset({
        AccessAction.READ, AccessAction.UPDATE, AccessAction.DELETE,
    }),
    # "*" covers administrative actions such as re-granting access
    AccessRole.MANAGER: frozenset(AccessAction),
})

# CONTRIBUTOR implies create, which has no meaning on a file
LEGAL_ROLES: Mapping[ResourceKind, FrozenSet[AccessRole]] = MappingProxyType({
    ResourceKind.DRIVE: frozenset(AccessRole),
    ResourceKind.DIRECTORY: frozenset(AccessRole),
    ResourceKind.FILE: frozenset(AccessRole) - {AccessRole.CONTRIBUTOR},
})


class RoleCatalog:
    """Lookups and validation over the static role policy."""

    @staticmethod
    def coerce_role(role: Union[AccessRole, str]) -> AccessRole:
        """Convert a role name (any case) to an AccessRole.

        Raises:
            InvalidRoleError: If the name is not a known role
        """
        if isinstance(role, AccessRole):
            return role
        try:
            return AccessRole(str(role).strip().upper())
        except ValueError:
            raise InvalidRoleError(
                f"Unknown role: {role!r}. Expected one of: {[r.value for r in AccessRole]}",
                details={"role": str(role)},
            ) from None

    @staticmethod
    def coerce_action(action: Union[AccessAction, str]) -> AccessAction:
        """Convert a legacy action name to an AccessAction.

        Raises:
            InvalidActionError: If the name is not a known action
        """
        if isinstance(action, AccessAction):
            return action
        try:
            return AccessAction(str(action).strip().lower())
        except ValueError:
            raise InvalidActionError(
                f"Unknown action: {action!r}. Expected one of: {[a.value for a in AccessAction]}",
                details={"action": str(action)},
            ) from None

    @classmethod
    def is_legal(cls, role: Union[AccessRole, str], resource_kind: ResourceKind) -> bool:
        """Check whether a role may be granted on a resource kind."""
        return cls.coerce_role(role) in LEGAL_ROLES[ResourceKind(resource_kind)]

    @classmethod
    def actions_for(cls, role: Union[AccessRole, str]) -> FrozenSet[AccessAction]:
        """Get the action set a role implies."""
        return ROLE_ACTIONS[cls.coerce_role(role)]

    @staticmethod
    def roles_for(resource_kind: ResourceKind) -> FrozenSet[AccessRole]:
        """Get every role legal on a resource kind."""
        return LEGAL_ROLES[ResourceKind(resource_kind)]

    @classmethod
    def validate(cls, role: Union[AccessRole, str], resource_kind: ResourceKind) -> AccessRole:
        """Return the coerced role, or raise if it is illegal for the kind.

        Raises:
            InvalidRoleError: If the name is not a known role
            RoleNotAllowedError: If the role is not legal on the resource kind
        """
        coerced = cls.coerce_role(role)
        kind = ResourceKind(resource_kind)
        if coerced not in LEGAL_ROLES[kind]:
            raise RoleNotAllowedError(coerced.value, kind.value)
        return coerced
