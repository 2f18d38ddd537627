"""Accessor entities for the access feature.

An accessor names who is granted or revoked access: a user, an
organization membership (org user), an agent, or an OAuth client. Each kind
can be given as a bare id or as a model object exposing ``id``.
"""

from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any, Dict, Iterator, Optional, Protocol, Tuple, Union, runtime_checkable

from ....config.constants import AccessorType
from ....core.exceptions import AccessValidationError


@runtime_checkable
class Identifiable(Protocol):
    """Anything carrying an identifier, e.g. User, OrgUser, Agent or Client models."""

    @property
    def id(self) -> Any:
        ...


AccessorValue = Union[str, Identifiable, Mapping]


@dataclass(frozen=True)
class Accessor:
    """Caller-supplied accessor reference.

    Any number of kinds may be populated in one reference; each is resolved
    independently. Unset and empty values are treated as absent.
    """

    user: Optional[AccessorValue] = None
    org_user: Optional[AccessorValue] = None
    agent: Optional[AccessorValue] = None
    client: Optional[AccessorValue] = None

    @classmethod
    def from_mapping(cls, data: Mapping) -> "Accessor":
        """Build an accessor from ``{"user": ..., "org_user": ...}`` style input."""
        known = {accessor_type.value for accessor_type in AccessorType}
        unknown = set(data) - known
        if unknown:
            raise AccessValidationError(
                f"Unknown accessor kind(s): {sorted(unknown)}. Expected any of: {sorted(known)}",
                details={"unknown": sorted(unknown)},
            )
        return cls(**{key: data[key] for key in data})

    def populated(self) -> Iterator[Tuple[AccessorType, AccessorValue]]:
        """Yield (kind, value) for every populated kind in wire order."""
        for accessor_type in AccessorType:
            value = getattr(self, accessor_type.value)
            if value is not None and value != "":
                yield accessor_type, value


@dataclass(frozen=True)
class AccessorBundle:
    """Normalized accessor: every populated kind reduced to a bare string id."""

    user: Optional[str] = None
    org_user: Optional[str] = None
    agent: Optional[str] = None
    client: Optional[str] = None

    def is_empty(self) -> bool:
        return not self.to_payload()

    def to_payload(self) -> Dict[str, str]:
        """Wire form: one key per populated kind, absent kinds omitted."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }

    def __str__(self) -> str:
        return ", ".join(f"{key}={value}" for key, value in self.to_payload().items()) or "<empty>"
