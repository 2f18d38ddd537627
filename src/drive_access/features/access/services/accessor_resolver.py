"""Accessor normalization.

Reduces every populated accessor kind to a bare string id. Pure: no I/O,
no caching, no validation beyond shape.
"""

import logging
from collections.abc import Mapping
from typing import Any, Optional, Union

from ..entities.accessor import Accessor, AccessorBundle, AccessorValue

logger = logging.getLogger(__name__)


def resolve_identifier(value: AccessorValue) -> Optional[str]:
    """Resolve one accessor value to its id.

    Strings are ids already. Mappings and model objects contribute their
    ``id``; values without an ``id`` (e.g. a UUID) are the id themselves.
    """
    if isinstance(value, str):
        return value

    if isinstance(value, Mapping):
        identifier = value.get("id")
    elif hasattr(value, "id"):
        identifier = getattr(value, "id")
    else:
        identifier = value

    if identifier is None or identifier == "":
        return None
    return str(identifier)


def normalize_accessor(accessor: Union[Accessor, Mapping[str, Any]]) -> AccessorBundle:
    """Normalize an accessor into an AccessorBundle.

    Args:
        accessor: Accessor instance or ``{"user": ..., "agent": ...}`` mapping

    Returns:
        Bundle with one id per populated kind; empty when nothing is populated
    """
    if not isinstance(accessor, Accessor):
        accessor = Accessor.from_mapping(accessor)

    resolved = {}
    for accessor_type, value in accessor.populated():
        identifier = resolve_identifier(value)
        if identifier is None:
            logger.warning(f"Ignoring {accessor_type.value} accessor without an id")
            continue
        resolved[accessor_type.value] = identifier

    return AccessorBundle(**resolved)

