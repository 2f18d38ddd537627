"""Response shape helpers."""

from collections.abc import Mapping
from typing import Any


def unwrap_response(response: Any) -> Any:
    """Return the ``data`` payload of a response, or the response itself.

    Some access endpoints nest their payload under ``data`` and some return
    it bare; both shapes unwrap to the same payload.
    """
    if isinstance(response, Mapping) and response.get("data") is not None:
        return response["data"]
    return response
