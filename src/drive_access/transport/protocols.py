"""Protocol for the HTTP transport consumed by the access engine."""

from typing import Any, Dict, Optional, Protocol, runtime_checkable


@runtime_checkable
class TransportProtocol(Protocol):
    """Protocol for transport implementations.

    Paths are relative to the versioned API base URL. Each call returns the
    parsed response body (``{"data": ...}`` or the bare payload), ``None``
    for an empty response, and raises on any failure.
    """

    async def get(self, path: str) -> Any:
        """Perform GET request."""
        ...

    async def post(self, path: str, body: Optional[Dict[str, Any]] = None) -> Any:
        """Perform POST request with an optional JSON body."""
        ...

    async def delete(self, path: str, body: Optional[Dict[str, Any]] = None) -> Any:
        """Perform DELETE request with an optional JSON body."""
        ...

    async def close(self) -> None:
        """Release underlying connections."""
        ...
