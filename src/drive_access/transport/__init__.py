"""Transport layer for the access API."""

from .protocols import TransportProtocol
from .httpx_transport import HttpxTransport

__all__ = [
    "TransportProtocol",
    "HttpxTransport",
]
