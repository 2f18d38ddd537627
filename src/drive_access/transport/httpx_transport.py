"""
Default transport for the access API built on httpx.

Handles URL building, auth headers, JSON encoding, and converting HTTP and
network failures into drive-access exceptions.
"""
import logging
from typing import Any, Dict, Optional

import httpx

from ..config.constants import ApiDefaults, ErrorDefaults
from ..config.settings import DriveAccessSettings, get_settings
from ..core.exceptions import ApiError, TransportError, normalize_error

logger = logging.getLogger(__name__)


class HttpxTransport:
    """HTTP transport implementation using httpx."""

    def __init__(
        self,
        settings: Optional[DriveAccessSettings] = None,
        client: Optional[httpx.AsyncClient] = None
    ):
        """
        Initialize the transport.

        Args:
            settings: Client settings; loaded from the environment when omitted
            client: Pre-built httpx client, mainly for tests and shared pools
        """
        self.settings = settings or get_settings()
        self._client = client
        self._owns_client = client is None

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create httpx client."""
        if self._client is None:
            max_connections = self.settings.max_connections
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.settings.timeout_seconds),
                limits=httpx.Limits(
                    max_keepalive_connections=max(1, min(20, max_connections // 5)),
                    max_connections=max_connections
                ),
                verify=self.settings.verify_ssl,
            )
            self._owns_client = True
        return self._client

    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": self.settings.authorization_header,
            "Content-Type": ApiDefaults.CONTENT_TYPE,
        }

    def _masked_headers(self) -> Dict[str, str]:
        headers = self._headers()
        headers["Authorization"] = f"{ApiDefaults.TOKEN_PREFIX} ***"
        return headers

    async def request(
        self,
        method: str,
        path: str,
        body: Optional[Dict[str, Any]] = None
    ) -> Any:
        """Send one request and return the parsed response body.

        Args:
            method: HTTP verb
            path: Path relative to the versioned base URL
            body: JSON body, ignored for GET

        Returns:
            Parsed JSON (or text for non-JSON bodies), ``None`` on 204

        Raises:
            ApiError: Non-2xx status or a body carrying an ``error`` field
            TransportError: The request could not be delivered
        """
        method = method.upper()
        url = f"{self.settings.base_url}{path}"
        payload = body if method != "GET" else None

        if self.settings.verbose:
            logger.debug(f"HTTP Request: {method} {url}")
            logger.debug(f"Request Headers: {self._masked_headers()}")
            if payload is not None:
                logger.debug(f"Request Body: {payload}")

        try:
            response = await self._get_client().request(
                method, url, json=payload, headers=self._headers()
            )
        except httpx.RequestError as e:
            logger.error(f"Request Error: {method} {path}: {e!r}")
            raise TransportError(
                str(e) or e.__class__.__name__,
                details={"method": method, "path": path},
            ) from e

        if self.settings.verbose:
            logger.debug(f"HTTP Response: {response.status_code} {method} {path}")

        if response.status_code == 204:
            return None

        if not response.is_success:
            raise self._status_error(response, method, path)

        data = self._parse_body(response)

        if isinstance(data, dict):
            if data.get("error"):
                raise normalize_error(data["error"])
            data.pop("error", None)
            data.pop("meta", None)

        if self.settings.verbose:
            logger.debug(f"Response Data: {data}")

        return data

    @staticmethod
    def _parse_body(response: httpx.Response) -> Any:
        content_type = response.headers.get("content-type", "")
        if "application/json" in content_type:
            return response.json()
        return response.text

    @staticmethod
    def _status_error(response: httpx.Response, method: str, path: str) -> ApiError:
        try:
            error_data = response.json()
        except ValueError:
            error_data = {"message": response.reason_phrase}

        if not isinstance(error_data, dict):
            error_data = {"message": response.reason_phrase, "body": error_data}

        message = error_data.get("message") or response.reason_phrase or ErrorDefaults.UNKNOWN_ERROR
        logger.warning(f"HTTP Error: {response.status_code} {method} {path}: {message}")

        return ApiError(
            message,
            status=response.status_code,
            code=error_data.get("code"),
            details=error_data,
        )

    async def get(self, path: str) -> Any:
        """Perform GET request."""
        return await self.request("GET", path)

    async def post(self, path: str, body: Optional[Dict[str, Any]] = None) -> Any:
        """Perform POST request."""
        return await self.request("POST", path, body)

    async def delete(self, path: str, body: Optional[Dict[str, Any]] = None) -> Any:
        """Perform DELETE request."""
        return await self.request("DELETE", path, body)

    async def close(self) -> None:
        """Close the client if this transport created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None
