"""Shared plumbing for access services.

Every access operation issues exactly one request against the bound
``.../access`` URI, unwraps the response, and reports failures through the
error normalizer.
"""

import logging
from typing import Any, Dict, Optional, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from ....config.constants import AccessRole, ResourceKind
from ....config.settings import DriveAccessSettings, get_settings
from ....core.exceptions import InvalidResponseError, normalize_error
from ....transport.protocols import TransportProtocol
from ....utils.responses import unwrap_response
from ..entities.roles import RoleCatalog

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class AccessEndpoint:
    """Base class binding a service to one access URI and one transport.

    The URI is fixed at construction; instances hold no other state and are
    safe to reuse for any number of calls.
    """

    def __init__(
        self,
        resource_uri: str,
        transport: TransportProtocol,
        resource_kind: Optional[ResourceKind] = None,
        settings: Optional[DriveAccessSettings] = None
    ):
        """Initialize the endpoint.

        Args:
            resource_uri: Full access URI, e.g. ``/drive/123/access``
            transport: Transport issuing the requests
            resource_kind: Kind of the bound resource when known
            settings: Client settings; loaded from the environment when omitted
        """
        self._resource_uri = resource_uri
        self._transport = transport
        self._resource_kind = ResourceKind(resource_kind) if resource_kind else None
        self._settings = settings or get_settings()

    @property
    def uri(self) -> str:
        return self._resource_uri

    @property
    def resource_kind(self) -> Optional[ResourceKind]:
        return self._resource_kind

    def _check_role(self, role: Union[AccessRole, str]) -> AccessRole:
        """Coerce a role and, when the resource kind is known, check it is legal there."""
        if self._resource_kind is not None and self._settings.check_role_legality:
            return RoleCatalog.validate(role, self._resource_kind)
        return RoleCatalog.coerce_role(role)

    async def _send(
        self,
        method: str,
        body: Optional[Dict[str, Any]] = None,
        result_model: Optional[Type[ModelT]] = None
    ) -> Any:
        """Issue one request against the access URI and parse the payload.

        Args:
            method: GET, POST or DELETE
            body: JSON body for POST and DELETE
            result_model: Model the unwrapped payload is validated into

        Returns:
            A ``result_model`` instance, or the unwrapped payload without one

        Raises:
            InvalidResponseError: The payload does not fit ``result_model``
            Exception: The normalized failure; the original is chained as cause
        """
        try:
            if method == "GET":
                response = await self._transport.get(self._resource_uri)
            elif method == "POST":
                response = await self._transport.post(self._resource_uri, body)
            elif method == "DELETE":
                response = await self._transport.delete(self._resource_uri, body)
            else:
                raise ValueError(f"Unsupported access method: {method}")
        except Exception as e:
            error = normalize_error(e)
            logger.warning(f"{method} {self._resource_uri} failed: {getattr(error, 'message', error)}")
            if error is e:
                raise
            raise error from e

        payload = unwrap_response(response)
        if result_model is None:
            return payload

        try:
            return result_model.model_validate(payload)
        except ValidationError as e:
            logger.warning(f"{method} {self._resource_uri} returned an unexpected payload: {e.error_count()} error(s)")
            raise InvalidResponseError(
                f"Unexpected response from {method} {self._resource_uri}",
                details={"errors": e.errors(include_url=False, include_context=False)},
            ) from e
