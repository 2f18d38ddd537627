"""Normalization of raised or rejected values into one error contract.

Whatever the failure looks like - a structured exception, a bare error
mapping from a response body, or a primitive - callers always get an
exception with a non-empty ``message``.
"""

import logging
from collections.abc import Mapping
from typing import Any, Optional

from ...config.constants import ErrorDefaults
from .base import DriveAccessError
from .domain import ApiError

logger = logging.getLogger(__name__)


def _extract_message(raw: Any) -> Optional[str]:
    if isinstance(raw, Mapping):
        message = raw.get("message")
    elif isinstance(raw, BaseException):
        message = getattr(raw, "message", None) or str(raw)
    else:
        message = getattr(raw, "message", None)

    if isinstance(message, str) and message.strip():
        return message
    return None


def normalize_error(raw: Any) -> Exception:
    """Map any failure value to an exception carrying a message.

    Args:
        raw: Exception instance, error mapping, object with a ``message``
            attribute, or anything else

    Returns:
        ``raw`` itself when it is an exception with a message; an ApiError
        carrying the message when ``raw`` is a mapping or object with one;
        otherwise a DriveAccessError with the generic unknown-error message.
    """
    message = _extract_message(raw)

    if message is not None and isinstance(raw, Exception):
        return raw

    if message is not None:
        if isinstance(raw, Mapping):
            status = raw.get("status")
            return ApiError(
                message,
                status=status if isinstance(status, int) else None,
                code=raw.get("code"),
                details=dict(raw),
            )
        return ApiError(message)

    logger.debug(f"Normalizing message-less failure of type {type(raw).__name__}")
    return DriveAccessError(
        ErrorDefaults.UNKNOWN_ERROR,
        error_code=ErrorDefaults.UNKNOWN_ERROR_CODE,
        details={"raw_type": type(raw).__name__},
    )
