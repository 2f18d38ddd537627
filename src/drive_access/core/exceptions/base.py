"""Root of the drive-access exception hierarchy.

Every exception the library raises derives from DriveAccessError and carries
a human-readable message, a machine-readable error code and a details
mapping.
"""

from typing import Any, Dict, Optional


class DriveAccessError(Exception):
    """Base exception for all drive-access errors.

    ``message`` is always non-empty for errors produced by the library;
    ``error_code`` defaults to the class name.
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.error_code,
            "message": self.message,
            "details": self.details,
            "type": self.__class__.__name__,
        }


def create_error_response(exception: DriveAccessError) -> Dict[str, Any]:
    """Wrap an exception as ``{"error": {...}}`` for logs or API layers."""
    return {"error": exception.to_dict()}
