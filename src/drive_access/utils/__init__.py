"""Utility helpers for drive-access."""

from .responses import unwrap_response

__all__ = ["unwrap_response"]
