"""Drives feature: the resources access engines are bound to."""

from .models import Drive, DriveItem

__all__ = ["Drive", "DriveItem"]
