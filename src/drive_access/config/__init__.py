"""Configuration module for drive-access.

Constants, environment-driven settings and logging configuration.
"""

from .constants import (
    ApiDefaults,
    ErrorDefaults,
    AccessPaths,
    ResourceKind,
    AccessorType,
    AccessRole,
    AccessAction,
    GrantMode,
    DriveItemType,
)

from .settings import DriveAccessSettings, get_settings

from .logging_config import (
    setup_logging,
    get_logger,
    LogVerbosity,
    LogFormat,
    LoggingConfig,
)

__all__ = [
    # Constants
    "ApiDefaults",
    "ErrorDefaults",
    "AccessPaths",
    "ResourceKind",
    "AccessorType",
    "AccessRole",
    "AccessAction",
    "GrantMode",
    "DriveItemType",

    # Settings
    "DriveAccessSettings",
    "get_settings",

    # Logging
    "setup_logging",
    "get_logger",
    "LogVerbosity",
    "LogFormat",
    "LoggingConfig",
]
