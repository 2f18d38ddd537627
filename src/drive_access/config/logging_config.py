"""Logging setup for drive-access.

The library logs through ``logging.getLogger(__name__)`` under the
``drive_access`` namespace. On import the namespace gets one console handler
whose level and format come from the environment:

- ``DRIVE_ACCESS_LOG_LEVEL``: explicit level, wins over verbosity
- ``DRIVE_ACCESS_LOG_VERBOSITY``: QUIET, NORMAL (default), VERBOSE or DEBUG
- ``DRIVE_ACCESS_LOG_FORMAT``: simple (default), detailed or json

Applications that configure logging themselves set
``DRIVE_ACCESS_SKIP_LOGGING_SETUP=true``.
"""

import logging
import logging.config
import os
from enum import Enum
from typing import Any, Dict, Optional


class LogVerbosity(str, Enum):
    """Log verbosity modes."""
    QUIET = "QUIET"      # Errors only
    NORMAL = "NORMAL"    # Warnings, including failed grants
    VERBOSE = "VERBOSE"  # Every grant and revoke
    DEBUG = "DEBUG"      # HTTP traffic when settings.verbose is on


class LogFormat(str, Enum):
    """Log format options."""
    SIMPLE = "simple"
    DETAILED = "detailed"
    JSON = "json"


_VERBOSITY_LEVELS = {
    LogVerbosity.QUIET: "ERROR",
    LogVerbosity.NORMAL: "WARNING",
    LogVerbosity.VERBOSE: "INFO",
    LogVerbosity.DEBUG: "DEBUG",
}

_FORMATS = {
    LogFormat.SIMPLE: "%(asctime)s - %(levelname)s - %(message)s",
    LogFormat.DETAILED: "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s",
    LogFormat.JSON: '{"time":"%(asctime)s","level":"%(levelname)s","module":"%(name)s","message":"%(message)s"}',
}

SKIP_SETUP_ENV = "DRIVE_ACCESS_SKIP_LOGGING_SETUP"


def get_log_level_from_verbosity(verbosity: str) -> str:
    """Map a verbosity mode to a log level name; unknown modes mean NORMAL."""
    try:
        return _VERBOSITY_LEVELS[LogVerbosity(verbosity.upper())]
    except ValueError:
        return _VERBOSITY_LEVELS[LogVerbosity.NORMAL]


class LoggingConfig:
    """Builds and applies the drive-access logging configuration."""

    PACKAGE_LOGGER = "drive_access"

    # Transport libraries log every connection at DEBUG
    HTTP_LIBRARY_LOGGERS = ("httpx", "httpcore")

    @classmethod
    def resolve_level(cls, level: Optional[str] = None, verbosity: Optional[str] = None) -> str:
        level = level or os.getenv("DRIVE_ACCESS_LOG_LEVEL")
        if level and isinstance(logging.getLevelName(level.upper()), int):
            return level.upper()
        verbosity = verbosity or os.getenv("DRIVE_ACCESS_LOG_VERBOSITY", LogVerbosity.NORMAL.value)
        return get_log_level_from_verbosity(verbosity)

    @classmethod
    def build_config(cls, level: str, log_format: str = LogFormat.SIMPLE.value) -> Dict[str, Any]:
        """Build a dictConfig mapping for the package namespace.

        Args:
            level: Level name for the package logger and its handler
            log_format: One of the LogFormat values; unknown values fall back to simple

        Returns:
            Configuration accepted by ``logging.config.dictConfig``
        """
        try:
            format_string = _FORMATS[LogFormat(log_format.lower())]
        except ValueError:
            format_string = _FORMATS[LogFormat.SIMPLE]

        loggers = {
            cls.PACKAGE_LOGGER: {
                "level": level,
                "handlers": ["drive_access_console"],
                "propagate": False,
            },
        }
        for name in cls.HTTP_LIBRARY_LOGGERS:
            loggers[name] = {"level": "ERROR"}

        return {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "drive_access": {
                    "format": format_string,
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                },
            },
            "handlers": {
                "drive_access_console": {
                    "class": "logging.StreamHandler",
                    "formatter": "drive_access",
                    "stream": "ext://sys.stderr",
                },
            },
            "loggers": loggers,
        }

    @classmethod
    def configure(cls) -> None:
        """Apply the environment-driven configuration."""
        level = cls.resolve_level()
        log_format = os.getenv("DRIVE_ACCESS_LOG_FORMAT", LogFormat.SIMPLE.value)
        logging.config.dictConfig(cls.build_config(level, log_format))
        logging.getLogger(__name__).debug(f"Logging configured: level={level}, format={log_format}")

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        return logging.getLogger(name)

    @classmethod
    def set_module_level(cls, module_name: str, level: str) -> None:
        """Override the level of one module, e.g. the transport while debugging."""
        logging.getLogger(module_name).setLevel(level.upper())

    @classmethod
    def silence_module(cls, module_name: str) -> None:
        cls.set_module_level(module_name, "CRITICAL")


def setup_logging() -> None:
    """Configure package logging unless the host application opted out."""
    if os.getenv(SKIP_SETUP_ENV, "false").lower() in ("1", "true", "yes"):
        return
    LoggingConfig.configure()


def get_logger(name: str) -> logging.Logger:
    """Get a logger in the drive-access namespace."""
    return LoggingConfig.get_logger(name)
