"""Version information for drive-access."""

__version__ = "0.1.0"
