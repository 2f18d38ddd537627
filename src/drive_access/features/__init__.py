"""Feature modules for drive-access."""
