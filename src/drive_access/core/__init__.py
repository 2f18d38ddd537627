"""Core building blocks shared by every drive-access feature."""
