class DirectoryError(Exception):
    """Base exception for directory-service lookups."""


class DirectoryConnectionError(DirectoryError):
    """Raised when the directory service cannot be reached or bound to."""
