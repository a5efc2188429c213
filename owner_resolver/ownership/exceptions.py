class OwnershipError(Exception):
    """Base exception for owner UID extraction."""


class OwnershipReadError(OwnershipError):
    """Raised when the owner UID of a path cannot be read."""
