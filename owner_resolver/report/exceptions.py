class ReportError(Exception):
    """Base exception for report and UID map documents."""


class UidMapFormatError(ReportError):
    """Raised when an intermediate UID map document is malformed."""
