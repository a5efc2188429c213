from dataclasses import dataclass
from enum import Enum


class ResolutionStatus(str, Enum):
    """How a UID lookup ended. Every status except FOUND reports an empty email."""

    FOUND = "found"
    NO_ENTRY = "no_entry"
    NO_EMAIL = "no_email"
    QUERY_FAILED = "query_failed"


@dataclass(frozen=True)
class IdentityRecord:
    uid: int
    email: str | None
    status: ResolutionStatus
