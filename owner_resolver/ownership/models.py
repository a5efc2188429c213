from dataclasses import dataclass, field

from owner_resolver.validation.path_validator import SkippedPath


@dataclass(frozen=True)
class OwnershipRecord:
    """Owning UID of a directory exactly as the filesystem reported it."""

    path: str
    uid: int


@dataclass
class ExtractionResult:
    records: list[OwnershipRecord] = field(default_factory=list)
    skipped: list[SkippedPath] = field(default_factory=list)
