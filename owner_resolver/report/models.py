from dataclasses import dataclass

Report = dict[str, dict[str, int | str]]


@dataclass(frozen=True)
class ResolutionEntry:
    """One path joined with its owner UID and resolved email."""

    path: str
    uid: int
    email: str | None
