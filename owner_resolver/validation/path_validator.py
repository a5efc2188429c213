import os
import stat
from collections.abc import Sequence
from dataclasses import dataclass, field

from owner_resolver.logging.logger import Log


@dataclass(frozen=True)
class SkippedPath:
    """A scan target that was dropped from the run, with the reason why."""

    path: str
    reason: str


@dataclass
class ValidationResult:
    valid: list[str] = field(default_factory=list)
    skipped: list[SkippedPath] = field(default_factory=list)


class PathValidator:
    """Splits scan targets into existing directories and skipped paths."""

    def validate(self, paths: Sequence[str]) -> ValidationResult:
        """Classify each path, keeping the valid ones in input order.

        Paths are checked as given; nothing is normalized, so the report can
        be keyed by the caller's exact strings.
        """
        result = ValidationResult()
        for path in paths:
            reason = self._rejection_reason(path)
            if reason is None:
                result.valid.append(path)
                continue
            Log.warning(f"{path} {reason}, skipping")
            result.skipped.append(SkippedPath(path=path, reason=reason))
        return result

    def _rejection_reason(self, path: str) -> str | None:
        try:
            mode = os.stat(path).st_mode
        except (FileNotFoundError, NotADirectoryError):
            return "does not exist"
        except OSError as exc:
            return f"is not accessible ({exc.strerror or exc})"
        if not stat.S_ISDIR(mode):
            return "is not a directory"
        return None
