import subprocess  # nosec B404 - stat(1) is the metadata source for these readers

from owner_resolver.ownership.base import BaseOwnerUidReader
from owner_resolver.ownership.exceptions import OwnershipReadError


class StatCommandReader(BaseOwnerUidReader):
    """Reads the owner UID by shelling out to stat(1).

    GNU coreutils and BSD stat spell the format option differently;
    subclasses only set the argument list.
    """

    FORMAT_ARGS: tuple[str, ...] = ()

    def __init__(self, stat_binary: str = "stat") -> None:
        self._stat_binary = stat_binary

    def read_uid(self, path: str) -> int:
        try:
            result = subprocess.run(  # nosec B603 - argv list, no shell
                [self._stat_binary, *self.FORMAT_ARGS, "--", path],
                capture_output=True,
                text=True,
                errors="replace",
                check=True,
            )
        except FileNotFoundError as exc:
            raise OwnershipReadError(f"{self._stat_binary} not found: {exc}") from exc
        except subprocess.CalledProcessError as exc:
            raise OwnershipReadError(
                f"{self._stat_binary} failed for {path}: {(exc.stderr or '').strip() or exc}"
            ) from exc
        return self._parse_uid(path, result.stdout)

    @staticmethod
    def _parse_uid(path: str, output: str) -> int:
        text = output.strip()
        if not text.isdigit():
            raise OwnershipReadError(f"Unexpected stat output for {path}: {text!r}")
        return int(text)


class GnuStatReader(StatCommandReader):
    """GNU coreutils: ``stat -c %u``."""

    FORMAT_ARGS = ("-c", "%u")


class BsdStatReader(StatCommandReader):
    """BSD / macOS: ``stat -f %u``."""

    FORMAT_ARGS = ("-f", "%u")
