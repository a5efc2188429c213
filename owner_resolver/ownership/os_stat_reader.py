import os

from owner_resolver.ownership.base import BaseOwnerUidReader
from owner_resolver.ownership.exceptions import OwnershipReadError


class OsStatReader(BaseOwnerUidReader):
    """Reads the owner UID with os.stat()."""

    def read_uid(self, path: str) -> int:
        try:
            return os.stat(path).st_uid
        except OSError as exc:
            raise OwnershipReadError(f"stat failed for {path}: {exc}") from exc
