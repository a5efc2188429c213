from collections.abc import Sequence

from owner_resolver.logging.logger import Log
from owner_resolver.ownership.base import BaseOwnerUidReader
from owner_resolver.ownership.exceptions import OwnershipReadError


class FallbackUidReader(BaseOwnerUidReader):
    """Tries each reader in turn and returns the first UID that comes back."""

    def __init__(self, readers: Sequence[BaseOwnerUidReader]) -> None:
        if not readers:
            raise ValueError("FallbackUidReader needs at least one reader")
        self._readers = list(readers)

    def read_uid(self, path: str) -> int:
        errors: list[str] = []
        for reader in self._readers:
            try:
                return reader.read_uid(path)
            except OwnershipReadError as exc:
                Log.debug(f"{type(reader).__name__} could not read {path}: {exc}")
                errors.append(str(exc))
        raise OwnershipReadError(f"All UID readers failed for {path}: {'; '.join(errors)}")
