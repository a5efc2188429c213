from collections.abc import Sequence

from owner_resolver.logging.logger import Log
from owner_resolver.ownership.base import BaseOwnerUidReader
from owner_resolver.ownership.exceptions import OwnershipReadError
from owner_resolver.ownership.models import ExtractionResult, OwnershipRecord
from owner_resolver.validation.path_validator import PathValidator, SkippedPath


class OwnershipExtractor:
    """Validates scan targets and reads the owning UID of each directory."""

    def __init__(
        self,
        reader: BaseOwnerUidReader,
        validator: PathValidator | None = None,
    ) -> None:
        self._reader = reader
        self._validator = validator if validator is not None else PathValidator()

    def extract(self, paths: Sequence[str]) -> ExtractionResult:
        """Return one OwnershipRecord per readable directory, in input order.

        A path whose metadata cannot be read is skipped with a warning; it
        never aborts the rest of the scan.
        """
        validation = self._validator.validate(paths)
        result = ExtractionResult(skipped=list(validation.skipped))
        for path in validation.valid:
            try:
                uid = self._reader.read_uid(path)
            except OwnershipReadError as exc:
                Log.warning(f"Cannot read owner of {path}, skipping: {exc}")
                result.skipped.append(SkippedPath(path=path, reason=str(exc)))
                continue
            Log.info(f"{path} -> UID {uid}")
            result.records.append(OwnershipRecord(path=path, uid=uid))
        return result
