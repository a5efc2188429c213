"""Intermediate path -> UID document passed between the two stages."""

import json
from collections.abc import Iterable
from typing import Any

from owner_resolver.ownership.models import OwnershipRecord
from owner_resolver.report.assembler import render_json
from owner_resolver.report.exceptions import UidMapFormatError


def render_uid_map(records: Iterable[OwnershipRecord]) -> str:
    return render_json({record.path: record.uid for record in records})


def parse_uid_map(text: str) -> list[OwnershipRecord]:
    """Parse a UID map produced by the host-side scan.

    Raises:
        UidMapFormatError: if the document is not a JSON object of
            path -> non-negative integer.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise UidMapFormatError(f"UID map is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise UidMapFormatError("UID map must be a JSON object of path -> uid")
    return [_build_record(path, uid) for path, uid in data.items()]


def _build_record(path: str, raw: Any) -> OwnershipRecord:
    # bool is an int subclass; true/false are not UIDs
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise UidMapFormatError(f"UID for '{path}' must be an integer, got {raw!r}")
    if raw < 0:
        raise UidMapFormatError(f"UID for '{path}' must be non-negative, got {raw}")
    return OwnershipRecord(path=path, uid=raw)
