from collections.abc import Callable
from typing import ClassVar

from owner_resolver.config.settings import Settings
from owner_resolver.ownership.base import BaseOwnerUidReader
from owner_resolver.ownership.fallback_reader import FallbackUidReader
from owner_resolver.ownership.os_stat_reader import OsStatReader
from owner_resolver.ownership.stat_command_reader import BsdStatReader, GnuStatReader


class UidReaderFactory:
    """Creates the owner UID reader named by settings.uid_reader."""

    READERS: ClassVar[dict[str, Callable[[], BaseOwnerUidReader]]] = {
        "os": OsStatReader,
        "stat": lambda: FallbackUidReader([GnuStatReader(), BsdStatReader()]),
        "gnu-stat": GnuStatReader,
        "bsd-stat": BsdStatReader,
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseOwnerUidReader:
        name = settings.uid_reader.lower()
        builder = cls.READERS.get(name)
        if builder is None:
            raise ValueError(
                f"Unknown UID reader '{name}'. Choose from: {list(cls.READERS)}"
            )
        return builder()
