from abc import ABC, abstractmethod


class BaseOwnerUidReader(ABC):
    """Contract for all owner UID readers."""

    @abstractmethod
    def read_uid(self, path: str) -> int:
        """Return the UID owning ``path`` itself (not its contents).

        Raises:
            OwnershipReadError: if the metadata cannot be read.
        """
