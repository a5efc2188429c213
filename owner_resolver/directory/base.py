from abc import ABC, abstractmethod
from types import TracebackType

from owner_resolver.directory.models import IdentityRecord


class BaseDirectoryResolver(ABC):
    """Contract for UID -> email directory lookups."""

    @abstractmethod
    def check_connection(self) -> None:
        """Verify the directory answers an authenticated request.

        Raises:
            DirectoryConnectionError: if the service is unreachable or the bind fails.
        """

    @abstractmethod
    def lookup(self, uid: int) -> IdentityRecord:
        """Resolve one UID. Never raises for a miss or a failed query."""

    def close(self) -> None:
        """Release any open connection."""

    def __enter__(self) -> "BaseDirectoryResolver":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
