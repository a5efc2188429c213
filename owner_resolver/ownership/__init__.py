from owner_resolver.ownership.base import BaseOwnerUidReader
from owner_resolver.ownership.extractor import OwnershipExtractor
from owner_resolver.ownership.factory import UidReaderFactory

__all__ = ["BaseOwnerUidReader", "OwnershipExtractor", "UidReaderFactory"]
