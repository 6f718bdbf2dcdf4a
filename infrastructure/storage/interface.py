"""
Storage Interface
=================

Contract shared by the S3 and local filesystem adapters. Keys are generated
by the caller (``utils.uploads.build_key``); adapters may rename on collision
and report the key they actually used.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import BinaryIO, Optional


@dataclass
class StorageFile:
    """Metadata of an uploaded image: the key to delete it by and the URL clients load."""

    key: str
    url: str
    size: int
    content_type: str
    bucket: Optional[str] = None


class StorageException(Exception):
    """Raised when the backing store cannot complete an upload or delete."""


class StorageInterface(ABC):
    @abstractmethod
    def upload(self, file: BinaryIO, path: str, content_type: str) -> StorageFile:
        """Store ``file`` under ``path``. Raises StorageException on failure."""
        raise NotImplementedError

    @abstractmethod
    def delete(self, key: str) -> bool:
        """Remove ``key``. Returns False when nothing was stored there."""
        raise NotImplementedError

    @abstractmethod
    def get_url(self, key: str) -> str:
        raise NotImplementedError

    @abstractmethod
    def exists(self, key: str) -> bool:
        raise NotImplementedError
