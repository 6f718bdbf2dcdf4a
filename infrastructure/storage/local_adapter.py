"""
Local Storage Adapter
=====================

Filesystem implementation of StorageInterface backed by Django's
``FileSystemStorage`` (``MEDIA_ROOT`` / ``MEDIA_URL``). Used in development
and tests.
"""

import logging
from typing import BinaryIO, Optional

from django.core.files.storage import FileSystemStorage

from .interface import StorageException, StorageFile, StorageInterface

logger = logging.getLogger(__name__)


class LocalStorageAdapter(StorageInterface):
    def __init__(self, location: Optional[str] = None, base_url: Optional[str] = None):
        self.storage = FileSystemStorage(location=location, base_url=base_url)

    def upload(self, file: BinaryIO, path: str, content_type: str) -> StorageFile:
        try:
            saved_path = self.storage.save(path, file)
        except OSError as e:
            logger.error(f"Failed to write file locally: {path}. Error: {str(e)}")
            raise StorageException(f"Local upload failed: {str(e)}") from e

        logger.info(f"Stored file locally: {saved_path}")
        return StorageFile(
            key=saved_path,
            url=self.storage.url(saved_path),
            size=self.storage.size(saved_path),
            content_type=content_type,
        )

    def delete(self, key: str) -> bool:
        if not self.storage.exists(key):
            logger.warning(f"Local file not found, cannot delete: {key}")
            return False
        try:
            self.storage.delete(key)
        except OSError as e:
            raise StorageException(f"Local deletion failed: {str(e)}") from e
        return True

    def get_url(self, key: str) -> str:
        return self.storage.url(key)

    def exists(self, key: str) -> bool:
        return self.storage.exists(key)
