"""
S3 Storage Adapter
==================

Product, market, merchant and marketer images in an S3 (or MinIO) bucket,
through django-storages.

Settings: AWS_ACCESS_KEY_ID, AWS_SECRET_ACCESS_KEY, AWS_STORAGE_BUCKET_NAME,
AWS_S3_REGION_NAME, and optionally AWS_S3_ENDPOINT_URL (MinIO) and
AWS_S3_CUSTOM_DOMAIN (CDN).
"""

import logging
from typing import BinaryIO

from django.conf import settings
from storages.backends.s3boto3 import S3Boto3Storage

from .interface import StorageException, StorageFile, StorageInterface

logger = logging.getLogger(__name__)


class S3StorageAdapter(StorageInterface):
    def __init__(self):
        self.storage = S3Boto3Storage()
        self.bucket_name = getattr(settings, "AWS_STORAGE_BUCKET_NAME", "")

    def upload(self, file: BinaryIO, path: str, content_type: str) -> StorageFile:
        try:
            key = self.storage.save(path, file)
            stored = StorageFile(
                key=key,
                url=self.storage.url(key),
                size=self.storage.size(key),
                content_type=content_type,
                bucket=self.bucket_name,
            )
        except Exception as e:
            # boto3 and botocore raise many unrelated exception types.
            logger.error(f"S3 upload of {path} to '{self.bucket_name}' failed: {e}")
            raise StorageException(f"S3 upload failed: {e}") from e

        logger.info(f"Uploaded {key} ({stored.size} bytes) to '{self.bucket_name}'")
        return stored

    def delete(self, key: str) -> bool:
        if not self.exists(key):
            logger.warning(f"Nothing stored at {key} in '{self.bucket_name}'")
            return False
        try:
            self.storage.delete(key)
        except Exception as e:
            logger.error(f"S3 delete of {key} failed: {e}")
            raise StorageException(f"S3 deletion failed: {e}") from e
        logger.info(f"Deleted {key} from '{self.bucket_name}'")
        return True

    def get_url(self, key: str) -> str:
        # Signed when AWS_QUERYSTRING_AUTH is True.
        return self.storage.url(key)

    def exists(self, key: str) -> bool:
        try:
            return self.storage.exists(key)
        except Exception as e:
            logger.error(f"S3 existence check of {key} failed: {e}")
            return False
