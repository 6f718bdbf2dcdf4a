"""
Storage Infrastructure Tests
=============================

Unit tests for the S3/MinIO and local storage adapters.
"""

import shutil
import tempfile
from io import BytesIO
from unittest.mock import MagicMock, patch

from django.core.files.base import ContentFile
from django.test import TestCase, override_settings

from infrastructure.storage import (
    LocalStorageAdapter,
    S3StorageAdapter,
    StorageException,
    StorageFactory,
    StorageFile,
    StorageInterface,
)


class StorageInterfaceTest(TestCase):
    def test_interface_is_abstract(self):
        """StorageInterface should not be instantiable."""
        with self.assertRaises(TypeError):
            StorageInterface()


@override_settings(AWS_STORAGE_BUCKET_NAME="bazaar-media")
class S3StorageAdapterTest(TestCase):
    """Test S3StorageAdapter with django-storages mocked out."""

    def setUp(self):
        patcher = patch("infrastructure.storage.s3_adapter.S3Boto3Storage")
        self.storage_class = patcher.start()
        self.addCleanup(patcher.stop)
        self.backend = MagicMock()
        self.storage_class.return_value = self.backend

    def test_upload_returns_metadata(self):
        """Upload reports the saved key, URL, size and bucket."""
        self.backend.save.return_value = "products/abc.png"
        self.backend.size.return_value = 2048
        self.backend.url.return_value = "https://cdn.example.com/products/abc.png"

        result = S3StorageAdapter().upload(BytesIO(b"data"), "products/abc.png", "image/png")

        self.assertIsInstance(result, StorageFile)
        self.assertEqual(result.key, "products/abc.png")
        self.assertEqual(result.size, 2048)
        self.assertEqual(result.content_type, "image/png")
        self.assertEqual(result.bucket, "bazaar-media")

    def test_upload_failure_raises_storage_exception(self):
        self.backend.save.side_effect = RuntimeError("connection reset")

        with self.assertRaises(StorageException):
            S3StorageAdapter().upload(BytesIO(b"data"), "products/abc.png", "image/png")

    def test_delete_existing_file(self):
        self.backend.exists.return_value = True

        self.assertTrue(S3StorageAdapter().delete("products/abc.png"))
        self.backend.delete.assert_called_once_with("products/abc.png")

    def test_delete_missing_file(self):
        self.backend.exists.return_value = False

        self.assertFalse(S3StorageAdapter().delete("products/missing.png"))
        self.backend.delete.assert_not_called()

    def test_exists_swallows_backend_errors(self):
        """An unreachable bucket reads as a missing file."""
        self.backend.exists.side_effect = RuntimeError("timeout")

        self.assertFalse(S3StorageAdapter().exists("products/abc.png"))


class LocalStorageAdapterTest(TestCase):
    """Test LocalStorageAdapter against a temporary directory."""

    def setUp(self):
        self.location = tempfile.mkdtemp()
        self.addCleanup(shutil.rmtree, self.location, ignore_errors=True)
        self.adapter = LocalStorageAdapter(location=self.location, base_url="/media/")

    def test_upload_and_delete(self):
        stored = self.adapter.upload(ContentFile(b"png bytes"), "merchants/logo.png", "image/png")

        self.assertEqual(stored.key, "merchants/logo.png")
        self.assertEqual(stored.url, "/media/merchants/logo.png")
        self.assertEqual(stored.size, 9)
        self.assertTrue(self.adapter.exists(stored.key))

        self.assertTrue(self.adapter.delete(stored.key))
        self.assertFalse(self.adapter.exists(stored.key))

    def test_existing_key_gets_a_new_name(self):
        first = self.adapter.upload(ContentFile(b"one"), "markets/a.png", "image/png")
        second = self.adapter.upload(ContentFile(b"two"), "markets/a.png", "image/png")

        self.assertNotEqual(first.key, second.key)

    def test_delete_missing_file(self):
        self.assertFalse(self.adapter.delete("markets/ghost.png"))


class StorageFactoryTest(TestCase):
    def test_create_local(self):
        self.assertIsInstance(StorageFactory.create("local"), LocalStorageAdapter)

    @override_settings(INFRASTRUCTURE={"STORAGE_BACKEND": "s3"})
    @patch("infrastructure.storage.s3_adapter.S3Boto3Storage")
    def test_create_from_settings(self, mock_storage):
        mock_storage.return_value = MagicMock()

        self.assertIsInstance(StorageFactory.create(), S3StorageAdapter)

    def test_invalid_backend(self):
        with self.assertRaises(ValueError):
            StorageFactory.create("ftp")
