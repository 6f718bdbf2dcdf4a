"""Validation and storage of multipart image uploads."""

import logging
import os
import uuid
from typing import Optional

from django.conf import settings

from infrastructure.storage import StorageException, StorageFile, StorageInterface

from .service_base import ErrorCodes, ServiceResult, service_err, service_ok

logger = logging.getLogger(__name__)


def validate_image(upload) -> Optional[str]:
    """Return an error message when ``upload`` is not an acceptable image, else None."""
    content_type = getattr(upload, "content_type", None)
    if content_type not in settings.UPLOAD_ALLOWED_IMAGE_TYPES:
        allowed = ", ".join(settings.UPLOAD_ALLOWED_IMAGE_TYPES)
        return f"Unsupported file type '{content_type}'. Allowed: {allowed}"
    if upload.size > settings.UPLOAD_MAX_IMAGE_BYTES:
        limit_mb = settings.UPLOAD_MAX_IMAGE_BYTES // (1024 * 1024)
        return f"File '{upload.name}' exceeds the {limit_mb}MB limit"
    return None


def build_key(folder: str, filename: str) -> str:
    """Generate a unique storage key under ``folder`` keeping the file extension."""
    _, ext = os.path.splitext(filename or "")
    return f"{folder}/{uuid.uuid4().hex}{ext.lower()}"


def store_image(storage: StorageInterface, upload, folder: str) -> ServiceResult[StorageFile]:
    """Validate then upload an image, returning the stored file metadata."""
    error = validate_image(upload)
    if error:
        return service_err(ErrorCodes.INVALID_UPLOAD, error)
    try:
        stored = storage.upload(upload, build_key(folder, upload.name), upload.content_type)
    except StorageException as e:
        logger.error(f"Image upload to '{folder}' failed: {e}")
        return service_err(ErrorCodes.STORAGE_ERROR, "File storage is unavailable")
    return service_ok(stored)
