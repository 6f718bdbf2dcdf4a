"""Builds the storage adapter named in ``settings.INFRASTRUCTURE``."""

import logging
from typing import Literal

from django.conf import settings

from .interface import StorageInterface
from .local_adapter import LocalStorageAdapter
from .s3_adapter import S3StorageAdapter

logger = logging.getLogger(__name__)

StorageBackend = Literal["s3", "local"]

_ADAPTERS = {
    "s3": S3StorageAdapter,
    "local": LocalStorageAdapter,
}


class StorageFactory:
    @staticmethod
    def create(backend: StorageBackend | None = None) -> StorageInterface:
        """Return a fresh adapter; ``backend`` overrides STORAGE_BACKEND."""
        name = backend or getattr(settings, "INFRASTRUCTURE", {}).get("STORAGE_BACKEND", "s3")
        adapter_class = _ADAPTERS.get(name)
        if adapter_class is None:
            raise ValueError(f"Unknown storage backend {name!r}; expected one of {sorted(_ADAPTERS)}")

        logger.info(f"Storage backend selected: {name}")
        return adapter_class()
