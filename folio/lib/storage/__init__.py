"""Pluggable object storage for uploaded media."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from folio.lib.storage.base import StorageBackend, StoredFile
from folio.lib.storage.local import LocalStorageBackend

if TYPE_CHECKING:
    from folio.config import StorageConfig


def create_storage_backend(config: StorageConfig) -> StorageBackend:
    """Instantiate the backend named by ``storage.backend``."""
    if config.backend == "local":
        return LocalStorageBackend(
            base_path=Path(config.local_path),
            url_prefix=config.local_url_prefix,
        )

    if config.backend in ("s3", "r2"):
        from folio.lib.storage.s3 import S3StorageBackend

        return S3StorageBackend(config.s3)

    raise ValueError(f"Unknown storage backend {config.backend!r}; expected 'local', 's3' or 'r2'")


__all__ = ["LocalStorageBackend", "StorageBackend", "StoredFile", "create_storage_backend"]
