"""Upload validation and key generation on top of a storage backend."""

import logging
import mimetypes
import re
from datetime import UTC, datetime
from uuid import uuid4

from folio.config import StorageConfig
from folio.lib.exceptions import InvalidRequestError
from folio.lib.storage import StorageBackend, StoredFile

logger = logging.getLogger(__name__)

KEY_PREFIX = "uploads"

_KEY_PATTERN = re.compile(r"^uploads/\d{4}-\d{2}-\d{2}/[0-9a-f-]{36}(\.[a-z0-9]+)?$")

_EXTENSIONS = {
    "image/jpeg": ".jpg",
    "image/png": ".png",
    "image/gif": ".gif",
    "image/webp": ".webp",
    "image/svg+xml": ".svg",
    "application/pdf": ".pdf",
}


def build_key(content_type: str, now: datetime | None = None) -> str:
    """``uploads/YYYY-MM-DD/<uuid>.<ext>``.

    The extension comes from the validated MIME type, not the client's file name.
    """
    day = (now or datetime.now(UTC)).strftime("%Y-%m-%d")
    ext = _EXTENSIONS.get(content_type) or mimetypes.guess_extension(content_type) or ""
    return f"{KEY_PREFIX}/{day}/{uuid4()}{ext}"


class Uploader:
    """Validates files against the storage settings and writes them to a backend."""

    def __init__(self, backend: StorageBackend, config: StorageConfig) -> None:
        self.backend = backend
        self.config = config

    def validate(self, content_type: str | None, size: int) -> None:
        if content_type not in self.config.allowed_types:
            raise InvalidRequestError(
                f"File type {content_type or 'unknown'} not allowed. "
                f"Allowed types: {', '.join(self.config.allowed_types)}"
            )
        if size > self.config.max_upload_size:
            limit_mb = self.config.max_upload_size / (1024 * 1024)
            raise InvalidRequestError(f"File size exceeds maximum of {limit_mb:g}MB")
        if size == 0:
            raise InvalidRequestError("File is empty")

    async def upload(self, filename: str | None, content_type: str | None, data: bytes) -> StoredFile:
        self.validate(content_type, len(data))
        key = build_key(content_type)
        stored = await self.backend.put(key, data, content_type)
        logger.info("Stored upload %s as %s (%d bytes)", filename or "<unnamed>", key, stored.size)
        return stored

    async def delete(self, key: str) -> None:
        """Delete an object previously created by ``upload``."""
        if not _KEY_PATTERN.match(key):
            raise InvalidRequestError("Invalid upload key")
        await self.backend.delete(key)
        logger.info("Deleted upload %s", key)
