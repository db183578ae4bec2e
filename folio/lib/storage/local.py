"""Local filesystem storage backend for development."""

from __future__ import annotations

import asyncio
from pathlib import Path

from folio.lib.exceptions import InvalidRequestError
from folio.lib.storage.base import StoredFile


class LocalStorageBackend:
    """Store uploads under ``base_path``; they are served at ``url_prefix``."""

    def __init__(self, base_path: Path, url_prefix: str = "/uploads") -> None:
        self._base_path = base_path
        self._url_prefix = url_prefix.rstrip("/")

    @property
    def base_path(self) -> Path:
        return self._base_path

    async def put(self, key: str, data: bytes, content_type: str) -> StoredFile:
        path = self._key_to_path(key)
        await asyncio.to_thread(self._write_file, path, data)
        return StoredFile(key=key, url=self.public_url(key), size=len(data))

    async def delete(self, key: str) -> None:
        path = self._key_to_path(key)
        await asyncio.to_thread(path.unlink, missing_ok=True)

    def public_url(self, key: str) -> str:
        return f"{self._url_prefix}/{key}"

    async def close(self) -> None:
        """Nothing to release."""

    def _key_to_path(self, key: str) -> Path:
        base = self._base_path.resolve()
        path = (base / key).resolve()
        if not path.is_relative_to(base):
            raise InvalidRequestError("Invalid storage key")
        return path

    @staticmethod
    def _write_file(path: Path, data: bytes) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
