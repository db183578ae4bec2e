"""The two operations ``Uploader`` needs from an object store."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(frozen=True)
class StoredFile:
    key: str
    url: str
    size: int


@runtime_checkable
class StorageBackend(Protocol):
    """Local directory or S3/R2 bucket, addressed by ``uploads/<day>/<uuid>.<ext>`` keys.

    ``put`` returns the public URL clients embed; ``delete`` of an unknown key
    succeeds. ``close`` runs on app shutdown.
    """

    async def put(self, key: str, data: bytes, content_type: str) -> StoredFile: ...

    async def delete(self, key: str) -> None: ...

    async def close(self) -> None: ...
