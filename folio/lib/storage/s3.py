"""Cloudflare R2 (or any S3-compatible bucket) through aioboto3."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

import aioboto3
from botocore.exceptions import BotoCoreError, ClientError

from folio.lib.exceptions import StorageUnavailableError
from folio.lib.storage.base import StoredFile

if TYPE_CHECKING:
    from folio.config import S3Config

logger = logging.getLogger(__name__)


class S3StorageBackend:
    def __init__(self, config: S3Config) -> None:
        self._config = config
        self._session = aioboto3.Session()

    @property
    def bucket(self) -> str:
        return self._config.bucket

    def object_key(self, key: str) -> str:
        """Key inside the bucket, under ``s3.prefix`` when one is set."""
        prefix = self._config.prefix.strip("/")
        return f"{prefix}/{key}" if prefix else key

    @asynccontextmanager
    async def _client(self, action: str, key: str):
        options = {
            "region_name": self._config.region,
            "endpoint_url": self._config.resolved_endpoint_url() or None,
            "aws_access_key_id": self._config.access_key_id or None,
            "aws_secret_access_key": self._config.secret_access_key or None,
        }
        try:
            async with self._session.client("s3", **options) as client:
                yield client
        except (BotoCoreError, ClientError) as exc:
            logger.error("%s of %s in bucket %s failed: %s", action, key, self.bucket, exc)
            raise StorageUnavailableError(f"{action} failed, the file store is unavailable") from exc

    async def put(self, key: str, data: bytes, content_type: str) -> StoredFile:
        object_key = self.object_key(key)
        async with self._client("Upload", object_key) as client:
            await client.put_object(
                Bucket=self.bucket, Key=object_key, Body=data, ContentType=content_type
            )
        return StoredFile(key=key, url=self.public_url(key), size=len(data))

    async def delete(self, key: str) -> None:
        object_key = self.object_key(key)
        async with self._client("Delete", object_key) as client:
            await client.delete_object(Bucket=self.bucket, Key=object_key)

    def public_url(self, key: str) -> str:
        base = self._config.public_url.rstrip("/") or f"https://{self.bucket}.r2.dev"
        return f"{base}/{self.object_key(key)}"

    async def close(self) -> None:
        """Clients are opened per call; nothing is held between requests."""
