"""Tests for upload validation, key generation and the storage backends."""

import re
from datetime import datetime, timezone

import pytest

from folio.config import S3Config, StorageConfig
from folio.lib.exceptions import InvalidRequestError
from folio.lib.storage import LocalStorageBackend, StorageBackend, create_storage_backend
from folio.lib.uploads import Uploader, build_key

KEY_RE = re.compile(r"^uploads/2026-03-14/[0-9a-f-]{36}\.png$")


class TestBuildKey:
    def test_layout(self):
        key = build_key("image/png", now=datetime(2026, 3, 14, tzinfo=timezone.utc))
        assert KEY_RE.match(key)

    @pytest.mark.parametrize(
        "content_type, ext",
        [("image/jpeg", ".jpg"), ("image/webp", ".webp"), ("image/svg+xml", ".svg"), ("application/pdf", ".pdf")],
    )
    def test_extension_from_content_type(self, content_type, ext):
        assert build_key(content_type).endswith(ext)

    def test_keys_are_unique(self):
        assert build_key("image/png") != build_key("image/png")


class TestUploader:
    @pytest.fixture
    def uploader(self, tmp_path):
        config = StorageConfig(local_path=str(tmp_path), max_upload_size=1024)
        return Uploader(LocalStorageBackend(tmp_path, "/uploads"), config)

    def test_rejects_disallowed_type(self, uploader):
        with pytest.raises(InvalidRequestError, match="not allowed"):
            uploader.validate("text/html", 10)

    def test_rejects_oversized_file(self, uploader):
        with pytest.raises(InvalidRequestError, match="exceeds"):
            uploader.validate("image/png", 2048)

    def test_rejects_empty_file(self, uploader):
        with pytest.raises(InvalidRequestError):
            uploader.validate("image/png", 0)

    @pytest.mark.asyncio
    async def test_upload_then_delete(self, uploader, tmp_path):
        stored = await uploader.upload("photo.jpg", "image/jpeg", b"jpeg-bytes")

        assert stored.url == f"/uploads/{stored.key}"
        assert (tmp_path / stored.key).read_bytes() == b"jpeg-bytes"

        await uploader.delete(stored.key)
        assert not (tmp_path / stored.key).exists()

    @pytest.mark.asyncio
    async def test_client_file_name_does_not_pick_the_extension(self, uploader):
        stored = await uploader.upload("page.html", "image/png", b"<html></html>")

        assert stored.key.endswith(".png")
        assert ".html" not in stored.url

    @pytest.mark.asyncio
    async def test_delete_rejects_foreign_keys(self, uploader):
        with pytest.raises(InvalidRequestError):
            await uploader.delete("../secrets.txt")
        with pytest.raises(InvalidRequestError):
            await uploader.delete("avatars/me.png")


class TestLocalStorageBackend:
    @pytest.mark.asyncio
    async def test_path_traversal_rejected(self, tmp_path):
        backend = LocalStorageBackend(tmp_path / "media")
        with pytest.raises(InvalidRequestError):
            await backend.put("../escape.txt", b"x", "text/plain")

    @pytest.mark.asyncio
    async def test_put_then_delete_removes_file(self, tmp_path):
        backend = LocalStorageBackend(tmp_path)
        stored = await backend.put("uploads/a.png", b"x", "image/png")
        assert stored.url == "/uploads/uploads/a.png"
        assert (tmp_path / "uploads/a.png").read_bytes() == b"x"

        await backend.delete("uploads/a.png")
        await backend.delete("uploads/a.png")
        assert not (tmp_path / "uploads/a.png").exists()


class TestCreateStorageBackend:
    def test_local(self, tmp_path):
        backend = create_storage_backend(StorageConfig(local_path=str(tmp_path)))
        assert isinstance(backend, LocalStorageBackend)
        assert isinstance(backend, StorageBackend)

    def test_r2_public_url(self):
        backend = create_storage_backend(
            StorageConfig(backend="r2", s3=S3Config(bucket="assets", public_url="https://cdn.ana.design"))
        )
        assert backend.public_url("uploads/x.png") == "https://cdn.ana.design/uploads/x.png"

    def test_r2_default_url(self):
        backend = create_storage_backend(StorageConfig(backend="r2", s3=S3Config(bucket="assets")))
        assert backend.public_url("uploads/x.png") == "https://assets.r2.dev/uploads/x.png"

    def test_r2_prefix_applies_to_keys_and_urls(self):
        backend = create_storage_backend(
            StorageConfig(backend="r2", s3=S3Config(bucket="assets", prefix="/portfolio/"))
        )
        assert backend.object_key("uploads/x.png") == "portfolio/uploads/x.png"
        assert backend.public_url("uploads/x.png") == "https://assets.r2.dev/portfolio/uploads/x.png"

    def test_unknown_backend(self):
        with pytest.raises(ValueError):
            create_storage_backend(StorageConfig(backend="ftp"))


class TestS3Config:
    def test_endpoint_from_account_id(self):
        config = S3Config(account_id="abc123")
        assert config.resolved_endpoint_url() == "https://abc123.r2.cloudflarestorage.com"

    def test_explicit_endpoint_wins(self):
        config = S3Config(account_id="abc123", endpoint_url="http://localhost:9000")
        assert config.resolved_endpoint_url() == "http://localhost:9000"
