"""
Tests for the ImageKit asset storage adapter.

HTTP is served by httpx.MockTransport; no network access.
"""

import base64

import httpx
import pytest

from app.domain.showcase.errors import AssetStorageError
from app.infrastructure.showcase.imagekit_storage import (
    DEFAULT_API_URL,
    DEFAULT_UPLOAD_URL,
    ImageKitAssetStorage,
)

PRIVATE_KEY = "private_test_key"


def _storage(handler, private_key: str = PRIVATE_KEY) -> ImageKitAssetStorage:
    return ImageKitAssetStorage(
        private_key=private_key, transport=httpx.MockTransport(handler)
    )


def _expected_auth() -> str:
    token = base64.b64encode(f"{PRIVATE_KEY}:".encode()).decode()
    return f"Basic {token}"


class TestUpload:
    """Tests for ImageKitAssetStorage.upload."""

    @pytest.mark.asyncio
    async def test_multipart_upload(self) -> None:
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["method"] = request.method
            seen["url"] = str(request.url)
            seen["auth"] = request.headers["Authorization"]
            seen["body"] = request.read()
            return httpx.Response(
                200,
                json={"url": "https://ik.imagekit.io/demo/portfolio/a.png", "fileId": "abc123"},
            )

        asset = await _storage(handler).upload(b"PNGDATA", "a.png", "/portfolio")

        assert asset.url == "https://ik.imagekit.io/demo/portfolio/a.png"
        assert asset.file_id == "abc123"
        assert seen["method"] == "POST"
        assert seen["url"] == DEFAULT_UPLOAD_URL
        assert seen["auth"] == _expected_auth()
        for part in (b'name="fileName"', b'name="folder"', b"/portfolio", b"PNGDATA"):
            assert part in seen["body"]

    @pytest.mark.asyncio
    async def test_http_error_wrapped(self) -> None:
        storage = _storage(lambda request: httpx.Response(401, json={"message": "denied"}))
        with pytest.raises(AssetStorageError, match="HTTP 401"):
            await storage.upload(b"x", "a.png", "/portfolio")

    @pytest.mark.asyncio
    async def test_transport_error_wrapped(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("unreachable", request=request)

        with pytest.raises(AssetStorageError) as exc_info:
            await _storage(handler).upload(b"x", "a.png", "/portfolio")
        assert exc_info.value.operation == "upload"

    @pytest.mark.asyncio
    async def test_unexpected_body(self) -> None:
        storage = _storage(lambda request: httpx.Response(200, json={"name": "a.png"}))
        with pytest.raises(AssetStorageError, match="unexpected response body"):
            await storage.upload(b"x", "a.png", "/portfolio")

    @pytest.mark.asyncio
    async def test_missing_key(self) -> None:
        storage = _storage(lambda request: httpx.Response(200), private_key=None)
        with pytest.raises(AssetStorageError, match="not configured"):
            await storage.upload(b"x", "a.png", "/portfolio")


class TestDelete:
    """Tests for ImageKitAssetStorage.delete."""

    @pytest.mark.asyncio
    async def test_delete_by_file_id(self) -> None:
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["method"] = request.method
            seen["url"] = str(request.url)
            return httpx.Response(204)

        await _storage(handler).delete("abc123")

        assert seen["method"] == "DELETE"
        assert seen["url"] == f"{DEFAULT_API_URL}/files/abc123"

    @pytest.mark.asyncio
    async def test_not_found_wrapped(self) -> None:
        storage = _storage(lambda request: httpx.Response(404))
        with pytest.raises(AssetStorageError, match="HTTP 404"):
            await storage.delete("gone")
