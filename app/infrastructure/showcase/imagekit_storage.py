"""
Adapter: ImageKit remote asset storage.

Implements AssetStorage port over the ImageKit REST API:
    upload  POST   https://upload.imagekit.io/api/v1/files/upload
    delete  DELETE https://api.imagekit.io/v1/files/{fileId}

Both calls authenticate with HTTP basic auth, the private key as the
username and an empty password. Transport and HTTP errors surface as
AssetStorageError; nothing here retries.
"""

import logging
from typing import Optional

import httpx

from app.domain.showcase.entities import UploadedAsset
from app.domain.showcase.errors import AssetStorageError
from app.domain.showcase.ports import AssetStorage

logger = logging.getLogger(__name__)

DEFAULT_UPLOAD_URL = "https://upload.imagekit.io/api/v1/files/upload"
DEFAULT_API_URL = "https://api.imagekit.io/v1"


class ImageKitAssetStorage(AssetStorage):
    """Uploads and deletes portfolio assets on ImageKit.

    Args:
        private_key: ImageKit private API key.
        upload_url: Upload endpoint.
        api_url: Base URL of the management API.
        timeout: Per-request timeout in seconds.
        transport: Optional httpx transport (tests inject a mock).
    """

    def __init__(
        self,
        private_key: Optional[str],
        upload_url: str = DEFAULT_UPLOAD_URL,
        api_url: str = DEFAULT_API_URL,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._private_key = private_key
        self._upload_url = upload_url
        self._api_url = api_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    def _client(self, operation: str) -> httpx.AsyncClient:
        if not self._private_key:
            raise AssetStorageError(operation, "ImageKit private key is not configured")
        return httpx.AsyncClient(
            auth=(self._private_key, ""),
            timeout=self._timeout,
            transport=self._transport,
        )

    async def upload(self, content: bytes, file_name: str, folder: str) -> UploadedAsset:
        """Upload a file and return its public URL and ImageKit file id."""
        try:
            async with self._client("upload") as client:
                resp = await client.post(
                    self._upload_url,
                    data={
                        "fileName": file_name,
                        "folder": folder,
                        "useUniqueFileName": "true",
                        "isPrivateFile": "false",
                    },
                    files={"file": (file_name, content)},
                )
                resp.raise_for_status()
                body = resp.json()
        except httpx.HTTPStatusError as exc:
            raise AssetStorageError("upload", f"HTTP {exc.response.status_code}") from exc
        except httpx.HTTPError as exc:
            raise AssetStorageError("upload", type(exc).__name__) from exc

        try:
            asset = UploadedAsset(url=body["url"], file_id=body["fileId"])
        except (KeyError, TypeError) as exc:
            raise AssetStorageError("upload", "unexpected response body") from exc

        logger.info("Uploaded asset %s to %s as file_id=%s", file_name, folder, asset.file_id)
        return asset

    async def delete(self, file_id: str) -> None:
        """Delete an uploaded file by its ImageKit file id."""
        try:
            async with self._client("delete") as client:
                resp = await client.delete(f"{self._api_url}/files/{file_id}")
                resp.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise AssetStorageError("delete", f"HTTP {exc.response.status_code}") from exc
        except httpx.HTTPError as exc:
            raise AssetStorageError("delete", type(exc).__name__) from exc

        logger.info("Deleted asset file_id=%s", file_id)
