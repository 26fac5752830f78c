"""Cloudinary media store.

Talks to the Cloudinary upload API directly over httpx using signed
requests: every call carries a timestamp and a SHA-1 signature of the
sorted parameters plus the API secret.
"""

import hashlib
import re
import time
from uuid import uuid4

import httpx
import logfire

from forum.adapter.error import MediaStoreError
from forum.domain.service.media_store import MediaStore

# .../image/upload/v1712345678/posts/abc123.jpg -> posts/abc123
_PUBLIC_ID_PATTERN = re.compile(r"/upload/(?:v\d+/)?(?P<public_id>.+?)(?:\.[A-Za-z0-9]+)?$")


def public_id_from_url(url: str) -> str | None:
    """Extract the Cloudinary public ID from a delivery URL.

    Args:
        url: URL returned by an earlier upload

    Returns:
        Public ID (folder included), or None if the URL is not a Cloudinary
        upload URL
    """
    match = _PUBLIC_ID_PATTERN.search(url)
    return match.group("public_id") if match else None


def sign_params(params: dict[str, str], api_secret: str) -> str:
    """Compute the Cloudinary request signature.

    Args:
        params: Parameters to sign (file, api_key and signature excluded)
        api_secret: Account API secret

    Returns:
        Hex SHA-1 digest
    """
    to_sign = "&".join(f"{key}={params[key]}" for key in sorted(params))
    return hashlib.sha1(f"{to_sign}{api_secret}".encode("utf-8")).hexdigest()


class CloudinaryMediaStore(MediaStore):
    """Media store backed by the Cloudinary REST API."""

    def __init__(
        self,
        cloud_name: str,
        api_key: str,
        api_secret: str,
        folder: str = "posts",
        timeout: float = 30.0,
    ) -> None:
        """Initialize Cloudinary media store.

        Args:
            cloud_name: Cloudinary cloud name
            api_key: API key
            api_secret: API secret used for signing
            folder: Folder uploads are placed in
            timeout: Per-request timeout in seconds
        """
        self.api_key = api_key
        self.api_secret = api_secret
        self.folder = folder
        self.timeout = timeout
        self.base_url = f"https://api.cloudinary.com/v1_1/{cloud_name}/image"

    def _signed(self, params: dict[str, str]) -> dict[str, str]:
        params = {**params, "timestamp": str(int(time.time()))}
        return {
            **params,
            "api_key": self.api_key,
            "signature": sign_params(params, self.api_secret),
        }

    async def upload(self, content: bytes, content_type: str, filename: str) -> str:
        """Upload an image into the configured folder.

        Raises:
            MediaStoreError: If Cloudinary rejects the upload or is unreachable
        """
        data = self._signed({"folder": self.folder})
        files = {"file": (filename, content, content_type)}

        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    f"{self.base_url}/upload",
                    data=data,
                    files=files,
                    timeout=self.timeout,
                )
        except httpx.HTTPError as e:
            logfire.error("Cloudinary upload HTTP error", error=str(e))
            raise MediaStoreError(f"HTTP error during image upload: {e}")

        if response.status_code != 200:
            logfire.error(
                "Cloudinary upload failed",
                status_code=response.status_code,
                error=response.text,
            )
            raise MediaStoreError(f"Image upload failed: {response.status_code}")

        url = response.json()["secure_url"]
        logfire.info("Cloudinary upload completed", url=url, size=len(content))
        return url

    async def delete(self, url: str) -> None:
        """Destroy an uploaded image.

        URLs that do not point at a Cloudinary upload are ignored.

        Raises:
            MediaStoreError: If Cloudinary rejects the request or is unreachable
        """
        public_id = public_id_from_url(url)
        if not public_id:
            logfire.warn("Not a Cloudinary URL, skipping delete", url=url)
            return

        data = self._signed({"public_id": public_id})

        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    f"{self.base_url}/destroy", data=data, timeout=self.timeout
                )
        except httpx.HTTPError as e:
            logfire.error("Cloudinary destroy HTTP error", error=str(e))
            raise MediaStoreError(f"HTTP error during image delete: {e}")

        if response.status_code != 200:
            logfire.error(
                "Cloudinary destroy failed",
                status_code=response.status_code,
                error=response.text,
            )
            raise MediaStoreError(f"Image delete failed: {response.status_code}")

        # "not found" is fine: the image is already gone
        logfire.info(
            "Cloudinary destroy completed",
            public_id=public_id,
            result=response.json().get("result"),
        )


class InMemoryMediaStore(MediaStore):
    """Media store for development and testing.

    Keeps uploads in a dict and hands out deterministic fake URLs.
    """

    def __init__(self, folder: str = "posts") -> None:
        self.folder = folder
        self.images: dict[str, bytes] = {}
        self.deleted: list[str] = []

    async def upload(self, content: bytes, content_type: str, filename: str) -> str:
        """Store the bytes and return a fake delivery URL."""
        _ = content_type
        suffix = filename.rsplit(".", 1)[-1] if "." in filename else "bin"
        url = (
            "https://res.cloudinary.com/mock/image/upload/"
            f"v1/{self.folder}/{uuid4().hex}.{suffix}"
        )
        self.images[url] = content
        return url

    async def delete(self, url: str) -> None:
        """Forget a stored image."""
        self.images.pop(url, None)
        self.deleted.append(url)
