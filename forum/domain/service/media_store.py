"""Media store interface consumed by post operations."""


class MediaStore:
    """Generic image hosting interface.

    Implementations live in the adapter layer; the domain only deals in the
    public URL returned by ``upload``.
    """

    async def upload(self, content: bytes, content_type: str, filename: str) -> str:
        """Upload an image.

        Args:
            content: Raw image bytes
            content_type: MIME type reported by the client (``image/*``)
            filename: Original file name, used only as a hint

        Returns:
            Public URL of the stored image
        """
        raise NotImplementedError

    async def delete(self, url: str) -> None:
        """Delete a previously uploaded image.

        Args:
            url: URL returned by ``upload``
        """
        raise NotImplementedError
