"""
Blob Store Interface (Port).

Binary object storage for photos. Objects are uploaded from a local
reference and exposed through a durable URL.
"""
from typing import Protocol


class BlobStore(Protocol):
    """Abstract interface for blob storage operations."""

    async def upload(self, path: str, local_ref: str, content_type: str) -> str:
        """
        Upload a local file to the given object path.

        Args:
            path: Object path inside the store (e.g. "images/u1/123.jpg")
            local_ref: Local file reference to read from
            content_type: MIME type recorded as object metadata

        Returns:
            Opaque handle identifying the stored object
        """
        ...

    async def get_durable_url(self, handle: str) -> str:
        """Return a URL that stays valid for the object behind `handle`."""
        ...
