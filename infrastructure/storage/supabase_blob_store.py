"""
Supabase Storage implementation of BlobStore.

The supabase client is synchronous, so each call runs in a worker thread to
keep the event loop free. Objects are written with upsert enabled; profile
photos rely on overwriting the same path.
"""
import asyncio
import logging

from supabase import Client

logger = logging.getLogger(__name__)


class SupabaseBlobStore:
    """
    Supabase Storage bucket implementation of BlobStore protocol.

    The handle returned by upload is the object path inside the bucket.
    Durable URLs are the bucket's public URLs, so the bucket must be public.
    """

    def __init__(self, client: Client, bucket: str):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance
            bucket: Storage bucket holding the photos
        """
        self._client = client
        self._bucket = bucket

    def _upload_sync(self, path: str, local_ref: str, content_type: str) -> str:
        with open(local_ref, "rb") as f:
            self._client.storage.from_(self._bucket).upload(
                path=path,
                file=f.read(),
                file_options={"content-type": content_type, "upsert": "true"},
            )
        return path

    async def upload(self, path: str, local_ref: str, content_type: str) -> str:
        handle = await asyncio.to_thread(self._upload_sync, path, local_ref, content_type)
        logger.debug(f"Uploaded {local_ref} to {self._bucket}/{path}")
        return handle

    async def get_durable_url(self, handle: str) -> str:
        return await asyncio.to_thread(
            self._client.storage.from_(self._bucket).get_public_url, handle
        )
