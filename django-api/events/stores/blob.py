"""Django storage implementation of the BlobStore."""

from asgiref.sync import sync_to_async
from django.core.files.base import ContentFile
from django.core.files.storage import Storage, default_storage

from events.stores.interfaces import BlobStore


class DjangoStorageBlobStore(BlobStore):
    """Blob store over any Django storage backend (filesystem, S3, ...)."""

    def __init__(self, storage: Storage | None = None) -> None:
        self._storage = storage if storage is not None else default_storage

    async def upload(self, path: str, data: bytes) -> str:
        return await sync_to_async(self._storage.save)(path, ContentFile(data))

    async def get_url(self, path: str) -> str:
        return self._storage.url(path)
