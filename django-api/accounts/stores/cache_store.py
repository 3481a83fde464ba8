"""Key-value stores backing the Role Store."""

import structlog
from django.core.cache import caches

from accounts.domain import StorageUnavailableError
from accounts.stores.interfaces import KeyValueStore

logger = structlog.get_logger(__name__)


class CacheKeyValueStore(KeyValueStore):
    """Django cache backed store.

    The default ``roles`` alias is a FileBasedCache without expiry, so values
    survive restarts of the process.
    """

    def __init__(self, alias: str = "roles") -> None:
        self._alias = alias

    async def get(self, key: str) -> str | None:
        try:
            value = await caches[self._alias].aget(key)
        except Exception as exc:
            raise StorageUnavailableError(
                f"cache {self._alias!r} read failed: {exc}"
            ) from exc
        if value is None or isinstance(value, str):
            return value
        logger.warning(
            "kv_store.unexpected_value",
            alias=self._alias,
            key=key,
            value_type=type(value).__name__,
        )
        return None

    async def set(self, key: str, value: str) -> None:
        try:
            await caches[self._alias].aset(key, value, timeout=None)
        except Exception as exc:
            raise StorageUnavailableError(
                f"cache {self._alias!r} write failed: {exc}"
            ) from exc


class InMemoryKeyValueStore(KeyValueStore):
    """Process-local store, used by tests and the in-memory backend."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    async def get(self, key: str) -> str | None:
        return self._data.get(key)

    async def set(self, key: str, value: str) -> None:
        self._data[key] = value
