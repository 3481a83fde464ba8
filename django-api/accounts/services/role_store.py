"""Role Store: identity id -> role, kept in local durable storage.

The whole mapping lives under one key as a JSON object. Writes are
read-modify-write without locking, so concurrent clients race and the last
writer wins. Roles are set once in practice, which keeps that acceptable.
"""

import json

import structlog

from accounts.domain import Role, RoleLookup, StorageUnavailableError
from accounts.stores.interfaces import KeyValueStore

logger = structlog.get_logger(__name__)

ROLE_STORAGE_KEY = "eventsphere_role_by_uid"


class RoleStore:
    """Best-effort role cache. Never raises to callers."""

    def __init__(self, kv_store: KeyValueStore, key: str = ROLE_STORAGE_KEY) -> None:
        self._kv = kv_store
        self._key = key

    async def lookup(self, uid: str) -> RoleLookup:
        try:
            mapping = await self._load()
        except StorageUnavailableError as exc:
            logger.warning("role_store.read_failed", uid=uid, detail=exc.detail)
            return RoleLookup(error=exc)
        return RoleLookup(role=_parse_role(mapping.get(uid)))

    async def get(self, uid: str) -> Role | None:
        return (await self.lookup(uid)).role

    async def set(self, uid: str, role: Role) -> bool:
        """Persist ``role`` for ``uid``. Returns False if storage failed."""
        try:
            mapping = await self._load()
            mapping[uid] = role.value
            await self._kv.set(self._key, json.dumps(mapping))
        except StorageUnavailableError as exc:
            logger.warning(
                "role_store.write_failed", uid=uid, role=role.value, detail=exc.detail
            )
            return False
        logger.info("role_store.role_set", uid=uid, role=role.value)
        return True

    async def _load(self) -> dict[str, str]:
        raw = await self._kv.get(self._key)
        if not raw:
            return {}
        try:
            mapping = json.loads(raw)
        except ValueError:
            logger.warning("role_store.corrupted", key=self._key)
            return {}
        if not isinstance(mapping, dict):
            logger.warning("role_store.corrupted", key=self._key)
            return {}
        return mapping


def _parse_role(value: object) -> Role | None:
    if value is None:
        return None
    try:
        return Role(value)
    except ValueError:
        logger.warning("role_store.unknown_role", value=value)
        return None
