from accounts.stores.cache_store import CacheKeyValueStore, InMemoryKeyValueStore
from accounts.stores.interfaces import AuthProvider, KeyValueStore
from accounts.stores.memory import InMemoryAuthProvider

__all__ = [
    "AuthProvider",
    "KeyValueStore",
    "CacheKeyValueStore",
    "InMemoryKeyValueStore",
    "InMemoryAuthProvider",
]
