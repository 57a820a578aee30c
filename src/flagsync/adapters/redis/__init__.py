"""Redis adapter – key-value store backend."""
from flagsync.adapters.redis.store import RedisKeyValueStore

__all__ = ["RedisKeyValueStore"]
