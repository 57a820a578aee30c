"""Storage – DocumentStore: typed access to the key-value store through the Codec."""
from __future__ import annotations

from typing import Any

from flagsync.kernel.errors import StoreUnavailableError
from flagsync.observability.logging import get_logger
from flagsync.storage.codec import Codec
from flagsync.storage.store import KeyValueStore

logger = get_logger(__name__)


class DocumentStore:
    """Get/set/delete over opaque string keys.

    * :meth:`set` always routes through :meth:`Codec.encode` so exactly one
      canonical encoding is persisted; failures propagate.
    * :meth:`get` returns the raw stored string unmodified; failures propagate.
    * :meth:`read` is the tolerant variant used on serving paths: a store
      failure is logged and treated as "no value".
    """

    def __init__(self, store: KeyValueStore, codec: type[Codec] | Codec = Codec) -> None:
        self._store = store
        self._codec = codec

    @property
    def backend(self) -> KeyValueStore:
        return self._store

    async def get(self, key: str) -> str | None:
        return await self._store.get(key)

    async def set(self, key: str, value: Any) -> None:
        await self._store.set(key, self._codec.encode(value))

    async def delete(self, key: str) -> None:
        await self._store.delete(key)

    async def load(self, key: str) -> Any | None:
        """Decode the stored value; store errors propagate."""
        return self._codec.decode(await self._store.get(key))

    async def read(self, key: str, default: Any = None) -> Any:
        """Decode the stored value, degrading to *default* on any failure."""
        try:
            raw = await self._store.get(key)
        except StoreUnavailableError as exc:
            logger.warning("store.read_degraded", key=key, error=exc.message)
            return default
        value = self._codec.decode(raw)
        if value is None:
            if raw is not None:
                logger.warning("store.undecodable_value", key=key, preview=raw[:80])
            return default
        return value


__all__ = ["DocumentStore"]
