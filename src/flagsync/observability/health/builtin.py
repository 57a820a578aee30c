from __future__ import annotations

from flagsync.observability.health.check import HealthCheck, HealthStatus
from flagsync.storage import KeyValueStore

__all__ = ["KeyValueStoreHealthCheck"]


class KeyValueStoreHealthCheck(HealthCheck):
    """Checks key-value store connectivity with a PING."""

    def __init__(self, store: KeyValueStore) -> None:
        self._store = store

    @property
    def name(self) -> str:
        return f"kv:{getattr(self._store, 'name', type(self._store).__name__)}"

    async def check(self) -> HealthStatus:
        try:
            ok = await self._store.ping()
        except Exception as exc:  # noqa: BLE001
            return HealthStatus(healthy=False, detail=str(exc))
        return HealthStatus(healthy=bool(ok), detail=None if ok else "unexpected ping reply")
