"""Storage – KeyValueStore port + in-memory implementation."""
from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class KeyValueStore(Protocol):
    """Port: opaque string-keyed, string-valued store with no transactions.

    Implementations raise :class:`~flagsync.kernel.errors.StoreUnavailableError`
    on transport or backend failures.
    """

    async def get(self, key: str) -> str | None: ...
    async def set(self, key: str, value: str) -> None: ...
    async def delete(self, key: str) -> None: ...
    async def ping(self) -> bool: ...


class InMemoryKeyValueStore:
    """Dict-backed KeyValueStore for tests and local development."""

    name = "memory"

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    async def get(self, key: str) -> str | None:
        return self._data.get(key)

    async def set(self, key: str, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError(f"KeyValueStore values must be str, got {type(value).__name__}")
        self._data[key] = value

    async def delete(self, key: str) -> None:
        self._data.pop(key, None)

    async def ping(self) -> bool:
        return True

    async def close(self) -> None:
        return None

    def snapshot(self) -> dict[str, str]:
        """Return a copy of the raw stored strings."""
        return dict(self._data)


__all__ = ["InMemoryKeyValueStore", "KeyValueStore"]
