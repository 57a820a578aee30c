"""Unit tests – RedisKeyValueStore (no running Redis required)."""
from __future__ import annotations

import asyncio
from typing import Any
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from flagsync.kernel.errors import StoreUnavailableError


def _make_store() -> tuple[Any, MagicMock]:
    """Return (RedisKeyValueStore, mock_client) without needing a real Redis."""
    mock_client = MagicMock()
    mock_client.get = AsyncMock(return_value=None)
    mock_client.set = AsyncMock()
    mock_client.delete = AsyncMock()
    mock_client.ping = AsyncMock(return_value=True)
    mock_client.aclose = AsyncMock()

    import flagsync.adapters.redis.store as store_mod

    mock_aioredis = MagicMock()
    mock_aioredis.from_url = MagicMock(return_value=mock_client)

    with patch.object(store_mod, "_require_redis", return_value=mock_aioredis):
        from flagsync.adapters.redis.store import RedisKeyValueStore
        store = RedisKeyValueStore("redis://localhost:6379")

    mock_aioredis.from_url.assert_called_once_with("redis://localhost:6379", decode_responses=True)
    return store, mock_client


class TestRedisKeyValueStore:
    def test_get_miss(self) -> None:
        async def run() -> None:
            store, client = _make_store()
            assert await store.get("flags:acme") is None
            client.get.assert_awaited_once_with("flags:acme")

        asyncio.run(run())

    def test_get_decodes_bytes(self) -> None:
        async def run() -> None:
            store, client = _make_store()
            client.get = AsyncMock(return_value=b'["acme"]')
            assert await store.get("installations") == '["acme"]'

        asyncio.run(run())

    def test_set_and_delete(self) -> None:
        async def run() -> None:
            store, client = _make_store()
            await store.set("k", '{"a":1}')
            await store.delete("k")
            client.set.assert_awaited_once_with("k", '{"a":1}')
            client.delete.assert_awaited_once_with("k")

        asyncio.run(run())

    @pytest.mark.parametrize("operation", ["get", "set", "delete"])
    def test_errors_map_to_store_unavailable(self, operation: str) -> None:
        async def run() -> None:
            store, client = _make_store()
            setattr(client, operation, AsyncMock(side_effect=ConnectionError("down")))
            args = ("k", "v") if operation == "set" else ("k",)
            with pytest.raises(StoreUnavailableError) as exc_info:
                await getattr(store, operation)(*args)
            assert exc_info.value.operation == operation

        asyncio.run(run())

    def test_ping(self) -> None:
        async def run() -> None:
            store, _ = _make_store()
            assert await store.ping() is True

        asyncio.run(run())

    def test_close(self) -> None:
        async def run() -> None:
            store, client = _make_store()
            await store.close()
            client.aclose.assert_awaited_once()

        asyncio.run(run())
