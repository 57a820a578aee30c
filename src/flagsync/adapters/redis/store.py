"""Redis adapter – RedisKeyValueStore."""
from __future__ import annotations

from typing import Any

from flagsync.kernel.errors import StoreUnavailableError


def _require_redis() -> Any:
    try:
        import redis.asyncio as aioredis
        return aioredis
    except ImportError as exc:
        raise ImportError("Install 'flagsync[redis]' to use the Redis store backend") from exc


class RedisKeyValueStore:
    """KeyValueStore over ``redis.asyncio`` (plain GET / SET / DEL)."""

    name = "redis"

    def __init__(self, url: str, **kwargs: Any) -> None:
        aioredis = _require_redis()
        kwargs.setdefault("decode_responses", True)
        self._client = aioredis.from_url(url, **kwargs)

    async def get(self, key: str) -> str | None:
        try:
            value = await self._client.get(key)
        except Exception as exc:
            raise StoreUnavailableError("get", key, cause=exc) from exc
        if isinstance(value, bytes):
            return value.decode("utf-8")
        return value

    async def set(self, key: str, value: str) -> None:
        try:
            await self._client.set(key, value)
        except Exception as exc:
            raise StoreUnavailableError("set", key, cause=exc) from exc

    async def delete(self, key: str) -> None:
        try:
            await self._client.delete(key)
        except Exception as exc:
            raise StoreUnavailableError("delete", key, cause=exc) from exc

    async def ping(self) -> bool:
        try:
            return bool(await self._client.ping())
        except Exception as exc:
            raise StoreUnavailableError("ping", "-", cause=exc) from exc

    async def close(self) -> None:
        await self._client.aclose()


__all__ = ["RedisKeyValueStore"]
