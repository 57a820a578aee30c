"""Unit tests – HealthRegistry and KeyValueStoreHealthCheck."""
from __future__ import annotations

import asyncio

from flagsync.observability.health import (
    HealthCheck,
    HealthRegistry,
    HealthStatus,
    KeyValueStoreHealthCheck,
)
from flagsync.storage import InMemoryKeyValueStore
from flagsync.testing.fakes import FailingKeyValueStore


class _ExplodingCheck(HealthCheck):
    @property
    def name(self) -> str:
        return "exploding"

    async def check(self) -> HealthStatus:
        raise RuntimeError("kaboom")


class TestKeyValueStoreHealthCheck:
    def test_healthy(self) -> None:
        async def run() -> None:
            check = KeyValueStoreHealthCheck(InMemoryKeyValueStore())
            status = await check.timed_check()
            assert check.name == "kv:memory"
            assert status.healthy
            assert status.latency_ms >= 0

        asyncio.run(run())

    def test_store_failure(self) -> None:
        async def run() -> None:
            status = await KeyValueStoreHealthCheck(FailingKeyValueStore().fail_on("ping")).check()
            assert not status.healthy
            assert status.detail

        asyncio.run(run())


class TestHealthRegistry:
    def test_overall_and_to_dict(self) -> None:
        async def run() -> None:
            registry = HealthRegistry()
            registry.register(KeyValueStoreHealthCheck(InMemoryKeyValueStore()))
            registry.register(_ExplodingCheck())
            report = await registry.run_all()
            assert not report.overall
            data = report.to_dict()
            assert data["healthy"] is False
            assert data["checks"]["kv:memory"]["healthy"] is True
            assert "kaboom" in data["checks"]["exploding"]["detail"]

        asyncio.run(run())

    def test_empty_registry_is_healthy(self) -> None:
        async def run() -> None:
            assert (await HealthRegistry().run_all()).overall

        asyncio.run(run())
