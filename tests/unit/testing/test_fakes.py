"""Unit tests – flagsync testing fakes."""
from __future__ import annotations

import asyncio

import pytest

from flagsync.application.feature_flags import ADDONS, DISCORD_INTEGRATION
from flagsync.kernel.errors import StoreUnavailableError
from flagsync.testing.fakes import FailingKeyValueStore, FakeClock, FakeFeatureFlagProvider, FrozenClock


class TestFakeClock:
    def test_pinned(self) -> None:
        clock = FakeClock()
        assert isinstance(clock, FrozenClock)
        assert clock.now().year == 2026
        assert clock.epoch_millis() == FakeClock().epoch_millis()


class TestFailingKeyValueStore:
    def test_fails_by_operation_and_prefix(self) -> None:
        async def run() -> None:
            store = FailingKeyValueStore().fail_on("set", "flags:")
            await store.set("installations", "[]")
            with pytest.raises(StoreUnavailableError):
                await store.set("flags:acme", "{}")
            assert ("set", "flags:acme") in store.calls

        asyncio.run(run())

    def test_heal(self) -> None:
        async def run() -> None:
            store = FailingKeyValueStore().fail_on("get")
            store.heal()
            assert await store.get("k") is None
            assert await store.ping() is True

        asyncio.run(run())


class TestFakeFeatureFlagProvider:
    def test_enable_disable(self) -> None:
        async def run() -> None:
            flags = FakeFeatureFlagProvider().enable("acme", DISCORD_INTEGRATION)
            assert await flags.is_enabled(DISCORD_INTEGRATION, {"slug": "acme"})
            assert not await flags.is_enabled(DISCORD_INTEGRATION, {"slug": "globex"})
            assert await flags.is_enabled(ADDONS, {"slug": "globex"})
            flags.disable("acme", "discord_integration")
            assert await flags.get_variant(DISCORD_INTEGRATION, {"slug": "acme"}) == "off"

        asyncio.run(run())

    def test_broken_tenant_raises(self) -> None:
        async def run() -> None:
            flags = FakeFeatureFlagProvider().break_tenant("acme")
            with pytest.raises(RuntimeError):
                await flags.is_enabled(ADDONS, {"slug": "acme"})

        asyncio.run(run())
