"""Testing fakes – FakeFeatureFlagProvider."""
from __future__ import annotations

from typing import Any

from flagsync.application.feature_flags.feature_flag import FeatureFlag
from flagsync.application.feature_flags.provider import FeatureFlagProvider


class FakeFeatureFlagProvider(FeatureFlagProvider):
    """In-memory :class:`FeatureFlagProvider` keyed by ``(slug, flag key)``.

    Usage::

        flags = FakeFeatureFlagProvider().enable("acme", "discord_integration")
        assert await flags.is_enabled(DISCORD_INTEGRATION, {"slug": "acme"})
    """

    def __init__(self) -> None:
        self._enabled: dict[tuple[str, str], bool] = {}
        self._broken: set[str] = set()

    async def is_enabled(self, flag: FeatureFlag, context: dict[str, Any] | None = None) -> bool:
        slug = (context or {}).get("slug", "")
        if slug in self._broken:
            raise RuntimeError(f"flags unavailable for {slug!r}")
        return self._enabled.get((slug, flag.key), flag.default_value)

    async def get_variant(self, flag: FeatureFlag, context: dict[str, Any] | None = None) -> str | None:
        return "on" if await self.is_enabled(flag, context) else "off"

    def enable(self, slug: str, flag: str | FeatureFlag) -> "FakeFeatureFlagProvider":
        key = flag.key if isinstance(flag, FeatureFlag) else flag
        self._enabled[(slug, key)] = True
        return self

    def disable(self, slug: str, flag: str | FeatureFlag) -> "FakeFeatureFlagProvider":
        key = flag.key if isinstance(flag, FeatureFlag) else flag
        self._enabled[(slug, key)] = False
        return self

    def break_tenant(self, slug: str) -> "FakeFeatureFlagProvider":
        """Make every evaluation for *slug* raise."""
        self._broken.add(slug)
        return self


__all__ = ["FakeFeatureFlagProvider"]
