"""Application feature flags – FeatureFlagProvider port + store-backed implementation."""
from __future__ import annotations

import abc
from typing import TYPE_CHECKING, Any

from flagsync.application.feature_flags.feature_flag import FeatureFlag

if TYPE_CHECKING:
    from flagsync.application.feature_flags.manager import FlagDocumentManager


class FeatureFlagProvider(abc.ABC):
    """Port: evaluate feature flags for a given context."""

    @abc.abstractmethod
    async def is_enabled(self, flag: FeatureFlag, context: dict[str, Any] | None = None) -> bool: ...

    @abc.abstractmethod
    async def get_variant(self, flag: FeatureFlag, context: dict[str, Any] | None = None) -> str | None: ...


class StoreFeatureFlagProvider(FeatureFlagProvider):
    """Evaluates a tenant's stored flags; the tenant is ``context["slug"]``.

    Without a slug the flag's ``default_value`` is returned.
    """

    def __init__(self, manager: "FlagDocumentManager") -> None:
        self._manager = manager

    async def is_enabled(self, flag: FeatureFlag, context: dict[str, Any] | None = None) -> bool:
        slug = (context or {}).get("slug")
        if not slug:
            return flag.default_value
        document = await self._manager.get_flags(slug)
        return document.is_enabled(flag.key)

    async def get_variant(self, flag: FeatureFlag, context: dict[str, Any] | None = None) -> str | None:
        return "on" if await self.is_enabled(flag, context) else "off"


__all__ = ["FeatureFlagProvider", "StoreFeatureFlagProvider"]
