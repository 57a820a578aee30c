"""Application bot – which installations the Discord bot should serve."""
from __future__ import annotations

import dataclasses
import hmac
from typing import Any

from flagsync.application.feature_flags import DISCORD_INTEGRATION, FeatureFlagProvider
from flagsync.application.installations import InstallationMetaService, InstallationRegistry
from flagsync.kernel.errors import AuthenticationError
from flagsync.observability.logging import get_logger

logger = get_logger(__name__)


@dataclasses.dataclass(frozen=True)
class BotAssignment:
    slug: str
    platform_url: str
    discord_enabled: bool = True

    def to_dict(self) -> dict[str, Any]:
        return dataclasses.asdict(self)


class BotAssignmentService:
    """Lists tenants with ``discord_integration`` on and a platform URL configured."""

    def __init__(
        self,
        registry: InstallationRegistry,
        meta: InstallationMetaService,
        flags: FeatureFlagProvider,
        bot_token: str | None,
    ) -> None:
        self._registry = registry
        self._meta = meta
        self._flags = flags
        self._token = bot_token or ""

    def authorize(self, token: str | None) -> None:
        """Constant-time token check; an unset bot token rejects everyone."""
        if not self._token or not token:
            raise AuthenticationError("unauthorized")
        if not hmac.compare_digest(self._token.encode(), token.encode()):
            raise AuthenticationError("unauthorized")

    async def list_assignments(self) -> list[BotAssignment]:
        items: list[BotAssignment] = []
        for slug in await self._registry.list():
            try:
                enabled = await self._flags.is_enabled(DISCORD_INTEGRATION, {"slug": slug})
                meta = await self._meta.get(slug)
            except Exception as exc:  # noqa: BLE001 – one broken tenant must not hide the rest
                logger.warning("bot.assignment_skipped", slug=slug, error=repr(exc))
                continue
            if enabled and meta.platform_url:
                items.append(BotAssignment(slug=slug, platform_url=meta.platform_url))
        return items


__all__ = ["BotAssignment", "BotAssignmentService"]
