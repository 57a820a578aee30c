"""Application installations – Discord channel configuration per tenant."""
from __future__ import annotations

import dataclasses
from typing import Any

from flagsync.application.installations.registry import InstallationRegistry
from flagsync.kernel.errors import MalformedInputError
from flagsync.observability.logging import get_logger
from flagsync.storage import DocumentStore

logger = get_logger(__name__)


def discord_key(slug: str) -> str:
    return f"installation:{slug}:discord"


@dataclasses.dataclass(frozen=True)
class DiscordConfig:
    guild_id: str = ""
    channels: tuple[str, ...] = ()

    @classmethod
    def from_stored(cls, data: Any) -> "DiscordConfig":
        if not isinstance(data, dict):
            return cls()
        guild_id = data.get("guild_id")
        channels = data.get("channels")
        return cls(
            guild_id=guild_id if isinstance(guild_id, str) else "",
            channels=tuple(str(c) for c in channels) if isinstance(channels, list) else (),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"guild_id": self.guild_id, "channels": list(self.channels)}


def _require_object(body: Any) -> dict[str, Any]:
    if not isinstance(body, dict):
        raise MalformedInputError("Discord configuration must be a JSON object")
    return body


class DiscordConfigService:
    """Full replace (``put``) and partial update (``patch``) of a tenant's Discord config."""

    def __init__(self, documents: DocumentStore, registry: InstallationRegistry) -> None:
        self._documents = documents
        self._registry = registry

    async def get(self, slug: str) -> DiscordConfig:
        return DiscordConfig.from_stored(await self._documents.read(discord_key(slug)))

    async def put(self, slug: str, body: Any) -> DiscordConfig:
        config = DiscordConfig.from_stored(_require_object(body))
        await self._documents.set(discord_key(slug), config.to_dict())
        await self._registry.upsert(slug)
        logger.info("installation.discord_saved", slug=slug, channels=len(config.channels))
        return config

    async def patch(self, slug: str, body: Any) -> DiscordConfig:
        patch = _require_object(body)
        current = await self.get(slug)
        guild_id = patch.get("guild_id")
        channels = patch.get("channels")
        updated = DiscordConfig(
            guild_id=guild_id if isinstance(guild_id, str) else current.guild_id,
            channels=tuple(str(c) for c in channels) if isinstance(channels, list) else current.channels,
        )
        await self._documents.set(discord_key(slug), updated.to_dict())
        logger.info("installation.discord_patched", slug=slug, channels=len(updated.channels))
        return updated


__all__ = ["DiscordConfig", "DiscordConfigService", "discord_key"]
