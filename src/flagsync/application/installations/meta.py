"""Application installations – InstallationMeta and its service."""
from __future__ import annotations

import dataclasses
from typing import Any

from flagsync.application.installations.registry import InstallationRegistry
from flagsync.kernel.errors import MalformedInputError
from flagsync.kernel.types import normalize_platform_url
from flagsync.observability.logging import get_logger
from flagsync.storage import DocumentStore

logger = get_logger(__name__)


def meta_key(slug: str) -> str:
    return f"installation:{slug}:meta"


@dataclasses.dataclass(frozen=True)
class InstallationMeta:
    """Per-tenant metadata; ``platform_url`` is the consumer's normalised base address."""

    platform_url: str | None = None

    @classmethod
    def from_stored(cls, data: Any) -> "InstallationMeta":
        if not isinstance(data, dict):
            return cls()
        url = data.get("platform_url")
        if not isinstance(url, str) or not url.strip():
            return cls()
        try:
            return cls(platform_url=normalize_platform_url(url))
        except MalformedInputError:
            return cls()

    def to_dict(self) -> dict[str, Any]:
        return {"platform_url": self.platform_url}


class InstallationMetaService:
    """Get/put/delete the metadata document of a tenant."""

    def __init__(self, documents: DocumentStore, registry: InstallationRegistry) -> None:
        self._documents = documents
        self._registry = registry

    async def get(self, slug: str) -> InstallationMeta:
        """Tolerant read: missing, corrupt or unreadable metadata is empty."""
        return InstallationMeta.from_stored(await self._documents.read(meta_key(slug)))

    async def put(self, slug: str, platform_url: str | None) -> InstallationMeta:
        meta = InstallationMeta(platform_url=normalize_platform_url(platform_url))
        await self._documents.set(meta_key(slug), meta.to_dict())
        await self._registry.upsert(slug)
        logger.info("installation.meta_saved", slug=slug, platform_url=meta.platform_url)
        return meta

    async def delete(self, slug: str) -> None:
        await self._documents.delete(meta_key(slug))
        logger.info("installation.meta_deleted", slug=slug)


__all__ = ["InstallationMeta", "InstallationMetaService", "meta_key"]
