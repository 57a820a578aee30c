"""Application installations – InstallationRegistry.

The registry is a single store document (``installations``) holding the
sorted, duplicate-free list of every tenant slug seen by a mutation.

Known non-atomicity: the store exposes no transaction or compare-and-set
primitive, so :meth:`InstallationRegistry.upsert` is a plain read-modify-write.
Two concurrent upserts of *different* new slugs can both read the old list
and the last writer wins, dropping the other slug until that tenant's next
mutation upserts it again.
"""
from __future__ import annotations

from typing import Any

from flagsync.kernel.types import normalize_slug
from flagsync.observability.logging import get_logger
from flagsync.storage import Codec, DocumentStore

logger = get_logger(__name__)

REGISTRY_KEY = "installations"


def parse_slug_list(value: Any) -> list[str]:
    """Accept the canonical array and legacy wrappers written by older revisions.

    Recognised shapes: ``["a","b"]``, a JSON string holding that array, or an
    object ``{"result": ...}`` / ``{"value": ...}`` wrapping either of them.
    """
    if isinstance(value, dict):
        value = value.get("result", value.get("value"))
    if isinstance(value, str):
        value = Codec.decode(value)
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, str)]


class InstallationRegistry:
    """Maintains the set of known tenant slugs as one sorted list document."""

    def __init__(self, documents: DocumentStore, key: str = REGISTRY_KEY) -> None:
        self._documents = documents
        self._key = key

    async def list(self) -> list[str]:
        """Return the registered slugs; an unreadable registry reads as empty."""
        return parse_slug_list(await self._documents.read(self._key))

    async def raw(self) -> str | None:
        """Return the stored registry string unmodified (diagnostics)."""
        return await self._documents.get(self._key)

    async def upsert(self, slug: str) -> bool:
        """Add the normalised *slug* if absent; return ``True`` when it was added.

        The current list is read strictly: a store failure propagates instead
        of being mistaken for an empty registry and overwriting it.
        """
        normalized = normalize_slug(slug)
        if not normalized:
            return False
        current = parse_slug_list(await self._documents.load(self._key))
        if normalized in current:
            return False
        updated = sorted(set(current) | {normalized})
        await self._documents.set(self._key, updated)
        logger.info("installations.registered", slug=normalized, total=len(updated))
        return True


__all__ = ["REGISTRY_KEY", "InstallationRegistry", "parse_slug_list"]
