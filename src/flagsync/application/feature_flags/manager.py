"""Application feature flags – FlagDocumentManager.

Owns the per-tenant flag document (``flags:{slug}``) and its bounded history
log (``flags:{slug}:history``). A save is strictly ordered:

1. primary document write – failures propagate;
2. history prepend-and-truncate – failures are logged and swallowed;
3. installation registry upsert – failures are logged and swallowed;
4. refresh notification – scheduled as a detached task, never awaited here.
"""
from __future__ import annotations

from typing import Any, Mapping, Sequence

from flagsync.application.feature_flags.document import FeatureFlagDocument
from flagsync.application.feature_flags.feature_flag import DEFAULT_CATALOG, FeatureFlag
from flagsync.application.installations.registry import InstallationRegistry
from flagsync.application.refresh.scheduler import RefreshScheduler
from flagsync.kernel.errors import HistoryWriteError
from flagsync.kernel.time import Clock, SystemClock
from flagsync.observability.logging import get_logger
from flagsync.storage import DocumentStore

logger = get_logger(__name__)

MAX_HISTORY = 50


def flags_key(slug: str) -> str:
    return f"flags:{slug}"


def history_key(slug: str) -> str:
    return f"flags:{slug}:history"


class FlagDocumentManager:
    """Reads, overwrites and resets tenant flag documents."""

    def __init__(
        self,
        documents: DocumentStore,
        registry: InstallationRegistry,
        scheduler: RefreshScheduler,
        *,
        clock: Clock | None = None,
        catalog: Sequence[FeatureFlag] = DEFAULT_CATALOG,
        max_history: int = MAX_HISTORY,
    ) -> None:
        self._documents = documents
        self._registry = registry
        self._scheduler = scheduler
        self._clock = clock or SystemClock()
        self._catalog = tuple(catalog)
        self._max_history = max_history

    @property
    def catalog(self) -> tuple[FeatureFlag, ...]:
        return self._catalog

    async def find_flags(self, slug: str) -> FeatureFlagDocument | None:
        """Stored document normalised to the catalog; ``None`` if absent or corrupt."""
        stored = await self._documents.read(flags_key(slug))
        if stored is None:
            return None
        document = FeatureFlagDocument.from_stored(stored, self._catalog)
        if document is None:
            logger.warning("flags.corrupt_document", slug=slug)
        return document

    async def get_flags(self, slug: str) -> FeatureFlagDocument:
        """Never raises: absent, corrupt or unreadable documents yield the zero value."""
        return await self.find_flags(slug) or FeatureFlagDocument.zero(self._catalog)

    async def put_flags(
        self,
        slug: str,
        incoming: Mapping[str, Any] | None,
        actor: str | None = None,
    ) -> FeatureFlagDocument:
        """Overwrite the whole ``features`` map (unchecked means ``False``)."""
        document = FeatureFlagDocument(
            features=FeatureFlagDocument.coerce_features(incoming, self._catalog),
            updated_at=self._clock.epoch_millis(),
            updated_by=(actor or "").strip() or None,
        )
        await self._documents.set(flags_key(slug), document.to_dict())
        logger.info("flags.saved", slug=slug, features=document.features, actor=document.updated_by)

        await self._append_history(slug, document)
        await self._register(slug)
        self._scheduler.schedule(slug)
        return document

    async def reset_flags(self, slug: str, actor: str | None = None) -> None:
        """Explicit reset: delete the document; history is left untouched."""
        await self._documents.delete(flags_key(slug))
        logger.info("flags.reset", slug=slug, actor=actor)
        self._scheduler.schedule(slug)

    async def history(self, slug: str) -> list[FeatureFlagDocument]:
        stored = await self._documents.read(history_key(slug), default=[])
        if not isinstance(stored, list):
            return []
        entries = (FeatureFlagDocument.from_stored(item, self._catalog) for item in stored)
        return [entry for entry in entries if entry is not None]

    async def _append_history(self, slug: str, document: FeatureFlagDocument) -> None:
        try:
            stored = await self._documents.load(history_key(slug))
            entries = stored if isinstance(stored, list) else []
            entries.insert(0, document.to_dict())
            await self._documents.set(history_key(slug), entries[: self._max_history])
        except Exception as exc:  # noqa: BLE001 – history is best effort
            failure = HistoryWriteError(f"History append failed for '{slug}'", cause=exc)
            logger.warning("flags.history_write_failed", slug=slug, error=failure.to_dict())

    async def _register(self, slug: str) -> None:
        try:
            await self._registry.upsert(slug)
        except Exception as exc:  # noqa: BLE001 – the flag change already took effect
            logger.warning("flags.registry_upsert_failed", slug=slug, error=repr(exc))


__all__ = ["MAX_HISTORY", "FlagDocumentManager", "flags_key", "history_key"]
