"""API – FlagSyncContainer wires every collaborator exactly once per process."""
from __future__ import annotations

import dataclasses

from flagsync.adapters.http import HttpxHttpClient
from flagsync.adapters.redis import RedisKeyValueStore
from flagsync.adapters.upstash import UpstashKeyValueStore
from flagsync.application.bot import BotAssignmentService
from flagsync.application.feature_flags import FlagDocumentManager, StoreFeatureFlagProvider
from flagsync.application.installations import (
    DiscordConfigService,
    InstallationMetaService,
    InstallationRegistry,
)
from flagsync.application.refresh import RefreshNotifier, RefreshScheduler
from flagsync.config import FlagSyncSettings
from flagsync.kernel.time import Clock, SystemClock
from flagsync.observability.health import HealthRegistry, KeyValueStoreHealthCheck
from flagsync.observability.logging import get_logger
from flagsync.security import SignatureAuthority
from flagsync.storage import DocumentStore, InMemoryKeyValueStore, KeyValueStore

logger = get_logger(__name__)


@dataclasses.dataclass
class FlagSyncContainer:
    settings: FlagSyncSettings
    store: KeyValueStore
    http: HttpxHttpClient
    documents: DocumentStore
    signer: SignatureAuthority
    registry: InstallationRegistry
    meta: InstallationMetaService
    discord: DiscordConfigService
    notifier: RefreshNotifier
    scheduler: RefreshScheduler
    flags: FlagDocumentManager
    provider: StoreFeatureFlagProvider
    bot: BotAssignmentService
    health: HealthRegistry

    async def aclose(self) -> None:
        """Wait for in-flight refreshes, then release the HTTP client and store."""
        await self.scheduler.drain()
        await self.http.aclose()
        close = getattr(self.store, "close", None)
        if close is not None:
            await close()


def build_store(settings: FlagSyncSettings) -> KeyValueStore:
    """Select the key-value backend named by ``settings.store_backend``."""
    if settings.store_backend == "redis":
        return RedisKeyValueStore(settings.redis_url)
    if settings.store_backend == "memory":
        return InMemoryKeyValueStore()
    return UpstashKeyValueStore(
        settings.kv_rest_url,
        settings.kv_rest_token,
        timeout=settings.notify_timeout,
    )


def build_container(
    settings: FlagSyncSettings,
    *,
    store: KeyValueStore | None = None,
    http: HttpxHttpClient | None = None,
    clock: Clock | None = None,
) -> FlagSyncContainer:
    store = store if store is not None else build_store(settings)
    http = http or HttpxHttpClient(timeout=settings.notify_timeout)
    documents = DocumentStore(store)
    signer = SignatureAuthority(settings.signing_secret)
    registry = InstallationRegistry(documents)
    meta = InstallationMetaService(documents, registry)
    notifier = RefreshNotifier(
        meta,
        signer,
        http,
        platform_url_override=settings.platform_url_override,
        refresh_path=settings.refresh_path,
        public_base_url=settings.public_base_url,
    )
    scheduler = RefreshScheduler(notifier)
    flags = FlagDocumentManager(documents, registry, scheduler, clock=clock or SystemClock())
    provider = StoreFeatureFlagProvider(flags)

    health = HealthRegistry()
    health.register(KeyValueStoreHealthCheck(store))

    logger.info(
        "container.built",
        store=getattr(store, "name", type(store).__name__),
        refresh_path=settings.refresh_path,
        override=bool(settings.platform_url_override),
    )
    return FlagSyncContainer(
        settings=settings,
        store=store,
        http=http,
        documents=documents,
        signer=signer,
        registry=registry,
        meta=meta,
        discord=DiscordConfigService(documents, registry),
        notifier=notifier,
        scheduler=scheduler,
        flags=flags,
        provider=provider,
        bot=BotAssignmentService(registry, meta, provider, settings.bot_token),
        health=health,
    )


__all__ = ["FlagSyncContainer", "build_container", "build_store"]
