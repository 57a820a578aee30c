"""Application refresh – platform cache invalidation callbacks."""
from flagsync.application.refresh.notifier import ORIGIN_HEADER, RefreshNotifier, refresh_payload
from flagsync.application.refresh.record import RefreshDeliveryRecord, RefreshOutcome
from flagsync.application.refresh.scheduler import RefreshScheduler
from flagsync.application.refresh.url import build_refresh_url, normalize_platform_url

__all__ = [
    "ORIGIN_HEADER",
    "RefreshDeliveryRecord",
    "RefreshNotifier",
    "RefreshOutcome",
    "RefreshScheduler",
    "build_refresh_url",
    "normalize_platform_url",
    "refresh_payload",
]
