"""Application refresh – RefreshNotifier tells a platform its cached flags are stale.

One notification walks ``ResolveURL -> Sign -> Deliver`` and ends in exactly
one of :class:`RefreshOutcome`:

* ``SUPPRESSED`` – neither tenant metadata nor the override names a platform;
* ``SUCCESS`` – the platform answered 2xx;
* ``FAILED`` – non-2xx (redirects included) or a transport error.

Failures are logged and returned, never raised and never retried: the
mutation that triggered the notification has already been committed.
"""
from __future__ import annotations

import time
from collections import deque

from flagsync.adapters.http import HttpxHttpClient
from flagsync.application.installations.meta import InstallationMetaService
from flagsync.application.refresh.record import RefreshDeliveryRecord, RefreshOutcome
from flagsync.application.refresh.url import build_refresh_url, normalize_platform_url
from flagsync.config.service import DEFAULT_REFRESH_PATH
from flagsync.kernel.errors import ExternalServiceError, MalformedInputError, NotificationError
from flagsync.observability.logging import get_logger
from flagsync.security import SIGNATURE_HEADER, SignatureAuthority
from flagsync.storage import Codec

logger = get_logger(__name__)

ORIGIN_HEADER = "X-Flags-Origin"


def refresh_payload(slug: str) -> bytes:
    """Minimal signed body: ``{"slug":"<slug>"}``."""
    return Codec.dumps({"slug": slug}).encode("utf-8")


class RefreshNotifier:
    """Resolves, signs and delivers one refresh callback per call."""

    def __init__(
        self,
        meta: InstallationMetaService,
        signer: SignatureAuthority,
        http: HttpxHttpClient,
        *,
        platform_url_override: str | None = None,
        refresh_path: str = DEFAULT_REFRESH_PATH,
        public_base_url: str | None = None,
        log_size: int = 100,
    ) -> None:
        self._meta = meta
        self._signer = signer
        self._http = http
        self._override = platform_url_override or None
        self._refresh_path = refresh_path
        self._public_base_url = (public_base_url or "").rstrip("/") or None
        self.delivery_log: deque[RefreshDeliveryRecord] = deque(maxlen=log_size)

    async def resolve_url(self, slug: str) -> str | None:
        """Tenant ``platform_url`` first, then the configured override."""
        meta = await self._meta.get(slug)
        base = meta.platform_url
        if base is None and self._override:
            try:
                base = normalize_platform_url(self._override)
            except MalformedInputError as exc:
                logger.warning("refresh.invalid_override", error=exc.message)
        if base is None:
            return None
        return build_refresh_url(base, self._refresh_path)

    async def notify(self, slug: str) -> RefreshDeliveryRecord:
        record = RefreshDeliveryRecord(slug=slug)
        try:
            await self._notify(record)
        except Exception as exc:  # noqa: BLE001 – a notification must never fail its caller
            record.outcome = RefreshOutcome.FAILED
            record.error = repr(exc)
            logger.exception("refresh.unexpected_error", slug=slug)
        self.delivery_log.append(record)
        return record

    async def _notify(self, record: RefreshDeliveryRecord) -> None:
        slug = record.slug
        url = await self.resolve_url(slug)
        if url is None:
            record.outcome = RefreshOutcome.SUPPRESSED
            logger.info("refresh.suppressed", slug=slug, reason="no platform url")
            return
        record.url = url

        body = refresh_payload(slug)
        headers = {
            "Content-Type": "application/json",
            "Content-Length": str(len(body)),
            SIGNATURE_HEADER: self._signer.sign(body),
        }
        if self._public_base_url:
            headers[ORIGIN_HEADER] = self._public_base_url

        t0 = time.monotonic()
        try:
            response = await self._http.post(url, content=body, headers=headers)
        except ExternalServiceError as exc:
            record.duration_ms = (time.monotonic() - t0) * 1000
            record.outcome = RefreshOutcome.FAILED
            record.http_status = exc.status_code
            record.error = exc.message
            record.response_preview = exc.response_preview
            failure = NotificationError(slug, exc.message, status_code=exc.status_code, cause=exc)
            logger.warning(
                "refresh.failed",
                slug=slug,
                url=url,
                status=exc.status_code,
                preview=exc.response_preview,
                error=failure.to_dict(),
            )
            return

        record.duration_ms = (time.monotonic() - t0) * 1000
        record.outcome = RefreshOutcome.SUCCESS
        record.http_status = response.status_code
        logger.info(
            "refresh.delivered",
            slug=slug,
            url=url,
            status=response.status_code,
            duration_ms=round(record.duration_ms, 2),
        )


__all__ = ["ORIGIN_HEADER", "RefreshNotifier", "refresh_payload"]
