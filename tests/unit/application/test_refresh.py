"""Unit tests – refresh URL resolution, RefreshNotifier and RefreshScheduler."""
from __future__ import annotations

import asyncio
import hashlib
import hmac
from typing import Any

import httpx
import respx

from flagsync.adapters.http import HttpxHttpClient
from flagsync.application.installations import InstallationMetaService, InstallationRegistry
from flagsync.application.installations.meta import meta_key
from flagsync.application.refresh import (
    ORIGIN_HEADER,
    RefreshNotifier,
    RefreshOutcome,
    RefreshScheduler,
    build_refresh_url,
    refresh_payload,
)
from flagsync.security import SignatureAuthority
from flagsync.storage import DocumentStore, InMemoryKeyValueStore
from flagsync.testing.fakes import FailingKeyValueStore

SECRET = "s3cret"
REFRESH_URL = "https://platform.example/api/flags/refresh"


def _notifier(
    store: InMemoryKeyValueStore | None = None,
    *,
    platform_url: str | None = "https://platform.example",
    **kwargs: Any,
) -> RefreshNotifier:
    if store is None:
        initial = {} if platform_url is None else {meta_key("acme"): f'{{"platform_url":"{platform_url}"}}'}
        store = InMemoryKeyValueStore(initial)
    documents = DocumentStore(store)
    meta = InstallationMetaService(documents, InstallationRegistry(documents))
    return RefreshNotifier(meta, SignatureAuthority(SECRET), HttpxHttpClient(timeout=5.0), **kwargs)


# ---------------------------------------------------------------------------
# URL construction
# ---------------------------------------------------------------------------


class TestBuildRefreshUrl:
    def test_appends_path(self) -> None:
        assert build_refresh_url("https://platform.example", "/api/flags/refresh") == REFRESH_URL

    def test_does_not_duplicate_path(self) -> None:
        assert build_refresh_url(REFRESH_URL, "/api/flags/refresh") == REFRESH_URL

    def test_path_without_leading_slash(self) -> None:
        assert build_refresh_url("https://platform.example", "hooks/") == "https://platform.example/hooks"


class TestResolveUrl:
    def test_meta_wins_over_override(self) -> None:
        async def run() -> None:
            notifier = _notifier(platform_url_override="https://fallback.example")
            assert await notifier.resolve_url("acme") == REFRESH_URL

        asyncio.run(run())

    def test_override_used_when_meta_missing(self) -> None:
        async def run() -> None:
            notifier = _notifier(platform_url=None, platform_url_override="http://fallback.example/")
            assert await notifier.resolve_url("acme") == "https://fallback.example/api/flags/refresh"

        asyncio.run(run())

    def test_meta_read_failure_means_no_meta(self) -> None:
        async def run() -> None:
            store = FailingKeyValueStore().fail_on("get")
            notifier = _notifier(store, platform_url=None, platform_url_override="fallback.example")
            assert await notifier.resolve_url("acme") == "https://fallback.example/api/flags/refresh"

        asyncio.run(run())

    def test_custom_refresh_path(self) -> None:
        async def run() -> None:
            notifier = _notifier(refresh_path="/hooks/flags")
            assert await notifier.resolve_url("acme") == "https://platform.example/hooks/flags"

        asyncio.run(run())


# ---------------------------------------------------------------------------
# RefreshNotifier
# ---------------------------------------------------------------------------


class TestNotify:
    @respx.mock
    def test_success_is_signed(self) -> None:
        route = respx.post(REFRESH_URL).mock(return_value=httpx.Response(200, json={"ok": True}))

        async def run() -> None:
            record = await _notifier().notify("acme")
            assert record.outcome is RefreshOutcome.SUCCESS
            assert record.http_status == 200
            sent = route.calls.last.request
            assert sent.content == b'{"slug":"acme"}'
            expected = hmac.new(SECRET.encode(), b'{"slug":"acme"}', hashlib.sha256).hexdigest()
            assert sent.headers["x-signature"] == expected
            assert sent.headers["content-type"] == "application/json"
            assert sent.headers["content-length"] == str(len(b'{"slug":"acme"}'))
            assert ORIGIN_HEADER.lower() not in sent.headers

        asyncio.run(run())

    @respx.mock
    def test_origin_header(self) -> None:
        route = respx.post(REFRESH_URL).mock(return_value=httpx.Response(204))

        async def run() -> None:
            await _notifier(public_base_url="https://flags.example/").notify("acme")
            assert route.calls.last.request.headers[ORIGIN_HEADER] == "https://flags.example"

        asyncio.run(run())

    def test_suppressed_without_url(self) -> None:
        async def run() -> None:
            with respx.mock(assert_all_called=False) as mock:
                record = await _notifier(platform_url=None).notify("acme")
                assert record.outcome is RefreshOutcome.SUPPRESSED
                assert record.url is None
                assert not mock.calls

        asyncio.run(run())

    @respx.mock
    def test_non_2xx_is_failed_with_preview(self) -> None:
        respx.post(REFRESH_URL).mock(return_value=httpx.Response(500, text="x" * 500))

        async def run() -> None:
            record = await _notifier().notify("acme")
            assert record.outcome is RefreshOutcome.FAILED
            assert record.http_status == 500
            assert record.response_preview == "x" * 200

        asyncio.run(run())

    @respx.mock
    def test_redirect_is_not_followed(self) -> None:
        respx.post(REFRESH_URL).mock(
            return_value=httpx.Response(307, headers={"Location": "http://platform.example/api/flags/refresh"})
        )
        downgraded = respx.post("http://platform.example/api/flags/refresh").mock(
            return_value=httpx.Response(200)
        )

        async def run() -> None:
            record = await _notifier().notify("acme")
            assert record.outcome is RefreshOutcome.FAILED
            assert record.http_status == 307
            assert not downgraded.called

        asyncio.run(run())

    @respx.mock
    def test_transport_error_is_failed(self) -> None:
        respx.post(REFRESH_URL).mock(side_effect=httpx.ConnectError("refused"))

        async def run() -> None:
            notifier = _notifier()
            record = await notifier.notify("acme")
            assert record.outcome is RefreshOutcome.FAILED
            assert record.http_status is None
            assert record.error
            assert notifier.delivery_log[-1] is record

        asyncio.run(run())

    def test_payload(self) -> None:
        assert refresh_payload("acme") == b'{"slug":"acme"}'


# ---------------------------------------------------------------------------
# RefreshScheduler
# ---------------------------------------------------------------------------


class _RecordingNotifier:
    def __init__(self, fail: bool = False) -> None:
        self.slugs: list[str] = []
        self._fail = fail

    async def notify(self, slug: str) -> None:
        await asyncio.sleep(0)
        if self._fail:
            raise RuntimeError("boom")
        self.slugs.append(slug)


class TestRefreshScheduler:
    def test_schedule_and_drain(self) -> None:
        async def run() -> None:
            notifier = _RecordingNotifier()
            scheduler = RefreshScheduler(notifier)  # type: ignore[arg-type]
            scheduler.schedule("acme")
            scheduler.schedule("globex")
            assert scheduler.pending == 2
            await scheduler.drain()
            assert scheduler.pending == 0
            assert sorted(notifier.slugs) == ["acme", "globex"]

        asyncio.run(run())

    def test_task_exception_is_contained(self) -> None:
        async def run() -> None:
            scheduler = RefreshScheduler(_RecordingNotifier(fail=True))  # type: ignore[arg-type]
            scheduler.schedule("acme")
            await scheduler.drain()
            assert scheduler.pending == 0

        asyncio.run(run())

    def test_without_event_loop_does_not_raise(self) -> None:
        scheduler = RefreshScheduler(_RecordingNotifier())  # type: ignore[arg-type]
        scheduler.schedule("acme")
        assert scheduler.pending == 0
