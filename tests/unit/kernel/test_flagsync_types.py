"""Unit tests – TenantSlug, platform URL normalisation, clocks."""
from __future__ import annotations

from datetime import UTC, datetime

import pytest

from flagsync.kernel.errors import MalformedInputError
from flagsync.kernel.time import FrozenClock, SystemClock
from flagsync.kernel.types import TenantSlug, normalize_platform_url, normalize_slug


# ---------------------------------------------------------------------------
# TenantSlug
# ---------------------------------------------------------------------------


class TestTenantSlug:
    def test_normalizes_case_and_whitespace(self) -> None:
        assert TenantSlug.parse(" Acme ") == TenantSlug.parse("acme")
        assert str(TenantSlug.parse("Foo ")) == "foo"

    @pytest.mark.parametrize("value", ["acme", "a", "acme-corp", "acme_2", "acme.io"])
    def test_valid(self, value: str) -> None:
        assert TenantSlug.parse(value).value == value

    @pytest.mark.parametrize("value", ["", "  ", "acme:meta", "-acme", "acme-", "ac me", "acmé"])
    def test_invalid(self, value: str) -> None:
        with pytest.raises(MalformedInputError):
            TenantSlug.parse(value)

    def test_normalize_slug_none(self) -> None:
        assert normalize_slug(None) == ""


# ---------------------------------------------------------------------------
# normalize_platform_url
# ---------------------------------------------------------------------------


class TestNormalizePlatformUrl:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("http://example.com/", "https://example.com"),
            ("https://example.com", "https://example.com"),
            ("example.com///", "https://example.com"),
            ("HTTP://example.com/base/", "https://example.com/base"),
            ("  https://shop.example.com:8443/  ", "https://shop.example.com:8443"),
        ],
    )
    def test_normalizes(self, raw: str, expected: str) -> None:
        assert normalize_platform_url(raw) == expected

    @pytest.mark.parametrize("raw", [None, "", "   "])
    def test_blank_is_none(self, raw: str | None) -> None:
        assert normalize_platform_url(raw) is None

    def test_rejects_other_schemes(self) -> None:
        with pytest.raises(MalformedInputError):
            normalize_platform_url("ftp://example.com")

    def test_rejects_missing_host(self) -> None:
        with pytest.raises(MalformedInputError):
            normalize_platform_url("https:///path")


# ---------------------------------------------------------------------------
# Clocks
# ---------------------------------------------------------------------------


class TestClocks:
    def test_frozen_epoch_millis(self) -> None:
        clock = FrozenClock(datetime(2026, 1, 1, tzinfo=UTC))
        assert clock.epoch_millis() == 1767225600000

    def test_frozen_advance(self) -> None:
        clock = FrozenClock(datetime(2026, 1, 1, tzinfo=UTC))
        clock.advance(seconds=1)
        assert clock.epoch_millis() == 1767225601000

    def test_system_clock_is_recent(self) -> None:
        assert SystemClock().epoch_millis() > 1_700_000_000_000
