"""Platform base-URL normalisation."""

from __future__ import annotations

from urllib.parse import urlsplit

from flagsync.kernel.errors.domain import MalformedInputError


def normalize_platform_url(url: str | None) -> str | None:
    """Force ``https`` and strip trailing slashes; blank input is ``None``.

    ``http://example.com/`` becomes ``https://example.com``; a missing scheme is
    added. Any other scheme, or a URL without a host, is rejected.
    """
    value = (url or "").strip()
    if not value:
        return None
    if "://" not in value:
        value = f"https://{value}"
    scheme, _, rest = value.partition("://")
    if scheme.lower() not in {"http", "https"}:
        raise MalformedInputError(
            f"Unsupported platform URL scheme: {scheme!r}",
            errors=[{"field": "platform_url", "reason": "must be http(s)"}],
        )
    value = f"https://{rest}".rstrip("/")
    if not urlsplit(value).hostname:
        raise MalformedInputError(
            f"Platform URL has no host: {url!r}",
            errors=[{"field": "platform_url", "reason": "missing host"}],
        )
    return value


__all__ = ["normalize_platform_url"]
