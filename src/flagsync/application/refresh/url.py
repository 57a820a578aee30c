"""Application refresh – callback URL construction."""
from __future__ import annotations

from flagsync.kernel.types import normalize_platform_url


def build_refresh_url(base_url: str, refresh_path: str) -> str:
    """Append *refresh_path* to a normalised base unless it already ends with it."""
    path = "/" + refresh_path.strip("/")
    if base_url.endswith(path):
        return base_url
    return f"{base_url}{path}"


__all__ = ["build_refresh_url", "normalize_platform_url"]
