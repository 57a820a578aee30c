"""Kernel types – value objects."""
from flagsync.kernel.types.platform_url import normalize_platform_url
from flagsync.kernel.types.slug import TenantSlug, normalize_slug

__all__ = ["TenantSlug", "normalize_platform_url", "normalize_slug"]
