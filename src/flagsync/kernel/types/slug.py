"""Tenant slug value object."""

from __future__ import annotations

import dataclasses
import re
from typing import Final

from flagsync.kernel.errors.domain import MalformedInputError

_SLUG_PATTERN: Final = re.compile(r"^[a-z0-9](?:[a-z0-9._-]*[a-z0-9])?$")


def normalize_slug(text: str | None) -> str:
    """Trim and lower-case *text*; ``None`` becomes ``""``."""
    return (text or "").strip().lower()


@dataclasses.dataclass(frozen=True, slots=True)
class TenantSlug:
    """Normalised lower-case identifier of one installation.

    Slugs are case-insensitive keys: ``TenantSlug.parse(" Acme ")`` and
    ``TenantSlug.parse("acme")`` are equal. The separator ``:`` used by store
    keys is never allowed.
    """

    value: str

    def __post_init__(self) -> None:
        if not _SLUG_PATTERN.match(self.value):
            raise MalformedInputError(
                f"Invalid installation slug: {self.value!r}",
                errors=[{"field": "slug", "reason": "lowercase alphanumerics, '-', '_' or '.'"}],
            )

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: str | None) -> "TenantSlug":
        """Normalise *text* and validate the result."""
        return cls(normalize_slug(text))


__all__ = ["TenantSlug", "normalize_slug"]
