"""Application feature flags – FeatureFlagDocument."""
from __future__ import annotations

import dataclasses
import math
from typing import Any, Mapping, Sequence

from flagsync.application.feature_flags.feature_flag import DEFAULT_CATALOG, FeatureFlag


def truthy(value: Any) -> bool:
    """JavaScript ``!!value``: only null, false, 0, NaN and "" are false."""
    if value is None or value is False:
        return False
    if isinstance(value, (int, float)):
        return not (value == 0 or (isinstance(value, float) and math.isnan(value)))
    if isinstance(value, str):
        return value != ""
    return True


@dataclasses.dataclass(frozen=True)
class FeatureFlagDocument:
    """Persisted set of boolean toggles for one tenant.

    ``features`` always holds exactly one boolean per catalog flag.
    ``updated_at`` is epoch milliseconds.
    """

    features: dict[str, bool]
    updated_at: int | None = None
    updated_by: str | None = None

    @classmethod
    def zero(cls, catalog: Sequence[FeatureFlag] = DEFAULT_CATALOG) -> "FeatureFlagDocument":
        """Document served before a tenant's flags were ever saved."""
        return cls(features={flag.key: flag.default_value for flag in catalog})

    @staticmethod
    def coerce_features(
        incoming: Mapping[str, Any] | None,
        catalog: Sequence[FeatureFlag] = DEFAULT_CATALOG,
    ) -> dict[str, bool]:
        """Keep recognised keys only, coerced with ``!!``; missing keys are ``False``."""
        incoming = incoming or {}
        return {flag.key: truthy(incoming.get(flag.key)) for flag in catalog}

    @classmethod
    def from_stored(
        cls,
        data: Any,
        catalog: Sequence[FeatureFlag] = DEFAULT_CATALOG,
    ) -> "FeatureFlagDocument | None":
        """Rebuild a document from decoded store data; ``None`` if it is not one."""
        if not isinstance(data, dict) or not isinstance(data.get("features"), dict):
            return None
        updated_at = data.get("updated_at")
        if isinstance(updated_at, bool) or not isinstance(updated_at, (int, float)):
            updated_at = None
        updated_by = data.get("updated_by")
        return cls(
            features=cls.coerce_features(data["features"], catalog),
            updated_at=int(updated_at) if updated_at is not None else None,
            updated_by=updated_by if isinstance(updated_by, str) and updated_by else None,
        )

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"features": dict(self.features), "updated_at": self.updated_at}
        if self.updated_by is not None:
            payload["updated_by"] = self.updated_by
        return payload

    def is_enabled(self, key: str) -> bool:
        return self.features.get(key, False)


__all__ = ["FeatureFlagDocument", "truthy"]
