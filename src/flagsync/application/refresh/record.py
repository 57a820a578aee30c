"""Application refresh – delivery outcome and audit record."""
from __future__ import annotations

import enum
from dataclasses import asdict, dataclass
from typing import Any


class RefreshOutcome(str, enum.Enum):
    SUCCESS = "success"
    SUPPRESSED = "suppressed"
    FAILED = "failed"


@dataclass
class RefreshDeliveryRecord:
    """Audit record of a single refresh notification."""

    slug: str
    outcome: RefreshOutcome = RefreshOutcome.SUPPRESSED
    url: str | None = None
    http_status: int | None = None
    duration_ms: float = 0.0
    error: str | None = None
    response_preview: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["outcome"] = self.outcome.value
        data["duration_ms"] = round(self.duration_ms, 2)
        return data


__all__ = ["RefreshDeliveryRecord", "RefreshOutcome"]
