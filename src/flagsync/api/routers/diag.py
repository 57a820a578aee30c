"""API routers – diagnostics."""
from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from flagsync.api.container import FlagSyncContainer
from flagsync.api.deps import get_container, signed_body, tenant_slug

router = APIRouter(prefix="/api/_diag", tags=["diagnostics"])


@router.post("/notify/{slug}")
async def notify_now(
    raw: bytes = Depends(signed_body),  # noqa: ARG001
    slug: str = Depends(tenant_slug),
    container: FlagSyncContainer = Depends(get_container),
) -> dict[str, Any]:
    """Run one refresh notification inline and return its delivery record."""
    record = await container.notifier.notify(slug)
    return {"ok": True, "record": record.to_dict()}
