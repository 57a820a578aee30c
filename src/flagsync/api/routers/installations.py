"""API routers – installation index and registry diagnostics."""
from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from flagsync.api.container import FlagSyncContainer
from flagsync.api.deps import get_container

router = APIRouter(tags=["installations"])


@router.get("/api/installations/index")
async def installation_index(container: FlagSyncContainer = Depends(get_container)) -> dict[str, Any]:
    return {"ok": True, "items": await container.registry.list()}


@router.get("/api/debug/installations")
async def raw_registry(container: FlagSyncContainer = Depends(get_container)) -> dict[str, Any]:
    return {"raw": await container.registry.raw()}
