"""API routers – Discord bot assignments."""
from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from flagsync.api.container import FlagSyncContainer
from flagsync.api.deps import get_container

router = APIRouter(prefix="/api/bot", tags=["bot"])


@router.get("/assignments")
async def bot_assignments(
    token: str | None = None,
    container: FlagSyncContainer = Depends(get_container),
) -> dict[str, Any]:
    container.bot.authorize(token)
    items = await container.bot.list_assignments()
    return {"ok": True, "items": [item.to_dict() for item in items]}
