"""API routers – tenant Discord configuration."""
from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from flagsync.api.container import FlagSyncContainer
from flagsync.api.deps import get_container, parse_json, signed_body, tenant_slug

router = APIRouter(prefix="/api/installations", tags=["discord"])


@router.get("/{slug}/discord")
async def read_discord(
    slug: str = Depends(tenant_slug),
    container: FlagSyncContainer = Depends(get_container),
) -> dict[str, Any]:
    config = await container.discord.get(slug)
    return {"ok": True, "slug": slug, "data": config.to_dict()}


@router.put("/{slug}/discord")
async def replace_discord(
    raw: bytes = Depends(signed_body),
    slug: str = Depends(tenant_slug),
    container: FlagSyncContainer = Depends(get_container),
) -> dict[str, Any]:
    config = await container.discord.put(slug, parse_json(raw))
    return {"ok": True, "slug": slug, "data": config.to_dict()}


@router.patch("/{slug}/discord")
async def patch_discord(
    raw: bytes = Depends(signed_body),
    slug: str = Depends(tenant_slug),
    container: FlagSyncContainer = Depends(get_container),
) -> dict[str, Any]:
    config = await container.discord.patch(slug, parse_json(raw))
    return {"ok": True, "slug": slug, "data": config.to_dict()}
