"""API routers – tenant flag documents."""
from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Request

from flagsync.api.container import FlagSyncContainer
from flagsync.api.deps import get_container, parse_json_object, signed_body, tenant_slug
from flagsync.kernel.errors import MalformedInputError

router = APIRouter(prefix="/api/installations", tags=["flags"])

ACTOR_HEADER = "X-Actor"


@router.get("/{slug}/flags")
async def read_flags(
    slug: str = Depends(tenant_slug),
    container: FlagSyncContainer = Depends(get_container),
) -> dict[str, Any]:
    document = await container.flags.find_flags(slug)
    if document is None:
        return {"features": {}}
    return document.to_dict()


@router.put("/{slug}/flags")
async def save_flags(
    request: Request,
    raw: bytes = Depends(signed_body),
    slug: str = Depends(tenant_slug),
    container: FlagSyncContainer = Depends(get_container),
) -> dict[str, Any]:
    body = parse_json_object(raw)
    features = body.get("features")
    if not isinstance(features, dict):
        raise MalformedInputError(
            "Body must be an object with a 'features' object",
            errors=[{"field": "features", "reason": "expected a JSON object"}],
        )
    saved = await container.flags.put_flags(slug, features, actor=request.headers.get(ACTOR_HEADER))
    return {"ok": True, "slug": slug, "saved": saved.to_dict()}


@router.delete("/{slug}/flags")
async def reset_flags(
    request: Request,
    raw: bytes = Depends(signed_body),  # noqa: ARG001
    slug: str = Depends(tenant_slug),
    container: FlagSyncContainer = Depends(get_container),
) -> dict[str, Any]:
    await container.flags.reset_flags(slug, actor=request.headers.get(ACTOR_HEADER))
    return {"ok": True, "slug": slug}


@router.get("/{slug}/flags/history")
async def flag_history(
    slug: str = Depends(tenant_slug),
    container: FlagSyncContainer = Depends(get_container),
) -> dict[str, Any]:
    entries = await container.flags.history(slug)
    return {"ok": True, "slug": slug, "items": [entry.to_dict() for entry in entries]}
