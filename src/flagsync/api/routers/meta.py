"""API routers – tenant metadata."""
from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from flagsync.api.container import FlagSyncContainer
from flagsync.api.deps import get_container, parse_json_object, signed_body, tenant_slug
from flagsync.kernel.errors import MalformedInputError

router = APIRouter(prefix="/api/installations", tags=["meta"])


@router.get("/{slug}/meta")
async def read_meta(
    slug: str = Depends(tenant_slug),
    container: FlagSyncContainer = Depends(get_container),
) -> dict[str, Any]:
    meta = await container.meta.get(slug)
    return {"ok": True, "slug": slug, "meta": meta.to_dict()}


@router.put("/{slug}/meta")
async def save_meta(
    raw: bytes = Depends(signed_body),
    slug: str = Depends(tenant_slug),
    container: FlagSyncContainer = Depends(get_container),
) -> dict[str, Any]:
    body = parse_json_object(raw)
    platform_url = body.get("platform_url")
    if platform_url is not None and not isinstance(platform_url, str):
        raise MalformedInputError(
            "'platform_url' must be a string",
            errors=[{"field": "platform_url", "reason": "expected a string"}],
        )
    meta = await container.meta.put(slug, platform_url)
    return {"ok": True, "slug": slug, "meta": meta.to_dict()}


@router.delete("/{slug}/meta")
async def delete_meta(
    raw: bytes = Depends(signed_body),  # noqa: ARG001
    slug: str = Depends(tenant_slug),
    container: FlagSyncContainer = Depends(get_container),
) -> dict[str, Any]:
    await container.meta.delete(slug)
    return {"ok": True, "slug": slug}
