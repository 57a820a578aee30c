"""API – request dependencies: container lookup, slug parsing, signed bodies."""
from __future__ import annotations

import json
from typing import Any

import structlog
from fastapi import Request

from flagsync.api.container import FlagSyncContainer
from flagsync.kernel.errors import MalformedInputError
from flagsync.kernel.types import TenantSlug
from flagsync.observability.correlation import CorrelationContext
from flagsync.security import SIGNATURE_HEADER


def get_container(request: Request) -> FlagSyncContainer:
    return request.app.state.container


async def tenant_slug(slug: str) -> str:
    """Path dependency: normalise and validate ``{slug}``, bind it to the log context."""
    value = TenantSlug.parse(slug).value
    CorrelationContext.with_tenant(value)
    structlog.contextvars.bind_contextvars(slug=value)
    return value


async def signed_body(request: Request) -> bytes:
    """Read the raw body once and verify ``X-Signature`` over exactly those bytes."""
    raw = await request.body()
    get_container(request).signer.require(raw, request.headers.get(SIGNATURE_HEADER))
    return raw


def parse_json(raw: bytes) -> Any:
    if not raw.strip():
        raise MalformedInputError("Request body is empty")
    try:
        return json.loads(raw)
    except (UnicodeDecodeError, ValueError) as exc:
        raise MalformedInputError("Request body is not valid JSON", cause=exc) from exc


def parse_json_object(raw: bytes) -> dict[str, Any]:
    body = parse_json(raw)
    if not isinstance(body, dict):
        raise MalformedInputError("Request body must be a JSON object")
    return body


__all__ = ["get_container", "parse_json", "parse_json_object", "signed_body", "tenant_slug"]
