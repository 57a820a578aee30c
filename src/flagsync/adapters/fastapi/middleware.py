"""FastAPI adapter – correlation-ID ASGI middleware."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any
from uuid import uuid4

import structlog

from flagsync.observability.correlation import CorrelationContext, RequestContext

if TYPE_CHECKING:
    from starlette.types import ASGIApp, Receive, Scope, Send


class FastAPICorrelationIdMiddleware:
    """Extract correlation ID from request headers, propagate to response.

    Header resolution order:
    1. ``X-Correlation-ID``
    2. ``X-Request-ID``
    3. ``traceparent`` (W3C trace-context, extracts trace-id segment)
    4. Generated UUID v4
    """

    def __init__(
        self,
        app: "ASGIApp",
        header_name: str = "X-Correlation-ID",
        fallback_headers: tuple[str, ...] = ("X-Request-ID", "traceparent"),
    ) -> None:
        self.app = app
        self._response_header = header_name.lower().encode()
        self._request_headers: list[bytes] = [
            header_name.lower().encode(),
            *[h.lower().encode() for h in fallback_headers],
        ]

    async def __call__(self, scope: "Scope", receive: "Receive", send: "Send") -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        headers = dict(scope.get("headers", []))

        correlation_id: str | None = None
        trace_id: str | None = None
        for header in self._request_headers:
            value = headers.get(header, b"").decode("latin-1").strip()
            if value:
                # W3C traceparent: 00-<trace-id>-<span-id>-<flags>
                if header == b"traceparent" and "-" in value:
                    parts = value.split("-")
                    if len(parts) >= 2:
                        correlation_id = trace_id = parts[1]
                else:
                    correlation_id = value
                break

        correlation_id = correlation_id or str(uuid4())
        CorrelationContext.set(RequestContext(correlation_id=correlation_id, trace_id=trace_id))
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(correlation_id=correlation_id)

        response_header = self._response_header
        encoded_id = correlation_id.encode("latin-1", errors="replace")

        async def send_with_header(message: Any) -> None:
            if message["type"] == "http.response.start":
                headers_list: list[tuple[bytes, bytes]] = list(message.get("headers", []))
                headers_list.append((response_header, encoded_id))
                message = {**message, "headers": headers_list}
            await send(message)

        await self.app(scope, receive, send_with_header)


__all__ = ["FastAPICorrelationIdMiddleware"]
