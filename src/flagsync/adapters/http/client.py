"""HTTP adapter – HttpxHttpClient."""
from __future__ import annotations

from typing import Any

import httpx

from flagsync.kernel.errors import ExternalServiceError
from flagsync.observability.correlation import CorrelationContext

PREVIEW_CHARS = 200


def _correlation_headers() -> dict[str, str]:
    ctx = CorrelationContext.get()
    if ctx is None:
        return {}
    headers = {"X-Correlation-ID": ctx.correlation_id}
    if ctx.tenant_id is not None:
        headers["X-Tenant-ID"] = ctx.tenant_id
    return headers


class HttpxHttpClient:
    """Thin async httpx wrapper with structured error mapping.

    Redirects are never followed: a redirected POST loses its body and
    signature header, so a 3xx is reported as a failure instead.
    Non-2xx responses and transport errors raise
    :class:`~flagsync.kernel.errors.ExternalServiceError`.
    """

    def __init__(self, base_url: str = "", timeout: float = 10.0, **kwargs: Any) -> None:
        kwargs.setdefault("follow_redirects", False)
        self._client = httpx.AsyncClient(base_url=base_url, timeout=timeout, **kwargs)

    async def __aenter__(self) -> "HttpxHttpClient":
        await self._client.__aenter__()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self._client.__aexit__(*args)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def get(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self._request("GET", url, **kwargs)

    async def post(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self._request("POST", url, **kwargs)

    async def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        headers = {**_correlation_headers(), **(kwargs.pop("headers", None) or {})}
        try:
            response = await self._client.request(method, url, headers=headers, **kwargs)
        except httpx.TimeoutException as exc:
            raise ExternalServiceError(
                service=url, message=f"HTTP request timed out: {method} {url}"
            ) from exc
        except httpx.HTTPError as exc:
            raise ExternalServiceError(service=url, message=str(exc) or type(exc).__name__) from exc
        if not response.is_success:
            raise ExternalServiceError(
                service=url,
                message=f"HTTP {response.status_code} from {method} {url}",
                status_code=response.status_code,
                response_preview=response.text[:PREVIEW_CHARS],
            )
        return response


HttpClient = HttpxHttpClient

__all__ = ["PREVIEW_CHARS", "HttpClient", "HttpxHttpClient"]
