"""Upstash adapter – UpstashKeyValueStore over the Upstash / Vercel KV REST API.

Endpoints used::

    GET  {url}/get/{key}    -> {"result": <string | null>}
    POST {url}/set/{key}    body = value  -> {"result": "OK"}
    POST {url}/del/{key}    -> {"result": <int>}
    GET  {url}/ping         -> {"result": "PONG"}

Every call carries ``Authorization: Bearer {token}``.
"""
from __future__ import annotations

from typing import Any
from urllib.parse import quote

from flagsync.adapters.http import HttpxHttpClient
from flagsync.kernel.errors import ExternalServiceError, StoreUnavailableError
from flagsync.storage.codec import Codec


def _result_as_string(data: Any) -> str | None:
    """Extract the stored string from a REST response body.

    The API normally returns ``{"result": "<string>"}``; a structured
    ``result`` is re-serialised once, and the legacy ``{"value": "..."}``
    wrapper is accepted.
    """
    if isinstance(data, dict):
        if "result" in data:
            result = data["result"]
            if result is None or isinstance(result, str):
                return result
            return Codec.dumps(result)
        if isinstance(data.get("value"), str):
            return data["value"]
        return None
    if isinstance(data, str):
        return data
    return None


class UpstashKeyValueStore:
    """KeyValueStore backed by the Upstash REST API."""

    name = "upstash"

    def __init__(
        self,
        url: str,
        token: str,
        *,
        timeout: float = 10.0,
        http: HttpxHttpClient | None = None,
    ) -> None:
        self._url = url.rstrip("/")
        self._headers = {"Authorization": f"Bearer {token}"}
        self._http = http or HttpxHttpClient(timeout=timeout)
        self._owns_http = http is None

    def _endpoint(self, command: str, key: str | None = None) -> str:
        if key is None:
            return f"{self._url}/{command}"
        return f"{self._url}/{command}/{quote(key, safe='')}"

    async def get(self, key: str) -> str | None:
        try:
            response = await self._http.get(self._endpoint("get", key), headers=self._headers)
            data = response.json()
        except (ExternalServiceError, ValueError) as exc:
            raise StoreUnavailableError("get", key, cause=exc) from exc
        return _result_as_string(data)

    async def set(self, key: str, value: str) -> None:
        try:
            await self._http.post(
                self._endpoint("set", key),
                content=value.encode("utf-8"),
                headers=self._headers,
            )
        except ExternalServiceError as exc:
            raise StoreUnavailableError(
                "set", key, f"KV set failed ({exc.status_code}): {exc.response_preview or exc.message}", cause=exc
            ) from exc

    async def delete(self, key: str) -> None:
        try:
            await self._http.post(self._endpoint("del", key), headers=self._headers)
        except ExternalServiceError as exc:
            raise StoreUnavailableError("delete", key, cause=exc) from exc

    async def ping(self) -> bool:
        try:
            response = await self._http.get(self._endpoint("ping"), headers=self._headers)
            data = response.json()
        except (ExternalServiceError, ValueError) as exc:
            raise StoreUnavailableError("ping", "-", cause=exc) from exc
        return _result_as_string(data) == "PONG"

    async def close(self) -> None:
        if self._owns_http:
            await self._http.aclose()


__all__ = ["UpstashKeyValueStore"]
