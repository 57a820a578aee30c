"""FastAPI adapter – FlagSyncExceptionMapper."""
from __future__ import annotations

from typing import Any, Callable

from fastapi.responses import JSONResponse

from flagsync.config.validation import ConfigError
from flagsync.kernel.errors import (
    AuthenticationError,
    BaseError,
    DomainError,
    InfrastructureError,
    MalformedInputError,
    NotFoundError,
)
from flagsync.observability.correlation import CorrelationContext
from flagsync.observability.logging import get_logger

logger = get_logger(__name__)


class FlagSyncExceptionMapper:
    """Register flagsync error → HTTP status-code mappings on a FastAPI app.

    Error body schema::

        {"ok": false, "code": "unauthorized", "message": "...", "detail": {}, "correlation_id": "..."}

    Mappings
    --------
    ``MalformedInputError`` → 400
    ``AuthenticationError`` → 401
    ``NotFoundError``       → 404
    ``DomainError``         → 422
    ``InfrastructureError`` → 503
    ``ConfigError``         → 500
    """

    def __init__(self) -> None:
        # ORDER MATTERS: more-specific subtypes first
        self._map: list[tuple[type[Exception], int]] = [
            (MalformedInputError, 400),
            (AuthenticationError, 401),
            (NotFoundError, 404),
            (DomainError, 422),
            (InfrastructureError, 503),
            (ConfigError, 500),
        ]

    def status_for(self, exc: Exception) -> int:
        for exc_type, status in self._map:
            if isinstance(exc, exc_type):
                return status
        return 500

    def register(self, app: Any) -> None:
        """Register all error handlers on a ``FastAPI`` or ``Starlette`` app."""
        for exc_type, status in self._map:

            def make_handler(code: int) -> Callable[[Any, Any], Any]:
                def handler(request: Any, exc: Any) -> Any:
                    ctx = CorrelationContext.get()
                    body: dict[str, Any] = {"ok": False}
                    if isinstance(exc, BaseError):
                        body.update(exc.to_dict())
                        body.pop("cause", None)
                    else:
                        body.update({"code": "error", "message": str(exc)})
                    body["correlation_id"] = ctx.correlation_id if ctx is not None else None
                    log = logger.error if code >= 500 else logger.info
                    log("http.request_rejected", status=code, code=body.get("code"), path=request.url.path)
                    return JSONResponse(status_code=code, content=body)

                return handler

            app.add_exception_handler(exc_type, make_handler(status))


__all__ = ["FlagSyncExceptionMapper"]
