"""Application-layer errors — request authentication."""

from __future__ import annotations

from typing import Any

from flagsync.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class AuthenticationError(ApplicationError):
    """Missing or invalid request signature / token."""

    default_code = "unauthorized"

    def __init__(self, message: str = "invalid signature", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


__all__ = [
    "ApplicationError",
    "AuthenticationError",
]
