"""Infrastructure errors — store I/O, serialisation, outbound delivery."""

from __future__ import annotations

from typing import Any

from flagsync.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not a business rule violation."""

    default_code = "infrastructure_error"


class StoreUnavailableError(InfrastructureError):
    """The key-value store could not be reached or rejected the operation."""

    default_code = "store_unavailable"

    def __init__(
        self,
        operation: str,
        key: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"Key-value store {operation} failed for '{key}'", **kwargs)
        self.operation = operation
        self.key = key


class SerializationError(InfrastructureError):
    """Failed to serialize or deserialize a payload."""

    default_code = "serialization_error"

    def __init__(
        self,
        message: str,
        *,
        payload_type: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.payload_type = payload_type


class ExternalServiceError(InfrastructureError):
    """An external service returned an unexpected response or could not be reached."""

    default_code = "external_service_error"

    def __init__(
        self,
        service: str,
        message: str | None = None,
        *,
        status_code: int | None = None,
        response_preview: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"External service '{service}' error", **kwargs)
        self.service = service
        self.status_code = status_code
        self.response_preview = response_preview


class HistoryWriteError(InfrastructureError):
    """Appending to a tenant's flag history failed (logged, never surfaced)."""

    default_code = "history_write_failed"


class NotificationError(InfrastructureError):
    """A platform refresh callback could not be delivered (logged, never surfaced)."""

    default_code = "notification_failed"

    def __init__(
        self,
        slug: str,
        message: str | None = None,
        *,
        status_code: int | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"Refresh notification for '{slug}' failed", **kwargs)
        self.slug = slug
        self.status_code = status_code


__all__ = [
    "ExternalServiceError",
    "HistoryWriteError",
    "InfrastructureError",
    "NotificationError",
    "SerializationError",
    "StoreUnavailableError",
]
