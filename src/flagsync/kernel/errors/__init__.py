"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError            (domain.py)
    │   ├── MalformedInputError
    │   └── NotFoundError
    ├── ApplicationError       (application.py)
    │   └── AuthenticationError
    └── InfrastructureError    (infrastructure.py)
        ├── StoreUnavailableError
        ├── SerializationError
        ├── ExternalServiceError
        ├── HistoryWriteError
        └── NotificationError
"""

from flagsync.kernel.errors.application import ApplicationError, AuthenticationError
from flagsync.kernel.errors.base import BaseError
from flagsync.kernel.errors.domain import DomainError, MalformedInputError, NotFoundError
from flagsync.kernel.errors.infrastructure import (
    ExternalServiceError,
    HistoryWriteError,
    InfrastructureError,
    NotificationError,
    SerializationError,
    StoreUnavailableError,
)

__all__ = [
    "ApplicationError",
    "AuthenticationError",
    "BaseError",
    "DomainError",
    "ExternalServiceError",
    "HistoryWriteError",
    "InfrastructureError",
    "MalformedInputError",
    "NotFoundError",
    "NotificationError",
    "SerializationError",
    "StoreUnavailableError",
]
