"""Observability – health checks."""
from flagsync.observability.health.builtin import KeyValueStoreHealthCheck
from flagsync.observability.health.check import HealthCheck, HealthStatus
from flagsync.observability.health.registry import HealthRegistry, HealthReport

__all__ = [
    "HealthCheck",
    "HealthRegistry",
    "HealthReport",
    "HealthStatus",
    "KeyValueStoreHealthCheck",
]
