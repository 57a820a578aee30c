"""FastAPI adapter – exception mapper, correlation middleware, health router."""
from flagsync.adapters.fastapi.exception_mapper import FlagSyncExceptionMapper
from flagsync.adapters.fastapi.middleware import FastAPICorrelationIdMiddleware
from flagsync.adapters.fastapi.routers import FastAPIHealthRouter

__all__ = [
    "FastAPICorrelationIdMiddleware",
    "FastAPIHealthRouter",
    "FlagSyncExceptionMapper",
]
