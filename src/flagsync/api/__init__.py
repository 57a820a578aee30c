"""API – FastAPI surface of the flag authority."""
from flagsync.api.app import create_app
from flagsync.api.container import FlagSyncContainer, build_container

__all__ = ["FlagSyncContainer", "build_container", "create_app"]
