"""Upstash adapter – REST key-value store backend."""
from flagsync.adapters.upstash.store import UpstashKeyValueStore

__all__ = ["UpstashKeyValueStore"]
