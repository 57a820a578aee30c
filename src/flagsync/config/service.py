"""FlagSyncSettings – the recognised configuration set of the flag authority.

Every field lists the environment names it is read from, highest precedence
first; the first **non-empty** value wins. Settings are loaded once at startup
by :func:`load_settings` and injected into the components that need them.
"""
from __future__ import annotations

import dataclasses
from typing import Any, ClassVar

from flagsync.config.settings import (
    AliasedEnvSettingsLoader,
    DotenvSettingsLoader,
    Settings,
    SettingsFactory,
    SettingsLoader,
    env,
)
from flagsync.config.validation import InvalidSettingValueError, MissingRequiredSettingError

STORE_BACKENDS: frozenset[str] = frozenset({"upstash", "redis", "memory"})
DEFAULT_REFRESH_PATH = "/api/flags/refresh"


@dataclasses.dataclass
class FlagSyncSettings(Settings):
    """Process-wide configuration, validated on construction (fail fast)."""

    _prefix: ClassVar[str] = "FLAGSYNC"

    signing_secret: str = dataclasses.field(
        metadata=env(
            "FLAGSYNC_SIGNING_SECRET",
            "SIGNING_SECRET",
            "FLAGS_SIGNING_SECRET",
            "PLATFORM_SIGNING_SECRET",
        ),
    )
    store_backend: str = dataclasses.field(default="upstash", metadata=env("FLAGSYNC_STORE_BACKEND"))
    kv_rest_url: str = dataclasses.field(
        default="", metadata=env("KV_REST_API_URL", "UPSTASH_REDIS_REST_URL")
    )
    kv_rest_token: str = dataclasses.field(
        default="", metadata=env("KV_REST_API_TOKEN", "UPSTASH_REDIS_REST_TOKEN")
    )
    redis_url: str = dataclasses.field(
        default="", metadata=env("FLAGSYNC_REDIS_URL", "REDIS_URL", "KV_URL")
    )
    platform_url_override: str = dataclasses.field(
        default="", metadata=env("PLATFORM_URL_OVERRIDE", "PLATFORM_BASE_URL", "PLATFORM_URL")
    )
    public_base_url: str = dataclasses.field(
        default="", metadata=env("FLAGS_PUBLIC_URL", "PUBLIC_BASE_URL")
    )
    refresh_path: str = dataclasses.field(
        default=DEFAULT_REFRESH_PATH, metadata=env("FLAGSYNC_REFRESH_PATH")
    )
    notify_timeout: float = dataclasses.field(default=5.0, metadata=env("FLAGSYNC_NOTIFY_TIMEOUT"))
    bot_token: str = dataclasses.field(default="", metadata=env("FLAGS_BOT_TOKEN"))
    log_level: str = dataclasses.field(default="INFO", metadata=env("FLAGSYNC_LOG_LEVEL", "LOG_LEVEL"))
    environment: str = dataclasses.field(default="production", metadata=env("ENVIRONMENT"))
    host: str = dataclasses.field(default="127.0.0.1", metadata=env("FLAGSYNC_HOST", "HOST"))
    port: int = dataclasses.field(default=8000, metadata=env("FLAGSYNC_PORT", "PORT"))

    def _validate(self) -> None:
        if not self.signing_secret.strip():
            raise MissingRequiredSettingError("FLAGSYNC_SIGNING_SECRET")
        self.store_backend = self.store_backend.strip().lower()
        if self.store_backend not in STORE_BACKENDS:
            raise InvalidSettingValueError(
                "store_backend", self.store_backend, f"expected one of {sorted(STORE_BACKENDS)}"
            )
        if self.store_backend == "upstash" and not (self.kv_rest_url and self.kv_rest_token):
            raise InvalidSettingValueError(
                "kv_rest_url", self.kv_rest_url, "upstash backend needs KV_REST_API_URL and KV_REST_API_TOKEN"
            )
        if self.store_backend == "redis" and not self.redis_url:
            raise InvalidSettingValueError("redis_url", self.redis_url, "redis backend needs REDIS_URL")
        if self.notify_timeout <= 0:
            raise InvalidSettingValueError("notify_timeout", self.notify_timeout, "must be positive")
        if not self.refresh_path.startswith("/"):
            self.refresh_path = "/" + self.refresh_path

    @property
    def is_development(self) -> bool:
        return self.environment.strip().lower() in {"development", "dev", "local", "test", "testing"}


def load_settings(
    loaders: list[SettingsLoader] | None = None,
    overrides: dict[str, Any] | None = None,
) -> FlagSyncSettings:
    """Load :class:`FlagSyncSettings` from ``.env`` + environment (or *loaders*)."""
    if loaders is None:
        loaders = [DotenvSettingsLoader(delegate=AliasedEnvSettingsLoader())]
    return SettingsFactory.create(FlagSyncSettings, loaders, overrides)


__all__ = ["DEFAULT_REFRESH_PATH", "STORE_BACKENDS", "FlagSyncSettings", "load_settings"]
