"""Config settings – 12-factor env-based configuration."""
from flagsync.config.settings.base import Settings, env
from flagsync.config.settings.factory import SettingsFactory
from flagsync.config.settings.loaders import (
    AliasedEnvSettingsLoader,
    DotenvSettingsLoader,
    SettingsLoader,
)

__all__ = [
    "AliasedEnvSettingsLoader",
    "DotenvSettingsLoader",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
    "env",
]
