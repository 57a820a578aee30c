"""Config – 12-factor settings, loaders, and the flag authority configuration set."""

from flagsync.config.service import FlagSyncSettings, load_settings
from flagsync.config.settings import (
    AliasedEnvSettingsLoader,
    DotenvSettingsLoader,
    Settings,
    SettingsFactory,
    SettingsLoader,
)
from flagsync.config.validation import ConfigError, InvalidSettingValueError, MissingRequiredSettingError

__all__ = [
    "AliasedEnvSettingsLoader",
    "ConfigError",
    "DotenvSettingsLoader",
    "FlagSyncSettings",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
    "load_settings",
]
