"""Config settings – AliasedEnvSettingsLoader, DotenvSettingsLoader."""
from __future__ import annotations

import abc
import dataclasses
import os
from typing import Any, Mapping, TypeVar

from flagsync.config.settings.base import Settings
from flagsync.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

T = TypeVar("T", bound=Settings)


class SettingsLoader(abc.ABC):
    """Port: load settings from an external source."""

    @abc.abstractmethod
    def load(self, settings_class: type[T]) -> T: ...


def _is_required(field: dataclasses.Field) -> bool:  # type: ignore[type-arg]
    return (
        field.default is dataclasses.MISSING
        and field.default_factory is dataclasses.MISSING  # type: ignore[misc]
    )


def _coerce(value: str, type_hint: Any) -> Any:  # noqa: PLR0911
    origin = getattr(type_hint, "__origin__", None)
    if type_hint is bool or type_hint == "bool":
        return value.lower() in ("1", "true", "yes", "on")
    if type_hint is int or type_hint == "int":
        return int(value)
    if type_hint is float or type_hint == "float":
        return float(value)
    if origin is list:
        return [v.strip() for v in value.split(",") if v.strip()]
    return value


class AliasedEnvSettingsLoader(SettingsLoader):
    """Load settings whose fields declare several recognised environment names.

    Each field lists its names in ``metadata["env"]`` (see
    :func:`~flagsync.config.settings.base.env`), highest precedence first. The
    first name holding a **non-empty** value wins; blank values are treated as
    unset. Fields without metadata fall back to ``{PREFIX}_{FIELD}``.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ

    def resolve(self, field: dataclasses.Field, prefix: str = "") -> tuple[str, str] | None:  # type: ignore[type-arg]
        """Return ``(env_name, value)`` for the first non-empty recognised name."""
        environ = os.environ if self._environ is None else self._environ
        names = field.metadata.get("env") or (f"{prefix}_{field.name}".upper().lstrip("_"),)
        for name in names:
            value = environ.get(name)
            if value is not None and value.strip():
                return name, value.strip()
        return None

    def load(self, settings_class: type[T]) -> T:
        prefix = getattr(settings_class, "_prefix", "").upper()
        kwargs: dict[str, Any] = {}

        for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            found = self.resolve(field, prefix)
            if found is None:
                if _is_required(field):
                    names = field.metadata.get("env") or (field.name,)
                    raise MissingRequiredSettingError(" | ".join(names))
                continue
            name, raw = found
            try:
                kwargs[field.name] = _coerce(raw, field.type)
            except ValueError as exc:
                raise InvalidSettingValueError(name, raw, f"expected {field.type}") from exc

        try:
            return settings_class(**kwargs)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"Failed to load settings: {exc}") from exc


class DotenvSettingsLoader(SettingsLoader):
    """Load a ``.env`` file into the environment, then delegate to another loader."""

    def __init__(
        self,
        env_file: str = ".env",
        override: bool = False,
        delegate: SettingsLoader | None = None,
    ) -> None:
        self._env_file = env_file
        self._override = override
        self._delegate = delegate or AliasedEnvSettingsLoader()

    def load(self, settings_class: type[T]) -> T:
        from dotenv import load_dotenv

        load_dotenv(self._env_file, override=self._override)
        return self._delegate.load(settings_class)


__all__ = [
    "AliasedEnvSettingsLoader",
    "DotenvSettingsLoader",
    "SettingsLoader",
]
