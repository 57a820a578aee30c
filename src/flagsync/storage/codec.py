"""Storage – canonical JSON codec for the string-valued key-value store.

The store only accepts and returns strings, and earlier revisions of the
service pre-stringified payloads inconsistently before writing them.  The
codec is the single place where store payloads are encoded and decoded:

* :meth:`Codec.encode` always produces exactly **one** level of JSON, whether
  it is given a structured value, a JSON string, or a JSON string of a JSON
  string.
* :meth:`Codec.decode` reverses it and heals values that were stored
  double-encoded, returning ``None`` instead of raising.
"""
from __future__ import annotations

import json
from typing import Any, Final

from flagsync.kernel.errors import SerializationError

MAX_ENCODE_UNWRAP: Final = 3
MAX_DECODE_PASSES: Final = 2


def _reject_constant(token: str) -> Any:
    raise ValueError(f"Non-standard JSON constant {token!r}")


def _loads(raw: str) -> Any:
    """Strict ``json.loads``: bare ``NaN`` / ``Infinity`` tokens do not parse."""
    return json.loads(raw, parse_constant=_reject_constant)


class Codec:
    """Idempotent JSON encoder/decoder: ``decode(encode(v)) == v``."""

    @staticmethod
    def dumps(value: Any) -> str:
        """Serialise *value* once, compactly, rejecting NaN/Infinity."""
        try:
            return json.dumps(value, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
        except (TypeError, ValueError) as exc:
            raise SerializationError(
                f"Value of type {type(value).__name__} is not JSON serialisable",
                payload_type=type(value).__name__,
                cause=exc,
            ) from exc

    @classmethod
    def encode(cls, value: Any) -> str:
        """Return the canonical single-level JSON string for *value*."""
        if isinstance(value, bytes):
            value = value.decode("utf-8")
        if isinstance(value, str):
            current: Any = value
            for _ in range(MAX_ENCODE_UNWRAP):
                try:
                    parsed = _loads(current)
                except ValueError:
                    break
                current = parsed
                if not isinstance(parsed, str):
                    break
            return cls.dumps(current)
        return cls.dumps(value)

    @staticmethod
    def decode(raw: str | bytes | None) -> Any | None:
        """Parse *raw*, unwrapping one JSON string-of-a-string; ``None`` on failure."""
        if raw is None:
            return None
        if isinstance(raw, bytes):
            try:
                raw = raw.decode("utf-8")
            except UnicodeDecodeError:
                return None
        try:
            value = _loads(raw)
        except ValueError:
            return None
        for _ in range(MAX_DECODE_PASSES - 1):
            if not isinstance(value, str):
                break
            try:
                value = _loads(value)
            except ValueError:
                break
        return value


def encode(value: Any) -> str:
    """Module-level shorthand for :meth:`Codec.encode`."""
    return Codec.encode(value)


def decode(raw: str | bytes | None) -> Any | None:
    """Module-level shorthand for :meth:`Codec.decode`."""
    return Codec.decode(raw)


__all__ = ["MAX_DECODE_PASSES", "MAX_ENCODE_UNWRAP", "Codec", "decode", "encode"]
