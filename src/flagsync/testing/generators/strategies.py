"""Testing generators – Hypothesis property-based testing strategies.

Requires the ``hypothesis`` package:

    pip install "flagsync[test]"
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

from flagsync.application.feature_flags.feature_flag import DEFAULT_CATALOG

if TYPE_CHECKING:
    from hypothesis.strategies import SearchStrategy  # type: ignore[import-untyped]


def _require_hypothesis() -> Any:
    """Lazy import guard – raises a clear error when hypothesis is absent."""
    try:
        import hypothesis.strategies as st  # type: ignore[import-untyped]
        return st
    except ImportError as exc:
        raise ImportError(
            "Install 'hypothesis' to use property-based testing strategies: "
            "pip install hypothesis"
        ) from exc


def json_value_strategy(max_leaves: int = 20) -> "SearchStrategy[Any]":
    """Structured JSON values: objects, arrays and non-string scalars.

    Top-level strings are excluded because the codec deliberately treats a
    string as possibly already-encoded JSON.

    Example::

        @given(json_value_strategy())
        def test_round_trip(value):
            assert decode(encode(value)) == value
    """
    st = _require_hypothesis()
    scalars = st.none() | st.booleans() | st.integers() | st.floats(allow_nan=False, allow_infinity=False)
    leaves = scalars | st.text()
    tree = st.recursive(
        leaves,
        lambda children: st.lists(children, max_size=5) | st.dictionaries(st.text(), children, max_size=5),
        max_leaves=max_leaves,
    )
    return tree.filter(lambda v: not isinstance(v, str))


def slug_strategy() -> "SearchStrategy[str]":
    """Valid normalised tenant slugs."""
    st = _require_hypothesis()
    return st.from_regex(r"[a-z0-9](?:[a-z0-9-]{0,30}[a-z0-9])?", fullmatch=True)


def flag_payload_strategy() -> "SearchStrategy[dict[str, Any]]":
    """``features`` maps mixing catalog keys, unknown keys and arbitrary values."""
    st = _require_hypothesis()
    keys = st.sampled_from([flag.key for flag in DEFAULT_CATALOG]) | st.text(min_size=1, max_size=12)
    values = st.none() | st.booleans() | st.integers() | st.floats() | st.text(max_size=8) | st.lists(st.integers(), max_size=2)
    return st.dictionaries(keys, values, max_size=8)


def body_strategy() -> "SearchStrategy[bytes]":
    """Arbitrary non-empty request bodies."""
    st = _require_hypothesis()
    return st.binary(min_size=1, max_size=256)


__all__ = [
    "body_strategy",
    "flag_payload_strategy",
    "json_value_strategy",
    "slug_strategy",
]
