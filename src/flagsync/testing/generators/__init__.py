"""Testing generators – hypothesis strategies."""
from flagsync.testing.generators.strategies import (
    body_strategy,
    flag_payload_strategy,
    json_value_strategy,
    slug_strategy,
)

__all__ = [
    "body_strategy",
    "flag_payload_strategy",
    "json_value_strategy",
    "slug_strategy",
]
