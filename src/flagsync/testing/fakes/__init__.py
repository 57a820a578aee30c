"""Testing fakes – in-memory doubles for flagsync ports."""
from flagsync.kernel.time import FrozenClock
from flagsync.testing.fakes.clock import FakeClock
from flagsync.testing.fakes.feature_flags import FakeFeatureFlagProvider
from flagsync.testing.fakes.store import FailingKeyValueStore

__all__ = [
    "FailingKeyValueStore",
    "FakeClock",
    "FakeFeatureFlagProvider",
    "FrozenClock",
]
