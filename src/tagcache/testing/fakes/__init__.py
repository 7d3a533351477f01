"""Testing fakes – in-memory doubles for kernel ports."""
from tagcache.kernel.time import FrozenClock
from tagcache.testing.fakes.clock import FakeClock
from tagcache.testing.fakes.store import InMemoryKeyValueStore

__all__ = ["FakeClock", "FrozenClock", "InMemoryKeyValueStore"]
