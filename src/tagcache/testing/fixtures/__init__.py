"""Testing fixtures – register with ``pytest_plugins = ["tagcache.testing.fixtures"]``."""
from tagcache.testing.fixtures.store import fake_clock, fake_store

__all__ = ["fake_clock", "fake_store"]
