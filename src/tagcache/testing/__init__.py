"""Testing support – fakes and pytest fixtures.

Import in your ``conftest.py``::

    pytest_plugins = ["tagcache.testing.fixtures"]
"""

from tagcache.testing.fakes import FakeClock, FrozenClock, InMemoryKeyValueStore

__all__ = ["FakeClock", "FrozenClock", "InMemoryKeyValueStore"]
