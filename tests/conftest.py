"""Shared fixtures: ``fake_clock`` and ``fake_store`` from the testing package."""

pytest_plugins = ["tagcache.testing.fixtures"]
