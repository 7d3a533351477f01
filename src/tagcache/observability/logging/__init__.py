"""Observability – structured logging helpers."""
from tagcache.observability.logging.factory import JsonLoggerFactory
from tagcache.observability.logging.processors import add_library_name, get_logger

__all__ = ["JsonLoggerFactory", "add_library_name", "get_logger"]
