"""Helpers for logging, timestamps and local storage."""
from . import cache_manager, helpers

__all__ = ["cache_manager", "helpers"]
