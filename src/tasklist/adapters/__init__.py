"""Adapters - I/O implementations of ports."""

from .json_prefs import JsonFileKeyValueStore
from .memory_prefs import InMemoryKeyValueStore

__all__ = [
    "JsonFileKeyValueStore",
    "InMemoryKeyValueStore",
]
