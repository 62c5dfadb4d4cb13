"""Ports - interfaces/protocols for external dependencies."""

from .kv_store import KeyValueStore

__all__ = [
    "KeyValueStore",
]
