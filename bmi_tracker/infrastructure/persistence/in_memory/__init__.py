"""In-memory persistence adapters."""

from .key_value_store import InMemoryKeyValueStore

__all__ = ["InMemoryKeyValueStore"]
