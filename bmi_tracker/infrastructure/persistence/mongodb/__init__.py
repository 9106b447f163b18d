"""MongoDB persistence adapters."""

from .key_value_store import MongoKeyValueStore

__all__ = ["MongoKeyValueStore"]
