"""File-backed persistence adapters."""

from .key_value_store import JsonFileKeyValueStore

__all__ = ["JsonFileKeyValueStore"]
