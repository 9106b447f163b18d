"""In-memory implementation of IKeyValueStore for testing."""

import logging
from typing import Dict, Optional

from bmi_tracker.domain.bmi.core.ports.key_value_store import IKeyValueStore

logger = logging.getLogger(__name__)


class InMemoryKeyValueStore(IKeyValueStore):
    """
    In-memory implementation of key-value store.

    Uses a dictionary to store values in memory. Suitable for testing
    and development. Data is lost when the application stops.
    """

    def __init__(self) -> None:
        """Initialize empty store."""
        self._values: Dict[str, str] = {}

    async def get(self, key: str) -> Optional[str]:
        """
        Read value by key.

        Args:
            key: Storage key

        Returns:
            Stored value if present, None otherwise
        """
        value = self._values.get(key)
        logger.debug(f"Store {'hit' if value is not None else 'miss'} for key: {key}")
        return value

    async def set(self, key: str, value: str) -> None:
        """
        Store value, overwriting previous one.

        Args:
            key: Storage key
            value: Value to store
        """
        self._values[key] = value

    def clear(self) -> None:
        """
        Clear all values from memory.

        Useful for test cleanup.
        """
        self._values.clear()

    def count(self) -> int:
        """Get number of stored keys."""
        return len(self._values)
