"""IKeyValueStore port - local key-value persistence."""

from abc import ABC, abstractmethod
from typing import Optional


class IKeyValueStore(ABC):
    """Port for string key-value storage.

    Models a local device store: string keys,
    string values, last write wins. Adapters raise ResultStorageError
    when the backend fails.
    """

    @abstractmethod
    async def get(self, key: str) -> Optional[str]:
        """Read value stored under key.

        Args:
            key: Storage key

        Returns:
            Optional[str]: Stored value, None if key is missing

        Raises:
            ResultStorageError: If the backend cannot be read
        """
        pass

    @abstractmethod
    async def set(self, key: str, value: str) -> None:
        """Store value under key, overwriting any previous value.

        Args:
            key: Storage key
            value: Value to store

        Raises:
            ResultStorageError: If the backend cannot be written
        """
        pass
