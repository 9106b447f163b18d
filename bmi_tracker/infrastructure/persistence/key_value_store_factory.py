"""Factory for creating key-value store and BMI result repository instances."""

import logging
import os
from typing import Optional

from bmi_tracker.domain.bmi.core.ports.key_value_store import IKeyValueStore
from bmi_tracker.domain.bmi.core.ports.repository import IBMIResultRepository
from bmi_tracker.infrastructure.config import (
    get_repository_backend,
    get_storage_key,
    get_storage_path,
)
from bmi_tracker.infrastructure.persistence.bmi_result_repository import (
    KeyValueBMIResultRepository,
)
from bmi_tracker.infrastructure.persistence.file.key_value_store import (
    JsonFileKeyValueStore,
)
from bmi_tracker.infrastructure.persistence.in_memory.key_value_store import (
    InMemoryKeyValueStore,
)

logger = logging.getLogger(__name__)

# Singleton instance
_key_value_store: Optional[IKeyValueStore] = None


def create_key_value_store() -> IKeyValueStore:
    """
    Create key-value store based on REPOSITORY_BACKEND configuration.

    Environment Variables:
        REPOSITORY_BACKEND: 'inmemory' (default), 'file' or 'mongodb'
        BMI_STORAGE_PATH: JSON file path (file backend)
        MONGODB_URI: MongoDB connection URI (required if 'mongodb')

    Returns:
        IKeyValueStore implementation

    Raises:
        ValueError: If REPOSITORY_BACKEND='mongodb' but MONGODB_URI not set

    Default:
        Returns InMemoryKeyValueStore if REPOSITORY_BACKEND not set
    """
    backend = get_repository_backend()

    if backend == "inmemory":
        return InMemoryKeyValueStore()

    elif backend == "file":
        return JsonFileKeyValueStore(get_storage_path())

    elif backend == "mongodb":
        if not os.getenv("MONGODB_URI"):
            raise ValueError("REPOSITORY_BACKEND='mongodb' requires MONGODB_URI env var")

        # Lazy import: motor is only needed for this backend
        from bmi_tracker.infrastructure.persistence.mongodb.key_value_store import (
            MongoKeyValueStore,
        )

        return MongoKeyValueStore()

    else:
        # Unknown type - graceful fallback to inmemory
        logger.warning(f"Unknown REPOSITORY_BACKEND '{backend}', using inmemory")
        return InMemoryKeyValueStore()


def get_key_value_store() -> IKeyValueStore:
    """
    Get singleton key-value store instance.

    Lazy initialization on first call.
    """
    global _key_value_store
    if _key_value_store is None:
        _key_value_store = create_key_value_store()
    return _key_value_store


def reset_key_value_store() -> None:
    """
    Reset singleton instance.

    Useful for testing to ensure clean state.
    """
    global _key_value_store
    _key_value_store = None


def create_bmi_result_repository(
    store: Optional[IKeyValueStore] = None,
) -> IBMIResultRepository:
    """
    Create BMI result repository on top of a key-value store.

    Args:
        store: Store to use (defaults to the singleton store)

    Returns:
        IBMIResultRepository using the configured storage key
    """
    return KeyValueBMIResultRepository(
        store=store if store is not None else get_key_value_store(),
        key=get_storage_key(),
    )
