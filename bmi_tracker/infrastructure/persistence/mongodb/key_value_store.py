"""MongoDB implementation of IKeyValueStore."""

from datetime import datetime, timezone
from typing import Optional

from bmi_tracker.domain.bmi.core.exceptions.domain_errors import ResultStorageError
from bmi_tracker.domain.bmi.core.ports.key_value_store import IKeyValueStore

from .base import MongoBaseStore


class MongoKeyValueStore(MongoBaseStore, IKeyValueStore):
    """MongoDB key-value store: one document per key.

    Document shape:
        {"_id": key, "value": str, "updated_at": ISO 8601 UTC}
    """

    @property
    def collection_name(self) -> str:
        """MongoDB collection name."""
        return "key_value_store"

    async def get(self, key: str) -> Optional[str]:
        doc = await self._find_one({"_id": key})
        if doc is None:
            return None

        value = doc.get("value")
        if not isinstance(value, str):
            raise ResultStorageError(f"Document for key '{key}' has no string value")
        return value

    async def set(self, key: str, value: str) -> None:
        await self._update_one(
            {"_id": key},
            {
                "$set": {
                    "value": value,
                    "updated_at": datetime.now(timezone.utc).isoformat(),
                }
            },
            upsert=True,
        )
