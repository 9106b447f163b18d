"""Key-value implementation of IBMIResultRepository."""

import json
import logging
from typing import Optional

from bmi_tracker.domain.bmi.core.exceptions.domain_errors import ResultStorageError
from bmi_tracker.domain.bmi.core.ports.key_value_store import IKeyValueStore
from bmi_tracker.domain.bmi.core.ports.repository import IBMIResultRepository
from bmi_tracker.domain.bmi.core.value_objects.bmi_result import BMIResult
from bmi_tracker.infrastructure.config import DEFAULT_STORAGE_KEY

logger = logging.getLogger(__name__)


class KeyValueBMIResultRepository(IBMIResultRepository):
    """
    Stores the last BMI result under a single key.

    The record is a flat JSON object:
        {"value": 22.86, "category": "Normal weight"}

    Every save overwrites the previous record (last write wins).
    """

    def __init__(self, store: IKeyValueStore, key: str = DEFAULT_STORAGE_KEY) -> None:
        self._store = store
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    async def save(self, result: BMIResult) -> None:
        """
        Save result under the fixed key.

        Args:
            result: Result to persist

        Raises:
            ResultStorageError: If the store rejects the write
        """
        payload = json.dumps(result.to_dict())
        await self._store.set(self._key, payload)
        logger.debug(
            "BMI result saved",
            extra={"key": self._key, "value": result.value, "category": result.category.value},
        )

    async def load(self) -> Optional[BMIResult]:
        """
        Load the last saved result.

        Returns:
            Last result, None if nothing was ever saved

        Raises:
            ResultStorageError: If the store fails or the record is corrupt
        """
        payload = await self._store.get(self._key)
        if payload is None:
            return None

        try:
            data = json.loads(payload)
            if not isinstance(data, dict):
                raise ValueError("record is not a JSON object")
            return BMIResult.from_dict(data)
        except (ValueError, KeyError, TypeError) as e:
            # json.JSONDecodeError is a ValueError
            raise ResultStorageError(
                f"Stored BMI record under '{self._key}' is invalid: {e}"
            ) from e
