"""GetLastBMIQuery - retrieve the last persisted BMI result."""

import logging
from dataclasses import dataclass
from typing import Optional

from bmi_tracker.domain.bmi.core.exceptions.domain_errors import ResultStorageError
from bmi_tracker.domain.bmi.core.ports.repository import IBMIResultRepository
from bmi_tracker.domain.bmi.core.value_objects.bmi_result import BMIResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GetLastBMIQuery:
    """Query for the last saved BMI result."""

    pass


class GetLastBMIQueryHandler:
    """Handler for GetLastBMIQuery.

    Storage failures are logged and answered with None (empty state).
    """

    def __init__(self, repository: IBMIResultRepository):
        self._repository = repository

    async def handle(self, query: GetLastBMIQuery) -> Optional[BMIResult]:
        """
        Handle get last BMI query.

        Returns:
            Optional[BMIResult]: Last result, None if missing or unreadable
        """
        try:
            return await self._repository.load()
        except ResultStorageError as e:
            logger.error(
                "Failed to load BMI",
                extra={"error": str(e)},
                exc_info=True,
            )
            return None
