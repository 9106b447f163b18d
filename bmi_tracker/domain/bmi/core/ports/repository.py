"""IBMIResultRepository port - last result persistence."""

from abc import ABC, abstractmethod
from typing import Optional

from ..value_objects.bmi_result import BMIResult


class IBMIResultRepository(ABC):
    """Port for persisting the most recent BMI result.

    Only one result is kept; every save overwrites the previous one.
    Domain layer depends on this abstraction, not on concrete
    implementations (Dependency Inversion Principle).
    """

    @abstractmethod
    async def save(self, result: BMIResult) -> None:
        """Persist result, replacing the previous one.

        Args:
            result: Result to save

        Raises:
            ResultStorageError: If persistence fails
        """
        pass

    @abstractmethod
    async def load(self) -> Optional[BMIResult]:
        """Load the last saved result.

        Returns:
            Optional[BMIResult]: Last result, None if nothing was saved

        Raises:
            ResultStorageError: If the stored record cannot be read
        """
        pass
