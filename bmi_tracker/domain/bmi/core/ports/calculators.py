"""Calculator ports - interfaces for BMI calculation and classification."""

from abc import ABC, abstractmethod

from ..value_objects.bmi_category import BMICategory
from ..value_objects.measurements import Measurements


class IBMICalculator(ABC):
    """Port for BMI calculation.

    Calculates Body Mass Index from validated measurements.
    """

    @abstractmethod
    def calculate(self, measurements: Measurements) -> float:
        """Calculate BMI.

        Args:
            measurements: Validated weight (kg) and height (cm)

        Returns:
            float: BMI rounded to 2 decimal places

        Raises:
            InvalidMeasurementError: If the BMI cannot be represented
        """
        pass


class ICategoryClassifier(ABC):
    """Port for BMI classification."""

    @abstractmethod
    def classify(self, value: float) -> BMICategory:
        """Map a BMI value to its category.

        Args:
            value: BMI value

        Returns:
            BMICategory: Category containing value
        """
        pass
