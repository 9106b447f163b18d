"""CategoryClassifierService - BMI category classification."""

from ..core.ports.calculators import ICategoryClassifier
from ..core.value_objects.bmi_category import BMICategory


class CategoryClassifierService(ICategoryClassifier):
    """Classify BMI values using half-open ranges.

    | Range             | Category      |
    |-------------------|---------------|
    | v < 18.5          | Underweight   |
    | 18.5 <= v < 25.0  | Normal weight |
    | 25.0 <= v < 30.0  | Overweight    |
    | v >= 30.0         | Obese         |
    """

    def classify(self, value: float) -> BMICategory:
        """Classify BMI value.

        Example:
            >>> CategoryClassifierService().classify(18.5)
            <BMICategory.NORMAL_WEIGHT: 'Normal weight'>
        """
        return BMICategory.from_bmi(value)


def classify_bmi(value: float) -> BMICategory:
    """Classify BMI value with the default classifier."""
    return CategoryClassifierService().classify(value)
