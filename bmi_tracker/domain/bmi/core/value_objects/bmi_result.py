"""BMIResult value object - a computed and classified BMI."""

import logging
import math
from dataclasses import dataclass
from typing import Any, Dict

from .bmi_category import BMICategory

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BMIResult:
    """Computed BMI with its category.

    The category is never set independently: it must match the one
    derived from ``value``. Use ``from_value`` to build instances.

    Attributes:
        value: BMI rounded to 2 decimal places (positive)
        category: Category derived from value
    """

    value: float
    category: BMICategory

    def __post_init__(self) -> None:
        """Validate value and category consistency.

        Raises:
            ValueError: If value is not positive or category does not match
        """
        if not math.isfinite(self.value) or self.value <= 0:
            raise ValueError(f"BMI must be a positive number, got {self.value}")

        expected = BMICategory.from_bmi(self.value)
        if self.category != expected:
            raise ValueError(
                f"Category {self.category.value!r} does not match BMI {self.value} "
                f"(expected {expected.value!r})"
            )

    @staticmethod
    def from_value(value: float) -> "BMIResult":
        """Create result deriving the category from the value.

        Example:
            >>> BMIResult.from_value(22.86).category
            <BMICategory.NORMAL_WEIGHT: 'Normal weight'>
        """
        return BMIResult(value=value, category=BMICategory.from_bmi(value))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the flat persisted record."""
        return {"value": self.value, "category": self.category.value}

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "BMIResult":
        """Create instance from a persisted record.

        The category is re-derived from ``value``; a stored category that
        disagrees is replaced.

        Raises:
            ValueError: If record has no usable value
            KeyError: If record has no value field
        """
        value = float(data["value"])
        result = BMIResult.from_value(value)

        stored = data.get("category")
        if stored is not None and stored != result.category.value:
            logger.warning(
                "Stored BMI category does not match value, using derived one",
                extra={
                    "value": value,
                    "stored_category": stored,
                    "derived_category": result.category.value,
                },
            )
        return result

    def summary(self) -> str:
        """Single-line text for notifications and logs.

        Example:
            >>> BMIResult.from_value(22.86).summary()
            'BMI: 22.86 - Normal weight'
        """
        return f"BMI: {self.value:.2f} - {self.category.value}"

    def __str__(self) -> str:
        return self.summary()
