"""BMICategory value object - standard BMI classification."""

import math
from enum import Enum
from typing import Optional, Tuple


class BMICategory(str, Enum):
    """Standard BMI category.

    Ranges are half-open ``[lower, upper)``; a value sitting exactly on a
    boundary belongs to the higher category:
    - UNDERWEIGHT: BMI < 18.5
    - NORMAL_WEIGHT: 18.5 <= BMI < 25.0
    - OVERWEIGHT: 25.0 <= BMI < 30.0
    - OBESE: BMI >= 30.0
    """

    UNDERWEIGHT = "Underweight"
    NORMAL_WEIGHT = "Normal weight"
    OVERWEIGHT = "Overweight"
    OBESE = "Obese"

    @classmethod
    def from_bmi(cls, value: float) -> "BMICategory":
        """Classify a BMI value.

        Args:
            value: BMI value

        Returns:
            BMICategory: Category whose range contains ``value``

        Raises:
            ValueError: If value is NaN

        Example:
            >>> BMICategory.from_bmi(25.0)
            <BMICategory.OVERWEIGHT: 'Overweight'>
        """
        if math.isnan(value):
            raise ValueError("BMI value must be a number, got NaN")

        if value < 18.5:
            return cls.UNDERWEIGHT
        elif value < 25.0:
            return cls.NORMAL_WEIGHT
        elif value < 30.0:
            return cls.OVERWEIGHT
        else:
            return cls.OBESE

    def bounds(self) -> Tuple[Optional[float], Optional[float]]:
        """Get the half-open BMI range of this category.

        Returns:
            Tuple of (lower_bound, upper_bound); None means unbounded
        """
        ranges = {
            BMICategory.UNDERWEIGHT: (None, 18.5),
            BMICategory.NORMAL_WEIGHT: (18.5, 25.0),
            BMICategory.OVERWEIGHT: (25.0, 30.0),
            BMICategory.OBESE: (30.0, None),
        }
        return ranges[self]

    def color(self) -> str:
        """Get display colour (hex) for the category.

        Returns:
            str: Hex colour code
        """
        colors = {
            BMICategory.UNDERWEIGHT: "#3498db",  # Blue
            BMICategory.NORMAL_WEIGHT: "#2ecc71",  # Green
            BMICategory.OVERWEIGHT: "#f39c12",  # Orange
            BMICategory.OBESE: "#e74c3c",  # Red
        }
        return colors[self]
