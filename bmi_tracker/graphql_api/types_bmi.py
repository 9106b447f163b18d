"""GraphQL types for the BMI domain."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Optional, Union

import strawberry

__all__ = [
    # Enums
    "BMICategoryEnum",
    "ValidationReasonEnum",
    # Output types
    "BMIResultType",
    "BMICategoryInfoType",
    "BMICalculationSuccess",
    "BMIValidationError",
    "CalculateBMIResult",
    # Input types
    "CalculateBMIInput",
]


# ============================================
# ENUMS
# ============================================


@strawberry.enum
class BMICategoryEnum(str, Enum):
    """Standard BMI category (half-open ranges)."""

    UNDERWEIGHT = "Underweight"  # < 18.5
    NORMAL_WEIGHT = "Normal weight"  # 18.5 - 25.0
    OVERWEIGHT = "Overweight"  # 25.0 - 30.0
    OBESE = "Obese"  # >= 30.0


@strawberry.enum
class ValidationReasonEnum(str, Enum):
    """Why an input was rejected."""

    EMPTY_FIELD = "EMPTY_FIELD"
    NOT_A_NUMBER = "NOT_A_NUMBER"
    NON_POSITIVE = "NON_POSITIVE"
    UNREALISTIC_VALUE = "UNREALISTIC_VALUE"


# ============================================
# OUTPUT TYPES
# ============================================


@strawberry.type
class BMIResultType:
    """A computed BMI with its category."""

    value: float  # rounded to 2 decimals
    category: BMICategoryEnum
    label: str  # e.g. "Normal weight"
    color: str  # hex colour for display
    summary: str  # e.g. "BMI: 22.86 - Normal weight"


@strawberry.type
class BMICategoryInfoType:
    """Category with its BMI range. Null bound means unbounded."""

    category: BMICategoryEnum
    label: str
    color: str
    lower_bound: Optional[float] = None
    upper_bound: Optional[float] = None


@strawberry.type
class BMICalculationSuccess:
    """Successful calculation. The result is saved in the background."""

    result: BMIResultType
    weight: float  # kg
    height: float  # cm


@strawberry.type
class BMIValidationError:
    """Rejected input."""

    reason: ValidationReasonEnum
    message: str
    code: str = "INVALID_INPUT"


# ============================================
# UNION RESULT TYPES
# ============================================

CalculateBMIResult = Annotated[
    Union[BMICalculationSuccess, BMIValidationError],
    strawberry.union("CalculateBMIResult"),
]


# ============================================
# INPUT TYPES
# ============================================


@strawberry.input
class CalculateBMIInput:
    """Raw user input, as typed in the form.

    Values are text so that empty and non-numeric input can be reported
    with the proper reason.
    """

    weight: str  # kg
    height: str  # cm
    strict: Optional[bool] = None  # None = server default
