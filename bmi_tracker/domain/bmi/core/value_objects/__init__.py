"""Value objects for BMI domain."""

from .bmi_category import BMICategory
from .bmi_result import BMIResult
from .measurements import Measurements
from .validation_reason import ValidationReason

__all__ = [
    "BMICategory",
    "BMIResult",
    "Measurements",
    "ValidationReason",
]
