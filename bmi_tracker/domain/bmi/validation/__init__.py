"""Input validation for BMI calculation."""

from .input_validator import MAX_HEIGHT_CM, MAX_WEIGHT_KG, InputValidator

__all__ = [
    "InputValidator",
    "MAX_WEIGHT_KG",
    "MAX_HEIGHT_CM",
]
