"""Commands for BMI use cases."""

from .calculate_bmi import CalculateBMICommand, CalculateBMIHandler, CalculateBMIResult

__all__ = [
    "CalculateBMICommand",
    "CalculateBMIHandler",
    "CalculateBMIResult",
]
