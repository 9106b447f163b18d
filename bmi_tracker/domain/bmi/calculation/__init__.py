"""Calculation services for BMI."""

from .bmi_service import BMICalculatorService, calculate_bmi
from .category_service import CategoryClassifierService, classify_bmi

__all__ = [
    "BMICalculatorService",
    "CategoryClassifierService",
    "calculate_bmi",
    "classify_bmi",
]
