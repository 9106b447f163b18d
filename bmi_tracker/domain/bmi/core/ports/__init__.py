"""Ports for BMI domain."""

from .calculators import IBMICalculator, ICategoryClassifier
from .key_value_store import IKeyValueStore
from .repository import IBMIResultRepository

__all__ = [
    "IBMICalculator",
    "ICategoryClassifier",
    "IKeyValueStore",
    "IBMIResultRepository",
]
