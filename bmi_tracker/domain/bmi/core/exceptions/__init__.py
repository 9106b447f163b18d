"""Domain exceptions for BMI calculation."""

from .domain_errors import (
    BMIDomainError,
    InvalidMeasurementError,
    ResultStorageError,
)

__all__ = [
    "BMIDomainError",
    "InvalidMeasurementError",
    "ResultStorageError",
]
