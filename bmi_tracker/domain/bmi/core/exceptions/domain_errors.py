"""Domain exceptions for BMI calculation."""

from typing import Optional

from ..value_objects.validation_reason import ValidationReason


class BMIDomainError(Exception):
    """Base exception for BMI domain errors."""

    pass


class InvalidMeasurementError(BMIDomainError):
    """Raised when raw weight/height input is rejected.

    Carries the reason of the first failing validation rule so the
    presentation layer can show it to the user.
    """

    def __init__(self, reason: ValidationReason, detail: Optional[str] = None):
        super().__init__(detail or reason.message())
        self.reason = reason


class ResultStorageError(BMIDomainError):
    """Raised when the result store cannot be read or written."""

    pass
