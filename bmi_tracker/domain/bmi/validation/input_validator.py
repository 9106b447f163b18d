"""InputValidator - validation of raw weight/height text."""

import math
import re
from typing import Optional

from ..core.exceptions.domain_errors import InvalidMeasurementError
from ..core.value_objects.measurements import Measurements
from ..core.value_objects.validation_reason import ValidationReason

MAX_WEIGHT_KG = 1000.0
MAX_HEIGHT_CM = 300.0

# Plain decimal notation: optional sign, ASCII digits, optional fraction
_DECIMAL_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")


class InputValidator:
    """Validate free-text weight (kg) and height (cm).

    Rules are applied in order and the first failing one is reported:
    1. both fields non-empty after trimming -> EMPTY_FIELD
    2. both are finite plain decimals ("70", "1.75", ".5") -> NOT_A_NUMBER
    3. both strictly greater than 0 -> NON_POSITIVE
    4. strict mode only: weight <= 1000 and height <= 300 -> UNREALISTIC_VALUE
    """

    def __init__(self, strict: bool = False):
        self._strict = strict

    @property
    def strict(self) -> bool:
        return self._strict

    def validate(self, weight_text: str, height_text: str) -> Measurements:
        """Validate raw input and build measurements.

        Args:
            weight_text: Weight as typed by the user
            height_text: Height as typed by the user

        Returns:
            Measurements: Validated weight and height

        Raises:
            InvalidMeasurementError: If a rule fails (reason attached)
        """
        weight_raw = (weight_text or "").strip()
        height_raw = (height_text or "").strip()

        if not weight_raw or not height_raw:
            raise InvalidMeasurementError(ValidationReason.EMPTY_FIELD)

        weight = _parse_number(weight_raw)
        height = _parse_number(height_raw)
        if weight is None or height is None:
            raise InvalidMeasurementError(ValidationReason.NOT_A_NUMBER)

        if weight <= 0 or height <= 0:
            raise InvalidMeasurementError(ValidationReason.NON_POSITIVE)

        if self._strict and (weight > MAX_WEIGHT_KG or height > MAX_HEIGHT_CM):
            raise InvalidMeasurementError(ValidationReason.UNREALISTIC_VALUE)

        return Measurements(weight_kg=weight, height_cm=height)

    def check(self, weight_text: str, height_text: str) -> Optional[ValidationReason]:
        """Return the rejection reason, or None if input is valid."""
        try:
            self.validate(weight_text, height_text)
        except InvalidMeasurementError as e:
            return e.reason
        return None


def _parse_number(text: str) -> Optional[float]:
    """Parse a finite decimal number, None if text is not one.

    Exponents, digit separators and non-ASCII digits are rejected.
    """
    if not _DECIMAL_RE.fullmatch(text):
        return None
    value = float(text)
    if not math.isfinite(value):
        return None
    return value
