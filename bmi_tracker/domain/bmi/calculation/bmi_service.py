"""BMICalculatorService - Body Mass Index calculation."""

import math
from decimal import ROUND_HALF_UP, Context, Decimal

from ..core.exceptions.domain_errors import InvalidMeasurementError
from ..core.ports.calculators import IBMICalculator
from ..core.value_objects.measurements import Measurements
from ..core.value_objects.validation_reason import ValidationReason

_TWO_PLACES = Decimal("0.01")
# Enough digits to quantize any finite float (integer part <= 309 digits)
_ROUNDING_CONTEXT = Context(prec=400, rounding=ROUND_HALF_UP)


class BMICalculatorService(IBMICalculator):
    """Calculate Body Mass Index.

    Formula:
        BMI = weight(kg) / height(m)^2

    The result is rounded to 2 decimal places with round-half-up applied
    to the exact decimal value of the computed float.
    """

    def calculate(self, measurements: Measurements) -> float:
        """Calculate BMI from validated measurements.

        Args:
            measurements: Validated weight and height

        Returns:
            float: BMI rounded to 2 decimal places (always > 0)

        Raises:
            InvalidMeasurementError: UNREALISTIC_VALUE if the BMI overflows
                or rounds to 0.00

        Example:
            >>> service = BMICalculatorService()
            >>> service.calculate(Measurements(weight_kg=70.0, height_cm=175.0))
            22.86
        """
        try:
            raw = measurements.weight_kg / (measurements.height_m**2)
        except (OverflowError, ZeroDivisionError) as e:
            raise InvalidMeasurementError(
                ValidationReason.UNREALISTIC_VALUE,
                detail=f"BMI out of range for {measurements}",
            ) from e

        if not math.isfinite(raw):
            raise InvalidMeasurementError(
                ValidationReason.UNREALISTIC_VALUE,
                detail=f"BMI out of range for {measurements}",
            )

        value = float(Decimal(raw).quantize(_TWO_PLACES, context=_ROUNDING_CONTEXT))
        if value <= 0:
            raise InvalidMeasurementError(
                ValidationReason.UNREALISTIC_VALUE,
                detail=f"BMI rounds to 0.00 for {measurements}",
            )
        return value


def calculate_bmi(weight_kg: float, height_cm: float) -> float:
    """Calculate BMI from plain numbers.

    Raises:
        ValueError: If weight or height is not a positive finite number
        InvalidMeasurementError: If the BMI is out of range
    """
    return BMICalculatorService().calculate(
        Measurements(weight_kg=weight_kg, height_cm=height_cm)
    )
