"""BMIOrchestrator - coordinates validation, calculation and classification."""

from dataclasses import dataclass
from typing import Optional

from bmi_tracker.domain.bmi.calculation.bmi_service import BMICalculatorService
from bmi_tracker.domain.bmi.calculation.category_service import (
    CategoryClassifierService,
)
from bmi_tracker.domain.bmi.core.ports.calculators import (
    IBMICalculator,
    ICategoryClassifier,
)
from bmi_tracker.domain.bmi.core.value_objects.bmi_result import BMIResult
from bmi_tracker.domain.bmi.core.value_objects.measurements import Measurements
from bmi_tracker.domain.bmi.validation.input_validator import InputValidator


@dataclass(frozen=True)
class BMIEvaluation:
    """Result of an evaluation."""

    measurements: Measurements
    result: BMIResult


class BMIOrchestrator:
    """
    Orchestrates the pure BMI pipeline. No persistence happens here.

    Flow:
    1. Validate raw weight/height text
    2. Calculate BMI (rounded to 2 decimals)
    3. Classify the rounded value
    """

    def __init__(
        self,
        validator: Optional[InputValidator] = None,
        calculator: Optional[IBMICalculator] = None,
        classifier: Optional[ICategoryClassifier] = None,
    ):
        self._validator = validator or InputValidator()
        self._calculator = calculator or BMICalculatorService()
        self._classifier = classifier or CategoryClassifierService()

    @property
    def validator(self) -> InputValidator:
        return self._validator

    def evaluate(
        self,
        weight_text: str,
        height_text: str,
        strict: Optional[bool] = None,
    ) -> BMIEvaluation:
        """
        Validate input and compute the classified BMI.

        Args:
            weight_text: Weight in kg as typed by the user
            height_text: Height in cm as typed by the user
            strict: Override the validator's realistic-range check

        Returns:
            BMIEvaluation with measurements and result

        Raises:
            InvalidMeasurementError: If input is rejected
        """
        validator = self._validator
        if strict is not None and strict != validator.strict:
            validator = InputValidator(strict=strict)

        # Step 1: Validate raw input
        measurements = validator.validate(weight_text, height_text)

        # Step 2: Calculate BMI
        value = self._calculator.calculate(measurements)

        # Step 3: Classify
        category = self._classifier.classify(value)

        return BMIEvaluation(
            measurements=measurements,
            result=BMIResult(value=value, category=category),
        )
