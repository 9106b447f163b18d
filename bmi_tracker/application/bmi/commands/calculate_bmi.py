"""CalculateBMICommand - compute, classify and persist a BMI."""

import logging
from dataclasses import dataclass
from typing import Optional

from bmi_tracker.domain.bmi.core.value_objects.bmi_result import BMIResult
from bmi_tracker.domain.bmi.core.value_objects.measurements import Measurements

from ..background_saver import BackgroundResultSaver
from ..orchestrators.bmi_orchestrator import BMIOrchestrator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CalculateBMICommand:
    """Command to calculate BMI from raw user input.

    Attributes:
        weight: Weight in kg as typed by the user
        height: Height in cm as typed by the user
        strict: Override realistic-range validation (None = orchestrator default)
    """

    weight: str
    height: str
    strict: Optional[bool] = None


@dataclass(frozen=True)
class CalculateBMIResult:
    """Result of a successful calculation.

    Attributes:
        result: Classified BMI
        measurements: Validated input
    """

    result: BMIResult
    measurements: Measurements


class CalculateBMIHandler:
    """Handler for CalculateBMICommand.

    1. Validates and evaluates input via orchestrator
    2. Issues a fire-and-forget save of the result
    3. Returns the result without waiting for the save
    """

    def __init__(
        self,
        orchestrator: BMIOrchestrator,
        saver: BackgroundResultSaver,
    ):
        self._orchestrator = orchestrator
        self._saver = saver

    async def handle(self, command: CalculateBMICommand) -> CalculateBMIResult:
        """
        Handle calculation command.

        Args:
            command: CalculateBMICommand with raw input

        Returns:
            CalculateBMIResult with result and measurements

        Raises:
            InvalidMeasurementError: If input is rejected (nothing is saved)
        """
        evaluation = self._orchestrator.evaluate(
            command.weight,
            command.height,
            strict=command.strict,
        )

        self._saver.schedule(evaluation.result)

        logger.info(
            "BMI calculated",
            extra={
                "value": evaluation.result.value,
                "category": evaluation.result.category.value,
            },
        )

        return CalculateBMIResult(
            result=evaluation.result,
            measurements=evaluation.measurements,
        )
