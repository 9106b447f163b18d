"""BMI screen state and session.

BMIScreenState is an immutable record of what the BMI screen shows.
Transitions are pure functions returning a new state; BMIScreenSession
is the single owner of the current state and the only place where it
changes.
"""

import logging
from dataclasses import dataclass, replace
from typing import Optional

from bmi_tracker.domain.bmi.core.exceptions.domain_errors import InvalidMeasurementError
from bmi_tracker.domain.bmi.core.value_objects.bmi_result import BMIResult
from bmi_tracker.domain.bmi.core.value_objects.validation_reason import ValidationReason

from .commands.calculate_bmi import CalculateBMICommand, CalculateBMIHandler
from .queries.get_last_bmi import GetLastBMIQuery, GetLastBMIQueryHandler

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BMIScreenState:
    """What the BMI screen displays.

    Attributes:
        weight_text: Weight field content
        height_text: Height field content
        result: Displayed result (None = nothing shown); seeded from
            storage at start-up, replaced by each calculation
        last_saved: Result loaded from storage at start-up
        error: Reason of the last rejected submission
    """

    weight_text: str = ""
    height_text: str = ""
    result: Optional[BMIResult] = None
    last_saved: Optional[BMIResult] = None
    error: Optional[ValidationReason] = None

    def with_inputs(self, weight_text: str, height_text: str) -> "BMIScreenState":
        return replace(self, weight_text=weight_text, height_text=height_text)

    def with_result(self, result: BMIResult) -> "BMIScreenState":
        return replace(self, result=result, error=None)

    def with_error(self, reason: ValidationReason) -> "BMIScreenState":
        return replace(self, error=reason)

    def cleared(self) -> "BMIScreenState":
        """Empty inputs, result and error. last_saved is kept."""
        return BMIScreenState(last_saved=self.last_saved)


class BMIScreenSession:
    """Owns the screen state for one user session.

    Example:
        >>> session = BMIScreenSession(calculate_handler, last_bmi_handler)
        >>> await session.start()
        >>> state = await session.submit("70", "175")
        >>> state.result.summary()
        'BMI: 22.86 - Normal weight'
        >>> session.clear().result is None
        True
    """

    def __init__(
        self,
        calculate_handler: CalculateBMIHandler,
        last_bmi_handler: GetLastBMIQueryHandler,
    ):
        self._calculate_handler = calculate_handler
        self._last_bmi_handler = last_bmi_handler
        self._state = BMIScreenState()

    @property
    def state(self) -> BMIScreenState:
        return self._state

    async def start(self) -> BMIScreenState:
        """Seed the state with the last persisted result (once per session)."""
        last = await self._last_bmi_handler.handle(GetLastBMIQuery())
        self._state = BMIScreenState(last_saved=last, result=last)
        return self._state

    async def submit(self, weight_text: str, height_text: str) -> BMIScreenState:
        """Calculate BMI from the given input.

        On rejection the previous result stays and the reason is recorded.
        """
        state = self._state.with_inputs(weight_text, height_text)
        try:
            outcome = await self._calculate_handler.handle(
                CalculateBMICommand(weight=weight_text, height=height_text)
            )
        except InvalidMeasurementError as e:
            logger.info("BMI input rejected", extra={"reason": e.reason.value})
            self._state = state.with_error(e.reason)
            return self._state

        self._state = state.with_result(outcome.result)
        return self._state

    def clear(self) -> BMIScreenState:
        """Reset in-memory state. Persisted data is not touched."""
        self._state = self._state.cleared()
        return self._state
