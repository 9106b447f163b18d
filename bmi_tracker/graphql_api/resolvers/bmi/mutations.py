"""Mutation resolvers for BMI domain.

- calculateBmi: validate input, compute and classify BMI, save it in the
  background
"""

from __future__ import annotations

import strawberry

from bmi_tracker.application.bmi.commands.calculate_bmi import (
    CalculateBMICommand,
    CalculateBMIHandler,
)
from bmi_tracker.domain.bmi.core.exceptions.domain_errors import InvalidMeasurementError
from bmi_tracker.graphql_api.mappers import map_result, map_validation_error
from bmi_tracker.graphql_api.types_bmi import (
    BMICalculationSuccess,
    CalculateBMIInput,
    CalculateBMIResult,
)


@strawberry.type
class BMIMutations:
    """Mutations for BMI operations."""

    @strawberry.mutation
    async def calculate_bmi(
        self, info: strawberry.types.Info, input: CalculateBMIInput
    ) -> CalculateBMIResult:
        """Calculate BMI from raw input.

        Rejected input is returned as BMIValidationError, not as a
        GraphQL error. The save is not awaited.

        Example:
            mutation {
              bmi {
                calculateBmi(input: {weight: "70", height: "175"}) {
                  ... on BMICalculationSuccess { result { value category } }
                  ... on BMIValidationError { reason message }
                }
              }
            }
        """
        orchestrator = info.context.get("bmi_orchestrator")
        saver = info.context.get("result_saver")
        if not orchestrator or not saver:
            raise Exception("Missing bmi_orchestrator or result_saver in GraphQL context")

        handler = CalculateBMIHandler(orchestrator=orchestrator, saver=saver)
        try:
            outcome = await handler.handle(
                CalculateBMICommand(
                    weight=input.weight,
                    height=input.height,
                    strict=input.strict,
                )
            )
        except InvalidMeasurementError as e:
            return map_validation_error(e.reason)

        return BMICalculationSuccess(
            result=map_result(outcome.result),
            weight=outcome.measurements.weight_kg,
            height=outcome.measurements.height_cm,
        )
