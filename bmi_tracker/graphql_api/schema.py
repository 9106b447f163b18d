"""GraphQL schema for the BMI backend.

Usage:
    from bmi_tracker.graphql_api.schema import create_schema
    schema = create_schema()
"""

import strawberry

from bmi_tracker.graphql_api.resolvers.bmi import BMIMutations, BMIQueries


@strawberry.type
class Query:
    @strawberry.field(description="BMI queries")  # type: ignore[misc]
    def bmi(self) -> BMIQueries:
        """BMI queries.

        Example:
            query {
              bmi {
                lastResult { value category }
                classify(value: 22.86)
              }
            }
        """
        return BMIQueries()


@strawberry.type
class Mutation:
    @strawberry.field(description="BMI mutations")  # type: ignore[misc]
    def bmi(self) -> BMIMutations:
        """BMI mutations.

        Example:
            mutation {
              bmi {
                calculateBmi(input: {weight: "70", height: "175"}) {
                  ... on BMICalculationSuccess { result { value } }
                }
              }
            }
        """
        return BMIMutations()


def create_schema() -> strawberry.Schema:
    """Create Strawberry schema with all resolvers."""
    return strawberry.Schema(query=Query, mutation=Mutation)
