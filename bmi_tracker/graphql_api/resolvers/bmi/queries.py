"""Query resolvers for BMI domain.

- lastResult: last persisted BMI (null if none or storage unreadable)
- categories: the four categories with ranges and colours
- classify: category of an arbitrary BMI value
"""

from typing import List, Optional

import strawberry

from bmi_tracker.application.bmi.queries.get_last_bmi import (
    GetLastBMIQuery,
    GetLastBMIQueryHandler,
)
from bmi_tracker.domain.bmi.calculation.category_service import CategoryClassifierService
from bmi_tracker.domain.bmi.core.value_objects.bmi_category import BMICategory
from bmi_tracker.graphql_api.mappers import map_category, map_category_info, map_result
from bmi_tracker.graphql_api.types_bmi import (
    BMICategoryEnum,
    BMICategoryInfoType,
    BMIResultType,
)


@strawberry.type
class BMIQueries:
    """GraphQL queries for BMI domain."""

    @strawberry.field
    async def last_result(self, info: strawberry.types.Info) -> Optional[BMIResultType]:
        """Get the last saved BMI result.

        Example:
            query {
              bmi {
                lastResult { value category summary }
              }
            }
        """
        repository = info.context.get("bmi_repository")
        if not repository:
            raise Exception("Missing bmi_repository in GraphQL context")

        handler = GetLastBMIQueryHandler(repository)
        result = await handler.handle(GetLastBMIQuery())
        return map_result(result) if result else None

    @strawberry.field
    def categories(self) -> List[BMICategoryInfoType]:
        """List categories in ascending BMI order."""
        return [map_category_info(category) for category in BMICategory]

    @strawberry.field
    def classify(self, value: float) -> BMICategoryEnum:
        """Classify a BMI value.

        Example:
            query { bmi { classify(value: 25.0) } }   # OVERWEIGHT
        """
        return map_category(CategoryClassifierService().classify(value))
