"""BMI GraphQL resolvers.

This module exports mutations and queries for the BMI domain.
"""

from bmi_tracker.graphql_api.resolvers.bmi.mutations import BMIMutations
from bmi_tracker.graphql_api.resolvers.bmi.queries import BMIQueries

__all__ = [
    "BMIMutations",
    "BMIQueries",
]
