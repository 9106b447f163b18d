"""Queries for BMI use cases."""

from .get_last_bmi import GetLastBMIQuery, GetLastBMIQueryHandler

__all__ = [
    "GetLastBMIQuery",
    "GetLastBMIQueryHandler",
]
