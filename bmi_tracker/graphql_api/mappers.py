"""Mapping between BMI domain objects and GraphQL types."""

from bmi_tracker.domain.bmi.core.value_objects.bmi_category import BMICategory
from bmi_tracker.domain.bmi.core.value_objects.bmi_result import BMIResult
from bmi_tracker.domain.bmi.core.value_objects.validation_reason import ValidationReason

from .types_bmi import (
    BMICategoryEnum,
    BMICategoryInfoType,
    BMIResultType,
    BMIValidationError,
    ValidationReasonEnum,
)


def map_category(category: BMICategory) -> BMICategoryEnum:
    """Map domain BMICategory to GraphQL enum (same values)."""
    return BMICategoryEnum(category.value)


def map_result(result: BMIResult) -> BMIResultType:
    """Map domain BMIResult to GraphQL BMIResultType."""
    return BMIResultType(
        value=result.value,
        category=map_category(result.category),
        label=result.category.value,
        color=result.category.color(),
        summary=result.summary(),
    )


def map_category_info(category: BMICategory) -> BMICategoryInfoType:
    lower, upper = category.bounds()
    return BMICategoryInfoType(
        category=map_category(category),
        label=category.value,
        color=category.color(),
        lower_bound=lower,
        upper_bound=upper,
    )


def map_validation_error(reason: ValidationReason) -> BMIValidationError:
    return BMIValidationError(
        reason=ValidationReasonEnum(reason.value),
        message=reason.message(),
    )
