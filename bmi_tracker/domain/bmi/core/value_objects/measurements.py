"""Measurements value object - validated body measurements."""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Measurements:
    """Validated weight and height.

    Attributes:
        weight_kg: Body weight in kilograms (finite, > 0)
        height_cm: Height in centimeters (finite, > 0)
    """

    weight_kg: float
    height_cm: float

    def __post_init__(self) -> None:
        """Validate measurements are positive finite numbers.

        Raises:
            ValueError: If weight or height is not a positive finite number
        """
        for name, value in (("weight_kg", self.weight_kg), ("height_cm", self.height_cm)):
            if not math.isfinite(value):
                raise ValueError(f"{name} must be finite, got {value}")
            if value <= 0:
                raise ValueError(f"{name} must be positive, got {value}")

    @property
    def height_m(self) -> float:
        """Height in meters."""
        return self.height_cm / 100.0
