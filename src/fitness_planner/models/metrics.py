"""Derived energy and macro metrics."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Metrics:
    """Output of compute_metrics(): energy expenditure and macro targets.

    ``bmi == 0.0`` is a sentinel meaning "not computable" (zero or invalid
    height/weight), never a real reading.
    """

    bmi: float  # kg/m^2
    bmr: float  # kcal/day
    tdee: float  # kcal/day
    target_calories: float  # kcal/day, >= 0

    # Gram targets, all >= 0
    protein_g: int
    fat_g: int
    carbs_g: int

    @property
    def has_bmi(self) -> bool:
        return self.bmi > 0
