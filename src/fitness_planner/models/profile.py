"""Frozen user profile — immutable snapshot of all inputs for a single plan build."""

from __future__ import annotations

from dataclasses import dataclass

from fitness_planner.models.enums import ActivityLevel, EquipmentTier, Goal, Sex


@dataclass(frozen=True)
class Profile:
    """Immutable snapshot of a user's anthropometrics and training preferences.

    This is the sole input to PlanEngine.build_plan(). Numeric fields are
    trusted to be already coerced by the input collaborator (see
    ``fitness_planner.intake``); only height/weight are guarded downstream.
    """

    # Demographics
    sex: Sex
    age: int
    height_cm: float
    weight_kg: float

    # Lifestyle & goals
    activity: ActivityLevel = ActivityLevel.MODERATE
    goal: Goal = Goal.MAINTENANCE

    # Training preferences
    days_per_week: int = 4  # 2-7
    equipment: EquipmentTier = EquipmentTier.BODYWEIGHT

    # Optional body composition
    body_fat_pct: float | None = None  # 0-100

    name: str = ""
