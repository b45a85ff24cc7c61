"""Body mass index and energy expenditure.

BMR uses the Mifflin-St Jeor equation; TDEE scales it by an activity factor.

Reference:
    Mifflin et al. (1990). A new predictive equation for resting energy
    expenditure in healthy individuals. Am J Clin Nutr 51(2):241-247.
"""

from __future__ import annotations

import math

from fitness_planner.models.enums import (
    ACTIVITY_MULTIPLIERS,
    BMR_AGE_COEFFICIENT,
    BMR_FEMALE_OFFSET,
    BMR_HEIGHT_COEFFICIENT,
    BMR_MALE_OFFSET,
    BMR_WEIGHT_COEFFICIENT,
    DEFAULT_ACTIVITY_MULTIPLIER,
    GOAL_CALORIE_MULTIPLIERS,
    ActivityLevel,
    Goal,
    Sex,
)


def _is_usable(value: float) -> bool:
    return isinstance(value, (int, float)) and math.isfinite(value) and value > 0


def calculate_bmi(weight_kg: float, height_cm: float) -> float:
    """Body mass index in kg/m^2.

    Returns 0.0 when either input is zero, negative or non-finite. Callers
    must read 0.0 as "not computable", not as a real BMI.
    """
    if not (_is_usable(weight_kg) and _is_usable(height_cm)):
        return 0.0
    height_m = height_cm / 100
    return weight_kg / (height_m ** 2)


def calculate_bmr(sex: Sex, age: int, height_cm: float, weight_kg: float) -> float:
    """Basal metabolic rate (kcal/day) via Mifflin-St Jeor.

    BMR = 10*weight + 6.25*height - 5*age + s, with s = +5 for males and
    -161 otherwise. ``Sex.OTHER`` currently shares the female offset.
    """
    offset = BMR_MALE_OFFSET if sex == Sex.MALE else BMR_FEMALE_OFFSET
    return (
        BMR_WEIGHT_COEFFICIENT * weight_kg
        + BMR_HEIGHT_COEFFICIENT * height_cm
        - BMR_AGE_COEFFICIENT * age
        + offset
    )


def activity_multiplier(activity: ActivityLevel) -> float:
    """Look up the TDEE multiplier; unknown levels count as MODERATE (1.55)."""
    if not isinstance(activity, ActivityLevel):
        return DEFAULT_ACTIVITY_MULTIPLIER
    return ACTIVITY_MULTIPLIERS.get(activity, DEFAULT_ACTIVITY_MULTIPLIER)


def calculate_tdee(bmr: float, activity: ActivityLevel) -> float:
    """Total daily energy expenditure = BMR × activity multiplier."""
    return bmr * activity_multiplier(activity)


def calculate_target_calories(tdee: float, goal: Goal) -> float:
    """Daily calorie target for a goal, floored at 0.

    MAINTENANCE (and any unknown goal) returns TDEE unchanged.
    """
    if isinstance(goal, Goal) and goal in GOAL_CALORIE_MULTIPLIERS:
        kcal = tdee * GOAL_CALORIE_MULTIPLIERS[goal]
    else:
        kcal = tdee
    return max(0.0, kcal)
