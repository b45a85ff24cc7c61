"""Metrics calculator — turns a Profile into energy and macro targets."""

from __future__ import annotations

import logging

from fitness_planner.math.energy import (
    calculate_bmi,
    calculate_bmr,
    calculate_target_calories,
    calculate_tdee,
)
from fitness_planner.math.macros import (
    carb_grams,
    fat_fraction,
    fat_grams,
    protein_grams,
)
from fitness_planner.models.enums import FatFractionPolicy
from fitness_planner.models.metrics import Metrics
from fitness_planner.models.profile import Profile

logger = logging.getLogger(__name__)


def compute_metrics(
    profile: Profile,
    fat_policy: FatFractionPolicy = FatFractionPolicy.FLAT,
) -> Metrics:
    """Compute BMI, BMR, TDEE, calorie target and macro grams.

    Pure and total: never raises for inputs inside the Profile's declared
    domains, and is cheap enough to call on every input change.

    Args:
        profile: Frozen user profile.
        fat_policy: Which fat-fraction policy to apply (default FLAT, 30%).

    Returns:
        A frozen Metrics. Unrounded floats for bmi/bmr/tdee/target_calories,
        integer grams for the macros.
    """
    bmi = calculate_bmi(profile.weight_kg, profile.height_cm)
    if bmi == 0.0:
        logger.debug(
            "BMI not computable for height=%s weight=%s",
            profile.height_cm,
            profile.weight_kg,
        )

    bmr = calculate_bmr(profile.sex, profile.age, profile.height_cm, profile.weight_kg)
    tdee = calculate_tdee(bmr, profile.activity)
    kcal = calculate_target_calories(tdee, profile.goal)

    protein_g = protein_grams(profile.weight_kg, profile.goal)
    fat_g = fat_grams(kcal, fat_fraction(profile.goal, fat_policy))
    carbs_g = carb_grams(kcal, protein_g, fat_g)

    return Metrics(
        bmi=bmi,
        bmr=bmr,
        tdee=tdee,
        target_calories=kcal,
        protein_g=protein_g,
        fat_g=fat_g,
        carbs_g=carbs_g,
    )
