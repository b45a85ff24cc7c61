"""Macronutrient gram targets.

Protein is set per kg of body weight, fat as a share of the calorie target,
and carbohydrate absorbs whatever energy remains.

Reference:
    Jäger et al. (2017). International Society of Sports Nutrition position
    stand: protein and exercise. J Int Soc Sports Nutr 14:20.
"""

from __future__ import annotations

import math

from fitness_planner.models.enums import (
    FAT_FRACTION_DEFAULT,
    FAT_FRACTION_FAT_LOSS_REDUCED,
    KCAL_PER_G_CARB,
    KCAL_PER_G_FAT,
    KCAL_PER_G_PROTEIN,
    PROTEIN_G_PER_KG_DEFAULT,
    PROTEIN_G_PER_KG_MUSCLE_GAIN,
    FatFractionPolicy,
    Goal,
)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero.

    Python's built-in round() uses banker's rounding (2.5 -> 2); every gram
    and calorie figure in the planner goes through this function instead so
    that 2.5 -> 3 and -2.5 -> -3.
    """
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def fat_fraction(goal: Goal, policy: FatFractionPolicy = FatFractionPolicy.FLAT) -> float:
    """Share of calories allotted to fat under *policy*."""
    if policy == FatFractionPolicy.FAT_LOSS_REDUCED and goal == Goal.FAT_LOSS:
        return FAT_FRACTION_FAT_LOSS_REDUCED
    return FAT_FRACTION_DEFAULT


def protein_grams(weight_kg: float, goal: Goal) -> int:
    """Daily protein: 2.0 g/kg when building muscle, 1.8 g/kg otherwise."""
    per_kg = PROTEIN_G_PER_KG_MUSCLE_GAIN if goal == Goal.MUSCLE_GAIN else PROTEIN_G_PER_KG_DEFAULT
    return max(0, round_half_up(weight_kg * per_kg))


def fat_grams(target_calories: float, fraction: float) -> int:
    return max(0, round_half_up(target_calories * fraction / KCAL_PER_G_FAT))


def carb_grams(target_calories: float, protein_g: int, fat_g: int) -> int:
    """Carbohydrate grams filling the remaining calorie budget.

    Clamped at 0 when protein and fat alone exceed the target.
    """
    remaining = target_calories - (protein_g * KCAL_PER_G_PROTEIN + fat_g * KCAL_PER_G_FAT)
    return max(0, round_half_up(remaining / KCAL_PER_G_CARB))
