"""Body-composition tips: BMI bracket and body-fat bracket commentary.

BMI brackets use the Asia-Pacific cut-offs (18.5 / 24 / 27); body-fat
brackets are sex-agnostic (20% / 30%).

Reference:
    WHO Expert Consultation (2004). Appropriate body-mass index for Asian
    populations. Lancet 363(9403):157-163.
"""

from __future__ import annotations

from fitness_planner.models.enums import (
    BMI_NORMAL_BELOW,
    BMI_OVERWEIGHT_BELOW,
    BMI_UNDERWEIGHT_BELOW,
    BODY_FAT_HIGH_PCT,
    BODY_FAT_MODERATE_PCT,
    TipOrder,
)
from fitness_planner.models.metrics import Metrics
from fitness_planner.models.profile import Profile
from fitness_planner.tips.base import TipRule


def classify_bmi(bmi: float) -> str:
    """Classify a BMI into underweight / normal / overweight / obese."""
    if bmi < BMI_UNDERWEIGHT_BELOW:
        return "underweight"
    elif bmi < BMI_NORMAL_BELOW:
        return "normal"
    elif bmi < BMI_OVERWEIGHT_BELOW:
        return "overweight"
    return "obese"


def classify_body_fat(body_fat_pct: float) -> str:
    """Classify a body-fat percentage into high / moderate / low."""
    if body_fat_pct >= BODY_FAT_HIGH_PCT:
        return "high"
    elif body_fat_pct >= BODY_FAT_MODERATE_PCT:
        return "moderate"
    return "low"


_BMI_MESSAGES: dict[str, str] = {
    "underweight": (
        "BMI {bmi:.1f} (underweight): eat at or slightly above maintenance, "
        "hit your protein target daily and prioritise progressive strength "
        "work over extra cardio."
    ),
    "normal": (
        "BMI {bmi:.1f} (normal range): focus on performance. Add reps or load "
        "week to week and keep protein consistent."
    ),
    "overweight": (
        "BMI {bmi:.1f} (overweight): a moderate calorie deficit plus 2–3 "
        "Zone 2 sessions a week will drive fat loss while lifting preserves "
        "muscle."
    ),
    "obese": (
        "BMI {bmi:.1f} (obese): start with low-impact cardio and machine or "
        "supported movements to protect joints, and build daily step count "
        "gradually."
    ),
}

_BODY_FAT_MESSAGES: dict[str, str] = {
    "high": (
        "Body fat {pct:.0f}% is high: steady fat loss of 0.5–1% body weight "
        "per week, with waist circumference as your main progress marker."
    ),
    "moderate": (
        "Body fat {pct:.0f}% is moderate: recomposition works well here. "
        "Keep protein high and track strength alongside the scale."
    ),
    "low": (
        "Body fat {pct:.0f}% is low: avoid aggressive deficits and favour a "
        "small surplus to support training quality and recovery."
    ),
}


class BmiBracketTip(TipRule):
    """Comments on the BMI bracket. Silent when BMI is not computable."""

    rule_id = "bmi_bracket"
    order = TipOrder.BMI

    def evaluate(self, profile: Profile, metrics: Metrics) -> str | None:
        if not metrics.has_bmi:
            return None
        # Bracket follows the one-decimal value shown in the message.
        bmi = round(metrics.bmi, 1)
        return _BMI_MESSAGES[classify_bmi(bmi)].format(bmi=bmi)


class BodyFatTip(TipRule):
    """Comments on body-fat percentage. Silent when body fat is missing or 0."""

    rule_id = "body_fat_bracket"
    order = TipOrder.BODY_FAT

    def evaluate(self, profile: Profile, metrics: Metrics) -> str | None:
        pct = profile.body_fat_pct
        if pct is None or pct <= 0:
            return None
        return _BODY_FAT_MESSAGES[classify_body_fat(pct)].format(pct=pct)
