"""Training tips: equipment tier, goal, and the closing weekly summary."""

from __future__ import annotations

from fitness_planner.models.enums import (
    EQUIPMENT_LABELS,
    EquipmentTier,
    Goal,
    TipOrder,
)
from fitness_planner.models.metrics import Metrics
from fitness_planner.models.profile import Profile
from fitness_planner.plan_builder.split_templates import clamp_days
from fitness_planner.tips.base import TipRule

_EQUIPMENT_MESSAGES: dict[EquipmentTier, str] = {
    EquipmentTier.BODYWEIGHT: (
        "Bodyweight only: progress by slowing the tempo, adding pauses, "
        "moving to harder variations or loading a backpack."
    ),
    EquipmentTier.DUMBBELL: (
        "Dumbbells: once you reach the top of a rep range on every set, move "
        "up to the next dumbbell and restart at the bottom of the range."
    ),
    EquipmentTier.GYM: (
        "Full gym: build the week around the compound barbell lifts and use "
        "machines and cables to add safe volume."
    ),
}

_GOAL_MESSAGES: dict[Goal, str] = {
    Goal.FAT_LOSS: (
        "Fat loss: ~15% calorie deficit with 1.8–2.0 g/kg protein; keep "
        "lifting heavy and add 2–4 Zone 2 sessions a week. If your waist "
        "hasn't dropped in two weeks, cut another 100–150 kcal."
    ),
    Goal.MUSCLE_GAIN: (
        "Muscle gain: ~10% calorie surplus, 10–20 hard sets per muscle per "
        "week at 1–3 reps in reserve, and aim to gain 0.5–1% of body weight "
        "per month."
    ),
    Goal.RECOMP: (
        "Recomposition: eat at maintenance or a slight deficit, chase small "
        "strength gains, and judge progress by a shrinking waist with stable "
        "or rising strength."
    ),
    Goal.MAINTENANCE: (
        "Maintenance: eat at TDEE, keep protein steady, and accumulate "
        "150–300 min of moderate activity each week."
    ),
}


class EquipmentTip(TipRule):
    """Comments on how to progress with the available equipment."""

    rule_id = "equipment_tier"
    order = TipOrder.EQUIPMENT

    def evaluate(self, profile: Profile, metrics: Metrics) -> str | None:
        return _EQUIPMENT_MESSAGES.get(
            profile.equipment, _EQUIPMENT_MESSAGES[EquipmentTier.BODYWEIGHT]
        )


class GoalTip(TipRule):
    """Nutrition and training emphasis for the chosen goal."""

    rule_id = "goal"
    order = TipOrder.GOAL

    def evaluate(self, profile: Profile, metrics: Metrics) -> str | None:
        return _GOAL_MESSAGES.get(profile.goal, _GOAL_MESSAGES[Goal.MAINTENANCE])


class WeeklySummaryTip(TipRule):
    """Closing summary naming the weekly frequency and equipment."""

    rule_id = "weekly_summary"
    order = TipOrder.SUMMARY

    def evaluate(self, profile: Profile, metrics: Metrics) -> str | None:
        label = EQUIPMENT_LABELS.get(
            profile.equipment, EQUIPMENT_LABELS[EquipmentTier.BODYWEIGHT]
        )
        return (
            f"Your week: {clamp_days(profile.days_per_week)} training days "
            f"with {label.lower()}. Log every session and add a rep or a "
            f"little load whenever you top out a range."
        )
