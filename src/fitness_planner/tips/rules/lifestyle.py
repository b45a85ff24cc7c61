"""Activity-level tip: one fixed message per activity key."""

from __future__ import annotations

from fitness_planner.models.enums import ActivityLevel, TipOrder
from fitness_planner.models.metrics import Metrics
from fitness_planner.models.profile import Profile
from fitness_planner.tips.base import TipRule

_ACTIVITY_MESSAGES: dict[ActivityLevel, str] = {
    ActivityLevel.SEDENTARY: (
        "Mostly sitting: aim for 7,000–8,000 steps a day and stand up every "
        "hour. Everyday movement matters as much as the workouts."
    ),
    ActivityLevel.LIGHT: (
        "Lightly active: add one or two brisk 20–30 min walks on rest days to "
        "lift daily energy expenditure."
    ),
    ActivityLevel.MODERATE: (
        "Moderately active: your base is solid. Keep rest days genuinely easy "
        "so lifting sessions stay high quality."
    ),
    ActivityLevel.ACTIVE: (
        "Highly active: fuel training days with enough carbohydrate and watch "
        "for fatigue that lingers across sessions."
    ),
    ActivityLevel.VERY_ACTIVE: (
        "Very high activity: recovery is the bottleneck. Prioritise 7–9 h "
        "sleep and schedule a lighter week every 4–6 weeks."
    ),
}


class ActivityLevelTip(TipRule):
    """Comments on the user's daily activity level."""

    rule_id = "activity_level"
    order = TipOrder.ACTIVITY

    def evaluate(self, profile: Profile, metrics: Metrics) -> str | None:
        return _ACTIVITY_MESSAGES.get(
            profile.activity, _ACTIVITY_MESSAGES[ActivityLevel.MODERATE]
        )
