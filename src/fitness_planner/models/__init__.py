"""Data models for the fitness planner."""

from fitness_planner.models.enums import (
    ActivityLevel,
    EquipmentTier,
    FatFractionPolicy,
    Goal,
    MovementRole,
    Sex,
    SplitFamily,
    TipOrder,
)
from fitness_planner.models.metrics import Metrics
from fitness_planner.models.plan import (
    REST_DAY_GUIDANCE,
    NutritionSummary,
    Plan,
    TrainingBlock,
    TrainingDay,
)
from fitness_planner.models.profile import Profile

__all__ = [
    "REST_DAY_GUIDANCE",
    "ActivityLevel",
    "EquipmentTier",
    "FatFractionPolicy",
    "Goal",
    "Metrics",
    "MovementRole",
    "NutritionSummary",
    "Plan",
    "Profile",
    "Sex",
    "SplitFamily",
    "TipOrder",
    "TrainingBlock",
    "TrainingDay",
]
