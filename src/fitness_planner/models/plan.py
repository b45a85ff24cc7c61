"""Plan models: TrainingBlock, TrainingDay, NutritionSummary and Plan."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from fitness_planner.models.enums import EquipmentTier
from fitness_planner.models.metrics import Metrics
from fitness_planner.models.profile import Profile

# Shown in place of an empty block list.
REST_DAY_GUIDANCE = (
    "Structural rest / cardio / mobility day. Adjust to your individual recovery."
)


@dataclass(frozen=True)
class TrainingBlock:
    """A single exercise slot within a training day.

    ``prescription`` is free-form: "sets × reps" (e.g. "3–4 × 6–10") or a
    duration (e.g. "30–45 min").
    """

    exercise: str
    prescription: str


@dataclass(frozen=True)
class TrainingDay:
    """One day of the weekly split."""

    label: str  # "Day 1" .. "Day 7"
    focus: str
    blocks: tuple[TrainingBlock, ...] = field(default_factory=tuple)

    @property
    def is_rest_day(self) -> bool:
        """True when the day has no structured blocks."""
        return len(self.blocks) == 0

    @property
    def guidance(self) -> str:
        return REST_DAY_GUIDANCE if self.is_rest_day else ""


@dataclass(frozen=True)
class NutritionSummary:
    """Daily nutrition targets rounded to whole numbers."""

    calories: int
    protein_g: int
    fat_g: int
    carbs_g: int


@dataclass(frozen=True)
class Plan:
    """Output of PlanEngine.build_plan().

    A Plan has no identity of its own: it is rebuilt from the profile on every
    request. ``generated_at`` is wall-clock and excluded from equality so two
    builds of the same profile compare equal.
    """

    nutrition: NutritionSummary
    days: tuple[TrainingDay, ...]
    tips: tuple[str, ...]
    metrics: Metrics
    equipment: EquipmentTier
    generated_at: datetime = field(compare=False, default_factory=datetime.now)
    version: str = ""
    disclaimer: str = ""
    profile: Profile | None = None  # input snapshot, exported with the plan

    @property
    def days_per_week(self) -> int:
        return len(self.days)

    @property
    def training_day_count(self) -> int:
        """Days with at least one structured block."""
        return sum(1 for d in self.days if not d.is_rest_day)
