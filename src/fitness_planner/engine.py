"""PlanEngine — the main orchestrator that builds a fitness plan."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from fitness_planner.calculator import compute_metrics
from fitness_planner.config import PlannerConfig
from fitness_planner.math.macros import round_half_up
from fitness_planner.models.metrics import Metrics
from fitness_planner.models.plan import NutritionSummary, Plan
from fitness_planner.models.profile import Profile
from fitness_planner.plan_builder.builder import build_weekly_split
from fitness_planner.plan_builder.exercise_catalog import normalize_tier, resolve_catalog
from fitness_planner.tips.composer import compose_tips
from fitness_planner.tips.registry import TipRegistry

logger = logging.getLogger(__name__)


class PlanEngine:
    """Orchestrates metrics, weekly split and tips into a Plan.

    Usage:
        engine = PlanEngine()
        metrics = engine.compute_metrics(profile)   # live preview
        plan = engine.build_plan(profile)           # explicit "generate"
    """

    def __init__(
        self,
        config: PlannerConfig | None = None,
        registry: TipRegistry | None = None,
    ) -> None:
        self.config = config or PlannerConfig()
        self.registry = registry or TipRegistry()

        # Auto-discover tip rules if using default registry
        if registry is None:
            self.registry.discover_rules()

    def compute_metrics(self, profile: Profile) -> Metrics:
        """Compute metrics under this engine's fat-fraction policy."""
        return compute_metrics(profile, self.config.fat_fraction_policy)

    def build_plan(self, profile: Profile) -> Plan:
        """Build a complete plan for a profile.

        Args:
            profile: Frozen snapshot of the user's inputs.

        Returns:
            A Plan stamped with the current UTC time. Two calls with the same
            profile produce equal Plans (generated_at is not compared).
        """
        metrics = self.compute_metrics(profile)
        equipment = normalize_tier(profile.equipment)
        names = resolve_catalog(equipment)
        days = build_weekly_split(profile.days_per_week, names)
        tips = compose_tips(profile, metrics, self.registry)

        plan = Plan(
            nutrition=self._nutrition_summary(metrics),
            days=days,
            tips=tips,
            metrics=metrics,
            equipment=equipment,
            generated_at=datetime.now(timezone.utc),
            version=self.config.plan_version,
            disclaimer=self.config.disclaimer,
            profile=profile,
        )
        logger.info(
            "Built %d-day plan: %d kcal, %d tips",
            len(days),
            plan.nutrition.calories,
            len(tips),
        )
        return plan

    @staticmethod
    def _nutrition_summary(metrics: Metrics) -> NutritionSummary:
        return NutritionSummary(
            calories=round_half_up(metrics.target_calories),
            protein_g=metrics.protein_g,
            fat_g=metrics.fat_g,
            carbs_g=metrics.carbs_g,
        )


def build_plan(profile: Profile, config: PlannerConfig | None = None) -> Plan:
    """Build a plan with a one-off PlanEngine."""
    return PlanEngine(config=config).build_plan(profile)
