"""Tests for PlanEngine — end-to-end plan building."""

from __future__ import annotations

from datetime import timezone
from typing import Callable

import pytest

from fitness_planner.config import DISCLAIMER, PLAN_VERSION, PlannerConfig
from fitness_planner.engine import PlanEngine, build_plan
from fitness_planner.models.enums import EquipmentTier, FatFractionPolicy, Goal, Sex
from fitness_planner.models.plan import Plan
from fitness_planner.models.profile import Profile
from fitness_planner.tips.registry import TipRegistry


@pytest.fixture
def engine() -> PlanEngine:
    return PlanEngine()


class TestPlanEngine:
    def test_reference_plan(self, engine: PlanEngine, reference_profile: Profile) -> None:
        plan = engine.build_plan(reference_profile)
        assert isinstance(plan, Plan)
        assert plan.nutrition.calories == 2105
        assert plan.nutrition.protein_g == 122
        assert plan.nutrition.fat_g == 70
        assert plan.nutrition.carbs_g == 247
        assert [d.focus for d in plan.days] == [
            "Upper", "Lower", "Rest / Cardio / Mobility", "Upper 2",
        ]
        assert len(plan.tips) == 6
        assert plan.equipment == EquipmentTier.BODYWEIGHT

    def test_stamps_version_and_disclaimer(
        self, engine: PlanEngine, reference_profile: Profile
    ) -> None:
        plan = engine.build_plan(reference_profile)
        assert plan.version == PLAN_VERSION
        assert plan.disclaimer == DISCLAIMER

    def test_generated_at_is_utc(self, engine: PlanEngine, reference_profile: Profile) -> None:
        plan = engine.build_plan(reference_profile)
        assert plan.generated_at.tzinfo == timezone.utc

    def test_idempotent(self, engine: PlanEngine, reference_profile: Profile) -> None:
        assert engine.build_plan(reference_profile) == engine.build_plan(reference_profile)

    def test_preview_matches_plan_metrics(
        self, engine: PlanEngine, reference_profile: Profile
    ) -> None:
        assert engine.compute_metrics(reference_profile) == engine.build_plan(
            reference_profile
        ).metrics

    def test_equipment_changes_names_not_structure(
        self, engine: PlanEngine, profile_factory: Callable[..., Profile]
    ) -> None:
        bw = engine.build_plan(profile_factory(equipment=EquipmentTier.BODYWEIGHT))
        gym = engine.build_plan(profile_factory(equipment=EquipmentTier.GYM))
        assert [d.focus for d in bw.days] == [d.focus for d in gym.days]
        assert bw.days[0].blocks[0].exercise != gym.days[0].blocks[0].exercise
        assert bw.nutrition == gym.nutrition

    @pytest.mark.parametrize(
        "overrides",
        [
            {"sex": Sex.FEMALE},
            {"sex": Sex.OTHER},
            {"age": 18},
            {"age": 70},
            {"goal": Goal.MUSCLE_GAIN},
            {"goal": Goal.RECOMP},
            {"goal": Goal.MAINTENANCE},
        ],
    )
    def test_four_day_template_ignores_sex_age_goal(
        self, engine: PlanEngine, profile_factory: Callable[..., Profile], overrides: dict
    ) -> None:
        base = engine.build_plan(profile_factory(days_per_week=4))
        varied = engine.build_plan(profile_factory(days_per_week=4, **overrides))
        assert varied.days == base.days

    def test_unknown_equipment_stored_as_bodyweight(
        self, engine: PlanEngine, profile_factory: Callable[..., Profile]
    ) -> None:
        plan = engine.build_plan(profile_factory(equipment="kettlebell"))
        bw = engine.build_plan(profile_factory(equipment=EquipmentTier.BODYWEIGHT))
        assert plan.equipment == EquipmentTier.BODYWEIGHT
        assert plan.days == bw.days

    def test_keeps_profile_snapshot(self, engine: PlanEngine, reference_profile: Profile) -> None:
        assert engine.build_plan(reference_profile).profile == reference_profile

    def test_reduced_fat_policy(self, reference_profile: Profile) -> None:
        engine = PlanEngine(
            config=PlannerConfig(fat_fraction_policy=FatFractionPolicy.FAT_LOSS_REDUCED)
        )
        plan = engine.build_plan(reference_profile)
        assert plan.nutrition.fat_g == 63
        assert plan.nutrition.carbs_g == 262

    def test_reduced_fat_policy_ignored_outside_fat_loss(
        self, profile_factory: Callable[..., Profile]
    ) -> None:
        profile = profile_factory(goal=Goal.MAINTENANCE)
        flat = PlanEngine().build_plan(profile)
        reduced = PlanEngine(
            config=PlannerConfig(fat_fraction_policy=FatFractionPolicy.FAT_LOSS_REDUCED)
        ).build_plan(profile)
        assert flat.nutrition == reduced.nutrition

    def test_out_of_range_days_clamped(
        self, engine: PlanEngine, profile_factory: Callable[..., Profile]
    ) -> None:
        assert engine.build_plan(profile_factory(days_per_week=1)).days_per_week == 2
        assert engine.build_plan(profile_factory(days_per_week=10)).days_per_week == 7

    def test_custom_registry(self, reference_profile: Profile) -> None:
        plan = PlanEngine(registry=TipRegistry()).build_plan(reference_profile)
        assert plan.tips == ()

    def test_module_level_build_plan(self, reference_profile: Profile) -> None:
        assert build_plan(reference_profile) == PlanEngine().build_plan(reference_profile)
