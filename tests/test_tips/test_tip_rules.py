"""Tests for individual tip rules."""

from __future__ import annotations

from typing import Callable

import pytest

from fitness_planner.calculator import compute_metrics
from fitness_planner.models.enums import ActivityLevel, EquipmentTier, Goal
from fitness_planner.models.metrics import Metrics
from fitness_planner.models.profile import Profile
from fitness_planner.tips.rules.body_composition import (
    BmiBracketTip,
    BodyFatTip,
    classify_bmi,
    classify_body_fat,
)
from fitness_planner.tips.rules.lifestyle import ActivityLevelTip
from fitness_planner.tips.rules.training import EquipmentTip, GoalTip, WeeklySummaryTip


class TestClassifyBmi:
    @pytest.mark.parametrize(
        "bmi, bracket",
        [
            (17.0, "underweight"),
            (18.5, "normal"),
            (23.9, "normal"),
            (24.0, "overweight"),
            (26.9, "overweight"),
            (27.0, "obese"),
            (35.0, "obese"),
        ],
    )
    def test_cutoffs(self, bmi: float, bracket: str) -> None:
        assert classify_bmi(bmi) == bracket


class TestClassifyBodyFat:
    @pytest.mark.parametrize(
        "pct, bracket",
        [(12.0, "low"), (19.9, "low"), (20.0, "moderate"), (29.9, "moderate"), (30.0, "high")],
    )
    def test_cutoffs(self, pct: float, bracket: str) -> None:
        assert classify_body_fat(pct) == bracket


class TestBmiBracketTip:
    def test_normal_bracket(self, reference_profile: Profile, reference_metrics: Metrics) -> None:
        tip = BmiBracketTip().evaluate(reference_profile, reference_metrics)
        assert tip is not None
        assert tip.startswith("BMI 23.5")
        assert "(normal range)" in tip

    def test_obese_bracket(self, gym_profile: Profile) -> None:
        tip = BmiBracketTip().evaluate(gym_profile, compute_metrics(gym_profile))
        assert "(obese)" in tip

    def test_bracket_matches_displayed_value(
        self, profile_factory: Callable[..., Profile]
    ) -> None:
        """69.25 kg at 170 cm is BMI 23.96, shown as 24.0."""
        profile = profile_factory(weight_kg=69.25)
        tip = BmiBracketTip().evaluate(profile, compute_metrics(profile))
        assert tip.startswith("BMI 24.0 (overweight)")

    def test_silent_without_bmi(self, profile_factory: Callable[..., Profile]) -> None:
        profile = profile_factory(height_cm=0.0)
        assert BmiBracketTip().evaluate(profile, compute_metrics(profile)) is None


class TestBodyFatTip:
    def test_moderate(self, reference_profile: Profile, reference_metrics: Metrics) -> None:
        tip = BodyFatTip().evaluate(reference_profile, reference_metrics)
        assert tip.startswith("Body fat 20% is moderate")

    def test_high(self, gym_profile: Profile) -> None:
        tip = BodyFatTip().evaluate(gym_profile, compute_metrics(gym_profile))
        assert "is high" in tip

    def test_silent_without_body_fat(self, female_profile: Profile) -> None:
        assert BodyFatTip().evaluate(female_profile, compute_metrics(female_profile)) is None

    def test_silent_for_zero_body_fat(
        self, profile_factory: Callable[..., Profile], reference_metrics: Metrics
    ) -> None:
        assert BodyFatTip().evaluate(profile_factory(body_fat_pct=0.0), reference_metrics) is None


class TestActivityLevelTip:
    def test_every_level_has_message(
        self, profile_factory: Callable[..., Profile], reference_metrics: Metrics
    ) -> None:
        messages = {
            ActivityLevelTip().evaluate(profile_factory(activity=level), reference_metrics)
            for level in ActivityLevel
        }
        assert len(messages) == len(ActivityLevel)

    def test_unknown_level_uses_moderate(
        self, profile_factory: Callable[..., Profile], reference_metrics: Metrics
    ) -> None:
        rule = ActivityLevelTip()
        assert rule.evaluate(profile_factory(activity="couch"), reference_metrics) == (
            rule.evaluate(profile_factory(activity=ActivityLevel.MODERATE), reference_metrics)
        )


class TestGoalTip:
    @pytest.mark.parametrize(
        "goal, prefix",
        [
            (Goal.FAT_LOSS, "Fat loss:"),
            (Goal.MUSCLE_GAIN, "Muscle gain:"),
            (Goal.RECOMP, "Recomposition:"),
            (Goal.MAINTENANCE, "Maintenance:"),
        ],
    )
    def test_one_message_per_goal(
        self,
        goal: Goal,
        prefix: str,
        profile_factory: Callable[..., Profile],
        reference_metrics: Metrics,
    ) -> None:
        tip = GoalTip().evaluate(profile_factory(goal=goal), reference_metrics)
        assert tip.startswith(prefix)


class TestEquipmentTip:
    def test_every_tier_has_message(
        self, profile_factory: Callable[..., Profile], reference_metrics: Metrics
    ) -> None:
        messages = {
            EquipmentTip().evaluate(profile_factory(equipment=tier), reference_metrics)
            for tier in EquipmentTier
        }
        assert len(messages) == len(EquipmentTier)


class TestWeeklySummaryTip:
    def test_names_days_and_equipment(
        self, reference_profile: Profile, reference_metrics: Metrics
    ) -> None:
        tip = WeeklySummaryTip().evaluate(reference_profile, reference_metrics)
        assert tip.startswith("Your week: 4 training days with bodyweight only.")

    def test_clamps_days(
        self, profile_factory: Callable[..., Profile], reference_metrics: Metrics
    ) -> None:
        profile = profile_factory(days_per_week=12, equipment=EquipmentTier.GYM)
        tip = WeeklySummaryTip().evaluate(profile, reference_metrics)
        assert tip.startswith("Your week: 7 training days with full gym.")
