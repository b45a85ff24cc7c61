"""Shared test fixtures: reference profiles, metrics, and raw form input."""

from __future__ import annotations

from typing import Callable

import pytest

from fitness_planner.calculator import compute_metrics
from fitness_planner.models.enums import ActivityLevel, EquipmentTier, Goal, Sex
from fitness_planner.models.metrics import Metrics
from fitness_planner.models.profile import Profile
from fitness_planner.tips.registry import TipRegistry


@pytest.fixture
def reference_profile() -> Profile:
    """30-year-old male, 170 cm / 68 kg, moderate activity, fat loss, 4 days bodyweight.

    BMR 1597.5, TDEE 2476.125, target 2104.70625 kcal.
    """
    return Profile(
        sex=Sex.MALE,
        age=30,
        height_cm=170.0,
        weight_kg=68.0,
        activity=ActivityLevel.MODERATE,
        goal=Goal.FAT_LOSS,
        days_per_week=4,
        equipment=EquipmentTier.BODYWEIGHT,
        body_fat_pct=20.0,
        name="Alex",
    )


@pytest.fixture
def female_profile() -> Profile:
    """25-year-old female, 160 cm / 55 kg, light activity, muscle gain, 5 days dumbbell.

    BMR 1264, TDEE 1738, target 1911.8 kcal.
    """
    return Profile(
        sex=Sex.FEMALE,
        age=25,
        height_cm=160.0,
        weight_kg=55.0,
        activity=ActivityLevel.LIGHT,
        goal=Goal.MUSCLE_GAIN,
        days_per_week=5,
        equipment=EquipmentTier.DUMBBELL,
        name="Mia",
    )


@pytest.fixture
def gym_profile() -> Profile:
    """45-year-old male, 180 cm / 95 kg, sedentary, recomp, 6 days full gym, 32% fat."""
    return Profile(
        sex=Sex.MALE,
        age=45,
        height_cm=180.0,
        weight_kg=95.0,
        activity=ActivityLevel.SEDENTARY,
        goal=Goal.RECOMP,
        days_per_week=6,
        equipment=EquipmentTier.GYM,
        body_fat_pct=32.0,
    )


@pytest.fixture
def reference_metrics(reference_profile: Profile) -> Metrics:
    return compute_metrics(reference_profile)


@pytest.fixture
def profile_factory(reference_profile: Profile) -> Callable[..., Profile]:
    """Factory fixture for Profile variants of the reference profile.

    Usage:
        profile = profile_factory(goal=Goal.RECOMP, days_per_week=6)
    """
    import dataclasses

    def factory(**overrides) -> Profile:
        return dataclasses.replace(reference_profile, **overrides)

    return factory


@pytest.fixture
def tip_registry() -> TipRegistry:
    registry = TipRegistry()
    registry.discover_rules()
    return registry


@pytest.fixture
def raw_form() -> dict:
    """Form dict as posted by a web form (camelCase, short equipment keys)."""
    return {
        "name": "Alex",
        "sex": "male",
        "age": 30,
        "heightCm": 170,
        "weightKg": 68,
        "bodyFat": 20,
        "activity": "moderate",
        "goal": "fat_loss",
        "daysPerWeek": 4,
        "equipmentLevel": "bw",
    }
