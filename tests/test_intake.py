"""Tests for intake helpers — raw form dict to Profile."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from fitness_planner.intake import load_profile, parse_equipment, profile_from_dict
from fitness_planner.models.enums import ActivityLevel, EquipmentTier, Goal, Sex
from fitness_planner.models.profile import Profile


class TestProfileFromDict:
    def test_camel_case_form(self, raw_form: dict, reference_profile: Profile) -> None:
        assert profile_from_dict(raw_form) == reference_profile

    def test_snake_case_keys(self) -> None:
        profile = profile_from_dict({
            "sex": "female",
            "age": "25",
            "height_cm": "160",
            "weight_kg": "55",
            "activity": "veryActive",
            "goal": "muscle_gain",
            "days_per_week": 5,
            "equipment": "gym",
        })
        assert profile.sex == Sex.FEMALE
        assert profile.age == 25
        assert profile.height_cm == 160.0
        assert profile.activity == ActivityLevel.VERY_ACTIVE
        assert profile.goal == Goal.MUSCLE_GAIN
        assert profile.equipment == EquipmentTier.GYM

    def test_blank_body_fat_is_none(self, raw_form: dict) -> None:
        raw_form["bodyFat"] = ""
        assert profile_from_dict(raw_form).body_fat_pct is None

    def test_zero_body_fat_is_none(self, raw_form: dict) -> None:
        raw_form["bodyFat"] = 0
        assert profile_from_dict(raw_form).body_fat_pct is None

    def test_unparseable_numbers_become_zero(self, raw_form: dict) -> None:
        raw_form["heightCm"] = "tall"
        raw_form["weightKg"] = "nan"
        profile = profile_from_dict(raw_form)
        assert profile.height_cm == 0.0
        assert profile.weight_kg == 0.0

    def test_unknown_enums_fall_back(self, raw_form: dict, caplog: pytest.LogCaptureFixture) -> None:
        raw_form.update(activity="couch", goal="bulk", equipmentLevel="kettlebell", sex="x")
        with caplog.at_level(logging.WARNING, logger="fitness_planner.intake"):
            profile = profile_from_dict(raw_form)
        assert profile.activity == ActivityLevel.MODERATE
        assert profile.goal == Goal.MAINTENANCE
        assert profile.equipment == EquipmentTier.BODYWEIGHT
        assert profile.sex == Sex.OTHER
        assert "Unknown activity 'couch'" in caplog.text

    def test_missing_fields_use_defaults(self) -> None:
        profile = profile_from_dict({})
        assert profile.days_per_week == 4
        assert profile.equipment == EquipmentTier.BODYWEIGHT
        assert profile.goal == Goal.MAINTENANCE
        assert profile.name == ""

    @pytest.mark.parametrize("raw_days, days", [(1, 2), (0, 2), (9, 7), ("6", 6)])
    def test_days_clamped(self, raw_form: dict, raw_days, days: int) -> None:
        raw_form["daysPerWeek"] = raw_days
        assert profile_from_dict(raw_form).days_per_week == days


class TestParseEquipment:
    @pytest.mark.parametrize(
        "value, tier",
        [
            ("bw", EquipmentTier.BODYWEIGHT),
            ("db", EquipmentTier.DUMBBELL),
            ("DB", EquipmentTier.DUMBBELL),
            ("dumbbell", EquipmentTier.DUMBBELL),
            ("gym", EquipmentTier.GYM),
            (None, EquipmentTier.BODYWEIGHT),
        ],
    )
    def test_keys_and_aliases(self, value, tier: EquipmentTier) -> None:
        assert parse_equipment(value) == tier


class TestLoadProfile:
    def test_loads_json(self, tmp_path: Path, raw_form: dict) -> None:
        path = tmp_path / "profile.json"
        path.write_text(json.dumps(raw_form), encoding="utf-8")
        assert load_profile(path) == raw_form

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_profile(tmp_path / "missing.json")

    def test_invalid_json_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(json.JSONDecodeError):
            load_profile(path)
