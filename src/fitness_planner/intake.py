"""Intake helpers bridging loosely-typed form input and the planner.

Pure conversion from a raw form dict (as posted by a UI or stored as JSON)
into a frozen Profile, plus a JSON profile loader. Both camelCase form keys
(``heightCm``, ``weightKg``, ``bodyFat``, ``daysPerWeek``,
``equipmentLevel``) and snake_case keys are accepted.
"""

from __future__ import annotations

import json
import logging
import math
from pathlib import Path

from fitness_planner.models.enums import (
    ActivityLevel,
    EquipmentTier,
    Goal,
    Sex,
)
from fitness_planner.models.profile import Profile
from fitness_planner.plan_builder.split_templates import clamp_days

logger = logging.getLogger(__name__)

# Short equipment keys accepted from web forms
_EQUIPMENT_ALIASES: dict[str, EquipmentTier] = {
    "bw": EquipmentTier.BODYWEIGHT,
    "db": EquipmentTier.DUMBBELL,
}


def _first(raw: dict, *keys: str, default=None):
    for key in keys:
        if key in raw and raw[key] not in (None, ""):
            return raw[key]
    return default


def _number(value, default: float = 0.0) -> float:
    """Coerce form text to a float; anything unparseable becomes *default*."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    return number if math.isfinite(number) else default


def _enum(enum_cls, value, default, field_name: str):
    if value is None:
        return default
    member = enum_cls.from_key(value, None)
    if member is None:
        logger.warning(
            "Unknown %s %r, falling back to %s", field_name, value, default.key
        )
        return default
    return member


def parse_equipment(value) -> EquipmentTier:
    """Map an equipment key (``gym``, ``dumbbell``/``db``, ``bodyweight``/``bw``)."""
    if isinstance(value, str) and value.strip().lower() in _EQUIPMENT_ALIASES:
        return _EQUIPMENT_ALIASES[value.strip().lower()]
    return _enum(EquipmentTier, value, EquipmentTier.BODYWEIGHT, "equipment")


def profile_from_dict(raw: dict) -> Profile:
    """Convert a raw form dict into a frozen Profile.

    Runtime fallbacks for unvalidated input:
    - numbers that don't parse become 0 (BMI then reports the 0 sentinel)
    - body fat of 0 or blank means "not provided"
    - unknown activity -> moderate, goal -> maintenance,
      equipment -> bodyweight, sex -> other (female formula branch)
    - days per week is clamped into 2..7
    """
    body_fat = _number(_first(raw, "body_fat_pct", "bodyFat", "body_fat"), 0.0)

    return Profile(
        sex=_enum(Sex, _first(raw, "sex"), Sex.OTHER, "sex"),
        age=int(_number(_first(raw, "age"), 0.0)),
        height_cm=_number(_first(raw, "height_cm", "heightCm")),
        weight_kg=_number(_first(raw, "weight_kg", "weightKg")),
        activity=_enum(
            ActivityLevel, _first(raw, "activity"), ActivityLevel.MODERATE, "activity"
        ),
        goal=_enum(Goal, _first(raw, "goal"), Goal.MAINTENANCE, "goal"),
        days_per_week=clamp_days(
            _number(_first(raw, "days_per_week", "daysPerWeek"), 4)
        ),
        equipment=parse_equipment(
            _first(raw, "equipment", "equipmentLevel", "equipment_level")
        ),
        body_fat_pct=body_fat if body_fat > 0 else None,
        name=str(_first(raw, "name", default="")),
    )


def load_profile(path: Path | str) -> dict:
    """Load a raw profile dict from a JSON file.

    Raises:
        FileNotFoundError: if *path* does not exist.
        json.JSONDecodeError: if the file is not valid JSON.
    """
    with open(path, encoding="utf-8") as f:
        return json.load(f)
