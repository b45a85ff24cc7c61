"""JSON serialization for Plan objects.

Converts an internal Plan into the planner's export shape
(``nutrition``, ``training``, ``tips``, ``generatedAt``) so any renderer or
download collaborator can consume it.

All functions are pure (no I/O).
"""

from __future__ import annotations

import json

from fitness_planner.models.enums import EQUIPMENT_LABELS
from fitness_planner.models.plan import Plan, TrainingDay
from fitness_planner.models.profile import Profile

# Metric floats are rounded for display; the full precision stays on Plan.
_METRIC_DECIMALS = 1


def _convert_day(day: TrainingDay) -> dict:
    converted = {
        "day": day.label,
        "focus": day.focus,
        "blocks": [
            {"name": block.exercise, "sets": block.prescription}
            for block in day.blocks
        ],
    }
    if day.is_rest_day:
        converted["note"] = day.guidance
    return converted


def _key(value) -> str:
    return value.key if hasattr(value, "key") else str(value)


def _convert_profile(profile: Profile) -> dict:
    """Snake_case snapshot that profile_from_dict() reads back unchanged."""
    return {
        "name": profile.name,
        "sex": _key(profile.sex),
        "age": profile.age,
        "height_cm": profile.height_cm,
        "weight_kg": profile.weight_kg,
        "body_fat_pct": profile.body_fat_pct,
        "activity": _key(profile.activity),
        "goal": _key(profile.goal),
        "days_per_week": profile.days_per_week,
        "equipment": _key(profile.equipment),
    }


def to_plan_json(plan: Plan) -> dict:
    """Convert a Plan to a JSON-compatible dict."""
    metrics = plan.metrics
    converted = {
        "nutrition": {
            "calories": plan.nutrition.calories,
            "protein_g": plan.nutrition.protein_g,
            "fat_g": plan.nutrition.fat_g,
            "carbs_g": plan.nutrition.carbs_g,
        },
        "metrics": {
            "bmi": round(metrics.bmi, _METRIC_DECIMALS),
            "bmr": round(metrics.bmr, _METRIC_DECIMALS),
            "tdee": round(metrics.tdee, _METRIC_DECIMALS),
            "kcal": round(metrics.target_calories, _METRIC_DECIMALS),
        },
        "equipment": {
            "tier": plan.equipment.key,
            "label": EQUIPMENT_LABELS[plan.equipment],
        },
        "daysPerWeek": plan.days_per_week,
        "training": [_convert_day(day) for day in plan.days],
        "tips": list(plan.tips),
        "generatedAt": plan.generated_at.isoformat(),
        "version": plan.version,
        "disclaimer": plan.disclaimer,
    }
    if plan.profile is not None:
        converted["profile"] = _convert_profile(plan.profile)
    return converted


def to_plan_json_string(plan: Plan, indent: int = 2) -> str:
    """Convert a Plan to a pretty-printed JSON string."""
    return json.dumps(to_plan_json(plan), indent=indent, ensure_ascii=False)
