"""Plan builder — resolves exercise names and lays out the weekly split."""

from fitness_planner.plan_builder.builder import build_weekly_split
from fitness_planner.plan_builder.exercise_catalog import (
    resolve_catalog,
    resolve_exercise_name,
)

__all__ = ["build_weekly_split", "resolve_catalog", "resolve_exercise_name"]
