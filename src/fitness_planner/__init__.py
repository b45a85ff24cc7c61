"""Fitness planner — deterministic nutrition targets and weekly training splits."""

from fitness_planner.calculator import compute_metrics
from fitness_planner.engine import PlanEngine, build_plan

__all__ = ["PlanEngine", "build_plan", "compute_metrics"]
