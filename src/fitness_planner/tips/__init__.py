"""Guidance tips — rule-driven advice derived from the profile and metrics."""

from fitness_planner.tips.base import TipRule
from fitness_planner.tips.composer import compose_tips
from fitness_planner.tips.registry import TipRegistry

__all__ = ["TipRegistry", "TipRule", "compose_tips"]
