"""Tip composer — evaluates every tip rule in order and collects the tips."""

from __future__ import annotations

from fitness_planner.models.metrics import Metrics
from fitness_planner.models.profile import Profile
from fitness_planner.tips.registry import TipRegistry


def compose_tips(
    profile: Profile,
    metrics: Metrics,
    registry: TipRegistry | None = None,
) -> tuple[str, ...]:
    """Evaluate all tip rules and return their tips in presentation order.

    Each rule contributes zero or one tip; the ordering comes from the
    rules' ``order`` and never from the input values.

    Args:
        profile: Frozen user profile.
        metrics: Metrics computed from the same profile.
        registry: Pre-populated registry. A fresh auto-discovered registry
            is used when omitted.

    Returns:
        Tuple of tip strings.
    """
    if registry is None:
        registry = TipRegistry()
        registry.discover_rules()

    tips: list[str] = []
    for rule in registry.get_all_rules():
        tip = rule.evaluate(profile, metrics)
        if tip:
            tips.append(tip)
    return tuple(tips)
