"""Abstract base class for all guidance tip rules."""

from __future__ import annotations

from abc import ABC, abstractmethod

from fitness_planner.models.enums import TipOrder
from fitness_planner.models.metrics import Metrics
from fitness_planner.models.profile import Profile


class TipRule(ABC):
    """Base class for a single guidance rule.

    Each rule inspects the profile and computed metrics and contributes at
    most one tip. Rules are discovered automatically by the TipRegistry and
    presented in ``order``; a rule's text never depends on other rules.

    Subclasses must define:
        rule_id: unique identifier (e.g. "bmi_bracket")
        order: TipOrder slot the tip occupies in the final list
        evaluate(): returns the tip text, or None when the rule is silent
    """

    rule_id: str
    order: TipOrder

    @abstractmethod
    def evaluate(self, profile: Profile, metrics: Metrics) -> str | None:
        """Return this rule's tip for the profile, or None."""
        ...
