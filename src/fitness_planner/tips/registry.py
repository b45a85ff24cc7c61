"""Tip registry with auto-discovery of TipRule subclasses."""

from __future__ import annotations

import importlib
import logging
import pkgutil

from fitness_planner.tips.base import TipRule

logger = logging.getLogger(__name__)


class TipRegistry:
    """Discovers and manages all TipRule implementations.

    Auto-discovers rules by scanning the ``tips.rules`` package for concrete
    subclasses of TipRule. A new tip is added by placing a class in that
    package; no manual registration needed.
    """

    def __init__(self) -> None:
        self._rules: dict[str, TipRule] = {}

    def discover_rules(self) -> None:
        """Scan the tips.rules package and register all TipRule subclasses."""
        import fitness_planner.tips.rules as rules_pkg

        self._scan_package(rules_pkg.__name__, list(rules_pkg.__path__))

    def _scan_package(self, package_name: str, package_path: list[str]) -> None:
        """Import every module under a package and register its rules."""
        for _, module_name, _ in pkgutil.walk_packages(
            package_path, prefix=package_name + "."
        ):
            module = importlib.import_module(module_name)

            for attr_name in dir(module):
                attr = getattr(module, attr_name)
                if (
                    isinstance(attr, type)
                    and issubclass(attr, TipRule)
                    and attr is not TipRule
                    and not getattr(attr, "__abstractmethods__", set())
                ):
                    self.register(attr())

        logger.debug("Discovered %d tip rules", len(self._rules))

    def register(self, rule: TipRule) -> None:
        """Register a rule instance by its rule_id."""
        self._rules[rule.rule_id] = rule

    def get(self, rule_id: str) -> TipRule | None:
        """Retrieve a rule by its rule_id."""
        return self._rules.get(rule_id)

    def get_all_rules(self) -> list[TipRule]:
        """Return all registered rules sorted by presentation order."""
        return sorted(self._rules.values(), key=lambda r: (r.order, r.rule_id))

    @property
    def rule_ids(self) -> list[str]:
        """List all registered rule IDs."""
        return list(self._rules.keys())
