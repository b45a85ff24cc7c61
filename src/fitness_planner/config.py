"""Environment-variable-based configuration for the fitness planner."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from fitness_planner.models.enums import FatFractionPolicy

FAT_FRACTION_POLICY: str = os.environ.get("FITPLAN_FAT_FRACTION_POLICY", "flat")
LOG_LEVEL: str = os.environ.get("FITPLAN_LOG_LEVEL", "INFO")
PROFILE_PATH: Path = Path(os.environ.get("FITPLAN_PROFILE", "profile.json")).expanduser()

PLAN_VERSION = "v0.1-local"
DISCLAIMER = (
    "General fitness and nutrition information only, not medical advice. "
    "If you have a medical condition or injury, consult a qualified "
    "healthcare professional first."
)


@dataclass(frozen=True)
class PlannerConfig:
    """Tunable knobs for PlanEngine.

    Attributes:
        fat_fraction_policy: FLAT (30% fat for every goal, the default) or
            FAT_LOSS_REDUCED (27% under fat loss).
        plan_version: Version tag stamped on every Plan.
        disclaimer: Advice disclaimer stamped on every Plan.
    """

    fat_fraction_policy: FatFractionPolicy = FatFractionPolicy.FLAT
    plan_version: str = PLAN_VERSION
    disclaimer: str = DISCLAIMER

    @classmethod
    def from_env(cls) -> PlannerConfig:
        """Build a config from FITPLAN_* environment variables."""
        policy = FatFractionPolicy.from_key(FAT_FRACTION_POLICY, FatFractionPolicy.FLAT)
        return cls(fat_fraction_policy=policy)
