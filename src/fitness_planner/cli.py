"""Command-line entry point — builds a plan from a JSON profile.

Usage:
    fitness-plan --profile profile.json
    fitness-plan --profile profile.json --fat-policy fat_loss_reduced
    python -m fitness_planner.cli --profile profile.json --indent 0
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from fitness_planner.config import LOG_LEVEL, PROFILE_PATH, PlannerConfig
from fitness_planner.engine import PlanEngine
from fitness_planner.intake import load_profile, profile_from_dict
from fitness_planner.models.enums import FatFractionPolicy
from fitness_planner.serialization import to_plan_json_string

logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate a weekly fitness plan")
    parser.add_argument(
        "--profile",
        default=str(PROFILE_PATH),
        help="Path to a JSON profile (default: $FITPLAN_PROFILE or profile.json)",
    )
    parser.add_argument(
        "--fat-policy",
        choices=[p.key for p in FatFractionPolicy],
        default=None,
        help="Fat fraction policy (default: $FITPLAN_FAT_FRACTION_POLICY or flat)",
    )
    parser.add_argument("--indent", type=int, default=2, help="JSON indent (0 = compact)")
    parser.add_argument("--log-level", default=LOG_LEVEL, help="Logging level")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        raw = load_profile(args.profile)
    except FileNotFoundError:
        logger.error("Profile not found at %s", args.profile)
        return 1
    except json.JSONDecodeError as exc:
        logger.error("Profile %s is not valid JSON: %s", args.profile, exc)
        return 1

    if not isinstance(raw, dict):
        logger.error("Profile %s must be a JSON object, got %s", args.profile, type(raw).__name__)
        return 1

    config = PlannerConfig.from_env()
    if args.fat_policy is not None:
        config = PlannerConfig(
            fat_fraction_policy=FatFractionPolicy.from_key(args.fat_policy, FatFractionPolicy.FLAT),
        )

    profile = profile_from_dict(raw)
    plan = PlanEngine(config=config).build_plan(profile)

    print(to_plan_json_string(plan, indent=args.indent or None))
    return 0


if __name__ == "__main__":
    sys.exit(main())
