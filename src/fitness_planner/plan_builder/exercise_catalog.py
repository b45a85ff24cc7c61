"""Exercise catalog — named variants per movement role, keyed by equipment tier.

Every role defines a bodyweight variant. Dumbbell and gym variants are
optional; resolution walks a strict override chain from the requested tier
down to bodyweight and returns the first name defined.
"""

from __future__ import annotations

from dataclasses import dataclass

from fitness_planner.models.enums import EquipmentTier, MovementRole


@dataclass(frozen=True)
class ExerciseVariants:
    """Names for one movement role at each equipment tier."""

    bodyweight: str
    dumbbell: str | None = None
    gym: str | None = None

    def for_tier(self, tier: EquipmentTier) -> str | None:
        """Name defined exactly at *tier*, without fallback."""
        if tier == EquipmentTier.GYM:
            return self.gym
        if tier == EquipmentTier.DUMBBELL:
            return self.dumbbell
        return self.bodyweight


# ---------------------------------------------------------------------------
# Fallback chains: requested tier -> tiers to try, most specific first
# ---------------------------------------------------------------------------

FALLBACK_CHAINS: dict[EquipmentTier, tuple[EquipmentTier, ...]] = {
    EquipmentTier.GYM: (EquipmentTier.GYM, EquipmentTier.DUMBBELL, EquipmentTier.BODYWEIGHT),
    EquipmentTier.DUMBBELL: (EquipmentTier.DUMBBELL, EquipmentTier.BODYWEIGHT),
    EquipmentTier.BODYWEIGHT: (EquipmentTier.BODYWEIGHT,),
}


EXERCISE_CATALOG: dict[MovementRole, ExerciseVariants] = {
    MovementRole.SQUAT: ExerciseVariants(
        bodyweight="Bodyweight Squat / Chair Sit-to-Stand",
        dumbbell="Goblet Squat (Dumbbell/Kettlebell)",
        gym="Barbell Back Squat",
    ),
    MovementRole.HIP_HINGE: ExerciseVariants(
        bodyweight="Glute Bridge / Hip Thrust (Bodyweight)",
        dumbbell="Dumbbell Romanian Deadlift",
        gym="Deadlift / Back Extension",
    ),
    MovementRole.HORIZONTAL_PRESS: ExerciseVariants(
        bodyweight="Push-Up (Elevated or Backpack-Loaded)",
        dumbbell="Dumbbell Bench Press",
        gym="Barbell Bench Press / Chest Press Machine",
    ),
    MovementRole.INCLINE_PRESS: ExerciseVariants(
        bodyweight="Pike Push-Up / Wall Handstand Push",
        dumbbell="Incline Dumbbell Press / Dumbbell Shoulder Press",
        gym="Incline Bench Press / Shoulder Press Machine",
    ),
    MovementRole.HORIZONTAL_PULL: ExerciseVariants(
        bodyweight="Inverted Row (Table Edge / Bar)",
        dumbbell="One-Arm Dumbbell Row",
        gym="Barbell Row / Seated Cable Row",
    ),
    MovementRole.VERTICAL_PULL: ExerciseVariants(
        bodyweight="Pull-Up (Band-Assisted / Negatives)",
        dumbbell="Band Pulldown / Dumbbell Pullover",
        gym="Lat Pulldown / Pull-Up",
    ),
    MovementRole.LATERAL_SHOULDER: ExerciseVariants(
        bodyweight="Side Plank + Scapular Control",
        dumbbell="Dumbbell Lateral Raise",
        gym="Lateral Raise Machine / Cable Lateral Raise",
    ),
    MovementRole.LUNGE: ExerciseVariants(
        bodyweight="Lunge / Step-Up (Bodyweight)",
        dumbbell="Dumbbell Lunge / Step-Up",
        gym="Leg Press / Barbell Lunge",
    ),
    MovementRole.ELBOW_FLEXION: ExerciseVariants(
        bodyweight="Towel Isometric Curl / Chin-Up Hold",
        dumbbell="Dumbbell Curl",
        gym="Cable or Barbell Curl",
    ),
    MovementRole.ELBOW_EXTENSION: ExerciseVariants(
        bodyweight="Bench Dip / Close-Grip Push-Up",
        dumbbell="Dumbbell Skull Crusher / Close-Grip Dumbbell Press",
        gym="Cable Pushdown / Close-Grip Bench Press",
    ),
    MovementRole.CORE_PLANK: ExerciseVariants(
        bodyweight="Plank / Side Plank",
    ),
    MovementRole.CORE_FLEXION: ExerciseVariants(
        bodyweight="Crunch / Dead Bug",
    ),
    MovementRole.CONDITIONING: ExerciseVariants(
        bodyweight="Brisk Walk / Jog / Cycling",
        dumbbell="Loaded Carry Walk (Dumbbells)",
        gym="Treadmill / Elliptical / Spin Bike",
    ),
}


def normalize_tier(tier) -> EquipmentTier:
    """Return *tier*, or BODYWEIGHT for anything outside EquipmentTier."""
    return tier if isinstance(tier, EquipmentTier) else EquipmentTier.BODYWEIGHT


def resolve_variant(variants: ExerciseVariants, tier: EquipmentTier) -> str:
    """Resolve one role's name for *tier* through its fallback chain.

    Tiers outside EquipmentTier resolve as BODYWEIGHT.
    """
    chain = FALLBACK_CHAINS[normalize_tier(tier)]
    for candidate in chain:
        name = variants.for_tier(candidate)
        if name is not None:
            return name
    return variants.bodyweight


def resolve_exercise_name(
    role: MovementRole,
    tier: EquipmentTier,
    catalog: dict[MovementRole, ExerciseVariants] | None = None,
) -> str:
    """Look up the exercise name for a movement role at an equipment tier.

    Args:
        role: Movement role to resolve.
        tier: The user's equipment tier.
        catalog: Optional override catalog (defaults to EXERCISE_CATALOG).

    Returns:
        The most specific name defined for the tier, falling back
        gym -> dumbbell -> bodyweight.

    Raises:
        KeyError: if *role* is not in the catalog.
    """
    table = EXERCISE_CATALOG if catalog is None else catalog
    return resolve_variant(table[role], tier)


def resolve_catalog(
    tier: EquipmentTier,
    catalog: dict[MovementRole, ExerciseVariants] | None = None,
) -> dict[MovementRole, str]:
    """Resolve every role in the catalog for *tier*."""
    table = EXERCISE_CATALOG if catalog is None else catalog
    return {role: resolve_variant(variants, tier) for role, variants in table.items()}
