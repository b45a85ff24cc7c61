"""Enumerations and nutrition constants for the fitness planner.

Thresholds and multipliers cite their published source where one exists.
Each enum member carries the external string key used by form input and
JSON export via ``.key``; ``from_key()`` performs the lenient lookup.
"""

from __future__ import annotations

from enum import IntEnum


class _KeyedEnum(IntEnum):
    """IntEnum whose members map to a stable external string key."""

    @property
    def key(self) -> str:
        return _KEYS[type(self)][self.name]

    @classmethod
    def from_key(cls, key: str, default):
        """Look up a member by external key; return *default* if unknown."""
        if isinstance(key, cls):
            return key
        normalized = str(key).strip()
        for member in cls:
            if member.key == normalized or member.name.lower() == normalized.lower():
                return member
        return default


class Sex(_KeyedEnum):
    """Biological sex used by the Mifflin-St Jeor equation.

    OTHER currently shares the female branch of the formula.
    """

    MALE = 1
    FEMALE = 2
    OTHER = 3


class ActivityLevel(_KeyedEnum):
    """Self-reported daily activity level."""

    SEDENTARY = 1
    LIGHT = 2
    MODERATE = 3
    ACTIVE = 4
    VERY_ACTIVE = 5


class Goal(_KeyedEnum):
    """Body-composition goal."""

    FAT_LOSS = 1
    MUSCLE_GAIN = 2
    RECOMP = 3
    MAINTENANCE = 4


class EquipmentTier(_KeyedEnum):
    """Available equipment, ordered by capability (GYM > DUMBBELL > BODYWEIGHT)."""

    BODYWEIGHT = 1
    DUMBBELL = 2
    GYM = 3


class MovementRole(IntEnum):
    """Movement patterns the split templates are written against."""

    SQUAT = 1
    HIP_HINGE = 2
    HORIZONTAL_PRESS = 3
    INCLINE_PRESS = 4
    HORIZONTAL_PULL = 5
    VERTICAL_PULL = 6
    LATERAL_SHOULDER = 7
    LUNGE = 8
    ELBOW_FLEXION = 9
    ELBOW_EXTENSION = 10
    CORE_PLANK = 11
    CORE_FLEXION = 12
    CONDITIONING = 13


class SplitFamily(IntEnum):
    """Weekly split template families, selected by days-per-week bucket."""

    FULL_BODY = 1              # 2-3 days
    UPPER_LOWER = 2            # 4 days
    PUSH_PULL_LEGS_PLUS = 3    # 5 days
    PUSH_PULL_LEGS_REPEAT = 4  # 6-7 days


class TipOrder(IntEnum):
    """Fixed presentation order of guidance tips — lower value is shown first."""

    BMI = 1
    ACTIVITY = 2
    BODY_FAT = 3
    EQUIPMENT = 4
    GOAL = 5
    SUMMARY = 6


class FatFractionPolicy(_KeyedEnum):
    """How the share of calories allotted to fat is chosen."""

    FLAT = 1              # 30% for every goal
    FAT_LOSS_REDUCED = 2  # 27% under FAT_LOSS, 30% otherwise


_KEYS: dict[type, dict[str, str]] = {
    Sex: {"MALE": "male", "FEMALE": "female", "OTHER": "other"},
    ActivityLevel: {
        "SEDENTARY": "sedentary",
        "LIGHT": "light",
        "MODERATE": "moderate",
        "ACTIVE": "active",
        "VERY_ACTIVE": "veryActive",
    },
    Goal: {
        "FAT_LOSS": "fat_loss",
        "MUSCLE_GAIN": "muscle_gain",
        "RECOMP": "recomp",
        "MAINTENANCE": "maintenance",
    },
    EquipmentTier: {"BODYWEIGHT": "bodyweight", "DUMBBELL": "dumbbell", "GYM": "gym"},
    FatFractionPolicy: {"FLAT": "flat", "FAT_LOSS_REDUCED": "fat_loss_reduced"},
}


# ---------------------------------------------------------------------------
# Energy expenditure: Mifflin et al. (1990), Am J Clin Nutr 51(2):241-247
# ---------------------------------------------------------------------------
BMR_WEIGHT_COEFFICIENT = 10.0
BMR_HEIGHT_COEFFICIENT = 6.25
BMR_AGE_COEFFICIENT = 5.0
BMR_MALE_OFFSET = 5.0
BMR_FEMALE_OFFSET = -161.0

# Physical activity multipliers: McArdle, Katch & Katch, Exercise Physiology
ACTIVITY_MULTIPLIERS: dict[ActivityLevel, float] = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHT: 1.375,
    ActivityLevel.MODERATE: 1.55,
    ActivityLevel.ACTIVE: 1.725,
    ActivityLevel.VERY_ACTIVE: 1.9,
}
DEFAULT_ACTIVITY_MULTIPLIER = ACTIVITY_MULTIPLIERS[ActivityLevel.MODERATE]

# Energy balance by goal: Helms et al. (2014), J Int Soc Sports Nutr 11:20
GOAL_CALORIE_MULTIPLIERS: dict[Goal, float] = {
    Goal.FAT_LOSS: 0.85,     # ~15% deficit
    Goal.MUSCLE_GAIN: 1.10,  # ~10% surplus
    Goal.RECOMP: 0.95,       # mild deficit
    Goal.MAINTENANCE: 1.0,
}

# ---------------------------------------------------------------------------
# Macronutrients: Jäger et al. (2017), J Int Soc Sports Nutr 14:20
# ---------------------------------------------------------------------------
PROTEIN_G_PER_KG_DEFAULT = 1.8
PROTEIN_G_PER_KG_MUSCLE_GAIN = 2.0

FAT_FRACTION_DEFAULT = 0.30
FAT_FRACTION_FAT_LOSS_REDUCED = 0.27

# Atwater energy factors (kcal per gram)
KCAL_PER_G_PROTEIN = 4
KCAL_PER_G_CARB = 4
KCAL_PER_G_FAT = 9

# ---------------------------------------------------------------------------
# Body composition brackets
# ---------------------------------------------------------------------------
# BMI cut-offs: Asia-Pacific adjusted ranges (WHO Expert Consultation, 2004)
BMI_UNDERWEIGHT_BELOW = 18.5
BMI_NORMAL_BELOW = 24.0
BMI_OVERWEIGHT_BELOW = 27.0

# Body-fat brackets (sex-agnostic)
BODY_FAT_HIGH_PCT = 30.0
BODY_FAT_MODERATE_PCT = 20.0

# Display labels for equipment tiers (summary tip, JSON export)
EQUIPMENT_LABELS: dict[EquipmentTier, str] = {
    EquipmentTier.BODYWEIGHT: "Bodyweight only",
    EquipmentTier.DUMBBELL: "Bodyweight + dumbbells",
    EquipmentTier.GYM: "Full gym",
}

# ---------------------------------------------------------------------------
# Weekly split bounds
# ---------------------------------------------------------------------------
MIN_DAYS_PER_WEEK = 2
MAX_DAYS_PER_WEEK = 7
