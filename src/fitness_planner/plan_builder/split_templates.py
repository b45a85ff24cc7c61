"""Split templates — fixed weekly structures for each template family.

Each template is a hand-authored table of days; each day lists slots that
name movement roles rather than exercises. The builder resolves roles to
exercise names for the user's equipment tier, so the structure of a week
depends only on the days-per-week bucket.
"""

from __future__ import annotations

from dataclasses import dataclass

from fitness_planner.models.enums import (
    MAX_DAYS_PER_WEEK,
    MIN_DAYS_PER_WEEK,
    MovementRole,
    SplitFamily,
)


@dataclass(frozen=True)
class SlotTemplate:
    """Template for one exercise slot.

    Attributes:
        roles: Movement roles whose resolved names are joined with " / "
            (e.g. elbow flexion + extension for a superset of arms).
        prescription: Sets × reps or duration text.
        fixed_name: Literal exercise name used instead of roles
            (e.g. "Stretching / Mobility"), independent of equipment.
    """

    roles: tuple[MovementRole, ...]
    prescription: str
    fixed_name: str | None = None


@dataclass(frozen=True)
class DayTemplate:
    """Template for one training day. No slots means rest/cardio/mobility."""

    focus: str
    slots: tuple[SlotTemplate, ...] = ()


def _slot(*roles: MovementRole, sets: str) -> SlotTemplate:
    return SlotTemplate(roles=roles, prescription=sets)


_MOBILITY = SlotTemplate(roles=(), prescription="10–15 min", fixed_name="Stretching / Mobility")

_ARMS = (MovementRole.ELBOW_FLEXION, MovementRole.ELBOW_EXTENSION)

# ---------------------------------------------------------------------------
# Shared day blocks
# ---------------------------------------------------------------------------

_FULL_BODY_A = DayTemplate(
    focus="Full Body A",
    slots=(
        _slot(MovementRole.SQUAT, sets="3–4 × 6–10"),
        _slot(MovementRole.HORIZONTAL_PRESS, sets="3–4 × 6–10"),
        _slot(MovementRole.HORIZONTAL_PULL, sets="3–4 × 8–12"),
        _slot(MovementRole.LATERAL_SHOULDER, sets="3 × 10–15"),
        _slot(MovementRole.CORE_PLANK, sets="3 × 30–60 s"),
    ),
)

_FULL_BODY_B = DayTemplate(
    focus="Full Body B",
    slots=(
        _slot(MovementRole.HIP_HINGE, sets="3–4 × 5–8"),
        _slot(MovementRole.INCLINE_PRESS, sets="3 × 8–12"),
        _slot(MovementRole.VERTICAL_PULL, sets="3 × 8–12"),
        _slot(MovementRole.LUNGE, sets="3 × 8–12/side"),
        _slot(MovementRole.CORE_FLEXION, sets="3 × 12–15"),
    ),
)

_PUSH = DayTemplate(
    focus="Push",
    slots=(
        _slot(MovementRole.HORIZONTAL_PRESS, sets="4 × 6–10"),
        _slot(MovementRole.INCLINE_PRESS, sets="3 × 8–12"),
        _slot(MovementRole.LATERAL_SHOULDER, sets="3 × 12–15"),
    ),
)

_LEGS = DayTemplate(
    focus="Legs",
    slots=(
        _slot(MovementRole.SQUAT, sets="4 × 6–10"),
        _slot(MovementRole.HIP_HINGE, sets="3 × 5–8"),
        _slot(MovementRole.LUNGE, sets="3 × 8–12/side"),
    ),
)

# ---------------------------------------------------------------------------
# Template definitions for all 4 families
# ---------------------------------------------------------------------------

SPLIT_TEMPLATES: dict[SplitFamily, tuple[DayTemplate, ...]] = {
    # 2-3 days: A/B full body, third day conditioning + arms + mobility
    SplitFamily.FULL_BODY: (
        _FULL_BODY_A,
        _FULL_BODY_B,
        DayTemplate(
            focus="Conditioning + Weak Points",
            slots=(
                _slot(MovementRole.CONDITIONING, sets="Zone 2 30–40 min or 8–10 intervals"),
                _slot(*_ARMS, sets="2–3 × 10–15 each"),
                _MOBILITY,
            ),
        ),
    ),

    # 4 days: upper / lower / rest-cardio-mobility / upper 2
    SplitFamily.UPPER_LOWER: (
        DayTemplate(
            focus="Upper",
            slots=(
                _slot(MovementRole.HORIZONTAL_PRESS, sets="4 × 6–10"),
                _slot(MovementRole.HORIZONTAL_PULL, sets="4 × 8–12"),
                _slot(MovementRole.INCLINE_PRESS, sets="3 × 8–12"),
                _slot(*_ARMS, sets="2–3 × 10–15 each"),
            ),
        ),
        DayTemplate(
            focus="Lower",
            slots=(
                _slot(MovementRole.SQUAT, sets="4 × 6–10"),
                _slot(MovementRole.HIP_HINGE, sets="3 × 5–8"),
                _slot(MovementRole.LUNGE, sets="3 × 8–12/side"),
                _slot(MovementRole.CORE_PLANK, sets="3 × 30–60 s"),
            ),
        ),
        DayTemplate(focus="Rest / Cardio / Mobility"),
        DayTemplate(
            focus="Upper 2",
            slots=(
                _slot(MovementRole.INCLINE_PRESS, sets="4 × 6–10"),
                _slot(MovementRole.VERTICAL_PULL, sets="4 × 8–12"),
                _slot(MovementRole.LATERAL_SHOULDER, sets="3 × 10–15"),
                _slot(*_ARMS, sets="2–3 × 10–15 each"),
            ),
        ),
    ),

    # 5 days: push / pull / legs / metabolic / weak points
    SplitFamily.PUSH_PULL_LEGS_PLUS: (
        DayTemplate(
            focus="Push",
            slots=(
                _slot(MovementRole.HORIZONTAL_PRESS, sets="4 × 5–8"),
                _slot(MovementRole.INCLINE_PRESS, sets="3 × 6–10"),
                _slot(MovementRole.LATERAL_SHOULDER, sets="3 × 12–15"),
            ),
        ),
        DayTemplate(
            focus="Pull",
            slots=(
                _slot(MovementRole.HORIZONTAL_PULL, sets="3–4 × 8–12"),
                _slot(MovementRole.VERTICAL_PULL, sets="3 × 8–12"),
                _slot(MovementRole.ELBOW_FLEXION, sets="3 × 10–15"),
            ),
        ),
        DayTemplate(
            focus="Legs",
            slots=(
                _slot(MovementRole.SQUAT, sets="4 × 5–8"),
                _slot(MovementRole.HIP_HINGE, sets="3 × 5–8"),
                _slot(MovementRole.LUNGE, sets="3 × 8–12/side"),
            ),
        ),
        DayTemplate(
            focus="Full Body / Metabolic",
            slots=(
                _slot(MovementRole.CONDITIONING, sets="Circuit or Zone 2 30–40 min"),
                _slot(MovementRole.CORE_FLEXION, sets="3 × 12–15"),
            ),
        ),
        DayTemplate(
            focus="Weak Points + Mobility",
            slots=(
                _slot(*_ARMS, sets="2–3 × 10–15 each"),
                _MOBILITY,
            ),
        ),
    ),

    # 6-7 days: PPL twice, day 4 downgraded to conditioning, day 7 optional
    SplitFamily.PUSH_PULL_LEGS_REPEAT: (
        _PUSH,
        DayTemplate(
            focus="Pull",
            slots=(
                _slot(MovementRole.HORIZONTAL_PULL, sets="4 × 8–12"),
                _slot(MovementRole.VERTICAL_PULL, sets="3 × 8–12"),
                _slot(MovementRole.ELBOW_FLEXION, sets="3 × 10–15"),
            ),
        ),
        _LEGS,
        DayTemplate(
            focus="Rest / Cardio",
            slots=(_slot(MovementRole.CONDITIONING, sets="30–45 min"),),
        ),
        _PUSH,
        DayTemplate(
            focus="Pull",
            slots=(
                _slot(MovementRole.HORIZONTAL_PULL, sets="4 × 8–12"),
                _slot(MovementRole.VERTICAL_PULL, sets="3 × 8–12"),
                _slot(MovementRole.ELBOW_EXTENSION, sets="3 × 10–15"),
            ),
        ),
        DayTemplate(
            focus="Legs or Rest",
            slots=(
                _slot(MovementRole.SQUAT, sets="3 × 6–10"),
                _slot(MovementRole.LUNGE, sets="3 × 8–12/side"),
                _slot(MovementRole.CORE_PLANK, sets="3 × 30–60 s"),
            ),
        ),
    ),
}


def clamp_days(days_per_week: int) -> int:
    """Clamp a requested training frequency into 2..7."""
    return max(MIN_DAYS_PER_WEEK, min(MAX_DAYS_PER_WEEK, int(days_per_week)))


def select_family(days_per_week: int) -> SplitFamily:
    """Bucket a (clamped) days-per-week value into its template family."""
    days = clamp_days(days_per_week)
    if days <= 3:
        return SplitFamily.FULL_BODY
    if days == 4:
        return SplitFamily.UPPER_LOWER
    if days == 5:
        return SplitFamily.PUSH_PULL_LEGS_PLUS
    return SplitFamily.PUSH_PULL_LEGS_REPEAT


def get_template(days_per_week: int) -> tuple[DayTemplate, ...]:
    """Return the day templates for a training frequency, one per day."""
    days = clamp_days(days_per_week)
    return SPLIT_TEMPLATES[select_family(days)][:days]
