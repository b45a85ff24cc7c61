"""Weekly split builder — turns a split template into concrete TrainingDays.

Decomposes the template selected by days-per-week into TrainingDay values,
resolving each slot's movement roles to exercise names supplied by the
caller (normally ``resolve_catalog(profile.equipment)``).
"""

from __future__ import annotations

from fitness_planner.models.enums import MovementRole
from fitness_planner.models.plan import TrainingBlock, TrainingDay
from fitness_planner.plan_builder.split_templates import (
    DayTemplate,
    SlotTemplate,
    get_template,
)


def _block_name(slot: SlotTemplate, names: dict[MovementRole, str]) -> str:
    if slot.fixed_name is not None:
        return slot.fixed_name
    return " / ".join(names[role] for role in slot.roles)


def _build_day(
    number: int,
    template: DayTemplate,
    names: dict[MovementRole, str],
) -> TrainingDay:
    blocks = tuple(
        TrainingBlock(exercise=_block_name(slot, names), prescription=slot.prescription)
        for slot in template.slots
    )
    return TrainingDay(label=f"Day {number}", focus=template.focus, blocks=blocks)


def build_weekly_split(
    days_per_week: int,
    names: dict[MovementRole, str],
) -> tuple[TrainingDay, ...]:
    """Build the weekly schedule for a training frequency.

    Algorithm:
    1. Clamp days_per_week into 2..7
    2. Bucket into a template family (full body, upper/lower, 5-day PPL+,
       6-7 day PPL repeat)
    3. Take the first ``days`` day templates of that family
    4. Resolve each slot's roles through *names*

    Args:
        days_per_week: Requested training days; out-of-range values clamp.
        names: Resolved exercise name for every MovementRole.

    Returns:
        Tuple of TrainingDay, one per (clamped) day, labelled "Day 1".."Day N".
        A day with no blocks is a structural rest/cardio/mobility day.
    """
    return tuple(
        _build_day(number, template, names)
        for number, template in enumerate(get_template(days_per_week), start=1)
    )
