"""Pace guidance projected from the athlete's pace table.

The workout name is classified first (goal pace, fast finish,
progression); category rules apply only when no name rule produced a
pace. A rule whose pace is missing from the table falls through to the
next one, so a "Sandwich Tempo" without a goal pace still gets the
threshold pace from the tempo rule.
"""

from __future__ import annotations

import logging

from workout_engine.formatting import format_equipment_name
from workout_engine.models.context import PersonalizationContext
from workout_engine.models.enums import Library, NameLabel, category_family
from workout_engine.resolution.classification import PACE_ORDER, classify, matches

logger = logging.getLogger(__name__)

DEFAULT_PACE_GUIDANCE = "Maintain steady effort throughout"


def format_easy_range(bounds: tuple[str, str]) -> str:
    low, high = bounds
    return f"{low}/mile" if low == high else f"{low}-{high}/mile"


def equipment_pace(equipment: str, cyclete_notes: str = "", elliptigo_notes: str = "") -> str:
    """Equipment note for the athlete's platform, or a generic motion cue."""
    key = equipment.lower()
    if key == "cyclete" and cyclete_notes:
        return cyclete_notes
    if key == "elliptigo" and elliptigo_notes:
        return elliptigo_notes
    return f"{format_equipment_name(equipment)} specific: Focus on smooth motion and consistent effort"


def _name_rule_pace(name: str, context: PersonalizationContext) -> str | None:
    paces = context.paces
    label = classify(name, PACE_ORDER)
    if label is None:
        return None

    if label is NameLabel.GOAL_PACE:
        goal = paces.goal_pace()
        if goal:
            return f"{goal}/mile (goal pace)"
        label = classify(name, PACE_ORDER[1:])

    easy = paces.easy_range()
    if label is NameLabel.FAST_FINISH:
        interval = paces.pace("interval")
        if easy and interval:
            return f"{easy[0]}-{easy[1]}/mile → {interval}/mile (fast finish)"

    # Fast-finish names are progression runs too
    if label is not None and matches(NameLabel.PROGRESSION, name) and easy:
        return f"{format_easy_range(easy)} (starting pace)"
    return None


def _category_rule_pace(name: str, family: Library | None, context: PersonalizationContext) -> str | None:
    paces = context.paces
    if family is Library.INTERVAL:
        interval = paces.pace("interval")
        if interval:
            return f"{interval}/mile"
    if family is Library.TEMPO or "tempo" in name.lower():
        threshold = paces.pace("threshold")
        if threshold:
            return f"{threshold}/mile"
    if family in (Library.LONG_RUN, Library.EASY):
        easy = paces.easy_range()
        if easy:
            return format_easy_range(easy)
    return None


def project_pace(
    name: str,
    category: str | None,
    context: PersonalizationContext,
    cyclete_notes: str = "",
    elliptigo_notes: str = "",
    fallback: str = "",
    equipment_specific: bool = False,
) -> str:
    """Human-readable pace guidance for one workout.

    Args:
        name: Workout name (display or normalized).
        category: Raw workout category.
        context: Athlete context holding the pace table and equipment.
        cyclete_notes: Cyclete note carried by the workout, if any.
        elliptigo_notes: ElliptiGO note carried by the workout, if any.
        fallback: The workout's own pace guidance, used when no rule
            applies.
        equipment_specific: Whether the workout is ridden on the
            athlete's equipment. Equipment workouts get the platform
            note, or a generic motion cue when they carry none.

    Returns:
        Pace guidance text, never empty.
    """
    if equipment_specific and context.equipment:
        return equipment_pace(context.equipment, cyclete_notes, elliptigo_notes)

    pace = _name_rule_pace(name, context)
    if pace is None:
        pace = _category_rule_pace(name, category_family(category), context)
    if pace is not None:
        return pace
    if fallback:
        return fallback
    if context.paces.is_empty:
        logger.debug("No pace table for '%s', using default pace guidance", name)
    return DEFAULT_PACE_GUIDANCE
