"""Apply a chosen alternative in place of a scheduled workout."""

from __future__ import annotations

import logging
from dataclasses import replace

from workout_engine.models.alternatives import AlternativeCategory, WorkoutOption
from workout_engine.models.context import WorkoutRef
from workout_engine.models.enums import Library
from workout_engine.models.resolved import ResolvedWorkout

logger = logging.getLogger(__name__)

_LIBRARY_FOCUS: dict[Library, str] = {
    Library.TEMPO: "Lactate Threshold",
    Library.INTERVAL: "Speed & Power",
    Library.HILL: "Strength & Power",
    Library.LONG_RUN: "Endurance",
}

_INTENSITY_FOCUS: dict[str, str] = {
    "Recovery": "Recovery",
    "Easy": "Aerobic Base",
}


def _bike_focus(option: WorkoutOption) -> str:
    perceived = option.effort.perceived if option.effort else ""
    name = option.name.lower()
    if "threshold" in perceived or "tempo" in name:
        return "Lactate Threshold"
    if "hard" in perceived or "interval" in name:
        return "Speed & Power"
    if "endurance" in name or "long" in name:
        return "Endurance"
    return "Aerobic Power"


def training_focus(option: WorkoutOption) -> str:
    """Training focus of an option, from its catalog provenance or intensity."""
    if option.library in _LIBRARY_FOCUS:
        return _LIBRARY_FOCUS[option.library]
    if option.library is Library.BIKE:
        return _bike_focus(option)
    return _INTENSITY_FOCUS.get(option.intensity, "Training Focus")


def option_type(option: WorkoutOption, fallback: str) -> str:
    """Workout category the replacement takes on."""
    if option.library is not None:
        return option.library.key
    return option.workout_type or fallback


def option_ref(option: WorkoutOption, fallback_category: str) -> WorkoutRef:
    """Reference built from an option's own fields, for resolving it."""
    return WorkoutRef(
        name=option.name,
        category=option_type(option, fallback_category),
        description=option.description,
        duration=option.duration or option.repetitions,
        structure=option.structure,
        effort=option.effort,
        intensity=option.intensity,
        benefits=option.benefits,
        equipment_specific=option.equipment_specific,
    )


def apply_replacement(
    workout: ResolvedWorkout,
    option: WorkoutOption,
    resolved: ResolvedWorkout,
    category: AlternativeCategory | None = None,
) -> ResolvedWorkout:
    """Merge the chosen option over its resolved form, keeping the schedule.

    Args:
        workout: The workout being replaced.
        option: The chosen alternative.
        resolved: The option resolved into a full workout record.
        category: The category the option was chosen from, if known.

    Returns:
        The replacement workout, carrying ``workout``'s schedule slot.
    """
    new = replace(
        resolved,
        name=option.name,
        description=option.description or resolved.description,
        duration=option.duration or option.repetitions or resolved.duration,
        type=option_type(option, workout.type),
        focus=training_focus(option),
        equipment_specific=option.equipment_specific or bool(option.equipment),
        equipment=option.equipment or resolved.equipment,
        schedule=workout.schedule,
        replacement_reason=category.title if category is not None else "",
    )
    logger.info("Replaced '%s' with '%s'", workout.name, new.name)
    return new
