"""Brick workout selection for the alternative generator."""

from __future__ import annotations

import logging
import re

from workout_engine import config
from workout_engine.catalog.brick import BrickCatalog
from workout_engine.formatting import miles_from_name
from workout_engine.models.alternatives import WorkoutOption
from workout_engine.models.context import PersonalizationContext
from workout_engine.models.enums import BrickType, Library
from workout_engine.models.resolved import ResolvedWorkout
from workout_engine.random_source import RandomSource

logger = logging.getLogger(__name__)

# Distance (RunEQ miles) and duration (minutes) below which a workout is short.
SHORT_MILES = 5
SHORT_MINUTES = 30
# Below these a workout is medium; anything longer is long.
MEDIUM_MILES = 10
MEDIUM_MINUTES = 60

BRICK_DESCRIPTIONS: dict[BrickType, str] = {
    BrickType.AEROBIC: "Run+bike endurance combo - builds aerobic fitness with variety",
    BrickType.TEMPO: "Run+bike threshold workout - lactate threshold with equipment changes",
    BrickType.SPEED: "Run+bike intervals - develops speed with transition practice",
    BrickType.RECOVERY: "Easy run+bike combo - active recovery with movement variety",
}

_MINUTES = re.compile(r"^\s*(\d+(?:\.\d+)?)(?:\s*-\s*\d+(?:\.\d+)?)?\s*(?:min|minutes?)\b", re.IGNORECASE)


def duration_minutes(duration: str | None) -> float | None:
    """Lower bound in minutes of a duration such as "45-60 minutes"."""
    if not duration:
        return None
    match = _MINUTES.match(duration)
    return float(match.group(1)) if match else None


def brick_types_for(distance_miles: float | None, duration_min: float | None) -> tuple[BrickType, ...]:
    """Brick intensities suited to a workout of the given size.

    Short workouts get recovery bricks only, medium ones add aerobic
    bricks and long ones get every type. A measure that is None is
    ignored; with neither measure the workout counts as short.

    Raises:
        ValueError: If either measure is negative.
    """
    for value in (distance_miles, duration_min):
        if value is not None and value < 0:
            raise ValueError(f"Workout size must be non-negative, got {value}")
    if distance_miles is None and duration_min is None:
        return (BrickType.RECOVERY,)

    def below(miles: float, minutes: float) -> bool:
        return (distance_miles is not None and distance_miles < miles) or (
            duration_min is not None and duration_min < minutes
        )

    if below(SHORT_MILES, SHORT_MINUTES):
        return (BrickType.RECOVERY,)
    if below(MEDIUM_MILES, MEDIUM_MINUTES):
        return (BrickType.RECOVERY, BrickType.AEROBIC)
    return (BrickType.RECOVERY, BrickType.AEROBIC, BrickType.TEMPO, BrickType.SPEED)


def brick_option(
    catalog: BrickCatalog,
    brick_type: BrickType,
    context: PersonalizationContext,
    rng: RandomSource,
) -> WorkoutOption:
    """Generate one brick of ``brick_type`` and wrap it as an option."""
    template = catalog.generate(brick_type, context, rng, config.BRICK_DIFFICULTY)
    return WorkoutOption(
        name=template.name,
        description=BRICK_DESCRIPTIONS.get(brick_type, template.description),
        original_description=template.description,
        duration=template.duration,
        library=Library.BRICK,
        category=brick_type.key,
        workout_type=Library.BRICK.key,
        equipment=template.equipment,
        equipment_specific=True,
        structure=template.structure,
        template=template,
    )


def brick_options(
    catalog: BrickCatalog,
    workout: ResolvedWorkout,
    context: PersonalizationContext,
    rng: RandomSource,
) -> list[WorkoutOption]:
    """One brick per intensity appropriate for the current workout."""
    distance = miles_from_name(workout.name)
    if distance is None:
        distance = workout.distance
    types = brick_types_for(distance, duration_minutes(workout.duration))
    logger.debug("Brick types for '%s': %s", workout.name, [t.key for t in types])
    return [brick_option(catalog, brick_type, context, rng) for brick_type in types]
