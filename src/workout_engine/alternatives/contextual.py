"""Situational substitutes keyed by the kind of workout being replaced.

The workout is classified by its category family or, failing that, by
keywords in its name. Each kind maps to a fixed set of substitutes
tagged with the situation they address.
"""

from __future__ import annotations

from workout_engine.formatting import format_number, miles_from_name, round_half_up
from workout_engine.models.alternatives import WorkoutOption
from workout_engine.models.enums import Library, NameLabel, category_family
from workout_engine.models.resolved import ResolvedWorkout
from workout_engine.resolution.classification import CONTEXTUAL_ORDER, matches

# Situation tags carried in ``WorkoutOption.reason``.
NO_EQUIPMENT = "no-equipment"
WEATHER = "weather"
TIME_CONSTRAINT = "time-constraint"
FATIGUE = "fatigue"

DEFAULT_LONG_DISTANCE = 10

_LABEL_FAMILIES: dict[NameLabel, Library] = {
    NameLabel.INTERVAL: Library.INTERVAL,
    NameLabel.TEMPO: Library.TEMPO,
    NameLabel.LONG: Library.LONG_RUN,
    NameLabel.HILL: Library.HILL,
    NameLabel.EASY: Library.EASY,
}


def classify_workout(workout: ResolvedWorkout) -> NameLabel | None:
    """Contextual kind of a workout: its category first, then its name."""
    family = category_family(workout.type)
    for label in CONTEXTUAL_ORDER:
        if family is _LABEL_FAMILIES[label] or matches(label, workout.name):
            return label
    return None


def _option(name: str, description: str, duration: str, reason: str, icon: str) -> WorkoutOption:
    return WorkoutOption(name=name, description=description, duration=duration, reason=reason, icon=icon)


INTERVAL_SUBSTITUTES = (
    _option(
        "Treadmill Speed Work",
        "Same intervals on treadmill - 6x800m @ 5K pace (2min rest)",
        "45-50 minutes", NO_EQUIPMENT, "🏃‍♂️",
    ),
    _option(
        "Hill Sprints Alternative",
        "8x30sec uphill @ max effort - builds same speed without track",
        "35-40 minutes", NO_EQUIPMENT, "🏔️",
    ),
    _option(
        "Fartlek Speed Session",
        "20min fartlek: fast when you feel it, easy when you need it",
        "40-45 minutes", WEATHER, "⚡",
    ),
    _option(
        "Shortened Speed Work",
        "4x400m @ 5K pace instead of full session",
        "30-35 minutes", TIME_CONSTRAINT, "⏰",
    ),
)

TEMPO_SUBSTITUTES = (
    _option(
        "Treadmill Tempo",
        "3 miles @ comfortably hard pace on 1% incline",
        "35-40 minutes", WEATHER, "🏃‍♂️",
    ),
    _option(
        "Cruise Intervals Indoor",
        "3x1 mile @ tempo pace (90sec rest) - easier to pace indoors",
        "40-45 minutes", WEATHER, "🔀",
    ),
    _option(
        "Easy Tempo",
        "2 miles @ marathon pace instead of tempo - still builds endurance",
        "25-30 minutes", FATIGUE, "😌",
    ),
    _option(
        "Short Tempo Burst",
        "15min tempo run instead of full session",
        "25-30 minutes", TIME_CONSTRAINT, "⏰",
    ),
)

HILL_SUBSTITUTES = (
    _option(
        "Treadmill Hill Repeats",
        "6x90sec @ 6-8% incline, 5K effort (walk down recovery)",
        "40-45 minutes", NO_EQUIPMENT, "🏃‍♂️",
    ),
    _option(
        "Parking Garage Hills",
        "8x30sec up parking garage ramps - urban hill alternative",
        "35-40 minutes", NO_EQUIPMENT, "🏢",
    ),
    _option(
        "Stadium Stairs",
        "6x60sec stadium/building stairs @ hard effort",
        "30-35 minutes", NO_EQUIPMENT, "🏟️",
    ),
    _option(
        "Flat Tempo Instead",
        "20min tempo run - still builds lactate threshold without hills",
        "35-40 minutes", FATIGUE, "🏃‍♂️",
    ),
)

UNIVERSAL_SUBSTITUTES = (
    _option(
        "Rest Day",
        "Complete rest - sometimes the best choice for your body",
        "0 minutes", FATIGUE, "🛌",
    ),
    _option(
        "Light Cross Training",
        "20-30min easy bike, elliptical, or swimming",
        "20-30 minutes", FATIGUE, "🚴‍♂️",
    ),
)


def long_run_substitutes(distance: float) -> tuple[WorkoutOption, ...]:
    """Long-run substitutes scaled to the scheduled distance."""
    d = format_number(distance)
    half = round_half_up(distance / 2)
    return (
        _option(
            f"{d} Miles on Treadmill",
            "Complete long run indoors with A/C and entertainment - same endurance benefit",
            f"{round_half_up(distance * 8.5)}-{round_half_up(distance * 10)} minutes",
            WEATHER, "🏃‍♂️",
        ),
        _option(
            "Split Long Run",
            f"{half} miles morning + {half} miles evening",
            "Split sessions", TIME_CONSTRAINT, "🔄",
        ),
        _option(
            f"{round_half_up(distance * 0.75)} Mile Moderate",
            f"Shorter distance but at marathon pace for last {round_half_up(distance * 0.25)} miles",
            f"{round_half_up(distance * 6.5)}-{round_half_up(distance * 8)} minutes",
            TIME_CONSTRAINT, "⏰",
        ),
        _option(
            "Easy Long Walk/Run",
            f"{d} miles with walk breaks every 2 miles - active recovery style",
            f"{round_half_up(distance * 10)}-{round_half_up(distance * 12)} minutes",
            FATIGUE, "🚶‍♂️",
        ),
    )


def easy_substitutes(duration: str) -> tuple[WorkoutOption, ...]:
    same = duration or "30-40 minutes"
    return (
        _option("Indoor Easy Run", "Same easy pace on treadmill with entertainment", same, WEATHER, "🏃‍♂️"),
        _option("Easy Walk", "Brisk walk for same duration - active recovery", same, FATIGUE, "🚶‍♂️"),
        _option("Short Easy Run", "20min easy jog - better than nothing", "20 minutes", TIME_CONSTRAINT, "⏰"),
    )


def contextual_options(workout: ResolvedWorkout) -> tuple[WorkoutOption, ...]:
    """Situational substitutes for ``workout``; a universal pair when unclassified."""
    label = classify_workout(workout)
    if label is NameLabel.INTERVAL:
        return INTERVAL_SUBSTITUTES
    if label is NameLabel.TEMPO:
        return TEMPO_SUBSTITUTES
    if label is NameLabel.LONG:
        distance = miles_from_name(workout.name)
        if distance is None:
            distance = workout.distance or DEFAULT_LONG_DISTANCE
        return long_run_substitutes(distance)
    if label is NameLabel.HILL:
        return HILL_SUBSTITUTES
    if label is NameLabel.EASY:
        return easy_substitutes(workout.duration)
    return UNIVERSAL_SUBSTITUTES
