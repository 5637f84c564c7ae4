"""Hand-authored options that do not come from a catalog."""

from __future__ import annotations

from workout_engine.formatting import round_half_up
from workout_engine.models.alternatives import WorkoutOption
from workout_engine.models.enums import BIKE_TO_RUN_RATIO

# Bike distance assumed when the ride's distance cannot be read from its name.
DEFAULT_BIKE_DISTANCE = 12

EASIER_OPTIONS = (
    WorkoutOption(
        name="Easy Recovery Run",
        description="Very easy pace, active recovery focus",
        duration="20-30 minutes",
        intensity="Recovery",
        workout_type="easy",
    ),
    WorkoutOption(
        name="Walk-Run Intervals",
        description="2 min run, 1 min walk intervals",
        duration="30 minutes",
        intensity="Easy",
        workout_type="easy",
    ),
    WorkoutOption(
        name="Yoga Flow",
        description="Active recovery with stretching",
        duration="20-30 minutes",
        intensity="Recovery",
        workout_type="easy",
    ),
)

HARDER_OPTIONS = (
    WorkoutOption(
        name="Fartlek Run",
        description="Playful speed play - develops speed and mental toughness with varied surges",
        duration="30-40 minutes",
        intensity="Moderate-Hard",
    ),
    WorkoutOption(
        name="Progressive Run",
        description="Building effort run - starts easy, finishes strong, develops pacing control",
        duration="35-45 minutes",
        intensity="Easy to Hard",
    ),
)

WEATHER_OPTIONS = (
    WorkoutOption(
        name="Treadmill Version",
        description="Climate-controlled indoor version - same workout, perfect conditions",
        location="Indoor",
        reason="weather",
    ),
    WorkoutOption(
        name="Mall/Parking Garage Run",
        description="Weather-protected option - stay dry and maintain your schedule",
        location="Covered",
        reason="weather",
    ),
    WorkoutOption(
        name="Early Morning Run",
        description="Beat the heat/weather - cooler temps and quieter roads",
        timing="Pre-dawn",
        reason="weather",
    ),
    WorkoutOption(
        name="Split Session",
        description="Break into 2 shorter runs - work around weather windows",
        timing="Flexible",
        reason="weather",
    ),
)


def running_alternatives(bike_distance: float | None) -> list[WorkoutOption]:
    """Four run options equivalent to a stand-up bike ride.

    Bike miles convert to running miles at a fixed 3:1 ratio; the other
    distances and all durations scale from that equivalent.

    Args:
        bike_distance: Ride distance in miles, or None when unknown.

    Returns:
        Easy run, tempo run, fartlek and progressive options, in that order.
    """
    if bike_distance is None:
        bike_distance = DEFAULT_BIKE_DISTANCE
    miles = round_half_up(bike_distance / BIKE_TO_RUN_RATIO)
    tempo = max(3, miles - 2)
    progressive = max(2, miles - 1)
    return [
        WorkoutOption(
            name=f"{miles}-Mile Easy Run",
            description="Equivalent running distance for today's bike workout - same aerobic benefit",
            duration=f"{miles * 8}-{miles * 10} minutes",
            intensity="Easy",
            workout_type="easy",
            category="running",
        ),
        WorkoutOption(
            name=f"{tempo}-Mile Tempo Run",
            description="Shorter but higher intensity - builds lactate threshold",
            duration=f"{tempo * 7}-{tempo * 8} minutes",
            intensity="Moderate-Hard",
            workout_type="tempo",
            category="running",
        ),
        WorkoutOption(
            name="Fartlek Run",
            description="Playful speed play - develops speed and mental toughness",
            duration="30-40 minutes",
            intensity="Variable",
            category="running",
        ),
        WorkoutOption(
            name=f"{progressive} Miles Progressive",
            description="Start easy, build to moderate-hard finish",
            duration=f"{progressive * 7}-{progressive * 9} minutes",
            intensity="Easy to Moderate-Hard",
            category="running",
        ),
    ]
