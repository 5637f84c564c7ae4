"""Category defaults and name heuristics used at the end of each fallback chain."""

from __future__ import annotations

import re
from typing import Mapping

from workout_engine import config
from workout_engine.models.enums import Library, NameLabel, category_family
from workout_engine.models.template import Progression
from workout_engine.resolution.classification import BENEFITS_ORDER, STRUCTURE_ORDER, classify

# ---------------------------------------------------------------------------
# Category defaults
# ---------------------------------------------------------------------------

DEFAULT_INTENSITY = "Moderate effort"
DEFAULT_HEART_RATE = "70-85% Max HR"
DEFAULT_STRUCTURE = "Complete the workout as prescribed"
DEFAULT_NAME = "Workout"
DEFAULT_DESCRIPTION = "Standard workout"
DEFAULT_FOCUS = "General Fitness"

CATEGORY_INTENSITY: dict[Library, str] = {
    Library.INTERVAL: "High intensity - 5K to 1-mile race pace",
    Library.TEMPO: "Medium-hard effort, sustainable for 20-60 minutes",
    Library.HILL: "Hard effort on hills, easy on recovery",
    Library.LONG_RUN: "Easy conversational pace",
}

CATEGORY_HEART_RATE: dict[Library, str] = {
    Library.INTERVAL: "90-100% Max HR",
    Library.TEMPO: "86-90% Max HR",
    Library.HILL: "85-95% Max HR",
    Library.LONG_RUN: "70-80% Max HR",
}

CATEGORY_FOCUS: dict[Library, str] = {
    Library.HILL: "Power & Strength",
    Library.TEMPO: "Lactate Threshold",
    Library.INTERVAL: "VO2 Max & Speed",
    Library.EASY: "Aerobic Base",
    Library.LONG_RUN: "Endurance",
    Library.BIKE: "Active Recovery",
}

DEFAULT_SAFETY_NOTES = (
    "Listen to your body and adjust as needed",
    "Stay hydrated throughout the workout",
    "Stop if you feel pain or excessive fatigue",
)

DEFAULT_ALTERNATIVES: dict[str, str] = {
    "tooHot": "Move indoors or adjust timing",
    "tooTired": "Easy recovery pace instead",
    "timeConstraint": "Reduce duration but maintain intensity",
    "noEquipment": "Bodyweight alternative available",
}


def category_intensity(category: str | None) -> str:
    return CATEGORY_INTENSITY.get(category_family(category), DEFAULT_INTENSITY)


def category_heart_rate(category: str | None) -> str:
    return CATEGORY_HEART_RATE.get(category_family(category), DEFAULT_HEART_RATE)


def category_focus(category: str | None) -> str:
    return CATEGORY_FOCUS.get(category_family(category), DEFAULT_FOCUS)


# ---------------------------------------------------------------------------
# Name heuristics
# ---------------------------------------------------------------------------

NAME_STRUCTURES: dict[NameLabel, str] = {
    NameLabel.FARTLEK: (
        "10 min warmup + 20-30 min fartlek (surge when you feel strong, recover as needed) "
        "+ 10 min cooldown"
    ),
    NameLabel.PROGRESSION: "10 min easy + gradually build pace to moderate-hard finish + 5 min cooldown",
    NameLabel.TEMPO: "10-15 min easy warmup + 20-30 min @ comfortably hard pace + 5-10 min cooldown",
    NameLabel.INTERVAL: "15 min warmup + intervals at high intensity with recovery + 10 min cooldown",
    NameLabel.EASY: "Conversational pace throughout",
    NameLabel.LONG: "Steady, easy pace - focus on time on feet",
}

NAME_BENEFITS: dict[NameLabel, str] = {
    NameLabel.FARTLEK: (
        "Develops speed, mental toughness, and ability to surge during races. "
        "Improves VO2 max and teaches body to handle varied paces."
    ),
    NameLabel.PROGRESSION: (
        "Builds mental strength and pacing skills. Teaches body to run strong when tired. "
        "Improves lactate clearance and finishing speed."
    ),
    NameLabel.TEMPO: (
        "Raises lactate threshold, improves race pace endurance, and builds mental toughness. "
        "Key workout for half marathon and marathon training."
    ),
    NameLabel.INTERVAL: (
        "Increases VO2 max, running economy, and speed. Develops neuromuscular power "
        "and teaches body to handle high-intensity efforts."
    ),
    NameLabel.HILL: (
        "Builds leg strength, power, and running economy. Improves form and reduces "
        "injury risk through strength development."
    ),
    NameLabel.LONG: (
        "Builds aerobic endurance, fat adaptation, and mental toughness. Strengthens bones, "
        "tendons, and cardiovascular system."
    ),
    NameLabel.EASY: (
        "Promotes recovery, builds aerobic base, and strengthens cardiovascular system "
        "without stress. Allows body to adapt to training."
    ),
}

DEFAULT_BENEFITS = "Develops overall fitness and running ability"


def structure_from_name(name: str) -> str | None:
    """Canned structure for a recognizable workout name, else None."""
    label = classify(name, STRUCTURE_ORDER)
    return NAME_STRUCTURES[label] if label is not None else None


def benefits_from_name(name: str) -> str:
    label = classify(name, BENEFITS_ORDER)
    return NAME_BENEFITS[label] if label is not None else DEFAULT_BENEFITS


# ---------------------------------------------------------------------------
# Intensity codes and progression
# ---------------------------------------------------------------------------

INTENSITY_CODES = frozenset({
    "shortSpeed", "vo2Max", "longIntervals",
    "threshold", "tempoPlus", "comfortablyHard", "thresholdPace",
    "steadyState", "marathonPace", "fastFinish",
    "easy", "moderate",
})

_CAMEL_CASE = re.compile(r"^[a-z]+(?:[A-Z][a-z0-9]*)+$")


def is_intensity_code(value: str) -> bool:
    """Whether ``value`` is an internal intensity key such as "vo2Max to easy"."""
    parts = [part.strip() for part in value.split(" to ")]
    return all(part in INTENSITY_CODES or _CAMEL_CASE.match(part) for part in parts)


def resolve_progression(progression: Progression | None, experience: str | None) -> str:
    """Progression text for the athlete's experience level.

    A table keyed by experience is matched case-insensitively against
    ``experience`` (or the configured default); when no key matches, the
    table's first entry is used.
    """
    if progression is None:
        return ""
    if isinstance(progression, str):
        return progression
    if not isinstance(progression, Mapping) or not progression:
        return ""
    level = (experience or config.DEFAULT_EXPERIENCE).lower()
    for key, text in progression.items():
        if key.lower() == level:
            return text
    return next(iter(progression.values()))
