"""Keyword rule table mapping workout names to semantic labels.

Every consumer that classifies a workout by name (pace projection,
structure and benefit fallbacks, contextual alternatives, long-run
detection) reads the same patterns from ``NAME_RULES``. Each consumer
supplies its own precedence as an ordered tuple of labels.
"""

from __future__ import annotations

import re

from workout_engine.models.enums import NameLabel

NAME_RULES: dict[NameLabel, re.Pattern[str]] = {
    NameLabel.FARTLEK: re.compile(r"fartlek"),
    NameLabel.GOAL_PACE: re.compile(
        r"sandwich|simulation|dress rehearsal|marathon pace long|goal pace"
    ),
    NameLabel.FAST_FINISH: re.compile(r"fast finish|super fast"),
    NameLabel.PROGRESSION: re.compile(r"dropdown|10-second|thirds|dusa|fast finish|progressive"),
    NameLabel.INTERVAL: re.compile(r"interval|speed|track"),
    NameLabel.TEMPO: re.compile(r"tempo|threshold"),
    NameLabel.LONG: re.compile(r"long|endurance"),
    NameLabel.HILL: re.compile(r"hill|incline"),
    NameLabel.EASY: re.compile(r"easy|recovery"),
    NameLabel.LONG_RUN_FORMAT: re.compile(
        r"long run|progression|dropdown|thirds|marathon pace|steady state"
        r"|sandwich|simulation|dress rehearsal|goal pace"
    ),
}

# Pace projection: name rules checked before any category rule.
PACE_ORDER = (NameLabel.GOAL_PACE, NameLabel.FAST_FINISH, NameLabel.PROGRESSION)

# Structure text synthesized from the name when no source has one.
STRUCTURE_ORDER = (
    NameLabel.FARTLEK,
    NameLabel.PROGRESSION,
    NameLabel.TEMPO,
    NameLabel.INTERVAL,
    NameLabel.EASY,
    NameLabel.LONG,
)

# Benefit sentence chosen from the name when the template has none.
BENEFITS_ORDER = (
    NameLabel.FARTLEK,
    NameLabel.PROGRESSION,
    NameLabel.TEMPO,
    NameLabel.INTERVAL,
    NameLabel.HILL,
    NameLabel.LONG,
    NameLabel.EASY,
)

# Situational substitutes offered by the alternative generator.
CONTEXTUAL_ORDER = (
    NameLabel.INTERVAL,
    NameLabel.TEMPO,
    NameLabel.LONG,
    NameLabel.HILL,
    NameLabel.EASY,
)


def matches(label: NameLabel, text: str | None) -> bool:
    """Whether ``text`` (case-insensitive) carries the label's keywords."""
    if not text:
        return False
    return NAME_RULES[label].search(text.lower()) is not None


def classify(text: str | None, order: tuple[NameLabel, ...]) -> NameLabel | None:
    """First label in ``order`` whose keywords appear in ``text``."""
    for label in order:
        if matches(label, text):
            return label
    return None


def is_long_run_name(name: str | None) -> bool:
    """Whether the name describes a long-run format ("Thirds Progression", ...)."""
    return matches(NameLabel.LONG_RUN_FORMAT, name)
