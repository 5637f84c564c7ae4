"""Duration calculation for resolved workouts."""

from __future__ import annotations

import logging
import re

from workout_engine.formatting import miles_from_name, miles_from_text, pace_to_minutes, round_half_up
from workout_engine.models.enums import Library, STRUCTURED_LIBRARIES, category_family

logger = logging.getLogger(__name__)

__all__ = ["DEFAULT_DURATION", "calculate_duration", "duration_from_distance", "pace_to_minutes"]

DEFAULT_DURATION = "30-45 minutes"

_TOTAL_MINUTES = re.compile(r"(\d+-\d+)\s*minutes?\s*total", re.IGNORECASE)


def duration_from_distance(miles: float, easy_range: tuple[str, str] | None) -> str | None:
    """Minutes range for ``miles`` run at the easy-pace range."""
    if easy_range is None:
        return None
    low = pace_to_minutes(easy_range[0])
    high = pace_to_minutes(easy_range[1])
    if low is None or high is None:
        return None
    return f"{round_half_up(miles * low)}-{round_half_up(miles * high)} minutes"


def calculate_duration(
    name: str,
    description: str,
    category: str | None,
    explicit: str,
    easy_range: tuple[str, str] | None,
    structure: str,
    distance: float | None = None,
) -> str:
    """Duration text for a workout.

    An explicit duration wins for the structured categories. Otherwise a
    distance found in the name, the description or ``distance`` is
    converted with the easy-pace range. A "N-M minutes total" pattern in
    the structure overrides whatever was computed; a structure that has
    both a warmup and a cooldown but no total marks the duration as the
    main set only.

    Args:
        name: Workout name, searched for "8-Mile" style distances.
        description: Workout description, searched for "6 miles" style distances.
        category: Raw workout category.
        explicit: Duration carried by the reference or template, or "".
        easy_range: Easy pace as (min, max), or None.
        structure: Resolved structure text.
        distance: Distance in miles supplied by the caller, if any.

    Returns:
        A duration string such as "72-76 minutes".
    """
    family = category_family(category)
    duration = None
    if explicit and family in STRUCTURED_LIBRARIES:
        duration = explicit
    else:
        miles = miles_from_name(name)
        if miles is None:
            miles = miles_from_text(description)
        if miles is None:
            miles = distance
        if miles is not None:
            duration = duration_from_distance(miles, easy_range)
        elif family is Library.LONG_RUN and not explicit:
            logger.warning("Long run '%s' has no extractable distance", name)
    if duration is None:
        duration = explicit or DEFAULT_DURATION

    total = _TOTAL_MINUTES.search(structure or "")
    if total is not None:
        return f"{total.group(1)} minutes total"
    if "warmup" in (structure or "") and "cooldown" in (structure or ""):
        return f"{duration} (main set)"
    return duration
