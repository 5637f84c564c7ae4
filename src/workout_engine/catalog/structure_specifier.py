"""Turn vague structure ranges into specific values.

Catalog structures are written as ranges ("4-6 x 3-8 min", "15-20 min
easy"). A coach prescribes a single number, so each range is replaced
by a value chosen from the athlete's progress through the plan:

    progress = min(1, current_week / (total_weeks * 0.75))
    value    = round(min + progress * (max - min))

Without week context the midpoint is used. Each pattern below replaces
its first occurrence only, in the listed order.
"""

from __future__ import annotations

import re
from dataclasses import replace

from workout_engine.formatting import round_half_up
from workout_engine.models.template import StructureSegments

# Full progression is reached three quarters of the way through the plan.
PROGRESSION_HORIZON = 0.75

_REPS_X_MIN_RANGE = re.compile(r"(\d+)-(\d+)\s*x\s*(\d+)-(\d+)\s*min")
_REPS_X_GROUP = re.compile(r"(\d+)-(\d+)\s*x\s*\(")
_TRAILING_REPS = re.compile(r"x\s*(\d+)-(\d+)(?=\s|$|\)|,)")
_FIXED_REPS_MIN_RANGE = re.compile(r"(\d+)\s*x\s*(\d+)-(\d+)\s*min")
_RECOVERY_RANGE = re.compile(r"(\d+)-(\d+)\s*min\s*recovery")
_SEGMENT_RANGE = re.compile(r"(\d+)-(\d+)\s*min\s+(easy|warmup|cooldown|tempo|steady)")
_REPS_X_FIXED_MIN = re.compile(r"(\d+)-(\d+)\s*x\s*(\d+)\s*min")
_MILES_RANGE = re.compile(r"(\d+)-(\d+)\s*miles?\s*(?=@|at\b|easy|pace)")
_TIME_RANGE = re.compile(r"(\d+)-(\d+)\s*(sec|seconds?|min|minutes?)")
_ANY_REP_RANGE = re.compile(r"\d+-\d+\s*x\s*\d+")


def specific_value(low: int, high: int, week: int | None = None, total_weeks: int | None = None) -> int:
    """Pick one value from ``low..high`` based on plan progress."""
    if week and total_weeks:
        progress = min(1.0, week / (total_weeks * PROGRESSION_HORIZON))
        return round_half_up(low + progress * (high - low))
    return round_half_up((low + high) / 2)


def specify_structure(structure: str, week: int | None = None, total_weeks: int | None = None) -> str:
    """Replace range expressions in a structure string with specific values.

    Args:
        structure: Free-text structure, e.g. "4-6 x 3-8 min @ tempo".
        week: Current training week, if known.
        total_weeks: Total weeks in the plan, if known.

    Returns:
        The structure with ranges resolved. Non-range text is untouched.
    """
    if not structure or not isinstance(structure, str):
        return structure

    def value(match: re.Match[str], low: int = 1, high: int = 2) -> int:
        return specific_value(int(match.group(low)), int(match.group(high)), week, total_weeks)

    text = structure

    match = _REPS_X_MIN_RANGE.search(text)
    if match:
        reps, minutes = value(match), value(match, 3, 4)
        text = _REPS_X_MIN_RANGE.sub(f"{reps} x {minutes} min", text, count=1)

    match = _REPS_X_GROUP.search(text)
    if match:
        text = _REPS_X_GROUP.sub(f"{value(match)} x (", text, count=1)

    match = _TRAILING_REPS.search(text)
    if match and "x (" not in text:
        text = _TRAILING_REPS.sub(f"x {value(match)}", text, count=1)

    match = _FIXED_REPS_MIN_RANGE.search(text)
    if match:
        reps = match.group(1)
        text = _FIXED_REPS_MIN_RANGE.sub(f"{reps} x {value(match, 2, 3)} min", text, count=1)

    match = _RECOVERY_RANGE.search(text)
    if match:
        # Recovery always uses the midpoint; short recoveries read better in seconds
        minutes = round_half_up((int(match.group(1)) + int(match.group(2))) / 2)
        label = f"{minutes * 60} sec recovery" if minutes <= 2 else f"{minutes} min recovery"
        text = _RECOVERY_RANGE.sub(label, text, count=1)

    match = _SEGMENT_RANGE.search(text)
    if match:
        text = _SEGMENT_RANGE.sub(f"{value(match)} min {match.group(3)}", text, count=1)

    match = _REPS_X_FIXED_MIN.search(text)
    if match:
        text = _REPS_X_FIXED_MIN.sub(f"{value(match)} x {match.group(3)} min", text, count=1)

    match = _MILES_RANGE.search(text)
    if match:
        text = _MILES_RANGE.sub(f"{value(match)} miles ", text, count=1)

    match = _TIME_RANGE.search(text)
    if match and not _ANY_REP_RANGE.search(text):
        unit = "sec" if "sec" in match.group(0) else "min"
        text = _TIME_RANGE.sub(f"{value(match)} {unit}", text, count=1)

    return text


def specify_segments(
    segments: StructureSegments | None,
    week: int | None = None,
    total_weeks: int | None = None,
) -> StructureSegments | None:
    """Apply ``specify_structure`` to each named segment."""
    if segments is None:
        return None
    return replace(
        segments,
        warmup=specify_structure(segments.warmup, week, total_weeks),
        main=specify_structure(segments.main, week, total_weeks),
        recovery=specify_structure(segments.recovery, week, total_weeks),
        cooldown=specify_structure(segments.cooldown, week, total_weeks),
    )
