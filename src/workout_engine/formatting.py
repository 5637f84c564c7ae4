"""Text and number formatting helpers shared across the engine.

All functions are pure (no I/O).
"""

from __future__ import annotations

import math
import re

from workout_engine.models.enums import METERS_PER_MILE

# ---------------------------------------------------------------------------
# Numbers
# ---------------------------------------------------------------------------


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 rounding up (not banker's rounding)."""
    return int(math.floor(value + 0.5))


def format_number(value: float) -> str:
    """Render a distance without a trailing ``.0`` (8.0 -> "8", 6.5 -> "6.5")."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:g}"


# ---------------------------------------------------------------------------
# Paces
# ---------------------------------------------------------------------------

_PACE = re.compile(r"^\s*(\d+):(\d{1,2}(?:\.\d+)?)")


def pace_to_minutes(pace: str | None) -> float | None:
    """Parse an "mm:ss" pace into fractional minutes.

    >>> pace_to_minutes("9:30")
    9.5

    Returns None when the string holds no parseable pace.
    """
    if not pace:
        return None
    match = _PACE.match(pace)
    if match is None:
        return None
    return int(match.group(1)) + float(match.group(2)) / 60.0


def pace_to_seconds(pace: str | None) -> float | None:
    minutes = pace_to_minutes(pace)
    return None if minutes is None else minutes * 60.0


def format_seconds(total_seconds: float) -> str:
    """Format seconds as "m:ss", rounding to the nearest second."""
    minutes = int(total_seconds // 60)
    seconds = round_half_up(total_seconds - minutes * 60)
    if seconds == 60:
        minutes, seconds = minutes + 1, 0
    return f"{minutes}:{seconds:02d}"


def split_to_mile_pace(split: str, meters: float) -> str | None:
    """Convert a track split (e.g. "1:45" per 400m) to a per-mile pace."""
    seconds = pace_to_seconds(split)
    if seconds is None or meters <= 0:
        return None
    return format_seconds(seconds / meters * METERS_PER_MILE)


# ---------------------------------------------------------------------------
# Distances
# ---------------------------------------------------------------------------

_NAME_MILES = re.compile(r"(\d+(?:\.\d+)?)[- ]?mile", re.IGNORECASE)
_TEXT_MILES = re.compile(r"(\d+(?:\.\d+)?)[\s-]*(?:miles?|mi)\b", re.IGNORECASE)


def miles_from_name(name: str | None) -> float | None:
    """Distance encoded in a name such as "8-Mile Progressive Run"."""
    if not name:
        return None
    match = _NAME_MILES.search(name)
    return float(match.group(1)) if match else None


def miles_from_text(text: str | None) -> float | None:
    """Distance mentioned in free text, e.g. "run 6 miles easy" or "12 mi"."""
    if not text:
        return None
    match = _TEXT_MILES.search(text)
    return float(match.group(1)) if match else None


# ---------------------------------------------------------------------------
# Display names
# ---------------------------------------------------------------------------

_EQUIPMENT_NAMES: dict[str, str] = {
    "cyclete": "Cyclete",
    "elliptigo": "ElliptiGO",
    "runeq": "RunEQ",
    "running": "Running",
    "bike": "Bike",
    "standup_bike": "Stand-up Bike",
}

_LOWERCASE_WORDS = frozenset({
    "a", "an", "and", "as", "at", "but", "by", "for",
    "in", "of", "on", "or", "the", "to", "with",
})


def title_case(text: str | None) -> str:
    """Title-case a phrase, keeping short connecting words lowercase."""
    if not text:
        return ""
    words = text.lower().split(" ")
    out = []
    for index, word in enumerate(words):
        if index > 0 and word in _LOWERCASE_WORDS:
            out.append(word)
        else:
            out.append(word[:1].upper() + word[1:])
    return " ".join(out)


def format_equipment_name(equipment: str | None) -> str:
    """Display name for an equipment key ("elliptigo" -> "ElliptiGO")."""
    if not equipment:
        return ""
    return _EQUIPMENT_NAMES.get(equipment.lower()) or title_case(equipment)


def format_heart_rate(text: str | None) -> str:
    """Normalize heart-rate capitalization ("70-85% max HR" -> "70-85% Max HR")."""
    if not text:
        return ""
    text = re.sub(r"max hr\b", "Max HR", text, flags=re.IGNORECASE)
    text = re.sub(r"max heart rate", "Max Heart Rate", text, flags=re.IGNORECASE)
    return re.sub(r"\bhr\b", "HR", text, flags=re.IGNORECASE)
