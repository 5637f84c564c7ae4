"""Athlete pace table and the pace-entry shapes it can hold.

Pace entries arrive in three shapes: a ``{min, max}`` range, a
``{pace}`` value (which may itself be a dash range such as
"7:40-7:55"), or a bare string. Each shape is a tagged variant here and
``pace_bound`` is the one place that extracts a single value from any
of them.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Union

_MILE_SUFFIX = re.compile(r"\s*/\s*mi(?:le)?\s*$", re.IGNORECASE)


def strip_mile_suffix(pace: str) -> str:
    """Remove a trailing ``/mile`` (or ``/mi``) unit from a pace string."""
    return _MILE_SUFFIX.sub("", pace.strip())


@dataclass(frozen=True)
class PaceRange:
    """An explicit min/max pace range, e.g. easy pace 9:00-9:30."""

    min: str
    max: str


@dataclass(frozen=True)
class SinglePace:
    """A single pace value. May still contain a dash range."""

    pace: str


@dataclass(frozen=True)
class PaceText:
    """A bare pace string with no structure around it."""

    text: str


PaceEntry = Union[PaceRange, SinglePace, PaceText]


def parse_pace_entry(raw: Any) -> PaceEntry | None:
    """Convert a raw dict or string into a tagged pace entry.

    Returns None for anything that holds no usable pace.
    """
    if raw is None:
        return None
    if isinstance(raw, (PaceRange, SinglePace, PaceText)):
        return raw
    if isinstance(raw, str):
        text = strip_mile_suffix(raw)
        return PaceText(text) if text else None
    if isinstance(raw, dict):
        low, high = raw.get("min"), raw.get("max")
        if low and high:
            return PaceRange(strip_mile_suffix(str(low)), strip_mile_suffix(str(high)))
        pace = raw.get("pace")
        if pace:
            return SinglePace(strip_mile_suffix(str(pace)))
        # A lone bound still counts as a single pace
        if low or high:
            return SinglePace(strip_mile_suffix(str(low or high)))
    return None


def _split_dash(text: str) -> tuple[str, str] | None:
    parts = [p.strip() for p in text.split("-")]
    if len(parts) == 2 and parts[0] and parts[1]:
        return parts[0], parts[1]
    return None


def pace_bound(entry: PaceEntry | None, prefer_max: bool = True) -> str | None:
    """Extract one pace value from any entry shape.

    Args:
        entry: A tagged pace entry, or None.
        prefer_max: When the entry holds a range, return the upper bound
            (the slower pace) if True, else the lower bound.

    Returns:
        The pace string without any ``/mile`` suffix, or None.
    """
    if entry is None:
        return None
    if isinstance(entry, PaceRange):
        value = entry.max if prefer_max else entry.min
    else:
        text = entry.pace if isinstance(entry, SinglePace) else entry.text
        bounds = _split_dash(text)
        if bounds is not None:
            value = bounds[1] if prefer_max else bounds[0]
        else:
            value = text
    value = strip_mile_suffix(value)
    return value or None


def pace_range(entry: PaceEntry | None) -> tuple[str, str] | None:
    """Return (min, max) for an entry that describes a range, else None."""
    if entry is None:
        return None
    if isinstance(entry, PaceRange):
        return strip_mile_suffix(entry.min), strip_mile_suffix(entry.max)
    text = entry.pace if isinstance(entry, SinglePace) else entry.text
    bounds = _split_dash(strip_mile_suffix(text))
    if bounds is None:
        return None
    return strip_mile_suffix(bounds[0]), strip_mile_suffix(bounds[1])


# ---------------------------------------------------------------------------
# Pace table
# ---------------------------------------------------------------------------

_ZONE_KEYS: dict[str, tuple[str, ...]] = {
    "easy": ("easy",),
    "threshold": ("threshold",),
    "interval": ("interval",),
    "marathon": ("marathon",),
    "race_pace": ("racePace", "race_pace"),
}


@dataclass(frozen=True)
class PaceTable:
    """Athlete paces keyed by semantic zone.

    Attributes:
        easy: Easy/conversational pace, normally a range.
        threshold: Lactate threshold (tempo) pace.
        interval: VO2max / interval pace.
        marathon: Marathon pace.
        race_pace: Goal race pace for the target race.
        race_distance: Name of the target race distance, e.g. "Half".
    """

    easy: PaceEntry | None = None
    threshold: PaceEntry | None = None
    interval: PaceEntry | None = None
    marathon: PaceEntry | None = None
    race_pace: PaceEntry | None = None
    race_distance: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> PaceTable:
        """Build a table from a JSON-style dict (camelCase or snake_case)."""
        if not data:
            return cls()
        values: dict[str, Any] = {}
        for attr, keys in _ZONE_KEYS.items():
            for key in keys:
                if key in data:
                    values[attr] = parse_pace_entry(data[key])
                    break
        distance = data.get("raceDistance", data.get("race_distance"))
        if distance:
            values["race_distance"] = str(distance)
        return cls(**values)

    @property
    def is_empty(self) -> bool:
        return not any((self.easy, self.threshold, self.interval, self.marathon, self.race_pace))

    def easy_range(self) -> tuple[str, str] | None:
        """Easy pace as (min, max). A single easy pace yields (p, p)."""
        bounds = pace_range(self.easy)
        if bounds is not None:
            return bounds
        single = pace_bound(self.easy)
        return (single, single) if single else None

    def pace(self, zone: str) -> str | None:
        """Single pace for a zone ("threshold", "interval", "marathon", ...)."""
        return pace_bound(getattr(self, zone, None), prefer_max=True)

    def goal_pace(self) -> str | None:
        """Race pace when set, else marathon pace."""
        return self.pace("race_pace") or self.pace("marathon")
