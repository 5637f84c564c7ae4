"""Enumerations and fixed vocabulary for the workout engine.

Workout categories arrive from callers as free strings ("tempo",
"intervals", "long-run", ...). The enums below are the engine's own
vocabulary: which catalog library a workout belongs to, which brick
intensity tier is requested, and which semantic label a workout name
carries.
"""

import re
from enum import IntEnum, auto


class Library(IntEnum):
    """Catalog library families, also used as the provenance tag of options."""

    TEMPO = auto()
    INTERVAL = auto()
    HILL = auto()
    LONG_RUN = auto()
    BIKE = auto()
    BRICK = auto()
    EASY = auto()
    AQUA_RUNNING = auto()
    ROWING = auto()
    ELLIPTICAL = auto()
    SWIMMING = auto()
    STATIONARY_BIKE = auto()

    @property
    def key(self) -> str:
        """Provenance key as stored on options ("tempo", "longRun", ...)."""
        return _LIBRARY_KEYS[self]

    @classmethod
    def from_key(cls, key: str | None) -> "Library | None":
        """Inverse of ``key``. Returns None for unknown keys."""
        if not key:
            return None
        for library, library_key in _LIBRARY_KEYS.items():
            if library_key == key:
                return library
        return None


_LIBRARY_KEYS: dict[Library, str] = {
    Library.TEMPO: "tempo",
    Library.INTERVAL: "interval",
    Library.HILL: "hill",
    Library.LONG_RUN: "longRun",
    Library.BIKE: "bike",
    Library.BRICK: "brick",
    Library.EASY: "easy",
    Library.AQUA_RUNNING: "aquaRunning",
    Library.ROWING: "rowing",
    Library.ELLIPTICAL: "elliptical",
    Library.SWIMMING: "swimming",
    Library.STATIONARY_BIKE: "stationaryBike",
}


class BrickType(IntEnum):
    """Brick workout intensity tiers, ordered from easiest to hardest."""

    RECOVERY = auto()
    AEROBIC = auto()
    TEMPO = auto()
    SPEED = auto()

    @property
    def key(self) -> str:
        return self.name.lower()


class NameLabel(IntEnum):
    """Semantic labels assigned to a workout name by keyword matching.

    Keyword patterns live in ``resolution.classification``; each
    consumer there supplies its own precedence order.
    """

    FARTLEK = auto()
    GOAL_PACE = auto()
    FAST_FINISH = auto()
    PROGRESSION = auto()
    INTERVAL = auto()
    TEMPO = auto()
    LONG = auto()
    HILL = auto()
    EASY = auto()
    LONG_RUN_FORMAT = auto()


# Raw workout category strings (lower-cased) and the library family they map to.
CATEGORY_FAMILIES: dict[str, Library] = {
    "tempo": Library.TEMPO,
    "threshold": Library.TEMPO,
    "interval": Library.INTERVAL,
    "intervals": Library.INTERVAL,
    "hill": Library.HILL,
    "hills": Library.HILL,
    "longrun": Library.LONG_RUN,
    "long-run": Library.LONG_RUN,
    "long_run": Library.LONG_RUN,
    "long run": Library.LONG_RUN,
    "cross-training": Library.BIKE,
    "bike": Library.BIKE,
    "standup_bike": Library.BIKE,
    "brick": Library.BRICK,
    "easy": Library.EASY,
    "recovery": Library.EASY,
}


def category_family(category: str | None) -> Library | None:
    """Library family of a raw category string, or None when unknown."""
    if not category:
        return None
    return CATEGORY_FAMILIES.get(category.strip().lower())


# Cross-training equipment names, compacted (lower-case, no separators),
# and the library serving them. The stand-up bike platforms share one.
CROSS_TRAINING_LIBRARIES: dict[str, Library] = {
    "standupbike": Library.BIKE,
    "bike": Library.BIKE,
    "cyclete": Library.BIKE,
    "elliptigo": Library.BIKE,
    "pool": Library.AQUA_RUNNING,
    "aquarunning": Library.AQUA_RUNNING,
    "rowing": Library.ROWING,
    "elliptical": Library.ELLIPTICAL,
    "swimming": Library.SWIMMING,
    "stationarybike": Library.STATIONARY_BIKE,
}


def cross_training_library(kind: str | None) -> Library | None:
    """Library serving a cross-training type ("pool", "standUpBike", ...).

    Matching ignores case, spaces, hyphens and underscores, so
    "standup_bike" and "Stand-Up Bike" both map to the bike catalog.
    """
    if not kind:
        return None
    compact = re.sub(r"[\s_-]+", "", kind).lower()
    return CROSS_TRAINING_LIBRARIES.get(compact)


# Workout categories whose durations come from the catalog when present.
STRUCTURED_LIBRARIES = frozenset({
    Library.TEMPO,
    Library.INTERVAL,
    Library.HILL,
    Library.LONG_RUN,
    Library.BIKE,
})

# Category value that switches the alternative generator to rest-day options.
REST_CATEGORY = "rest"

# Bike-to-run distance ratio used when swapping a ride for a run.
BIKE_TO_RUN_RATIO = 3

# Minutes per RunEQ mile used for non-Garmin ride estimates.
MINUTES_PER_RUNEQ_MILE = 9

# Meters per mile for track split conversions.
METERS_PER_MILE = 1609.34
