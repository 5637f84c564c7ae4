"""Workout name normalization ahead of catalog lookup.

Display names carry decoration the catalogs do not: a pace annotation
("Tempo Run (8:10/mi)"), a distance prefix ("8-Mile Long Run") or a
leading emoji. ``normalize_name`` strips all three and never raises.
"""

from __future__ import annotations

import re
import unicodedata
from typing import Any

# Trailing "(8:10/mi)", "(9:00-9:30/mi)" or "(1:45/400m = 7:02/mi)".
_PACE_ANNOTATION = re.compile(r"\s*\([^()]*/\s*mi\)\s*$", re.IGNORECASE)

# Leading "8-Mile", "10 mile", "6.5mi".
_DISTANCE_PREFIX = re.compile(r"^\s*\d+(?:\.\d+)?\s*-?\s*(?:miles?|mi)\b\s*", re.IGNORECASE)

_VARIATION_SELECTOR = "\ufe0f"
_ZERO_WIDTH_JOINER = "\u200d"


def _is_pictograph(char: str) -> bool:
    code = ord(char)
    if 0x1F000 <= code <= 0x1FAFF or 0x2600 <= code <= 0x27BF:
        return True
    return unicodedata.category(char) == "So"


def _is_modifier(char: str) -> bool:
    return char == _VARIATION_SELECTOR or 0x1F3FB <= ord(char) <= 0x1F3FF


def _strip_leading_glyph(name: str) -> str:
    """Drop one leading emoji (with its modifiers and ZWJ parts) and spaces."""
    if not name or not _is_pictograph(name[0]):
        return name
    index = 1
    while index < len(name):
        char = name[index]
        if _is_modifier(char):
            index += 1
        elif char == _ZERO_WIDTH_JOINER and index + 1 < len(name):
            index += 2
        else:
            break
    return name[index:].lstrip()


def _normalize_once(name: str) -> str:
    name = _PACE_ANNOTATION.sub("", name)
    name = _DISTANCE_PREFIX.sub("", name)
    return _strip_leading_glyph(name).strip()


def normalize_name(raw: Any) -> Any:
    """Strip display decoration from a workout name.

    Rules are applied in order (pace annotation, distance prefix,
    leading glyph) and repeated until the name stops changing, so
    ``normalize_name(normalize_name(s)) == normalize_name(s)``.

    Args:
        raw: Workout name. ``None`` becomes ``""``; any other non-string
            value is returned unchanged.

    Returns:
        The normalized name.
    """
    if raw is None:
        return ""
    if not isinstance(raw, str):
        return raw
    current = raw.strip()
    while True:
        stripped = _normalize_once(current)
        # A name made only of decoration keeps its original text
        if not stripped:
            return current
        if stripped == current:
            return current
        current = stripped
