"""Display JSON serialization for engine output records.

Converts ResolvedWorkout, WorkoutOption and AlternativeCategory records
into camelCase, JSON-compatible dicts for the rendering and persistence
collaborators. Empty optional fields are omitted.

All functions are pure (no I/O).
"""

from __future__ import annotations

import dataclasses
import json
from enum import Enum
from typing import Any, Mapping

from workout_engine.models.alternatives import AlternativeCategory, WorkoutOption
from workout_engine.models.enums import Library
from workout_engine.models.resolved import ResolvedWorkout

DisplayRecord = ResolvedWorkout | WorkoutOption | AlternativeCategory

# Option fields kept out of the display form; ``resolved`` is exported
# separately and the raw template is an internal record.
_OPTION_SKIP = frozenset({"template"})

# Resolved fields always present, even when empty.
_REQUIRED = frozenset({
    "name", "type", "focus", "duration", "description", "structure",
    "intensity", "heart_rate", "pace_guidance", "safety_notes", "benefits",
})


def camel_case(name: str) -> str:
    """snake_case -> camelCase ("pace_guidance" -> "paceGuidance")."""
    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def to_display_dict(record: DisplayRecord) -> dict:
    """Convert an engine record to a camelCase, JSON-compatible dict."""
    skip = _OPTION_SKIP if isinstance(record, WorkoutOption) else frozenset()
    required = _REQUIRED if isinstance(record, ResolvedWorkout) else frozenset({"id", "title", "name"})

    result = {}
    for f in dataclasses.fields(record):
        if f.name in skip:
            continue
        value = _convert(getattr(record, f.name))
        if _is_empty(value) and f.name not in required:
            continue
        result[camel_case(f.name)] = value
    return result


def to_json_string(record: DisplayRecord | list[AlternativeCategory], indent: int = 2) -> str:
    """Serialize a record, or a list of categories, to a JSON string."""
    if isinstance(record, list):
        payload: Any = [to_display_dict(item) for item in record]
    else:
        payload = to_display_dict(record)
    return json.dumps(payload, indent=indent, ensure_ascii=False)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _convert(value: Any) -> Any:
    """Convert a field value to its JSON-compatible form."""
    if isinstance(value, (ResolvedWorkout, WorkoutOption, AlternativeCategory)):
        return to_display_dict(value)
    if isinstance(value, Library):
        return value.key
    if isinstance(value, Enum):
        return value.name.lower()
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {
            camel_case(f.name): _convert(getattr(value, f.name))
            for f in dataclasses.fields(value)
            if not _is_empty(getattr(value, f.name))
        }
    if isinstance(value, Mapping):
        return {str(k): _convert(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_convert(v) for v in value]
    return value


def _is_empty(value: Any) -> bool:
    if value is None or value is False:
        return True
    if isinstance(value, (str, list, tuple, dict)):
        return len(value) == 0
    return False
