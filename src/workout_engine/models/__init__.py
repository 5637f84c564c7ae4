"""Data models for the workout engine."""

from workout_engine.models.alternatives import AlternativeCategory, WorkoutOption
from workout_engine.models.context import (
    PersonalizationContext,
    ScheduleSlot,
    WeatherCondition,
    WorkoutRef,
)
from workout_engine.models.enums import BrickType, Library, NameLabel
from workout_engine.models.paces import (
    PaceRange,
    PaceTable,
    PaceText,
    SinglePace,
    pace_bound,
    parse_pace_entry,
)
from workout_engine.models.resolved import ResolvedWorkout
from workout_engine.models.template import (
    BrickSegment,
    EquipmentEffort,
    EquipmentNote,
    HillRequirement,
    IntensityGuidance,
    StructureSegments,
    WarmupCooldown,
    WorkoutTemplate,
)

__all__ = [
    "AlternativeCategory",
    "BrickSegment",
    "BrickType",
    "EquipmentEffort",
    "EquipmentNote",
    "HillRequirement",
    "IntensityGuidance",
    "Library",
    "NameLabel",
    "PaceRange",
    "PaceTable",
    "PaceText",
    "PersonalizationContext",
    "ResolvedWorkout",
    "ScheduleSlot",
    "SinglePace",
    "StructureSegments",
    "WarmupCooldown",
    "WeatherCondition",
    "WorkoutOption",
    "WorkoutRef",
    "WorkoutTemplate",
    "pace_bound",
    "parse_pace_entry",
]
