"""Caller-supplied inputs: personalization context and workout references."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

from workout_engine.models.paces import PaceTable
from workout_engine.models.template import EquipmentEffort, StructureSegments


@dataclass(frozen=True)
class PersonalizationContext:
    """Athlete-specific data used to personalize a workout.

    Passed by value and never mutated by the engine.

    Attributes:
        paces: Pace table keyed by semantic zone.
        equipment: Stand-up bike preference ("cyclete", "elliptigo"), or None.
        track_intervals: Track splits keyed by pace zone then distance,
            e.g. {"interval": {"400m": "1:45"}}.
        current_week: Current training week (1-based), if known.
        total_weeks: Total weeks in the plan, if known.
        target_distance: Target distance in miles for this session.
        run_eq_preference: 0-100 weight toward equipment over running.
        experience_level: "beginner", "intermediate" or "advanced".
        has_garmin: Whether the athlete records RunEQ miles on a Garmin.
    """

    paces: PaceTable = field(default_factory=PaceTable)
    equipment: str | None = None
    track_intervals: Mapping[str, Mapping[str, str]] = field(default_factory=dict)
    current_week: int | None = None
    total_weeks: int | None = None
    target_distance: float | None = None
    run_eq_preference: int = 0
    experience_level: str | None = None
    has_garmin: bool = True

    @property
    def has_equipment(self) -> bool:
        return bool(self.equipment)


@dataclass(frozen=True)
class ScheduleSlot:
    """Where a workout sits in the training plan."""

    week: int | None = None
    day: str | None = None
    date: str | None = None


@dataclass(frozen=True)
class WorkoutRef:
    """Abstract reference to a workout, as stored in a training plan.

    Only ``category`` is required for resolution; every other field is
    an optional source for the resolver's fallback chains.
    """

    name: str = ""
    category: str | None = None
    description: str = ""
    distance: float | None = None
    duration: str = ""
    structure: str = ""
    segments: StructureSegments | None = None
    effort: EquipmentEffort | None = None
    intensity: str = ""
    heart_rate: str = ""
    benefits: str = ""
    cyclete_notes: str = ""
    elliptigo_notes: str = ""
    road_considerations: str = ""
    equipment_specific: bool = False
    focus: str = ""
    cross_training_type: str | None = None
    schedule: ScheduleSlot = field(default_factory=ScheduleSlot)


@dataclass(frozen=True)
class WeatherCondition:
    """Weather flag passed to the alternative generator."""

    is_extreme: bool = False
    condition: str = ""
