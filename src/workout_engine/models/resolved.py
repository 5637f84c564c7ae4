"""Resolved workout: the display-ready output of the engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

from workout_engine.models.context import ScheduleSlot
from workout_engine.models.template import EquipmentEffort, HillRequirement


@dataclass(frozen=True)
class ResolvedWorkout:
    """Fully merged, personalized workout record.

    Every user-facing text field is non-empty after resolution. The
    ``type`` field keeps the caller's raw category string.

    Attributes:
        name: Display name.
        type: Workout category as given by the caller ("tempo", "longRun", ...).
        focus: Training focus label.
        duration: Duration text, e.g. "72-76 minutes".
        description: Description text.
        structure: Structure text.
        intensity: Effort description.
        heart_rate: Heart-rate range.
        pace_guidance: Pace guidance for this athlete.
        safety_notes: Ordered safety notes.
        benefits: Physiological benefits.
        alternatives: Situational tips keyed by situation.
        progression: Progression text for the athlete's level.
        variations: Variation descriptions.
        examples: Example sessions.
        equipment_specific: Whether the workout is an equipment workout.
        equipment: Equipment tag, when known.
        distance: Distance in miles, when known.
        technique: Technique cues for cross-training workouts.
        coaching_tips: Coaching advice for cross-training workouts.
        settings: Machine settings keyed by metric.
        running_equivalent: The running session a cross-training
            workout stands in for.
        cross_training_type: Library key of the cross-training catalog
            that served the workout ("rowing", "aquaRunning", ...), or
            the equipment name as given when no catalog serves it.
        notes: Extra coaching notes.
        schedule: Plan position, preserved across replacements.
        replacement_reason: Title of the alternative category it came from.
    """

    name: str
    type: str
    focus: str
    duration: str
    description: str
    structure: str
    intensity: str
    heart_rate: str
    pace_guidance: str
    safety_notes: tuple[str, ...]
    benefits: str
    alternatives: Mapping[str, str] = field(default_factory=dict)
    progression: str = ""
    variations: tuple[str, ...] = ()
    examples: tuple[str, ...] = ()
    equipment_specific: bool = False
    equipment: str | None = None
    distance: float | None = None
    effort: EquipmentEffort | None = None
    hill_requirement: HillRequirement | None = None
    terrain_instructions: Mapping[str, str] = field(default_factory=dict)
    track_intervals: Mapping[str, str] = field(default_factory=dict)
    run_eq_recommendation: str = ""
    technique: str = ""
    coaching_tips: str = ""
    settings: Mapping[str, str] = field(default_factory=dict)
    running_equivalent: str = ""
    cross_training_type: str | None = None
    notes: str = ""
    schedule: ScheduleSlot = field(default_factory=ScheduleSlot)
    replacement_reason: str = ""
