"""Catalog workout templates and their structured sub-records.

A ``WorkoutTemplate`` is an immutable catalog record. Catalog providers
return personalized copies via ``dataclasses.replace``; the stored
library entries are never modified.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Union

from workout_engine.models.enums import Library


@dataclass(frozen=True)
class StructureSegments:
    """A structure split into named warmup/main/recovery/cooldown parts."""

    warmup: str = ""
    main: str = ""
    recovery: str = ""
    cooldown: str = ""

    @property
    def is_empty(self) -> bool:
        return not (self.warmup or self.main or self.recovery or self.cooldown)

    def render(self) -> str:
        """Join the present parts into a labelled multi-paragraph string."""
        parts = []
        if self.warmup:
            parts.append(f"**Warmup:** {self.warmup}")
        if self.main:
            parts.append(f"**Main Set:** {self.main}")
        if self.recovery:
            parts.append(f"**Recovery:** {self.recovery}")
        if self.cooldown:
            parts.append(f"**Cooldown:** {self.cooldown}")
        return "\n\n".join(parts)


@dataclass(frozen=True)
class IntensityGuidance:
    """Per-intensity guideline attached to a catalog entry.

    Attributes:
        description: One-line description of the intensity.
        heart_rate: Heart-rate range, e.g. "88-92% Max HR".
        effort: Perceived effort description.
        pace: Pace guidance in words, e.g. "3K to 5K race pace".
    """

    description: str = ""
    heart_rate: str = ""
    effort: str = ""
    pace: str = ""


@dataclass(frozen=True)
class EquipmentEffort:
    """Effort record carried by equipment and cross-training workouts.

    ``rhythm`` is the movement-rate cue of the modality: leg turnover in
    the pool, stroke rate on the erg, cadence on a machine.
    """

    heart_rate: str = ""
    perceived: str = ""
    rhythm: str = ""


@dataclass(frozen=True)
class WarmupCooldown:
    warmup: str
    cooldown: str


@dataclass(frozen=True)
class BrickSegment:
    """One run or bike leg of a brick workout.

    Attributes:
        kind: Segment type ("run", "bike", "transition", "intervals").
        duration: Duration text, e.g. "20 min".
        intensity: Intensity key ("easy", "tempo", "hard", "recovery").
            Empty for transitions.
        description: What to do during the segment.
    """

    kind: str
    duration: str
    intensity: str
    description: str

    def render(self) -> str:
        if not self.intensity:
            return f"{self.kind.capitalize()} {self.duration}: {self.description}"
        return f"{self.kind.capitalize()} {self.duration} ({self.intensity}): {self.description}"


@dataclass(frozen=True)
class HillRequirement:
    """Terrain needed for a hill workout."""

    grade: str
    distance: str
    description: str


@dataclass(frozen=True)
class EquipmentNote:
    """Transition guidance for running into a stand-up bike leg."""

    setup_time: str
    transition_notes: str
    advantages: str


Progression = Union[str, Mapping[str, str]]


@dataclass(frozen=True)
class WorkoutTemplate:
    """One named workout as stored in (or personalized by) a catalog.

    Most fields are optional: each library fills the subset its
    entries carry, and the resolver's fallback chains treat empty
    values as absent.

    Attributes:
        name: Display name. Personalized copies may carry a pace suffix.
        library: Catalog family the entry belongs to.
        subcategory: Catalog bucket key, e.g. "TEMPO_INTERVALS".
        source: Coach or publication the workout comes from.
        description: Free-text description.
        duration: Duration text, e.g. "20-40 minutes".
        structure: Free-text structure.
        segments: Named structure segments (hill workouts).
        warmup_cooldown: Standard warmup/cooldown (interval workouts).
        repetitions: Repetition text, e.g. "6 x 800m".
        recovery: Recovery text between repetitions.
        mile_by_mile: Mile-by-mile structure (long runs).
        total_structure: Full warmup + reps + cooldown text.
        intensity: Intensity code or text.
        intensity_guidance: Guideline record for the intensity.
        heart_rate: Explicit heart-rate text.
        effort: Equipment effort record (stand-up bike).
        pace_guidance: Ready-made pace guidance text.
        safety_notes: Ordered safety notes.
        benefits: Physiological benefits text.
        focus: Training focus label.
        variations: Variation descriptions.
        examples: Example sessions.
        progression: Progression text, or a table keyed by experience level.
        alternatives: Situational alternatives keyed by situation.
        equipment: Equipment tag ("cyclete", "elliptigo", "both").
        cyclete_notes: Cyclete-specific coaching note.
        elliptigo_notes: ElliptiGO-specific coaching note.
        road_considerations: Route planning advice for equipment rides.
        hill_requirement: Terrain requirement for hill workouts.
        terrain_instructions: How to find suitable terrain.
        track_intervals: Per-distance track splits used in the name.
        run_eq_recommendation: RunEQ split recommendation.
        notes: Extra coaching notes.
        brick_segments: Run/bike legs of a brick workout.
        equipment_notes: Transition notes for a brick workout.
        difficulty: Difficulty tier of a brick workout.
        features: Display feature tags.
        technique: Technique cues (cross-training).
        coaching_tips: Coaching advice (cross-training).
        settings: Machine settings keyed by metric, e.g. "strokeRate".
        running_equivalent: The running session the workout stands in for.
    """

    name: str
    library: Library
    subcategory: str = ""
    source: str = ""
    description: str = ""
    duration: str = ""
    structure: str = ""
    segments: StructureSegments | None = None
    warmup_cooldown: WarmupCooldown | None = None
    repetitions: str = ""
    recovery: str = ""
    mile_by_mile: str = ""
    total_structure: str = ""
    intensity: str = ""
    intensity_guidance: IntensityGuidance | None = None
    heart_rate: str = ""
    effort: EquipmentEffort | None = None
    pace_guidance: str = ""
    safety_notes: tuple[str, ...] = ()
    benefits: str = ""
    focus: str = ""
    variations: tuple[str, ...] = ()
    examples: tuple[str, ...] = ()
    progression: Progression | None = None
    alternatives: Mapping[str, str] = field(default_factory=dict)
    equipment: str = ""
    cyclete_notes: str = ""
    elliptigo_notes: str = ""
    road_considerations: str = ""
    hill_requirement: HillRequirement | None = None
    terrain_instructions: Mapping[str, str] = field(default_factory=dict)
    track_intervals: Mapping[str, str] = field(default_factory=dict)
    run_eq_recommendation: str = ""
    notes: str = ""
    brick_segments: tuple[BrickSegment, ...] = ()
    equipment_notes: EquipmentNote | None = None
    difficulty: str = ""
    features: tuple[str, ...] = ()
    technique: str = ""
    coaching_tips: str = ""
    settings: Mapping[str, str] = field(default_factory=dict)
    running_equivalent: str = ""

    @property
    def has_equipment_notes(self) -> bool:
        return bool(self.cyclete_notes or self.elliptigo_notes or self.road_considerations)

    def equipment_note_for(self, equipment: str | None) -> str:
        """The coaching note matching the athlete's equipment, if any."""
        key = (equipment or "").lower()
        if key == "cyclete" and self.cyclete_notes:
            return self.cyclete_notes
        if key == "elliptigo" and self.elliptigo_notes:
            return self.elliptigo_notes
        return ""

    def render_bricks(self) -> str:
        return "\n".join(segment.render() for segment in self.brick_segments)
