"""Alternative workout options and the categories that group them."""

from __future__ import annotations

from dataclasses import dataclass

from workout_engine.models.enums import Library
from workout_engine.models.resolved import ResolvedWorkout
from workout_engine.models.template import EquipmentEffort, WorkoutTemplate


@dataclass(frozen=True)
class WorkoutOption:
    """One substitute workout offered to the athlete.

    Attributes:
        name: Display name.
        description: Description text.
        duration: Duration text.
        intensity: Intensity label or code.
        library: Catalog provenance, when the option came from a catalog.
        category: Option category key ("bike", "tempo", "running", ...).
        workout_type: Workout type the option represents ("easy", "tempo", ...).
        equipment: Equipment tag, for equipment options.
        equipment_specific: Whether the option requires the equipment.
        location: Location tag ("treadmill", "indoor", ...).
        timing: Timing tag ("morning", "split", ...).
        reason: Situation the option addresses ("weather", "time-constraint", ...).
        icon: Display icon.
        benefits: Benefits text.
        original_description: Catalog description before enhancement.
        repetitions: Repetition text, used as a duration fallback.
        effort: Equipment effort record.
        structure: Structure text.
        resolved: The option resolved through the engine, when catalog-driven.
        template: The catalog template the option was built from.
    """

    name: str
    description: str = ""
    duration: str = ""
    intensity: str = ""
    library: Library | None = None
    category: str = ""
    workout_type: str = ""
    equipment: str | None = None
    equipment_specific: bool = False
    location: str = ""
    timing: str = ""
    reason: str = ""
    icon: str = ""
    benefits: str = ""
    original_description: str = ""
    repetitions: str = ""
    effort: EquipmentEffort | None = None
    structure: str = ""
    resolved: ResolvedWorkout | None = None
    template: WorkoutTemplate | None = None


@dataclass(frozen=True)
class AlternativeCategory:
    """A titled group of alternative options."""

    id: str
    title: str
    subtitle: str
    icon: str
    options: tuple[WorkoutOption, ...]
