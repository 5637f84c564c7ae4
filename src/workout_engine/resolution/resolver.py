"""Template resolver: merges a workout reference with its catalog template.

Each output field is taken from the first non-empty source in a fixed
priority order, ending in a hard-coded default, so every user-facing
field of the result is populated even when the catalog has no match and
the athlete has no pace table.
"""

from __future__ import annotations

import logging
from typing import Iterable

from workout_engine.catalog.registry import CatalogRegistry
from workout_engine.exceptions import MissingCategoryError
from workout_engine.formatting import format_heart_rate, miles_from_name
from workout_engine.models.context import PersonalizationContext, WorkoutRef
from workout_engine.models.enums import Library, category_family, cross_training_library
from workout_engine.models.resolved import ResolvedWorkout
from workout_engine.models.template import WorkoutTemplate
from workout_engine.resolution.classification import is_long_run_name
from workout_engine.resolution.duration import calculate_duration
from workout_engine.resolution.fallbacks import (
    DEFAULT_ALTERNATIVES,
    DEFAULT_DESCRIPTION,
    DEFAULT_NAME,
    DEFAULT_SAFETY_NOTES,
    DEFAULT_STRUCTURE,
    benefits_from_name,
    category_focus,
    category_heart_rate,
    category_intensity,
    is_intensity_code,
    resolve_progression,
    structure_from_name,
)
from workout_engine.resolution.normalizer import normalize_name
from workout_engine.resolution.pace_projector import project_pace

logger = logging.getLogger(__name__)


def first_present(values: Iterable[str | None], default: str = "") -> str:
    """First non-empty string in ``values``, else ``default``."""
    for value in values:
        if value:
            return value
    return default


def _composite_structure(template: WorkoutTemplate) -> str:
    """Warmup + repetitions + cooldown text built from interval fields."""
    reps = template.repetitions
    if reps and template.recovery:
        reps = f"{reps} with {template.recovery}"
    wc = template.warmup_cooldown
    if wc is not None and reps:
        return f"{wc.warmup} + {reps} + {wc.cooldown}"
    return reps


class TemplateResolver:
    """Resolves workout references against the catalogs of a registry."""

    def __init__(self, registry: CatalogRegistry) -> None:
        self.registry = registry

    def lookup(self, ref: WorkoutRef, context: PersonalizationContext) -> WorkoutTemplate | None:
        """Personalized catalog template for ``ref``, or None on a miss."""
        name = normalize_name(ref.name)
        if not name:
            return None
        distance = ref.distance if ref.distance is not None else miles_from_name(ref.name)
        family = category_family(ref.category)

        if ref.cross_training_type is not None:
            provider = self.registry.for_cross_training(ref.cross_training_type)
            if provider is None:
                logger.debug(
                    "Unknown cross-training equipment '%s' for '%s'",
                    ref.cross_training_type, ref.name,
                )
                return None
            return provider.prescribe(name, context, distance)

        template = None
        provider = self.registry.for_category(ref.category)
        if provider is not None:
            template = provider.prescribe(name, context, distance)
        else:
            logger.debug("No catalog for category '%s'", ref.category)

        if template is None and family is not Library.LONG_RUN and is_long_run_name(name):
            long_runs = self.registry.get(Library.LONG_RUN)
            if long_runs is not None:
                template = long_runs.prescribe(name, context, distance)
        return template

    def resolve(self, ref: WorkoutRef, context: PersonalizationContext) -> ResolvedWorkout:
        """Resolve ``ref`` into a fully populated workout.

        Raises:
            MissingCategoryError: If the reference has no activity category.
        """
        if not ref.category or not ref.category.strip():
            raise MissingCategoryError(ref.name)
        return self.merge(ref, self.lookup(ref, context), context)

    def merge(
        self,
        ref: WorkoutRef,
        template: WorkoutTemplate | None,
        context: PersonalizationContext,
    ) -> ResolvedWorkout:
        """Combine reference, template and defaults into a resolved workout."""
        category = ref.category or ""
        family = category_family(category)
        machine = cross_training_library(ref.cross_training_type)
        served = machine or family
        equipment_specific = ref.equipment_specific or served is Library.BIKE
        guidance = template.intensity_guidance if template is not None else None
        t_effort = template.effort if template is not None else None

        if context.paces.is_empty:
            logger.debug("No pace table for '%s', using %s category defaults", ref.name, category)

        name = first_present((template.name if template else "", ref.name), DEFAULT_NAME)
        description = first_present(
            (template.description if template else "", ref.description), DEFAULT_DESCRIPTION
        )

        structure = first_present(
            (
                template.segments.render() if template and template.segments else "",
                ref.segments.render() if ref.segments else "",
                template.structure if template else "",
                template.mile_by_mile if template else "",
                template.total_structure if template else "",
                ref.structure,
                _composite_structure(template) if template else "",
                structure_from_name(name) or structure_from_name(ref.name),
                description if description != DEFAULT_DESCRIPTION else "",
            ),
            DEFAULT_STRUCTURE,
        )

        raw_intensity = [
            value
            for value in (template.intensity if template else "", ref.intensity)
            if value and not is_intensity_code(value)
        ]
        intensity = first_present(
            (
                t_effort.perceived if t_effort else "",
                ref.effort.perceived if ref.effort else "",
                guidance.effort if guidance else "",
                guidance.description if guidance else "",
                *raw_intensity,
            ),
            category_intensity(category),
        )

        heart_rate = format_heart_rate(first_present(
            (
                t_effort.heart_rate if t_effort else "",
                ref.effort.heart_rate if ref.effort else "",
                guidance.heart_rate if guidance else "",
                template.heart_rate if template else "",
                ref.heart_rate,
            ),
            category_heart_rate(category),
        ))

        pace_guidance = project_pace(
            name,
            category,
            context,
            cyclete_notes=first_present((template.cyclete_notes if template else "", ref.cyclete_notes)),
            elliptigo_notes=first_present(
                (template.elliptigo_notes if template else "", ref.elliptigo_notes)
            ),
            fallback=first_present(
                (guidance.pace if guidance else "", template.pace_guidance if template else "")
            ),
            equipment_specific=equipment_specific,
        )

        distance = ref.distance
        if distance is None:
            distance = miles_from_name(ref.name)
        duration = calculate_duration(
            name,
            description,
            category,
            first_present((ref.duration, template.duration if template else "")),
            context.paces.easy_range(),
            structure,
            distance,
        )

        safety_notes = tuple(template.safety_notes) if template and template.safety_notes else DEFAULT_SAFETY_NOTES
        road = first_present((template.road_considerations if template else "", ref.road_considerations))
        if road:
            safety_notes = safety_notes + (f"Road planning: {road}",)

        benefits = first_present(
            (ref.benefits, template.benefits if template else ""), benefits_from_name(name)
        )
        focus = first_present((ref.focus, template.focus if template else ""), category_focus(category))

        equipment = None
        if equipment_specific:
            equipment = context.equipment or (template.equipment if template and template.equipment else None)

        return ResolvedWorkout(
            name=name,
            type=category,
            focus=focus,
            duration=duration,
            description=description,
            structure=structure,
            intensity=intensity,
            heart_rate=heart_rate,
            pace_guidance=pace_guidance,
            safety_notes=safety_notes,
            benefits=benefits,
            alternatives=dict(template.alternatives) if template and template.alternatives else dict(
                DEFAULT_ALTERNATIVES
            ),
            progression=resolve_progression(
                template.progression if template else None, context.experience_level
            ),
            variations=template.variations if template else (),
            examples=template.examples if template else (),
            equipment_specific=equipment_specific,
            equipment=equipment,
            distance=distance,
            effort=t_effort or ref.effort,
            hill_requirement=template.hill_requirement if template else None,
            terrain_instructions=dict(template.terrain_instructions) if template else {},
            track_intervals=dict(template.track_intervals) if template else {},
            run_eq_recommendation=template.run_eq_recommendation if template else "",
            technique=template.technique if template else "",
            coaching_tips=template.coaching_tips if template else "",
            settings=dict(template.settings) if template else {},
            running_equivalent=template.running_equivalent if template else "",
            cross_training_type=machine.key if machine is not None else ref.cross_training_type,
            notes=template.notes if template else "",
            schedule=ref.schedule,
        )
