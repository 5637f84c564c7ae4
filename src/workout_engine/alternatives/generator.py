"""Alternative generator: categorized substitutes for a resolved workout.

Categories are emitted in a fixed order and each is conditionally
included:

    same-intensity -> easier -> harder -> equipment swap or switch to
    running -> contextual -> weather -> brick

Catalog-driven options are personalized with the athlete's context and
resolved through the same fallback chains as scheduled workouts. Rest
days get their own fixed category set instead.
"""

from __future__ import annotations

import logging

from workout_engine import config
from workout_engine.alternatives.bricks import BRICK_DESCRIPTIONS, brick_option, brick_options
from workout_engine.alternatives.contextual import contextual_options
from workout_engine.alternatives.fixed_options import (
    EASIER_OPTIONS,
    HARDER_OPTIONS,
    WEATHER_OPTIONS,
    running_alternatives,
)
from workout_engine.alternatives.rest_day import rest_day_categories
from workout_engine.catalog.brick import BrickCatalog
from workout_engine.catalog.registry import CatalogRegistry
from workout_engine.catalog.standup_bike import (
    ENDURANCE_BUCKET,
    INTERVAL_BUCKET,
    POWER_BUCKET,
    TEMPO_BUCKET,
)
from workout_engine.exceptions import MissingCategoryError
from workout_engine.formatting import format_equipment_name, miles_from_name, miles_from_text
from workout_engine.models.alternatives import AlternativeCategory, WorkoutOption
from workout_engine.models.context import PersonalizationContext, WeatherCondition, WorkoutRef
from workout_engine.models.enums import BIKE_TO_RUN_RATIO, REST_CATEGORY, BrickType, Library, category_family
from workout_engine.models.resolved import ResolvedWorkout
from workout_engine.models.template import WorkoutTemplate
from workout_engine.random_source import RandomSource
from workout_engine.resolution.normalizer import normalize_name
from workout_engine.resolution.resolver import TemplateResolver

logger = logging.getLogger(__name__)

# Long-run distance used for same-intensity variants when none is known.
DEFAULT_LONG_RUN_MILES = 8

SAME_INTENSITY_SUBCATEGORIES: dict[Library, tuple[str, ...]] = {
    Library.TEMPO: ("TRADITIONAL_TEMPO", "ALTERNATING_TEMPO", "PROGRESSIVE_TEMPO"),
    Library.INTERVAL: ("SHORT_SPEED", "VO2_MAX", "LONG_INTERVALS"),
    Library.HILL: ("short_power", "long_strength", "hill_circuits"),
    Library.LONG_RUN: ("TRADITIONAL_EASY", "PROGRESSIVE_RUNS", "MIXED_PACE_LONG"),
    Library.BIKE: (TEMPO_BUCKET, INTERVAL_BUCKET, ENDURANCE_BUCKET),
}

ENHANCED_DESCRIPTIONS: dict[tuple[Library, str], str] = {
    (Library.TEMPO, "TRADITIONAL_TEMPO"): "Sustained lactate threshold effort - builds race pace endurance",
    (Library.TEMPO, "ALTERNATING_TEMPO"): "Varied tempo segments - teaches pace changes and mental toughness",
    (Library.TEMPO, "PROGRESSIVE_TEMPO"): "Building tempo effort - develops pacing skills and confidence",
    (Library.INTERVAL, "SHORT_SPEED"): "Quick speed bursts - develops neuromuscular power and turnover",
    (Library.INTERVAL, "VO2_MAX"): "Hard aerobic intervals - builds maximum oxygen uptake and speed",
    (Library.INTERVAL, "LONG_INTERVALS"): "Extended speed work - race pace practice with recovery",
    (Library.HILL, "short_power"): "Power hill repeats - builds leg strength and running power",
    (Library.HILL, "long_strength"): "Endurance hill training - develops climbing stamina and mental toughness",
    (Library.HILL, "hill_circuits"): "Mixed hill workout - combines power, strength, and endurance",
    (Library.LONG_RUN, "TRADITIONAL_EASY"): "Steady aerobic run - builds endurance base and fat adaptation",
    (Library.LONG_RUN, "PROGRESSIVE_RUNS"): "Building effort long run - develops race-day pacing skills",
    (Library.LONG_RUN, "MIXED_PACE_LONG"): "Mixed pace long run - practices energy system transitions",
}
ENHANCED_DESCRIPTIONS.update(
    {(Library.BRICK, brick_type.key): text for brick_type, text in BRICK_DESCRIPTIONS.items()}
)

CONVERSATIONAL_RUN = WorkoutOption(
    name="Conversational Run",
    description="Easy pace, focus on breathing and form",
    duration="30-45 minutes",
    library=Library.EASY,
    workout_type=Library.EASY.key,
)


def _same_name(a: str, b: str) -> bool:
    return normalize_name(a).strip().lower() == normalize_name(b).strip().lower()


class AlternativeGenerator:
    """Builds alternative categories for a resolved workout.

    Args:
        registry: Catalog providers to draw catalog options from.
        resolver: Resolver used to fill each catalog option's fields.
        rng: Random source for catalog picks.
    """

    def __init__(self, registry: CatalogRegistry, resolver: TemplateResolver, rng: RandomSource) -> None:
        self.registry = registry
        self.resolver = resolver
        self.rng = rng

    def generate(
        self,
        workout: ResolvedWorkout,
        context: PersonalizationContext,
        weather: WeatherCondition | None = None,
    ) -> list[AlternativeCategory]:
        """Ordered alternative categories for ``workout``.

        Raises:
            MissingCategoryError: If the workout has no category.
        """
        if not workout.type or not workout.type.strip():
            raise MissingCategoryError(workout.name)
        if workout.type.strip().lower() == REST_CATEGORY:
            categories = rest_day_categories(context)
            self._log_assembly(workout, categories)
            return categories

        family = category_family(workout.type)
        categories = [
            AlternativeCategory(
                id="same-intensity",
                title="🏃‍♂️ Keep Running - Same Intensity",
                subtitle=f"Alternative {workout.type} workouts",
                icon="🔄",
                options=tuple(self.same_intensity(workout, context)[: config.CATEGORY_CAP]),
            ),
            AlternativeCategory(
                id="easier",
                title="😌 Make It Easier",
                subtitle="Lower intensity alternatives",
                icon="⬇️",
                options=EASIER_OPTIONS,
            ),
            AlternativeCategory(
                id="harder",
                title="💪 Make It Harder",
                subtitle="Higher intensity challenges",
                icon="⬆️",
                options=tuple(self.harder(workout, context)[: config.HARDER_CAP]),
            ),
        ]

        if context.equipment:
            if family is Library.BIKE:
                bike_miles = miles_from_text(workout.name)
                if bike_miles is None and workout.distance is not None:
                    bike_miles = workout.distance * BIKE_TO_RUN_RATIO
                categories.append(AlternativeCategory(
                    id="run-instead",
                    title="🏃‍♂️ Switch to Running",
                    subtitle="Run instead of bike",
                    icon="👟",
                    options=tuple(running_alternatives(bike_miles)),
                ))
            else:
                categories.append(AlternativeCategory(
                    id="equipment",
                    title=f"🚴‍♂️ Switch to {format_equipment_name(context.equipment)}",
                    subtitle="Equipment-specific alternatives",
                    icon="⚡",
                    options=tuple(self.equipment_swap(workout, context)[: config.CATEGORY_CAP]),
                ))

        categories.append(AlternativeCategory(
            id="contextual",
            title="🔄 Quick Adaptations",
            subtitle="Situational alternatives for real life",
            icon="🛠️",
            options=contextual_options(workout),
        ))

        if weather is not None and weather.is_extreme:
            categories.append(AlternativeCategory(
                id="weather",
                title="🌡️ Weather Alternatives",
                subtitle=f"Safe options for {weather.condition}",
                icon="🛡️",
                options=WEATHER_OPTIONS,
            ))

        if context.equipment:
            bricks = self._brick_catalog()
            if bricks is not None:
                categories.append(AlternativeCategory(
                    id="brick",
                    title="🧱 Brick Workouts",
                    subtitle="Run + bike combinations",
                    icon="🔄",
                    options=tuple(brick_options(bricks, workout, context, self.rng)),
                ))

        self._log_assembly(workout, categories)
        return categories

    # -------------------------------------------------------------------
    # Category builders
    # -------------------------------------------------------------------

    def same_intensity(self, workout: ResolvedWorkout, context: PersonalizationContext) -> list[WorkoutOption]:
        """One variant per subcategory of the workout's own library."""
        family = category_family(workout.type)
        if family is Library.BRICK:
            return self._same_intensity_bricks(workout, context)
        subcategories = SAME_INTENSITY_SUBCATEGORIES.get(family)
        if subcategories is None:
            return [CONVERSATIONAL_RUN]

        distance = None
        if family is Library.LONG_RUN:
            distance = miles_from_name(workout.name) or workout.distance or DEFAULT_LONG_RUN_MILES
        options = []
        for subcategory in subcategories:
            option = self._catalog_variant(family, subcategory, workout, context, distance)
            if option is not None:
                options.append(option)
        return options

    def harder(self, workout: ResolvedWorkout, context: PersonalizationContext) -> list[WorkoutOption]:
        family = category_family(workout.type)
        options = []
        if family in (Library.EASY, Library.TEMPO):
            option = self._catalog_variant(Library.INTERVAL, "SHORT_SPEED", None, context)
            if option is not None:
                options.append(option)
        if family is not Library.HILL:
            option = self._catalog_variant(Library.HILL, "short_power", None, context)
            if option is not None:
                options.append(option)
        options.extend(HARDER_OPTIONS)
        return options

    def equipment_swap(self, workout: ResolvedWorkout, context: PersonalizationContext) -> list[WorkoutOption]:
        """Stand-up bike workouts bucketed by the current workout's family."""
        provider = self.registry.get(Library.BIKE)
        if provider is None:
            logger.debug("No bike catalog registered, skipping equipment swap")
            return []
        workouts = provider.workouts
        family = category_family(workout.type)
        if family in (Library.TEMPO, Library.INTERVAL):
            templates = workouts.get(TEMPO_BUCKET, ())[:3] + workouts.get(INTERVAL_BUCKET, ())[:2]
        elif family is Library.HILL:
            templates = workouts.get(POWER_BUCKET, ())[:3]
        elif family is Library.LONG_RUN:
            templates = workouts.get(ENDURANCE_BUCKET, ())[:3]
        else:
            templates = workouts.get(ENDURANCE_BUCKET, ())[:1] + workouts.get(TEMPO_BUCKET, ())[-1:]
        return [
            self._option(Library.BIKE, template.subcategory, provider.personalize(template, context), context)
            for template in templates
        ]

    # -------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------

    def _brick_catalog(self) -> BrickCatalog | None:
        provider = self.registry.get(Library.BRICK)
        if provider is None or not isinstance(provider, BrickCatalog):
            logger.debug("No brick catalog registered, skipping brick options")
            return None
        return provider

    def _same_intensity_bricks(
        self, workout: ResolvedWorkout, context: PersonalizationContext
    ) -> list[WorkoutOption]:
        bricks = self._brick_catalog()
        if bricks is None:
            return []
        options = []
        for brick_type in (BrickType.AEROBIC, BrickType.TEMPO, BrickType.SPEED, BrickType.RECOVERY):
            option = brick_option(bricks, brick_type, context, self.rng)
            if not _same_name(option.name, workout.name):
                options.append(option)
        return options

    def _catalog_variant(
        self,
        library: Library,
        subcategory: str,
        workout: ResolvedWorkout | None,
        context: PersonalizationContext,
        distance: float | None = None,
    ) -> WorkoutOption | None:
        """Random personalized entry from one subcategory, or None."""
        provider = self.registry.get(library)
        if provider is None:
            logger.debug("No %s catalog registered, skipping %s", library.key, subcategory)
            return None
        if subcategory not in provider.workouts:
            logger.debug("%s catalog has no %s subcategory", library.key, subcategory)
            return None
        base = provider.get_random_workout(subcategory, self.rng)
        if workout is not None and _same_name(base.name, workout.name):
            return None
        personalized = provider.personalize(base, context, distance)
        return self._option(library, subcategory, personalized, context, distance)

    def _option(
        self,
        library: Library,
        subcategory: str,
        template: WorkoutTemplate,
        context: PersonalizationContext,
        distance: float | None = None,
    ) -> WorkoutOption:
        """Wrap a personalized template as a resolved option."""
        equipment_specific = library is Library.BIKE
        ref = WorkoutRef(
            name=template.name,
            category=library.key,
            distance=distance,
            equipment_specific=equipment_specific,
        )
        resolved = self.resolver.merge(ref, template, context)
        return WorkoutOption(
            name=template.name,
            description=ENHANCED_DESCRIPTIONS.get((library, subcategory), template.description),
            original_description=template.description,
            duration=resolved.duration,
            intensity=resolved.intensity,
            library=library,
            category=subcategory,
            workout_type=library.key,
            equipment=context.equipment if equipment_specific else None,
            equipment_specific=equipment_specific,
            benefits=resolved.benefits,
            repetitions=template.repetitions,
            effort=template.effort,
            structure=resolved.structure,
            resolved=resolved,
            template=template,
        )

    def _log_assembly(self, workout: ResolvedWorkout, categories: list[AlternativeCategory]) -> None:
        logger.debug(
            "Alternatives for '%s': %s",
            workout.name,
            ", ".join(f"{c.id}={len(c.options)}" for c in categories),
        )
