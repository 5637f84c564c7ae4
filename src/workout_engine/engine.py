"""WorkoutEngine: the main entry point for resolving and adapting workouts."""

from __future__ import annotations

from workout_engine import config
from workout_engine.alternatives import replacement
from workout_engine.alternatives.generator import AlternativeGenerator
from workout_engine.catalog.registry import CatalogRegistry
from workout_engine.models.alternatives import AlternativeCategory, WorkoutOption
from workout_engine.models.context import PersonalizationContext, WeatherCondition, WorkoutRef
from workout_engine.models.resolved import ResolvedWorkout
from workout_engine.random_source import NumpyRandomSource, RandomSource
from workout_engine.resolution.resolver import TemplateResolver


class WorkoutEngine:
    """Resolves scheduled workouts and offers personalized alternatives.

    The engine holds no mutable state besides its random source; all
    inputs are passed per call and never modified.

    Usage:
        engine = WorkoutEngine()
        workout = engine.resolve(WorkoutRef(name="Thirds Progression", category="longRun"), context)
        categories = engine.generate_alternatives(workout, context)
        chosen = engine.apply_replacement(workout, categories[0].options[0], categories[0])
    """

    def __init__(
        self,
        registry: CatalogRegistry | None = None,
        rng: RandomSource | None = None,
    ) -> None:
        self.registry = registry or CatalogRegistry()
        self.rng = rng if rng is not None else NumpyRandomSource(config.RANDOM_SEED)

        # Auto-discover catalogs if using default registry
        if registry is None:
            self.registry.discover_providers()

        self.resolver = TemplateResolver(self.registry)
        self.generator = AlternativeGenerator(self.registry, self.resolver, self.rng)

    def resolve(self, ref: WorkoutRef, context: PersonalizationContext) -> ResolvedWorkout:
        """Resolve a workout reference into a display-ready workout.

        Args:
            ref: The scheduled workout; only its category is required.
            context: Athlete personalization data.

        Returns:
            A ResolvedWorkout with every user-facing field populated.

        Raises:
            MissingCategoryError: If ``ref`` has no activity category.
        """
        return self.resolver.resolve(ref, context)

    def generate_alternatives(
        self,
        workout: ResolvedWorkout,
        context: PersonalizationContext,
        weather: WeatherCondition | None = None,
    ) -> list[AlternativeCategory]:
        """Ordered alternative categories for a resolved workout."""
        return self.generator.generate(workout, context, weather)

    def apply_replacement(
        self,
        workout: ResolvedWorkout,
        option: WorkoutOption,
        category: AlternativeCategory | None = None,
        context: PersonalizationContext | None = None,
    ) -> ResolvedWorkout:
        """Replace ``workout`` with ``option``, keeping its schedule slot.

        Catalog-driven options carry their resolved form; other options
        are resolved from their own fields.
        """
        resolved = option.resolved
        if resolved is None:
            ref = replacement.option_ref(option, workout.type)
            resolved = self.resolver.merge(ref, option.template, context or PersonalizationContext())
        return replacement.apply_replacement(workout, option, resolved, category)
