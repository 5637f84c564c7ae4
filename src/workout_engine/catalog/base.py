"""Abstract base class for all workout catalog providers."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from workout_engine.catalog.structure_specifier import specify_structure
from workout_engine.exceptions import UnknownSubcategoryError
from workout_engine.models.context import PersonalizationContext
from workout_engine.models.enums import Library
from workout_engine.models.template import WorkoutTemplate
from workout_engine.random_source import RandomSource, pick

logger = logging.getLogger(__name__)


class CatalogProvider(ABC):
    """Base class for a per-library workout catalog.

    Each provider owns an immutable table of workout templates grouped
    by subcategory. Providers are discovered automatically by the
    CatalogRegistry and hold no mutable state, so a single instance can
    serve concurrent callers.

    Subclasses must define:
        library: the Library family served
        workouts: subcategory key -> tuple of WorkoutTemplate
        personalize(): apply athlete context to a found template

    Lookup matches a query against template names case-insensitively.
    With ``bidirectional`` set, a query that contains a template name
    also matches (so "Classic Tempo Run (8:10/mi)" finds "Classic
    Tempo Run"); otherwise the template name must contain the query.
    """

    library: Library
    workouts: dict[str, tuple[WorkoutTemplate, ...]]
    bidirectional: bool = True

    @property
    def key(self) -> str:
        return self.library.key

    @property
    def subcategories(self) -> list[str]:
        return list(self.workouts.keys())

    def all_workouts(self) -> list[WorkoutTemplate]:
        return [t for templates in self.workouts.values() for t in templates]

    def get_random_workout(self, subcategory: str, rng: RandomSource) -> WorkoutTemplate:
        """Pick a random template from one subcategory.

        Raises:
            UnknownSubcategoryError: If the subcategory is unknown or empty.
        """
        templates = self.workouts.get(subcategory)
        if not templates:
            raise UnknownSubcategoryError(self.key, subcategory)
        return pick(rng, templates)

    def find(self, name: str | None) -> WorkoutTemplate | None:
        """Find a template by name. Exact matches win over partial ones."""
        if not name or not name.strip():
            return None
        query = name.strip().lower()
        candidates = self.all_workouts()
        for template in candidates:
            if template.name.lower() == query:
                return template
        for template in candidates:
            stored = template.name.lower()
            if query in stored or (self.bidirectional and stored in query):
                return template
        return None

    def prescribe(
        self,
        name: str | None,
        context: PersonalizationContext,
        distance: float | None = None,
    ) -> WorkoutTemplate | None:
        """Look up a workout by name and personalize it for the athlete.

        Args:
            name: Normalized workout name.
            context: Athlete personalization context.
            distance: Target distance in miles, when known.

        Returns:
            A personalized copy of the template, or None when the
            catalog holds no matching workout.
        """
        template = self.find(name)
        if template is None:
            logger.debug("No %s catalog entry matches '%s'", self.key, name)
            return None
        return self.personalize(template, context, distance)

    @abstractmethod
    def personalize(
        self,
        template: WorkoutTemplate,
        context: PersonalizationContext,
        distance: float | None = None,
    ) -> WorkoutTemplate:
        """Return a copy of ``template`` personalized for the athlete.

        Must not modify the stored template.
        """
        ...


# ---------------------------------------------------------------------------
# Helpers shared by the running catalogs
# ---------------------------------------------------------------------------


def easy_range_label(context: PersonalizationContext) -> str | None:
    """Easy pace as "9:00-9:30/mile", or None without an easy pace."""
    bounds = context.paces.easy_range()
    if bounds is None:
        return None
    return f"{bounds[0]}-{bounds[1]}/mile"


def specify(text: str, context: PersonalizationContext) -> str:
    """Resolve structure ranges using the athlete's plan progress."""
    return specify_structure(text, context.current_week, context.total_weeks)
