"""Shared behaviour of the cross-training catalogs.

Pool running, rowing, elliptical, swimming and stationary-bike sessions
are time-based and carry no paces. Entries are served as stored; the
only personalization is filling the heart-rate text from the effort
record or the machine settings.
"""

from __future__ import annotations

import logging
import re
from dataclasses import replace

from workout_engine.catalog.base import CatalogProvider
from workout_engine.models.context import PersonalizationContext
from workout_engine.models.enums import Library
from workout_engine.models.template import EquipmentEffort, WorkoutTemplate

logger = logging.getLogger(__name__)

_DURATION = re.compile(r"(\d+)(?:-(\d+))?")


def duration_midpoint(duration: str, default: float) -> float:
    """Midpoint in minutes of "50-65 minutes" style text, else ``default``."""
    match = _DURATION.search(duration or "")
    if not match:
        return default
    low = int(match.group(1))
    high = int(match.group(2)) if match.group(2) else low
    return (low + high) / 2


def entry(
    library: Library,
    subcategory: str,
    name: str,
    effort: tuple[str, str, str] | None = None,
    **fields,
) -> WorkoutTemplate:
    """Build one catalog entry. ``effort`` is (heart rate, perceived, rhythm)."""
    return WorkoutTemplate(
        name=name,
        library=library,
        subcategory=subcategory,
        effort=EquipmentEffort(*effort) if effort else None,
        **fields,
    )


class CrossTrainingCatalog(CatalogProvider):
    """Base class for the time-based cross-training libraries.

    Subclasses set ``library`` and ``workouts`` like any provider, plus
    the display ``label``, an equipment ``description``, the modality's
    general ``benefits`` and the ``default_minutes`` assumed for an
    entry whose duration text carries no number.
    """

    label: str = ""
    description: str = ""
    benefits: tuple[str, ...] = ()
    default_minutes: int = 60

    def workouts_by_type(self, kind: str) -> tuple[WorkoutTemplate, ...]:
        """All entries of one subcategory ("easy", "TEMPO", ...)."""
        return self.workouts.get(kind.upper(), ())

    def workout_by_duration(self, kind: str, minutes: float) -> WorkoutTemplate | None:
        """Entry of one subcategory whose duration is closest to ``minutes``.

        Durations compare by their range midpoint. On a tie the earlier
        entry wins. Returns None for an unknown or empty subcategory.
        """
        templates = self.workouts_by_type(kind)
        if not templates:
            logger.debug("%s catalog has no %s workouts", self.key, kind)
            return None
        return min(
            templates,
            key=lambda t: abs(duration_midpoint(t.duration, self.default_minutes) - minutes),
        )

    def personalize(
        self,
        template: WorkoutTemplate,
        context: PersonalizationContext,
        distance: float | None = None,
    ) -> WorkoutTemplate:
        heart_rate = template.heart_rate
        if template.effort is not None and template.effort.heart_rate:
            heart_rate = template.effort.heart_rate
        elif not heart_rate:
            heart_rate = template.settings.get("heartRate", "")
        return replace(template, heart_rate=heart_rate)
