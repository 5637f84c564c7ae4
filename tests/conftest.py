"""Shared test fixtures: pace tables, athlete contexts, deterministic randomness."""

from __future__ import annotations

from dataclasses import replace
from typing import Callable

import pytest

from workout_engine.catalog.base import CatalogProvider
from workout_engine.catalog.registry import CatalogRegistry
from workout_engine.models.context import PersonalizationContext
from workout_engine.models.enums import Library
from workout_engine.models.paces import PaceTable
from workout_engine.models.resolved import ResolvedWorkout
from workout_engine.models.template import WorkoutTemplate


class FirstChoiceRandomSource:
    """RandomSource that always picks the first item."""

    def __init__(self) -> None:
        self.calls: list[int] = []

    def choice_index(self, n: int) -> int:
        self.calls.append(n)
        return 0


class LastChoiceRandomSource:
    """RandomSource that always picks the last item."""

    def choice_index(self, n: int) -> int:
        return n - 1


class StubTempoCatalog(CatalogProvider):
    """Tempo provider with two fixed entries, for dependency-injection tests."""

    library = Library.TEMPO
    workouts = {
        "TRADITIONAL_TEMPO": (
            WorkoutTemplate(
                name="Stub Steady Tempo",
                library=Library.TEMPO,
                subcategory="TRADITIONAL_TEMPO",
                duration="25 minutes",
                structure="10 min easy + 25 min steady",
                benefits="Stub benefits",
            ),
        ),
        "ALTERNATING_TEMPO": (
            WorkoutTemplate(
                name="Stub Alternating Tempo",
                library=Library.TEMPO,
                subcategory="ALTERNATING_TEMPO",
            ),
        ),
    }

    def personalize(self, template, context, distance=None):
        return replace(template, name=f"{template.name} (personalized)")


@pytest.fixture
def workout_factory() -> Callable[..., ResolvedWorkout]:
    """Factory fixture for resolved tempo workouts with every required field set.

    Usage:
        workout = workout_factory(type="longRun", name="12-Mile Long Run")
    """

    def factory(**overrides) -> ResolvedWorkout:
        defaults = {
            "name": "Classic Tempo Run",
            "type": "tempo",
            "focus": "Lactate Threshold",
            "duration": "20-40 minutes",
            "description": "Continuous run at lactate threshold pace",
            "structure": "15 min easy warmup + 25 min tempo + 10 min easy cooldown",
            "intensity": "Medium-hard effort",
            "heart_rate": "86-90% Max HR",
            "pace_guidance": "Maintain steady effort throughout",
            "safety_notes": ("Listen to your body",),
            "benefits": "Raises lactate threshold",
        }
        defaults.update(overrides)
        return ResolvedWorkout(**defaults)

    return factory


@pytest.fixture
def full_paces() -> PaceTable:
    """Easy 9:00-9:30, threshold 8:10, interval 7:00, marathon 8:40."""
    return PaceTable.from_dict({
        "easy": {"min": "9:00", "max": "9:30"},
        "threshold": {"pace": "8:10"},
        "interval": {"pace": "7:00"},
        "marathon": {"pace": "8:40"},
    })


@pytest.fixture
def race_paces(full_paces: PaceTable) -> PaceTable:
    """Full paces plus a half-marathon goal pace of 8:25."""
    return replace(full_paces, race_pace=PaceTable.from_dict({"racePace": {"pace": "8:25"}}).race_pace)


@pytest.fixture
def empty_context() -> PersonalizationContext:
    """Athlete with no pace table and no equipment."""
    return PersonalizationContext()


@pytest.fixture
def paced_context(full_paces: PaceTable) -> PersonalizationContext:
    return PersonalizationContext(paces=full_paces)


@pytest.fixture
def cyclete_context(full_paces: PaceTable) -> PersonalizationContext:
    """Paced athlete who owns a Cyclete."""
    return PersonalizationContext(paces=full_paces, equipment="cyclete")


@pytest.fixture
def first_choice() -> FirstChoiceRandomSource:
    return FirstChoiceRandomSource()


@pytest.fixture
def registry() -> CatalogRegistry:
    """Registry with every catalog auto-discovered."""
    reg = CatalogRegistry()
    reg.discover_providers()
    return reg


@pytest.fixture
def stub_registry() -> CatalogRegistry:
    """Registry holding only the stub tempo provider."""
    reg = CatalogRegistry()
    reg.register(StubTempoCatalog())
    return reg
