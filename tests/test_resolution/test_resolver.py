"""Tests for TemplateResolver: catalog lookup and the fallback chains."""

from __future__ import annotations

import pytest

from workout_engine.catalog.registry import CatalogRegistry
from workout_engine.exceptions import MissingCategoryError
from workout_engine.models.context import PersonalizationContext, ScheduleSlot, WorkoutRef
from workout_engine.models.paces import PaceTable
from workout_engine.models.resolved import ResolvedWorkout
from workout_engine.resolution.fallbacks import DEFAULT_NAME, DEFAULT_SAFETY_NOTES, DEFAULT_STRUCTURE
from workout_engine.resolution.pace_projector import DEFAULT_PACE_GUIDANCE
from workout_engine.resolution.resolver import TemplateResolver, first_present

TEXT_FIELDS = (
    "name", "type", "focus", "duration", "description", "structure",
    "intensity", "heart_rate", "pace_guidance", "benefits",
)


def _make_ref(**overrides) -> WorkoutRef:
    defaults = {"name": "Classic Tempo Run", "category": "tempo"}
    defaults.update(overrides)
    return WorkoutRef(**defaults)


def _assert_complete(workout: ResolvedWorkout) -> None:
    for field_name in TEXT_FIELDS:
        assert getattr(workout, field_name), field_name
    assert workout.safety_notes
    assert workout.alternatives


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


class TestFirstPresent:
    def test_skips_empty_values(self) -> None:
        assert first_present(("", None, "b", "c")) == "b"

    def test_default(self) -> None:
        assert first_present(("", None), "fallback") == "fallback"


# ---------------------------------------------------------------------------
# Catalog matches
# ---------------------------------------------------------------------------


class TestCatalogResolution:
    def test_tempo_without_paces(self, registry: CatalogRegistry, empty_context: PersonalizationContext) -> None:
        workout = TemplateResolver(registry).resolve(_make_ref(), empty_context)
        assert workout.name == "Classic Tempo Run"
        assert workout.heart_rate == "86-90% Max HR"
        assert "sustainable" in workout.intensity
        assert workout.duration == "20-40 minutes (main set)"
        assert workout.type == "tempo"
        _assert_complete(workout)

    def test_progression_for_experience(self, registry: CatalogRegistry) -> None:
        context = PersonalizationContext(experience_level="advanced")
        workout = TemplateResolver(registry).resolve(_make_ref(), context)
        assert workout.progression == "30-40 min tempo, practice race-specific scenarios"

    def test_sandwich_tempo_threshold_pace(self, registry: CatalogRegistry) -> None:
        context = PersonalizationContext(paces=PaceTable.from_dict({"threshold": {"pace": "8:10"}}))
        workout = TemplateResolver(registry).resolve(_make_ref(name="Sandwich Tempo"), context)
        assert workout.name == "Sandwich Tempo (8:10/mi)"
        assert workout.pace_guidance == "8:10/mile"

    def test_decorated_name_finds_template(
        self, registry: CatalogRegistry, paced_context: PersonalizationContext
    ) -> None:
        ref = _make_ref(name="\U0001F3C3 Cruise Intervals (8:10/mi)")
        workout = TemplateResolver(registry).resolve(ref, paced_context)
        assert workout.name == "Cruise Intervals (8:10/mi)"

    def test_interval_pace(self, registry: CatalogRegistry, paced_context: PersonalizationContext) -> None:
        workout = TemplateResolver(registry).resolve(
            _make_ref(name="Mile Repeats", category="intervals"), paced_context
        )
        assert workout.pace_guidance == "7:00/mile"
        assert workout.duration == "50-70 minutes total"

    def test_hill_keeps_catalog_duration(
        self, registry: CatalogRegistry, empty_context: PersonalizationContext
    ) -> None:
        workout = TemplateResolver(registry).resolve(
            _make_ref(name="Hill Strides", category="hills"), empty_context
        )
        assert workout.duration == "10-15 seconds"
        assert workout.intensity == "Very High (TE 4.0+)"
        assert workout.structure.startswith("**Warmup:**")
        assert workout.hill_requirement.grade == "moderate"
        assert workout.terrain_instructions

    def test_injected_registry(self, stub_registry: CatalogRegistry, empty_context: PersonalizationContext) -> None:
        workout = TemplateResolver(stub_registry).resolve(_make_ref(name="Stub Steady Tempo"), empty_context)
        assert workout.name == "Stub Steady Tempo (personalized)"
        assert workout.benefits == "Stub benefits"


class TestLongRunRetry:
    def test_long_run_name_under_other_category(
        self, registry: CatalogRegistry, empty_context: PersonalizationContext
    ) -> None:
        workout = TemplateResolver(registry).resolve(
            _make_ref(name="Thirds Progression", category="easy"), empty_context
        )
        assert workout.structure == "First 1/3 easy, middle 1/3 moderate, final 1/3 strong"
        assert workout.type == "easy"


class TestStandUpBike:
    def test_bike_ride_is_equipment_specific(
        self, registry: CatalogRegistry, cyclete_context: PersonalizationContext
    ) -> None:
        ref = _make_ref(name="Sustained Threshold Effort", category="cross-training", distance=8)
        workout = TemplateResolver(registry).resolve(ref, cyclete_context)
        assert workout.name == "8 RunEQ Miles - Sustained Threshold Effort"
        assert workout.equipment_specific
        assert workout.equipment == "cyclete"
        assert workout.pace_guidance == "Excellent for building race-pace endurance on natural motion"
        assert workout.safety_notes[-1].startswith("Road planning: Find a flat")
        assert workout.duration == "50-70 minutes (main set)"

    def test_unknown_cross_training_type(
        self, registry: CatalogRegistry, cyclete_context: PersonalizationContext
    ) -> None:
        ref = _make_ref(name="Sustained Threshold Effort", category="cross-training", cross_training_type="trampoline")
        workout = TemplateResolver(registry).resolve(ref, cyclete_context)
        assert workout.name == "Sustained Threshold Effort"
        assert workout.safety_notes == DEFAULT_SAFETY_NOTES
        assert workout.cross_training_type == "trampoline"
        _assert_complete(workout)


class TestCrossTrainingDispatch:
    @pytest.mark.parametrize(
        ("kind", "name", "key"),
        [
            ("pool", "Easy Recovery Run", "aquaRunning"),
            ("aquaRunning", "Classic 400m Repeats", "aquaRunning"),
            ("aqua_running", "Classic 400m Repeats", "aquaRunning"),
            ("rowing", "Sustained Tempo Row", "rowing"),
            ("elliptical", "Sustained Tempo Effort", "elliptical"),
            ("swimming", "Tempo Swim", "swimming"),
            ("stationaryBike", "Sweet Spot Intervals", "stationaryBike"),
            ("stationary-bike", "Sweet Spot Intervals", "stationaryBike"),
        ],
    )
    def test_alias_serves_machine_catalog(
        self, registry: CatalogRegistry, cyclete_context: PersonalizationContext, kind, name, key
    ) -> None:
        ref = _make_ref(name=name, category="cross-training", cross_training_type=kind)
        workout = TemplateResolver(registry).resolve(ref, cyclete_context)
        assert workout.name == name
        assert workout.cross_training_type == key
        assert workout.technique
        assert not workout.equipment_specific
        assert workout.equipment is None
        _assert_complete(workout)

    @pytest.mark.parametrize("kind", ["cyclete", "standUpBike", "standup_bike", "bike", "elliptigo"])
    def test_stand_up_bike_aliases(
        self, registry: CatalogRegistry, cyclete_context: PersonalizationContext, kind
    ) -> None:
        ref = _make_ref(
            name="Sustained Threshold Effort", category="cross-training", cross_training_type=kind, distance=8
        )
        workout = TemplateResolver(registry).resolve(ref, cyclete_context)
        assert workout.name == "8 RunEQ Miles - Sustained Threshold Effort"
        assert workout.cross_training_type == "bike"
        assert workout.equipment_specific

    def test_pool_carries_machine_fields(
        self, registry: CatalogRegistry, paced_context: PersonalizationContext
    ) -> None:
        ref = _make_ref(name="Classic 400m Repeats", category="cross-training", cross_training_type="pool")
        workout = TemplateResolver(registry).resolve(ref, paced_context)
        assert workout.running_equivalent == "Simulates 8-12 x 400m on track"
        assert workout.duration.startswith("50-65 minutes")
        assert workout.coaching_tips

    def test_rowing_settings_and_heart_rate(
        self, registry: CatalogRegistry, empty_context: PersonalizationContext
    ) -> None:
        ref = _make_ref(name="Easy Steady State Row", category="cross-training", cross_training_type="rowing")
        workout = TemplateResolver(registry).resolve(ref, empty_context)
        assert workout.settings["strokeRate"] == "20-24 spm (slow and controlled)"
        assert workout.running_equivalent == "30-45 min easy recovery run"
        assert "Zone 1-2" in workout.heart_rate

    def test_machine_miss_skips_running_catalogs(
        self, registry: CatalogRegistry, empty_context: PersonalizationContext
    ) -> None:
        ref = _make_ref(name="Thirds Progression", category="cross-training", cross_training_type="rowing")
        workout = TemplateResolver(registry).resolve(ref, empty_context)
        assert workout.name == "Thirds Progression"
        assert workout.safety_notes == DEFAULT_SAFETY_NOTES


# ---------------------------------------------------------------------------
# Fallback chains
# ---------------------------------------------------------------------------


class TestFallbacks:
    def test_progressive_run_without_catalog_match(
        self, registry: CatalogRegistry, paced_context: PersonalizationContext
    ) -> None:
        ref = _make_ref(name="8-Mile Progressive Run", category="longRun")
        workout = TemplateResolver(registry).resolve(ref, paced_context)
        assert workout.name == "8-Mile Progressive Run"
        assert workout.duration == "72-76 minutes"
        assert workout.distance == 8.0
        assert workout.pace_guidance == "9:00-9:30/mile (starting pace)"
        assert workout.focus == "Endurance"
        _assert_complete(workout)

    def test_unknown_tempo_workout(self, registry: CatalogRegistry, empty_context: PersonalizationContext) -> None:
        workout = TemplateResolver(registry).resolve(_make_ref(name="Mystery Session"), empty_context)
        assert workout.name == "Mystery Session"
        assert workout.structure == DEFAULT_STRUCTURE
        assert workout.heart_rate == "86-90% Max HR"
        assert workout.pace_guidance == DEFAULT_PACE_GUIDANCE
        _assert_complete(workout)

    def test_blank_name_unknown_category(
        self, registry: CatalogRegistry, empty_context: PersonalizationContext
    ) -> None:
        workout = TemplateResolver(registry).resolve(WorkoutRef(category="yoga"), empty_context)
        assert workout.name == DEFAULT_NAME
        assert workout.focus == "General Fitness"
        _assert_complete(workout)

    def test_reference_fields_fill_gaps(
        self, registry: CatalogRegistry, empty_context: PersonalizationContext
    ) -> None:
        ref = WorkoutRef(
            name="Track Tuesday", category="yoga", description="Coach special",
            heart_rate="80-90% max hr", benefits="Fun", focus="Social",
        )
        workout = TemplateResolver(registry).resolve(ref, empty_context)
        assert workout.description == "Coach special"
        assert workout.heart_rate == "80-90% Max HR"
        assert workout.benefits == "Fun"
        assert workout.focus == "Social"

    def test_schedule_is_preserved(self, registry: CatalogRegistry, empty_context: PersonalizationContext) -> None:
        slot = ScheduleSlot(week=3, day="Tuesday")
        workout = TemplateResolver(registry).resolve(_make_ref(schedule=slot), empty_context)
        assert workout.schedule == slot


class TestMissingCategory:
    @pytest.mark.parametrize("category", [None, "", "   "])
    def test_raises(self, registry: CatalogRegistry, empty_context: PersonalizationContext, category) -> None:
        with pytest.raises(MissingCategoryError):
            TemplateResolver(registry).resolve(_make_ref(category=category), empty_context)

    def test_is_a_value_error(self, registry: CatalogRegistry, empty_context: PersonalizationContext) -> None:
        with pytest.raises(ValueError, match="Classic Tempo Run"):
            TemplateResolver(registry).resolve(_make_ref(category=None), empty_context)
