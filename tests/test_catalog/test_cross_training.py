"""Tests for the pool, rowing, elliptical, swimming and stationary-bike catalogs."""

from __future__ import annotations

import pytest

from workout_engine.catalog.cross_training import CrossTrainingCatalog, duration_midpoint
from workout_engine.catalog.cross_training.aqua_running import AquaRunningCatalog
from workout_engine.catalog.cross_training.elliptical import EllipticalCatalog
from workout_engine.catalog.cross_training.rowing import RowingCatalog
from workout_engine.catalog.cross_training.stationary_bike import StationaryBikeCatalog
from workout_engine.catalog.cross_training.swimming import SwimmingCatalog, technique_text
from workout_engine.catalog.registry import CatalogRegistry
from workout_engine.models.context import PersonalizationContext
from workout_engine.models.enums import Library

CATALOGS = (AquaRunningCatalog, RowingCatalog, EllipticalCatalog, SwimmingCatalog, StationaryBikeCatalog)


class TestDurationMidpoint:
    def test_range(self) -> None:
        assert duration_midpoint("50-65 minutes", 60) == 57.5

    def test_single_value(self) -> None:
        assert duration_midpoint("45 minutes", 60) == 45

    def test_no_number_uses_default(self) -> None:
        assert duration_midpoint("", 40) == 40
        assert duration_midpoint("as long as needed", 50) == 50


class TestSharedBehaviour:
    @pytest.mark.parametrize("catalog_cls", CATALOGS)
    def test_registered_under_own_library(self, registry: CatalogRegistry, catalog_cls) -> None:
        provider = registry.get(catalog_cls.library)
        assert isinstance(provider, catalog_cls)
        assert provider.key == catalog_cls.library.key

    @pytest.mark.parametrize("catalog_cls", CATALOGS)
    def test_every_entry_is_tagged(self, catalog_cls) -> None:
        catalog = catalog_cls()
        for subcategory, templates in catalog.workouts.items():
            for template in templates:
                assert template.library is catalog.library, template.name
                assert template.subcategory == subcategory, template.name
                assert template.duration, template.name

    @pytest.mark.parametrize("catalog_cls", CATALOGS)
    def test_equipment_description(self, catalog_cls) -> None:
        catalog = catalog_cls()
        assert catalog.label
        assert catalog.description
        assert catalog.benefits

    def test_base_is_not_registered(self, registry: CatalogRegistry) -> None:
        assert not any(type(p) is CrossTrainingCatalog for p in map(registry.get, Library))

    @pytest.mark.parametrize("catalog_cls", CATALOGS)
    def test_personalize_leaves_template_untouched(
        self, paced_context: PersonalizationContext, catalog_cls
    ) -> None:
        catalog = catalog_cls()
        template = catalog.all_workouts()[0]
        snapshot = (template.heart_rate, template.progression)
        catalog.personalize(template, paced_context)
        assert (template.heart_rate, template.progression) == snapshot

    def test_workouts_by_type_is_case_insensitive(self) -> None:
        catalog = RowingCatalog()
        assert catalog.workouts_by_type("power") == catalog.workouts["POWER"]
        assert catalog.workouts_by_type("yoga") == ()


class TestAquaRunning:
    def test_heart_rate_from_effort(self, empty_context: PersonalizationContext) -> None:
        workout = AquaRunningCatalog().prescribe("Easy Recovery Run", empty_context)
        assert workout.heart_rate == "Zone 1-2 (60-75% max HR)"
        assert workout.effort.rhythm == "Moderate, natural rhythm"

    def test_running_equivalent(self, empty_context: PersonalizationContext) -> None:
        workout = AquaRunningCatalog().prescribe("Classic 400m Repeats", empty_context)
        assert workout.running_equivalent == "Simulates 8-12 x 400m on track"

    def test_beginner_progression(self) -> None:
        sessions = AquaRunningCatalog().beginner_progression()
        assert [s.name for s in sessions] == [
            "Introduction to Aqua Running", "Building Duration", "Extended Efforts", "Full Duration",
        ]
        assert all(s.subcategory == "BEGINNER" for s in sessions)

    def test_personalize_adds_progression(self, empty_context: PersonalizationContext) -> None:
        workout = AquaRunningCatalog().prescribe("Easy Recovery Run", empty_context)
        assert workout.progression["beginner"].startswith("New to the pool?")
        assert "Building Duration (25-30 minutes)" in workout.progression["beginner"]
        assert workout.progression["advanced"] == "Match the duration of the land workout it replaces"

    def test_beginner_sessions_are_not_prescribed(self) -> None:
        names = {t.name for t in AquaRunningCatalog().all_workouts()}
        assert "Introduction to Aqua Running" not in names


class TestRowing:
    def test_heart_rate_from_settings(self, empty_context: PersonalizationContext) -> None:
        workout = RowingCatalog().prescribe("Easy Steady State Row", empty_context)
        assert workout.effort is None
        assert workout.heart_rate == "Zone 1-2 (60-75% max HR)"
        assert workout.settings["strokeRate"] == "20-24 spm (slow and controlled)"

    def test_partial_name(self, empty_context: PersonalizationContext) -> None:
        assert RowingCatalog().prescribe("2K Tempo", empty_context).name == "2K Tempo Repeats"

    def test_closest_duration(self) -> None:
        assert RowingCatalog().workout_by_duration("tempo", 60).name == "Tempo Intervals"

    def test_duration_tie_keeps_first(self) -> None:
        assert RowingCatalog().workout_by_duration("INTERVALS", 52.5).name == "500m Repeats"

    def test_unknown_type(self) -> None:
        assert RowingCatalog().workout_by_duration("yoga", 30) is None


class TestElliptical:
    def test_effort_rhythm_is_cadence(self, empty_context: PersonalizationContext) -> None:
        workout = EllipticalCatalog().prescribe("Hill Repeats", empty_context)
        assert workout.effort.rhythm == "85-90 RPM - power over speed"
        assert workout.running_equivalent == "Simulates 8-10 x 90-second hill repeats"

    def test_easy_entries_use_settings(self, empty_context: PersonalizationContext) -> None:
        workout = EllipticalCatalog().prescribe("Easy Recovery Session", empty_context)
        assert workout.heart_rate == "Zone 1-2 (60-75% max HR)"
        assert workout.settings["resistance"] == "Low (3-5 out of 20)"

    def test_closest_duration(self) -> None:
        assert EllipticalCatalog().workout_by_duration("long", 100).name == "Extended Long Session"


class TestSwimming:
    def test_technique_text(self) -> None:
        assert technique_text("Smooth stroke.", "Every 3 strokes", "Easy") == (
            "Smooth stroke. Breathing: Every 3 strokes. Effort: Easy."
        )

    def test_technique_and_set_breakdown(self, empty_context: PersonalizationContext) -> None:
        workout = SwimmingCatalog().prescribe("Easy Aerobic Swim", empty_context)
        assert workout.technique == (
            "Smooth, efficient stroke. Don't fight the water. Breathing: Controlled, rhythmic breathing. "
            "Effort: Should feel easy, sustainable indefinitely."
        )
        assert workout.examples == (
            "Warmup: 200-400 yards easy mixed strokes",
            "Main: 800-1200 yards freestyle at conversational effort",
            "Cooldown: 200 yards easy backstroke or breaststroke",
        )
        assert workout.running_equivalent == "30-40 min easy recovery run"

    def test_drill_session(self, empty_context: PersonalizationContext) -> None:
        workout = SwimmingCatalog().prescribe("Drill-Focused Session", empty_context)
        assert len(workout.examples) == 6
        assert workout.heart_rate == ""

    def test_default_minutes(self) -> None:
        assert SwimmingCatalog().workout_by_duration("technique", 90).name == "Drill-Focused Session"
        assert SwimmingCatalog.default_minutes == 40


class TestStationaryBike:
    def test_research_note(self, empty_context: PersonalizationContext) -> None:
        workout = StationaryBikeCatalog().prescribe("5-Minute Power Intervals", empty_context)
        assert workout.notes.startswith("Longer bike intervals (5 min)")
        assert workout.settings["power"] == "95-105% FTP"

    def test_distinct_from_stand_up_bike(self, registry: CatalogRegistry) -> None:
        assert registry.get(Library.STATIONARY_BIKE) is not registry.get(Library.BIKE)
        assert registry.for_cross_training("stationary bike").label == "Stationary Bike"

    def test_closest_duration(self) -> None:
        assert StationaryBikeCatalog().workout_by_duration("recovery", 25).name == "Active Recovery Spin"
