"""Tests for hill personalization and terrain instructions."""

from __future__ import annotations

from workout_engine.catalog.hills import HillCatalog, run_eq_recommendation, terrain_instructions
from workout_engine.models.context import PersonalizationContext
from workout_engine.models.enums import Library
from workout_engine.models.paces import PaceTable
from workout_engine.models.template import HillRequirement, WorkoutTemplate


class TestHillPersonalization:
    def test_threshold_pace_in_name(self, paced_context: PersonalizationContext) -> None:
        workout = HillCatalog().prescribe("Hill Strides", paced_context)
        assert workout.name == "Hill Strides (8:10/mi)"

    def test_interval_pace_when_no_threshold(self) -> None:
        context = PersonalizationContext(paces=PaceTable.from_dict({"interval": {"pace": "7:00"}}))
        assert HillCatalog().prescribe("Hill Strides", context).name == "Hill Strides (7:00/mi)"

    def test_catalog_duration_kept(self, empty_context: PersonalizationContext) -> None:
        workout = HillCatalog().prescribe("Hill Strides", empty_context)
        assert workout.duration == "10-15 seconds"
        assert workout.intensity == "Very High (TE 4.0+)"

    def test_segment_ranges_resolved(self, empty_context: PersonalizationContext) -> None:
        workout = HillCatalog().prescribe("Hill Strides", empty_context)
        assert workout.segments.cooldown == "13 min easy"

    def test_category_safety_appended(self, empty_context: PersonalizationContext) -> None:
        workout = HillCatalog().prescribe("Controlled Downhill Repeats", empty_context)
        assert workout.safety_notes[0] == "Start conservatively and build intensity gradually"
        assert "HIGH INJURY RISK - start very conservatively" in workout.safety_notes


class TestTerrain:
    def test_grade_specific(self) -> None:
        terrain = terrain_instructions(HillRequirement("steep", "75-150 meters", "Stadium steps"))
        assert terrain["findHill"] == "Look for a hill with 7-12% grade - short, intense efforts"
        assert terrain["distance"] == "Hill should be at least 75-150 meters"

    def test_unknown_grade_uses_default(self) -> None:
        terrain = terrain_instructions(HillRequirement("rolling_or_repeatable", "Multiple miles", "Rolling loop"))
        assert terrain["findHill"] == "Look for a moderate hill with 4-7% grade"
        assert terrain_instructions(None)["findHill"] == terrain["findHill"]


class TestRunEq:
    def test_zero_preference_runs(self) -> None:
        template = WorkoutTemplate(name="Anything", library=Library.HILL)
        assert run_eq_recommendation(template, 0) == "Full running workout as prescribed"

    def test_named_workout_quartiles(self) -> None:
        template = WorkoutTemplate(name="Hill Strides", library=Library.HILL)
        assert run_eq_recommendation(template, 40).startswith("Warmup riding")
        assert run_eq_recommendation(template, 90).startswith("Full Cyclete/Elliptigo ride")

    def test_generic_recommendation(self) -> None:
        template = WorkoutTemplate(name="Unlisted Hills", library=Library.HILL)
        assert run_eq_recommendation(template, 10).startswith("Consider doing warmup")
        assert run_eq_recommendation(template, 60).startswith("Alternate")
