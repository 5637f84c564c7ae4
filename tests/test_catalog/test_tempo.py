"""Tests for the tempo catalog and the vague-structure specifier."""

from __future__ import annotations

from workout_engine.catalog.structure_specifier import specific_value, specify_segments, specify_structure
from workout_engine.catalog.tempo import TempoCatalog, run_eq_recommendation
from workout_engine.models.context import PersonalizationContext
from workout_engine.models.template import StructureSegments


class TestSpecificValue:
    def test_midpoint_without_weeks(self) -> None:
        assert specific_value(4, 6) == 5
        assert specific_value(3, 8) == 6  # 5.5 rounds half up

    def test_full_progress_at_three_quarters(self) -> None:
        assert specific_value(4, 6, week=12, total_weeks=16) == 6

    def test_early_week_stays_low(self) -> None:
        # progress = 1 / 12
        assert specific_value(4, 6, week=1, total_weeks=16) == 4


class TestSpecifyStructure:
    def test_reps_and_minutes_ranges(self) -> None:
        text = "Warmup + 4-6 x 3-8 min @ tempo with 1-2 min recovery + Cooldown"
        assert specify_structure(text) == "Warmup + 5 x 6 min @ tempo with 120 sec recovery + Cooldown"

    def test_late_plan_uses_upper_bounds(self) -> None:
        text = "Warmup + 4-6 x 3-8 min @ tempo + Cooldown"
        assert specify_structure(text, week=14, total_weeks=16) == "Warmup + 6 x 8 min @ tempo + Cooldown"

    def test_segment_range(self) -> None:
        assert specify_structure("15-20 min easy") == "18 min easy"

    def test_miles_range(self) -> None:
        assert specify_structure("6-13 miles @ MP") == "10 miles @ MP"

    def test_long_recovery_stays_in_minutes(self) -> None:
        assert specify_structure("3-4 min recovery") == "4 min recovery"

    def test_plain_text_untouched(self) -> None:
        assert specify_structure("Steady effort") == "Steady effort"
        assert specify_structure("") == ""

    def test_segments(self) -> None:
        segments = StructureSegments(warmup="15-20 min easy", main="6 x 12sec hills")
        assert specify_segments(segments).warmup == "18 min easy"
        assert specify_segments(None) is None


class TestTempoCatalog:
    def test_name_carries_threshold_pace(self, paced_context: PersonalizationContext) -> None:
        workout = TempoCatalog().prescribe("Cruise Intervals", paced_context)
        assert workout.name == "Cruise Intervals (8:10/mi)"
        assert "@ 8:10/mile" in workout.structure
        assert "5 x 6 min" in workout.structure

    def test_no_paces_keeps_name(self, empty_context: PersonalizationContext) -> None:
        workout = TempoCatalog().prescribe("Classic Tempo Run", empty_context)
        assert workout.name == "Classic Tempo Run"
        assert workout.intensity_guidance.heart_rate == "86-90% Max HR"
        assert "sustainable" in workout.intensity_guidance.effort

    def test_easy_paces_injected(self, paced_context: PersonalizationContext) -> None:
        workout = TempoCatalog().prescribe("Classic Tempo Run", paced_context)
        assert "easy (9:00-9:30/mile) warmup" in workout.structure

    def test_long_sessions_add_fuel_note(self, empty_context: PersonalizationContext) -> None:
        workout = TempoCatalog().prescribe("Classic Tempo Run", empty_context)
        assert "Fuel appropriately for longer tempo sessions" in workout.safety_notes

    def test_run_eq_thresholds(self) -> None:
        assert run_eq_recommendation(0) == "Full running workout"
        assert run_eq_recommendation(20).startswith("Alternate")
        assert run_eq_recommendation(40).startswith("Split")
        assert run_eq_recommendation(70) == "Full Cyclete/Elliptigo ride"
