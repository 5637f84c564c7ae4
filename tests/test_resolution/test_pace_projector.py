"""Tests for pace projection from the athlete's pace table."""

from __future__ import annotations

from dataclasses import replace

from workout_engine.models.context import PersonalizationContext
from workout_engine.models.paces import PaceTable
from workout_engine.resolution.pace_projector import (
    DEFAULT_PACE_GUIDANCE,
    equipment_pace,
    format_easy_range,
    project_pace,
)


def _threshold_only() -> PersonalizationContext:
    return PersonalizationContext(paces=PaceTable.from_dict({"threshold": {"pace": "8:10"}}))


class TestNameRules:
    def test_goal_pace(self, race_paces: PaceTable) -> None:
        context = PersonalizationContext(paces=race_paces)
        assert project_pace("Marathon Dress Rehearsal", "longRun", context) == "8:25/mile (goal pace)"

    def test_sandwich_without_goal_pace_uses_threshold(self) -> None:
        assert project_pace("Sandwich Tempo", "tempo", _threshold_only()) == "8:10/mile"

    def test_fast_finish(self, paced_context: PersonalizationContext) -> None:
        assert project_pace("Super Fast Finish", "longRun", paced_context) == (
            "9:00-9:30/mile → 7:00/mile (fast finish)"
        )

    def test_fast_finish_without_interval_pace_is_progression(self) -> None:
        context = PersonalizationContext(paces=PaceTable.from_dict({"easy": {"min": "9:00", "max": "9:30"}}))
        assert project_pace("Fast Finish Long Run", "longRun", context) == "9:00-9:30/mile (starting pace)"

    def test_progression(self, paced_context: PersonalizationContext) -> None:
        assert project_pace("8-Mile Progressive Run", "longRun", paced_context) == (
            "9:00-9:30/mile (starting pace)"
        )


class TestCategoryRules:
    def test_interval(self, paced_context: PersonalizationContext) -> None:
        assert project_pace("Mile Repeats", "intervals", paced_context) == "7:00/mile"

    def test_tempo_word_in_name(self, paced_context: PersonalizationContext) -> None:
        assert project_pace("Tempo Finish", "run", paced_context) == "8:10/mile"

    def test_easy_range(self, paced_context: PersonalizationContext) -> None:
        assert project_pace("Easy Run", "easy", paced_context) == "9:00-9:30/mile"

    def test_single_easy_pace(self) -> None:
        assert format_easy_range(("9:15", "9:15")) == "9:15/mile"


class TestEquipment:
    def test_equipment_note_wins(self, cyclete_context: PersonalizationContext) -> None:
        pace = project_pace(
            "Tempo Ride", "tempo", cyclete_context, cyclete_notes="Smooth push", equipment_specific=True
        )
        assert pace == "Smooth push"

    def test_other_platform_gets_generic_cue(self, cyclete_context: PersonalizationContext) -> None:
        context = replace(cyclete_context, equipment="elliptigo")
        pace = project_pace("Tempo Ride", "tempo", context, cyclete_notes="Smooth push", equipment_specific=True)
        assert pace == "ElliptiGO specific: Focus on smooth motion and consistent effort"

    def test_equipment_workout_without_notes_gets_generic_cue(
        self, cyclete_context: PersonalizationContext
    ) -> None:
        pace = project_pace("Tempo Ride", "cross-training", cyclete_context, equipment_specific=True)
        assert pace == "Cyclete specific: Focus on smooth motion and consistent effort"

    def test_running_workout_ignores_notes(self, cyclete_context: PersonalizationContext) -> None:
        assert project_pace("Tempo Ride", "tempo", cyclete_context, cyclete_notes="Smooth push") == "8:10/mile"

    def test_no_notes_uses_paces(self, cyclete_context: PersonalizationContext) -> None:
        assert project_pace("Tempo Ride", "tempo", cyclete_context) == "8:10/mile"

    def test_equipment_workout_without_equipment_uses_paces(
        self, paced_context: PersonalizationContext
    ) -> None:
        assert project_pace("Tempo Ride", "tempo", paced_context, equipment_specific=True) == "8:10/mile"

    def test_equipment_pace_helper(self) -> None:
        assert equipment_pace("ElliptiGO", elliptigo_notes="Long stride") == "Long stride"


class TestDefaults:
    def test_fallback_text(self, empty_context: PersonalizationContext) -> None:
        assert project_pace("Tempo", "tempo", empty_context, fallback="Half marathon pace") == "Half marathon pace"

    def test_default_guidance(self, empty_context: PersonalizationContext) -> None:
        assert project_pace("Mystery", "yoga", empty_context) == DEFAULT_PACE_GUIDANCE

    def test_missing_zone_falls_through(self) -> None:
        assert project_pace("Mile Repeats", "intervals", _threshold_only()) == DEFAULT_PACE_GUIDANCE
