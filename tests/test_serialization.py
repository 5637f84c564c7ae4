"""Tests for display JSON serialization."""

from __future__ import annotations

import json

from workout_engine.models.alternatives import AlternativeCategory, WorkoutOption
from workout_engine.models.context import ScheduleSlot
from workout_engine.models.enums import Library
from workout_engine.models.template import EquipmentEffort
from workout_engine.serialization import to_display_dict, to_json_string
from workout_engine.serialization.display import camel_case


class TestCamelCase:
    def test_conversion(self) -> None:
        assert camel_case("pace_guidance") == "paceGuidance"
        assert camel_case("run_eq_recommendation") == "runEqRecommendation"
        assert camel_case("name") == "name"


class TestResolvedWorkout:
    def test_required_fields_present(self, workout_factory) -> None:
        data = to_display_dict(workout_factory())
        assert data["paceGuidance"] == "Maintain steady effort throughout"
        assert data["heartRate"] == "86-90% Max HR"
        assert data["safetyNotes"] == ["Listen to your body"]
        assert data["type"] == "tempo"

    def test_empty_optional_fields_omitted(self, workout_factory) -> None:
        data = to_display_dict(workout_factory())
        for key in ("progression", "equipment", "distance", "schedule", "replacementReason", "equipmentSpecific"):
            assert key not in data

    def test_nested_records(self, workout_factory) -> None:
        workout = workout_factory(
            schedule=ScheduleSlot(week=2, day="Monday"),
            effort=EquipmentEffort(heart_rate="Zone 2"),
            equipment_specific=True,
        )
        data = to_display_dict(workout)
        assert data["schedule"] == {"week": 2, "day": "Monday"}
        assert data["effort"] == {"heartRate": "Zone 2"}
        assert data["equipmentSpecific"] is True


class TestOptionsAndCategories:
    def test_library_as_key(self, workout_factory) -> None:
        option = WorkoutOption(name="Thirds Progression", library=Library.LONG_RUN, resolved=workout_factory())
        data = to_display_dict(option)
        assert data["library"] == "longRun"
        assert data["resolved"]["name"] == "Classic Tempo Run"
        assert "template" not in data

    def test_category_json(self) -> None:
        category = AlternativeCategory(
            id="easier", title="Make It Easier", subtitle="", icon="",
            options=(WorkoutOption(name="Yoga Flow", duration="20 minutes"),),
        )
        payload = json.loads(to_json_string([category]))
        assert payload == [{
            "id": "easier",
            "title": "Make It Easier",
            "options": [{"name": "Yoga Flow", "duration": "20 minutes"}],
        }]

    def test_non_ascii_kept(self) -> None:
        text = to_json_string(WorkoutOption(name="\U0001F9F1 Brick"))
        assert "\U0001F9F1" in text
