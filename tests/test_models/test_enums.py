"""Tests for library keys, category families and template rendering."""

from __future__ import annotations

import pytest

from workout_engine.models.enums import BrickType, Library, category_family, cross_training_library
from workout_engine.models.template import BrickSegment, StructureSegments, WorkoutTemplate


class TestLibrary:
    def test_keys_round_trip(self) -> None:
        for library in Library:
            assert Library.from_key(library.key) is library

    def test_long_run_key_is_camel_case(self) -> None:
        assert Library.LONG_RUN.key == "longRun"

    def test_unknown_key(self) -> None:
        assert Library.from_key("swim") is None
        assert Library.from_key(None) is None

    def test_brick_type_keys(self) -> None:
        assert [t.key for t in BrickType] == ["recovery", "aerobic", "tempo", "speed"]


class TestCategoryFamily:
    @pytest.mark.parametrize(
        "category, family",
        [
            ("tempo", Library.TEMPO),
            ("threshold", Library.TEMPO),
            ("intervals", Library.INTERVAL),
            ("hills", Library.HILL),
            ("longRun", Library.LONG_RUN),
            ("long-run", Library.LONG_RUN),
            ("cross-training", Library.BIKE),
            ("brick", Library.BRICK),
            ("recovery", Library.EASY),
        ],
    )
    def test_aliases(self, category: str, family: Library) -> None:
        assert category_family(category) is family

    def test_case_and_whitespace_insensitive(self) -> None:
        assert category_family("  Tempo ") is Library.TEMPO

    def test_unknown_category(self) -> None:
        assert category_family("rest") is None
        assert category_family("") is None
        assert category_family(None) is None


class TestCrossTrainingLibrary:
    @pytest.mark.parametrize(
        ("kind", "library"),
        [
            ("pool", Library.AQUA_RUNNING),
            ("Aqua Running", Library.AQUA_RUNNING),
            ("aqua-running", Library.AQUA_RUNNING),
            ("ROWING", Library.ROWING),
            ("elliptical", Library.ELLIPTICAL),
            ("swimming", Library.SWIMMING),
            ("stationary_bike", Library.STATIONARY_BIKE),
            ("standUpBike", Library.BIKE),
            ("cyclete", Library.BIKE),
        ],
    )
    def test_aliases(self, kind, library) -> None:
        assert cross_training_library(kind) is library

    @pytest.mark.parametrize("kind", [None, "", "trampoline"])
    def test_unknown(self, kind) -> None:
        assert cross_training_library(kind) is None


class TestStructureSegments:
    def test_render_skips_missing_parts(self) -> None:
        segments = StructureSegments(warmup="15 min easy", main="6 x 12sec hills")
        assert segments.render() == "**Warmup:** 15 min easy\n\n**Main Set:** 6 x 12sec hills"

    def test_empty(self) -> None:
        assert StructureSegments().is_empty
        assert not StructureSegments(cooldown="10 min").is_empty


class TestBrickRendering:
    def test_transition_has_no_intensity(self) -> None:
        segment = BrickSegment("transition", "90 sec", "", "equipment change")
        assert segment.render() == "Transition 90 sec: equipment change"

    def test_template_joins_segments(self) -> None:
        template = WorkoutTemplate(
            name="Test Brick",
            library=Library.BRICK,
            brick_segments=(
                BrickSegment("run", "20 min", "easy", "Warm-up"),
                BrickSegment("bike", "30 min", "tempo", "Steady"),
            ),
        )
        assert template.render_bricks() == "Run 20 min (easy): Warm-up\nBike 30 min (tempo): Steady"


class TestEquipmentNotes:
    def test_note_for_matching_equipment(self) -> None:
        template = WorkoutTemplate(
            name="Ride", library=Library.BIKE, cyclete_notes="Cyclete cue", elliptigo_notes="GO cue"
        )
        assert template.equipment_note_for("ElliptiGO") == "GO cue"
        assert template.equipment_note_for("cyclete") == "Cyclete cue"
        assert template.equipment_note_for(None) == ""
        assert template.has_equipment_notes
