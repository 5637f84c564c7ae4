"""Tests for pace entries and the athlete pace table."""

from __future__ import annotations

from workout_engine.models.paces import (
    PaceRange,
    PaceTable,
    PaceText,
    SinglePace,
    pace_bound,
    parse_pace_entry,
    pace_range,
    strip_mile_suffix,
)


class TestParsePaceEntry:
    def test_min_max_dict_is_range(self) -> None:
        assert parse_pace_entry({"min": "9:00", "max": "9:30"}) == PaceRange("9:00", "9:30")

    def test_pace_dict_is_single(self) -> None:
        assert parse_pace_entry({"pace": "8:10"}) == SinglePace("8:10")

    def test_bare_string_is_text(self) -> None:
        assert parse_pace_entry("7:00") == PaceText("7:00")

    def test_mile_suffix_stripped_on_parse(self) -> None:
        assert parse_pace_entry({"pace": "8:10/mile"}) == SinglePace("8:10")
        assert parse_pace_entry("7:00 /mi") == PaceText("7:00")

    def test_empty_inputs_return_none(self) -> None:
        assert parse_pace_entry(None) is None
        assert parse_pace_entry("") is None
        assert parse_pace_entry({}) is None

    def test_lone_bound_is_single(self) -> None:
        assert parse_pace_entry({"max": "9:30"}) == SinglePace("9:30")


class TestPaceBound:
    def test_range_prefers_max(self) -> None:
        assert pace_bound(PaceRange("9:00", "9:30")) == "9:30"

    def test_range_min_on_request(self) -> None:
        assert pace_bound(PaceRange("9:00", "9:30"), prefer_max=False) == "9:00"

    def test_dash_range_inside_single_pace(self) -> None:
        assert pace_bound(SinglePace("7:40-7:55")) == "7:55"
        assert pace_bound(SinglePace("7:40-7:55"), prefer_max=False) == "7:40"

    def test_all_shapes_strip_suffix(self) -> None:
        assert pace_bound(PaceRange("9:00", "9:30/mile")) == "9:30"
        assert pace_bound(SinglePace("8:10/Mile")) == "8:10"
        assert pace_bound(PaceText("7:00/mi")) == "7:00"

    def test_none_entry(self) -> None:
        assert pace_bound(None) is None

    def test_strip_mile_suffix_leaves_plain_pace(self) -> None:
        assert strip_mile_suffix("8:10") == "8:10"


class TestPaceRange:
    def test_text_with_dash(self) -> None:
        assert pace_range(PaceText("9:00-9:30/mile")) == ("9:00", "9:30")

    def test_single_value_has_no_range(self) -> None:
        assert pace_range(SinglePace("8:10")) is None


class TestPaceTable:
    def test_from_dict_camel_case(self) -> None:
        table = PaceTable.from_dict({"racePace": {"pace": "8:25"}, "raceDistance": "Half"})
        assert table.race_pace == SinglePace("8:25")
        assert table.race_distance == "Half"

    def test_from_dict_snake_case(self) -> None:
        table = PaceTable.from_dict({"race_pace": "8:25"})
        assert table.pace("race_pace") == "8:25"

    def test_empty_dict_is_empty_table(self) -> None:
        assert PaceTable.from_dict(None).is_empty
        assert PaceTable.from_dict({}).is_empty

    def test_easy_range(self, full_paces: PaceTable) -> None:
        assert full_paces.easy_range() == ("9:00", "9:30")

    def test_single_easy_pace_doubles(self) -> None:
        table = PaceTable.from_dict({"easy": {"pace": "9:15"}})
        assert table.easy_range() == ("9:15", "9:15")

    def test_goal_pace_prefers_race_pace(self, race_paces: PaceTable) -> None:
        assert race_paces.goal_pace() == "8:25"

    def test_goal_pace_falls_back_to_marathon(self, full_paces: PaceTable) -> None:
        assert full_paces.goal_pace() == "8:40"

    def test_unknown_zone(self, full_paces: PaceTable) -> None:
        assert full_paces.pace("sprint") is None
