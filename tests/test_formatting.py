"""Tests for number, pace, distance and display-name formatting."""

from __future__ import annotations

import pytest

from workout_engine.formatting import (
    format_equipment_name,
    format_heart_rate,
    format_number,
    format_seconds,
    miles_from_name,
    miles_from_text,
    pace_to_minutes,
    round_half_up,
    split_to_mile_pace,
    title_case,
)


class TestNumbers:
    def test_round_half_up(self) -> None:
        assert round_half_up(2.5) == 3
        assert round_half_up(3.5) == 4
        assert round_half_up(2.49) == 2

    def test_format_number_drops_trailing_zero(self) -> None:
        assert format_number(8.0) == "8"
        assert format_number(6.5) == "6.5"


class TestPaces:
    def test_pace_to_minutes(self) -> None:
        assert pace_to_minutes("9:30") == pytest.approx(9.5)
        assert pace_to_minutes("9:00/mile") == pytest.approx(9.0)

    def test_unparseable_pace(self) -> None:
        assert pace_to_minutes("easy") is None
        assert pace_to_minutes(None) is None

    def test_format_seconds_carries_minute(self) -> None:
        assert format_seconds(59.6) == "1:00"
        assert format_seconds(421) == "7:01"

    def test_split_to_mile_pace(self) -> None:
        # 1:45 per 400m -> 105 / 400 * 1609.34 = 422.4s
        assert split_to_mile_pace("1:45", 400) == "7:02"

    def test_split_with_bad_distance(self) -> None:
        assert split_to_mile_pace("1:45", 0) is None


class TestDistances:
    def test_name_distance(self) -> None:
        assert miles_from_name("8-Mile Progressive Run") == 8.0
        assert miles_from_name("10 mile easy") == 10.0
        assert miles_from_name("Classic Tempo Run") is None

    def test_text_distance(self) -> None:
        assert miles_from_text("run 6 miles easy") == 6.0
        assert miles_from_text("45 min / ~15 mi - Ride") == 15.0
        assert miles_from_text("45 minutes steady") is None


class TestDisplayNames:
    def test_equipment_names(self) -> None:
        assert format_equipment_name("elliptigo") == "ElliptiGO"
        assert format_equipment_name("cyclete") == "Cyclete"
        assert format_equipment_name("standup_bike") == "Stand-up Bike"
        assert format_equipment_name("rowing machine") == "Rowing Machine"
        assert format_equipment_name(None) == ""

    def test_title_case_keeps_connectors(self) -> None:
        assert title_case("run of the mill") == "Run of the Mill"

    def test_heart_rate_capitalization(self) -> None:
        assert format_heart_rate("70-85% max hr") == "70-85% Max HR"
        assert format_heart_rate("") == ""
