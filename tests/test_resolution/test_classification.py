"""Tests for the shared name keyword rules."""

from __future__ import annotations

from workout_engine.models.enums import NameLabel
from workout_engine.resolution.classification import (
    BENEFITS_ORDER,
    CONTEXTUAL_ORDER,
    PACE_ORDER,
    classify,
    is_long_run_name,
    matches,
)


class TestMatches:
    def test_case_insensitive(self) -> None:
        assert matches(NameLabel.TEMPO, "CLASSIC TEMPO RUN")
        assert matches(NameLabel.HILL, "Treadmill Incline Walk")

    def test_empty_text(self) -> None:
        assert not matches(NameLabel.EASY, "")
        assert not matches(NameLabel.EASY, None)

    def test_fast_finish_is_also_progression(self) -> None:
        assert matches(NameLabel.FAST_FINISH, "Fast Finish Long Run")
        assert matches(NameLabel.PROGRESSION, "Fast Finish Long Run")


class TestClassify:
    def test_pace_order_prefers_goal_pace(self) -> None:
        assert classify("Goal Pace Sandwich", PACE_ORDER) is NameLabel.GOAL_PACE

    def test_consumer_order_decides(self) -> None:
        name = "Tempo Intervals"
        assert classify(name, CONTEXTUAL_ORDER) is NameLabel.INTERVAL
        assert classify(name, BENEFITS_ORDER) is NameLabel.TEMPO

    def test_no_label(self) -> None:
        assert classify("Yoga Flow", CONTEXTUAL_ORDER) is None


class TestLongRunNames:
    def test_long_run_formats(self) -> None:
        assert is_long_run_name("Thirds Progression")
        assert is_long_run_name("Half Marathon Simulation")
        assert is_long_run_name("Steady State Long Run")

    def test_other_names(self) -> None:
        assert not is_long_run_name("Mile Repeats")
        assert not is_long_run_name(None)
