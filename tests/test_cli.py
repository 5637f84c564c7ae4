"""Tests for the command-line entry point."""

from __future__ import annotations

import json

from workout_engine.cli import build_parser, main, run


class TestParser:
    def test_resolve_arguments(self) -> None:
        args = build_parser().parse_args(
            ["resolve", "--name", "Classic Tempo Run", "--category", "tempo", "--week", "4", "--no-garmin"]
        )
        assert args.command == "resolve"
        assert args.week == 4
        assert args.no_garmin

    def test_weather_only_on_alternatives(self) -> None:
        args = build_parser().parse_args(
            ["alternatives", "--name", "x", "--category", "tempo", "--extreme-weather", "heat"]
        )
        assert args.extreme_weather == "heat"


class TestRun:
    def test_resolve_with_pace_file(self, tmp_path) -> None:
        paces = tmp_path / "paces.json"
        paces.write_text(json.dumps({"easy": {"min": "9:00", "max": "9:30"}}))
        args = build_parser().parse_args(
            ["resolve", "--name", "8-Mile Progressive Run", "--category", "longRun", "--paces", str(paces)]
        )
        data = json.loads(run(args))
        assert data["duration"] == "72-76 minutes"
        assert data["type"] == "longRun"

    def test_nested_pace_file(self, tmp_path) -> None:
        paces = tmp_path / "paces.json"
        paces.write_text(json.dumps({
            "paces": {"interval": {"pace": "7:00"}},
            "trackIntervals": {"interval": {"400m": "1:45"}},
        }))
        args = build_parser().parse_args(
            ["resolve", "--name", "400m Speed Intervals", "--category", "intervals", "--paces", str(paces)]
        )
        assert json.loads(run(args))["name"] == "400m Speed Intervals (1:45/400m = 7:02/mi)"

    def test_alternatives_with_weather(self) -> None:
        args = build_parser().parse_args(
            ["alternatives", "--name", "Classic Tempo Run", "--category", "tempo",
             "--extreme-weather", "extreme heat", "--seed", "7"]
        )
        payload = json.loads(run(args))
        assert payload[-1]["id"] == "weather"

    def test_resolve_cross_training_machine(self) -> None:
        args = build_parser().parse_args(
            ["resolve", "--name", "Tempo Swim", "--category", "cross-training", "--cross-training", "swimming"]
        )
        data = json.loads(run(args))
        assert data["crossTrainingType"] == "swimming"
        assert data["runningEquivalent"] == "30 min tempo run"
        assert data["examples"][0] == "Warmup: 400 yards (200 free, 100 back, 100 drills)"


class TestMain:
    def test_success(self, capsys) -> None:
        assert main(["resolve", "--name", "Hill Strides", "--category", "hills"]) == 0
        assert json.loads(capsys.readouterr().out)["duration"] == "10-15 seconds"

    def test_missing_pace_file(self, tmp_path) -> None:
        assert main(["resolve", "--name", "x", "--category", "tempo", "--paces", str(tmp_path / "none.json")]) == 1

    def test_blank_category(self) -> None:
        assert main(["resolve", "--name", "x", "--category", " "]) == 1
