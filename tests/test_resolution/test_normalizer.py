"""Tests for workout name normalization."""

from __future__ import annotations

import pytest

from workout_engine.resolution.normalizer import normalize_name


class TestNormalizeName:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("Tempo Run (8:10/mi)", "Tempo Run"),
            ("8-Mile Long Run", "Long Run"),
            ("10 mile Easy Run", "Easy Run"),
            ("6.5mi Recovery Run", "Recovery Run"),
            ("10-Mile Progressive Run (9:00-9:30/mi)", "Progressive Run"),
            ("400m Speed Intervals (1:45/400m = 7:02/mi)", "400m Speed Intervals"),
            ("\U0001F3C3 Easy Run", "Easy Run"),
            ("\U0001F3C3\u200d\u2642\ufe0f Easy Run", "Easy Run"),
            ("  Classic Tempo Run  ", "Classic Tempo Run"),
        ],
    )
    def test_strips_decoration(self, raw: str, expected: str) -> None:
        assert normalize_name(raw) == expected

    def test_idempotent(self) -> None:
        for raw in ("\U0001F9F1 8-Mile Long Run (9:00-9:30/mi)", "Hill Strides", "12 Miles"):
            once = normalize_name(raw)
            assert normalize_name(once) == once

    def test_plain_name_untouched(self) -> None:
        assert normalize_name("Cruise Intervals") == "Cruise Intervals"

    def test_decoration_only_keeps_text(self) -> None:
        assert normalize_name("8-Mile") == "8-Mile"

    def test_none_and_non_strings(self) -> None:
        assert normalize_name(None) == ""
        assert normalize_name(42) == 42
        assert normalize_name("") == ""
