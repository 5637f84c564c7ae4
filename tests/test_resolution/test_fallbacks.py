"""Tests for category defaults and name heuristics."""

from __future__ import annotations

from workout_engine.models.enums import NameLabel
from workout_engine.resolution.fallbacks import (
    DEFAULT_BENEFITS,
    DEFAULT_FOCUS,
    DEFAULT_HEART_RATE,
    DEFAULT_INTENSITY,
    NAME_BENEFITS,
    NAME_STRUCTURES,
    benefits_from_name,
    category_focus,
    category_heart_rate,
    category_intensity,
    is_intensity_code,
    resolve_progression,
    structure_from_name,
)


class TestCategoryDefaults:
    def test_known_categories(self) -> None:
        assert category_heart_rate("tempo") == "86-90% Max HR"
        assert category_intensity("intervals") == "High intensity - 5K to 1-mile race pace"
        assert category_focus("hills") == "Power & Strength"
        assert category_focus("cross-training") == "Active Recovery"

    def test_unknown_category(self) -> None:
        assert category_heart_rate("yoga") == DEFAULT_HEART_RATE
        assert category_intensity(None) == DEFAULT_INTENSITY
        assert category_focus("") == DEFAULT_FOCUS


class TestNameHeuristics:
    def test_structure_by_name(self) -> None:
        assert structure_from_name("Saturday Fartlek") == NAME_STRUCTURES[NameLabel.FARTLEK]
        assert structure_from_name("Recovery Jog") == NAME_STRUCTURES[NameLabel.EASY]

    def test_structure_unknown(self) -> None:
        assert structure_from_name("Mystery Session") is None

    def test_benefits_by_name(self) -> None:
        assert benefits_from_name("Hill Repeats") == NAME_BENEFITS[NameLabel.HILL]
        assert benefits_from_name("Threshold Run") == NAME_BENEFITS[NameLabel.TEMPO]
        assert benefits_from_name("Mystery Session") == DEFAULT_BENEFITS


class TestIntensityCodes:
    def test_codes(self) -> None:
        assert is_intensity_code("vo2Max")
        assert is_intensity_code("longIntervals to shortSpeed")

    def test_descriptions(self) -> None:
        assert not is_intensity_code("Very High (TE 4.0+)")
        assert not is_intensity_code("Controlled hard effort")


class TestProgression:
    TABLE = {"beginner": "Start small", "intermediate": "Build", "advanced": "Push"}

    def test_matches_experience(self) -> None:
        assert resolve_progression(self.TABLE, "Advanced") == "Push"

    def test_unknown_level_uses_first(self) -> None:
        assert resolve_progression(self.TABLE, "elite") == "Start small"

    def test_plain_text_and_missing(self) -> None:
        assert resolve_progression("Add a rep weekly", "beginner") == "Add a rep weekly"
        assert resolve_progression(None, "beginner") == ""
        assert resolve_progression({}, "beginner") == ""
