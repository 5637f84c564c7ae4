"""Tests for the rest-day option set."""

from __future__ import annotations

from workout_engine.alternatives.rest_day import equipment_options, rest_day_categories
from workout_engine.models.context import PersonalizationContext


class TestRestDayCategories:
    def test_without_equipment(self, empty_context: PersonalizationContext) -> None:
        ids = [c.id for c in rest_day_categories(empty_context)]
        assert ids == ["light-easy", "active-recovery", "cross-training", "short-sweet"]

    def test_with_equipment(self, cyclete_context: PersonalizationContext) -> None:
        categories = rest_day_categories(cyclete_context)
        assert [c.id for c in categories][2] == "equipment-easy"
        assert categories[2].title.endswith("Easy Cyclete")

    def test_each_category_has_three_options(self, empty_context: PersonalizationContext) -> None:
        assert all(len(c.options) == 3 for c in rest_day_categories(empty_context))


class TestEquipmentOptions:
    def test_named_after_equipment(self) -> None:
        spin, ride = equipment_options("elliptigo")
        assert spin.name == "Easy ElliptiGO Spin"
        assert ride.name == "Recovery ElliptiGO Ride"
        assert spin.equipment_specific and ride.equipment == "elliptigo"
