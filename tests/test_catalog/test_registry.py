"""Tests for CatalogRegistry auto-discovery and lookup."""

from __future__ import annotations

import pytest

from conftest import StubTempoCatalog
from workout_engine.catalog.registry import CatalogRegistry
from workout_engine.exceptions import UnknownSubcategoryError
from workout_engine.models.enums import Library


class TestCatalogRegistry:
    def test_discover_finds_every_library_catalog(self, registry: CatalogRegistry) -> None:
        assert set(registry.library_keys) == {
            "tempo", "interval", "hill", "longRun", "bike", "brick",
            "aquaRunning", "rowing", "elliptical", "swimming", "stationaryBike",
        }

    def test_library_less_base_is_skipped(self, registry: CatalogRegistry) -> None:
        assert len(registry.library_keys) == len(set(registry.library_keys)) == 11

    def test_for_cross_training_uses_aliases(self, registry: CatalogRegistry) -> None:
        assert registry.for_cross_training("pool").library is Library.AQUA_RUNNING
        assert registry.for_cross_training("Stationary Bike").library is Library.STATIONARY_BIKE
        assert registry.for_cross_training("standup_bike").library is Library.BIKE
        assert registry.for_cross_training("trampoline") is None
        assert registry.for_cross_training(None) is None

    def test_get_by_library_and_key(self, registry: CatalogRegistry) -> None:
        assert registry.get(Library.HILL) is registry.get("hill")

    def test_get_unknown_key(self, registry: CatalogRegistry) -> None:
        assert registry.get("swim") is None

    def test_for_category_uses_aliases(self, registry: CatalogRegistry) -> None:
        assert registry.for_category("intervals").library is Library.INTERVAL
        assert registry.for_category("long-run").library is Library.LONG_RUN
        assert registry.for_category("cross-training").library is Library.BIKE

    def test_easy_has_no_catalog(self, registry: CatalogRegistry) -> None:
        assert registry.for_category("easy") is None
        assert registry.for_category(None) is None

    def test_register_stub(self) -> None:
        reg = CatalogRegistry()
        reg.register(StubTempoCatalog())
        assert reg.library_keys == ["tempo"]
        assert isinstance(reg.for_category("tempo"), StubTempoCatalog)


class TestProviderLookup:
    def test_exact_match_wins(self, registry: CatalogRegistry) -> None:
        tempo = registry.get(Library.TEMPO)
        assert tempo.find("cruise intervals").name == "Cruise Intervals"

    def test_query_containing_stored_name(self, registry: CatalogRegistry) -> None:
        tempo = registry.get(Library.TEMPO)
        assert tempo.find("My Classic Tempo Run Today").name == "Classic Tempo Run"

    def test_hills_match_one_way_only(self, registry: CatalogRegistry) -> None:
        hills = registry.get(Library.HILL)
        assert hills.find("Hill Strides").name == "Hill Strides"
        assert hills.find("Morning Hill Strides Session") is None

    def test_blank_name(self, registry: CatalogRegistry) -> None:
        assert registry.get(Library.TEMPO).find("  ") is None

    def test_prescribe_miss_returns_none(self, registry: CatalogRegistry, empty_context) -> None:
        assert registry.get(Library.TEMPO).prescribe("Underwater Basket Weaving", empty_context) is None

    def test_random_workout_from_subcategory(self, registry: CatalogRegistry, first_choice) -> None:
        template = registry.get(Library.INTERVAL).get_random_workout("SHORT_SPEED", first_choice)
        assert template.name == "Classic 200m Repeats"
        assert first_choice.calls == [4]

    def test_unknown_subcategory_raises(self, registry: CatalogRegistry, first_choice) -> None:
        with pytest.raises(UnknownSubcategoryError):
            registry.get(Library.TEMPO).get_random_workout("NOPE", first_choice)

    def test_catalog_templates_are_not_mutated(self, registry: CatalogRegistry, paced_context) -> None:
        tempo = registry.get(Library.TEMPO)
        stored = tempo.find("Classic Tempo Run")
        personalized = tempo.prescribe("Classic Tempo Run", paced_context)
        assert personalized.name == "Classic Tempo Run (8:10/mi)"
        assert stored.name == "Classic Tempo Run"
