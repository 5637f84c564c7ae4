"""Workout catalogs: one provider per library family, plus the registry."""

from workout_engine.catalog.base import CatalogProvider
from workout_engine.catalog.registry import CatalogRegistry

__all__ = ["CatalogProvider", "CatalogRegistry"]
