"""Custom exception hierarchy for the workout engine."""

from __future__ import annotations


class WorkoutEngineError(Exception):
    """Base exception for all workout_engine errors."""


class MissingCategoryError(WorkoutEngineError, ValueError):
    """A workout reference carries no activity category."""

    def __init__(self, name: str = "") -> None:
        label = f" '{name}'" if name else ""
        super().__init__(f"Workout{label} has no activity category")
        self.workout_name = name


class UnknownSubcategoryError(WorkoutEngineError, KeyError):
    """A catalog was asked for a subcategory it does not hold."""

    def __init__(self, library: str, subcategory: str) -> None:
        super().__init__(f"Catalog '{library}' has no subcategory '{subcategory}'")
        self.library = library
        self.subcategory = subcategory

    def __str__(self) -> str:
        return str(self.args[0])
