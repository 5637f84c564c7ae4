"""Workout prescription and adaptation engine."""

from workout_engine.engine import WorkoutEngine

__all__ = ["WorkoutEngine"]
