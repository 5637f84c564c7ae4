"""Workout resolution: name normalization, fallback chains, pace and duration."""

from workout_engine.resolution.duration import calculate_duration, pace_to_minutes
from workout_engine.resolution.normalizer import normalize_name
from workout_engine.resolution.pace_projector import project_pace
from workout_engine.resolution.resolver import TemplateResolver

__all__ = [
    "TemplateResolver",
    "calculate_duration",
    "normalize_name",
    "pace_to_minutes",
    "project_pace",
]
