"""Serialization module: export engine records as display JSON."""

from workout_engine.serialization.display import to_display_dict, to_json_string

__all__ = ["to_display_dict", "to_json_string"]
