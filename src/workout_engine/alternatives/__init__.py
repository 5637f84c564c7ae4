"""Alternative workouts: categorized substitutes and replacement."""

from workout_engine.alternatives.bricks import brick_types_for
from workout_engine.alternatives.fixed_options import running_alternatives
from workout_engine.alternatives.generator import AlternativeGenerator
from workout_engine.alternatives.replacement import apply_replacement, training_focus

__all__ = [
    "AlternativeGenerator",
    "apply_replacement",
    "brick_types_for",
    "running_alternatives",
    "training_focus",
]
