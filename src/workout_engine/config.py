"""Environment-variable-based configuration for the workout engine."""

from __future__ import annotations

import os

_seed = os.environ.get("WORKOUT_ENGINE_SEED", "").strip()

RANDOM_SEED: int | None = int(_seed) if _seed else None
LOG_LEVEL: str = os.environ.get("WORKOUT_ENGINE_LOG_LEVEL", "INFO").upper()
DEFAULT_EXPERIENCE: str = os.environ.get("WORKOUT_ENGINE_EXPERIENCE", "intermediate")
BRICK_DIFFICULTY: str = os.environ.get("WORKOUT_ENGINE_DIFFICULTY", "intermediate")
CATEGORY_CAP: int = int(os.environ.get("WORKOUT_ENGINE_CATEGORY_CAP", "6"))
HARDER_CAP: int = int(os.environ.get("WORKOUT_ENGINE_HARDER_CAP", "4"))
