"""Indoor and pool cross-training catalogs, one provider per modality."""

from workout_engine.catalog.cross_training.base import CrossTrainingCatalog, duration_midpoint

__all__ = ["CrossTrainingCatalog", "duration_midpoint"]
