"""Tests for brick type selection and brick options."""

from __future__ import annotations

import pytest

from workout_engine.alternatives.bricks import brick_options, brick_types_for, duration_minutes
from workout_engine.catalog.brick import BrickCatalog
from workout_engine.models.context import PersonalizationContext
from workout_engine.models.enums import BrickType, Library

ALL_TYPES = (BrickType.RECOVERY, BrickType.AEROBIC, BrickType.TEMPO, BrickType.SPEED)


class TestBrickTypesFor:
    def test_short_workout(self) -> None:
        assert brick_types_for(4, 25) == (BrickType.RECOVERY,)

    def test_medium_workout(self) -> None:
        assert brick_types_for(7, None) == (BrickType.RECOVERY, BrickType.AEROBIC)

    def test_long_workout(self) -> None:
        assert brick_types_for(12, None) == ALL_TYPES
        assert brick_types_for(None, 90) == ALL_TYPES

    def test_either_short_measure_counts(self) -> None:
        assert brick_types_for(12, 25) == (BrickType.RECOVERY,)

    def test_boundaries(self) -> None:
        assert brick_types_for(5, 30) == (BrickType.RECOVERY, BrickType.AEROBIC)
        assert brick_types_for(10, 60) == ALL_TYPES

    def test_unknown_size_is_short(self) -> None:
        assert brick_types_for(None, None) == (BrickType.RECOVERY,)

    def test_negative_raises(self) -> None:
        with pytest.raises(ValueError):
            brick_types_for(-1, None)


class TestDurationMinutes:
    def test_lower_bound(self) -> None:
        assert duration_minutes("45-60 minutes") == 45
        assert duration_minutes("30 min") == 30

    def test_unparseable(self) -> None:
        assert duration_minutes("10-15 seconds") is None
        assert duration_minutes("") is None


class TestBrickOptions:
    def test_long_run_gets_every_type(
        self, cyclete_context: PersonalizationContext, first_choice, workout_factory
    ) -> None:
        workout = workout_factory(type="longRun", name="12-Mile Long Run", duration="102-120 minutes")
        options = brick_options(BrickCatalog(), workout, cyclete_context, first_choice)
        assert [o.category for o in options] == ["recovery", "aerobic", "tempo", "speed"]
        assert all(o.library is Library.BRICK and o.equipment_specific for o in options)
        assert all(o.equipment == "cyclete" for o in options)

    def test_short_workout_gets_recovery(
        self, cyclete_context: PersonalizationContext, first_choice, workout_factory
    ) -> None:
        workout = workout_factory(name="Shakeout", duration="20 minutes")
        options = brick_options(BrickCatalog(), workout, cyclete_context, first_choice)
        assert len(options) == 1
        assert options[0].description.startswith("Easy run+bike combo")
        assert options[0].original_description == options[0].template.description
