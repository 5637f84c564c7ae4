"""End-to-end tests for WorkoutEngine."""

from __future__ import annotations

from copy import deepcopy

from workout_engine import WorkoutEngine
from workout_engine.catalog.registry import CatalogRegistry
from workout_engine.models.context import PersonalizationContext, ScheduleSlot, WorkoutRef
from workout_engine.models.enums import Library
from workout_engine.random_source import NumpyRandomSource
from workout_engine.serialization.display import to_json_string


def _make_engine(rng) -> WorkoutEngine:
    return WorkoutEngine(rng=rng)


class TestWorkoutEngine:
    def test_default_registry_is_discovered(self, first_choice) -> None:
        engine = _make_engine(first_choice)
        assert "tempo" in engine.registry.library_keys
        assert engine.resolver.registry is engine.registry

    def test_injected_registry_is_used_as_given(self, stub_registry: CatalogRegistry, first_choice) -> None:
        engine = WorkoutEngine(registry=stub_registry, rng=first_choice)
        assert engine.registry.library_keys == ["tempo"]

    def test_default_rng(self) -> None:
        assert isinstance(WorkoutEngine().rng, NumpyRandomSource)

    def test_resolve_then_replace_with_catalog_option(
        self, paced_context: PersonalizationContext, first_choice
    ) -> None:
        engine = _make_engine(first_choice)
        slot = ScheduleSlot(week=5, day="Thursday")
        workout = engine.resolve(WorkoutRef(name="Classic Tempo Run", category="tempo", schedule=slot), paced_context)
        categories = engine.generate_alternatives(workout, paced_context)
        same = categories[0]
        option = same.options[0]

        new = engine.apply_replacement(workout, option, same)
        assert new.name == option.name
        assert new.type == "tempo"
        assert new.focus == "Lactate Threshold"
        assert new.schedule == slot
        assert new.replacement_reason == same.title
        assert new.pace_guidance == "8:10/mile"

    def test_replace_with_fixed_option(self, paced_context: PersonalizationContext, first_choice) -> None:
        engine = _make_engine(first_choice)
        workout = engine.resolve(WorkoutRef(name="Classic Tempo Run", category="tempo"), paced_context)
        easier = engine.generate_alternatives(workout, paced_context)[1]

        new = engine.apply_replacement(workout, easier.options[0], easier, paced_context)
        assert new.name == "Easy Recovery Run"
        assert new.type == "easy"
        assert new.duration == "20-30 minutes"
        assert new.pace_guidance == "9:00-9:30/mile"
        assert new.heart_rate

    def test_harder_option_keeps_workout_type(self, empty_context: PersonalizationContext, first_choice) -> None:
        engine = _make_engine(first_choice)
        workout = engine.resolve(WorkoutRef(name="Classic Tempo Run", category="tempo"), empty_context)
        harder = engine.generate_alternatives(workout, empty_context)[2]
        fartlek = next(o for o in harder.options if o.name == "Fartlek Run")

        new = engine.apply_replacement(workout, fartlek, harder)
        assert new.type == "tempo"
        assert new.structure.startswith("10 min warmup + 20-30 min fartlek")

    def test_long_run_name_and_pace(self, paced_context: PersonalizationContext, first_choice) -> None:
        engine = _make_engine(first_choice)
        workout = engine.resolve(WorkoutRef(name="8-Mile Thirds Progression", category="longRun"), paced_context)
        assert workout.name == "8-Mile Thirds Progression (9:00-9:30/mi)"
        assert workout.duration == "45-90 minutes"
        assert workout.distance == 8.0
        assert workout.pace_guidance == "9:00-9:30/mile (starting pace)"


class TestDeterminism:
    @staticmethod
    def _athlete(full_paces) -> PersonalizationContext:
        return PersonalizationContext(
            paces=full_paces,
            track_intervals={"interval": {"400m": "1:45"}},
            equipment="cyclete",
            current_week=4,
            total_weeks=12,
        )

    @staticmethod
    def _run(seed: int, context: PersonalizationContext) -> tuple[str, str]:
        engine = WorkoutEngine(rng=NumpyRandomSource(seed))
        workout = engine.resolve(WorkoutRef(name="12-Mile Long Run", category="longRun"), context)
        categories = engine.generate_alternatives(workout, context)
        return to_json_string(workout), to_json_string(categories)

    def test_same_seed_same_output(self, full_paces) -> None:
        first = self._run(7, self._athlete(full_paces))
        second = self._run(7, self._athlete(full_paces))
        assert first == second

    def test_inputs_and_catalogs_left_untouched(self, full_paces) -> None:
        context = self._athlete(full_paces)
        context_before = deepcopy(context)
        engine = WorkoutEngine(rng=NumpyRandomSource(11))
        long_runs = engine.registry.get(Library.LONG_RUN)
        bike = engine.registry.get(Library.BIKE)
        pool = engine.registry.get(Library.AQUA_RUNNING)
        catalogs_before = deepcopy((long_runs.workouts, bike.workouts, pool.workouts))

        workout = engine.resolve(WorkoutRef(name="12-Mile Long Run", category="longRun"), context)
        workout_before = deepcopy(workout)
        categories = engine.generate_alternatives(workout, context)
        engine.apply_replacement(workout, categories[0].options[0], categories[0], context)
        engine.resolve(
            WorkoutRef(name="Easy Recovery Run", category="cross-training", cross_training_type="pool"), context
        )

        assert context == context_before
        assert workout == workout_before
        assert (long_runs.workouts, bike.workouts, pool.workouts) == catalogs_before
