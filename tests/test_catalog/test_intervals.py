"""Tests for interval personalization: paces, track splits and session time."""

from __future__ import annotations

from dataclasses import replace

from workout_engine.catalog.intervals import IntervalCatalog, total_workout, warmup_cooldown
from workout_engine.models.context import PersonalizationContext

TRACK = {"interval": {"400m": "1:45"}}


class TestIntervalNames:
    def test_plain_interval_pace(self, paced_context: PersonalizationContext) -> None:
        workout = IntervalCatalog().prescribe("Mile Repeats", paced_context)
        assert workout.name == "Mile Repeats (7:00/mi)"

    def test_track_split_in_name(self, paced_context: PersonalizationContext) -> None:
        context = replace(paced_context, track_intervals=TRACK)
        workout = IntervalCatalog().prescribe("400m Speed Intervals", context)
        assert workout.name == "400m Speed Intervals (1:45/400m = 7:02/mi)"
        assert workout.repetitions == "5-10 x 400m (1:45 each)"
        assert workout.track_intervals == {"400m": "1:45"}

    def test_no_paces(self, empty_context: PersonalizationContext) -> None:
        workout = IntervalCatalog().prescribe("Mile Repeats", empty_context)
        assert workout.name == "Mile Repeats"
        assert workout.repetitions == "2-5 x 1 mile"


class TestIntervalStructure:
    def test_mile_reps_get_interval_pace(self, paced_context: PersonalizationContext) -> None:
        workout = IntervalCatalog().prescribe("Mile Repeats", paced_context)
        assert workout.repetitions == "2-5 x 1 mile @ 7:00/mile"

    def test_short_speed_estimate(self, empty_context: PersonalizationContext) -> None:
        workout = IntervalCatalog().prescribe("Classic 200m Repeats", empty_context)
        assert workout.duration == "45-60 minutes total"
        assert workout.total_structure.startswith("15-20 minutes easy + dynamic warmup")
        assert "6-12 x 200m" in workout.total_structure

    def test_six_minute_reps_run_longer(self) -> None:
        template = IntervalCatalog().find("6-Minute Intervals")
        _, estimated = total_workout(template, template.repetitions, None)
        assert estimated == "60-75 minutes total"

    def test_warmup_carries_easy_pace(self) -> None:
        wc = warmup_cooldown("vo2Max", "9:00-9:30/mile")
        assert wc.warmup.startswith("15-20 minutes easy running (9:00-9:30/mile)")
        assert wc.cooldown == "15-20 minutes easy running (9:00-9:30/mile) + stretching"

    def test_short_speed_warmup_is_longer(self) -> None:
        assert warmup_cooldown("shortSpeed", None).warmup.startswith("20-25 minutes")

    def test_guidance_and_safety(self, empty_context: PersonalizationContext) -> None:
        workout = IntervalCatalog().prescribe("800m Track Intervals", empty_context)
        assert workout.intensity_guidance.heart_rate == "90-100% Max HR"
        assert workout.safety_notes[0].startswith("Proper warmup is CRUCIAL")
        assert "noTrack" in workout.alternatives
