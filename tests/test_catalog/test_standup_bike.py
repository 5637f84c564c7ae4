"""Tests for stand-up bike prescriptions in RunEQ miles."""

from __future__ import annotations

from dataclasses import replace

from workout_engine.catalog.standup_bike import (
    ENDURANCE_BUCKET,
    GARMIN_NOTE,
    INTERVAL_BUCKET,
    POWER_BUCKET,
    TEMPO_BUCKET,
    StandUpBikeCatalog,
    bike_alternatives,
    bike_safety_notes,
)
from workout_engine.models.context import PersonalizationContext


class TestBuckets:
    def test_swap_buckets_are_populated(self) -> None:
        catalog = StandUpBikeCatalog()
        sizes = {bucket: len(catalog.workouts[bucket]) for bucket in
                 (TEMPO_BUCKET, INTERVAL_BUCKET, POWER_BUCKET, ENDURANCE_BUCKET)}
        assert sizes == {TEMPO_BUCKET: 6, INTERVAL_BUCKET: 6, POWER_BUCKET: 5, ENDURANCE_BUCKET: 5}

    def test_every_ride_has_equipment_notes(self) -> None:
        for template in StandUpBikeCatalog().all_workouts():
            assert template.has_equipment_notes, template.name


class TestPrescription:
    def test_garmin_runeq_miles(self, cyclete_context: PersonalizationContext) -> None:
        workout = StandUpBikeCatalog().prescribe("Sustained Threshold Effort", cyclete_context, 8)
        assert workout.name == "8 RunEQ Miles - Sustained Threshold Effort"
        assert workout.description.startswith("Ride until your Garmin shows 8 RunEQ miles")
        assert workout.notes == GARMIN_NOTE

    def test_time_and_distance_estimate_without_garmin(self, cyclete_context: PersonalizationContext) -> None:
        context = replace(cyclete_context, has_garmin=False)
        workout = StandUpBikeCatalog().prescribe("Sustained Threshold Effort", context, 8)
        assert workout.name == "72 min / ~24 mi - Sustained Threshold Effort"
        assert workout.notes != GARMIN_NOTE

    def test_target_distance_from_context(self, cyclete_context: PersonalizationContext) -> None:
        context = replace(cyclete_context, target_distance=6)
        workout = StandUpBikeCatalog().prescribe("Sustained Threshold Effort", context)
        assert workout.name == "6 RunEQ Miles - Sustained Threshold Effort"

    def test_no_distance_keeps_name(self, cyclete_context: PersonalizationContext) -> None:
        workout = StandUpBikeCatalog().prescribe("Sustained Threshold Effort", cyclete_context)
        assert workout.name == "Sustained Threshold Effort"

    def test_heart_rate_from_effort(self, cyclete_context: PersonalizationContext) -> None:
        workout = StandUpBikeCatalog().prescribe("Sustained Threshold Effort", cyclete_context)
        assert workout.heart_rate == "Zone 3-4 (80-90% max HR)"


class TestSafetyAndAlternatives:
    def test_hard_ride_adds_effort_note(self) -> None:
        template = StandUpBikeCatalog().find("Sustained Threshold Effort")
        notes = bike_safety_notes("cyclete", template)
        assert "Maintain a natural motion, avoid forcing the pattern" in notes
        assert notes[-1].startswith("Monitor effort level")

    def test_unknown_equipment_gets_elliptigo_notes(self) -> None:
        template = StandUpBikeCatalog().find("Active Recovery Flow")
        notes = bike_safety_notes(None, template)
        assert "Use handles for balance, not to pull yourself forward" in notes
        assert not any(n.startswith("Monitor effort level") for n in notes)

    def test_indoor_option_by_platform(self) -> None:
        assert bike_alternatives("ElliptiGO")["indoor"] == "ElliptiGO can be used on an indoor trainer"
        assert bike_alternatives("cyclete")["indoor"] == "Cyclete is outdoor-specific"
