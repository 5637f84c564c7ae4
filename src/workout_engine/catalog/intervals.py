"""Interval workout catalog: short speed, VO2max and long intervals.

Personalization attaches the standard warmup/cooldown for the interval
intensity, a complete warmup + reps + cooldown structure with an
estimated total time, and the athlete's interval pace or track splits.
"""

from __future__ import annotations

import re
from dataclasses import replace
from typing import Mapping

from workout_engine.catalog.base import CatalogProvider, easy_range_label
from workout_engine.formatting import split_to_mile_pace
from workout_engine.models.context import PersonalizationContext
from workout_engine.models.enums import Library
from workout_engine.models.template import IntensityGuidance, WarmupCooldown, WorkoutTemplate

_I = Library.INTERVAL

INTERVAL_GUIDELINES: dict[str, IntensityGuidance] = {
    "shortSpeed": IntensityGuidance(
        description="All-out sprint efforts, neuromuscular power",
        pace="800m to mile race pace",
        heart_rate="105%+ Max HR",
        effort="Maximum sustainable for 15-90 seconds",
    ),
    "vo2Max": IntensityGuidance(
        description="VO2 max development, aerobic power",
        pace="3K to 5K race pace",
        heart_rate="90-100% Max HR",
        effort="Hard but sustainable for 2-8 minutes",
    ),
    "longIntervals": IntensityGuidance(
        description="Sustained speed, race-specific preparation",
        pace="5K to 10K race pace",
        heart_rate="85-95% Max HR",
        effort="Controlled hard effort for 4+ minutes",
    ),
}

_NO_TRACK = {
    "200m": "20-30 second hard efforts on any surface",
    "400m": "60-90 second hard efforts",
    "800m": "2.5-3 minute hard efforts",
    "1000m": "3-4 minute hard efforts",
    "1 mile": "5-7 minute hard efforts",
}

_ALTERNATIVES: dict[str, str] = {
    "noTrack": "; ".join(f"{distance}: {effort}" for distance, effort in _NO_TRACK.items()),
    "badWeather": "Treadmill (use 1% incline), indoor track, or covered parking garage",
    "injury": "Pool running, elliptical, or Cyclete/Elliptigo ride maintaining same effort level",
    "altitude": "Reduce pace by 15-30 seconds per mile, extend recovery time",
    "heat": "Run early morning, extend recovery, focus on effort over pace",
    "beginners": "Start with fewer reps, longer recovery, slightly easier pace",
}

_BASE_SAFETY = (
    "Proper warmup is CRUCIAL - never skip the full warmup routine",
    "Start conservatively - first interval should feel controlled",
    "Recovery should be truly easy - avoid rushing between intervals",
    "Stop workout if form breaks down significantly",
)

_INTENSITY_SAFETY: dict[str, tuple[str, str]] = {
    "shortSpeed": (
        "Complete recovery between reps - walk or very easy jog only",
        "Focus on form and efficiency over pure speed",
    ),
    "vo2Max": (
        "Should reach breathing heavily but not gasping",
        "Equal time recovery allows partial recovery while maintaining stimulus",
    ),
}

_DEFAULT_SAFETY = (
    "Maintain consistent pace across all intervals",
    "These should feel 'comfortably hard' not all-out",
)


def _interval(name: str, subcategory: str, **fields) -> WorkoutTemplate:
    return WorkoutTemplate(name=name, library=_I, subcategory=subcategory, **fields)


INTERVAL_WORKOUTS: dict[str, tuple[WorkoutTemplate, ...]] = {
    "SHORT_SPEED": (
        _interval(
            "Classic 200m Repeats", "SHORT_SPEED",
            repetitions="6-12 x 200m",
            intensity="shortSpeed",
            recovery="200m walk/jog (2-3 minutes)",
            source="Hal Higdon",
            description="Short speed bursts for neuromuscular development",
            pace_guidance="800m race pace",
            benefits="Leg turnover, running economy, speed development",
            progression="Start 6 reps, add 1-2 per week to 12 reps",
        ),
        _interval(
            "400m Speed Intervals", "SHORT_SPEED",
            repetitions="5-10 x 400m",
            intensity="shortSpeed",
            recovery="400m jog (3-4 minutes)",
            source="Hal Higdon / Track training",
            description="Classic one-lap speed intervals",
            pace_guidance="Mile to 5K race pace",
            benefits="Speed endurance, lactate tolerance, mental toughness",
            progression="Start 5 reps, build by 1 every 2 weeks to 10",
        ),
        _interval(
            "Flying 100s", "SHORT_SPEED",
            repetitions="6-10 x 100m",
            intensity="shortSpeed",
            recovery="Full recovery (3-5 minutes walk)",
            source="Speed development training",
            description="Accelerate 30m, sprint 100m, decelerate 30m",
            pace_guidance="Faster than mile race pace",
            benefits="Top-end speed, form at speed, confidence",
        ),
        _interval(
            "30-Second Strides", "SHORT_SPEED",
            repetitions="8-12 x 30 seconds",
            intensity="shortSpeed",
            recovery="90 seconds easy walk/jog",
            source="General speed development",
            description="Time-based speed intervals",
            pace_guidance="5K pace or slightly faster",
            benefits="Speed without track access, time-efficient",
        ),
    ),
    "VO2_MAX": (
        _interval(
            "1000m VO2 Max Intervals", "VO2_MAX",
            repetitions="3-6 x 1000m",
            intensity="vo2Max",
            recovery="Equal time recovery (3-4 minutes jog)",
            source="Runner's World",
            description="Classic VO2 max development intervals",
            pace_guidance="5K race pace",
            benefits="Aerobic power, VO2 max improvement, race preparation",
        ),
        _interval(
            "2-Minute VO2 Intervals", "VO2_MAX",
            repetitions="4-8 x 2 minutes",
            intensity="vo2Max",
            recovery="2 minutes easy jog",
            source="Runner's World",
            description="Time-based VO2 max intervals",
            pace_guidance="5K effort",
            benefits="VO2 max development without track access",
        ),
        _interval(
            "800m Track Intervals", "VO2_MAX",
            repetitions="4-8 x 800m",
            intensity="vo2Max",
            recovery="400m jog (2-3 minutes)",
            source="Classic track training",
            description="Two-lap intervals at VO2 max intensity",
            pace_guidance="3K to 5K race pace",
            benefits="Speed endurance, lactate processing, mental strength",
        ),
        _interval(
            "1200m Extended VO2", "VO2_MAX",
            repetitions="3-5 x 1200m",
            intensity="vo2Max",
            recovery="400m jog (3-4 minutes)",
            source="Extended VO2 max training",
            description="Longer VO2 max intervals for advanced athletes",
            pace_guidance="5K race pace",
            benefits="Extended time at VO2 max, mental toughness",
        ),
        _interval(
            "Ladder Intervals", "VO2_MAX",
            repetitions="400-800-1200-800-400m",
            intensity="vo2Max",
            recovery="Half distance jog between reps",
            source="Pyramid training",
            description="Ascending and descending interval distances",
            pace_guidance="5K race pace throughout",
            benefits="Variety, mental engagement, comprehensive VO2 stimulus",
        ),
    ),
    "LONG_INTERVALS": (
        _interval(
            "Mile Repeats", "LONG_INTERVALS",
            repetitions="2-5 x 1 mile",
            intensity="longIntervals",
            recovery="3-4 minutes easy jog",
            source="Distance training classic",
            description="Sustained speed over longer distance",
            pace_guidance="5K to 10K race pace",
            benefits="Race-specific speed, sustained effort, pacing practice",
        ),
        _interval(
            "2K Intervals", "LONG_INTERVALS",
            repetitions="3-4 x 2K",
            intensity="longIntervals",
            recovery="800m jog (4-5 minutes)",
            source="International distance training",
            description="Extended intervals for 5K/10K preparation",
            pace_guidance="10K race pace",
            benefits="Race-specific endurance, sustained speed",
        ),
        _interval(
            "6-Minute Intervals", "LONG_INTERVALS",
            repetitions="3-5 x 6 minutes",
            intensity="longIntervals",
            recovery="3 minutes easy jog",
            source="Time-based distance training",
            description="Extended time-based intervals",
            pace_guidance="10K effort",
            benefits="Sustained speed without distance pressure",
        ),
        _interval(
            "1K-2K-1K Sandwich", "LONG_INTERVALS",
            repetitions="1K + 2K + 1K",
            intensity="longIntervals",
            recovery="600m jog between reps",
            source="Varied distance training",
            description="Build to longer effort, then recover with shorter",
            pace_guidance="5K-10K race pace",
            benefits="Mental challenge, varied stimulus, race simulation",
        ),
    ),
    "MIXED_INTERVALS": (
        _interval(
            "Progressive Pyramid", "MIXED_INTERVALS",
            repetitions="2:30-3:30-4:30 @ 10K, then repeat @ 5K pace",
            intensity="vo2Max to longIntervals",
            recovery="Same time recovery as work interval",
            source="Runner's World",
            description="Build effort, then repeat at higher intensity",
            pace_guidance="10K pace, then 5K pace",
            benefits="Progressive overload, mental toughness, pace variety",
        ),
        _interval(
            "Fartlek Intervals", "MIXED_INTERVALS",
            repetitions="20-30 minutes of varied surges",
            intensity="shortSpeed to longIntervals",
            recovery="Easy running between surges",
            source="Swedish training method",
            description="Unstructured speed play based on feel",
            pace_guidance="Varies from 5K to 10K effort",
            benefits="Mental flexibility, fun factor, natural terrain adaptation",
        ),
        _interval(
            "Mona Fartlek", "MIXED_INTERVALS",
            repetitions="90s-3min-90s-60s-30s-30s hard efforts",
            intensity="vo2Max",
            recovery="90 seconds easy between all efforts",
            source="Steve Moneghetti training",
            description="Structured fartlek with specific time intervals",
            pace_guidance="5K effort for all intervals",
            benefits="Structured variety, comprehensive speed stimulus",
        ),
    ),
    "RACE_SIMULATION": (
        _interval(
            "5K Simulation Intervals", "RACE_SIMULATION",
            repetitions="5 x 1K",
            intensity="longIntervals",
            recovery="200m jog (90 seconds)",
            source="Race-specific training",
            description="Simulate 5K race with brief recoveries",
            pace_guidance="Goal 5K race pace",
            benefits="Race pacing, confidence, mental preparation",
        ),
        _interval(
            "10K Tempo-Speed Mix", "RACE_SIMULATION",
            repetitions="2 x (2K @ 10K pace + 4 x 400m @ 5K pace)",
            intensity="longIntervals to vo2Max",
            recovery="2 min between sets, 90s between 400s",
            source="10K race preparation",
            description="Combine race pace with speed finish",
            pace_guidance="10K pace + 5K pace",
            benefits="Race-specific fitness, finishing kick practice",
        ),
        _interval(
            "Cut-Down Intervals", "RACE_SIMULATION",
            repetitions="1200m-1000m-800m-600m-400m",
            intensity="longIntervals to shortSpeed",
            recovery="400m jog between reps",
            source="Descending interval training",
            description="Get faster as intervals get shorter",
            pace_guidance="Start at 10K pace, end at 3K pace",
            benefits="Finishing kick, mental toughness, speed development",
        ),
    ),
}

# Track distance -> pace zone holding its split, checked in this order
_TRACK_SPLITS: tuple[tuple[str, str, int], ...] = (
    ("400m", "interval", 400),
    ("800m", "threshold", 800),
    ("1200m", "threshold", 1200),
    ("200m", "interval", 200),
)


def run_eq_recommendation(preference: int) -> str:
    if preference >= 70:
        return "Full Cyclete/Elliptigo ride"
    if preference >= 40:
        return "Split intervals - some running, some riding"
    if preference >= 20:
        return "Alternate every other interval"
    return "Full running workout"


def warmup_cooldown(intensity: str, easy: str | None) -> WarmupCooldown:
    """Standard warmup and cooldown for an interval intensity."""
    pace = f" ({easy})" if easy else ""
    if intensity == "shortSpeed":
        warmup = f"20-25 minutes easy running{pace} + 10 minutes dynamic warmup + 4-6 progressive strides"
    else:
        warmup = f"15-20 minutes easy running{pace} + 5 minutes dynamic exercises + 3-4 x 20-second strides"
    return WarmupCooldown(warmup=warmup, cooldown=f"15-20 minutes easy running{pace} + stretching")


def total_workout(template: WorkoutTemplate, repetitions: str, easy: str | None) -> tuple[str, str]:
    """Full session text and its estimated total time.

    Returns:
        (structure, estimated_time) where estimated_time reads like
        "50-70 minutes total".
    """
    pace = f" ({easy})" if easy else ""
    warmup = f"15-20 minutes easy{pace} + dynamic warmup + 3-4 strides"
    cooldown = f"15-20 minutes easy{pace}"
    if template.intensity == "shortSpeed":
        estimated = "45-60 minutes total"
    elif "x 6" in repetitions or "x 8" in repetitions:
        estimated = "60-75 minutes total"
    else:
        estimated = "50-70 minutes total"
    return f"{warmup} + {repetitions} + {cooldown}", estimated


def _split(track: Mapping[str, Mapping[str, str]], zone: str, distance: str) -> str | None:
    return (track.get(zone) or {}).get(distance)


def interval_name(
    template: WorkoutTemplate,
    repetitions: str,
    interval_pace: str | None,
    track: Mapping[str, Mapping[str, str]],
) -> str:
    """Name with the athlete's interval pace or matching track split."""
    if not interval_pace:
        return template.name
    if track.get("interval"):
        for distance, zone, meters in _TRACK_SPLITS:
            split = _split(track, zone, distance)
            if distance in repetitions and split:
                mile = split_to_mile_pace(split, meters)
                if mile:
                    return f"{template.name} ({split}/{distance} = {mile}/mi)"
    return f"{template.name} ({interval_pace}/mi)"


def inject_interval_paces(
    repetitions: str,
    interval_pace: str | None,
    track: Mapping[str, Mapping[str, str]],
) -> str:
    if track.get("interval"):
        for distance, zone, _ in _TRACK_SPLITS:
            split = _split(track, zone, distance)
            if distance in repetitions and split:
                repetitions = re.sub(
                    rf"(\d+)\s*x\s*{distance}\b", rf"\1 x {distance} ({split} each)", repetitions
                )
    if interval_pace:
        repetitions = re.sub(r"(\d+)\s*x\s*1\s*mile", rf"\1 x 1 mile @ {interval_pace}/mile", repetitions)
        repetitions = re.sub(r"(\d+)\s*x\s*2\s*mile", rf"\1 x 2 miles @ {interval_pace}/mile", repetitions)
    return repetitions


class IntervalCatalog(CatalogProvider):
    """Speed, VO2max and long-interval sessions."""

    library = Library.INTERVAL
    workouts = INTERVAL_WORKOUTS

    def personalize(
        self,
        template: WorkoutTemplate,
        context: PersonalizationContext,
        distance: float | None = None,
    ) -> WorkoutTemplate:
        easy = easy_range_label(context)
        interval_pace = context.paces.pace("interval")
        track = context.track_intervals if interval_pace else {}

        structure, estimated = total_workout(template, template.repetitions, easy)
        safety = _BASE_SAFETY + _INTENSITY_SAFETY.get(template.intensity, _DEFAULT_SAFETY)
        return replace(
            template,
            name=interval_name(template, template.repetitions, interval_pace, track),
            repetitions=inject_interval_paces(template.repetitions, interval_pace, track),
            intensity_guidance=INTERVAL_GUIDELINES.get(template.intensity),
            warmup_cooldown=warmup_cooldown(template.intensity, easy),
            total_structure=structure,
            duration=template.duration or estimated,
            safety_notes=safety,
            alternatives=dict(_ALTERNATIVES),
            run_eq_recommendation=run_eq_recommendation(context.run_eq_preference),
            track_intervals=_known_splits(track),
        )


def _known_splits(track: Mapping[str, Mapping[str, str]]) -> dict[str, str]:
    splits = {}
    for distance, zone, _ in _TRACK_SPLITS:
        split = _split(track, zone, distance)
        if split:
            splits[distance] = split
    return splits
