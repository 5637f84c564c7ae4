"""Tempo (lactate threshold) workout catalog.

Covers continuous tempo runs, tempo intervals, alternating on/off
formats, progressive builds and race-specific tempo. Personalization
resolves structure ranges for the athlete's plan week and injects
threshold, easy and marathon paces into the name and structure.
"""

from __future__ import annotations

import re
from dataclasses import replace

from workout_engine.catalog.base import CatalogProvider, easy_range_label, specify
from workout_engine.models.context import PersonalizationContext
from workout_engine.models.enums import Library
from workout_engine.models.template import IntensityGuidance, WorkoutTemplate

_T = Library.TEMPO

TEMPO_GUIDELINES: dict[str, IntensityGuidance] = {
    "comfortablyHard": IntensityGuidance(
        description="Controlled breathing, can speak in short sentences",
        heart_rate="86-90% Max HR",
        effort="Medium-hard effort, sustainable for 20-60 minutes",
    ),
    "thresholdPace": IntensityGuidance(
        description="Lactate threshold pace - usually around 1-hour race pace",
        heart_rate="88-92% Max HR",
        effort="Controlled discomfort, rhythmic breathing",
    ),
    "tempoPlus": IntensityGuidance(
        description="Slightly faster than threshold - 10K to 15K pace",
        heart_rate="90-94% Max HR",
        effort="Harder breathing, shorter sustainable durations",
    ),
}

# Pace described in words, for athletes without a pace table
_PACE_WORDS: dict[str, str] = {
    "comfortablyHard": "Half marathon to 10-mile race pace (can speak 3-5 words at a time)",
    "thresholdPace": "15K to 1-hour race pace (can speak 2-3 words with some difficulty)",
    "tempoPlus": "10K to 8K race pace (difficult to speak in sentences)",
}

_ALTERNATIVES: dict[str, str] = {
    "treadmill": "Use slight incline (1-2%) to simulate outdoor effort",
    "track": "4-6 laps for every mile of tempo running",
    "badWeather": "Indoor track, treadmill, or covered area like parking garage",
    "injury": "Pool running, elliptical, or Cyclete/Elliptigo ride maintaining same effort level",
    "noTime": "Shorten warmup/cooldown, focus on quality tempo portion",
    "tooHard": "Reduce intensity to comfortable-moderate effort, build gradually",
    "tooEasy": "Slightly increase pace, but avoid going anaerobic",
}

_BASE_SAFETY = (
    "Start conservatively - tempo should feel 'controlled discomfort'",
    "If breathing becomes labored, slow down slightly",
    "Better to run slightly too easy than too hard",
    "Recovery between intervals should be easy jogging or walking",
)

TEMPO_WORKOUTS: dict[str, tuple[WorkoutTemplate, ...]] = {
    "TRADITIONAL_TEMPO": (
        WorkoutTemplate(
            name="Classic Tempo Run",
            library=_T,
            subcategory="TRADITIONAL_TEMPO",
            source="Hal Higdon / McMillan",
            duration="20-40 minutes",
            structure="15-20 min easy warmup + 20-40 min tempo + 10-15 min easy cooldown",
            intensity="comfortablyHard",
            description="Continuous run at lactate threshold pace",
            benefits="Improves lactate clearance, race pacing, mental toughness",
            progression={
                "beginner": "Start with 15-20 min tempo, build by 3-5 min weekly",
                "intermediate": "20-30 min tempo, focus on consistent pacing",
                "advanced": "30-40 min tempo, practice race-specific scenarios",
            },
        ),
        WorkoutTemplate(
            name="Sandwich Tempo",
            library=_T,
            subcategory="TRADITIONAL_TEMPO",
            source="Hal Higdon adaptation",
            duration="30-45 minutes total",
            structure="10-15 min easy + 15-20 min tempo + 5-10 min easy",
            intensity="comfortablyHard",
            description="Tempo effort sandwiched between easy running",
            benefits="Teaches body to settle into tempo rhythm, race simulation",
        ),
    ),
    "TEMPO_INTERVALS": (
        WorkoutTemplate(
            name="McMillan 2x2 Miles",
            library=_T,
            subcategory="TEMPO_INTERVALS",
            source="McMillan Running",
            duration="45-50 minutes total",
            structure="Warmup + 2x2 miles @ tempo with 3 min recovery + Cooldown",
            intensity="thresholdPace",
            description="Two 2-mile repeats at threshold pace",
            benefits="Mental preparation for longer races, pacing practice",
            variations=(
                "2x3 miles for marathon training",
                "3x2 miles for advanced athletes",
                "2x1.5 miles for beginners",
            ),
        ),
        WorkoutTemplate(
            name="Cruise Intervals",
            library=_T,
            subcategory="TEMPO_INTERVALS",
            source="Jack Daniels / McMillan",
            duration="30-40 minutes total",
            structure="Warmup + 4-6 x 3-8 min @ tempo with 1-2 min recovery + Cooldown",
            intensity="thresholdPace",
            description="Multiple medium-length intervals at threshold pace",
            benefits="Accumulates time at threshold, teaches recovery between efforts",
            examples=(
                "4 x 5 min with 90 sec recovery",
                "5 x 4 min with 2 min recovery",
                "6 x 3 min with 60 sec recovery",
            ),
        ),
        WorkoutTemplate(
            name="Cutdown Tempo Intervals",
            library=_T,
            subcategory="TEMPO_INTERVALS",
            source="Advanced coaching adaptation",
            duration="40-45 minutes total",
            structure="Warmup + 5 min + 4 min + 3 min + 2 min @ tempo (2 min recovery) + Cooldown",
            intensity="thresholdPace",
            description="Descending interval lengths at consistent tempo pace",
            benefits="Mental strength, teaches pace discipline under fatigue",
        ),
    ),
    "ALTERNATING_TEMPO": (
        WorkoutTemplate(
            name="McMillan Minutes Workout",
            library=_T,
            subcategory="ALTERNATING_TEMPO",
            source="McMillan Running",
            duration="20-60 minutes total",
            structure="Warmup + Alternate 1 min tempo / 1 min easy x 10-30 + Cooldown",
            intensity="comfortablyHard",
            description="Alternate tempo and easy minutes without stopping",
            benefits="Avoids going too fast, accumulates threshold time",
            progression={
                "week1": "10 x (1 min on / 1 min easy)",
                "week4": "20 x (1 min on / 1 min easy)",
                "week8": "25-30 x (1 min on / 1 min easy)",
            },
            notes="Easy minutes naturally get faster as workout progresses",
        ),
        WorkoutTemplate(
            name="2 Minutes On/Off",
            library=_T,
            subcategory="ALTERNATING_TEMPO",
            source="Tempo progression adaptation",
            duration="32-48 minutes total",
            structure="Warmup + 8-12 x (2 min tempo / 2 min easy) + Cooldown",
            intensity="comfortablyHard",
            description="Longer alternating segments for advanced athletes",
            benefits="Extended time in tempo zone, teaches rhythm",
        ),
        WorkoutTemplate(
            name="Tempo Fartlek",
            library=_T,
            subcategory="ALTERNATING_TEMPO",
            source="Swedish fartlek adaptation",
            duration="25-35 minutes total",
            structure="Warmup + 15-20 min of varied tempo surges (30sec-3min) + Cooldown",
            intensity="comfortablyHard to tempoPlus",
            description="Unstructured tempo efforts based on feel and terrain",
            benefits="Teaches pace variety, mental flexibility, fun factor",
        ),
    ),
    "PROGRESSIVE_TEMPO": (
        WorkoutTemplate(
            name="Build-Up Tempo",
            library=_T,
            subcategory="PROGRESSIVE_TEMPO",
            source="Progressive training philosophy",
            duration="25-35 minutes",
            structure="Warmup + 20 min building from easy to tempo + Cooldown",
            intensity="easy to comfortablyHard",
            description="Gradually build from easy pace to tempo over 20 minutes",
            benefits="Smooth transition to tempo, teaches pacing, less jarring",
        ),
        WorkoutTemplate(
            name="Negative Split Tempo",
            library=_T,
            subcategory="PROGRESSIVE_TEMPO",
            source="Race pacing strategy",
            duration="30-40 minutes",
            structure="Warmup + 2 x 10-15 min (first @ easy-moderate, second @ tempo) + Cooldown",
            intensity="moderate to comfortablyHard",
            description="Two equal segments with second half at tempo pace",
            benefits="Race strategy practice, controlled progression",
        ),
        WorkoutTemplate(
            name="Tempo Ladder",
            library=_T,
            subcategory="PROGRESSIVE_TEMPO",
            source="Pyramid training adaptation",
            duration="35-45 minutes",
            structure="Warmup + 3-5-7-5-3 min @ tempo (2 min recovery) + Cooldown",
            intensity="thresholdPace",
            description="Ladder format building to longer tempo effort",
            benefits="Mental preparation, variety in interval lengths",
        ),
    ),
    "RACE_SPECIFIC": (
        WorkoutTemplate(
            name="Marathon Pace Tempo",
            library=_T,
            subcategory="RACE_SPECIFIC",
            source="Ben Parkes / Marathon specific",
            duration="40-70 minutes",
            structure="Warmup + 6-13 miles @ marathon pace + Cooldown",
            intensity="Slightly easier than comfortablyHard",
            description="Extended runs at goal marathon pace",
            benefits="Marathon pace practice, aerobic development",
            progression="Start at 6 miles, build by 1-2 miles every 2-3 weeks",
        ),
        WorkoutTemplate(
            name="10K Tempo Simulation",
            library=_T,
            subcategory="RACE_SPECIFIC",
            source="Race pace training",
            duration="35-45 minutes",
            structure="Warmup + 2 miles easy + 4 miles @ 10K pace + 1-2 miles easy",
            intensity="tempoPlus",
            description="Simulate 10K race effort within longer run",
            benefits="10K pacing, mental preparation, race confidence",
        ),
    ),
}


def run_eq_recommendation(preference: int) -> str:
    if preference >= 70:
        return "Full Cyclete/Elliptigo ride"
    if preference >= 40:
        return "Split workout - start running, finish riding"
    if preference >= 20:
        return "Alternate segments between running and riding"
    return "Full running workout"


def tempo_safety_notes(template: WorkoutTemplate) -> tuple[str, ...]:
    notes = list(_BASE_SAFETY)
    if "Minutes" in template.name or "Alternating" in template.name:
        notes.append("Let easy segments naturally speed up as workout progresses")
    if "40" in template.duration or "50" in template.duration:
        notes.append("Fuel appropriately for longer tempo sessions")
        notes.append("Stay hydrated throughout the workout")
    return tuple(notes)


def inject_tempo_paces(structure: str, context: PersonalizationContext) -> str:
    """Replace generic pace words in a tempo structure with athlete paces."""
    paces = context.paces
    threshold = paces.pace("threshold")
    if threshold:
        structure = structure.replace("@ tempo", f"@ {threshold}/mile")
        structure = re.sub(r"\bmin tempo\b", f"min @ {threshold}/mile", structure)
        structure = structure.replace("tempo pace", f"{threshold}/mile")

    easy = easy_range_label(context)
    if easy:
        structure = re.sub(r"\beasy warmup\b", f"easy ({easy}) warmup", structure)
        structure = re.sub(r"\beasy cooldown\b", f"easy ({easy}) cooldown", structure)
        structure = re.sub(r"(\d+)(-\d+)? min easy\b(?! \()", rf"\1\2 min easy ({easy})", structure)

    marathon = paces.pace("marathon")
    if marathon:
        for phrase in ("@ marathon pace", "@ half pace", "@ MP"):
            structure = structure.replace(phrase, f"@ {marathon}/mile")
    return structure


class TempoCatalog(CatalogProvider):
    """Lactate threshold workouts with athlete-specific paces."""

    library = Library.TEMPO
    workouts = TEMPO_WORKOUTS

    def personalize(
        self,
        template: WorkoutTemplate,
        context: PersonalizationContext,
        distance: float | None = None,
    ) -> WorkoutTemplate:
        threshold = context.paces.pace("threshold")
        name = f"{template.name} ({threshold}/mi)" if threshold else template.name
        structure = inject_tempo_paces(specify(template.structure, context), context)
        return replace(
            template,
            name=name,
            structure=structure,
            intensity_guidance=TEMPO_GUIDELINES.get(template.intensity),
            pace_guidance=_PACE_WORDS.get(template.intensity, _PACE_WORDS["comfortablyHard"]),
            safety_notes=tempo_safety_notes(template),
            alternatives=dict(_ALTERNATIVES),
            run_eq_recommendation=run_eq_recommendation(context.run_eq_preference),
        )
