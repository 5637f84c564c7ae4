"""Long run workout catalog.

Goes beyond "run X miles easy": progression runs, steady-state and
marathon-pace long runs, mixed-pace formats, race simulations and
terrain-specific runs. Personalization prefixes the target distance,
appends the easy pace range and injects athlete paces into structure
and description text.
"""

from __future__ import annotations

import re
from dataclasses import replace

from workout_engine.catalog.base import CatalogProvider, easy_range_label
from workout_engine.formatting import format_number
from workout_engine.models.context import PersonalizationContext
from workout_engine.models.enums import Library
from workout_engine.models.template import IntensityGuidance, WorkoutTemplate

_L = Library.LONG_RUN

LONG_RUN_GUIDELINES: dict[str, IntensityGuidance] = {
    "easy": IntensityGuidance(
        description="Conversational pace, can speak in full sentences",
        pace="30-90 seconds slower than marathon pace",
        heart_rate="65-78% Max HR",
        effort="Comfortable, sustainable for hours",
    ),
    "steadyState": IntensityGuidance(
        description="Sustained aerobic effort, controlled breathing",
        pace="1:15:00 to 2:30:00 race pace (usually 15-45 sec slower than marathon pace)",
        heart_rate="83-87% Max HR",
        effort="Moderate effort, what you can sustain for 2-2.5 hours",
    ),
    "marathonPace": IntensityGuidance(
        description="Goal marathon race pace",
        pace="Marathon race pace",
        heart_rate="80-85% Max HR",
        effort="Controlled hard effort, race-specific",
    ),
    "fastFinish": IntensityGuidance(
        description="Faster than marathon pace for finishing segments",
        pace="Half marathon to 10K pace",
        heart_rate="85-90% Max HR",
        effort="Strong finish, practice racing on tired legs",
    ),
}

_ALTERNATIVES: dict[str, str] = {
    "badWeather": (
        "Treadmill with 1% incline, broken into segments if needed; indoor track; "
        "or move the day rather than compromise safety"
    ),
    "timeConstraints": (
        "Keep the workout structure but reduce total time, keep key pace segments "
        "and trim easy portions"
    ),
    "injury": "Aqua jogging, stand-up bike or elliptical at the same effort and time",
    "terrain": "Use treadmill incline or bridges for hills; break track or treadmill runs into segments",
}

_BASE_SAFETY = (
    "Start conservatively - long runs should feel sustainable",
    "Focus on effort over pace, especially in varying weather/terrain",
    "Plan hydration strategy for runs over 90 minutes",
    "Carry identification and emergency contact information",
    "Know your route and have bailout options",
)


def _long(name: str, subcategory: str, **fields) -> WorkoutTemplate:
    return WorkoutTemplate(name=name, library=_L, subcategory=subcategory, **fields)


LONG_RUN_WORKOUTS: dict[str, tuple[WorkoutTemplate, ...]] = {
    "TRADITIONAL_EASY": (
        _long(
            "Classic Easy Long Run", "TRADITIONAL_EASY",
            duration="60-150 minutes",
            structure="Entire run at easy, conversational pace",
            intensity="easy",
            source="Hal Higdon foundation",
            description="Traditional base-building long run",
            benefits="Aerobic development, time on feet, mental endurance",
            progression="Increase by 1-2 miles per week, stepback every 3rd week",
            notes="30-90 seconds slower than marathon pace, finish refreshed",
        ),
        _long(
            "Conversational Long Run", "TRADITIONAL_EASY",
            duration="75-120 minutes",
            structure="Run with partner/group, maintain conversation throughout",
            intensity="easy",
            source="Social running philosophy",
            description="Easy long run emphasizing conversational pace",
            benefits="Aerobic base, social aspect, pace discipline",
            notes="If you can't hold a conversation, you're going too fast",
        ),
    ),
    "PROGRESSIVE_RUNS": (
        _long(
            "Thirds Progression", "PROGRESSIVE_RUNS",
            duration="45-90 minutes",
            structure="First 1/3 easy, middle 1/3 moderate, final 1/3 strong",
            intensity="easy to fastFinish",
            source="McMillan Running",
            description="Equal time segments with increasing intensity",
            benefits="Teaches finishing speed, energy conservation",
            examples=("60 min run: 20 min easy + 20 min moderate + 20 min strong",),
            notes="Final third at steady state or tempo pace, not all-out",
        ),
        _long(
            "DUSA Progression", "PROGRESSIVE_RUNS",
            duration="50-90 minutes",
            structure="75-90% easy pace, final 10-25% strong pace",
            intensity="easy to fastFinish",
            source="McMillan Running (Discovery USA)",
            description="Majority easy with extended fast finish",
            benefits="Teaches racing on fatigued legs, builds confidence",
            examples=("60 min run: 45 min easy + 15 min strong pace",),
            notes="Used by elite marathoners, builds race-specific fitness",
        ),
        _long(
            "Super Fast Finish", "PROGRESSIVE_RUNS",
            duration="50-90 minutes",
            structure="Normal easy run + final 3-6 minutes at 5K race effort",
            intensity="easy to fastFinish",
            source="McMillan (Paul Tergat method)",
            description="Easy run with explosive final minutes",
            benefits="Finishing kick practice, confidence, speed on tired legs",
            notes="Used by Paul Tergat for world record marathon buildup",
        ),
        _long(
            "10-Second Dropdowns", "PROGRESSIVE_RUNS",
            duration="45-75 minutes",
            structure="Drop pace by 10 seconds every mile (or every 10 minutes)",
            intensity="easy to marathonPace",
            source="Runner's World progression method",
            description="Gradual, systematic pace progression",
            benefits="Smooth pace control, negative split practice",
            examples=("Start 8:30 pace, drop to 8:20, 8:10, 8:00, etc.",),
        ),
    ),
    "STEADY_STATE_LONG": (
        _long(
            "Marathon Pace Long Run", "STEADY_STATE_LONG",
            duration="60-120 minutes",
            structure="15-20 min easy warmup + 20-60 min @ marathon pace + 10-15 min easy",
            intensity="marathonPace",
            source="Marathon-specific training",
            description="Extended time at goal marathon pace",
            benefits="Race pace practice, aerobic power, confidence",
            progression="Start with 20 min MP, build by 5-10 min weekly",
            notes="Practice fueling and pacing strategies",
        ),
        _long(
            "Steady State Long Run", "STEADY_STATE_LONG",
            duration="50-95 minutes",
            structure="15 min easy warmup + 25-75 min steady state + 10 min easy",
            intensity="steadyState",
            source="McMillan Running",
            description="Extended aerobic effort at steady state pace",
            benefits="Aerobic power, endurance, lactate clearance",
            notes="Pace between 1:15:00 and 2:30:00 race pace",
        ),
        _long(
            "Half Marathon Pace Long Run", "STEADY_STATE_LONG",
            duration="60-90 minutes",
            structure="15 min easy + 30-60 min @ half marathon pace + 15 min easy",
            intensity="steadyState",
            source="Half marathon training",
            description="Extended half marathon pace practice",
            benefits="Race-specific fitness, sustained speed",
        ),
    ),
    "MIXED_PACE_LONG": (
        _long(
            "Fast-Slow Long Run", "MIXED_PACE_LONG",
            duration="60-120 minutes",
            structure="Alternate fast and easy segments (e.g., 2 min fast / 3 min easy)",
            intensity="easy to marathonPace",
            source="Varied pace training",
            description="Alternating pace segments throughout long run",
            benefits="Pace variety, teaches recovery while running, mental engagement",
            variations=(
                "2 min fast / 3 min easy for entire run",
                "5 min fast / 5 min easy x 6-12 sets",
                "1 mile fast / 2 miles easy pattern",
            ),
        ),
        _long(
            "Surge Long Run", "MIXED_PACE_LONG",
            duration="60-120 minutes",
            structure="Easy base pace with 30-60 second surges every 5-10 minutes",
            intensity="easy to fastFinish",
            source="Fartlek adaptation for long runs",
            description="Easy long run with regular speed surges",
            benefits="Simulates race surges, mental toughness, speed on tired legs",
            notes="Surges should be strong but controlled, return to easy pace",
        ),
        _long(
            "Out-and-Back Negative Split", "MIXED_PACE_LONG",
            duration="60-120 minutes",
            structure="Run out easy, return faster (aim for 30-60 sec negative split)",
            intensity="easy to marathonPace",
            source="Negative split training",
            description="Practice negative splitting over long distance",
            benefits="Pacing discipline, finishing strength, race strategy",
            notes="Turn around at halfway point, aim to return 30-60 sec faster",
        ),
    ),
    "RACE_SIMULATION": (
        _long(
            "Marathon Dress Rehearsal", "RACE_SIMULATION",
            duration="120-180 minutes",
            structure="20-26 mile run at planned marathon paces with race fueling",
            intensity="easy to marathonPace",
            source="Marathon preparation",
            description="Full marathon simulation 3-4 weeks before race",
            benefits="Race day practice, fueling test, confidence",
            examples=("6 easy + 13-16 @ MP + 1-3 easy cooldown",),
            notes="Practice everything: clothing, fueling, pacing, mindset",
        ),
        _long(
            "Half Marathon Simulation", "RACE_SIMULATION",
            duration="90-120 minutes",
            structure="15 min easy + 8-10 miles @ half pace + 15 min easy",
            intensity="easy to marathonPace",
            source="Half marathon preparation",
            description="Simulate middle miles of half marathon",
            benefits="Race pace confidence, fueling practice",
            notes="Practice race day routine and mindset",
        ),
        _long(
            "Goal Pace Sandwich", "RACE_SIMULATION",
            duration="75-120 minutes",
            structure="Easy miles + goal pace block + easy miles (mimic race splits)",
            intensity="easy to marathonPace",
            source="Race-specific training",
            description="Practice goal pace within context of longer run",
            benefits="Race pacing, mental preparation, confidence",
            examples=("3 easy + 6 @ goal pace + 3 easy for 12-mile long run",),
        ),
    ),
    "TERRAIN_SPECIFIC": (
        _long(
            "Rolling Hills Long Run", "TERRAIN_SPECIFIC",
            duration="60-120 minutes",
            structure="Long run on rolling terrain, maintain effort (not pace)",
            intensity="easy to steadyState",
            source="Terrain-specific training",
            description="Long run emphasizing varied terrain",
            benefits="Hill strength, effort-based pacing, race preparation",
            notes="Focus on consistent effort, let pace vary with terrain",
        ),
        _long(
            "Trail Long Run", "TERRAIN_SPECIFIC",
            duration="75-150 minutes",
            structure="Long run on trails, emphasis on time not distance",
            intensity="easy",
            source="Trail running adaptation",
            description="Time-based long run on trail terrain",
            benefits="Mental break, varied muscle recruitment, adventure",
            notes="Time-based rather than distance-based due to terrain",
        ),
    ),
    "RECOVERY_LONG": (
        _long(
            "Aerobic Base Long Run", "RECOVERY_LONG",
            duration="90-150 minutes",
            structure="Very easy pace, focus on time on feet not speed",
            intensity="easy",
            source="Base building philosophy",
            description="Ultra-easy long run for aerobic development",
            benefits="Aerobic base, active recovery, mental endurance",
            notes="Should feel refreshed after, not fatigued",
        ),
        _long(
            "Social Long Run", "RECOVERY_LONG",
            duration="75-120 minutes",
            structure="Group long run with conversation throughout",
            intensity="easy",
            source="Social running",
            description="Easy long run with group, emphasizing social aspect",
            benefits="Mental break, social connection, pace discipline",
        ),
    ),
}


def guidance_for(intensity: str) -> IntensityGuidance:
    """Guideline for the primary (first) intensity of a long run."""
    primary = intensity.split(" to ")[0] if " to " in intensity else intensity
    return LONG_RUN_GUIDELINES.get(primary, LONG_RUN_GUIDELINES["easy"])


def run_eq_recommendation(preference: int) -> str:
    if preference >= 70:
        return "Full stand-up bike workout"
    if preference >= 40:
        return "Split workout - first half running, second half biking"
    if preference >= 20:
        return "Alternate major segments if structured workout"
    return "Full running workout"


def long_run_safety_notes(template: WorkoutTemplate) -> tuple[str, ...]:
    notes = list(_BASE_SAFETY)
    if "marathonPace" in template.intensity or "fastFinish" in template.intensity:
        notes.append("Save faster segments for when you're warmed up (after 15+ minutes)")
        notes.append("If pace becomes unsustainable, dial back to easy effort")
    if "120" in template.duration or "150" in template.duration:
        notes.append("Practice race-day fueling for runs over 2 hours")
        notes.append("Consider electrolyte replacement for extended efforts")
    if "Progression" in template.name or "Progressive" in template.name:
        notes.append("Build pace gradually - avoid sudden speed changes")
        notes.append("Final segments should feel strong but controlled, not all-out")
    return tuple(notes)


def distance_adaptations(template: WorkoutTemplate, context: PersonalizationContext) -> tuple[str, ...]:
    """Segment breakdowns by run length for progression and marathon-pace runs."""
    easy = easy_range_label(context)
    easy_note = f" ({easy})" if easy else ""
    if "Progression" in template.name or "Progressive" in template.name:
        threshold = context.paces.pace("threshold")
        if easy and threshold:
            strong = f" ({threshold}/mile)"
        else:
            strong, easy_note = "", ""
        return (
            f"6-8 miles: 2-3 miles easy{easy_note}, 2-3 miles moderate, 2 miles strong{strong}",
            f"10-12 miles: 4 miles easy{easy_note}, 4 miles moderate, 4 miles strong{strong}",
            f"16-18 miles: 6 miles easy{easy_note}, 6 miles moderate, 6 miles strong{strong}",
        )
    if "Marathon Pace" in template.name:
        marathon = context.paces.pace("marathon")
        if easy and marathon:
            return (
                f"10-12 miles: 3 miles easy{easy_note} + 6 miles @ {marathon}/mile + 2 miles easy",
                f"14-16 miles: 3 miles easy{easy_note} + 10 miles @ {marathon}/mile + 3 miles easy",
                f"18-20 miles: 3 miles easy{easy_note} + 13 miles @ {marathon}/mile + 4 miles easy",
            )
        return (
            "10-12 miles: 3 miles easy + 6 miles MP + 2 miles easy",
            "14-16 miles: 3 miles easy + 10 miles MP + 3 miles easy",
            "18-20 miles: 3 miles easy + 13 miles MP + 4 miles easy",
        )
    return ()


def inject_long_run_paces(structure: str, context: PersonalizationContext) -> str:
    easy = easy_range_label(context)
    if easy:
        structure = structure.replace("easy pace", f"easy pace ({easy})")
        structure = structure.replace("easy warmup", f"easy warmup ({easy})")
        structure = re.sub(r"\bmin easy(?! warmup)", f"min easy ({easy})", structure)
        structure = structure.replace("easy cooldown", f"easy cooldown ({easy})")
        structure = re.sub(r"\bmiles easy", f"miles easy ({easy})", structure)

    marathon = context.paces.pace("marathon")
    if marathon:
        structure = structure.replace("@ marathon pace", f"@ {marathon}/mile marathon pace")
        structure = structure.replace("@ MP", f"@ {marathon}/mile")
        structure = structure.replace("@ half pace", f"@ {marathon}/mile pace")

    threshold = context.paces.pace("threshold")
    if threshold:
        structure = structure.replace("steady state", f"steady state ({threshold}/mile)")
        structure = structure.replace("strong pace", f"strong pace ({threshold}/mile)")
    return structure


def inject_long_run_description(description: str, context: PersonalizationContext) -> str:
    easy = easy_range_label(context)
    if easy:
        description = description.replace("easy pace", f"easy pace ({easy})")
        description = description.replace("conversational pace", f"conversational pace ({easy})")
    marathon = context.paces.pace("marathon")
    if marathon:
        description = description.replace("marathon pace", f"marathon pace ({marathon}/mile)")
        description = description.replace("goal pace", f"goal pace ({marathon}/mile)")
    return description


def long_run_name(name: str, distance: float | None, context: PersonalizationContext) -> str:
    bounds = context.paces.easy_range()
    if distance:
        name = f"{format_number(distance)}-Mile {name}"
    if bounds:
        name = f"{name} ({bounds[0]}-{bounds[1]}/mi)"
    return name


class LongRunCatalog(CatalogProvider):
    """Long run formats personalized by distance and pace."""

    library = Library.LONG_RUN
    workouts = LONG_RUN_WORKOUTS

    def personalize(
        self,
        template: WorkoutTemplate,
        context: PersonalizationContext,
        distance: float | None = None,
    ) -> WorkoutTemplate:
        return replace(
            template,
            name=long_run_name(template.name, distance, context),
            structure=inject_long_run_paces(template.structure, context),
            description=inject_long_run_description(template.description, context),
            intensity_guidance=guidance_for(template.intensity),
            safety_notes=long_run_safety_notes(template),
            alternatives=dict(_ALTERNATIVES),
            examples=template.examples + distance_adaptations(template, context),
            run_eq_recommendation=run_eq_recommendation(context.run_eq_preference),
        )
