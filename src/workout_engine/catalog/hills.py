"""Hill workout catalog with terrain requirements.

Each entry states the grade and hill length it needs. Personalization
adds terrain-finding instructions for that grade, category-specific
safety notes and the athlete's threshold (or interval) pace.
"""

from __future__ import annotations

from dataclasses import replace

from workout_engine.catalog.base import CatalogProvider
from workout_engine.catalog.structure_specifier import specify_segments
from workout_engine.models.context import PersonalizationContext
from workout_engine.models.enums import Library
from workout_engine.models.template import HillRequirement, StructureSegments, WorkoutTemplate

_H = Library.HILL

HILL_GRADES: dict[str, str] = {
    "gentle": "2-4% grade - sustainable for longer efforts",
    "moderate": "4-7% grade - challenging but manageable",
    "steep": "7-12% grade - short, intense efforts",
    "very_steep": "12-20% grade - power/strength focus",
}

_TERRAIN_EXAMPLES: dict[str, str] = {
    "gentle": "Long highway on-ramps, gradual neighborhood streets, park paths with slight incline, treadmill at 2-4% incline",
    "moderate": "Typical neighborhood hills, multi-story parking garage ramps, bridge approaches, treadmill at 4-7% incline",
    "steep": "Short neighborhood climbs, stadium stairs, steep parking garage ramps, treadmill at 7-12% incline",
    "very_steep": "Stadium steps, ski slope access roads, short power line hills, treadmill at 12%+ incline",
}

_MEASUREMENT = "Use your phone's inclinometer app or estimate: you should feel challenged but able to maintain form"
_BACKUP = "If no ideal hill available, use treadmill at appropriate incline or find closest available grade"

_DEFAULT_TERRAIN: dict[str, str] = {
    "findHill": "Look for a moderate hill with 4-7% grade",
    "measurement": _MEASUREMENT,
    "distance": "Hill should be at least 100 meters long",
    "examples": "Neighborhood hills, park paths, treadmill incline",
    "backup": _BACKUP,
}

_ALTERNATIVES: dict[str, str] = {
    "noHill": "Use treadmill with appropriate incline setting",
    "hillTooShort": "Repeat shorter hill multiple times with brief recovery",
    "hillTooLong": "Use only portion of longer hill, mark turnaround point",
    "wrongGrade": "Adjust effort level to compensate - easier on steeper hills, harder on gentler grades",
    "indoorOption": "StairMaster, stadium stairs, or parking garage ramps can substitute",
}

_BASE_SAFETY = (
    "Start conservatively and build intensity gradually",
    "Focus on form - don't let hills break down your running mechanics",
    "Stay hydrated and fuel appropriately for longer hill sessions",
)

_CATEGORY_SAFETY: dict[str, tuple[str, ...]] = {
    "short_power": (
        "Very high intensity - ensure adequate recovery",
        "Perfect form is critical at high speeds",
    ),
    "medium_vo2": (
        "Monitor effort level - hills amplify perceived exertion",
        "Don't start too fast on first rep",
    ),
    "long_strength": (
        "Pace should feel sustainable for the full duration",
        "Mental focus is as important as physical strength",
    ),
    "downhill_specific": (
        "HIGH INJURY RISK - start very conservatively",
        "Focus on quick cadence, not long strides",
        "Stop if you feel excessive quad/knee stress",
    ),
    "hill_circuits": (
        "Monitor cumulative fatigue across multiple loops",
        "Adjust effort based on conditions and fatigue",
    ),
}

# Per-workout RunEQ splits, chosen by preference quartile
_RUN_EQ_SPLITS: dict[str, tuple[str, str, str, str]] = {
    "Hill Strides": (
        "Full running workout as prescribed",
        "Warmup riding (Cyclete/Elliptigo), hill reps running, cooldown riding",
        "Hill power intervals on Cyclete/Elliptigo (same RunEQ miles)",
        "Full Cyclete/Elliptigo ride (use Garmin RunEQ data field)",
    ),
    "Tempo Hills": (
        "Full running workout",
        "First rep running, second rep riding (Cyclete/Elliptigo)",
        "Alternate running/riding every 2-3 minutes",
        "Full Cyclete/Elliptigo ride (use Garmin RunEQ data field)",
    ),
}

_GENERIC_RUN_EQ = (
    "Consider doing warmup/cooldown on Cyclete/Elliptigo",
    "Alternate running and Cyclete/Elliptigo intervals",
    "Full Cyclete/Elliptigo ride (use Garmin RunEQ data field to track equivalent miles)",
)


def _hill(
    name: str,
    subcategory: str,
    requirement: HillRequirement,
    segments: StructureSegments,
    **fields,
) -> WorkoutTemplate:
    return WorkoutTemplate(
        name=name,
        library=_H,
        subcategory=subcategory,
        hill_requirement=requirement,
        segments=segments,
        **fields,
    )


HILL_WORKOUTS: dict[str, tuple[WorkoutTemplate, ...]] = {
    # 10-30 second power efforts
    "short_power": (
        _hill(
            "Hill Strides", "short_power",
            HillRequirement("moderate", "50-100 meters", "Find a 4-7% grade hill, at least 50m long"),
            StructureSegments(
                warmup="15 min easy + 4x20sec strides on flat",
                main="6-8 x 12sec hill strides @ 90% effort",
                recovery="Walk/jog down + 1 min easy",
                cooldown="10-15 min easy",
            ),
            duration="10-15 seconds",
            focus="Neuromuscular power, running form, leg turnover",
            intensity="Very High (TE 4.0+)",
        ),
        _hill(
            "Stadium Steps Simulation", "short_power",
            HillRequirement("steep", "75-150 meters", "Find a 7-12% grade hill, stadium steps, or parking garage ramp"),
            StructureSegments(
                warmup="20 min easy + dynamic drills",
                main="5-8 x 25sec explosive hill climbs @ 95% effort",
                recovery="Walk down + 2 min easy jog",
                cooldown="15 min easy",
            ),
            duration="20-30 seconds",
            focus="Explosive power, anaerobic capacity, mental toughness",
            intensity="Maximum (TE 4.5+)",
        ),
    ),
    # 1-4 minute repeats
    "medium_vo2": (
        _hill(
            "Classic Hill Repeats", "medium_vo2",
            HillRequirement("moderate", "400-800 meters", "Find a steady 4-7% grade, like a 0.75-mile hill"),
            StructureSegments(
                warmup="20 min easy + 3x30sec pickups",
                main="4-6 x 2.5 min uphill @ threshold effort",
                recovery="Jog/walk down + 90sec easy",
                cooldown="15 min easy",
            ),
            duration="2-3 minutes",
            focus="VO2 max, lactate threshold, hill running economy",
            intensity="Hard (TE 3.5-4.0)",
            progression={
                "week1": "4 x 2 min",
                "week2": "5 x 2 min",
                "week3": "4 x 2.5 min",
                "week4": "5 x 2.5 min",
            },
        ),
        _hill(
            "Hill Pyramid", "medium_vo2",
            HillRequirement("moderate", "600+ meters", "Long steady hill - a 0.75-mile hill is perfect"),
            StructureSegments(
                warmup="20 min easy",
                main="1-2-3-4-3-2-1 min uphill @ building effort",
                recovery="Equal time easy jog/walk down between reps",
                cooldown="15 min easy",
            ),
            duration="Variable (1-4 min)",
            focus="Progressive effort, mental strength, pacing discipline",
            intensity="Progressive (TE 3.0-4.0)",
        ),
    ),
    # 4-10+ minute climbs
    "long_strength": (
        _hill(
            "Tempo Hills", "long_strength",
            HillRequirement("gentle", "1+ miles", "Find a long 2-4% grade"),
            StructureSegments(
                warmup="15-20 min easy",
                main="2-3 x 8-10 min uphill @ tempo effort",
                recovery="5 min easy (jog down + flat)",
                cooldown="15 min easy",
            ),
            duration="6-12 minutes",
            focus="Sustained power, aerobic strength, mental endurance",
            intensity="Moderately Hard (TE 3.0-3.5)",
        ),
        _hill(
            "Long Hill Progression", "long_strength",
            HillRequirement("gentle_to_moderate", "1.5+ miles", "Long gradual climb - multiple loops of a hill work great"),
            StructureSegments(
                warmup="20 min easy",
                main="12 min continuous uphill: 4min easy→4min moderate→4min hard",
                recovery="Walk/easy jog down",
                cooldown="15-20 min easy",
            ),
            duration="8-15 minutes",
            focus="Progressive effort, race simulation, mental toughness",
            notes="Repeat: 1-2 more times depending on fitness",
        ),
    ),
    "hill_circuits": (
        _hill(
            "Hill Circuit Training", "hill_circuits",
            HillRequirement("moderate", "Circuit of 1-2 miles", "A 2-mile loop with a 0.75-mile climb is ideal"),
            StructureSegments(
                warmup="15 min easy + dynamic drills",
                main=(
                    "4-6 complete loops:\n• 0.75mi climb @ steady effort\n"
                    "• Downhill recovery @ controlled pace\n• 0.25mi flat @ easy pace"
                ),
                cooldown="10-15 min easy",
            ),
            duration="30-45 minutes",
            focus="Hill-specific endurance, downhill control, circuit training",
            intensity="Moderate-Hard (TE 3.0-3.5)",
            notes="Build effort each loop (start 70%, finish 85%). Great for base building and hill marathon prep",
        ),
        _hill(
            "Hill Fartlek", "hill_circuits",
            HillRequirement("rolling_terrain", "Varied", "Rolling hills or repeated loops with varied efforts"),
            StructureSegments(
                warmup="15 min easy",
                main=(
                    "20 min continuous fartlek on hills:\n• Up hills: surge to moderate-hard\n"
                    "• Down hills: controlled but not easy\n• Flats: settle to steady tempo"
                ),
                cooldown="15 min easy",
            ),
            duration="25-35 minutes",
            focus="Terrain adaptation, variable pacing, race preparation",
            notes="Unstructured - respond to terrain",
        ),
    ),
    "downhill_specific": (
        _hill(
            "Controlled Downhill Repeats", "downhill_specific",
            HillRequirement("moderate", "400-800 meters downhill", "A steady downhill section of a loop is ideal"),
            StructureSegments(
                warmup="20 min easy + leg swings",
                main="5-8 x 90sec controlled fast downhill",
                recovery="Walk/jog up hill + 1 min easy",
                cooldown="15 min easy + stretching",
            ),
            duration="1-3 minutes",
            focus="Eccentric strength, downhill speed, injury prevention",
            intensity="Moderate (TE 2.5-3.0)",
            notes=(
                "Technique: quick cadence, lean slightly forward, land on forefoot. "
                "Start conservative - high injury risk if overdone"
            ),
        ),
    ),
    "specialty": (
        _hill(
            "Hill Progression Run", "specialty",
            HillRequirement("rolling_or_repeatable", "Multiple miles", "A repeated 2-mile loop, or rolling terrain course"),
            StructureSegments(
                warmup="15 min easy",
                main=(
                    "30-40 min progression:\n• First 10 min: easy on hills\n"
                    "• Middle 15-20 min: moderate effort on climbs\n• Final 10-15 min: strong effort on all uphills"
                ),
                cooldown="10-15 min easy",
            ),
            duration="45-60 minutes",
            focus="Progressive loading, race preparation, mental preparation",
            notes="Gradual effort increase, maintain form",
        ),
        _hill(
            "Over-Under Hills", "specialty",
            HillRequirement("moderate", "Long steady climb", "Single long hill or multiple loops of a 0.75-mile climb"),
            StructureSegments(
                warmup="20 min easy",
                main="3-4 x 6 min on hill: 3min @ threshold, 3min @ slightly above threshold",
                recovery="4-5 min easy between sets",
                cooldown="15 min easy",
            ),
            duration="Variable",
            focus="Lactate clearance, threshold power, race-pace variability",
            notes="Switch effort every 3 minutes without stopping",
        ),
    ),
}


def terrain_instructions(requirement: HillRequirement | None) -> dict[str, str]:
    """How to find a hill matching the requirement's grade."""
    if requirement is None or requirement.grade not in HILL_GRADES:
        return dict(_DEFAULT_TERRAIN)
    return {
        "findHill": f"Look for a hill with {HILL_GRADES[requirement.grade]}",
        "measurement": _MEASUREMENT,
        "distance": f"Hill should be at least {requirement.distance}",
        "examples": _TERRAIN_EXAMPLES[requirement.grade],
        "backup": _BACKUP,
    }


def run_eq_recommendation(template: WorkoutTemplate, preference: int) -> str:
    if preference == 0:
        return "Full running workout as prescribed"
    splits = _RUN_EQ_SPLITS.get(template.name)
    if splits is None:
        if preference <= 25:
            return _GENERIC_RUN_EQ[0]
        return _GENERIC_RUN_EQ[1] if preference <= 75 else _GENERIC_RUN_EQ[2]
    if preference <= 25:
        return splits[0]
    if preference <= 50:
        return splits[1]
    return splits[2] if preference <= 75 else splits[3]


class HillCatalog(CatalogProvider):
    """Hill sessions with grade and distance requirements."""

    library = Library.HILL
    workouts = HILL_WORKOUTS
    # Hill names only match when the stored name contains the query
    bidirectional = False

    def personalize(
        self,
        template: WorkoutTemplate,
        context: PersonalizationContext,
        distance: float | None = None,
    ) -> WorkoutTemplate:
        pace = context.paces.pace("threshold") or context.paces.pace("interval")
        return replace(
            template,
            name=f"{template.name} ({pace}/mi)" if pace else template.name,
            segments=specify_segments(template.segments, context.current_week, context.total_weeks),
            terrain_instructions=terrain_instructions(template.hill_requirement),
            safety_notes=_BASE_SAFETY + _CATEGORY_SAFETY.get(template.subcategory, ()),
            alternatives=dict(_ALTERNATIVES),
            run_eq_recommendation=run_eq_recommendation(template, context.run_eq_preference),
        )
