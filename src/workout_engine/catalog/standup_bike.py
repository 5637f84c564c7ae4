"""Stand-up bike (Cyclete / ElliptiGO) workout catalog.

Road workouts for the two stand-up bike platforms, grouped into buckets
the alternative generator draws from when it offers an equipment swap.
Distances are prescribed in RunEQ miles: Garmin users ride until the
companion data field shows the target, everyone else gets a time and
bike-distance estimate.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from workout_engine.catalog.base import CatalogProvider
from workout_engine.formatting import format_number, round_half_up
from workout_engine.models.context import PersonalizationContext
from workout_engine.models.enums import BIKE_TO_RUN_RATIO, MINUTES_PER_RUNEQ_MILE, Library
from workout_engine.models.template import EquipmentEffort, WorkoutTemplate

logger = logging.getLogger(__name__)

_B = Library.BIKE

# Buckets offered as equipment swaps, keyed by the current workout's family.
TEMPO_BUCKET = "TEMPO_BIKE"
INTERVAL_BUCKET = "INTERVAL_BIKE"
POWER_BUCKET = "POWER_RESISTANCE"
ENDURANCE_BUCKET = "LONG_ENDURANCE_RIDES"

GARMIN_NOTE = (
    "Ride until your Garmin RunEQ data field shows the prescribed RunEQ miles. "
    "Your actual bike distance will vary based on your riding intensity."
)

_BASE_SAFETY = (
    "Start with proper warmup to prepare for stand-up motion",
    "Focus on smooth, controlled movement throughout",
    "Stay hydrated, especially during longer sessions",
)

_EQUIPMENT_SAFETY: dict[str, tuple[str, ...]] = {
    "cyclete": (
        "Maintain a natural motion, avoid forcing the pattern",
        "Keep upper body relaxed to allow efficient power transfer",
    ),
    "elliptigo": (
        "Adjust stride length appropriately for intensity level",
        "Coordinate upper and lower body movement smoothly",
        "Use handles for balance, not to pull yourself forward",
    ),
}

_HARD_INTENSITIES = frozenset({"tempo", "intervals"})

_PROGRESSION = {
    "beginner": "Start conservative, focus on movement quality over intensity",
    "intermediate": "Standard prescription as written",
    "advanced": "Can extend duration or add complexity to intervals",
}


def _bike(
    name: str,
    subcategory: str,
    heart_rate: str = "",
    perceived: str = "",
    **fields,
) -> WorkoutTemplate:
    effort = EquipmentEffort(heart_rate, perceived) if (heart_rate or perceived) else None
    return WorkoutTemplate(
        name=name,
        library=_B,
        subcategory=subcategory,
        equipment="both",
        effort=effort,
        **fields,
    )


STANDUP_BIKE_WORKOUTS: dict[str, tuple[WorkoutTemplate, ...]] = {
    TEMPO_BUCKET: (
        _bike(
            "Sustained Threshold Effort", TEMPO_BUCKET,
            "Zone 3-4 (80-90% max HR)", "Comfortably hard, can speak in short sentences",
            duration="50-70 minutes",
            description="Continuous steady hard effort at lactate threshold",
            structure="10 min easy warmup + 20-40 min @ threshold effort + 10 min easy cooldown",
            intensity="tempo",
            benefits="Lactate threshold development, sustained power, mental toughness",
            cyclete_notes="Excellent for building race-pace endurance on natural motion",
            elliptigo_notes="Use moderate-long stride, maintain steady resistance throughout",
            road_considerations="Find a flat, uninterrupted stretch of bike path or quiet road for sustained effort",
        ),
        _bike(
            "Tempo Intervals", TEMPO_BUCKET,
            "Zone 3-4 during intervals (80-90% max HR)", "Hard but sustainable, recovery is truly easy",
            duration="60-75 minutes",
            description="Repeated threshold efforts with short recovery",
            structure="10 min warmup + 3-4 x 8 min @ threshold with 3 min easy recovery + 10 min cooldown",
            intensity="tempo",
            benefits="Threshold power, recovery management, pacing practice",
            cyclete_notes="Perfect for building powerful sustained efforts",
            elliptigo_notes="Maintain consistent stride pattern across intervals",
            road_considerations="Out-and-back route or loop works well, recovery is active (keep moving)",
        ),
        _bike(
            "Progressive Tempo Build", TEMPO_BUCKET,
            "Building from Zone 2 → Zone 4 → Zone 5", "Starting comfortable, finishing hard",
            duration="55-70 minutes",
            description="Gradually building effort to threshold and beyond",
            structure="15 min easy + 10 min moderate + 10 min threshold + 5 min hard + 15 min easy cooldown",
            intensity="tempo",
            benefits="Graduated effort adaptation, race simulation, finishing strength",
            cyclete_notes="Natural motion allows smooth power progression",
            elliptigo_notes="Increase resistance and/or cadence to build effort",
            road_considerations="Slight uphill finish helps with progressive build",
        ),
        _bike(
            "Cruise Intervals", TEMPO_BUCKET,
            "Zone 3-4 (80-90% max HR)", "Comfortably hard, short recovery keeps you honest",
            duration="60-80 minutes",
            description="Classic lactate threshold intervals with short recovery",
            structure="15 min warmup + 5-6 x 5 min @ threshold with 2 min easy + 10 min cooldown",
            intensity="tempo",
            benefits="Threshold efficiency, power sustainability, mental resilience",
            cyclete_notes="Maintain smooth natural rhythm throughout efforts",
            elliptigo_notes="Focus on consistent resistance and stride pattern",
            road_considerations="Timer-based intervals work anywhere, don't need specific landmarks",
        ),
        _bike(
            "Tempo Sandwich", TEMPO_BUCKET,
            "Zone 3-4 during blocks", "First block strong, second block requires focus",
            duration="60-75 minutes",
            description="Two threshold blocks separated by easy riding",
            structure="10 min warmup + 15 min @ threshold + 10 min easy + 15 min @ threshold + 10 min cooldown",
            intensity="tempo",
            benefits="Threshold endurance, mid-ride recovery practice, race pacing",
            cyclete_notes="Second effort teaches pacing discipline",
            elliptigo_notes="Maintain form quality into second block",
            road_considerations="Out-and-back route ideal (turnaround during easy section)",
        ),
        _bike(
            "Tempo with Surges", TEMPO_BUCKET,
            "Zone 3-4 baseline, Zone 5 during surges", "Hard base with brief very hard surges",
            duration="55-70 minutes",
            description="Threshold effort with periodic hard surges",
            structure="10 min warmup + 20 min @ threshold with 6 x 30 sec surges every 3 min + 10 min cooldown",
            intensity="tempo",
            benefits="Race simulation, surge recovery, variable pace training",
            cyclete_notes="Surges mimic race attacks or traffic situations",
            elliptigo_notes="Quick resistance/cadence changes develop responsiveness",
            road_considerations="Surges work well at intersections or road features",
        ),
    ),
    INTERVAL_BUCKET: (
        _bike(
            "Short Power Repeats", INTERVAL_BUCKET,
            "Zone 4-5 during intervals (90-100% max HR)", "Hard effort, breathing heavy, full recovery needed",
            duration="50-65 minutes",
            description="High-intensity short intervals for power development",
            structure="15 min warmup + 10-12 x 2 min hard with 2 min easy recovery + 10 min cooldown",
            intensity="intervals",
            benefits="VO2max development, neuromuscular power, aerobic capacity",
            cyclete_notes="Explosive power in natural motion pattern",
            elliptigo_notes="Quick stride and resistance changes",
            road_considerations="Timer-based, any safe road works, recovery is active (keep moving)",
        ),
        _bike(
            "Classic 5-Minute Repeats", INTERVAL_BUCKET,
            "Zone 5 (95-100% max HR)", "Very hard but sustainable for 5 minutes",
            duration="65-80 minutes",
            description="VO2max intervals at hard sustainable effort",
            structure="15 min warmup + 4-6 x 5 min @ VO2max with 3-4 min easy recovery + 10 min cooldown",
            intensity="intervals",
            benefits="Aerobic power, VO2max improvement, sustained speed work",
            cyclete_notes="5 minutes allows rhythm development at high power",
            elliptigo_notes="Find sustainable high resistance for full duration",
            road_considerations="Flat section preferred to maintain consistent power output",
        ),
        _bike(
            "Ladder Intervals", INTERVAL_BUCKET,
            "Zone 4-5 during intervals", "Hard throughout, adjust effort for interval duration",
            duration="70-90 minutes",
            description="Variable duration intervals ascending and descending",
            structure="15 min warmup + 2-3-4-5-4-3-2 min hard with equal recovery + 10 min cooldown",
            intensity="intervals",
            benefits="Variable effort training, mental engagement, comprehensive stimulus",
            cyclete_notes="Varied durations prevent monotony",
            elliptigo_notes="Adjust pacing for different interval lengths",
            road_considerations="Timer-based pyramid keeps mental focus high",
        ),
        _bike(
            "Over-Under Intervals", INTERVAL_BUCKET,
            "Zone 3-4 during under, Zone 5 during over", "Alternating hard and very hard within same interval",
            duration="60-75 minutes",
            description="Alternating just below and just above threshold",
            structure=(
                "15 min warmup + 4 x 8 min (alternating 2 min @ threshold, 1 min @ VO2max) "
                "with 4 min recovery + 10 min cooldown"
            ),
            intensity="intervals",
            benefits="Lactate tolerance, recovery under duress, race simulation",
            cyclete_notes="Teaches power management and recovery while working",
            elliptigo_notes="Quick resistance changes between under/over efforts",
            road_considerations="No true recovery during 8-min blocks, need good road surface",
        ),
        _bike(
            "Fartlek Intervals", INTERVAL_BUCKET,
            "Variable Zone 2-5", "Playful hard efforts based on feel",
            duration="50-70 minutes",
            description="Unstructured speed play using landmarks and feel",
            structure=(
                "15 min warmup + 20-30 min continuous riding with surges of varying duration "
                "(30 sec to 5 min) + 10 min cooldown"
            ),
            intensity="intervals",
            benefits="Variable pace training, mental freedom, responsive power",
            cyclete_notes="Natural motion allows spontaneous surges",
            elliptigo_notes="Use road features as surge cues",
            road_considerations="Use mailboxes, signs, hills, etc. as surge markers",
        ),
        _bike(
            "30-30 Repeats", INTERVAL_BUCKET,
            "Zone 5 during hard sections", "Hard but repeatable, 30 sec recovery is enough",
            duration="50-65 minutes",
            description="Equal hard and recovery for sustained intensity",
            structure=(
                "15 min warmup + 3-4 sets of 10 x 30 sec hard / 30 sec easy "
                "(5 min recovery between sets) + 10 min cooldown"
            ),
            intensity="intervals",
            benefits="VO2max development, anaerobic capacity, efficient recovery",
            cyclete_notes="Short recoveries develop resilience",
            elliptigo_notes="Quick rhythm changes improve responsiveness",
            road_considerations="Timer-based, any safe stretch works",
        ),
    ),
    POWER_BUCKET: (
        _bike(
            "Hill Power Repeats", POWER_BUCKET,
            "Zone 4-5 (90-100% max HR)", "Very hard uphill effort, easy coast down recovery",
            duration="55-70 minutes",
            description="Short explosive hill repeats for power development",
            structure="15 min warmup + 8-10 x 2 min hard uphill with easy coast down + 10 min cooldown",
            intensity="power",
            benefits="Power development, muscular strength, explosive capacity",
            cyclete_notes="Powerful natural motion up sustained grades",
            elliptigo_notes="High resistance, explosive stride pattern",
            road_considerations="Need actual hill or sustained grade - 4-6% grade ideal, safe descent",
        ),
        _bike(
            "Resistance Strength Intervals", POWER_BUCKET,
            "Zone 4 (muscular not cardiovascular limiter)", "Legs burning, powerful effort",
            duration="60-75 minutes",
            description="High resistance intervals on flat terrain",
            structure="15 min warmup + 6-8 x 3 min @ high resistance with 3 min easy + 10 min cooldown",
            intensity="power",
            benefits="Muscular strength, grinding power, force production",
            cyclete_notes="High resistance develops grinding strength",
            elliptigo_notes="Maximum resistance, controlled cadence",
            road_considerations="Works on flat roads - resistance creates difficulty",
        ),
        _bike(
            "Long Strength Climbs", POWER_BUCKET,
            "Zone 4 (80-90% max HR)", "Hard sustained uphill effort",
            duration="70-90 minutes",
            description="Extended hill climbs for sustained power",
            structure="15 min warmup + 4-6 x 5 min sustained climb with full recovery down + 10 min cooldown",
            intensity="power",
            benefits="Sustained climbing power, mental toughness, muscular endurance",
            cyclete_notes="Extended natural motion on grades",
            elliptigo_notes="Maintain form quality through long climbs",
            road_considerations="Need sustained grade of 3-5%, safe descent for recovery",
        ),
        _bike(
            "Hill Blasts", POWER_BUCKET,
            "Zone 5 (95-100% max HR)", "Near-maximal effort, full recovery needed",
            duration="50-65 minutes",
            description="Short explosive hill repeats for power",
            structure="15 min warmup + 12-15 x 1 min maximal uphill with easy recovery down + 10 min cooldown",
            intensity="power",
            benefits="Explosive power, anaerobic capacity, neuromuscular training",
            cyclete_notes="Maximum power in natural motion",
            elliptigo_notes="Explosive stride, maximum resistance",
            road_considerations="Short steep hill ideal (6-8% grade), safe descent",
        ),
        _bike(
            "Tempo Climb", POWER_BUCKET,
            "Zone 3-4 (80-90% max HR)", "Hard sustained climbing effort",
            duration="65-85 minutes",
            description="Sustained threshold effort on extended climb",
            structure="15 min warmup + 2-3 x 15 min sustained climb @ threshold with recovery descent + 10 min cooldown",
            intensity="power",
            benefits="Climbing endurance, sustained power, race-specific strength",
            cyclete_notes="Extended climbing in natural motion",
            elliptigo_notes="Maintain consistent rhythm on long climbs",
            road_considerations="Need long gradual climb (3-5% grade for 15 minutes)",
        ),
    ),
    ENDURANCE_BUCKET: (
        _bike(
            "Progressive Long Ride", ENDURANCE_BUCKET,
            "Starting Zone 2, finishing Zone 3-4", "Starting easy, finishing strong",
            duration="90-180 minutes",
            description="Start easy, gradually build to moderate-hard finish",
            structure="First 70% @ easy conversational pace, final 30% @ moderate-hard effort",
            intensity="long",
            benefits="Progressive endurance, finishing strength, aerobic development",
            cyclete_notes="Natural motion allows smooth effort progression",
            elliptigo_notes="Gradually increase resistance through ride",
            road_considerations="Plan route with good roads for harder finish",
        ),
        _bike(
            "Steady State Long Ride", ENDURANCE_BUCKET,
            "Zone 2-3 (70-80% max HR)", "Steady, sustainable, conversational",
            duration="90-180 minutes",
            description="Maintain consistent aerobic pace throughout",
            structure="After warmup, maintain steady moderate effort for full duration",
            intensity="long",
            benefits="Aerobic endurance, consistent pacing, mental discipline",
            cyclete_notes="Excellent for building aerobic base",
            elliptigo_notes="Find sustainable rhythm and maintain it",
            road_considerations="Longer rides need route planning, hydration, nutrition",
        ),
        _bike(
            "Negative Split Long Ride", ENDURANCE_BUCKET,
            "Zone 2-3 out, Zone 3-4 back", "Starting controlled, finishing strong",
            duration="90-150 minutes",
            description="Second half faster than first half",
            structure="Ride out easy-moderate, return moderate-hard (same route out/back)",
            intensity="long",
            benefits="Pacing discipline, progressive endurance, race strategy practice",
            cyclete_notes="Natural motion allows controlled pace progression",
            elliptigo_notes="Monitor effort - start conservative",
            road_considerations="Out-and-back route ideal for comparison",
        ),
        _bike(
            "Variable Terrain Long Ride", ENDURANCE_BUCKET,
            "Variable Zone 2-4 depending on terrain", "Moderate overall with terrain-driven variations",
            duration="100-180 minutes",
            description="Extended ride over varied terrain",
            structure="Mix of flats, rollers, climbs at moderate overall effort",
            intensity="long",
            benefits="Terrain adaptation, comprehensive fitness, real-world preparation",
            cyclete_notes="Natural motion handles terrain changes well",
            elliptigo_notes="Adjust resistance and stride for terrain",
            road_considerations="Choose hilly or rolling route for natural variation",
        ),
        _bike(
            "Exploration Ride", ENDURANCE_BUCKET,
            "Zone 1-2 (60-75% max HR)", "Easy, conversational, enjoyable",
            duration="90-180 minutes",
            description="Easy-moderate exploration of new routes",
            structure="Relaxed pace, enjoy scenery, build time on equipment",
            intensity="long",
            benefits="Aerobic base, mental freshness, route discovery",
            cyclete_notes="Great way to find new training routes",
            elliptigo_notes="Enjoy the ride quality and scenery",
            road_considerations="Explore new roads/paths, have phone/GPS for navigation",
        ),
    ),
    "AEROBIC_BASE": (
        _bike(
            "Conversational Pace Cruise", "AEROBIC_BASE",
            "Zone 1-2 (65-75% max HR)", "Easy, conversational effort",
            duration="45-120 minutes",
            description="Long steady effort at conversational intensity",
            structure="Maintain steady effort throughout, should be able to hold conversation",
            intensity="easy",
            benefits="Aerobic base building, fat adaptation, endurance",
            cyclete_notes="Excellent for long distance preparation, very running-like feel",
            elliptigo_notes="Use moderate stride length, focus on smooth rhythm",
        ),
        _bike(
            "Recovery Ride", "AEROBIC_BASE",
            "Zone 1 (60-70% max HR)", "Very easy, relaxed effort",
            duration="30-60 minutes",
            description="Very easy effort for active recovery",
            structure="Easy riding, minimal resistance, focus on movement quality",
            intensity="recovery",
            benefits="Active recovery, blood flow, movement practice",
            cyclete_notes="Perfect for recovery days, gentle fluid motion",
            elliptigo_notes="Ideal for joint mobility and muscle activation",
        ),
    ),
    "TECHNIQUE_SPECIFIC": (
        _bike(
            "Movement Development", "TECHNIQUE_SPECIFIC",
            "Zone 1-3 varied (65-85% max HR)", "Easy to moderate varied efforts",
            duration="35-50 minutes",
            description="Focus on optimal movement pattern and efficiency",
            structure="15 min warmup + 4-6 x 5 min varied effort focus + 10 min cooldown",
            intensity="easy to moderate",
            benefits="Movement efficiency, technique improvement, neuromuscular training",
            cyclete_notes="Perfect natural motion at all efforts",
            elliptigo_notes="Practice stride length adjustments with effort changes",
        ),
    ),
    "RECOVERY_SPECIFIC": (
        _bike(
            "Active Recovery Flow", "RECOVERY_SPECIFIC",
            "Zone 1 (60-70% max HR)", "Very easy, relaxed recovery effort",
            duration="30-45 minutes",
            description="Gentle movement for recovery days",
            structure="Very easy effort throughout, focus on movement quality",
            intensity="recovery",
            benefits="Blood flow, active recovery, movement maintenance",
            cyclete_notes="Gentle natural motion perfect for recovery",
            elliptigo_notes="Low-impact full body movement aids recovery",
        ),
        _bike(
            "Injury Prevention Session", "RECOVERY_SPECIFIC",
            duration="25-40 minutes",
            description="Low-intensity session for injury-prone periods",
            structure="Extended warmup + very easy effort + extended cooldown",
            intensity="recovery",
            benefits="Maintains fitness while allowing healing, joint mobility",
            cyclete_notes="Zero-impact alternative when running not possible",
            elliptigo_notes="Gentle full-body movement without ground impact",
        ),
    ),
}


def bike_safety_notes(equipment: str | None, template: WorkoutTemplate) -> tuple[str, ...]:
    key = (equipment or "").lower()
    notes = list(_BASE_SAFETY) + list(_EQUIPMENT_SAFETY.get(key, _EQUIPMENT_SAFETY["elliptigo"]))
    if template.intensity in _HARD_INTENSITIES:
        notes.append("Monitor effort level - equipment amplifies intensity compared to running")
    return tuple(notes)


def bike_alternatives(equipment: str | None) -> dict[str, str]:
    indoor = (
        "ElliptiGO can be used on an indoor trainer"
        if (equipment or "").lower() == "elliptigo"
        else "Cyclete is outdoor-specific"
    )
    return {
        "indoor": indoor,
        "tooHard": "Reduce resistance or effort level, maintain smooth motion",
        "tooEasy": "Increase resistance or effort level, extend duration",
        "injury": "Both platforms are excellent low-impact alternatives to running",
        "timeConstraint": "Focus on quality intervals, maintain warmup/cooldown",
    }


def prescribed_name(
    template: WorkoutTemplate,
    run_eq_miles: float | None,
    has_garmin: bool,
) -> tuple[str, str]:
    """Name and description for a ride prescribed in RunEQ miles.

    Garmin users ride to the data field's RunEQ count. Others get an
    estimate at 3 bike miles and 9 minutes per RunEQ mile.
    """
    if not run_eq_miles:
        return template.name, template.description
    if has_garmin:
        miles = format_number(run_eq_miles)
        return (
            f"{miles} RunEQ Miles - {template.name}",
            f"Ride until your Garmin shows {miles} RunEQ miles - {template.description}",
        )
    bike_miles = round_half_up(run_eq_miles * BIKE_TO_RUN_RATIO)
    minutes = round_half_up(run_eq_miles * MINUTES_PER_RUNEQ_MILE)
    return (
        f"{minutes} min / ~{bike_miles} mi - {template.name}",
        f"Ride for approximately {minutes} minutes or {bike_miles} miles - {template.description}",
    )


class StandUpBikeCatalog(CatalogProvider):
    """Cyclete and ElliptiGO road workouts."""

    library = Library.BIKE
    workouts = STANDUP_BIKE_WORKOUTS

    def personalize(
        self,
        template: WorkoutTemplate,
        context: PersonalizationContext,
        distance: float | None = None,
    ) -> WorkoutTemplate:
        equipment = (context.equipment or "").lower()
        if equipment and equipment not in _EQUIPMENT_SAFETY:
            logger.debug("Unknown stand-up bike equipment '%s'", context.equipment)

        run_eq_miles = distance if distance is not None else context.target_distance
        name, description = prescribed_name(template, run_eq_miles, context.has_garmin)
        progression = dict(_PROGRESSION)
        if template.intensity == "intervals":
            progression["advanced"] += "; Week 1: Shorter intervals, Week 2-3: Build, Week 4: Recovery"

        return replace(
            template,
            name=name,
            description=description,
            heart_rate=template.effort.heart_rate if template.effort else template.heart_rate,
            safety_notes=bike_safety_notes(context.equipment, template),
            alternatives=bike_alternatives(context.equipment),
            progression=progression,
            notes=GARMIN_NOTE if run_eq_miles and context.has_garmin else template.notes,
        )
