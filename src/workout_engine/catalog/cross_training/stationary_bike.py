"""Stationary bike catalog.

Seated cycling on spin bikes, upright bikes, Peloton or an indoor
trainer. Distinct from the stand-up bikes (Cyclete, ElliptiGO) served by
the bike catalog. Power targets are given as a share of FTP for riders
with a power meter.
"""

from __future__ import annotations

from workout_engine.catalog.cross_training.base import CrossTrainingCatalog, entry
from workout_engine.models.enums import Library
from workout_engine.models.template import WorkoutTemplate

_L = Library.STATIONARY_BIKE


def _ride(
    subcategory: str, name: str, effort: tuple[str, str, str] | None = None, **fields
) -> WorkoutTemplate:
    return entry(_L, subcategory, name, effort, **fields)


STATIONARY_BIKE_WORKOUTS: dict[str, tuple[WorkoutTemplate, ...]] = {
    "EASY": (
        _ride(
            "EASY", "Recovery Spin",
            duration="30-45 minutes",
            description="Gentle spinning for active recovery",
            structure="30-45 min continuous easy spinning at low resistance",
            intensity="easy",
            benefits="Active recovery, blood flow to legs, maintains aerobic base without impact",
            settings={
                "resistance": "Low (easy to spin)",
                "cadence": "85-95 RPM",
                "heartRate": "Zone 1-2 (60-75% max HR)",
                "power": "< 60% FTP if using power meter",
            },
            technique="Smooth, relaxed pedal stroke. Seated position. Light grip on handlebars. "
            "Let legs spin freely.",
            coaching_tips="This should feel easy. If you're breathing hard, reduce resistance. "
            "Recovery is the goal.",
            running_equivalent="30-45 min easy recovery run",
        ),
        _ride(
            "EASY", "Moderate Easy Ride",
            duration="45-75 minutes",
            description="Sustained easy aerobic ride",
            structure="45-75 min continuous steady effort",
            intensity="easy",
            benefits="Aerobic base building, endurance maintenance without running impact",
            settings={
                "resistance": "Moderate (conversational effort)",
                "cadence": "88-95 RPM",
                "heartRate": "Zone 2 (65-75% max HR)",
                "power": "60-70% FTP",
            },
            technique="Consistent cadence throughout. Vary seated/standing every 10-15 min for variety.",
            coaching_tips="Should feel comfortable and sustainable. You're building aerobic foundation.",
            running_equivalent="45-60 min easy run",
        ),
        _ride(
            "EASY", "Extended Easy Ride",
            duration="75-120 minutes",
            description="Long easy aerobic session",
            structure="75-120 min continuous steady effort, vary position occasionally",
            intensity="easy",
            benefits="Extended aerobic stimulus, fat burning adaptation, mental endurance",
            settings={
                "resistance": "Moderate",
                "cadence": "88-92 RPM",
                "heartRate": "Zone 2 (65-75% max HR)",
                "power": "60-70% FTP",
            },
            technique="Alternate seated and standing climbs every 15-20 min. Stay patient and consistent.",
            coaching_tips="Long rides build serious endurance. Bring water and fuel if over 90 minutes.",
            running_equivalent="60-75 min easy run",
        ),
    ),
    "TEMPO": (
        _ride(
            "TEMPO", "Sustained Tempo Ride",
            ("Zone 3-4 (80-90% max HR)", "Comfortably hard - can speak short sentences, breathing elevated",
             "85-90 RPM consistently"),
            duration="60-90 minutes",
            description="Continuous tempo effort at lactate threshold",
            structure="15 min easy warmup + 30-60 min @ tempo effort (high resistance, 85-90 RPM) "
            "+ 15 min easy cooldown",
            intensity="tempo",
            benefits="Lactate threshold development, sustained power, mental toughness",
            settings={
                "warmup": "Low resistance, 90 RPM",
                "tempo": "Moderate-high resistance, 85-90 RPM",
                "heartRate": "Zone 3-4 (80-90% max HR)",
                "power": "85-95% FTP",
            },
            technique="Seated mostly. Increase resistance to hit effort, not just higher cadence. "
            "Strong steady pedal stroke.",
            coaching_tips="Tempo should feel challenging but sustainable. Don't start too hard.",
            running_equivalent="45-60 min tempo run",
        ),
        _ride(
            "TEMPO", "Tempo Intervals",
            ("Zone 3-4 during efforts (80-90% max HR)", "Hard but repeatable, recovery truly easy",
             "85-90 RPM during efforts, faster during recovery"),
            duration="75-105 minutes",
            description="Repeated tempo efforts with active recovery",
            structure="15 min warmup + 4 x 15 min @ tempo (moderate-high resistance) with 8 min easy spinning "
            "+ 15 min cooldown",
            intensity="tempo",
            benefits="Threshold power, recovery management, pacing practice",
            settings={
                "intervals": "Moderate-high resistance, 85-90 RPM",
                "recovery": "Low resistance, 90-95 RPM",
                "heartRate": "Zone 3-4 during efforts",
                "power": "85-95% FTP during efforts",
            },
            technique="Strong resistance during efforts. Truly easy spinning during recovery - let HR drop.",
            coaching_tips="This is classic threshold work. Each interval should feel the same.",
            running_equivalent="Tempo interval workout",
        ),
        _ride(
            "TEMPO", "Progressive Power Build",
            ("Building from Zone 2 to Zone 5", "Starting comfortable, finishing very hard", "Steady throughout"),
            duration="60-90 minutes",
            description="Gradually increasing resistance simulating race finish",
            structure="15 min easy + 15 min moderate + 20 min tempo + 10 min hard + 15 min easy cooldown",
            intensity="tempo",
            benefits="Graduated effort adaptation, finishing strength, race simulation",
            settings={
                "progressive": "Resistance increasing each segment, 88-92 RPM",
                "heartRate": "Building from Zone 2 → Zone 5",
                "power": "Building from 65% → 100% FTP",
            },
            technique="Gradually increase resistance each segment. Final 10min should feel like racing.",
            coaching_tips="This teaches you to push when tired. Mental training for race day.",
            running_equivalent="Progressive tempo run",
        ),
        _ride(
            "TEMPO", "Sweet Spot Intervals",
            ("Zone 3 (75-85% max HR)", "Moderately hard, sustainable for longer durations", "Steady 85-90 RPM"),
            duration="60-90 minutes",
            description="Sustained efforts just below threshold",
            structure="15 min warmup + 3 x 20 min @ sweet spot (88-93% FTP) with 5 min easy + 15 min cooldown",
            intensity="tempo",
            benefits="Threshold development with more volume, sustainable power",
            settings={
                "intervals": "Moderate-high resistance, 85-90 RPM",
                "recovery": "Low resistance, 95 RPM",
                "heartRate": "Zone 3 (75-85% max HR)",
                "power": "88-93% FTP",
            },
            technique="Just below threshold = can sustain longer. Focus on smooth power delivery.",
            coaching_tips="Sweet spot is hard enough to build fitness, sustainable enough for volume.",
            running_equivalent="Tempo run or marathon pace work",
        ),
    ),
    "INTERVALS": (
        _ride(
            "INTERVALS", "1-Minute Sprint Intervals",
            ("Zone 5 (95%+ max HR)", "All-out effort, gasping for air", "100-125 RPM during sprints"),
            duration="60-75 minutes",
            description="Short, intense sprints with recovery",
            structure="15 min warmup + 10 x 1 min all-out sprint (out of saddle) with 2 min easy recovery "
            "+ 15 min cooldown",
            intensity="intervals",
            benefits="VO2max, explosive power, neuromuscular development",
            settings={
                "sprints": "High resistance, 100-125 RPM, out of saddle",
                "recovery": "Low resistance, 80-90 RPM",
                "heartRate": "Zone 5 (95%+ max HR)",
                "power": "120-150% FTP",
            },
            technique="Out of saddle. Maximum power output. Control your bike. Recovery is truly easy.",
            coaching_tips="These are hard! Quality over quantity. If power drops significantly, stop the workout.",
            running_equivalent="10 x 400m track repeats",
        ),
        _ride(
            "INTERVALS", "90-Second Power Intervals",
            ("Zone 4-5 (90-95% max HR)", "Very hard, last 30 seconds hurts", "95-105 RPM"),
            duration="60-75 minutes",
            description="Medium intervals building VO2max",
            structure="15 min warmup + 6 x 90 sec @ RPE 9-10 with 3 min easy pedaling + 15 min cooldown",
            intensity="intervals",
            benefits="VO2max development, lactate tolerance, mental toughness",
            settings={
                "intervals": "Very high resistance, 95-105 RPM",
                "recovery": "Low resistance, 85 RPM",
                "heartRate": "Zone 4-5 (90-95% max HR)",
                "power": "110-130% FTP",
            },
            technique="Seated or standing - your choice. Maximum sustainable power for 90 seconds.",
            coaching_tips="90 seconds is long enough to hurt. Push through the final 30 seconds.",
            running_equivalent="6-8 x 800m repeats",
        ),
        _ride(
            "INTERVALS", "3-Minute Hard Repeats",
            ("Zone 4-5 (90-95% max HR)", "Hard and sustained, requires focus", "90-95 RPM"),
            duration="60-90 minutes",
            description="Longer intervals at high intensity",
            structure="15 min warmup + 8 x 3 min hard with 2 min easy recovery + 15 min cooldown",
            intensity="intervals",
            benefits="VO2max endurance, sustained high power, mental resilience",
            settings={
                "intervals": "High resistance, 90-95 RPM",
                "recovery": "Low resistance, 90 RPM",
                "heartRate": "Zone 4-5 (90-95% max HR)",
                "power": "100-115% FTP",
            },
            technique="Control your effort - 3 minutes is long enough to blow up early. Pace yourself.",
            coaching_tips="These are threshold-plus efforts. Final minute of each is mental training.",
            running_equivalent="8 x 1000m repeats",
        ),
        _ride(
            "INTERVALS", "Tabata Sprints",
            ("Zone 5 (95%+ max HR)", "Maximum effort, explosive", "Maximum controllable RPM"),
            duration="45-60 minutes",
            description="Ultra-short maximum efforts",
            structure="15 min warmup + 8 rounds x (20 sec max sprint / 10 sec rest) + 3 min recovery, "
            "repeat 2-3 sets + 15 min cooldown",
            intensity="intervals",
            benefits="Anaerobic capacity, explosive power, maximum RPM development",
            settings={
                "sprints": "Moderate resistance, maximum sustainable RPM (120-140)",
                "rest": "Low resistance, slow pedal",
                "heartRate": "Zone 5 (95%+ max HR)",
                "power": "150%+ FTP",
            },
            technique="Explosive leg speed. 20 seconds goes fast - go all out immediately. "
            "10 sec rest = barely recover.",
            coaching_tips="These are brutal. Classic Tabata protocol. If form breaks, stop.",
            running_equivalent="Sprint intervals",
        ),
        _ride(
            "INTERVALS", "5-Minute Power Intervals",
            ("Zone 4-5 (90-95% max HR)", "Very hard and sustained", "88-92 RPM"),
            duration="75-90 minutes",
            description="Long VO2max efforts proven to improve running",
            structure="15 min warmup + 4-5 x 5 min hard with 5 min easy recovery + 15 min cooldown",
            intensity="intervals",
            benefits="VO2max endurance, research-proven to improve 5K run times",
            settings={
                "intervals": "High resistance, 88-92 RPM",
                "recovery": "Low resistance, 90-95 RPM",
                "heartRate": "Zone 4-5 (90-95% max HR)",
                "power": "95-105% FTP",
            },
            technique="Seated position. Control your pacing - 5 minutes is long. "
            "Equal work:rest ratio allows quality.",
            coaching_tips="Research shows 5-min bike intervals improve running performance. These are gold.",
            running_equivalent="Mile repeats",
            notes="Longer bike intervals (5 min) shown to improve running 5K times by over 1 minute in triathletes",
        ),
        _ride(
            "INTERVALS", "10-Second Max Sprints",
            ("Spikes to Zone 5", "Absolute maximum effort for 10 seconds", "Maximum possible RPM"),
            duration="45-60 minutes",
            description="Ultra-short maximal sprints for running performance",
            structure="15 min warmup + 6 x 10 sec maximal sprint with 5 min easy recovery + 15 min cooldown",
            intensity="intervals",
            benefits="Neuromuscular power, running economy, 3K performance improvement",
            settings={
                "sprints": "Moderate resistance, absolute maximum RPM",
                "recovery": "Very low resistance, easy spinning",
                "heartRate": "Zone 5 briefly",
                "power": "Maximum wattage output",
            },
            technique="Explosive from first second. All-out maximum power for full 10 seconds. "
            "Long recovery allows quality.",
            coaching_tips="Research-backed for 3K running improvement. Maximum quality, "
            "full recovery between efforts.",
            running_equivalent="Sprint drills",
            notes="6 x 10-second maximal sprints shown to improve 3K running performance",
        ),
    ),
    "LONG": (
        _ride(
            "LONG", "Steady Endurance Ride",
            ("Zone 2 (65-75% max HR)", "Conversational but sustained", "Steady 88-92 RPM"),
            duration="90-150 minutes",
            description="Long steady effort for aerobic development",
            structure="90-150 min continuous moderate effort, vary seated/standing every 15-20 min",
            intensity="long",
            benefits="Aerobic capacity, fat burning, endurance without running impact",
            settings={
                "resistance": "Moderate",
                "cadence": "88-92 RPM",
                "heartRate": "Zone 2 (65-75% max HR)",
                "power": "65-75% FTP",
            },
            technique="Vary position to prevent fatigue. Stay patient. Fuel properly if over 90 minutes.",
            coaching_tips="Long rides build massive aerobic base. Time in Zone 2 is gold for endurance.",
            running_equivalent="Long run (1.5-2 hours)",
        ),
        _ride(
            "LONG", "Extended Endurance Ride",
            ("Zone 2 (65-75% max HR)", "Easy-moderate, becomes work in final hour", "Consistent throughout"),
            duration="150-240 minutes",
            description="Ultra-long ride for maximum endurance",
            structure="2.5-4 hours continuous moderate effort with nutrition strategy",
            intensity="long",
            benefits="Maximum aerobic development, glycogen management, mental fortitude",
            settings={
                "resistance": "Moderate",
                "cadence": "88-92 RPM",
                "heartRate": "Zone 2 (65-75% max HR)",
                "power": "60-70% FTP",
            },
            technique="Nutrition is critical - fuel every 45-60 min. Stay hydrated. Mental breaks every 30 min.",
            coaching_tips="This is serious endurance training. Bring food, water, entertainment. "
            "Plan your fueling strategy.",
            running_equivalent="16-20 mile long run",
        ),
        _ride(
            "LONG", "Progressive Endurance Ride",
            ("Zone 2 early, building to Zone 3-4", "Easy early, hard finish", "Steady throughout"),
            duration="90-135 minutes",
            description="Long ride with building effort finish",
            structure="75 min easy-moderate + 15-45 min @ increased resistance/tempo + 15 min easy cooldown",
            intensity="long",
            benefits="Endurance + fatigue resistance, teaches pushing when tired",
            settings={
                "base": "Moderate resistance, 90 RPM, 70% FTP",
                "finish": "Moderate-high resistance, 88 RPM, 85-90% FTP",
            },
            technique="Simulate racing tired. Hard finish after endurance work is race-specific.",
            coaching_tips="The hard finish when fatigued is key race training. This is mental strength work.",
            running_equivalent="Long run with marathon pace finish",
        ),
    ),
    "HILLS": (
        _ride(
            "HILLS", "Seated Climbing Intervals",
            ("Zone 4 (85-90% max HR)", "Very hard, muscular effort", "60-75 RPM - power over speed"),
            duration="60-75 minutes",
            description="High resistance climbs for leg strength",
            structure="15 min warmup + 8-10 x 2 min @ very high resistance (seated) with 3 min easy recovery "
            "+ 15 min cooldown",
            intensity="hills",
            benefits="Leg strength, sustained power, glute/quad development",
            settings={
                "climbs": "Very high resistance, 60-75 RPM, seated",
                "recovery": "Low resistance, 90-95 RPM",
            },
            technique="Seated position. Grind through high resistance. Feel the leg muscles working hard.",
            coaching_tips="Low cadence + high resistance = serious strength work. Builds running power.",
            running_equivalent="Hill repeats",
        ),
        _ride(
            "HILLS", "Standing Power Climbs",
            ("Zone 4-5 (90-95% max HR)", "Very hard, explosive effort", "70-80 RPM out of saddle"),
            duration="60-75 minutes",
            description="Out-of-saddle climbing for explosive power",
            structure="15 min warmup + 6-8 x 90 sec standing climb @ high resistance with 3 min easy recovery "
            "+ 15 min cooldown",
            intensity="hills",
            benefits="Explosive power, full-body strength, running-specific power development",
            settings={
                "climbs": "Very high resistance, 70-80 RPM, standing",
                "recovery": "Low resistance, 90 RPM, seated",
            },
            technique="Standing position. Drive through legs. Rock bike side to side slightly. Core engaged.",
            coaching_tips="Standing climbs build explosive power that transfers to running. Feel the burn!",
            running_equivalent="Steep hill repeats",
        ),
        _ride(
            "HILLS", "Mixed Climbing Session",
            ("Zone 4 (85-90% max HR)", "Hard throughout, muscular fatigue builds",
             "Varies between seated and standing"),
            duration="60-90 minutes",
            description="Alternating seated and standing climbs",
            structure="15 min warmup + 5 x (3 min seated climb + 2 min standing climb) with 4 min recovery "
            "+ 15 min cooldown",
            intensity="hills",
            benefits="Comprehensive power development, muscular endurance, mental toughness",
            settings={
                "seated": "Very high resistance, 65-75 RPM",
                "standing": "Very high resistance, 75-85 RPM",
            },
            technique="Seated: grind through resistance. Standing: drive explosively. Transition smoothly.",
            coaching_tips="This builds both sustained and explosive power. Comprehensive strength session.",
            running_equivalent="Long hill workout",
        ),
    ),
    "RECOVERY": (
        _ride(
            "RECOVERY", "Active Recovery Spin",
            ("Zone 1 (60-70% max HR)", "Very easy, restorative", "Free spinning"),
            duration="20-30 minutes",
            description="Very easy spinning for recovery",
            structure="20-30 min very easy, minimal resistance",
            intensity="recovery",
            benefits="Blood flow without stress, active recovery",
            settings={
                "resistance": "Very low",
                "cadence": "85-95 RPM",
                "heartRate": "Zone 1 (60-70% max HR)",
                "power": "< 55% FTP",
            },
            technique="Let legs spin freely. Minimal resistance. This should feel easy.",
            coaching_tips="If this feels hard, you need complete rest. Recovery is the goal, not fitness.",
        ),
        _ride(
            "RECOVERY", "Extended Recovery Ride",
            ("Zone 1 (60-70% max HR)", "Extremely easy", "Natural, relaxed"),
            duration="30-45 minutes",
            description="Longer gentle ride for deep recovery",
            structure="30-45 min very easy spinning",
            intensity="recovery",
            benefits="Extended active recovery, maintains movement patterns",
            settings={
                "resistance": "Very low",
                "cadence": "88-95 RPM",
                "heartRate": "Zone 1 (60-70% max HR)",
                "power": "< 60% FTP",
            },
            technique="Effortless pedaling. Focus on smooth circular motion.",
            coaching_tips="Perfect day-after-hard-workout session. Promotes recovery without stress.",
        ),
    ),
}


class StationaryBikeCatalog(CrossTrainingCatalog):
    """Seated indoor cycling sessions with cadence and power targets."""

    library = Library.STATIONARY_BIKE
    workouts = STATIONARY_BIKE_WORKOUTS
    label = "Stationary Bike"
    description = "Traditional seated cycling for running-specific cross-training"
    benefits = (
        "Low impact cardiovascular training",
        "Maintains aerobic fitness during injury",
        "Builds leg strength and power",
        "Can match running heart rate zones",
        "Accessible almost anywhere",
    )
    default_minutes = 60
