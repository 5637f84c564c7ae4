"""Elliptical machine catalog.

The most accessible cross-training option. Intensity is set through
resistance (out of 20) and incline; a 90 RPM cadence matches a 180 spm
running cadence.
"""

from __future__ import annotations

from workout_engine.catalog.cross_training.base import CrossTrainingCatalog, entry
from workout_engine.models.enums import Library
from workout_engine.models.template import WorkoutTemplate

_L = Library.ELLIPTICAL


def _session(
    subcategory: str, name: str, effort: tuple[str, str, str] | None = None, **fields
) -> WorkoutTemplate:
    return entry(_L, subcategory, name, effort, **fields)


ELLIPTICAL_WORKOUTS: dict[str, tuple[WorkoutTemplate, ...]] = {
    "EASY": (
        _session(
            "EASY", "Easy Recovery Session",
            duration="30-45 minutes",
            description="Low-intensity active recovery to promote blood flow and healing",
            structure="30-45 min continuous easy effort at low resistance and moderate incline",
            intensity="easy",
            benefits="Active recovery, maintains aerobic base without impact stress, promotes healing",
            settings={
                "resistance": "Low (3-5 out of 20)",
                "incline": "Moderate (5-8)",
                "cadence": "85-90 RPM",
                "heartRate": "Zone 1-2 (60-75% max HR)",
            },
            technique="Smooth, relaxed motion. Full foot contact on pedals. Upright posture. "
            "Let the machine do the work.",
            coaching_tips="This should feel easy. If you're breathing hard, reduce resistance. "
            "The goal is recovery, not fitness.",
        ),
        _session(
            "EASY", "Moderate Easy Workout",
            duration="45-60 minutes",
            description="Sustained easy aerobic work for base building",
            structure="45-60 min continuous steady effort",
            intensity="easy",
            benefits="Aerobic base development, maintains endurance without running impact",
            settings={
                "resistance": "Moderate (5-8 out of 20)",
                "incline": "Moderate (6-10)",
                "cadence": "90 RPM",
                "heartRate": "Zone 2 (65-75% max HR)",
            },
            technique="Consistent rhythm throughout. Focus on smooth circular motion. Engage core.",
            coaching_tips="Should feel comfortable and sustainable. You're building aerobic foundation.",
        ),
        _session(
            "EASY", "Extended Easy Session",
            duration="60-75 minutes",
            description="Long easy aerobic session",
            structure="60-75 min continuous steady effort with occasional resistance/incline variations",
            intensity="easy",
            benefits="Extended aerobic stimulus, mental endurance, significant calorie burn",
            settings={
                "resistance": "Moderate (6-9 out of 20)",
                "incline": "Varies (6-12)",
                "cadence": "90 RPM",
                "heartRate": "Zone 2 (65-75% max HR)",
            },
            technique="Vary incline every 10-15 minutes to work different muscle groups. "
            "Maintain consistent effort.",
            coaching_tips="Long sessions on the elliptical require mental toughness. Break it into chunks. "
            "Stay patient.",
        ),
    ),
    "TEMPO": (
        _session(
            "TEMPO", "Sustained Tempo Effort",
            (
                "Zone 3-4 (80-90% max HR)",
                "Comfortably hard - can speak in short sentences, breathing elevated",
                "90-92 RPM during tempo portion",
            ),
            duration="50-65 minutes",
            description="Continuous tempo effort at lactate threshold",
            structure="10 min easy warmup + 30-40 min @ tempo effort (high resistance, moderate incline) "
            "+ 10 min easy cooldown",
            intensity="tempo",
            benefits="Lactate threshold development, sustained hard effort tolerance, race-specific fitness",
            settings={
                "warmup": "Resistance 4, incline 6, 85 RPM",
                "tempo": "Resistance 12-14, incline 8-10, 90-92 RPM",
                "cooldown": "Resistance 3, incline 5, 85 RPM",
            },
            technique="Increase resistance to elevate heart rate. Maintain 90+ RPM. Strong leg drive. Upright posture.",
            coaching_tips="The tempo should feel challenging but sustainable for the full duration. "
            "Don't start too hard.",
        ),
        _session(
            "TEMPO", "Tempo Intervals",
            (
                "Zone 3-4 during efforts (80-90% max HR)",
                "Hard but repeatable, recovery feels easy",
                "90-92 RPM during efforts",
            ),
            duration="55-70 minutes",
            description="Repeated tempo blocks with active recovery",
            structure="10 min warmup + 3-4 x 8 min @ tempo (high resistance) with 3 min easy recovery "
            "+ 10 min cooldown",
            intensity="tempo",
            benefits="Threshold power, recovery management under fatigue, pacing discipline",
            settings={
                "intervals": "Resistance 13-15, incline 8-10, 90-92 RPM",
                "recovery": "Resistance 4, incline 5, 85 RPM",
            },
            technique="Sharp contrast between effort and recovery. Recovery is truly easy - let HR drop.",
            coaching_tips="Each interval should feel the same. If you're dying on the last one, "
            "you went too hard early.",
        ),
        _session(
            "TEMPO", "Progressive Tempo Build",
            (
                "Building from Zone 2 → Zone 5",
                "Starting comfortable, finishing very hard",
                "85 RPM building to 92+ RPM",
            ),
            duration="50-65 minutes",
            description="Gradually increasing resistance to simulate race finish",
            structure="10 min easy + 10 min moderate + 15 min tempo + 5 min hard + 10 min easy cooldown",
            intensity="tempo",
            benefits="Graduated effort adaptation, finishing strength, race simulation",
            settings={
                "easy": "Resistance 4, incline 6",
                "moderate": "Resistance 9, incline 8",
                "tempo": "Resistance 13, incline 9",
                "hard": "Resistance 16, incline 10",
                "cooldown": "Resistance 3, incline 5",
            },
            technique="Progressive resistance increases. Final 5min should feel like racing the final mile.",
            coaching_tips="This teaches you to push when tired. The mental aspect is crucial for race day.",
        ),
        _session(
            "TEMPO", "Cruise Intervals",
            (
                "Zone 3-4 (80-90% max HR)",
                "Comfortably hard, short recovery keeps it honest",
                "Consistent 90 RPM",
            ),
            duration="55-70 minutes",
            description="Classic lactate threshold intervals with short recovery",
            structure="10 min warmup + 5-6 x 5 min @ tempo with 2 min easy recovery + 10 min cooldown",
            intensity="tempo",
            benefits="Threshold efficiency, mental resilience, consistent pacing",
            settings={
                "intervals": "Resistance 13-14, incline 8-9, 90 RPM",
                "recovery": "Resistance 4, incline 5, 85 RPM",
            },
            technique="Consistent effort and cadence across all intervals. Monitor RPM closely.",
            coaching_tips="Short recovery = never fully recovered. Classic threshold training.",
        ),
    ),
    "INTERVALS": (
        _session(
            "INTERVALS", "1-Minute On/Off Intervals",
            (
                "Zone 4-5 (90-95%+ max HR)",
                "Hard - breathing heavily, can't speak during efforts",
                "95-100 RPM during efforts",
            ),
            duration="45-60 minutes",
            description="Short, intense intervals with equal recovery",
            structure="10-15 min easy warmup + 15 x 1 min fast (high resistance + incline) / 1 min easy float "
            "+ 10-15 min cooldown",
            intensity="intervals",
            benefits="VO2max development, speed endurance, mental toughness",
            settings={
                "intervals": "Resistance 15-17, incline 10-12, 95-100 RPM",
                "recovery": "Resistance 3, incline 4, 80 RPM",
            },
            technique="Maximum sustainable resistance and cadence. Drive hard through legs. "
            "Recover completely during floats.",
            coaching_tips="Equal work:rest teaches your body to recover under duress. These are hard!",
            running_equivalent="Simulates 15 x 400m track repeats",
        ),
        _session(
            "INTERVALS", "Pyramid Intervals",
            (
                "Zone 4-5 (90-95% max HR)",
                "Hard throughout, varying with interval length",
                "Adjust slightly for each length",
            ),
            duration="55-70 minutes",
            description="Varied interval lengths for mental engagement",
            structure="15 min warmup + [1min, 2min, 3min, 4min, 3min, 2min, 1min] hard with equal recovery "
            "+ 10 min cooldown",
            intensity="intervals",
            benefits="Mental adaptability, varied pace practice, comprehensive speed work",
            settings={
                "intervals": "Resistance 14-16, incline 9-11, 92-98 RPM",
                "recovery": "Resistance 4, incline 5, 85 RPM",
            },
            technique="Shorter intervals = higher cadence, longer = controlled hard effort with moderate cadence.",
            coaching_tips="Pyramid keeps your mind engaged. Adjust resistance for each interval duration.",
            running_equivalent="Simulates 200m-400m-600m-800m-600m-400m-200m pyramid",
        ),
        _session(
            "INTERVALS", "3-Minute Hard Repeats",
            ("Zone 4-5 (90-95% max HR)", "Very hard, last 30 seconds hurts", "92-95 RPM"),
            duration="55-70 minutes",
            description="Medium-length intervals building VO2max",
            structure="15 min warmup + 6-8 x 3 min hard with 2 min easy recovery + 10 min cooldown",
            intensity="intervals",
            benefits="VO2max, lactate tolerance, sustained hard effort",
            settings={
                "intervals": "Resistance 15-16, incline 10, 92-95 RPM",
                "recovery": "Resistance 4, incline 5, 85 RPM",
            },
            technique="Control your effort - 3 minutes is long enough to blow up if you start too hard.",
            coaching_tips="The 3-min duration builds serious lactate. Fight through the discomfort.",
            running_equivalent="Simulates 6-8 x 800m track repeats",
        ),
        _session(
            "INTERVALS", "Tabata-Style Sprint Intervals",
            (
                "Zone 5 (95%+ max HR)",
                "Maximum effort, gasping for air",
                "110-120 RPM - as fast as controllable",
            ),
            duration="40-55 minutes",
            description="Very short, very intense efforts",
            structure="15 min warmup + 8 rounds x (20 sec all-out / 10 sec rest) + 3 min recovery, "
            "repeat 2-3 sets + 10 min cooldown",
            intensity="intervals",
            benefits="Anaerobic capacity, explosive power, mental toughness",
            settings={
                "sprints": "Resistance 12-14, incline 8, 110-120 RPM",
                "rest": "Resistance 4, incline 4, 70 RPM",
            },
            technique="Explosive leg speed. Maximum RPM while maintaining control. 10 seconds goes fast!",
            coaching_tips="These are brutal. Quality over quantity - if form breaks, stop the set.",
            running_equivalent="Simulates all-out sprint intervals",
        ),
        _session(
            "INTERVALS", "4-Minute VO2max Intervals",
            ("Zone 4-5 (90-95% max HR)", "Hard and sustained, requires focus", "92-95 RPM consistently"),
            duration="60-75 minutes",
            description="Longer intervals at VO2max intensity",
            structure="15 min warmup + 5-6 x 4 min hard with 3 min easy recovery + 10 min cooldown",
            intensity="intervals",
            benefits="VO2max endurance, mental toughness, race-pace specificity",
            settings={
                "intervals": "Resistance 14-15, incline 9, 92-95 RPM",
                "recovery": "Resistance 4, incline 5, 85 RPM",
            },
            technique="Pacing is critical - don't blow up early. Final minute is pure mental training.",
            coaching_tips="4 minutes is long enough to teach you to manage suffering. This is race prep.",
            running_equivalent="Simulates 5-6 x 1000m track repeats",
        ),
    ),
    "LONG": (
        _session(
            "LONG", "Steady Long Session",
            ("Zone 2 (65-75% max HR)", "Conversational but sustained", "Steady 88-92 RPM"),
            duration="75-90 minutes",
            description="Extended moderate effort for aerobic development",
            structure="75-90 min continuous moderate effort, vary incline every 10-15 min for muscle variety",
            intensity="long",
            benefits="Aerobic capacity, fat burning adaptation, mental endurance",
            settings={
                "resistance": "Moderate (7-9)",
                "incline": "Varies (6-12)",
                "cadence": "88-92 RPM",
            },
            technique="Vary incline to work different muscle angles. Stay patient and consistent.",
            coaching_tips="Long elliptical sessions build serious mental fortitude. Stay engaged by varying incline.",
            running_equivalent="Simulates 10-12 mile long run",
        ),
        _session(
            "LONG", "Extended Long Session",
            ("Zone 2 (65-75% max HR)", "Comfortable early, becomes work in final 30 min", "Consistent throughout"),
            duration="90-120 minutes",
            description="Marathon-specific endurance work",
            structure="90-120 min continuous effort, systematic incline changes every 15 min",
            intensity="long",
            benefits="Maximum aerobic development, glycogen depletion training, mental toughness",
            settings={
                "resistance": "Moderate (7-10)",
                "incline": "Cycles through 6-8-10-12 every 15 min",
                "cadence": "88-92 RPM",
            },
            technique="Systematic incline changes prevent boredom and work multiple muscle angles.",
            coaching_tips="Two hours on the elliptical is serious training. Bring water and entertainment.",
            running_equivalent="Simulates 13-16 mile long run",
        ),
        _session(
            "LONG", "Progressive Long Session",
            ("Zone 2 early, building to Zone 3-4", "Easy early, hard finish", "Building from 90 to 92+ RPM"),
            duration="75-105 minutes",
            description="Long session with building effort in final portion",
            structure="60 min easy-moderate + 15-30 min @ increased resistance/tempo effort + 10 min easy",
            intensity="long",
            benefits="Endurance + race-specific fatigue resistance",
            settings={
                "base": "Resistance 7, incline 8, 90 RPM",
                "finish": "Resistance 12-13, incline 9, 92 RPM",
                "cooldown": "Resistance 4, incline 5, 85 RPM",
            },
            technique="Simulate running hard when tired. This is race-day practice.",
            coaching_tips="The hard finish teaches you to push when fatigued - critical for racing.",
            running_equivalent="Simulates long run with marathon pace finish",
        ),
    ),
    "HILLS": (
        _session(
            "HILLS", "Hill Repeats",
            ("Zone 4-5 (90-95% max HR)", "Hard, muscular effort", "85-90 RPM - power over speed"),
            duration="50-65 minutes",
            description="Simulated hill running using maximum incline",
            structure="15 min easy warmup + 8-10 x 90 sec @ max incline (high resistance) with 2 min easy "
            "recovery + 10 min cooldown",
            intensity="hills",
            benefits="Leg strength, power development, glute/hamstring activation",
            settings={
                "hills": "Resistance 13-15, incline 15-20 (max), 85-90 RPM",
                "recovery": "Resistance 3, incline 2, 80 RPM",
            },
            technique="Maximum incline. Focus on driving through glutes and hamstrings. Strong core engagement.",
            coaching_tips="High incline + resistance = serious strength work. Feel the glutes burn.",
            running_equivalent="Simulates 8-10 x 90-second hill repeats",
        ),
        _session(
            "HILLS", "Long Hill Intervals",
            ("Zone 4 (85-90% max HR)", "Hard and sustained, muscular fatigue", "85-88 RPM"),
            duration="55-70 minutes",
            description="Extended hill efforts for strength endurance",
            structure="15 min warmup + 5-6 x 3 min @ high incline with 3 min easy recovery + 10 min cooldown",
            intensity="hills",
            benefits="Sustained power, muscular endurance, mental toughness",
            settings={
                "hills": "Resistance 12-14, incline 12-15, 85-88 RPM",
                "recovery": "Resistance 3, incline 2, 80 RPM",
            },
            technique="Maintain form for full 3 minutes despite fatigue. Don't let cadence drop.",
            coaching_tips="3 minutes at high incline builds serious strength endurance. Last minute is grit.",
            running_equivalent="Simulates 5-6 x 3-minute hill repeats",
        ),
        _session(
            "HILLS", "Rolling Hills Session",
            (
                "Zone 2-4 (varies with incline)",
                "Moderate to hard depending on current incline",
                "Adjust with terrain",
            ),
            duration="60-75 minutes",
            description="Varied incline simulating hilly terrain",
            structure="Continuous 60-75 min with incline varying every 2-3 minutes between 4-16",
            intensity="hills",
            benefits="Variable terrain adaptation, mental engagement, comprehensive leg strength",
            settings={
                "resistance": "Moderate (8-10)",
                "incline": "Cycles: 4-8-12-16-12-8-4 every 2-3 min",
                "cadence": "90 RPM on flats, 85 RPM on steep sections",
            },
            technique="Adjust cadence and effort with incline changes. Simulate real trail running.",
            coaching_tips="This simulates hilly race courses. Mental engagement is high with constant changes.",
            running_equivalent="Simulates hilly long run or trail run",
        ),
    ),
    "RECOVERY": (
        _session(
            "RECOVERY", "Short Recovery Session",
            ("Zone 1 (60-70% max HR)", "Very easy, restorative", "Slow and relaxed"),
            duration="20-30 minutes",
            description="Gentle movement for active recovery",
            structure="20-30 min very easy, minimal resistance and incline",
            intensity="recovery",
            benefits="Blood flow without stress, active recovery, movement pattern maintenance",
            settings={
                "resistance": "Very low (2-3)",
                "incline": "Low (3-5)",
                "cadence": "80-85 RPM",
            },
            technique="Minimal effort. Focus on smooth motion. This should feel easy.",
            coaching_tips="If this feels hard, you need complete rest instead. Goal is recovery, not fitness.",
        ),
        _session(
            "RECOVERY", "Extended Recovery Session",
            ("Zone 1 (60-70% max HR)", "Extremely easy, almost meditative", "Relaxed and natural"),
            duration="30-45 minutes",
            description="Longer gentle session for deep recovery",
            structure="30-45 min very easy with minimal resistance",
            intensity="recovery",
            benefits="Extended active recovery without impact stress",
            settings={
                "resistance": "Very low (2-4)",
                "incline": "Low (4-6)",
                "cadence": "82-87 RPM",
            },
            technique="Let the machine do the work. Focus on smooth, effortless motion.",
            coaching_tips="Perfect for day-after-hard-workout. Zero impact makes it ideal for recovery.",
        ),
    ),
}


class EllipticalCatalog(CrossTrainingCatalog):
    """Elliptical sessions set by resistance, incline and cadence."""

    library = Library.ELLIPTICAL
    workouts = ELLIPTICAL_WORKOUTS
    label = "Elliptical"
    description = "Low-impact cardio with running-like motion, adjustable resistance and incline"
    benefits = (
        "Low impact alternative to running",
        "Similar movement pattern to running",
        "Adjustable resistance and incline for varied intensity",
        "Can match running heart rate zones",
        "Works similar muscle groups with less joint stress",
    )
    default_minutes = 60
