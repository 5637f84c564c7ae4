"""Aqua (deep water) running catalog.

Running-specific pool sessions with a flotation belt. Every land
workout has a pool version, so the buckets mirror the running
libraries: easy, tempo, intervals, long, hills and recovery.
"""

from __future__ import annotations

from dataclasses import replace

from workout_engine.catalog.cross_training.base import CrossTrainingCatalog, entry
from workout_engine.models.context import PersonalizationContext
from workout_engine.models.enums import Library
from workout_engine.models.template import WorkoutTemplate

_L = Library.AQUA_RUNNING


def _aqua(subcategory: str, name: str, effort: tuple[str, str, str], **fields) -> WorkoutTemplate:
    return entry(_L, subcategory, name, effort, **fields)


# Adaptation sessions for athletes new to pool running, in order.
BEGINNER_SESSIONS: tuple[WorkoutTemplate, ...] = (
    WorkoutTemplate(
        name="Introduction to Aqua Running",
        library=_L,
        subcategory="BEGINNER",
        description="First aqua running session - learn technique and build adaptation",
        structure="2 sets x (3-5 min easy aqua running + 10 min rest/practice technique)",
        duration="20-25 minutes",
        notes="Focus on upright posture, smooth leg motion identical to land running. Take breaks as needed.",
    ),
    WorkoutTemplate(
        name="Building Duration",
        library=_L,
        subcategory="BEGINNER",
        description="Second session (3-4 days after first)",
        structure="2 sets x (7-9 min easy aqua running + 5 min rest)",
        duration="25-30 minutes",
        notes="Increase continuous time, maintain good form throughout",
    ),
    WorkoutTemplate(
        name="Extended Efforts",
        library=_L,
        subcategory="BEGINNER",
        description="Third session - approaching normal workout duration",
        structure="2 sets x (12-15 min easy aqua running + 3 min rest)",
        duration="30-35 minutes",
        notes="Nearly ready for full continuous sessions",
    ),
    WorkoutTemplate(
        name="Full Duration",
        library=_L,
        subcategory="BEGINNER",
        description="Ready for continuous sessions matching land running time",
        structure="Single continuous session matching prescribed workout duration",
        notes="You're now adapted! Can match any land running workout duration in the pool",
    ),
)

_PROGRESSION = {
    "beginner": "New to the pool? Work through the four adaptation sessions first: "
    + ", ".join(
        f"{s.name} ({s.duration})" if s.duration else s.name for s in BEGINNER_SESSIONS
    ),
    "intermediate": "Match the duration of the land workout it replaces",
    "advanced": "Match the duration of the land workout it replaces",
}

AQUA_RUNNING_WORKOUTS: dict[str, tuple[WorkoutTemplate, ...]] = {
    "EASY": (
        _aqua(
            "EASY", "Easy Recovery Run",
            ("Zone 1-2 (60-75% max HR)", "Conversational pace, could maintain for hours", "Moderate, natural rhythm"),
            duration="30-45 minutes",
            description="Gentle aerobic effort for recovery and base building",
            structure="30-45 min continuous easy aqua running",
            intensity="easy",
            benefits="Active recovery, maintains aerobic base, zero impact healing",
            technique="Smooth, relaxed leg motion. Upright posture. Arms move naturally like land running.",
            coaching_tips="Focus on smooth, efficient motion. The water resistance will automatically "
            "improve your running form.",
        ),
        _aqua(
            "EASY", "Moderate Easy Run",
            ("Zone 2 (65-75% max HR)", "Comfortable, steady effort", "Natural running cadence in water"),
            duration="45-60 minutes",
            description="Sustained easy aerobic work",
            structure="45-60 min continuous easy aqua running",
            intensity="easy",
            benefits="Aerobic development, endurance maintenance, mental refreshment",
            technique="Maintain upright position, feet directly underneath hips. Consistent smooth rhythm.",
            coaching_tips="Time passes quickly in the pool. Focus on maintaining good form rather than pushing effort.",
        ),
        _aqua(
            "EASY", "Extended Easy Run",
            ("Zone 2 (65-75% max HR)", "Steady, sustainable effort", "Consistent throughout"),
            duration="60-75 minutes",
            description="Long easy aerobic session",
            structure="60-75 min continuous easy aqua running",
            intensity="easy",
            benefits="Extended aerobic stimulus, mental toughness, significant calorie burn",
            technique="Stay relaxed. Break into mental chunks (15min segments) if needed.",
            coaching_tips="Longer than an hour in the pool builds serious mental fortitude. Stay patient and focused.",
        ),
    ),
    "TEMPO": (
        _aqua(
            "TEMPO", "Sustained Tempo Effort",
            (
                "Zone 3-4 (80-90% max HR)",
                "Comfortably hard - you'll 'huff and puff' but can speak short sentences",
                "Noticeably faster than easy pace, crisp leg motion",
            ),
            duration="50-65 minutes",
            description="Continuous tempo effort at lactate threshold",
            structure="10 min easy warmup + 30-40 min @ tempo effort + 10 min easy cooldown",
            intensity="tempo",
            benefits="Lactate threshold development, sustained effort tolerance, race-specific fitness",
            technique="Increase leg turnover noticeably. You should feel your heart rate climb. "
            "Maintain smooth form even when breathing harder.",
            coaching_tips="The tempo portion should feel challenging but sustainable. "
            "If you can't maintain effort, you started too hard.",
        ),
        _aqua(
            "TEMPO", "Tempo Intervals",
            (
                "Zone 3-4 during efforts (80-90% max HR), Zone 1-2 during recovery",
                "Hard but repeatable, recovery feels genuinely easy",
                "Fast during efforts, relaxed during recovery",
            ),
            duration="55-70 minutes",
            description="Repeated tempo efforts with active recovery",
            structure="10 min easy warmup + 3-4 x 8 min @ tempo with 3 min easy recovery + 10 min cooldown",
            intensity="tempo",
            benefits="Threshold power development, recovery management, pacing practice",
            technique="During intervals: crisp leg turnover, strong core engagement. "
            "During recovery: truly easy, let HR drop.",
            coaching_tips="The recovery jogs are crucial. Don't skip them - they teach your body to process lactate.",
        ),
        _aqua(
            "TEMPO", "Progressive Tempo Build",
            (
                "Building from Zone 2 → Zone 3 → Zone 4 → Zone 5",
                "Starting comfortable, finishing hard like final mile of race",
                "Progressive increase in cadence",
            ),
            duration="50-65 minutes",
            description="Gradually increasing effort to simulate race finish",
            structure="10 min easy + 10 min moderate + 15 min tempo + 5 min hard + 10 min easy cooldown",
            intensity="tempo",
            benefits="Graduated effort adaptation, race simulation, finishing strength",
            technique="Smoothly increase leg speed and core tension. Final 5min should feel legitimately hard.",
            coaching_tips="This simulates racing when fatigued. The mental toughness gained here "
            "transfers directly to race day.",
        ),
        _aqua(
            "TEMPO", "Cruise Intervals",
            (
                "Zone 3-4 (80-90% max HR)",
                "Comfortably hard, short recovery keeps you honest",
                "Fast, controlled, repeatable",
            ),
            duration="55-70 minutes",
            description="Classic lactate threshold intervals",
            structure="10 min warmup + 5-6 x 5 min @ tempo with 2 min easy recovery + 10 min cooldown",
            intensity="tempo",
            benefits="Threshold efficiency, mental resilience, pacing consistency",
            technique="Each interval should feel identical in effort. Monitor turnover consistency.",
            coaching_tips="Short recovery means you never fully recover. This is threshold work at its finest.",
        ),
    ),
    "INTERVALS": (
        _aqua(
            "INTERVALS", "Classic 400m Repeats",
            (
                "Zone 4-5 (90-95%+ max HR)",
                "Hard - can't speak during efforts, breathing heavily",
                "Very fast, approaching maximum controlled speed",
            ),
            duration="50-65 minutes",
            description="Short, fast intervals simulating track 400m repeats",
            structure="15 min easy warmup + 8-12 x 90 sec hard with 90 sec easy recovery + 10 min cooldown",
            intensity="intervals",
            benefits="VO2max development, speed endurance, running economy",
            technique="Maximum leg turnover while maintaining control. Arms pump hard. "
            "You'll be breathing very hard.",
            coaching_tips="These are hard! The 90sec recovery is short by design - teaches recovery "
            "under duress. Equal work:rest ratio.",
            running_equivalent="Simulates 8-12 x 400m on track",
        ),
        _aqua(
            "INTERVALS", "800m Repeats",
            (
                "Zone 4-5 (90-95% max HR)",
                "Very hard, last 30 seconds of each interval hurts",
                "Fast and sustained throughout 3 minutes",
            ),
            duration="55-70 minutes",
            description="Medium intervals simulating track 800m repeats",
            structure="15 min easy warmup + 6-8 x 3 min hard with 2 min easy recovery + 10 min cooldown",
            intensity="intervals",
            benefits="VO2max, lactate tolerance, mental toughness",
            technique="Fast sustained leg speed. Control your breathing rhythm. Stay upright even when fatigued.",
            coaching_tips="The 3min duration is long enough to really build lactate. Fight through the discomfort.",
            running_equivalent="Simulates 6-8 x 800m on track",
        ),
        _aqua(
            "INTERVALS", "Pyramid Intervals",
            (
                "Zone 4-5 (90-95% max HR)",
                "Hard throughout, but manageable with varying durations",
                "Varies with interval length",
            ),
            duration="60-75 minutes",
            description="Varied interval lengths building mental adaptability",
            structure="15 min warmup + [1min, 2min, 3min, 4min, 3min, 2min, 1min] hard with equal recovery "
            "+ 10 min cooldown",
            intensity="intervals",
            benefits="Mental engagement, varied pace practice, comprehensive speed work",
            technique="Adjust effort slightly for each interval length. Shorter = faster turnover, "
            "longer = controlled hard effort.",
            coaching_tips="The pyramid keeps your mind engaged. Equal recovery keeps it challenging.",
            running_equivalent="Simulates track pyramid workout (200m-400m-600m-800m-600m-400m-200m)",
        ),
        _aqua(
            "INTERVALS", "Short Speed Bursts",
            (
                "Zone 5 (95%+ max HR)",
                "Very hard, nearly all-out, can't maintain conversation",
                "Maximum controlled turnover",
            ),
            duration="45-60 minutes",
            description="Very short, very fast intervals for speed development",
            structure="15 min easy warmup + 12-16 x 45 sec @ max effort with 90 sec easy recovery + 10 min cooldown",
            intensity="intervals",
            benefits="Top-end speed, neuromuscular power, running economy",
            technique="Explosive leg turnover. Maximum controllable speed. Form breaks down = stop interval.",
            coaching_tips="These are about leg speed and power, not endurance. Quality over quantity - "
            "stop if form deteriorates.",
            running_equivalent="Simulates 12-16 x 200m on track",
        ),
        _aqua(
            "INTERVALS", "1000m Repeats",
            (
                "Zone 4-5 (90-95% max HR)",
                "Hard and sustained, requires mental focus",
                "Fast but controlled, sustainable for 4 minutes",
            ),
            duration="60-75 minutes",
            description="Longer intervals building VO2max endurance",
            structure="15 min warmup + 5-6 x 4 min hard with 3 min easy recovery + 10 min cooldown",
            intensity="intervals",
            benefits="VO2max endurance, mental toughness, race-pace specificity",
            technique="Controlled hard effort. The 4min duration requires pacing discipline - don't go out too fast.",
            coaching_tips="Longer intervals teach you to manage discomfort. The final minute of each "
            "is pure mental training.",
            running_equivalent="Simulates 5-6 x 1000m on track",
        ),
    ),
    "LONG": (
        _aqua(
            "LONG", "Steady Long Run",
            (
                "Zone 2 (65-75% max HR)",
                "Conversational but sustained, should feel moderately challenging by the end",
                "Steady, natural rhythm throughout",
            ),
            duration="75-90 minutes",
            description="Extended aerobic endurance session",
            structure="75-90 min continuous easy-moderate effort",
            intensity="long",
            benefits="Aerobic capacity, mental endurance, fat burning adaptation",
            technique="Stay relaxed. Break into mental segments (every 15-20 minutes). "
            "Focus on smooth, efficient form.",
            coaching_tips="Long runs in the pool build incredible mental toughness. "
            "The monotony is part of the training.",
            running_equivalent="Simulates 10-12 mile long run",
        ),
        _aqua(
            "LONG", "Extended Long Run",
            (
                "Zone 2 (65-75% max HR)",
                "Comfortable early, becomes work in final 30 minutes",
                "Consistent, don't slow down when tired",
            ),
            duration="90-120 minutes",
            description="Marathon-specific endurance work",
            structure="90-120 min continuous easy-moderate effort",
            intensity="long",
            benefits="Maximum aerobic development, glycogen depletion training, mental fortitude",
            technique="Mental breaks every 20 minutes. Stay patient. Maintain form even when fatigued.",
            coaching_tips="Two hours in the pool is serious training. Bring water. Mental game is everything here.",
            running_equivalent="Simulates 13-16 mile long run",
        ),
        _aqua(
            "LONG", "Progressive Long Run",
            (
                "Zone 2 early, building to Zone 3-4 in final portion",
                "Easy early, hard finish simulates race fatigue",
                "Natural early, picking up noticeably in final portion",
            ),
            duration="75-105 minutes",
            description="Long run with building effort in final portion",
            structure="60 min easy + 15-30 min @ moderate-tempo effort + 10 min easy cooldown",
            intensity="long",
            benefits="Endurance + race-specific fatigue resistance, teaches finishing strong",
            technique="Start relaxed. Gradually increase leg speed in final portion. Simulate racing tired.",
            coaching_tips="This teaches you to run hard when tired - critical for race day. "
            "The mental aspect is huge.",
            running_equivalent="Simulates long run with marathon pace finish",
        ),
        _aqua(
            "LONG", "Long Run with Surges",
            (
                "Zone 2 baseline, Zone 3-4 during surges",
                "Mostly comfortable with periodic challenging efforts",
                "Natural rhythm, faster during surges",
            ),
            duration="75-90 minutes",
            description="Long run with periodic hard efforts",
            structure="75-90 min with 6-8 x 2 min @ tempo effort scattered throughout (every 10-12 min), "
            "remainder easy",
            intensity="long",
            benefits="Endurance + speed endurance, race simulation, mental engagement",
            technique="Easy running between surges. Surges are controlled hard - not all-out sprints.",
            coaching_tips="Surges break up the monotony and teach you to change pace mid-workout. "
            "Very race-specific.",
            running_equivalent="Simulates long run with fartlek surges",
        ),
    ),
    "HILLS": (
        _aqua(
            "HILLS", "Pool Hill Repeats",
            (
                "Zone 4-5 (90-95% max HR)",
                "Hard, muscular effort with elevated breathing",
                "Powerful, deliberate, high knee drive",
            ),
            duration="50-65 minutes",
            description="Simulated hill running using increased resistance and exaggerated leg drive",
            structure="15 min easy warmup + 8-10 x 90 sec @ hill effort (high knee drive, powerful push) "
            "with 2 min easy recovery + 10 min cooldown",
            intensity="hills",
            benefits="Leg strength, power development, running economy, glute/hamstring activation",
            technique="Exaggerate knee lift. Drive feet down powerfully. Engage glutes strongly. "
            "Lean slightly forward from ankles.",
            coaching_tips="Focus on power and strength. The water resistance simulates uphill running "
            "perfectly. Feel the glutes working.",
            running_equivalent="Simulates 8-10 x 90-second hill repeats",
        ),
        _aqua(
            "HILLS", "Long Hill Intervals",
            (
                "Zone 4 (85-90% max HR)",
                "Hard and sustained, muscular fatigue is primary limiter",
                "Controlled powerful motion, resist urge to speed up",
            ),
            duration="55-70 minutes",
            description="Extended hill efforts building strength endurance",
            structure="15 min warmup + 5-6 x 3 min @ hill effort with 3 min easy recovery + 10 min cooldown",
            intensity="hills",
            benefits="Sustained power, muscular endurance, mental toughness",
            technique="Maintain powerful knee drive for full 3 minutes. Don't let form deteriorate.",
            coaching_tips="These are long enough to build serious strength endurance. Last minute of each is pure grit.",
            running_equivalent="Simulates 5-6 x 3-minute hill repeats",
        ),
        _aqua(
            "HILLS", "Short Explosive Hills",
            (
                "Zone 5 (95%+ max HR)",
                "Very hard, nearly maximum effort",
                "Explosive, powerful, exaggerated knee lift",
            ),
            duration="45-60 minutes",
            description="Short, powerful hill bursts for explosive strength",
            structure="15 min warmup + 12-15 x 45 sec @ maximum hill effort with 90 sec easy recovery "
            "+ 10 min cooldown",
            intensity="hills",
            benefits="Explosive power, fast-twitch recruitment, neuromuscular development",
            technique="Explosive knee drive, maximum power output. Quality over quantity - stop if power drops.",
            coaching_tips="These are about maximum power production. If you can't maintain explosiveness, "
            "end the workout.",
            running_equivalent="Simulates 12-15 x 45-second steep hill sprints",
        ),
    ),
    "RECOVERY": (
        _aqua(
            "RECOVERY", "Short Recovery Session",
            ("Zone 1 (60-70% max HR)", "Very easy, restorative, could maintain indefinitely", "Slow, relaxed, natural"),
            duration="20-30 minutes",
            description="Gentle active recovery to promote blood flow and healing",
            structure="20-30 min very easy aqua running",
            intensity="recovery",
            benefits="Active recovery, blood flow to damaged tissues, mental refreshment without impact stress",
            technique="Minimal effort. Focus on smooth, relaxed motion. This should feel easy.",
            coaching_tips="The goal is recovery, not fitness. If this feels hard, you're going too fast "
            "or need complete rest instead.",
        ),
        _aqua(
            "RECOVERY", "Extended Recovery Float",
            ("Zone 1 (60-70% max HR)", "Extremely easy, almost meditative", "Minimal, smooth, effortless"),
            duration="30-40 minutes",
            description="Longer gentle session for deep recovery",
            structure="30-40 min very easy aqua running with ultra-relaxed form",
            intensity="recovery",
            benefits="Extended active recovery, mental reset, maintains movement patterns without stress",
            technique="Barely moving. Think 'floating run.' Let the water do the work.",
            coaching_tips="This is recovery disguised as training. The zero impact makes it perfect "
            "for day-after-hard-workout sessions.",
        ),
    ),
}


class AquaRunningCatalog(CrossTrainingCatalog):
    """Deep water running with a flotation belt."""

    library = Library.AQUA_RUNNING
    workouts = AQUA_RUNNING_WORKOUTS
    label = "Pool / Aqua Running"
    description = "Deep end pool running with flotation belt - zero impact, running-specific motion"
    benefits = (
        "Maintains cardiovascular fitness during injury",
        "Strengthens backup muscles",
        "Smooths running gait through resistance",
        "Zero impact on joints",
        "Can replicate any running workout",
    )
    default_minutes = 60

    def beginner_progression(self) -> tuple[WorkoutTemplate, ...]:
        return BEGINNER_SESSIONS

    def personalize(
        self,
        template: WorkoutTemplate,
        context: PersonalizationContext,
        distance: float | None = None,
    ) -> WorkoutTemplate:
        personalized = super().personalize(template, context, distance)
        return replace(personalized, progression=dict(_PROGRESSION))
