"""Swimming catalog.

Lap-pool sessions for runners. Volume is given in yards; effort is set
by feel since heart rate runs 10-15 bpm lower than on land. Each entry
keeps its set breakdown (warmup, main set, cooldown) as examples.
"""

from __future__ import annotations

from workout_engine.catalog.cross_training.base import CrossTrainingCatalog, entry
from workout_engine.models.enums import Library
from workout_engine.models.template import WorkoutTemplate

_L = Library.SWIMMING


def technique_text(focus: str, breathing: str, effort: str) -> str:
    """Render the stroke focus, breathing pattern and effort as one cue."""
    parts = [focus.rstrip("."), f"Breathing: {breathing.rstrip('.')}", f"Effort: {effort.rstrip('.')}"]
    return ". ".join(parts) + "."


def _swim(
    subcategory: str,
    name: str,
    effort: tuple[str, str, str] | None = None,
    technique: tuple[str, str, str] | str | None = None,
    sets: tuple[tuple[str, str], ...] = (),
    **fields,
) -> WorkoutTemplate:
    if isinstance(technique, tuple):
        technique = technique_text(*technique)
    if technique:
        fields["technique"] = technique
    if sets:
        fields["examples"] = tuple(f"{label}: {text}" for label, text in sets)
    return entry(_L, subcategory, name, effort, **fields)


SWIMMING_WORKOUTS: dict[str, tuple[WorkoutTemplate, ...]] = {
    "EASY": (
        _swim(
            "EASY", "Easy Aerobic Swim",
            ("Zone 1-2 (60-75% max HR)", "Easy, could maintain conversation if able to speak",
             "Relaxed and controlled"),
            ("Smooth, efficient stroke. Don't fight the water.", "Controlled, rhythmic breathing",
             "Should feel easy, sustainable indefinitely"),
            (
                ("Warmup", "200-400 yards easy mixed strokes"),
                ("Main", "800-1200 yards freestyle at conversational effort"),
                ("Cooldown", "200 yards easy backstroke or breaststroke"),
            ),
            duration="20-40 minutes",
            description="Continuous easy swimming for aerobic base",
            structure="10 min drills/warmup + 20-30 min continuous easy swimming (vary strokes) "
            "+ 5-10 min easy cooldown",
            intensity="easy",
            benefits="Aerobic base, active recovery for running, improves breathing and lung capacity",
            coaching_tips="Focus on technique. If you're exhausted, you're swimming too hard or need technique work.",
            running_equivalent="30-40 min easy recovery run",
        ),
        _swim(
            "EASY", "Moderate Aerobic Swim",
            ("Zone 2 (65-75% max HR)", "Comfortable but sustained effort", "Controlled, rhythmic"),
            ("Efficient stroke mechanics, bilateral breathing", "Every 3 or 5 strokes for balance",
             "Moderate, sustainable"),
            (
                ("Warmup", "400 yards (200 free, 100 back, 100 breast)"),
                ("Main", "1200-1600 yards (1000 freestyle, mix in 200-400 other strokes for variety)"),
                ("Cooldown", "200-300 yards easy choice of stroke"),
            ),
            duration="30-45 minutes",
            description="Sustained aerobic work with varied strokes",
            structure="10 min drills + 30-40 min steady swimming (mostly freestyle, mix in other strokes) "
            "+ 5-10 min cooldown",
            intensity="easy",
            benefits="Cardiovascular endurance, full-body conditioning, breathing development",
            coaching_tips="Varying strokes gives different muscles a break. Don't skip warmup - "
            "prevents shoulder issues.",
            running_equivalent="40-45 min easy run",
        ),
        _swim(
            "EASY", "Extended Aerobic Swim",
            ("Zone 2 (65-75% max HR)", "Sustainable, becomes mentally challenging in final portion",
             "Steady throughout"),
            ("Maintain efficiency even when fatigued", "Consistent pattern throughout",
             "Easy-moderate, mentally engaging"),
            (
                ("Warmup", "400-600 yards mixed strokes with drills"),
                ("Main", "2000-2500 yards (alternate 400 free, 200 back/breast, repeat)"),
                ("Cooldown", "300-400 yards easy"),
            ),
            duration="40-60 minutes",
            description="Long aerobic swim for endurance",
            structure="10 min drills + 45-50 min continuous varied swimming + 5-10 min cooldown",
            intensity="easy",
            benefits="Extended aerobic stimulus, mental endurance in water, active recovery",
            coaching_tips="Long swims build mental toughness. Break into chunks mentally. "
            "Vary strokes to stay engaged.",
            running_equivalent="60 min easy run",
        ),
    ),
    "TEMPO": (
        _swim(
            "TEMPO", "Tempo Swim",
            ("Zone 3-4 (80-90% max HR)", "Comfortably hard, breathing elevated but controlled",
             "Every 2-3 strokes"),
            ("Maintain stroke efficiency despite elevated effort", "More frequent than easy pace",
             "Comfortably hard, breathing elevated"),
            (
                ("Warmup", "400 yards (200 free, 100 back, 100 drills)"),
                ("Tempo", "800-1000 yards freestyle @ tempo effort (or 4 x 200 with 20 sec rest)"),
                ("Cooldown", "400 yards easy mixed"),
            ),
            duration="35-50 minutes",
            description="Sustained harder effort for threshold development",
            structure="10 min warmup + 15-20 min @ tempo effort (80% effort) + 10 min easy cooldown",
            intensity="tempo",
            benefits="Lactate threshold, sustained effort tolerance, cardiovascular fitness",
            coaching_tips="Tempo swimming teaches breathing control under duress. Don't let stroke fall apart.",
            running_equivalent="30 min tempo run",
        ),
        _swim(
            "TEMPO", "Threshold Intervals",
            ("Zone 3-4 (80-90% max HR)", "Hard, breathing elevated, short rest keeps it honest",
             "Every 2-3 strokes"),
            ("Consistent stroke count per length across all intervals", "Controlled despite effort",
             "Hard but repeatable"),
            (
                ("Warmup", "400-600 yards easy mixed with drills"),
                ("Main", "6-8 x 100 yards @ 85% effort with 15-20 sec rest between"),
                ("Cooldown", "300-400 yards easy"),
            ),
            duration="40-55 minutes",
            description="Repeated threshold efforts with brief recovery",
            structure="10 min warmup + 6 x 100 yards @ threshold with 15-20 sec rest + 10 min cooldown",
            intensity="tempo",
            benefits="Threshold efficiency, recovery management, pacing practice",
            coaching_tips="Short rest = never fully recovered. Classic threshold work. "
            "Monitor stroke count to ensure form holds.",
            running_equivalent="Cruise intervals (6 x 5 min tempo)",
        ),
    ),
    "INTERVALS": (
        _swim(
            "INTERVALS", "Sprint Intervals - 25s",
            ("Zone 5 (95%+ max HR)", "Very hard, nearly all-out for 25 yards",
             "Controlled, minimal breaths during sprint"),
            ("Maximum sustainable speed while maintaining technique", "Minimal during sprint (breath control)",
             "Very hard for 25 yards"),
            (
                ("Warmup", "400-600 yards easy with speed drills"),
                ("Sprints", "12-16 x 25 yards @ 90% with 20-30 sec rest"),
                ("Cooldown", "400 yards easy"),
            ),
            duration="35-50 minutes",
            description="Short fast efforts for speed and power",
            structure="10 min warmup + 12-16 x 25 yards @ 90% effort with 20-30 sec rest + 10 min cooldown",
            intensity="intervals",
            benefits="VO2max, speed, explosive power, anaerobic capacity",
            coaching_tips="25 yards is short enough to go hard. Focus on explosive speed off walls. "
            "Technique matters!",
            running_equivalent="200m sprint repeats",
        ),
        _swim(
            "INTERVALS", "Medium Intervals - 50s",
            ("Zone 4-5 (90-95% max HR)", "Hard, breathing elevated, repeatable", "Every 2-3 strokes"),
            ("Fast but controlled - technique holds throughout", "Every 2-3 strokes, controlled",
             "Hard for full 50 yards"),
            (
                ("Warmup", "600 yards (400 easy, 200 drills/build)"),
                ("Intervals", "10-15 x 50 yards @ 80% effort with 20-30 sec rest"),
                ("Cooldown", "400 yards easy"),
            ),
            duration="40-55 minutes",
            description="Classic interval training at 50-yard distance",
            structure="10 min warmup + 10-15 x 50 yards fast (80% max) with 20-30 sec rest + 10 min cooldown",
            intensity="intervals",
            benefits="VO2max development, speed endurance, breathing control",
            coaching_tips="50 yards is perfect interval distance. Long enough to work, "
            "short enough to maintain quality.",
            running_equivalent="400m interval repeats",
        ),
        _swim(
            "INTERVALS", "100-Yard Intervals",
            ("Zone 4-5 (90-95% max HR)", "Very hard, requires pacing discipline",
             "Every 2-3 strokes, controlled"),
            ("Maintain stroke efficiency throughout 100 yards", "Consistent pattern, don't panic breathe",
             "Controlled hard effort"),
            (
                ("Warmup", "600-800 yards easy mixed with drills"),
                ("Intervals", "8-12 x 100 yards @ 80% effort with 30 sec rest"),
                ("Cooldown", "400 yards easy"),
            ),
            duration="45-60 minutes",
            description="Longer intervals building VO2max endurance",
            structure="10 min warmup + 8-12 x 100 yards @ 80% with 30 sec rest + 10 min cooldown",
            intensity="intervals",
            benefits="VO2max endurance, lactate tolerance, mental toughness",
            coaching_tips="100s require pacing. Don't blow up first 25 yards. "
            "Final 25 should hurt but technique holds.",
            running_equivalent="800m interval repeats",
        ),
        _swim(
            "INTERVALS", "Descending Ladder",
            ("Zone 4-5 (90-95% max HR)", "Varies with distance, all feel hard", "Adjust with distance"),
            ("Adjust effort slightly for distance - shorter = faster", "Varies with distance",
             "Hard throughout"),
            (
                ("Warmup", "600-800 yards easy with drills"),
                ("Pyramid", "200-150-100-50-100-150-200 @ 80-90% effort with 30-45 sec rest"),
                ("Cooldown", "400-600 yards easy"),
            ),
            duration="45-60 minutes",
            description="Pyramid intervals for mental engagement",
            structure="10 min warmup + [200-150-100-50-100-150-200] yards hard with 30-45 sec rest "
            "+ 10 min cooldown",
            intensity="intervals",
            benefits="Mental engagement, varied pace practice, comprehensive speed work",
            coaching_tips="Pyramid keeps mind engaged. Shorter distances allow faster swimming. "
            "Challenge yourself on the 50!",
            running_equivalent="Track pyramid workout",
        ),
    ),
    "LONG": (
        _swim(
            "LONG", "Continuous Distance Swim",
            ("Zone 2 (65-75% max HR)", "Moderate, mentally challenging in final portion", "Steady, controlled"),
            ("Efficiency and patience - long swim is mental", "Bilateral for balance, consistent pattern",
             "Moderate, sustainable"),
            (
                ("Warmup", "400-600 yards mixed with drills"),
                ("Main", "2000-3000 yards (vary: 500 free, 200 back, 300 free, 200 breast, repeat)"),
                ("Cooldown", "400 yards easy"),
            ),
            duration="45-60 minutes",
            description="Long continuous swim for endurance",
            structure="10 min warmup/drills + 2000-3000 yards continuous varied swimming + 10 min cooldown",
            intensity="long",
            benefits="Aerobic capacity, mental endurance, full-body conditioning",
            coaching_tips="Long swims are as much mental as physical. Break into chunks. "
            "Vary strokes to stay fresh.",
            running_equivalent="60-75 min long run",
        ),
        _swim(
            "LONG", "Extended Distance Swim",
            ("Zone 2 (65-75% max HR)", "Comfortable early, requires mental discipline late",
             "Controlled, rhythmic"),
            ("Maintain form even when tired - count strokes to ensure efficiency",
             "Consistent throughout, bilateral recommended", "Moderate, patient"),
            (
                ("Warmup", "600-800 yards mixed with drills"),
                ("Main", "3500-5000 yards (create sets: 10 x 400 with varied strokes, or continuous)"),
                ("Cooldown", "500-600 yards easy"),
            ),
            duration="60-90 minutes",
            description="Very long swim for maximum aerobic development",
            structure="10-15 min warmup + 3500-5000 yards continuous + 10-15 min cooldown",
            intensity="long",
            benefits="Maximum aerobic development, mental fortitude, comprehensive conditioning",
            coaching_tips="This is serious aerobic training. Stay patient. Focus on efficiency over speed. "
            "Mental game is key.",
            running_equivalent="90-120 min long run",
        ),
        _swim(
            "LONG", "Negative Split Distance",
            ("Zone 2 building to Zone 3-4", "Easy early, hard finish", "Controlled early, faster late"),
            ("Start conservatively, build effort gradually",
             "More frequent in second half as effort increases", "Building from easy to moderate-hard"),
            (
                ("Warmup", "600 yards easy with drills"),
                ("Main", "2000-2500 yards (first 1000-1250 @ easy, second half @ moderate-hard)"),
                ("Cooldown", "400 yards easy"),
            ),
            duration="45-60 minutes",
            description="Long swim with faster second half",
            structure="10 min warmup + 2000-2500 yards (first half easy, second half moderate-hard) "
            "+ 10 min cooldown",
            intensity="long",
            benefits="Pacing practice, finishing strength, mental toughness",
            coaching_tips="Negative splits teach you to pace and finish strong. Resist urge to go hard early.",
            running_equivalent="Long run with progression",
        ),
    ),
    "RECOVERY": (
        _swim(
            "RECOVERY", "Recovery Swim",
            ("Zone 1 (60-70% max HR)", "Very easy, restorative", "Relaxed and comfortable"),
            ("Minimal effort, maximum relaxation", "Relaxed, no breathlessness", "Very easy"),
            (("Main", "800-1200 yards ultra-easy (mix freestyle, backstroke, breaststroke)"),),
            duration="20-30 minutes",
            description="Very easy swimming for active recovery",
            structure="20-30 min continuous very easy mixed strokes",
            intensity="recovery",
            benefits="Active recovery for running, promotes blood flow, maintains feel for water",
            coaching_tips="Perfect day-after-hard-workout. Legs get a break, cardio system stays engaged. "
            "Should feel refreshing.",
            running_equivalent="20-30 min recovery jog",
        ),
        _swim(
            "RECOVERY", "Extended Recovery Swim",
            ("Zone 1 (60-70% max HR)", "Extremely easy, almost meditative", "Relaxed"),
            ("Smooth, effortless strokes", "Natural, comfortable", "Minimal"),
            (("Main", "1200-1600 yards ultra-easy mixed strokes with emphasis on drills and technique work"),),
            duration="30-40 minutes",
            description="Longer gentle swim for deep recovery",
            structure="30-40 min continuous very easy varied swimming",
            intensity="recovery",
            benefits="Extended active recovery without running impact, mental reset",
            coaching_tips="Great for tired runners. Water supports body weight - zero impact. "
            "Focus on technique and relaxation.",
            running_equivalent="30-40 min easy recovery run",
        ),
    ),
    "TECHNIQUE": (
        _swim(
            "TECHNIQUE", "Drill-Focused Session",
            duration="30-45 minutes",
            description="Technique drills for stroke improvement",
            structure="Continuous 30-45 min of mixed drills and easy swimming",
            intensity="easy",
            benefits="Improved stroke efficiency, better body position, injury prevention",
            technique="Rotate through 6-8 different drills, 50-100 yards each, with easy swimming between",
            examples=(
                "Catch-up drill (one arm at a time)",
                "Fingertip drag (high elbow recovery)",
                "Side-kick drill (rotation practice)",
                "Fist swimming (feel for water)",
                "6-kick switch (body rotation)",
                "Sculling drills (hand position awareness)",
            ),
            coaching_tips="Drills improve efficiency more than just swimming hard. "
            "Better technique = easier swimming = more sustainable training.",
            running_equivalent="Running drills and form work",
        ),
    ),
}


class SwimmingCatalog(CrossTrainingCatalog):
    """Lap swimming sessions with per-set breakdowns."""

    library = Library.SWIMMING
    workouts = SWIMMING_WORKOUTS
    label = "Swimming"
    description = "Full-body cardiovascular workout, different movement pattern from running"
    benefits = (
        "Low-impact full-body cardio",
        "Works different muscle groups than running",
        "Improves lung capacity and breathing control",
        "Excellent for injury recovery",
        "Can maintain aerobic fitness",
        "Active recovery for tired legs",
    )
    default_minutes = 40
