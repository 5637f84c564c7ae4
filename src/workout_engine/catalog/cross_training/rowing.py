"""Rowing machine (erg) catalog.

Concept2-style sessions adapted for runners. Settings give stroke rate,
split pace per 500m, damper and power targets; each entry names the
running session it stands in for.
"""

from __future__ import annotations

from workout_engine.catalog.cross_training.base import CrossTrainingCatalog, entry
from workout_engine.models.enums import Library
from workout_engine.models.template import WorkoutTemplate

_L = Library.ROWING


def _row(subcategory: str, name: str, effort: tuple[str, str, str] | None = None, **fields) -> WorkoutTemplate:
    return entry(_L, subcategory, name, effort, **fields)


ROWING_WORKOUTS: dict[str, tuple[WorkoutTemplate, ...]] = {
    "EASY": (
        _row(
            "EASY", "Easy Steady State Row",
            duration="30-45 minutes",
            description="Low-intensity rowing for aerobic base",
            structure="30-45 min continuous at easy effort",
            intensity="easy",
            benefits="Aerobic base building, active recovery, full-body conditioning without impact",
            settings={
                "strokeRate": "20-24 spm (slow and controlled)",
                "pace": "2:15-2:30 per 500m (adjust for fitness)",
                "damper": "3-4",
                "heartRate": "Zone 1-2 (60-75% max HR)",
                "power": "< 70% of max watts",
            },
            technique="Focus on smooth, controlled strokes. Long recovery, powerful drive. "
            "Ratio 1:2 (drive:recovery).",
            coaching_tips="Easy rowing should feel sustainable indefinitely. If breathing hard, "
            "slow down stroke rate or reduce power.",
            running_equivalent="30-45 min easy recovery run",
        ),
        _row(
            "EASY", "Moderate Steady State",
            duration="45-60 minutes",
            description="Sustained aerobic work at moderate effort",
            structure="45-60 min continuous at conversational pace",
            intensity="easy",
            benefits="Aerobic development, endurance building, fat burning",
            settings={
                "strokeRate": "22-26 spm",
                "pace": "2:05-2:20 per 500m",
                "damper": "4-5",
                "heartRate": "Zone 2 (65-75% max HR)",
                "power": "65-75% of max watts",
            },
            technique="Maintain consistent stroke rate. Focus on powerful leg drive. Keep core engaged throughout.",
            coaching_tips="Should feel like you could maintain this for hours. Build aerobic foundation here.",
            running_equivalent="45-60 min easy run",
        ),
        _row(
            "EASY", "Extended Steady State",
            duration="60-90 minutes",
            description="Long aerobic session for endurance",
            structure="60-90 min continuous at easy-moderate effort",
            intensity="easy",
            benefits="Maximum aerobic development, mental endurance, comprehensive conditioning",
            settings={
                "strokeRate": "20-24 spm",
                "pace": "2:10-2:25 per 500m",
                "damper": "3-5",
                "heartRate": "Zone 2 (65-75% max HR)",
                "power": "60-70% of max watts",
            },
            technique="Patience is key. Maintain form even when tired. Break mentally into 15-20 min chunks.",
            coaching_tips="Long rows build serious aerobic capacity. Stay patient. Hydrate throughout.",
            running_equivalent="60-75 min easy run",
        ),
    ),
    "TEMPO": (
        _row(
            "TEMPO", "Sustained Tempo Row",
            ("Zone 3-4 (80-90% max HR)", "Comfortably hard - can speak short sentences", "24-28 spm"),
            duration="45-60 minutes",
            description="Continuous rowing at lactate threshold",
            structure="10 min easy warmup + 20-40 min @ tempo pace (2:00-2:10/500m) + 10 min easy cooldown",
            intensity="tempo",
            benefits="Lactate threshold development, sustained power, mental toughness",
            settings={
                "warmup": "20 spm, 2:20/500m",
                "tempo": "24-28 spm, 1:55-2:10/500m",
                "cooldown": "18-20 spm, 2:30/500m",
                "heartRate": "Zone 3-4 (80-90% max HR)",
                "power": "80-90% of max watts",
            },
            technique="Strong leg drive. Maintain stroke length even under fatigue. Controlled power application.",
            coaching_tips="Tempo pace should be sustainable for 20-40 min. Don't start too hard.",
            running_equivalent="30-40 min tempo run",
        ),
        _row(
            "TEMPO", "Tempo Intervals",
            ("Zone 3-4 (80-90% max HR)", "Hard but repeatable", "26-28 spm during efforts"),
            duration="50-70 minutes",
            description="Repeated threshold efforts with recovery",
            structure="10 min warmup + 4 x 8-10 min @ tempo with 3-4 min easy recovery + 10 min cooldown",
            intensity="tempo",
            benefits="Threshold power, recovery management under fatigue",
            settings={
                "intervals": "26-28 spm, 1:55-2:05/500m",
                "recovery": "20 spm, 2:25/500m",
                "heartRate": "Zone 3-4 during efforts",
                "power": "85-95% max watts",
            },
            technique="Each interval should feel the same. Monitor pace consistency. Recover completely during rest.",
            coaching_tips="Classic threshold training. Each piece should match in pace and effort.",
            running_equivalent="4 x 8 min tempo intervals",
        ),
        _row(
            "TEMPO", "2K Tempo Repeats",
            ("Zone 3-4 (80-90% max HR)", "Hard and sustained, requires pacing", "26-30 spm"),
            duration="45-65 minutes",
            description="Race-distance tempo work",
            structure="10 min warmup + 3-4 x 2000m @ tempo effort with 5 min easy recovery + 10 min cooldown",
            intensity="tempo",
            benefits="Sustained power at race pace, mental toughness, pacing practice",
            settings={
                "intervals": "26-30 spm, 1:50-2:00/500m",
                "recovery": "18-20 spm, 2:30/500m",
                "heartRate": "Zone 3-4",
                "power": "85-95% max watts",
            },
            technique="2000m is the Olympic rowing race distance. Pace yourself - don't blow up early.",
            coaching_tips="2K repeats are classic rowing threshold work. Focus on even pacing.",
            running_equivalent="Mile repeats at threshold",
        ),
    ),
    "INTERVALS": (
        _row(
            "INTERVALS", "500m Repeats",
            ("Zone 4-5 (90-95% max HR)", "Very hard, breathing heavily", "30-36 spm"),
            duration="45-60 minutes",
            description="Classic track-style intervals",
            structure="10 min warmup + 8-12 x 500m @ hard effort with 2-3 min easy recovery + 10 min cooldown",
            intensity="intervals",
            benefits="VO2max development, power output, speed endurance",
            settings={
                "intervals": "30-36 spm, 1:35-1:50/500m",
                "recovery": "20 spm, 2:30/500m",
                "heartRate": "Zone 4-5 (90-95%+ max HR)",
                "power": "100-120% max watts",
            },
            technique="Explosive leg drive. Maximum power output. Maintain stroke length despite high rate.",
            coaching_tips="500m is rowing's version of 400m run. Hard but manageable. Focus on power and speed.",
            running_equivalent="8-12 x 400m track repeats",
        ),
        _row(
            "INTERVALS", "1000m Repeats",
            ("Zone 4-5 (90-95% max HR)", "Very hard and sustained, requires pacing", "28-32 spm"),
            duration="50-70 minutes",
            description="Longer intervals building VO2max endurance",
            structure="10 min warmup + 5-6 x 1000m @ hard effort with 3-4 min recovery + 10 min cooldown",
            intensity="intervals",
            benefits="VO2max endurance, lactate tolerance, mental toughness",
            settings={
                "intervals": "28-32 spm, 1:45-1:58/500m",
                "recovery": "18-20 spm, 2:30/500m",
                "heartRate": "Zone 4-5 (90-95% max HR)",
                "power": "95-110% max watts",
            },
            technique="Pacing critical - don't blow up first 500m. Maintain powerful strokes throughout.",
            coaching_tips="1K repeats build serious power endurance. Last 250m is mental training.",
            running_equivalent="5-6 x 1000m track repeats",
        ),
        _row(
            "INTERVALS", "Pyramid Intervals",
            ("Zone 4-5 (90-95% max HR)", "Varies with distance, all hard", "Adjust for distance"),
            duration="55-70 minutes",
            description="Varied distance intervals for engagement",
            structure="10 min warmup + [250m-500m-750m-1000m-750m-500m-250m] hard with 2-4 min recovery "
            "+ 10 min cooldown",
            intensity="intervals",
            benefits="Mental engagement, varied power output, comprehensive speed work",
            settings={
                "intervals": "30-36 spm for short, 28-32 for long; pace varies by distance",
                "recovery": "20 spm, 2:30/500m, 2-4 min based on distance",
                "heartRate": "Zone 4-5",
                "power": "100-120% max watts",
            },
            technique="Shorter pieces = higher stroke rate and power. Longer = controlled high power.",
            coaching_tips="Pyramid keeps mind engaged. Challenge yourself on the 250s!",
            running_equivalent="Track pyramid workout",
        ),
        _row(
            "INTERVALS", "1-Minute Max Efforts",
            ("Zone 5 (95%+ max HR)", "All-out, gasping", "32-40 spm - as high as controllable"),
            duration="40-55 minutes",
            description="Short explosive intervals",
            structure="10 min warmup + 10 x 1 min @ maximum effort with 2 min easy recovery + 10 min cooldown",
            intensity="intervals",
            benefits="Explosive power, anaerobic capacity, maximum watt development",
            settings={
                "intervals": "32-40 spm, 1:25-1:40/500m, maximum power",
                "recovery": "18 spm, slow, minimal power",
                "heartRate": "Zone 5 (95%+ max HR)",
            },
            technique="Maximum power from start. Explosive leg drive. High stroke rate but maintain form.",
            coaching_tips="These are brutal. Quality over quantity. If power drops significantly, stop workout.",
            running_equivalent="10 x 400m hard",
        ),
        _row(
            "INTERVALS", "2-Minute Power Intervals",
            ("Zone 4-5 (90-95% max HR)", "Very hard, final 30 sec hurts", "30-34 spm"),
            duration="45-60 minutes",
            description="Medium intervals at high power",
            structure="10 min warmup + 8 x 2 min @ very hard effort with 2-3 min recovery + 10 min cooldown",
            intensity="intervals",
            benefits="Power endurance, VO2max, lactate tolerance",
            settings={
                "intervals": "30-34 spm, 1:40-1:52/500m",
                "recovery": "20 spm, 2:30/500m",
                "heartRate": "Zone 4-5 (90-95% max HR)",
                "power": "105-120% max watts",
            },
            technique="2 minutes is long enough to build serious lactate. Maintain power output throughout.",
            coaching_tips="Classic VO2max work. Don't fade in final 30 seconds - finish strong.",
            running_equivalent="8 x 800m intervals",
        ),
    ),
    "LONG": (
        _row(
            "LONG", "10K Row",
            ("Zone 2 (65-75% max HR)", "Moderate, sustainable", "Steady 22-26 spm"),
            duration="45-55 minutes",
            description="Classic long rowing distance",
            structure="10K (10,000 meters) continuous at steady effort",
            intensity="long",
            benefits="Aerobic capacity, mental endurance, pacing practice",
            settings={
                "strokeRate": "22-26 spm",
                "pace": "2:05-2:15/500m (adjust for fitness)",
                "damper": "4-5",
                "heartRate": "Zone 2 (65-75% max HR)",
                "power": "70-80% max watts",
            },
            technique="Pacing is everything. Even splits. Stay patient. Final 2K can be slightly faster.",
            coaching_tips="10K is classic rowing endurance distance. Break into 2K chunks mentally. "
            "Monitor your split pace.",
            running_equivalent="10-12 mile long run",
        ),
        _row(
            "LONG", "Half Marathon Row",
            ("Zone 2 (65-75% max HR)", "Moderate, becomes challenging late", "Consistent 20-24 spm"),
            duration="75-95 minutes",
            description="Extended endurance row (21,097 meters)",
            structure="Half marathon distance (21,097m) at steady moderate effort",
            intensity="long",
            benefits="Maximum aerobic development, mental fortitude, glycogen management",
            settings={
                "strokeRate": "20-24 spm",
                "pace": "2:08-2:18/500m",
                "damper": "3-5",
                "heartRate": "Zone 2 (65-75% max HR)",
                "power": "65-75% max watts",
            },
            technique="Ultra-patient pacing. Fuel every 30-45 min. Stay mentally engaged by breaking into 5K segments.",
            coaching_tips="This is serious endurance work. Bring water and fuel. Mental game is critical.",
            running_equivalent="Half marathon distance run",
        ),
        _row(
            "LONG", "Progressive 8K",
            ("Zone 2 building to Zone 4", "Easy early, hard finish", "Building throughout"),
            duration="35-45 minutes",
            description="8K row with building effort",
            structure="8000m with progressive effort: first 4K easy, next 2K moderate, final 2K hard",
            intensity="long",
            benefits="Negative split practice, finishing power, race simulation",
            settings={
                "first4K": "22 spm, 2:15/500m",
                "middle2K": "24 spm, 2:05/500m",
                "final2K": "26-28 spm, 1:55/500m",
            },
            technique="Start conservatively. Build power and rate gradually. Final 2K should feel like racing.",
            coaching_tips="Teaches you to negative split and finish strong. Resist urge to go hard early.",
            running_equivalent="Long run with progression",
        ),
    ),
    "POWER": (
        _row(
            "POWER", "Power Strokes",
            ("Spikes to Zone 5 briefly", "All-out maximum effort for 10 strokes", "Maximum while maintaining form"),
            duration="40-55 minutes",
            description="Maximum power output for brief periods",
            structure="10 min warmup + 10-12 x 10 strokes @ maximum power with 2 min easy recovery + 10 min cooldown",
            intensity="power",
            benefits="Explosive power, neuromuscular development, maximum watt production",
            settings={
                "strokes": "Maximum controllable rate, sub-1:20/500m, absolute max power",
                "recovery": "18 spm, easy, 2 min",
            },
            technique="Explosive from first stroke. Maximum leg drive. Form must hold - if technique breaks, stop.",
            coaching_tips="These build explosive power that transfers to running. Quality is everything - "
            "full recovery between sets.",
            running_equivalent="Sprint drills, explosive power work",
        ),
        _row(
            "POWER", "30-Second Power Bursts",
            ("Zone 5 (95%+ max HR)", "Maximum sustainable effort for 30 sec", "Very high, controlled"),
            duration="40-55 minutes",
            description="Short maximum efforts",
            structure="10 min warmup + 8-10 x 30 sec @ max effort with 3 min recovery + 10 min cooldown",
            intensity="power",
            benefits="Anaerobic power, explosive strength, running-specific power transfer",
            settings={
                "bursts": "36-44 spm, 1:15-1:30/500m, maximum power",
                "recovery": "18-20 spm, easy",
            },
            technique="All-out from start. Maximum power production. Long recovery allows quality.",
            coaching_tips="30 seconds is long enough to really work anaerobic system. Push through the burn.",
            running_equivalent="200m sprint repeats",
        ),
    ),
    "RECOVERY": (
        _row(
            "RECOVERY", "Recovery Row",
            ("Zone 1 (60-70% max HR)", "Very easy, restorative", "Slow and controlled"),
            duration="20-30 minutes",
            description="Very easy rowing for active recovery",
            structure="20-30 min continuous at minimal effort",
            intensity="recovery",
            benefits="Blood flow without stress, active recovery, maintains movement patterns",
            settings={
                "strokeRate": "16-20 spm (very slow)",
                "pace": "2:30-2:45/500m",
                "damper": "3",
                "heartRate": "Zone 1 (60-70% max HR)",
                "power": "< 60% max watts",
            },
            technique="Minimal effort. Focus on perfect form. This should feel easy.",
            coaching_tips="If this feels hard, you need complete rest. Goal is recovery, not fitness.",
            running_equivalent="20-30 min recovery jog",
        ),
        _row(
            "RECOVERY", "Extended Recovery Row",
            ("Zone 1 (60-70% max HR)", "Extremely easy", "Relaxed and natural"),
            duration="30-40 minutes",
            description="Longer gentle row for deep recovery",
            structure="30-40 min continuous very easy rowing",
            intensity="recovery",
            benefits="Extended active recovery, full-body movement without impact",
            settings={
                "strokeRate": "18-22 spm",
                "pace": "2:25-2:40/500m",
                "damper": "3-4",
                "heartRate": "Zone 1 (60-70% max HR)",
            },
            technique="Smooth, effortless strokes. Focus on technique perfection.",
            coaching_tips="Perfect for day-after-hard-workout. Promotes recovery while maintaining fitness.",
            running_equivalent="30-40 min easy recovery run",
        ),
    ),
}


class RowingCatalog(CrossTrainingCatalog):
    """Rowing machine sessions with stroke-rate and split targets."""

    library = Library.ROWING
    workouts = ROWING_WORKOUTS
    label = "Rowing Machine"
    description = "Full-body power-based cardio using rowing motion"
    benefits = (
        "Full-body cardiovascular workout",
        "Power-based training similar to running",
        "Low impact on running-specific joints",
        "Builds posterior chain strength (glutes, hamstrings, back)",
        "Excellent for maintaining fitness during injury",
        "Teaches explosive power application",
    )
    default_minutes = 50
