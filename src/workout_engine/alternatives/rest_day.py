"""Fixed option set offered when the scheduled workout is a rest day."""

from __future__ import annotations

from workout_engine.formatting import format_equipment_name
from workout_engine.models.alternatives import AlternativeCategory, WorkoutOption
from workout_engine.models.context import PersonalizationContext

LIGHT_EASY = (
    WorkoutOption(
        name="Easy 20-Minute Jog",
        description="Very light conversational pace - just shake out the legs",
        duration="20 minutes",
        intensity="Very Easy",
        reason="feeling energetic",
        benefits="Promotes blood flow and maintains routine",
    ),
    WorkoutOption(
        name="Walk-Run Intervals",
        description="1 min easy jog, 2 min walk - perfect rest day movement",
        duration="25-30 minutes",
        intensity="Recovery",
        reason="want light movement",
        benefits="Active recovery without stress",
    ),
    WorkoutOption(
        name="Easy Mile",
        description="Just one easy mile to keep the legs moving",
        duration="8-12 minutes",
        intensity="Very Easy",
        reason="minimal time commitment",
        benefits="Maintains routine without fatigue",
    ),
)

ACTIVE_RECOVERY = (
    WorkoutOption(
        name="Dynamic Stretching Session",
        description="20 minutes of movement-based stretches and mobility work",
        duration="20 minutes",
        intensity="Recovery",
        reason="improve flexibility",
        benefits="Enhances recovery and prevents injury",
    ),
    WorkoutOption(
        name="Yoga Flow",
        description="Gentle yoga focused on hip flexibility and core strength",
        duration="25-30 minutes",
        intensity="Recovery",
        reason="mental relaxation",
        benefits="Flexibility, balance, and mental clarity",
    ),
    WorkoutOption(
        name="Foam Rolling + Light Movement",
        description="15 min foam rolling + 10 min easy walking",
        duration="25 minutes",
        intensity="Recovery",
        reason="muscle maintenance",
        benefits="Improves tissue quality and circulation",
    ),
)

CROSS_TRAINING = (
    WorkoutOption(
        name="Swimming (Easy)",
        description="20-30 minutes easy swimming - excellent for recovery",
        duration="20-30 minutes",
        intensity="Easy",
        reason="full body, low impact",
        benefits="Complete body workout with minimal stress",
    ),
    WorkoutOption(
        name="Elliptical Easy",
        description="25 minutes easy effort on elliptical machine",
        duration="25 minutes",
        intensity="Easy",
        reason="gym alternative",
        benefits="Cardio maintenance without impact",
    ),
    WorkoutOption(
        name="Strength Training (Light)",
        description="Light strength work focusing on running-specific muscles",
        duration="30-40 minutes",
        intensity="Light",
        reason="strength maintenance",
        benefits="Maintains strength without fatigue",
    ),
)

SHORT_SWEET = (
    WorkoutOption(
        name="15-Minute Walk",
        description="Brisk walk around the neighborhood - minimal time commitment",
        duration="15 minutes",
        intensity="Very Easy",
        reason="time constraint",
        benefits="Mental break and light movement",
    ),
    WorkoutOption(
        name="10-Minute Core Work",
        description="Quick core strengthening session - runner-specific exercises",
        duration="10 minutes",
        intensity="Light",
        reason="minimal time",
        benefits="Core strength for better running",
    ),
    WorkoutOption(
        name="5-Minute Stretch",
        description="Quick targeted stretching for tight spots",
        duration="5 minutes",
        intensity="Recovery",
        reason="very minimal time",
        benefits="Maintains flexibility",
    ),
)


def equipment_options(equipment: str) -> tuple[WorkoutOption, ...]:
    """Easy stand-up bike sessions named after the athlete's equipment."""
    label = format_equipment_name(equipment)
    return (
        WorkoutOption(
            name=f"Easy {label} Spin",
            description="Light 30-minute ride at conversational effort",
            duration="30 minutes",
            intensity="Easy",
            category="bike",
            equipment=equipment,
            equipment_specific=True,
            reason="low impact variety",
            benefits="Aerobic maintenance without running impact",
        ),
        WorkoutOption(
            name=f"Recovery {label} Ride",
            description="Very easy 20-minute ride focusing on leg turnover",
            duration="20 minutes",
            intensity="Recovery",
            category="bike",
            equipment=equipment,
            equipment_specific=True,
            reason="active recovery",
            benefits="Promotes blood flow and recovery",
        ),
    )


def rest_day_categories(context: PersonalizationContext) -> list[AlternativeCategory]:
    """The rest-day category set; the equipment category needs configured equipment."""
    categories = [
        AlternativeCategory(
            id="light-easy",
            title="😌 Light & Easy",
            subtitle="Gentle movement that won't interfere with recovery",
            icon="🌱",
            options=LIGHT_EASY,
        ),
        AlternativeCategory(
            id="active-recovery",
            title="🔄 Active Recovery",
            subtitle="Movement that actually helps recovery",
            icon="♻️",
            options=ACTIVE_RECOVERY,
        ),
    ]
    if context.equipment:
        categories.append(AlternativeCategory(
            id="equipment-easy",
            title=f"🚴‍♂️ Easy {format_equipment_name(context.equipment)}",
            subtitle="Low-impact equipment workout",
            icon="⚡",
            options=equipment_options(context.equipment),
        ))
    categories.append(AlternativeCategory(
        id="cross-training",
        title="🏊‍♂️ Cross-Training",
        subtitle="Non-running activities for variety",
        icon="🎯",
        options=CROSS_TRAINING,
    ))
    categories.append(AlternativeCategory(
        id="short-sweet",
        title="⏰ Short & Sweet",
        subtitle="15-30 minutes max - just enough to move",
        icon="⚡",
        options=SHORT_SWEET,
    ))
    return categories
