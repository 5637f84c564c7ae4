"""Brick (run + stand-up bike) workout catalog and generator.

Bricks combine running and stand-up bike legs with equipment
transitions in between. The generator filters a brick type by
difficulty, falls back to the whole type when nothing matches, and
picks one entry at random.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from workout_engine.catalog.base import CatalogProvider
from workout_engine.models.context import PersonalizationContext
from workout_engine.models.enums import BrickType, Library
from workout_engine.models.template import BrickSegment, EquipmentNote, WorkoutTemplate
from workout_engine.random_source import RandomSource, pick

logger = logging.getLogger(__name__)

FEATURE_TAG = "🧱 Run+Bike Combination"

EQUIPMENT_TRANSITIONS: dict[str, EquipmentNote] = {
    "cyclete": EquipmentNote(
        setup_time="30-45 seconds",
        transition_notes="Quick height adjustment, similar running position",
        advantages="Minimal setup, running-like feel",
    ),
    "elliptigo": EquipmentNote(
        setup_time="60-90 seconds",
        transition_notes="Stride adjustment, gear selection",
        advantages="Full body engagement after running",
    ),
}

BRICK_SAFETY = (
    "Practice transitions in training before using in workouts",
    "Stay hydrated during equipment changes",
    "Start with longer transition times, speed up as you improve",
    "Listen to your body - brick workouts are demanding",
)

BRICK_PACES: dict[str, str] = {
    "easy": "Conversational pace, 65-75% Max HR",
    "tempo": "Comfortably hard, 85-90% Max HR",
    "hard": "Hard effort, 90-95% Max HR",
    "recovery": "Very easy, 60-70% Max HR",
}

_ALTERNATIVES: dict[str, str] = {
    "hotWeather": "Extend transition times for hydration and cooling",
    "coldWeather": "Minimize transition time to maintain body temperature",
    "noBike": "Replace bike segments with hill running at equivalent effort",
    "noTransitions": "Combine segments into continuous workout",
    "indoor": "Use treadmill incline to simulate bike resistance",
}


def _run(duration: str, intensity: str, description: str) -> BrickSegment:
    return BrickSegment("run", duration, intensity, description)


def _ride(duration: str, intensity: str, description: str) -> BrickSegment:
    return BrickSegment("bike", duration, intensity, description)


def _switch(duration: str, activity: str) -> BrickSegment:
    return BrickSegment("transition", duration, "", activity)


def _brick(name: str, brick_type: BrickType, **fields) -> WorkoutTemplate:
    return WorkoutTemplate(name=name, library=Library.BRICK, subcategory=brick_type.key, **fields)


BRICK_WORKOUTS: dict[str, tuple[WorkoutTemplate, ...]] = {
    BrickType.AEROBIC.key: (
        _brick(
            "Base Building Brick", BrickType.AEROBIC,
            duration="60-90 minutes",
            difficulty="beginner",
            description="Develop aerobic fitness with equipment familiarity",
            progression="Increase each segment by 5 minutes weekly",
            brick_segments=(
                _run("20 min", "easy", "Easy warm-up run"),
                _switch("90 sec", "equipment change"),
                _ride("30 min", "easy", "Steady aerobic effort"),
                _switch("90 sec", "equipment change"),
                _run("15 min", "easy", "Easy finish run"),
            ),
        ),
        _brick(
            "Long Aerobic Brick", BrickType.AEROBIC,
            duration="90-120 minutes",
            difficulty="intermediate",
            description="Extended aerobic development, mental toughness",
            progression="Build bike segment first, then running segments",
            brick_segments=(
                _run("30 min", "easy", "Extended warm-up"),
                _switch("2 min", "hydration + equipment"),
                _ride("45 min", "easy", "Sustained aerobic effort"),
                _switch("2 min", "hydration + equipment"),
                _run("20 min", "easy", "Finish strong"),
            ),
        ),
    ),
    BrickType.TEMPO.key: (
        _brick(
            "Alternating Tempo Brick", BrickType.TEMPO,
            duration="45-60 minutes",
            difficulty="intermediate",
            description="Lactate threshold development with equipment variety",
            progression="Extend tempo segments by 2 min each week",
            brick_segments=(
                _run("15 min", "easy", "Warm-up"),
                _run("10 min", "tempo", "Threshold effort"),
                _switch("60 sec", "quick change"),
                _ride("15 min", "tempo", "Maintain threshold"),
                _switch("60 sec", "quick change"),
                _run("8 min", "tempo", "Final threshold"),
                _run("10 min", "easy", "Cool down"),
            ),
        ),
        _brick(
            "Sandwich Tempo Brick", BrickType.TEMPO,
            duration="50-65 minutes",
            difficulty="advanced",
            description="Practice running after hard bike effort",
            progression="Maintain tempo segments, reduce transitions",
            brick_segments=(
                _run("12 min", "easy", "Warm-up"),
                _ride("20 min", "tempo", "Strong tempo effort"),
                _switch("90 sec", "equipment change"),
                _run("15 min", "tempo", "Run off the bike"),
                _run("12 min", "easy", "Cool down"),
            ),
        ),
    ),
    BrickType.SPEED.key: (
        _brick(
            "Speed Transition Brick", BrickType.SPEED,
            duration="35-45 minutes",
            difficulty="advanced",
            description="Speed endurance, equipment mastery",
            progression="Add 1 repeat every 2 weeks",
            brick_segments=(
                _run("15 min", "easy", "Warm-up with strides"),
                BrickSegment(
                    "intervals",
                    "4 sets",
                    "hard",
                    "2 min run hard + 45 sec transition + 2 min bike hard + 45 sec transition, "
                    "2 min easy run between sets",
                ),
                _run("10 min", "easy", "Cool down"),
            ),
        ),
        _brick(
            "Pyramid Brick", BrickType.SPEED,
            duration="40-50 minutes",
            difficulty="advanced",
            description="Progressive intensity with equipment changes",
            progression="Extend peak segment by 30 sec every 2 weeks",
            brick_segments=(
                _run("12 min", "easy", "Warm-up"),
                _run("1 min", "hard", "Build 1"),
                _switch("30 sec", "quick change"),
                _ride("2 min", "hard", "Build 2"),
                _switch("30 sec", "quick change"),
                _run("3 min", "hard", "Peak effort"),
                _switch("30 sec", "quick change"),
                _ride("2 min", "hard", "Build down 1"),
                _switch("30 sec", "quick change"),
                _run("1 min", "hard", "Build down 2"),
                _run("12 min", "easy", "Cool down"),
            ),
        ),
    ),
    BrickType.RECOVERY.key: (
        _brick(
            "Active Recovery Brick", BrickType.RECOVERY,
            duration="30-45 minutes",
            difficulty="recovery",
            description="Active recovery, movement variety",
            progression="Focus on form, not intensity or duration",
            brick_segments=(
                _run("10 min", "easy", "Gentle start"),
                _switch("2 min", "relaxed change"),
                _ride("15 min", "recovery", "Very easy spinning"),
                _switch("2 min", "relaxed change"),
                _run("10 min", "easy", "Easy finish"),
            ),
        ),
        _brick(
            "Form Focus Brick", BrickType.RECOVERY,
            duration="25-35 minutes",
            difficulty="recovery",
            description="Technique refinement, neuromuscular coordination",
            progression="Focus on movement quality improvements",
            brick_segments=(
                _run("8 min", "easy", "Form-focused running"),
                _switch("90 sec", "mindful equipment setup"),
                _ride("12 min", "easy", "Technique practice"),
                _switch("90 sec", "mindful equipment setup"),
                _run("6 min", "easy", "Form integration"),
            ),
        ),
    ),
}


def brick_pace_guidance(template: WorkoutTemplate) -> str:
    """Pace guidance for the intensities the brick's segments use."""
    used = {segment.intensity for segment in template.brick_segments}
    lines = [f"{key.capitalize()}: {text}" for key, text in BRICK_PACES.items() if key in used]
    lines.append("Transitions: Focus on smooth equipment changes, not speed")
    return "; ".join(lines)


class BrickCatalog(CatalogProvider):
    """Run + bike combination workouts, grouped by brick type."""

    library = Library.BRICK
    workouts = BRICK_WORKOUTS

    def generate(
        self,
        brick_type: BrickType,
        context: PersonalizationContext,
        rng: RandomSource,
        difficulty: str = "intermediate",
    ) -> WorkoutTemplate:
        """Generate one formatted brick workout of the given type.

        Args:
            brick_type: Intensity tier to draw from.
            context: Athlete context; its equipment picks the transition notes.
            rng: Random source for the final pick.
            difficulty: Difficulty filter, or "any" to skip filtering.

        Returns:
            A personalized brick template.
        """
        candidates = self.workouts[brick_type.key]
        if difficulty != "any":
            matching = tuple(t for t in candidates if t.difficulty in (difficulty, "any"))
            if matching:
                candidates = matching
            else:
                logger.debug(
                    "No %s brick at difficulty '%s', using all %d",
                    brick_type.key, difficulty, len(candidates),
                )
        return self.personalize(pick(rng, candidates), context)

    def personalize(
        self,
        template: WorkoutTemplate,
        context: PersonalizationContext,
        distance: float | None = None,
    ) -> WorkoutTemplate:
        equipment = (context.equipment or "cyclete").lower()
        return replace(
            template,
            structure=template.render_bricks(),
            equipment=equipment,
            equipment_notes=EQUIPMENT_TRANSITIONS.get(equipment, EQUIPMENT_TRANSITIONS["cyclete"]),
            safety_notes=BRICK_SAFETY,
            pace_guidance=brick_pace_guidance(template),
            alternatives=dict(_ALTERNATIVES),
            features=(FEATURE_TAG,),
        )
