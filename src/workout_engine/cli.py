"""Command-line entry point: resolve a workout or list its alternatives.

Usage:
    python -m workout_engine.cli resolve --name "8-Mile Thirds Progression" --category longRun \
        --paces paces.json
    python -m workout_engine.cli alternatives --name "Classic Tempo Run" --category tempo \
        --equipment cyclete --extreme-weather "extreme heat"
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from workout_engine import config
from workout_engine.engine import WorkoutEngine
from workout_engine.exceptions import WorkoutEngineError
from workout_engine.models.context import PersonalizationContext, WeatherCondition, WorkoutRef
from workout_engine.models.paces import PaceTable
from workout_engine.random_source import NumpyRandomSource
from workout_engine.serialization import to_json_string

logger = logging.getLogger(__name__)


def _load_paces(path: Path | None) -> tuple[PaceTable, dict]:
    """Load a pace table (and optional track intervals) from a JSON file.

    The file holds either the pace table itself or an object with
    ``paces`` and ``trackIntervals`` keys.
    """
    if path is None:
        return PaceTable(), {}
    with open(path) as f:
        data = json.load(f)
    if "paces" in data:
        return PaceTable.from_dict(data["paces"]), data.get("trackIntervals", {})
    return PaceTable.from_dict(data), {}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Workout prescription and adaptation engine")
    sub = parser.add_subparsers(dest="command", required=True)

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--name", required=True, help="Workout name as scheduled")
    common.add_argument("--category", required=True, help="Workout category (tempo, intervals, longRun, ...)")
    common.add_argument("--distance", type=float, help="Distance in miles")
    common.add_argument("--duration", default="", help="Scheduled duration text")
    common.add_argument("--paces", type=Path, help="JSON file with the athlete's pace table")
    common.add_argument("--equipment", help="Stand-up bike type (cyclete, elliptigo)")
    common.add_argument(
        "--cross-training", help="Cross-training machine (pool, rowing, elliptical, swimming, stationaryBike)"
    )
    common.add_argument("--experience", help="Experience level for progression lookup")
    common.add_argument("--week", type=int, help="Current training week")
    common.add_argument("--total-weeks", type=int, help="Total weeks in the plan")
    common.add_argument("--no-garmin", action="store_true", help="Prescribe rides by time instead of RunEQ miles")
    common.add_argument("--seed", type=int, default=config.RANDOM_SEED, help="Random seed for catalog picks")

    sub.add_parser("resolve", parents=[common], help="Print the resolved workout as JSON")
    alternatives = sub.add_parser("alternatives", parents=[common], help="Print alternative categories as JSON")
    alternatives.add_argument("--extreme-weather", metavar="CONDITION", help="Add weather-safe options")
    return parser


def run(args: argparse.Namespace) -> str:
    """Execute a parsed command and return its JSON output."""
    paces, track = _load_paces(args.paces)
    context = PersonalizationContext(
        paces=paces,
        equipment=args.equipment,
        track_intervals=track,
        current_week=args.week,
        total_weeks=args.total_weeks,
        target_distance=args.distance,
        experience_level=args.experience,
        has_garmin=not args.no_garmin,
    )
    ref = WorkoutRef(
        name=args.name,
        category=args.category,
        distance=args.distance,
        duration=args.duration,
        cross_training_type=args.cross_training,
    )

    engine = WorkoutEngine(rng=NumpyRandomSource(args.seed))
    workout = engine.resolve(ref, context)
    logger.info("Resolved '%s' as '%s'", args.name, workout.name)
    if args.command == "resolve":
        return to_json_string(workout)

    weather = None
    if getattr(args, "extreme_weather", None):
        weather = WeatherCondition(is_extreme=True, condition=args.extreme_weather)
    return to_json_string(engine.generate_alternatives(workout, context, weather))


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    args = build_parser().parse_args(argv)
    try:
        output = run(args)
    except (WorkoutEngineError, OSError, json.JSONDecodeError) as exc:
        logger.error("%s", exc)
        return 1
    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
