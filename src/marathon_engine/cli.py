"""Command-line front end for the marathon plan engine.

Usage:
    marathon-plan generate --profile profile.json --output plan.json
    marathon-plan complete --plan plan.json --workout ID --distance 10 --duration 55
    marathon-plan export-garmin --plan plan.json --workout ID --output workout.json
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from datetime import date
from pathlib import Path

from marathon_engine import config
from marathon_engine.completion import complete_workout
from marathon_engine.engine import generate_plan
from marathon_engine.exceptions import MarathonEngineError, WorkoutNotFoundError
from marathon_engine.formatting import format_goal_time, format_pace_range
from marathon_engine.math.pace_zones import predict_marathon_time
from marathon_engine.serialization import load_plan, load_profile, save_plan, to_garmin_json_string

logger = logging.getLogger(__name__)


def _cmd_generate(args: argparse.Namespace) -> int:
    profile = load_profile(args.profile)
    plan = generate_plan(profile, today=args.start)
    save_plan(plan, args.output)

    marathon = plan.pace_zones.marathon
    logger.info(
        "Plan %s: %d weeks, VDOT %.1f, predicted marathon %s, MP %s",
        plan.id,
        plan.total_weeks,
        plan.vdot,
        format_goal_time(predict_marathon_time(plan.vdot)),
        format_pace_range(marathon.lower, marathon.upper),
    )
    return 0


def _cmd_complete(args: argparse.Namespace) -> int:
    plan = load_plan(args.plan)
    plan = complete_workout(
        plan,
        args.workout,
        actual_distance_km=args.distance,
        actual_duration_min=args.duration,
        feeling=args.feeling,
        notes=args.notes,
    )
    save_plan(plan, args.plan)
    return 0


def _cmd_export_garmin(args: argparse.Namespace) -> int:
    plan = load_plan(args.plan)
    workout = plan.find_workout(args.workout)
    if workout is None:
        raise WorkoutNotFoundError(args.workout)

    payload = to_garmin_json_string(workout, plan.pace_zones)
    if args.output is None:
        sys.stdout.write(payload + "\n")
    else:
        args.output.write_text(payload, encoding="utf-8")
        logger.info("Wrote Garmin workout %r to %s", workout.title, args.output)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="marathon-plan",
        description="Periodized marathon training plan generator",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    gen = sub.add_parser("generate", help="Generate a plan from a runner profile")
    gen.add_argument("--profile", type=Path, default=config.PROFILE_PATH, help="Runner profile JSON")
    gen.add_argument("--start", type=date.fromisoformat, default=None, help="Plan start date (YYYY-MM-DD)")
    gen.add_argument("--output", type=Path, default=config.PLAN_PATH, help="Where to write the plan JSON")
    gen.set_defaults(func=_cmd_generate)

    done = sub.add_parser("complete", help="Record a completed workout")
    done.add_argument("--plan", type=Path, default=config.PLAN_PATH, help="Plan JSON to update")
    done.add_argument("--workout", required=True, help="Workout id")
    done.add_argument("--distance", type=float, default=None, help="Actual distance in km")
    done.add_argument("--duration", type=float, default=None, help="Actual duration in minutes")
    done.add_argument("--feeling", type=int, choices=range(1, 6), default=None, help="1 (awful) to 5 (great)")
    done.add_argument("--notes", default=None)
    done.set_defaults(func=_cmd_complete)

    export = sub.add_parser("export-garmin", help="Export one workout as Garmin Connect JSON")
    export.add_argument("--plan", type=Path, default=config.PLAN_PATH, help="Plan JSON")
    export.add_argument("--workout", required=True, help="Workout id")
    export.add_argument("--output", type=Path, default=None, help="Output file (stdout if omitted)")
    export.set_defaults(func=_cmd_export_garmin)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        return args.func(args)
    except FileNotFoundError as exc:
        logger.error("File not found: %s", exc.filename)
        return 1
    except MarathonEngineError as exc:
        logger.error("%s", exc)
        return 1


if __name__ == "__main__":
    sys.exit(main())
