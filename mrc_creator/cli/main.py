"""Terminal entrypoint for the course-file workout creator."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from mrc_creator.core.config import AppConfig, create_sample_config, load_config
from mrc_creator.core.logging_setup import configure_logging
from mrc_creator.ui.layout import summary_statistics
from mrc_creator.workout.parser import load_workout
from mrc_creator.workout.user_workouts import export_workout, list_user_workouts

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Create .mrc/.crm workout course files")
    parser.add_argument(
        "--convert",
        metavar="INPUT",
        default=None,
        help="Convert a .mrc/.crm/.plan/.json workout to a course file plus JSON session",
    )
    parser.add_argument(
        "--output",
        metavar="OUT",
        default=None,
        help="Course file path for --convert (defaults to INPUT with .mrc suffix)",
    )
    parser.add_argument(
        "--summary",
        metavar="INPUT",
        default=None,
        help="Print name, type, duration and average intensity of a workout file",
    )
    parser.add_argument("--list", action="store_true", help="List saved workouts")
    parser.add_argument(
        "--config",
        default=None,
        help="YAML config file (defaults to ~/.mrc-creator/config.yaml)",
    )
    parser.add_argument(
        "--init-config",
        action="store_true",
        help="Write a sample config file with default values",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Override log level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def run_convert(config: AppConfig, source: Path, output: Path | None) -> int:
    workout = load_workout(source)
    target = output or source.with_suffix(".mrc")
    if source.resolve() in (target.resolve(), target.with_suffix(".json").resolve()):
        target = source.with_name(f"{source.stem}-converted.mrc")
    course_path, json_path = export_workout(
        workout,
        target,
        split_threshold=config.ramp_split_threshold_minutes,
    )
    print(f"Wrote {course_path}")
    print(f"Wrote {json_path}")
    return 0


def run_summary(source: Path) -> int:
    workout = load_workout(source)
    average_line, duration_line = summary_statistics(workout)
    print(f"Name:        {workout.name}")
    print(f"Description: {workout.description or '-'}")
    print(f"Type:        {workout.workout_type.display_name}")
    print(f"Efforts:     {len(workout.efforts)}")
    print(average_line)
    print(duration_line)
    return 0


def run_list(config: AppConfig) -> int:
    items = list_user_workouts(base_dir=config.workouts_dir)
    if not items:
        print(f"No saved workouts in {config.workouts_dir}")
        return 0

    for item in items:
        print(f"{item.key:<28} {item.name:<32} {item.workout_type:<14} {item.effort_count:>3} efforts")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.init_config:
        path = create_sample_config(args.config)
        print(f"Config file: {path}")
        return 0

    try:
        config = load_config(args.config)
    except ValueError as exc:
        print(f"Invalid configuration: {exc}")
        return 2
    configure_logging(args.log_level or config.log_level)

    try:
        if args.convert:
            output = Path(args.output) if args.output else None
            return run_convert(config, Path(args.convert), output)
        if args.summary:
            return run_summary(Path(args.summary))
        if args.list:
            return run_list(config)
    except (ValueError, OSError) as exc:
        logger.error("%s", exc)
        return 1

    parser.print_help()
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
