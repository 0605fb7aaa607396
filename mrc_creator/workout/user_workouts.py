"""User workouts stored locally as JSON sessions, and course-file export."""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from pathlib import Path

from mrc_creator.workout.course_format import RAMP_SPLIT_THRESHOLD_MINUTES, encode
from mrc_creator.workout.model import Workout
from mrc_creator.workout.parser import load_workout

logger = logging.getLogger(__name__)


def _default_workouts_dir() -> Path:
    return Path.home() / ".mrc-creator" / "workouts"


def _slugify(name: str) -> str:
    s = re.sub(r"[^a-zA-Z0-9]+", "-", name.strip().lower()).strip("-")
    return s or "untitled"


@dataclass(frozen=True)
class UserWorkout:
    key: str
    name: str
    workout_type: str
    effort_count: int
    path: Path


def list_user_workouts(base_dir: Path | None = None) -> list[UserWorkout]:
    root = base_dir or _default_workouts_dir()
    if not root.exists():
        return []
    out: list[UserWorkout] = []
    for file in sorted(root.glob("*.json")):
        try:
            payload = json.loads(file.read_text(encoding="utf-8"))
            name = str(payload.get("name", file.stem))
            workout_type = str(payload.get("workout_type", "Watts"))
            effort_count = len(payload.get("efforts") or [])
        except (OSError, ValueError, AttributeError, TypeError) as exc:
            logger.warning("Skipping unreadable workout file %s: %s", file, exc)
            continue
        out.append(
            UserWorkout(
                key=file.stem,
                name=name,
                workout_type=workout_type,
                effort_count=effort_count,
                path=file,
            )
        )
    return out


def load_user_workout(path: Path) -> Workout:
    return load_workout(path)


def save_user_workout(
    workout: Workout,
    *,
    base_dir: Path | None = None,
    overwrite_key: str | None = None,
) -> Path:
    root = base_dir or _default_workouts_dir()
    root.mkdir(parents=True, exist_ok=True)
    key = overwrite_key or _slugify(workout.name)
    out = root / f"{key}.json"
    _write_json(workout, out)
    logger.info("Saved workout '%s' to %s", workout.name, out)
    return out


def export_workout(
    workout: Workout,
    path: str | Path,
    split_threshold: float = RAMP_SPLIT_THRESHOLD_MINUTES,
) -> tuple[Path, Path]:
    """Write the course file and its JSON session file side by side."""
    course_path = Path(path)
    if not course_path.suffix:
        course_path = course_path.with_suffix(".mrc")
    if course_path.suffix.lower() == ".json":
        raise ValueError("Course export path must not end in .json")
    json_path = course_path.with_suffix(".json")

    course_path.parent.mkdir(parents=True, exist_ok=True)
    course_path.write_text(encode(workout, split_threshold), encoding="utf-8")
    _write_json(workout, json_path)
    logger.info("Exported workout '%s' to %s and %s", workout.name, course_path, json_path)
    return course_path, json_path


def _write_json(workout: Workout, out: Path) -> None:
    out.write_text(
        json.dumps(workout.to_dict(), ensure_ascii=True, indent=2),
        encoding="utf-8",
    )
