"""Workout file loader (course, plan and JSON session files)."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from mrc_creator.workout.bounded_number import BoundedNumber, InvalidNumberError
from mrc_creator.workout.course_format import decode
from mrc_creator.workout.effort import Effort
from mrc_creator.workout.errors import WorkoutParseError
from mrc_creator.workout.model import Workout, WorkoutType
from mrc_creator.workout.plan_format import decode_plan

logger = logging.getLogger(__name__)

COURSE_SUFFIXES = (".mrc", ".crm")
PLAN_SUFFIX = ".plan"
JSON_SUFFIX = ".json"


def load_workout(path: str | Path) -> Workout:
    file_path = Path(path)
    suffix = file_path.suffix.lower()
    logger.debug("Loading workout from %s", file_path)
    if suffix in COURSE_SUFFIXES:
        return decode(file_path.read_text(encoding="utf-8"), name=file_path.stem)
    if suffix == PLAN_SUFFIX:
        return decode_plan(file_path.read_text(encoding="utf-8"))
    if suffix == JSON_SUFFIX:
        return _load_json(file_path)
    raise WorkoutParseError(
        f"Unsupported workout format '{file_path.suffix}'. Use .mrc, .crm, .plan or .json"
    )


def _load_json(path: Path) -> Workout:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise WorkoutParseError(f"Invalid JSON: {exc}") from exc

    if not isinstance(data, dict):
        raise WorkoutParseError("Workout JSON must be an object")
    data.setdefault("name", path.stem)
    return workout_from_json(data)


def workout_from_json(data: dict[str, object]) -> Workout:
    """Rebuild a workout from the dict produced by ``Workout.to_dict``."""
    name_obj = data.get("name", "")
    if not isinstance(name_obj, str):
        raise WorkoutParseError("Workout field 'name' must be a string")

    description_obj = data.get("description", "")
    if not isinstance(description_obj, str):
        raise WorkoutParseError("Workout field 'description' must be a string")

    type_obj = data.get("workout_type", WorkoutType.WATTS.value)
    try:
        workout_type = WorkoutType(type_obj)
    except ValueError as exc:
        raise WorkoutParseError(f"Unknown workout_type '{type_obj}'") from exc

    efforts_obj = data.get("efforts")
    if not isinstance(efforts_obj, list):
        raise WorkoutParseError("Workout field 'efforts' must be an array")

    efforts: list[Effort] = []
    for i, raw in enumerate(efforts_obj):
        if not isinstance(raw, dict):
            raise WorkoutParseError(f"Effort {i + 1}: must be an object")
        efforts.append(
            Effort(
                duration_in_minutes=_parse_number_field(
                    raw=raw.get("duration_in_minutes"),
                    field_name="duration_in_minutes",
                    index=i,
                ),
                starting_value=_parse_number_field(
                    raw=raw.get("starting_value"),
                    field_name="starting_value",
                    index=i,
                ),
                ending_value=_parse_optional_number_field(
                    raw=raw.get("ending_value"),
                    field_name="ending_value",
                    index=i,
                ),
            )
        )

    return Workout(
        name=name_obj,
        description=description_obj,
        efforts=efforts,
        workout_type=workout_type,
    )


def _parse_number_field(*, raw: object, field_name: str, index: int) -> BoundedNumber:
    if raw is None or isinstance(raw, bool):
        raise WorkoutParseError(f"Effort {index + 1}: invalid {field_name}")
    try:
        if isinstance(raw, (int, float)):
            return BoundedNumber(raw)
        return BoundedNumber.parse(str(raw))
    except InvalidNumberError as exc:
        raise WorkoutParseError(f"Effort {index + 1}: invalid {field_name}") from exc


def _parse_optional_number_field(
    *, raw: object, field_name: str, index: int
) -> BoundedNumber | None:
    if raw is None:
        return None
    if isinstance(raw, str) and raw.strip() == "":
        return None
    return _parse_number_field(raw=raw, field_name=field_name, index=index)
