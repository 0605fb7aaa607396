"""Course file (.mrc/.crm) encoding and decoding."""

from __future__ import annotations

import logging
import math
from typing import Union

from mrc_creator.workout.bounded_number import BoundedNumber, InvalidNumberError
from mrc_creator.workout.effort import Effort
from mrc_creator.workout.errors import (
    EffortLineSyntaxError,
    MissingDescriptionError,
    NoEffortBlockFoundError,
    NumberFieldInvalidError,
    NumberFieldMissingError,
)
from mrc_creator.workout.model import Workout, WorkoutType

logger = logging.getLogger(__name__)

HEADER_START = "[COURSE HEADER]"
HEADER_END = "[END COURSE HEADER]"
DATA_START = "[COURSE DATA]"
DATA_END = "[END COURSE DATA]"
NO_DESCRIPTION = "no description"

# Trainers only follow constant segments; ramps longer than this are stepped.
RAMP_SPLIT_THRESHOLD_MINUTES = 0.2

MinuteLike = Union[BoundedNumber, float, int]


# --- encoding ---------------------------------------------------------------


def encode(workout: Workout, split_threshold: float = RAMP_SPLIT_THRESHOLD_MINUTES) -> str:
    description = " ".join(workout.description.splitlines()).strip()
    header = [
        HEADER_START,
        f"DESCRIPTION = {description or NO_DESCRIPTION}",
        workout.workout_type.header_label(),
        HEADER_END,
    ]
    data, _ = efforts_to_text(workout.efforts, 0.0, split_threshold)
    body = [DATA_START, *([data] if data else []), DATA_END]
    return "\n".join(header + body)


def efforts_to_text(
    efforts: list[Effort],
    starting_minute: MinuteLike,
    split_threshold: float = RAMP_SPLIT_THRESHOLD_MINUTES,
) -> tuple[str, BoundedNumber]:
    """Render efforts back to back; returns the text and the final minute."""
    current = BoundedNumber.of(starting_minute)
    blocks: list[str] = []
    for effort in efforts:
        block, current = effort_to_text(effort, current, split_threshold)
        blocks.append(block)
    return "\n".join(blocks), current


def effort_to_text(
    effort: Effort,
    starting_minute: MinuteLike,
    split_threshold: float = RAMP_SPLIT_THRESHOLD_MINUTES,
) -> tuple[str, BoundedNumber]:
    start = BoundedNumber.of(starting_minute)
    end = start + effort.duration_in_minutes

    if not _needs_split(effort, split_threshold):
        return _segment(start, effort.starting_value, end, effort.ending_value), end

    steps = split_ramp(effort, split_threshold)
    logger.debug(
        "Split ramp %s->%s over %s min into %d steps",
        effort.starting_value,
        effort.ending_value,
        effort.duration_in_minutes,
        len(steps),
    )
    text, _ = efforts_to_text(steps, start, split_threshold)
    # Advance by the effort itself, not by the summed steps.
    return text, end


def split_ramp(
    effort: Effort, split_threshold: float = RAMP_SPLIT_THRESHOLD_MINUTES
) -> list[Effort]:
    """Approximate a ramp with constant steps holding each step's midpoint value."""
    if split_threshold <= 0:
        raise ValueError("split_threshold must be > 0")
    if not _needs_split(effort, split_threshold):
        return [Effort(effort.duration_in_minutes, effort.starting_value, effort.ending_value)]

    duration = effort.duration_in_minutes.value
    start = effort.starting_value.value
    step_count = math.ceil(round(duration / split_threshold, 9))
    step_size = (effort.ending_value.value - start) / step_count

    steps: list[Effort] = []
    elapsed = 0.0
    for i in range(step_count):
        if i < step_count - 1:
            length = split_threshold
        else:
            length = max(0.0, duration - elapsed)
        elapsed += length
        steps.append(Effort(length, start + i * step_size + step_size / 2))
    return steps


def starting_minutes(efforts: list[Effort], starting_minute: MinuteLike) -> list[BoundedNumber]:
    current = BoundedNumber.of(starting_minute)
    out: list[BoundedNumber] = []
    for effort in efforts:
        out.append(current)
        current = current + effort.duration_in_minutes
    return out


def _needs_split(effort: Effort, split_threshold: float) -> bool:
    return effort.is_ramp and effort.duration_in_minutes.value > split_threshold


def _segment(
    start_minute: BoundedNumber,
    start_value: BoundedNumber,
    end_minute: BoundedNumber,
    end_value: BoundedNumber,
) -> str:
    return (
        f"{start_minute.to_text()}\t{start_value.to_text()}\n"
        f"{end_minute.to_text()}\t{end_value.to_text()}"
    )


# --- decoding ---------------------------------------------------------------


def decode(text: str, name: str = "") -> Workout:
    try:
        description = extract_description(text)
    except MissingDescriptionError:
        logger.debug("Course file has no description, defaulting to empty")
        description = ""

    block = extract_effort_block(text)
    efforts = [parse_effort_pair(pair) for pair in pair_lines(block)]
    return Workout(
        name=name,
        description=description,
        efforts=efforts,
        workout_type=_extract_workout_type(text),
    )


def extract_description(text: str) -> str:
    header = text.split(DATA_START, 1)[0]
    for line in header.splitlines():
        key, sep, value = line.partition("=")
        if sep and key.strip() == "DESCRIPTION":
            value = value.strip()
            return "" if value == NO_DESCRIPTION else value
    raise MissingDescriptionError()


def extract_effort_block(text: str) -> str:
    start = text.find(DATA_START)
    if start < 0:
        raise NoEffortBlockFoundError()
    body_start = start + len(DATA_START)
    end = text.find(DATA_END, body_start)
    if end < 0:
        raise NoEffortBlockFoundError()
    return text[body_start:end].strip("\r\n")


def pair_lines(block: str) -> list[str]:
    """Group data lines two by two: each pair is one effort."""
    lines = [line.rstrip("\r") for line in block.splitlines() if line.strip()]
    if len(lines) % 2 == 1:
        raise EffortLineSyntaxError(lines[-1])
    return ["\n".join(lines[i : i + 2]) for i in range(0, len(lines), 2)]


def parse_effort_pair(text: str) -> Effort:
    lines = text.split("\n")
    if len(lines) != 2:
        raise EffortLineSyntaxError(text)

    fields: list[str] = []
    for line in lines:
        parts = line.rstrip("\r").split("\t")
        if len(parts) != 2:
            raise EffortLineSyntaxError(text)
        fields.extend(parts)

    start_minute, start_value, end_minute, end_value = (
        _parse_field(index, raw, text) for index, raw in enumerate(fields)
    )
    if end_minute < start_minute:
        raise NumberFieldInvalidError(2, "end minute precedes start minute", text)

    return Effort(end_minute.value - start_minute.value, start_value, end_value)


def _parse_field(index: int, raw: str, text: str) -> BoundedNumber:
    if not raw.strip():
        raise NumberFieldMissingError(index, text)
    try:
        return BoundedNumber.parse(raw)
    except InvalidNumberError as exc:
        raise NumberFieldInvalidError(index, str(exc), text) from exc


def _extract_workout_type(text: str) -> WorkoutType:
    header = text.split(DATA_START, 1)[0]
    for line in header.splitlines():
        if line.strip() == WorkoutType.PERCENT_OF_FTP.header_label():
            return WorkoutType.PERCENT_OF_FTP
    return WorkoutType.WATTS
