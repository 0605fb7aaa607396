"""Bike-computer plan files (=HEADER= / =STREAM= / =INTERVAL= blocks)."""

from __future__ import annotations

import logging

from mrc_creator.workout.effort import Effort
from mrc_creator.workout.errors import InvalidPlanFormatError
from mrc_creator.workout.model import Workout

logger = logging.getLogger(__name__)

STREAM_MARKER = "=STREAM="
INTERVAL_MARKER = "=INTERVAL="
NAME_PREFIX = "NAME="
DURATION_PREFIX = "MESG_DURATION_SEC>="
DURATION_SUFFIX = "?EXIT"


def decode_plan(text: str) -> Workout:
    name, intervals = split_header_and_intervals(text)
    efforts = [parse_interval(block) for block in split_intervals(intervals)]
    logger.debug("Decoded plan '%s' with %d intervals", name, len(efforts))
    return Workout(name=name, description="", efforts=efforts)


def split_header_and_intervals(text: str) -> tuple[str, str]:
    header, sep, intervals = text.partition(STREAM_MARKER)
    if not sep:
        raise InvalidPlanFormatError(f"Plan has no {STREAM_MARKER} section")

    for raw in header.strip().splitlines():
        line = raw.strip()
        if line.startswith(NAME_PREFIX):
            return line[len(NAME_PREFIX) :], intervals.strip()
    raise InvalidPlanFormatError(f"Plan header has no {NAME_PREFIX} line")


def split_intervals(intervals: str) -> list[str]:
    return [block.strip() for block in intervals.split(INTERVAL_MARKER) if block.strip()]


def parse_interval(block: str) -> Effort:
    """One interval becomes a constant effort at the middle of its power range."""
    power: dict[str, int] = {}
    duration_sec: int | None = None

    for raw in block.splitlines():
        line = raw.strip()
        if line.startswith(DURATION_PREFIX) and line.endswith(DURATION_SUFFIX):
            duration_sec = _parse_int(
                line[len(DURATION_PREFIX) : -len(DURATION_SUFFIX)], "MESG_DURATION_SEC"
            )
            continue
        key, sep, value = line.partition("=")
        if sep and key in ("PWR_LO", "PWR_HI"):
            power[key] = _parse_int(value, key)

    for key in ("PWR_LO", "PWR_HI"):
        if key not in power:
            raise InvalidPlanFormatError(f"Interval is missing {key}: {block!r}")
    if duration_sec is None:
        raise InvalidPlanFormatError(f"Interval is missing MESG_DURATION_SEC: {block!r}")

    average = (power["PWR_LO"] + power["PWR_HI"]) / 2.0
    return Effort(duration_sec / 60.0, average)


def _parse_int(raw: str, field_name: str) -> int:
    text = raw.strip()
    if not (text.isascii() and text.isdigit()):
        raise InvalidPlanFormatError(f"Invalid {field_name} value '{text}'")
    return int(text)
