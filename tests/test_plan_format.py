from __future__ import annotations

import pytest

from mrc_creator.workout.effort import Effort
from mrc_creator.workout.errors import InvalidPlanFormatError, WorkoutParseError
from mrc_creator.workout.model import WorkoutType
from mrc_creator.workout.plan_format import (
    decode_plan,
    parse_interval,
    split_header_and_intervals,
    split_intervals,
)

INTERVALS = """=INTERVAL=
PWR_LO=50
PWR_HI=50
MESG_DURATION_SEC>=30?EXIT
=INTERVAL=
PWR_LO=100
PWR_HI=100
MESG_DURATION_SEC>=60?EXIT
=INTERVAL=
PWR_LO=150
PWR_HI=150
MESG_DURATION_SEC>=30?EXIT
=INTERVAL=
PWR_LO=200
PWR_HI=200
MESG_DURATION_SEC>=90?EXIT"""

PLAN = f"""=HEADER=
NAME=20 Minute FTP Test
WORKOUT_TYPE=0
=STREAM=
{INTERVALS}"""


def test_split_header_and_intervals() -> None:
    assert split_header_and_intervals(PLAN) == ("20 Minute FTP Test", INTERVALS)


def test_split_header_requires_stream_marker() -> None:
    with pytest.raises(InvalidPlanFormatError):
        split_header_and_intervals("=HEADER=\nNAME=x\n")


def test_split_header_requires_name() -> None:
    with pytest.raises(InvalidPlanFormatError):
        split_header_and_intervals("=HEADER=\nWORKOUT_TYPE=0\n=STREAM=\n")


def test_split_intervals() -> None:
    blocks = split_intervals(INTERVALS)

    assert len(blocks) == 4
    assert blocks[0] == "PWR_LO=50\nPWR_HI=50\nMESG_DURATION_SEC>=30?EXIT"
    assert blocks[3] == "PWR_LO=200\nPWR_HI=200\nMESG_DURATION_SEC>=90?EXIT"


def test_parse_interval_averages_power_range() -> None:
    effort = parse_interval("PWR_LO=180\nPWR_HI=220\nMESG_DURATION_SEC>=300?EXIT")

    assert effort == Effort(5.0, 200.0)


def test_parse_interval_accepts_any_line_order() -> None:
    effort = parse_interval("MESG_DURATION_SEC>=30?EXIT\nPWR_HI=50\nPWR_LO=50")

    assert effort == Effort(0.5, 50.0)


@pytest.mark.parametrize(
    "block",
    [
        "PWR_HI=50\nMESG_DURATION_SEC>=30?EXIT",
        "PWR_LO=50\nMESG_DURATION_SEC>=30?EXIT",
        "PWR_LO=50\nPWR_HI=50",
        "PWR_LO=fifty\nPWR_HI=50\nMESG_DURATION_SEC>=30?EXIT",
        "PWR_LO=50\nPWR_HI=50\nMESG_DURATION_SEC>=-30?EXIT",
    ],
)
def test_parse_interval_rejects_incomplete_blocks(block: str) -> None:
    with pytest.raises(InvalidPlanFormatError):
        parse_interval(block)


def test_decode_plan() -> None:
    workout = decode_plan(PLAN)

    assert workout.name == "20 Minute FTP Test"
    assert workout.description == ""
    assert workout.workout_type is WorkoutType.WATTS
    assert workout.efforts == [
        Effort(0.5, 50.0),
        Effort(1.0, 100.0),
        Effort(0.5, 150.0),
        Effort(1.5, 200.0),
    ]


def test_plan_errors_are_parse_errors() -> None:
    with pytest.raises(WorkoutParseError):
        decode_plan("NAME=only a header")
