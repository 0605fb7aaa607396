from __future__ import annotations

from pathlib import Path

import pytest

from mrc_creator.workout.effort import Effort
from mrc_creator.workout.model import WorkoutType
from mrc_creator.workout.parser import WorkoutParseError, load_workout, workout_from_json


def test_load_workout_course_file(tmp_path: Path) -> None:
    workout_file = tmp_path / "tempo.mrc"
    workout_file.write_text(
        "[COURSE HEADER]\n"
        "DESCRIPTION = Tempo blocks\n"
        "MINUTES PERCENTAGE\n"
        "[END COURSE HEADER]\n"
        "[COURSE DATA]\n"
        "0.00\t50.00\n"
        "5.00\t50.00\n"
        "5.00\t85.00\n"
        "15.00\t85.00\n"
        "[END COURSE DATA]\n",
        encoding="utf-8",
    )

    workout = load_workout(workout_file)

    assert workout.name == "tempo"
    assert workout.description == "Tempo blocks"
    assert workout.workout_type is WorkoutType.PERCENT_OF_FTP
    assert workout.efforts == [Effort(5.0, 50.0), Effort(10.0, 85.0)]


def test_load_workout_crm_suffix(tmp_path: Path) -> None:
    workout_file = tmp_path / "short.CRM"
    workout_file.write_text(
        "[COURSE HEADER]\nDESCRIPTION = no description\nMINUTES WATTS\n[END COURSE HEADER]\n"
        "[COURSE DATA]\n0.00\t100.00\n1.00\t100.00\n[END COURSE DATA]",
        encoding="utf-8",
    )

    assert load_workout(workout_file).efforts == [Effort(1.0, 100.0)]


def test_load_workout_plan(tmp_path: Path) -> None:
    workout_file = tmp_path / "ftp.plan"
    workout_file.write_text(
        "=HEADER=\nNAME=Openers\nWORKOUT_TYPE=0\n=STREAM=\n"
        "=INTERVAL=\nPWR_LO=100\nPWR_HI=140\nMESG_DURATION_SEC>=120?EXIT\n",
        encoding="utf-8",
    )

    workout = load_workout(workout_file)

    assert workout.name == "Openers"
    assert workout.efforts == [Effort(2.0, 120.0)]


def test_load_workout_json(tmp_path: Path) -> None:
    workout_file = tmp_path / "sample.json"
    workout_file.write_text(
        (
            '{"name":"Ramp Test","description":"step up","workout_type":"Watts",'
            '"efforts":[{"duration_in_minutes":5,"starting_value":100},'
            '{"duration_in_minutes":"2.5","starting_value":150,"ending_value":250}]}'
        ),
        encoding="utf-8",
    )

    workout = load_workout(workout_file)

    assert workout.name == "Ramp Test"
    assert workout.description == "step up"
    assert workout.efforts == [Effort(5.0, 100.0), Effort(2.5, 150.0, 250.0)]
    assert workout.efforts[1].is_ramp


def test_load_workout_json_defaults_name_to_stem(tmp_path: Path) -> None:
    workout_file = tmp_path / "nameless.json"
    workout_file.write_text('{"efforts":[]}', encoding="utf-8")

    workout = load_workout(workout_file)

    assert workout.name == "nameless"
    assert workout.workout_type is WorkoutType.WATTS


def test_load_workout_invalid_extension(tmp_path: Path) -> None:
    workout_file = tmp_path / "sample.txt"
    workout_file.write_text("hello", encoding="utf-8")

    with pytest.raises(WorkoutParseError):
        load_workout(workout_file)


def test_load_workout_invalid_json(tmp_path: Path) -> None:
    workout_file = tmp_path / "broken.json"
    workout_file.write_text("{not json", encoding="utf-8")

    with pytest.raises(WorkoutParseError):
        load_workout(workout_file)


def test_load_workout_invalid_value(tmp_path: Path) -> None:
    workout_file = tmp_path / "bad.json"
    workout_file.write_text(
        '{"name":"Bad","efforts":[{"duration_in_minutes":-1,"starting_value":100}]}',
        encoding="utf-8",
    )

    with pytest.raises(WorkoutParseError, match="Effort 1: invalid duration_in_minutes"):
        load_workout(workout_file)


@pytest.mark.parametrize(
    "data",
    [
        {"name": 3, "efforts": []},
        {"name": "x", "description": ["no"], "efforts": []},
        {"name": "x", "workout_type": "Kilojoules", "efforts": []},
        {"name": "x"},
        {"name": "x", "efforts": ["5 min"]},
        {"name": "x", "efforts": [{"duration_in_minutes": True, "starting_value": 1}]},
        {"name": "x", "efforts": [{"duration_in_minutes": 1}]},
    ],
)
def test_workout_from_json_rejects_bad_fields(data: dict[str, object]) -> None:
    with pytest.raises(WorkoutParseError):
        workout_from_json(data)


def test_workout_from_json_reads_to_dict_output() -> None:
    data = {
        "name": "FTP",
        "description": "",
        "efforts": [{"duration_in_minutes": 20.0, "starting_value": 95.0, "ending_value": 95.0}],
        "workout_type": "PercentOfFTP",
    }

    workout = workout_from_json(data)

    assert workout.to_dict() == data


def test_load_workout_json_rejects_infinity(tmp_path: Path) -> None:
    workout_file = tmp_path / "endless.json"
    workout_file.write_text(
        '{"name":"Endless","efforts":[{"duration_in_minutes":Infinity,'
        '"starting_value":100,"ending_value":200}]}',
        encoding="utf-8",
    )

    with pytest.raises(WorkoutParseError, match="Effort 1: invalid duration_in_minutes"):
        load_workout(workout_file)
