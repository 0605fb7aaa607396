"""Workout domain models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from functools import reduce
from typing import Any

from mrc_creator.workout.bounded_number import ZERO, BoundedNumber
from mrc_creator.workout.effort import Effort


class WorkoutType(Enum):
    WATTS = "Watts"
    PERCENT_OF_FTP = "PercentOfFTP"

    def header_label(self) -> str:
        if self is WorkoutType.PERCENT_OF_FTP:
            return "MINUTES PERCENTAGE"
        return "MINUTES WATTS"

    @property
    def display_name(self) -> str:
        if self is WorkoutType.PERCENT_OF_FTP:
            return "Percentage of FTP"
        return "Watts"

    def __str__(self) -> str:
        return self.display_name


WORKOUT_TYPES: tuple[WorkoutType, ...] = (WorkoutType.WATTS, WorkoutType.PERCENT_OF_FTP)


@dataclass
class Workout:
    name: str
    description: str = ""
    efforts: list[Effort] = field(default_factory=list)
    workout_type: WorkoutType = WorkoutType.WATTS

    @classmethod
    def empty(
        cls,
        name: str = "untitled",
        description: str = "",
        workout_type: WorkoutType = WorkoutType.WATTS,
    ) -> Workout:
        return cls(name=name, description=description, workout_type=workout_type)

    def add_effort(self, effort: Effort) -> None:
        self.efforts.append(effort)

    def remove_effort(self, index: int) -> Effort:
        return self.efforts.pop(index)

    def begin_edit(self, index: int) -> None:
        self.efforts[index].begin_edit()

    def commit_edit(self, index: int) -> None:
        self.efforts[index].commit_edit()

    def cancel_edit(self, index: int) -> None:
        self.efforts[index].cancel_edit()

    def update_pending_duration(self, index: int, text: str) -> None:
        self.efforts[index].update_pending_duration(text)

    def update_pending_starting(self, index: int, text: str) -> None:
        self.efforts[index].update_pending_starting(text)

    def update_pending_ending(self, index: int, text: str) -> None:
        self.efforts[index].update_pending_ending(text)

    def total_duration(self) -> BoundedNumber:
        return reduce(
            lambda total, effort: total + effort.duration_in_minutes,
            self.efforts,
            ZERO,
        )

    def average_intensity(self) -> float:
        """Duration-weighted mean of effort averages."""
        total = self.total_duration().value
        if total == 0:
            return 0.0
        weighted = sum(
            effort.average_value * effort.duration_in_minutes.value
            for effort in self.efforts
        )
        return weighted / total

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "efforts": [effort.to_dict() for effort in self.efforts],
            "workout_type": self.workout_type.value,
        }
