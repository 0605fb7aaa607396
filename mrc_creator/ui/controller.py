"""Editing session driven by the desktop shell.

The shell owns widgets and dialogs; it forwards user input to these objects
and redraws from ``WorkoutDesigner.shapes`` after every change.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass
from pathlib import Path

from mrc_creator.core.config import AppConfig
from mrc_creator.ui.colors import Color, ColorGradient
from mrc_creator.ui.layout import LayoutEngine, Shape, summary_statistics
from mrc_creator.workout.bounded_number import BoundedNumber
from mrc_creator.workout.effort import Effort
from mrc_creator.workout.model import Workout, WorkoutType
from mrc_creator.workout.parser import load_workout
from mrc_creator.workout.user_workouts import export_workout, save_user_workout


@dataclass
class EffortInput:
    duration_text: str = ""
    starting_text: str = ""
    ending_text: str = ""

    @property
    def is_empty(self) -> bool:
        return not self.duration_text.strip() or not self.starting_text.strip()

    def to_effort(self) -> Effort:
        starting = BoundedNumber.parse(self.starting_text)
        ending = BoundedNumber.parse(self.ending_text) if self.ending_text.strip() else None
        return Effort(BoundedNumber.parse(self.duration_text), starting, ending)

    def clear(self) -> None:
        self.duration_text = ""
        self.starting_text = ""
        self.ending_text = ""


@dataclass
class WorkoutDefinition:
    name: str = ""
    description: str = ""
    workout_type: WorkoutType = WorkoutType.WATTS

    def start_design(self, config: AppConfig | None = None) -> WorkoutDesigner:
        workout = Workout.empty(
            name=self.name.strip() or "untitled",
            description=self.description,
            workout_type=self.workout_type,
        )
        return WorkoutDesigner(workout, config=config)


class WorkoutDesigner:
    def __init__(self, workout: Workout, config: AppConfig | None = None) -> None:
        self._config = config or AppConfig()
        self.workout = workout
        self.effort_input = EffortInput()
        self._layout = LayoutEngine(gap=self._config.layout_gap)
        self._gradient = ColorGradient(max_value=self._config.color_max_value)

    @classmethod
    def from_file(cls, path: str | Path, config: AppConfig | None = None) -> WorkoutDesigner:
        return cls(load_workout(path), config=config)

    @property
    def title(self) -> str:
        return f"{self.workout.workout_type.display_name} Workout"

    def create_effort(self) -> Effort | None:
        """Append the effort typed in the input row; the row is kept on error."""
        if self.effort_input.is_empty:
            return None
        effort = self.effort_input.to_effort()
        self.workout.add_effort(effort)
        self.effort_input.clear()
        return effort

    def edit(self, index: int) -> None:
        self.workout.begin_edit(index)

    def update_duration(self, index: int, text: str) -> None:
        self.workout.update_pending_duration(index, text)

    def update_starting_value(self, index: int, text: str) -> None:
        self.workout.update_pending_starting(index, text)

    def update_ending_value(self, index: int, text: str) -> None:
        self.workout.update_pending_ending(index, text)

    def finish_edit(self, index: int) -> None:
        self.workout.commit_edit(index)

    def cancel_edit(self, index: int) -> None:
        self.workout.cancel_edit(index)

    def delete(self, index: int) -> Effort:
        return self.workout.remove_effort(index)

    def snapshot(self) -> Workout:
        return copy.deepcopy(self.workout)

    def shapes(self, width: float, height: float) -> list[tuple[Shape, Color]]:
        efforts = self.snapshot().efforts
        return self._layout.colored_layout(width, height, efforts, self._gradient)

    def summary(self) -> tuple[str, str]:
        return summary_statistics(self.workout)

    def export(self, path: str | Path) -> tuple[Path, Path]:
        return export_workout(
            self.workout,
            path,
            split_threshold=self._config.ramp_split_threshold_minutes,
        )

    def save(self) -> Path:
        return save_user_workout(self.workout, base_dir=self._config.workouts_dir)
