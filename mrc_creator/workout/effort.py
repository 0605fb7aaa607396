"""A single interval of a workout and its in-progress edit state."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Union

from mrc_creator.workout.bounded_number import BoundedNumber

NumberLike = Union[BoundedNumber, float, int]


@dataclass(frozen=True)
class Idle:
    pass


@dataclass
class Editing:
    """Unvalidated text typed by the user; parsed only on commit."""

    duration_text: str
    starting_text: str
    ending_text: str


EditState = Union[Idle, Editing]


@dataclass(init=False)
class Effort:
    duration_in_minutes: BoundedNumber
    starting_value: BoundedNumber
    ending_value: BoundedNumber
    edit_state: EditState = field(default_factory=Idle, compare=False, repr=False)

    def __init__(
        self,
        duration_in_minutes: NumberLike,
        starting_value: NumberLike,
        ending_value: Optional[NumberLike] = None,
        edit_state: Optional[EditState] = None,
    ) -> None:
        """A missing ending value makes a constant effort."""
        self.duration_in_minutes = BoundedNumber.of(duration_in_minutes)
        self.starting_value = BoundedNumber.of(starting_value)
        self.ending_value = (
            self.starting_value if ending_value is None else BoundedNumber.of(ending_value)
        )
        self.edit_state = Idle() if edit_state is None else edit_state

    @property
    def is_ramp(self) -> bool:
        return self.starting_value != self.ending_value

    @property
    def average_value(self) -> float:
        return (self.starting_value.value + self.ending_value.value) / 2.0

    @property
    def is_editing(self) -> bool:
        return isinstance(self.edit_state, Editing)

    def begin_edit(self) -> None:
        self.edit_state = Editing(
            duration_text=self.duration_in_minutes.to_text(),
            starting_text=self.starting_value.to_text(),
            ending_text=self.ending_value.to_text(),
        )

    def commit_edit(self) -> None:
        """Apply pending text; on invalid input stay in Editing and re-raise."""
        state = self.edit_state
        if not isinstance(state, Editing):
            return

        duration = BoundedNumber.parse(state.duration_text)
        starting = BoundedNumber.parse(state.starting_text)
        ending = (
            BoundedNumber.parse(state.ending_text)
            if state.ending_text.strip()
            else starting
        )

        self.duration_in_minutes = duration
        self.starting_value = starting
        self.ending_value = ending
        self.edit_state = Idle()

    def cancel_edit(self) -> None:
        self.edit_state = Idle()

    def update_pending_duration(self, text: str) -> None:
        if isinstance(self.edit_state, Editing):
            self.edit_state.duration_text = text

    def update_pending_starting(self, text: str) -> None:
        if isinstance(self.edit_state, Editing):
            self.edit_state.starting_text = text

    def update_pending_ending(self, text: str) -> None:
        if isinstance(self.edit_state, Editing):
            self.edit_state.ending_text = text

    def to_dict(self) -> dict[str, Any]:
        return {
            "duration_in_minutes": self.duration_in_minutes.value,
            "starting_value": self.starting_value.value,
            "ending_value": self.ending_value.value,
        }
