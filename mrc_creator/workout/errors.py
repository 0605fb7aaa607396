"""Errors raised while reading workout files."""

from __future__ import annotations


class WorkoutParseError(ValueError):
    """Raised when a workout file is invalid."""


class MissingDescriptionError(WorkoutParseError):
    def __init__(self) -> None:
        super().__init__("Course header has no DESCRIPTION line")


class NoEffortBlockFoundError(WorkoutParseError):
    def __init__(self) -> None:
        super().__init__("No [COURSE DATA] ... [END COURSE DATA] block found")


class EffortLineSyntaxError(WorkoutParseError):
    def __init__(self, text: str) -> None:
        super().__init__(f"Effort lines do not match '<minute>\\t<value>' pairs: {text!r}")
        self.text = text


class NumberFieldMissingError(WorkoutParseError):
    def __init__(self, index: int, text: str) -> None:
        super().__init__(f"Number {index} missing in effort {text!r}")
        self.index = index
        self.text = text


class NumberFieldInvalidError(WorkoutParseError):
    def __init__(self, index: int, message: str, text: str) -> None:
        super().__init__(f"Number {index} invalid in effort {text!r}: {message}")
        self.index = index
        self.message = message
        self.text = text


class InvalidPlanFormatError(WorkoutParseError):
    def __init__(self, message: str = "Invalid plan format") -> None:
        super().__init__(message)
