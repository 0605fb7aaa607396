"""Non-negative floating point values used for durations and targets."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union


class InvalidNumberError(ValueError):
    """Raised when a value cannot become a BoundedNumber."""


class NegativeValueError(InvalidNumberError):
    def __init__(self, value: float) -> None:
        super().__init__(f"Value must be >= 0, got {value}")
        self.value = value


class NotANumberError(InvalidNumberError):
    def __init__(self, text: str) -> None:
        super().__init__(f"'{text}' is not a number")
        self.text = text


@dataclass(frozen=True, order=True)
class BoundedNumber:
    value: float

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, (int, float)):
            raise NotANumberError(str(self.value))
        if not math.isfinite(self.value):
            raise NotANumberError(str(self.value))
        if self.value < 0:
            raise NegativeValueError(self.value)
        object.__setattr__(self, "value", float(self.value))

    @classmethod
    def parse(cls, text: str) -> BoundedNumber:
        stripped = text.strip()
        try:
            value = float(stripped)
        except ValueError as exc:
            raise NotANumberError(stripped) from exc
        if not math.isfinite(value):
            raise NotANumberError(stripped)
        return cls(value)

    @classmethod
    def of(cls, raw: Union[BoundedNumber, float, int]) -> BoundedNumber:
        if isinstance(raw, BoundedNumber):
            return raw
        return cls(raw)

    def to_text(self) -> str:
        """Course-file rendering with exactly two fractional digits."""
        return f"{self.value:.2f}"

    def __add__(self, other: BoundedNumber) -> BoundedNumber:
        if not isinstance(other, BoundedNumber):
            return NotImplemented
        return BoundedNumber(self.value + other.value)

    def __float__(self) -> float:
        return self.value

    def __str__(self) -> str:
        return self.to_text()


ZERO = BoundedNumber(0.0)
