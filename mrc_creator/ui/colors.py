"""Intensity-to-color mapping for the workout profile."""

from __future__ import annotations

import math
from dataclasses import dataclass

from mrc_creator.workout.effort import Effort

# Blue (easy) through green to red (hard).
PALETTE: tuple[str, ...] = (
    "#0c0af0", "#0d12e7", "#0e1adf", "#0f23d7", "#102bce", "#1134c6", "#123cbe", "#1344b6",
    "#154dad", "#1655a5", "#175e9d", "#186694", "#196e8c", "#1a7784", "#1b7f7c", "#1d8873",
    "#1e906b", "#1f9963", "#20a15b", "#21a952", "#22b24a", "#23ba42", "#25c339", "#26cb31",
    "#27d329", "#28dc21", "#29e418", "#2aed10", "#2bf508", "#2dfe00", "#41e400", "#56cb00",
    "#6bb100", "#809800", "#957f00", "#aa6500", "#bf4c00", "#d43200", "#e91900", "#fe0000",
)
DEFAULT_MAX_VALUE = 500.0


@dataclass(frozen=True)
class Color:
    r: float
    g: float
    b: float
    a: float = 1.0

    @classmethod
    def from_hex(cls, hex_color: str) -> Color:
        digits = hex_color.lstrip("#")
        if len(digits) != 6:
            raise ValueError(f"Expected #rrggbb color, got '{hex_color}'")
        return cls(
            r=int(digits[0:2], 16) / 255.0,
            g=int(digits[2:4], 16) / 255.0,
            b=int(digits[4:6], 16) / 255.0,
        )

    @classmethod
    def from_rgb8(cls, r: int, g: int, b: int) -> Color:
        return cls(r=r / 255.0, g=g / 255.0, b=b / 255.0)

    def to_hex(self) -> str:
        return "#{:02x}{:02x}{:02x}".format(
            *(int(round(channel * 255)) for channel in (self.r, self.g, self.b))
        )

    def averaged_with(self, other: Color) -> Color:
        return Color(
            r=(self.r + other.r) / 2.0,
            g=(self.g + other.g) / 2.0,
            b=(self.b + other.b) / 2.0,
            a=(self.a + other.a) / 2.0,
        )


class ColorGradient:
    def __init__(
        self,
        palette: tuple[str, ...] = PALETTE,
        max_value: float = DEFAULT_MAX_VALUE,
    ) -> None:
        if not palette:
            raise ValueError("Palette must contain at least one color")
        if max_value <= 0:
            raise ValueError("max_value must be > 0")
        self._palette = palette
        self._colors = tuple(Color.from_hex(item) for item in palette)
        self.max_value = max_value

    def bracketing_indices(self, value: float) -> tuple[int, int]:
        fraction = min(max(value / self.max_value, 0.0), 1.0)
        position = fraction * (len(self._palette) - 1)
        return math.floor(position), math.ceil(position)

    def bracketing_hex(self, value: float) -> tuple[str, str]:
        before, after = self.bracketing_indices(value)
        return self._palette[before], self._palette[after]

    def color_for(self, value: float) -> Color:
        # Plain average of the two neighbours, not a weighted blend.
        before, after = self.bracketing_indices(value)
        return self._colors[before].averaged_with(self._colors[after])

    def color_for_effort(self, effort: Effort) -> Color:
        return self.color_for(effort.average_value)
