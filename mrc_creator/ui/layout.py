"""Geometry of the workout profile: one box per effort, plus a wedge for ramps.

Coordinates follow screen conventions: origin at the top-left corner of the
drawing surface, y growing downwards. Boxes grow upwards from ``gap`` above
the bottom edge.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Union

from mrc_creator.ui.colors import Color, ColorGradient
from mrc_creator.workout.effort import Effort
from mrc_creator.workout.model import Workout, WorkoutType

DEFAULT_GAP = 1.0
# Tallest effort reaches 90% of the height; the rest is room for summary text.
TOP_MARGIN_RATIO = 0.90


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class Box:
    effort_index: int
    top_left: Point
    width: float
    height: float

    def points(self) -> tuple[Point, Point, Point, Point]:
        x0, y0 = self.top_left.x, self.top_left.y
        x1, y1 = x0 + self.width, y0 + self.height
        return Point(x0, y0), Point(x1, y0), Point(x1, y1), Point(x0, y1)


@dataclass(frozen=True)
class Triangle:
    effort_index: int
    corners: tuple[Point, Point, Point]

    def points(self) -> tuple[Point, Point, Point]:
        return self.corners


Shape = Union[Box, Triangle]


@dataclass(frozen=True)
class _Span:
    start: float
    length: float


class LayoutEngine:
    def __init__(self, gap: float = DEFAULT_GAP, top_margin_ratio: float = TOP_MARGIN_RATIO) -> None:
        self.gap = gap
        self.top_margin_ratio = top_margin_ratio

    def layout(self, width: float, height: float, efforts: Sequence[Effort]) -> list[Shape]:
        if not efforts:
            return []

        x_spans = self._horizontal_spans(width, [e.duration_in_minutes.value for e in efforts])
        global_max = max(
            max(e.starting_value.value, e.ending_value.value) for e in efforts
        )
        start_heights = self._heights(height, [e.starting_value.value for e in efforts], global_max)
        end_heights = self._heights(height, [e.ending_value.value for e in efforts], global_max)

        shapes: list[Shape] = []
        for index, effort in enumerate(efforts):
            x = x_spans[index]
            h_start, h_end = start_heights[index], end_heights[index]
            floor = min(h_start, h_end)
            shapes.append(
                Box(
                    effort_index=index,
                    top_left=Point(x.start, height - floor - self.gap),
                    width=x.length,
                    height=floor,
                )
            )
            if effort.is_ramp:
                shapes.append(self._wedge(index, x, h_start, h_end, height))
        return shapes

    def colored_layout(
        self,
        width: float,
        height: float,
        efforts: Sequence[Effort],
        gradient: ColorGradient,
    ) -> list[tuple[Shape, Color]]:
        colors = [gradient.color_for_effort(effort) for effort in efforts]
        return [
            (shape, colors[shape.effort_index])
            for shape in self.layout(width, height, efforts)
        ]

    def _horizontal_spans(self, width: float, durations: list[float]) -> list[_Span]:
        total = sum(durations)
        # Too narrow for the gaps alone: collapse boxes instead of going negative.
        ratio = max(0.0, (width - self.gap * len(durations)) / total) if total > 0 else 0.0

        spans: list[_Span] = []
        cursor = 0.0
        for duration in durations:
            cursor += self.gap
            length = duration * ratio
            spans.append(_Span(start=cursor, length=length))
            cursor += length
        return spans

    def _heights(self, height: float, values: list[float], global_max: float) -> list[float]:
        if global_max <= 0:
            return [0.0 for _ in values]
        ratio = (height * self.top_margin_ratio - self.gap) / global_max
        return [value * ratio for value in values]

    def _wedge(
        self, index: int, x: _Span, h_start: float, h_end: float, height: float
    ) -> Triangle:
        def y(h: float) -> float:
            return height - (self.gap + h)

        left, right = x.start, x.start + x.length
        if h_start > h_end:
            corners = (Point(left, y(h_end)), Point(left, y(h_start)), Point(right, y(h_end)))
        else:
            corners = (Point(left, y(h_start)), Point(right, y(h_start)), Point(right, y(h_end)))
        return Triangle(effort_index=index, corners=corners)


def summary_statistics(workout: Workout) -> tuple[str, str]:
    """Overlay text shown in the corner of the profile."""
    label = "Average Wattage" if workout.workout_type is WorkoutType.WATTS else "Average % FTP"
    return (
        f"{label}: {workout.average_intensity():.1f}",
        f"Duration: {workout.total_duration().to_text()} min",
    )
