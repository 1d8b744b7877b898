"""Path segments and SVG path-data serialization."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from ..value_objects import Point2D

_EPSILON = 1e-9


def format_number(value: float) -> str:
    """Format a coordinate for path data and labels.

    Integral values print without a decimal point; everything else is
    rounded to three decimals with trailing zeros stripped.

    Examples:
        >>> format_number(600.0)
        '600'
        >>> format_number(12.5)
        '12.5'
    """
    rounded = round(value, 3)
    if rounded == 0:
        return "0"
    if rounded == int(rounded):
        return str(int(rounded))
    return f"{rounded:.3f}".rstrip("0").rstrip(".")


def format_point(point: Point2D) -> str:
    return f"{format_number(point.x)} {format_number(point.y)}"


@dataclass(frozen=True)
class LineSegment:
    """Straight segment from start to end."""

    start: Point2D
    end: Point2D

    def reversed(self) -> LineSegment:
        return LineSegment(self.end, self.start)

    def to_command(self) -> str:
        return f"L {format_point(self.end)}"

    def sample(self, steps: int = 1) -> list[Point2D]:
        """Points along the segment, excluding the start."""
        return [self.end]


@dataclass(frozen=True)
class QuadSegment:
    """Quadratic Bezier segment; used for rounded corners."""

    start: Point2D
    control: Point2D
    end: Point2D

    def reversed(self) -> QuadSegment:
        return QuadSegment(self.end, self.control, self.start)

    def to_command(self) -> str:
        return f"Q {format_point(self.control)} {format_point(self.end)}"

    def point_at(self, t: float) -> Point2D:
        u = 1 - t
        return Point2D(
            u * u * self.start.x + 2 * u * t * self.control.x + t * t * self.end.x,
            u * u * self.start.y + 2 * u * t * self.control.y + t * t * self.end.y,
        )

    def sample(self, steps: int = 8) -> list[Point2D]:
        """Points along the curve, excluding the start."""
        return [self.point_at(i / steps) for i in range(1, steps + 1)]


PathSegment: TypeAlias = LineSegment | QuadSegment


def segment_length_is_zero(segment: PathSegment) -> bool:
    return segment.start.is_close(segment.end, _EPSILON)


@dataclass(frozen=True)
class OutlinePath:
    """A connected run of segments, optionally closed.

    Attributes:
        segments: Consecutive segments; each starts where the previous ends.
        closed: Whether the path returns to its start point.
    """

    segments: tuple[PathSegment, ...]
    closed: bool = False

    def __post_init__(self) -> None:
        for previous, current in zip(self.segments, self.segments[1:]):
            if not previous.end.is_close(current.start, 1e-6):
                raise ValueError(
                    f"Path segments are not connected: {previous.end} -> {current.start}"
                )
        if self.closed and self.segments:
            if not self.segments[-1].end.is_close(self.segments[0].start, 1e-6):
                raise ValueError("Closed path does not return to its start point")

    @property
    def start(self) -> Point2D:
        return self.segments[0].start

    @property
    def end(self) -> Point2D:
        return self.segments[-1].end

    @property
    def is_empty(self) -> bool:
        return not self.segments

    def to_svg(self) -> str:
        """Serialize as SVG path data."""
        if not self.segments:
            return ""
        commands = [f"M {format_point(self.start)}"]
        commands.extend(segment.to_command() for segment in self.segments)
        if self.closed:
            commands.append("Z")
        return " ".join(commands)

    def vertices(self, curve_steps: int = 8) -> list[Point2D]:
        """Polyline approximation starting at the path's start point."""
        if not self.segments:
            return []
        points = [self.start]
        for segment in self.segments:
            points.extend(segment.sample(curve_steps))
        return points


def join_segments(*runs: tuple[PathSegment, ...]) -> tuple[PathSegment, ...]:
    """Concatenate segment runs, dropping zero-length straight pieces."""
    joined: list[PathSegment] = []
    for run in runs:
        for segment in run:
            if isinstance(segment, LineSegment) and segment_length_is_zero(segment):
                continue
            joined.append(segment)
    return tuple(joined)
