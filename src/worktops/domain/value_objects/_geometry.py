"""Planar geometry value objects.

All coordinates are millimetres in drawing orientation: x grows to the
right, y grows downward, so the "top" of a rectangle is its smaller y.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Corner(str, Enum):
    """The four corners of an axis-aligned rectangle."""

    TOP_LEFT = "top_left"
    TOP_RIGHT = "top_right"
    BOTTOM_RIGHT = "bottom_right"
    BOTTOM_LEFT = "bottom_left"


class Side(str, Enum):
    """The four sides of an axis-aligned rectangle."""

    TOP = "top"
    RIGHT = "right"
    BOTTOM = "bottom"
    LEFT = "left"

    @property
    def is_horizontal(self) -> bool:
        """Whether the side runs along the x axis."""
        return self in (Side.TOP, Side.BOTTOM)


# Clockwise walk order (on screen) used by every outline builder.
CLOCKWISE_CORNERS: tuple[Corner, ...] = (
    Corner.TOP_LEFT,
    Corner.TOP_RIGHT,
    Corner.BOTTOM_RIGHT,
    Corner.BOTTOM_LEFT,
)

# Side walked *into* each corner and side walked *out of* it.
INCOMING_SIDE: dict[Corner, Side] = {
    Corner.TOP_RIGHT: Side.TOP,
    Corner.BOTTOM_RIGHT: Side.RIGHT,
    Corner.BOTTOM_LEFT: Side.BOTTOM,
    Corner.TOP_LEFT: Side.LEFT,
}
OUTGOING_SIDE: dict[Corner, Side] = {
    Corner.TOP_LEFT: Side.TOP,
    Corner.TOP_RIGHT: Side.RIGHT,
    Corner.BOTTOM_RIGHT: Side.BOTTOM,
    Corner.BOTTOM_LEFT: Side.LEFT,
}


@dataclass(frozen=True)
class Point2D:
    """A point on the drawing plane."""

    x: float
    y: float

    def offset(self, dx: float = 0.0, dy: float = 0.0) -> Point2D:
        """Return a new point shifted by (dx, dy)."""
        return Point2D(self.x + dx, self.y + dy)

    def is_close(self, other: Point2D, tolerance: float = 1e-9) -> bool:
        """Check whether two points coincide within a tolerance."""
        return abs(self.x - other.x) <= tolerance and abs(self.y - other.y) <= tolerance


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle anchored at its top-left corner."""

    x: float
    y: float
    width: float
    height: float

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("Rectangle width and height must be non-negative")

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def top(self) -> float:
        return self.y

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def center(self) -> Point2D:
        return Point2D(self.x + self.width / 2, self.y + self.height / 2)

    @property
    def min_dimension(self) -> float:
        return min(self.width, self.height)

    def corner(self, corner: Corner) -> Point2D:
        """Get the vertex at the given corner."""
        match corner:
            case Corner.TOP_LEFT:
                return Point2D(self.left, self.top)
            case Corner.TOP_RIGHT:
                return Point2D(self.right, self.top)
            case Corner.BOTTOM_RIGHT:
                return Point2D(self.right, self.bottom)
            case Corner.BOTTOM_LEFT:
                return Point2D(self.left, self.bottom)

    def side_length(self, side: Side) -> float:
        """Length of the given side."""
        return self.width if side.is_horizontal else self.height

    def contains(self, other: Rect, tolerance: float = 1e-9) -> bool:
        """Check whether another rectangle lies fully inside this one."""
        return (
            other.left >= self.left - tolerance
            and other.top >= self.top - tolerance
            and other.right <= self.right + tolerance
            and other.bottom <= self.bottom + tolerance
        )

    def intersects(self, other: Rect, tolerance: float = 1e-9) -> bool:
        """Check whether two rectangles overlap. Touching edges do not count."""
        return (
            self.left < other.right - tolerance
            and other.left < self.right - tolerance
            and self.top < other.bottom - tolerance
            and other.top < self.bottom - tolerance
        )

    def union(self, other: Rect) -> Rect:
        """Smallest rectangle enclosing both rectangles."""
        left = min(self.left, other.left)
        top = min(self.top, other.top)
        right = max(self.right, other.right)
        bottom = max(self.bottom, other.bottom)
        return Rect(left, top, right - left, bottom - top)

    def expanded(
        self,
        left: float = 0.0,
        top: float = 0.0,
        right: float = 0.0,
        bottom: float = 0.0,
    ) -> Rect:
        """Grow the rectangle outward by a margin on each side."""
        return Rect(
            self.x - left,
            self.y - top,
            self.width + left + right,
            self.height + top + bottom,
        )
