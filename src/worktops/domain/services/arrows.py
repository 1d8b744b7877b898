"""Stock direction arrows.

Each region gets an arrow at its centre showing how the blank runs: down
the primary piece and, on L-shapes, to the right along the secondary one.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..value_objects import Point2D, Region
from .outline import WorktopShape

ARROW_HEAD_WIDTH = 60.0
ARROW_HEAD_LENGTH = 50.0
ARROW_STROKE_WIDTH = 10.0
ARROW_MAX_TAIL = 150.0


@dataclass(frozen=True)
class DirectionArrow:
    """A straight arrow with a triangular head.

    Attributes:
        region: Region the arrow belongs to.
        tail: Start point of the shaft.
        shaft_end: End point of the shaft, where the head begins.
        head: Triangle points: left base, tip, right base.
    """

    region: Region
    tail: Point2D
    shaft_end: Point2D
    head: tuple[Point2D, Point2D, Point2D]

    @property
    def tip(self) -> Point2D:
        return self.head[1]


def _arrow(
    region: Region,
    center: Point2D,
    dx: float,
    dy: float,
    half_extent: float,
) -> DirectionArrow:
    length = min(ARROW_MAX_TAIL, 0.8 * half_extent)
    tail = center.offset(-dx * length / 2, -dy * length / 2)
    shaft_end = center.offset(dx * length / 2, dy * length / 2)
    tip = shaft_end.offset(dx * ARROW_HEAD_LENGTH, dy * ARROW_HEAD_LENGTH)
    # Perpendicular to the direction of travel.
    px, py = -dy, dx
    half_width = ARROW_HEAD_WIDTH / 2
    return DirectionArrow(
        region=region,
        tail=tail,
        shaft_end=shaft_end,
        head=(
            shaft_end.offset(px * half_width, py * half_width),
            tip,
            shaft_end.offset(-px * half_width, -py * half_width),
        ),
    )


def build_direction_arrows(shape: WorktopShape) -> tuple[DirectionArrow, ...]:
    """Arrows for every region of the shape, primary first."""
    primary = shape.primary.rect
    arrows = [_arrow(Region.PRIMARY, primary.center, 0.0, 1.0, primary.height / 2)]
    if shape.secondary is not None:
        secondary = shape.secondary.rect
        arrows.append(
            _arrow(Region.SECONDARY, secondary.center, 1.0, 0.0, secondary.width / 2)
        )
    return tuple(arrows)
