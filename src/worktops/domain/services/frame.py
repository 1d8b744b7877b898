"""Fitting the annotated shape onto a fixed drawing surface.

The drawing surface is a portrait A4 sheet measured in millimetres. Worktops
are long and shallow, so the annotated shape is turned a quarter turn
counter-clockwise before being scaled to fit.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from ..value_objects import Point2D, Rect
from .label_layout import LabelSide, LayoutSpacing, OffsetSchedule
from .outline import WorktopShape
from .path import format_number

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FrameSettings:
    """Size of the drawing surface.

    Attributes:
        width: Surface width in millimetres.
        height: Surface height in millimetres.
        margin: Empty border kept on every side.
        allow_upscale: Whether small shapes may be scaled above 1:1.
    """

    width: float = 210.0
    height: float = 297.0
    margin: float = 5.0
    allow_upscale: bool = False

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Frame width and height must be positive")
        if self.margin < 0:
            raise ValueError("Frame margin cannot be negative")
        if 2 * self.margin >= min(self.width, self.height):
            raise ValueError("Frame margin leaves no drawable area")

    @property
    def view_box(self) -> str:
        return f"0 0 {format_number(self.width)} {format_number(self.height)}"


@dataclass(frozen=True)
class FrameTransform:
    """Model-to-surface mapping for one drawing.

    The mapping translates the box centre to the origin, scales uniformly,
    rotates by -90 degrees and moves the result to the surface centre.

    Attributes:
        box: Shape bounds grown by every lane's reach and the frame padding.
        scale: Uniform scale factor.
        settings: The surface the box was fitted to.
    """

    box: Rect
    scale: float
    settings: FrameSettings

    @property
    def center(self) -> Point2D:
        return self.box.center

    def apply(self, point: Point2D) -> Point2D:
        """Map a model point to surface coordinates."""
        dx = (point.x - self.center.x) * self.scale
        dy = (point.y - self.center.y) * self.scale
        return Point2D(self.settings.width / 2 + dy, self.settings.height / 2 - dx)

    @property
    def svg_transform(self) -> str:
        """The mapping as an SVG ``transform`` attribute value."""
        scale = f"{self.scale:.6f}".rstrip("0").rstrip(".")
        return (
            f"translate({format_number(self.settings.width / 2)} "
            f"{format_number(self.settings.height / 2)}) "
            f"rotate(-90) scale({scale}) "
            f"translate({format_number(-self.center.x)} "
            f"{format_number(-self.center.y)})"
        )

    def surface_rect(self) -> Rect:
        """Where the expanded box lands on the surface."""
        corners = [
            self.apply(Point2D(x, y))
            for x in (self.box.left, self.box.right)
            for y in (self.box.top, self.box.bottom)
        ]
        left = min(p.x for p in corners)
        top = min(p.y for p in corners)
        return Rect(
            left,
            top,
            max(p.x for p in corners) - left,
            max(p.y for p in corners) - top,
        )


def expanded_box(
    shape: WorktopShape, schedule: OffsetSchedule, spacing: LayoutSpacing
) -> Rect:
    """Shape bounds grown to hold every lane plus the frame padding.

    Secondary lanes grow out of the secondary's right and bottom edges; they
    only widen the box where they reach past it.
    """
    bounds = shape.bounds
    padding = spacing.frame_padding

    left = bounds.left - schedule.reach(LabelSide.LEFT) - padding
    top = bounds.top - schedule.reach(LabelSide.TOP) - padding
    right = bounds.right + schedule.reach(LabelSide.RIGHT)
    bottom = max(
        bounds.bottom, shape.primary.rect.bottom + schedule.reach(LabelSide.BOTTOM)
    )
    if shape.secondary is not None:
        secondary = shape.secondary.rect
        right = max(
            right, secondary.right + schedule.reach(LabelSide.SECONDARY_RIGHT)
        )
        bottom = max(
            bottom, secondary.bottom + schedule.reach(LabelSide.SECONDARY_BOTTOM)
        )
    right += padding
    bottom += padding
    return Rect(left, top, right - left, bottom - top)


def compose_frame(
    shape: WorktopShape,
    schedule: OffsetSchedule,
    spacing: LayoutSpacing,
    settings: FrameSettings,
) -> FrameTransform:
    """Fit the annotated shape onto the drawing surface.

    Args:
        shape: The built shape. Its offcut is not part of the bounds.
        schedule: Label offset schedule, for each lane's reach.
        spacing: Spacing rules, for the frame padding.
        settings: The drawing surface.

    Returns:
        The transform placing every annotation inside the surface margin.
    """
    box = expanded_box(shape, schedule, spacing)
    available_width = settings.width - 2 * settings.margin
    available_height = settings.height - 2 * settings.margin

    # After the quarter turn the box's height runs across the sheet.
    scale = min(available_width / box.height, available_height / box.width)
    if not settings.allow_upscale:
        scale = min(scale, 1.0)
    # Round down so the printed transform never outgrows the margin.
    scale = math.floor(scale * 1e6) / 1e6

    logger.debug(f"Framed {box.width}x{box.height} box at scale {scale}")
    return FrameTransform(box=box, scale=scale, settings=settings)
