"""Cutout placement against the primary or secondary region.

Cutouts that do not fit their region are dropped rather than rejected:
configurations are often carried over from an earlier revision of the
worktop, and a stale cutout must not block the drawing. Every dropped
cutout is reported back so callers can surface it.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from ..entities import Cutout
from ..value_objects import Rect, Region
from .outline import WorktopShape

logger = logging.getLogger(__name__)

_EPSILON = 1e-9


@dataclass(frozen=True)
class PlacedCutout:
    """A cutout positioned on the drawing.

    Attributes:
        index: 1-based position in the configuration's cutout list.
        order: 0-based stacking order among placed cutouts of the region.
        cutout: The requested cutout.
        region: Region the cutout was placed in.
        footprint: Visual footprint on the drawing, after rotation.
        rotation: Rotation in degrees applied about the footprint centre.
    """

    index: int
    order: int
    cutout: Cutout
    region: Region
    footprint: Rect
    rotation: float = 0.0

    @property
    def is_rotated(self) -> bool:
        return self.rotation != 0.0


@dataclass(frozen=True)
class DroppedCutout:
    """A cutout left out of the drawing, with the reason why."""

    index: int
    cutout: Cutout
    reason: str


@dataclass(frozen=True)
class CutoutPlacement:
    """Result of placing every cutout of a configuration."""

    placed: tuple[PlacedCutout, ...] = ()
    dropped: tuple[DroppedCutout, ...] = ()

    @property
    def dropped_count(self) -> int:
        return len(self.dropped)

    def in_region(self, region: Region) -> tuple[PlacedCutout, ...]:
        return tuple(p for p in self.placed if p.region is region)


def _primary_footprint(cutout: Cutout, region: Rect) -> tuple[Rect | None, str]:
    if cutout.distance_from_left + cutout.width > region.width + _EPSILON:
        return None, (
            f"distance_from_left + width ({cutout.distance_from_left + cutout.width}) "
            f"exceeds region width ({region.width})"
        )
    if cutout.distance_from_bottom + cutout.height > region.height + _EPSILON:
        return None, (
            f"distance_from_bottom + height "
            f"({cutout.distance_from_bottom + cutout.height}) "
            f"exceeds region height ({region.height})"
        )
    return (
        Rect(
            region.left + cutout.distance_from_left,
            region.bottom - cutout.distance_from_bottom - cutout.height,
            cutout.width,
            cutout.height,
        ),
        "",
    )


def _secondary_footprint(cutout: Cutout, region: Rect) -> tuple[Rect | None, str]:
    # The secondary piece is drawn a quarter turn from the primary one. Its own
    # "left" edge is the drawn bottom edge and its "bottom" edge is the drawn
    # right edge, so width runs up the drawing and height runs leftward.
    visual_width = cutout.height
    visual_height = cutout.width
    if cutout.distance_from_bottom + visual_width > region.width + _EPSILON:
        return None, (
            f"distance_from_bottom + height "
            f"({cutout.distance_from_bottom + visual_width}) "
            f"exceeds secondary width ({region.width})"
        )
    if cutout.distance_from_left + visual_height > region.height + _EPSILON:
        return None, (
            f"distance_from_left + width ({cutout.distance_from_left + visual_height}) "
            f"exceeds secondary length ({region.height})"
        )
    right = region.right - cutout.distance_from_bottom
    bottom = region.bottom - cutout.distance_from_left
    return (
        Rect(right - visual_width, bottom - visual_height, visual_width, visual_height),
        "",
    )


def place_cutouts(
    shape: WorktopShape, cutouts: Sequence[Cutout]
) -> CutoutPlacement:
    """Validate and place cutouts.

    A cutout fits when ``offset + size <= region bound`` on both axes. For
    the secondary region of an L-shape the check and the placement happen in
    the rotated frame. A secondary cutout on a straight cut falls back to
    the primary region.

    Args:
        shape: The built worktop shape.
        cutouts: Requested cutouts in configuration order.

    Returns:
        Placed and dropped cutouts.
    """
    placed: list[PlacedCutout] = []
    dropped: list[DroppedCutout] = []
    order: dict[Region, int] = {Region.PRIMARY: 0, Region.SECONDARY: 0}

    for index, cutout in enumerate(cutouts, start=1):
        region = cutout.region
        if region is Region.SECONDARY and shape.secondary is None:
            region = Region.PRIMARY

        outline = shape.region(region)
        match region:
            case Region.PRIMARY:
                footprint, reason = _primary_footprint(cutout, outline.rect)
                rotation = 0.0
            case Region.SECONDARY:
                footprint, reason = _secondary_footprint(cutout, outline.rect)
                rotation = 90.0

        if footprint is None:
            logger.warning(f"Dropping cutout {index} ({region.value}): {reason}")
            dropped.append(DroppedCutout(index=index, cutout=cutout, reason=reason))
            continue

        placed.append(
            PlacedCutout(
                index=index,
                order=order[region],
                cutout=cutout,
                region=region,
                footprint=footprint,
                rotation=rotation,
            )
        )
        order[region] += 1

    return CutoutPlacement(placed=tuple(placed), dropped=tuple(dropped))
