"""Corner treatment resolution and side fitting.

Every corner of every region goes through ``resolve_corner_treatment``, so
the outline, secondary and edge-highlight builders all agree on what a
corner looks like. ``fit_treatments`` then makes sure the treatments on a
single side never overlap each other.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from ..entities import CORNER_COUNT, WorktopConfiguration
from ..value_objects import (
    AssemblyType,
    Chamfer,
    Corner,
    CornerTreatment,
    NoTreatment,
    Radius,
    Rect,
    Region,
    Side,
)

logger = logging.getLogger(__name__)

_EPSILON = 1e-9

# Which rectangle corner each numbered corner input (r1/l1,l2 .. r4/l7,l8)
# applies to. L-shapes move corners 1 and 3 onto the secondary piece; the
# primary's left corners sit on the junction and stay sharp.
CORNER_ASSIGNMENTS: dict[AssemblyType, dict[int, tuple[Region, Corner]]] = {
    AssemblyType.STRAIGHT_CUT: {
        1: (Region.PRIMARY, Corner.BOTTOM_LEFT),
        2: (Region.PRIMARY, Corner.BOTTOM_RIGHT),
        3: (Region.PRIMARY, Corner.TOP_LEFT),
        4: (Region.PRIMARY, Corner.TOP_RIGHT),
    },
    AssemblyType.L_SHAPE_LEFT: {
        1: (Region.SECONDARY, Corner.BOTTOM_RIGHT),
        2: (Region.PRIMARY, Corner.BOTTOM_RIGHT),
        3: (Region.SECONDARY, Corner.BOTTOM_LEFT),
        4: (Region.PRIMARY, Corner.TOP_RIGHT),
    },
    AssemblyType.L_SHAPE_RIGHT: {
        1: (Region.SECONDARY, Corner.BOTTOM_RIGHT),
        2: (Region.PRIMARY, Corner.BOTTOM_RIGHT),
        3: (Region.SECONDARY, Corner.BOTTOM_LEFT),
        4: (Region.PRIMARY, Corner.TOP_RIGHT),
    },
}

# The two corners at either end of each side, in clockwise order.
_SIDE_CORNERS: dict[Side, tuple[Corner, Corner]] = {
    Side.TOP: (Corner.TOP_LEFT, Corner.TOP_RIGHT),
    Side.RIGHT: (Corner.TOP_RIGHT, Corner.BOTTOM_RIGHT),
    Side.BOTTOM: (Corner.BOTTOM_RIGHT, Corner.BOTTOM_LEFT),
    Side.LEFT: (Corner.BOTTOM_LEFT, Corner.TOP_LEFT),
}

# Diagonally opposite corners.
_OPPOSITE_CORNERS: tuple[tuple[Corner, Corner], ...] = (
    (Corner.TOP_LEFT, Corner.BOTTOM_RIGHT),
    (Corner.TOP_RIGHT, Corner.BOTTOM_LEFT),
)


@dataclass(frozen=True)
class CornerTreatments:
    """Resolved treatments for the four corners of one rectangle."""

    top_left: CornerTreatment = NoTreatment()
    top_right: CornerTreatment = NoTreatment()
    bottom_right: CornerTreatment = NoTreatment()
    bottom_left: CornerTreatment = NoTreatment()

    def get(self, corner: Corner) -> CornerTreatment:
        return getattr(self, corner.value)

    def with_corner(self, corner: Corner, treatment: CornerTreatment) -> CornerTreatments:
        return replace(self, **{corner.value: treatment})

    def items(self) -> tuple[tuple[Corner, CornerTreatment], ...]:
        return tuple((corner, self.get(corner)) for corner in Corner)


def extent_along(treatment: CornerTreatment, side: Side) -> float:
    """How far a corner treatment eats into the given side."""
    if side.is_horizontal:
        return treatment.horizontal_extent
    return treatment.vertical_extent


def resolve_corner_treatment(
    radius: float,
    chamfer_horizontal: float,
    chamfer_vertical: float,
    horizontal_side: float,
    vertical_side: float,
) -> CornerTreatment:
    """Resolve raw corner inputs into a single treatment.

    A chamfer wins when both of its legs are positive; otherwise a positive
    radius applies; otherwise the corner stays sharp. Values are clamped to
    what the adjacent sides can hold.

    Args:
        radius: Requested radius (0 for none).
        chamfer_horizontal: Requested leg along the horizontal side.
        chamfer_vertical: Requested leg along the vertical side.
        horizontal_side: Length of the horizontal side meeting the corner.
        vertical_side: Length of the vertical side meeting the corner.

    Returns:
        The resolved treatment.
    """
    if chamfer_horizontal > 0 and chamfer_vertical > 0:
        return Chamfer(
            horizontal=min(chamfer_horizontal, horizontal_side),
            vertical=min(chamfer_vertical, vertical_side),
        )
    if radius > 0:
        # Half the shorter side: two radii on one side can never overlap.
        return Radius(min(radius, min(horizontal_side, vertical_side) / 2))
    return NoTreatment()


def _shrink_chamfer(
    treatment: Chamfer, side: Side, new_extent: float
) -> CornerTreatment:
    if new_extent <= _EPSILON:
        return NoTreatment()
    if side.is_horizontal:
        return Chamfer(horizontal=new_extent, vertical=treatment.vertical)
    return Chamfer(horizontal=treatment.horizontal, vertical=new_extent)


def fit_treatments(rect: Rect, treatments: CornerTreatments) -> CornerTreatments:
    """Shrink chamfer legs so no side is consumed twice.

    Two chamfers sharing a side are scaled down proportionally; a chamfer
    next to a radius gives way to the radius. Opposite chamfers that would
    both cut the full rectangle are halved.

    Args:
        rect: The rectangle the treatments belong to.
        treatments: Per-corner treatments from ``resolve_corner_treatment``.

    Returns:
        Treatments whose extents along every side sum to at most its length.
    """
    fitted = treatments
    for side, (first, second) in _SIDE_CORNERS.items():
        length = rect.side_length(side)
        a = fitted.get(first)
        b = fitted.get(second)
        used = extent_along(a, side) + extent_along(b, side)
        if used <= length + _EPSILON:
            continue

        logger.debug(
            f"Fitting corner treatments on {side.value} side: {used} > {length}"
        )
        if isinstance(a, Chamfer) and isinstance(b, Chamfer):
            scale = length / used
            fitted = fitted.with_corner(
                first, _shrink_chamfer(a, side, extent_along(a, side) * scale)
            )
            fitted = fitted.with_corner(
                second, _shrink_chamfer(b, side, extent_along(b, side) * scale)
            )
        elif isinstance(a, Chamfer):
            fitted = fitted.with_corner(
                first, _shrink_chamfer(a, side, length - extent_along(b, side))
            )
        elif isinstance(b, Chamfer):
            fitted = fitted.with_corner(
                second, _shrink_chamfer(b, side, length - extent_along(a, side))
            )

    for first, second in _OPPOSITE_CORNERS:
        a = fitted.get(first)
        b = fitted.get(second)
        if _spans_rect(a, rect) and _spans_rect(b, rect):
            # Both would cut along the same diagonal and leave no part.
            logger.debug(
                f"Halving opposite chamfers at {first.value} and {second.value}"
            )
            half = Chamfer(horizontal=rect.width / 2, vertical=rect.height / 2)
            fitted = fitted.with_corner(first, half).with_corner(second, half)
    return fitted


def _spans_rect(treatment: CornerTreatment, rect: Rect) -> bool:
    return (
        isinstance(treatment, Chamfer)
        and treatment.horizontal >= rect.width - _EPSILON
        and treatment.vertical >= rect.height - _EPSILON
    )


def limit_extent(
    treatment: CornerTreatment, side: Side, limit: float
) -> CornerTreatment:
    """Keep a treatment from reaching further than ``limit`` along a side."""
    if extent_along(treatment, side) <= limit + _EPSILON:
        return treatment
    match treatment:
        case Chamfer():
            return _shrink_chamfer(treatment, side, limit)
        case Radius():
            return Radius(limit) if limit > _EPSILON else NoTreatment()
        case NoTreatment():
            return treatment


# Corners of an L-shape that sit next to the junction: the treatment may only
# use the free part of the side it shares with the other region.
def _junction_limits(
    configuration: WorktopConfiguration,
) -> list[tuple[Region, Corner, Side, float]]:
    match configuration.assembly_type:
        case AssemblyType.STRAIGHT_CUT:
            return []
        case AssemblyType.L_SHAPE_LEFT:
            return [
                (
                    Region.PRIMARY,
                    Corner.BOTTOM_RIGHT,
                    Side.BOTTOM,
                    configuration.dimension_a - configuration.dimension_d,
                )
            ]
        case AssemblyType.L_SHAPE_RIGHT:
            return [
                (
                    Region.SECONDARY,
                    Corner.BOTTOM_RIGHT,
                    Side.RIGHT,
                    configuration.dimension_c - configuration.dimension_b,
                )
            ]


def primary_rect(configuration: WorktopConfiguration) -> Rect:
    """Placement of the primary rectangle for the configuration."""
    match configuration.assembly_type:
        case AssemblyType.STRAIGHT_CUT | AssemblyType.L_SHAPE_LEFT:
            return Rect(0.0, 0.0, configuration.dimension_a, configuration.dimension_b)
        case AssemblyType.L_SHAPE_RIGHT:
            return Rect(
                configuration.dimension_d,
                0.0,
                configuration.dimension_a,
                configuration.dimension_b,
            )


def secondary_rect(configuration: WorktopConfiguration) -> Rect | None:
    """Placement of the secondary rectangle, or None for a straight cut."""
    match configuration.assembly_type:
        case AssemblyType.STRAIGHT_CUT:
            return None
        case AssemblyType.L_SHAPE_LEFT:
            return Rect(
                0.0,
                configuration.dimension_b,
                configuration.dimension_d,
                configuration.dimension_c,
            )
        case AssemblyType.L_SHAPE_RIGHT:
            return Rect(
                0.0, 0.0, configuration.dimension_d, configuration.dimension_c
            )


def resolve_region_treatments(
    configuration: WorktopConfiguration,
) -> dict[Region, CornerTreatments]:
    """Resolve and fit the treatments of every region in a configuration.

    Args:
        configuration: The worktop configuration.

    Returns:
        Mapping of region to its fitted corner treatments. The secondary
        region is present only for L-shaped assemblies.
    """
    rects: dict[Region, Rect] = {Region.PRIMARY: primary_rect(configuration)}
    secondary = secondary_rect(configuration)
    if secondary is not None:
        rects[Region.SECONDARY] = secondary

    resolved: dict[Region, CornerTreatments] = {
        region: CornerTreatments() for region in rects
    }
    assignments = CORNER_ASSIGNMENTS[configuration.assembly_type]
    for number in range(1, CORNER_COUNT + 1):
        region, corner = assignments[number]
        rect = rects[region]
        horizontal, vertical = configuration.chamfer_legs(number)
        treatment = resolve_corner_treatment(
            radius=configuration.radius(number),
            chamfer_horizontal=horizontal,
            chamfer_vertical=vertical,
            horizontal_side=rect.width,
            vertical_side=rect.height,
        )
        resolved[region] = resolved[region].with_corner(corner, treatment)

    for region, corner, side, limit in _junction_limits(configuration):
        limited = limit_extent(resolved[region].get(corner), side, limit)
        resolved[region] = resolved[region].with_corner(corner, limited)

    return {
        region: fit_treatments(rects[region], treatments)
        for region, treatments in resolved.items()
    }


def corner_number_for(
    assembly_type: AssemblyType, region: Region, corner: Corner
) -> int | None:
    """Inverse of ``CORNER_ASSIGNMENTS``: the numbered input driving a corner."""
    for number, target in CORNER_ASSIGNMENTS[assembly_type].items():
        if target == (region, corner):
            return number
    return None
