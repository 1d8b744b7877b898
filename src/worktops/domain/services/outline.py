"""Outline builders for the primary and secondary worktop rectangles.

Each region is walked clockwise (on screen) starting just after its
top-left corner. Alongside the closed path the builder keeps a trace of
every side and corner, so edge highlights can reuse the exact segments the
outline is made of.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..entities import WorktopConfiguration
from ..value_objects import (
    CLOCKWISE_CORNERS,
    INCOMING_SIDE,
    OUTGOING_SIDE,
    AssemblyType,
    Chamfer,
    Corner,
    CornerTreatment,
    NoTreatment,
    Point2D,
    Radius,
    Rect,
    Region,
    Side,
)
from .corner_treatment import (
    CornerTreatments,
    extent_along,
    primary_rect,
    resolve_region_treatments,
    secondary_rect,
)
from .path import LineSegment, OutlinePath, PathSegment, QuadSegment, join_segments

logger = logging.getLogger(__name__)

# Gap between the cut line and the hatched offcut, in millimetres.
DEFAULT_OFFCUT_GAP = 25.0

# Unit direction of travel along each side in the clockwise walk.
_SIDE_DIRECTION: dict[Side, tuple[float, float]] = {
    Side.TOP: (1.0, 0.0),
    Side.RIGHT: (0.0, 1.0),
    Side.BOTTOM: (-1.0, 0.0),
    Side.LEFT: (0.0, -1.0),
}

# Clockwise corner at the start and at the end of each side.
_SIDE_ENDS: dict[Side, tuple[Corner, Corner]] = {
    Side.TOP: (Corner.TOP_LEFT, Corner.TOP_RIGHT),
    Side.RIGHT: (Corner.TOP_RIGHT, Corner.BOTTOM_RIGHT),
    Side.BOTTOM: (Corner.BOTTOM_RIGHT, Corner.BOTTOM_LEFT),
    Side.LEFT: (Corner.BOTTOM_LEFT, Corner.TOP_LEFT),
}


@dataclass(frozen=True)
class CornerTrace:
    """Where a corner's treatment starts and ends on the outline.

    Attributes:
        corner: Which corner of the rectangle.
        treatment: The resolved treatment.
        vertex: The sharp corner point of the underlying rectangle.
        entry: Point where the walk leaves the incoming side.
        exit: Point where the walk joins the outgoing side.
        segments: Segments from entry to exit (empty for a sharp corner).
    """

    corner: Corner
    treatment: CornerTreatment
    vertex: Point2D
    entry: Point2D
    exit: Point2D
    segments: tuple[PathSegment, ...]


@dataclass(frozen=True)
class SideTrace:
    """The straight part of a side between its two corner treatments."""

    side: Side
    start: Point2D
    end: Point2D

    @property
    def segments(self) -> tuple[PathSegment, ...]:
        return join_segments((LineSegment(self.start, self.end),))


@dataclass(frozen=True)
class RegionOutline:
    """Closed outline of one rectangle with its corner/side traces."""

    region: Region
    rect: Rect
    treatments: CornerTreatments
    corners: tuple[CornerTrace, ...]
    sides: tuple[SideTrace, ...]
    path: OutlinePath

    def corner(self, corner: Corner) -> CornerTrace:
        for trace in self.corners:
            if trace.corner is corner:
                return trace
        raise KeyError(corner)

    def side(self, side: Side) -> SideTrace:
        for trace in self.sides:
            if trace.side is side:
                return trace
        raise KeyError(side)


@dataclass(frozen=True)
class WorktopShape:
    """All outlines of a worktop, plus the offcut of a straight cut.

    Attributes:
        assembly_type: Topology the shape was built for.
        primary: Outline of the primary rectangle.
        secondary: Outline of the secondary rectangle (L-shapes only).
        offcut: Removed material beyond the cut line (straight cut only).
        cut_line_x: x position of the cut line when an offcut exists.
    """

    assembly_type: AssemblyType
    primary: RegionOutline
    secondary: RegionOutline | None = None
    offcut: Rect | None = None
    cut_line_x: float | None = None

    @property
    def regions(self) -> tuple[RegionOutline, ...]:
        if self.secondary is None:
            return (self.primary,)
        return (self.primary, self.secondary)

    def region(self, region: Region) -> RegionOutline:
        match region:
            case Region.PRIMARY:
                return self.primary
            case Region.SECONDARY:
                if self.secondary is None:
                    raise KeyError("Shape has no secondary region")
                return self.secondary

    @property
    def bounds(self) -> Rect:
        """Bounding box of the kept part. The offcut is not included."""
        if self.secondary is None:
            return self.primary.rect
        return self.primary.rect.union(self.secondary.rect)


def _corner_trace(rect: Rect, corner: Corner, treatment: CornerTreatment) -> CornerTrace:
    vertex = rect.corner(corner)
    incoming = INCOMING_SIDE[corner]
    outgoing = OUTGOING_SIDE[corner]
    in_dx, in_dy = _SIDE_DIRECTION[incoming]
    out_dx, out_dy = _SIDE_DIRECTION[outgoing]
    in_extent = extent_along(treatment, incoming)
    out_extent = extent_along(treatment, outgoing)

    entry = vertex.offset(-in_dx * in_extent, -in_dy * in_extent)
    exit_ = vertex.offset(out_dx * out_extent, out_dy * out_extent)

    segments: tuple[PathSegment, ...]
    match treatment:
        case NoTreatment():
            segments = ()
        case Radius():
            segments = (QuadSegment(entry, vertex, exit_),)
        case Chamfer():
            segments = (LineSegment(entry, exit_),)

    return CornerTrace(
        corner=corner,
        treatment=treatment,
        vertex=vertex,
        entry=entry,
        exit=exit_,
        segments=segments,
    )


def build_region_outline(
    region: Region, rect: Rect, treatments: CornerTreatments
) -> RegionOutline:
    """Build the closed outline of one rectangle.

    Args:
        region: Which region the rectangle is.
        rect: Position and size of the rectangle.
        treatments: Fitted corner treatments for the rectangle.

    Returns:
        The region outline with its corner and side traces.
    """
    corners = tuple(
        _corner_trace(rect, corner, treatments.get(corner))
        for corner in CLOCKWISE_CORNERS
    )
    by_corner = {trace.corner: trace for trace in corners}
    sides = tuple(
        SideTrace(
            side=side,
            start=by_corner[start].exit,
            end=by_corner[end].entry,
        )
        for side, (start, end) in _SIDE_ENDS.items()
    )
    by_side = {trace.side: trace for trace in sides}

    segments = join_segments(
        by_side[Side.TOP].segments,
        by_corner[Corner.TOP_RIGHT].segments,
        by_side[Side.RIGHT].segments,
        by_corner[Corner.BOTTOM_RIGHT].segments,
        by_side[Side.BOTTOM].segments,
        by_corner[Corner.BOTTOM_LEFT].segments,
        by_side[Side.LEFT].segments,
        by_corner[Corner.TOP_LEFT].segments,
    )
    return RegionOutline(
        region=region,
        rect=rect,
        treatments=treatments,
        corners=corners,
        sides=sides,
        path=OutlinePath(segments=segments, closed=True),
    )


def build_worktop_shape(
    configuration: WorktopConfiguration,
    offcut_gap: float = DEFAULT_OFFCUT_GAP,
) -> WorktopShape:
    """Build every outline for a configuration.

    Args:
        configuration: The worktop configuration.
        offcut_gap: Gap left between the cut line and the drawn offcut.

    Returns:
        The worktop shape.
    """
    treatments = resolve_region_treatments(configuration)
    primary = build_region_outline(
        Region.PRIMARY, primary_rect(configuration), treatments[Region.PRIMARY]
    )

    match configuration.assembly_type:
        case AssemblyType.STRAIGHT_CUT:
            offcut: Rect | None = None
            cut_line_x: float | None = None
            cut = configuration.dimension_a
            remaining = configuration.stock_length - cut - offcut_gap
            if remaining > 0:
                offcut = Rect(cut + offcut_gap, 0.0, remaining, configuration.dimension_b)
                cut_line_x = cut
            logger.debug(f"Built straight cut at {cut} (offcut: {offcut})")
            return WorktopShape(
                assembly_type=configuration.assembly_type,
                primary=primary,
                offcut=offcut,
                cut_line_x=cut_line_x,
            )
        case AssemblyType.L_SHAPE_LEFT | AssemblyType.L_SHAPE_RIGHT:
            rect = secondary_rect(configuration)
            assert rect is not None
            secondary = build_region_outline(
                Region.SECONDARY, rect, treatments[Region.SECONDARY]
            )
            logger.debug(
                f"Built {configuration.assembly_type.value} with secondary at {rect}"
            )
            return WorktopShape(
                assembly_type=configuration.assembly_type,
                primary=primary,
                secondary=secondary,
            )
