"""Edge-banding highlight paths.

A logical edge is the run of boundary a person would edge-band: it starts
and ends exactly where the neighbouring corner treatments do, and for
L-shapes it may continue across the junction into the other region. Each
corner treatment belongs to exactly one edge, so highlights never overlap.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from ..value_objects import AssemblyType, Corner, Point2D, Region, Side
from .outline import SideTrace, WorktopShape
from .path import LineSegment, OutlinePath, PathSegment, join_segments

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EdgeHighlight:
    """Open sub-path of the outline for one selected logical edge.

    Attributes:
        edge: Logical edge number, 1..6.
        regions: Regions the edge runs along, in walk order.
        path: The highlight path, built from the outline's own segments.
    """

    edge: int
    regions: tuple[Region, ...]
    path: OutlinePath


def _clip_side(
    trace: SideTrace,
    min_x: float | None = None,
    min_y: float | None = None,
) -> tuple[PathSegment, ...]:
    """Keep only the part of a straight side past the junction."""

    def clamp(point: Point2D) -> Point2D:
        x = point.x if min_x is None else max(point.x, min_x)
        y = point.y if min_y is None else max(point.y, min_y)
        return Point2D(x, y)

    return join_segments((LineSegment(clamp(trace.start), clamp(trace.end)),))


def edge_segments(
    shape: WorktopShape,
) -> dict[int, tuple[tuple[Region, ...], tuple[PathSegment, ...]]]:
    """Segments of every logical edge the shape has.

    Args:
        shape: The built worktop shape.

    Returns:
        Mapping of edge number to (regions, segments). Straight cuts have
        edges 1-4; L-shapes have edges 1-6.
    """
    p = shape.primary
    primary = (Region.PRIMARY,)

    match shape.assembly_type:
        case AssemblyType.STRAIGHT_CUT:
            return {
                1: (primary, p.side(Side.LEFT).segments),
                2: (
                    primary,
                    join_segments(
                        p.corner(Corner.TOP_LEFT).segments,
                        p.side(Side.TOP).segments,
                        p.corner(Corner.TOP_RIGHT).segments,
                    ),
                ),
                3: (primary, p.side(Side.RIGHT).segments),
                4: (
                    primary,
                    join_segments(
                        p.corner(Corner.BOTTOM_RIGHT).segments,
                        p.side(Side.BOTTOM).segments,
                        p.corner(Corner.BOTTOM_LEFT).segments,
                    ),
                ),
            }
        case AssemblyType.L_SHAPE_LEFT:
            s = shape.region(Region.SECONDARY)
            secondary = (Region.SECONDARY,)
            return {
                1: (
                    (Region.SECONDARY, Region.PRIMARY),
                    join_segments(
                        s.corner(Corner.BOTTOM_LEFT).segments,
                        s.side(Side.LEFT).segments,
                        p.side(Side.LEFT).segments,
                    ),
                ),
                2: (
                    primary,
                    join_segments(
                        p.side(Side.TOP).segments,
                        p.corner(Corner.TOP_RIGHT).segments,
                    ),
                ),
                3: (primary, p.side(Side.RIGHT).segments),
                4: (
                    primary,
                    join_segments(
                        p.corner(Corner.BOTTOM_RIGHT).segments,
                        _clip_side(p.side(Side.BOTTOM), min_x=s.rect.right),
                    ),
                ),
                5: (secondary, s.side(Side.RIGHT).segments),
                6: (
                    secondary,
                    join_segments(
                        s.corner(Corner.BOTTOM_RIGHT).segments,
                        s.side(Side.BOTTOM).segments,
                    ),
                ),
            }
        case AssemblyType.L_SHAPE_RIGHT:
            s = shape.region(Region.SECONDARY)
            secondary = (Region.SECONDARY,)
            return {
                1: (
                    secondary,
                    join_segments(
                        s.corner(Corner.BOTTOM_LEFT).segments,
                        s.side(Side.LEFT).segments,
                    ),
                ),
                2: (
                    (Region.SECONDARY, Region.PRIMARY),
                    join_segments(
                        s.side(Side.TOP).segments,
                        p.side(Side.TOP).segments,
                        p.corner(Corner.TOP_RIGHT).segments,
                    ),
                ),
                3: (primary, p.side(Side.RIGHT).segments),
                4: (
                    primary,
                    join_segments(
                        p.corner(Corner.BOTTOM_RIGHT).segments,
                        p.side(Side.BOTTOM).segments,
                    ),
                ),
                5: (secondary, _clip_side(s.side(Side.RIGHT), min_y=p.rect.bottom)),
                6: (
                    secondary,
                    join_segments(
                        s.corner(Corner.BOTTOM_RIGHT).segments,
                        s.side(Side.BOTTOM).segments,
                    ),
                ),
            }


def build_edge_highlights(
    shape: WorktopShape, selected: Iterable[int]
) -> tuple[EdgeHighlight, ...]:
    """Build highlight paths for the selected logical edges.

    Edges the shape does not have (5 and 6 on a straight cut) and edges
    whose free length is zero are skipped.

    Args:
        shape: The built worktop shape.
        selected: Selected edge numbers.

    Returns:
        Highlights in ascending edge order.
    """
    available = edge_segments(shape)
    highlights: list[EdgeHighlight] = []
    for edge in sorted(set(selected)):
        if edge not in available:
            logger.debug(
                f"Edge {edge} does not exist on {shape.assembly_type.value}; skipped"
            )
            continue
        regions, segments = available[edge]
        if not segments:
            logger.debug(f"Edge {edge} has no free length; skipped")
            continue
        highlights.append(
            EdgeHighlight(edge=edge, regions=regions, path=OutlinePath(segments))
        )
    return tuple(highlights)
