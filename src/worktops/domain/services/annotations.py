"""Dimension and identifier annotations around a worktop.

Annotations are produced in two passes. First every label the drawing
needs is collected as a request bound to a lane and class; the requests
are counted into ``LabelDemand`` items for the scheduler. Once the offset
schedule exists, the requests are turned into concrete annotations with
absolute coordinates.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, replace
from enum import Enum

from ..entities import CORNER_COUNT, WorktopConfiguration
from ..value_objects import (
    AssemblyType,
    Chamfer,
    Corner,
    Point2D,
    Radius,
    Rect,
    Region,
    Side,
)
from .corner_treatment import CORNER_ASSIGNMENTS
from .cutout_placer import CutoutPlacement
from .edge_highlight import EdgeHighlight
from .label_layout import (
    LabelClass,
    LabelDemand,
    LabelSide,
    LayoutSpacing,
    OffsetSchedule,
)
from .outline import WorktopShape
from .path import format_number

logger = logging.getLogger(__name__)

EDGE_LANES: dict[int, LabelSide] = {
    1: LabelSide.LEFT,
    2: LabelSide.TOP,
    3: LabelSide.RIGHT,
    4: LabelSide.BOTTOM,
    5: LabelSide.SECONDARY_RIGHT,
    6: LabelSide.SECONDARY_BOTTOM,
}

_PRIMARY_LANES: dict[Side, LabelSide] = {
    Side.TOP: LabelSide.TOP,
    Side.RIGHT: LabelSide.RIGHT,
    Side.BOTTOM: LabelSide.BOTTOM,
    Side.LEFT: LabelSide.LEFT,
}
_SECONDARY_LANES: dict[Side, LabelSide] = {
    Side.TOP: LabelSide.TOP,
    Side.RIGHT: LabelSide.SECONDARY_RIGHT,
    Side.BOTTOM: LabelSide.SECONDARY_BOTTOM,
    Side.LEFT: LabelSide.LEFT,
}

# Lanes for cutout offset dimensions: (horizontal, vertical) per region.
# Each assembly measures from sides that are free of the junction.
_CUTOUT_LANES: dict[AssemblyType, dict[Region, tuple[LabelSide, LabelSide]]] = {
    AssemblyType.STRAIGHT_CUT: {
        Region.PRIMARY: (LabelSide.BOTTOM, LabelSide.LEFT),
    },
    AssemblyType.L_SHAPE_LEFT: {
        Region.PRIMARY: (LabelSide.TOP, LabelSide.LEFT),
        Region.SECONDARY: (LabelSide.SECONDARY_BOTTOM, LabelSide.SECONDARY_RIGHT),
    },
    AssemblyType.L_SHAPE_RIGHT: {
        Region.PRIMARY: (LabelSide.BOTTOM, LabelSide.RIGHT),
        Region.SECONDARY: (LabelSide.SECONDARY_BOTTOM, LabelSide.LEFT),
    },
}

# Average glyph advance as a fraction of the font size, for label bounds.
TEXT_WIDTH_RATIO = 0.6


class TextKind(str, Enum):
    """Free-standing text annotations."""

    EDGE_ID = "edge_id"
    RADIUS = "radius"
    CUTOUT_CAPTION = "cutout_caption"


@dataclass(frozen=True)
class DimensionRequest:
    """A dimension waiting for its lane offset.

    Attributes:
        side: Lane the dimension is drawn in.
        label_class: Scheduling class.
        start: Start of the measured span along the lane axis.
        end: End of the measured span along the lane axis.
        text: Label text.
    """

    side: LabelSide
    label_class: LabelClass
    start: float
    end: float
    text: str


@dataclass(frozen=True)
class EdgeLabelRequest:
    """An edge identifier waiting for its lane offset.

    Attributes:
        side: Lane the identifier is drawn in.
        edge: Edge number.
        start: Start of the highlighted edge along the lane axis.
        end: End of the highlighted edge along the lane axis.
        center: Where the identifier is centred along the lane axis.
    """

    side: LabelSide
    edge: int
    start: float
    end: float
    center: float

    @property
    def text(self) -> str:
        return f"Edge {self.edge}"


@dataclass(frozen=True)
class LabelRequests:
    """Everything the lanes have to hold for one drawing."""

    dimensions: tuple[DimensionRequest, ...] = ()
    edge_labels: tuple[EdgeLabelRequest, ...] = ()

    def demands(self, spacing: LayoutSpacing) -> tuple[LabelDemand, ...]:
        """Count requests per lane and class."""
        counts: dict[tuple[LabelSide, LabelClass], int] = {}
        for request in self.dimensions:
            key = (request.side, request.label_class)
            counts[key] = counts.get(key, 0) + 1
        for label in self.edge_labels:
            key = (label.side, LabelClass.EDGE_ID)
            counts[key] = counts.get(key, 0) + 1
        return tuple(
            LabelDemand(
                side=side,
                label_class=label_class,
                count=count,
                extent=spacing.extent_for(label_class),
            )
            for (side, label_class), count in counts.items()
        )


@dataclass(frozen=True)
class DimensionAnnotation:
    """A positioned dimension: two extension lines, a line, and text."""

    side: LabelSide
    label_class: LabelClass
    text: str
    extension_lines: tuple[tuple[Point2D, Point2D], tuple[Point2D, Point2D]]
    dimension_line: tuple[Point2D, Point2D]
    text_position: Point2D
    text_rotation: float
    font_size: float

    @property
    def bounds(self) -> Rect:
        """Box around the dimension line and its text.

        Extension lines are left out; they run from the outline to the
        dimension line.
        """
        start, end = self.dimension_line
        line = Rect(
            min(start.x, end.x),
            min(start.y, end.y),
            abs(end.x - start.x),
            abs(end.y - start.y),
        )
        text = _text_bounds(
            self.text_position, (self.text,), self.font_size, self.text_rotation
        )
        return line.union(text)


@dataclass(frozen=True)
class TextAnnotation:
    """A positioned block of text.

    Attributes:
        kind: What the text labels.
        lines: Text lines, rendered top to bottom around the position.
        position: Anchor point of the text.
        rotation: Rotation in degrees about the anchor point.
        font_size: Font size in drawing units.
        anchor: SVG text-anchor value.
        lane: Lane of an edge identifier; None for texts on the shape.
    """

    kind: TextKind
    lines: tuple[str, ...]
    position: Point2D
    rotation: float
    font_size: float
    anchor: str = "middle"
    lane: LabelSide | None = None

    @property
    def text(self) -> str:
        return " ".join(self.lines)

    @property
    def bounds(self) -> Rect:
        return _text_bounds(
            self.position, self.lines, self.font_size, self.rotation, self.anchor
        )


def _text_bounds(
    position: Point2D,
    lines: Sequence[str],
    font_size: float,
    rotation: float,
    anchor: str = "middle",
) -> Rect:
    """Estimated box of a text block rotated by 0 or a quarter turn."""
    length = max(len(line) for line in lines) * font_size * TEXT_WIDTH_RATIO
    depth = len(lines) * font_size
    lead = {"start": 0.0, "end": length}.get(anchor, length / 2)
    if rotation == 0:
        return Rect(position.x - lead, position.y - depth / 2, length, depth)
    # +90 runs the text down the page, -90 up it.
    top = position.y - lead if rotation > 0 else position.y - (length - lead)
    return Rect(position.x - depth / 2, top, depth, length)


def lane_anchor(shape: WorktopShape, side: LabelSide) -> float:
    """Perpendicular coordinate of the edge a lane grows out of."""
    bounds = shape.bounds
    match side:
        case LabelSide.LEFT:
            return bounds.left
        case LabelSide.TOP:
            return bounds.top
        case LabelSide.RIGHT:
            return bounds.right
        case LabelSide.BOTTOM:
            return shape.primary.rect.bottom
        case LabelSide.SECONDARY_RIGHT:
            return shape.region(Region.SECONDARY).rect.right
        case LabelSide.SECONDARY_BOTTOM:
            return shape.region(Region.SECONDARY).rect.bottom


def _lane_for(region: Region, side: Side) -> LabelSide:
    if region is Region.PRIMARY:
        return _PRIMARY_LANES[side]
    return _SECONDARY_LANES[side]


def _mm(value: float) -> str:
    return f"{format_number(value)}mm"


def _chamfer_requests(
    configuration: WorktopConfiguration, shape: WorktopShape
) -> list[DimensionRequest]:
    requests: list[DimensionRequest] = []
    assignments = CORNER_ASSIGNMENTS[configuration.assembly_type]
    for number in range(1, CORNER_COUNT + 1):
        region, corner = assignments[number]
        outline = shape.region(region)
        treatment = outline.treatments.get(corner)
        if not isinstance(treatment, Chamfer):
            continue

        vertex = outline.rect.corner(corner)
        is_left = corner in (Corner.TOP_LEFT, Corner.BOTTOM_LEFT)
        is_top = corner in (Corner.TOP_LEFT, Corner.TOP_RIGHT)
        sx = 1.0 if is_left else -1.0
        sy = 1.0 if is_top else -1.0
        horizontal_side = Side.TOP if is_top else Side.BOTTOM
        vertical_side = Side.LEFT if is_left else Side.RIGHT

        requests.append(
            DimensionRequest(
                side=_lane_for(region, horizontal_side),
                label_class=LabelClass.CHAMFER,
                start=vertex.x,
                end=vertex.x + sx * treatment.horizontal,
                text=f"L{2 * number - 1}: {_mm(treatment.horizontal)}",
            )
        )
        requests.append(
            DimensionRequest(
                side=_lane_for(region, vertical_side),
                label_class=LabelClass.CHAMFER,
                start=vertex.y,
                end=vertex.y + sy * treatment.vertical,
                text=f"L{2 * number}: {_mm(treatment.vertical)}",
            )
        )
    return requests


def _cutout_requests(
    configuration: WorktopConfiguration,
    shape: WorktopShape,
    placement: CutoutPlacement,
) -> list[DimensionRequest]:
    lanes = _CUTOUT_LANES[configuration.assembly_type]
    requests: list[DimensionRequest] = []
    for placed in placement.placed:
        rect = shape.region(placed.region).rect
        footprint = placed.footprint
        horizontal_lane, vertical_lane = lanes[placed.region]
        cutout = placed.cutout
        match placed.region:
            case Region.PRIMARY:
                requests.append(
                    DimensionRequest(
                        side=horizontal_lane,
                        label_class=LabelClass.CUTOUT,
                        start=rect.left,
                        end=footprint.left,
                        text=_mm(cutout.distance_from_left),
                    )
                )
                requests.append(
                    DimensionRequest(
                        side=vertical_lane,
                        label_class=LabelClass.CUTOUT,
                        start=footprint.bottom,
                        end=rect.bottom,
                        text=_mm(cutout.distance_from_bottom),
                    )
                )
            case Region.SECONDARY:
                requests.append(
                    DimensionRequest(
                        side=horizontal_lane,
                        label_class=LabelClass.CUTOUT,
                        start=footprint.right,
                        end=rect.right,
                        text=_mm(cutout.distance_from_bottom),
                    )
                )
                requests.append(
                    DimensionRequest(
                        side=vertical_lane,
                        label_class=LabelClass.CUTOUT,
                        start=footprint.bottom,
                        end=rect.bottom,
                        text=_mm(cutout.distance_from_left),
                    )
                )
    return requests


def _outer_requests(
    configuration: WorktopConfiguration, shape: WorktopShape
) -> list[DimensionRequest]:
    p = shape.primary.rect
    match configuration.assembly_type:
        case AssemblyType.STRAIGHT_CUT:
            return [
                DimensionRequest(
                    LabelSide.RIGHT,
                    LabelClass.OUTER_DIMENSION,
                    p.top,
                    p.bottom,
                    f"B: {_mm(configuration.dimension_b)}",
                ),
                DimensionRequest(
                    LabelSide.BOTTOM,
                    LabelClass.OUTER_DIMENSION,
                    p.left,
                    p.right,
                    f"A: {_mm(configuration.dimension_a)}",
                ),
            ]
        case AssemblyType.L_SHAPE_LEFT | AssemblyType.L_SHAPE_RIGHT:
            s = shape.region(Region.SECONDARY).rect
            return [
                DimensionRequest(
                    LabelSide.LEFT,
                    LabelClass.OUTER_DIMENSION,
                    s.top,
                    s.bottom,
                    f"C: {_mm(configuration.dimension_c)}",
                ),
                DimensionRequest(
                    LabelSide.TOP,
                    LabelClass.OUTER_DIMENSION,
                    p.left,
                    p.right,
                    f"A: {_mm(configuration.dimension_a)}",
                ),
                DimensionRequest(
                    LabelSide.RIGHT,
                    LabelClass.OUTER_DIMENSION,
                    p.top,
                    p.bottom,
                    f"B: {_mm(configuration.dimension_b)}",
                ),
                DimensionRequest(
                    LabelSide.SECONDARY_BOTTOM,
                    LabelClass.OUTER_DIMENSION,
                    s.left,
                    s.right,
                    f"D: {_mm(configuration.dimension_d)}",
                ),
            ]


def _edge_label_requests(
    highlights: Sequence[EdgeHighlight],
) -> list[EdgeLabelRequest]:
    requests: list[EdgeLabelRequest] = []
    for highlight in highlights:
        side = EDGE_LANES[highlight.edge]
        points = highlight.path.vertices()
        values = [p.x if side.is_horizontal else p.y for p in points]
        start, end = min(values), max(values)
        requests.append(
            EdgeLabelRequest(
                side=side,
                edge=highlight.edge,
                start=start,
                end=end,
                center=(start + end) / 2,
            )
        )
    return requests


def collect_label_requests(
    configuration: WorktopConfiguration,
    shape: WorktopShape,
    placement: CutoutPlacement,
    highlights: Sequence[EdgeHighlight],
) -> LabelRequests:
    """Gather every lane label the drawing needs.

    Args:
        configuration: The worktop configuration.
        shape: The built shape.
        placement: Placed cutouts.
        highlights: Highlights of the selected edges.

    Returns:
        Dimension and edge label requests, in stacking order.
    """
    dimensions = (
        _chamfer_requests(configuration, shape)
        + _cutout_requests(configuration, shape, placement)
        + _outer_requests(configuration, shape)
    )
    return LabelRequests(
        dimensions=tuple(dimensions),
        edge_labels=tuple(_edge_label_requests(highlights)),
    )


def collect_label_demands(
    configuration: WorktopConfiguration,
    shape: WorktopShape,
    placement: CutoutPlacement,
    highlights: Sequence[EdgeHighlight],
    spacing: LayoutSpacing,
) -> tuple[LabelDemand, ...]:
    """Label demands per lane and class, ready for ``schedule_labels``."""
    return collect_label_requests(
        configuration, shape, placement, highlights
    ).demands(spacing)


def _position_dimension(
    request: DimensionRequest,
    row: int,
    anchor: float,
    slot_offset: float,
    spacing: LayoutSpacing,
) -> DimensionAnnotation:
    side = request.side
    font_size = spacing.font_size_for(request.label_class)
    distance = slot_offset + spacing.base_offset + row * spacing.stack_spacing
    line = anchor + side.direction * distance
    text = anchor + side.direction * (distance + spacing.text_gap)
    middle = (request.start + request.end) / 2

    if side.is_horizontal:
        return DimensionAnnotation(
            side=side,
            label_class=request.label_class,
            text=request.text,
            extension_lines=(
                (Point2D(request.start, anchor), Point2D(request.start, line)),
                (Point2D(request.end, anchor), Point2D(request.end, line)),
            ),
            dimension_line=(Point2D(request.start, line), Point2D(request.end, line)),
            text_position=Point2D(middle, text),
            text_rotation=0.0,
            font_size=font_size,
        )
    return DimensionAnnotation(
        side=side,
        label_class=request.label_class,
        text=request.text,
        extension_lines=(
            (Point2D(anchor, request.start), Point2D(line, request.start)),
            (Point2D(anchor, request.end), Point2D(line, request.end)),
        ),
        dimension_line=(Point2D(line, request.start), Point2D(line, request.end)),
        text_position=Point2D(text, middle),
        text_rotation=-90.0,
        font_size=font_size,
    )


def build_annotations(
    requests: LabelRequests,
    schedule: OffsetSchedule,
    shape: WorktopShape,
    spacing: LayoutSpacing,
) -> tuple[tuple[DimensionAnnotation, ...], tuple[TextAnnotation, ...]]:
    """Position every lane label using the offset schedule.

    Args:
        requests: Collected label requests.
        schedule: Offset schedule computed from the requests' demands.
        shape: The built shape.
        spacing: Spacing rules used for the schedule.

    Returns:
        Positioned dimensions and edge identifier texts.
    """
    rows: dict[tuple[LabelSide, LabelClass], int] = {}
    dimensions: list[DimensionAnnotation] = []
    for request in requests.dimensions:
        key = (request.side, request.label_class)
        row = rows.get(key, 0)
        rows[key] = row + 1
        dimensions.append(
            _position_dimension(
                request,
                row,
                lane_anchor(shape, request.side),
                schedule.offset(request.side, request.label_class),
                spacing,
            )
        )

    texts = tuple(
        _position_edge_label(
            label,
            lane_anchor(shape, label.side),
            schedule.offset(label.side, LabelClass.EDGE_ID),
            spacing,
        )
        for label in requests.edge_labels
    )
    return tuple(dimensions), texts


def _position_edge_label(
    label: EdgeLabelRequest,
    anchor: float,
    slot_offset: float,
    spacing: LayoutSpacing,
) -> TextAnnotation:
    side = label.side
    font_size = spacing.annotation_font_size
    perpendicular = anchor + side.direction * (slot_offset + font_size / 2)
    if side.is_horizontal:
        position = Point2D(label.center, perpendicular)
        rotation = 0.0
    else:
        position = Point2D(perpendicular, label.center)
        rotation = -90.0 if side is LabelSide.LEFT else 90.0
    return TextAnnotation(
        kind=TextKind.EDGE_ID,
        lines=(label.text,),
        position=position,
        rotation=rotation,
        font_size=font_size,
        lane=side,
    )


def _lane_boxes(
    dimensions: Sequence[DimensionAnnotation],
    texts: Sequence[TextAnnotation],
    side: LabelSide,
) -> list[Rect]:
    return [d.bounds for d in dimensions if d.side is side] + [
        t.bounds for t in texts if t.lane is side
    ]


def clear_inner_corner(
    requests: LabelRequests,
    schedule: OffsetSchedule,
    shape: WorktopShape,
    spacing: LayoutSpacing,
) -> tuple[LabelRequests, OffsetSchedule]:
    """Keep the secondary right lane out of the bottom lane in an L's corner.

    Both lanes grow out of the inner corner of an L-shape: the bottom lane
    downward from the primary region, the secondary right lane rightward
    from the secondary region. The bottom lane keeps its place. Edge
    identifiers of the secondary right lane first slide along their edge
    to the part below the bottom lane's labels; whatever still overlaps
    pushes the whole secondary right lane outward.

    Args:
        requests: Collected label requests.
        schedule: Offset schedule computed from the requests' demands.
        shape: The built shape.
        spacing: Spacing rules used for the schedule.

    Returns:
        The requests and schedule to position labels with. Both are
        returned unchanged for a straight cut or when the lanes are clear.
    """
    if shape.secondary is None:
        return requests, schedule

    dimensions, texts = build_annotations(requests, schedule, shape, spacing)
    blocked = _lane_boxes(dimensions, texts, LabelSide.BOTTOM)
    if not blocked:
        return requests, schedule

    by_label = dict(zip(requests.edge_labels, texts))
    clear_from = max(box.bottom for box in blocked) + spacing.text_gap
    edge_labels: list[EdgeLabelRequest] = []
    for label in requests.edge_labels:
        box = by_label[label].bounds
        length = box.height
        free_start = max(label.start, clear_from)
        if (
            label.side is LabelSide.SECONDARY_RIGHT
            and any(box.intersects(other) for other in blocked)
            and label.end - free_start >= length
        ):
            logger.debug(f"Sliding edge {label.edge} label clear of the bottom lane")
            label = replace(label, center=(free_start + label.end) / 2)
        edge_labels.append(label)
    requests = replace(requests, edge_labels=tuple(edge_labels))

    while True:
        dimensions, texts = build_annotations(requests, schedule, shape, spacing)
        overlaps = [
            (box, other)
            for box in _lane_boxes(dimensions, texts, LabelSide.SECONDARY_RIGHT)
            for other in blocked
            if box.intersects(other)
        ]
        if not overlaps:
            return requests, schedule
        shift = max(
            other.right + spacing.text_gap - box.left for box, other in overlaps
        )
        logger.debug(f"Pushing secondary right lane out by {shift:g}mm")
        schedule = schedule.shifted(LabelSide.SECONDARY_RIGHT, shift)


def radius_labels(
    configuration: WorktopConfiguration,
    shape: WorktopShape,
    spacing: LayoutSpacing,
) -> tuple[TextAnnotation, ...]:
    """Labels for rounded corners, placed just inside each corner."""
    labels: list[TextAnnotation] = []
    assignments = CORNER_ASSIGNMENTS[configuration.assembly_type]
    for number in range(1, CORNER_COUNT + 1):
        region, corner = assignments[number]
        outline = shape.region(region)
        treatment = outline.treatments.get(corner)
        if not isinstance(treatment, Radius):
            continue
        vertex = outline.rect.corner(corner)
        is_left = corner in (Corner.TOP_LEFT, Corner.BOTTOM_LEFT)
        is_top = corner in (Corner.TOP_LEFT, Corner.TOP_RIGHT)
        inset = treatment.radius * 0.6
        labels.append(
            TextAnnotation(
                kind=TextKind.RADIUS,
                lines=(f"R{number}: {_mm(treatment.radius)}",),
                position=vertex.offset(
                    inset if is_left else -inset, inset if is_top else -inset
                ),
                rotation=0.0,
                font_size=spacing.caption_font_size,
                anchor="start" if is_left else "end",
            )
        )
    return tuple(labels)


def cutout_captions(
    placement: CutoutPlacement, spacing: LayoutSpacing
) -> tuple[TextAnnotation, ...]:
    """Two-line captions ("Cutout N" and its size) at each cutout's centre."""
    return tuple(
        TextAnnotation(
            kind=TextKind.CUTOUT_CAPTION,
            lines=(
                f"Cutout {placed.index}",
                f"{format_number(placed.cutout.width)}×"
                f"{format_number(placed.cutout.height)}",
            ),
            position=placed.footprint.center,
            rotation=0.0,
            font_size=spacing.caption_font_size,
        )
        for placed in placement.placed
    )
