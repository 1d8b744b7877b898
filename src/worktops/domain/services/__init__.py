"""Domain services for worktop drawing generation.

This package provides the drawing pipeline, stage by stage:
- Corner treatment resolution and side fitting
- Outline and edge-highlight building
- Cutout placement
- Label scheduling and annotation
- Framing onto the drawing surface
"""

from .annotations import (
    DimensionAnnotation,
    TextAnnotation,
    TextKind,
    collect_label_demands,
    collect_label_requests,
)
from .arrows import DirectionArrow, build_direction_arrows
from .corner_treatment import (
    CORNER_ASSIGNMENTS,
    CornerTreatments,
    fit_treatments,
    resolve_corner_treatment,
    resolve_region_treatments,
)
from .cutout_placer import CutoutPlacement, DroppedCutout, PlacedCutout, place_cutouts
from .drawing import DrawingSettings, WorktopDrawing, generate_drawing
from .edge_highlight import EdgeHighlight, build_edge_highlights
from .frame import FrameSettings, FrameTransform, compose_frame
from .label_layout import (
    LabelClass,
    LabelDemand,
    LabelSide,
    LayoutSpacing,
    OffsetSchedule,
    OffsetSlot,
    schedule_labels,
)
from .outline import (
    RegionOutline,
    WorktopShape,
    build_region_outline,
    build_worktop_shape,
)
from .path import LineSegment, OutlinePath, QuadSegment, format_number

__all__ = [
    # Corner treatments
    "CORNER_ASSIGNMENTS",
    "CornerTreatments",
    "fit_treatments",
    "resolve_corner_treatment",
    "resolve_region_treatments",
    # Outlines and paths
    "LineSegment",
    "OutlinePath",
    "QuadSegment",
    "RegionOutline",
    "WorktopShape",
    "build_region_outline",
    "build_worktop_shape",
    "format_number",
    # Edges and cutouts
    "CutoutPlacement",
    "DroppedCutout",
    "EdgeHighlight",
    "PlacedCutout",
    "build_edge_highlights",
    "place_cutouts",
    # Labels
    "DimensionAnnotation",
    "LabelClass",
    "LabelDemand",
    "LabelSide",
    "LayoutSpacing",
    "OffsetSchedule",
    "OffsetSlot",
    "TextAnnotation",
    "TextKind",
    "collect_label_demands",
    "collect_label_requests",
    "schedule_labels",
    # Composition
    "DirectionArrow",
    "DrawingSettings",
    "FrameSettings",
    "FrameTransform",
    "WorktopDrawing",
    "build_direction_arrows",
    "compose_frame",
    "generate_drawing",
]
