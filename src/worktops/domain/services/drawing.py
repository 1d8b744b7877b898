"""The worktop drawing pipeline.

``generate_drawing`` runs every stage in order and returns an immutable
``WorktopDrawing``. It performs no I/O and keeps no state, so calling it
twice with the same configuration yields equal results.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ..entities import WorktopConfiguration
from ..value_objects import Region
from .annotations import (
    DimensionAnnotation,
    TextAnnotation,
    build_annotations,
    clear_inner_corner,
    collect_label_requests,
    cutout_captions,
    radius_labels,
)
from .arrows import DirectionArrow, build_direction_arrows
from .corner_treatment import CornerTreatments
from .cutout_placer import CutoutPlacement, DroppedCutout, place_cutouts
from .edge_highlight import EdgeHighlight, build_edge_highlights
from .frame import FrameSettings, FrameTransform, compose_frame
from .label_layout import LayoutSpacing, OffsetSchedule, schedule_labels
from .outline import DEFAULT_OFFCUT_GAP, WorktopShape, build_worktop_shape

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DrawingSettings:
    """Presentation settings shared by every drawing.

    Attributes:
        spacing: Label spacing rules.
        frame: The drawing surface.
        offcut_gap: Gap between a straight cut and its drawn offcut.
        show_direction_arrows: Whether to draw stock direction arrows.
    """

    spacing: LayoutSpacing = field(default_factory=LayoutSpacing)
    frame: FrameSettings = field(default_factory=FrameSettings)
    offcut_gap: float = DEFAULT_OFFCUT_GAP
    show_direction_arrows: bool = True

    def __post_init__(self) -> None:
        if self.offcut_gap < 0:
            raise ValueError("Offcut gap cannot be negative")


@dataclass(frozen=True)
class WorktopDrawing:
    """Everything needed to render one worktop.

    Attributes:
        configuration: The configuration the drawing was generated from.
        shape: Outlines of every region, plus the offcut.
        highlights: Highlight paths of the selected edges.
        placement: Placed and dropped cutouts.
        schedule: Label offset schedule.
        dimensions: Positioned dimension annotations.
        texts: Edge identifiers, radius labels and cutout captions.
        arrows: Stock direction arrows (empty when disabled).
        frame: Model-to-surface transform.
    """

    configuration: WorktopConfiguration
    shape: WorktopShape
    highlights: tuple[EdgeHighlight, ...]
    placement: CutoutPlacement
    schedule: OffsetSchedule
    dimensions: tuple[DimensionAnnotation, ...]
    texts: tuple[TextAnnotation, ...]
    arrows: tuple[DirectionArrow, ...]
    frame: FrameTransform

    @property
    def treatments(self) -> dict[Region, CornerTreatments]:
        """Fitted corner treatments per region."""
        return {outline.region: outline.treatments for outline in self.shape.regions}

    @property
    def dropped_cutouts(self) -> tuple[DroppedCutout, ...]:
        return self.placement.dropped

    @property
    def dropped_cutout_count(self) -> int:
        return self.placement.dropped_count

    @property
    def is_empty_selection(self) -> bool:
        """True when no edge is highlighted."""
        return not self.highlights


def generate_drawing(
    configuration: WorktopConfiguration,
    settings: DrawingSettings | None = None,
) -> WorktopDrawing:
    """Generate the complete drawing for a configuration.

    Args:
        configuration: A validated worktop configuration.
        settings: Presentation settings. Defaults are used when omitted.

    Returns:
        The immutable drawing.
    """
    settings = settings or DrawingSettings()
    spacing = settings.spacing

    shape = build_worktop_shape(configuration, offcut_gap=settings.offcut_gap)
    highlights = build_edge_highlights(shape, configuration.selected_edges)
    placement = place_cutouts(shape, configuration.cutouts)

    requests = collect_label_requests(configuration, shape, placement, highlights)
    schedule = schedule_labels(
        requests.demands(spacing), spacing, shape.bounds.min_dimension
    )
    requests, schedule = clear_inner_corner(requests, schedule, shape, spacing)
    dimensions, edge_labels = build_annotations(requests, schedule, shape, spacing)
    texts = (
        edge_labels
        + radius_labels(configuration, shape, spacing)
        + cutout_captions(placement, spacing)
    )

    arrows = build_direction_arrows(shape) if settings.show_direction_arrows else ()
    frame = compose_frame(shape, schedule, spacing, settings.frame)

    logger.debug(
        f"Generated {configuration.assembly_type.value} drawing: "
        f"{len(highlights)} edges, {len(placement.placed)} cutouts, "
        f"{len(dimensions)} dimensions"
    )
    return WorktopDrawing(
        configuration=configuration,
        shape=shape,
        highlights=highlights,
        placement=placement,
        schedule=schedule,
        dimensions=dimensions,
        texts=texts,
        arrows=arrows,
        frame=frame,
    )
