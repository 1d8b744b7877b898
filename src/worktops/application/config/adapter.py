"""Adapters from configuration models to domain objects.

This module converts the Pydantic configuration models into the frozen
domain dataclasses consumed by ``generate_drawing``. Stored records from the
quoting application go through the same path via ``record_to_configuration``.
"""

import logging

from worktops.application.config.schema import (
    LayoutConfig,
    WorktopConfigSchema,
    WorktopDrawingConfiguration,
    WorktopRecord,
)
from worktops.domain.entities import Cutout, WorktopConfiguration
from worktops.domain.services import DrawingSettings, FrameSettings, LayoutSpacing
from worktops.domain.value_objects import AssemblyType, Region

logger = logging.getLogger(__name__)


def worktop_to_domain(worktop: WorktopConfigSchema) -> WorktopConfiguration:
    """Convert the worktop section of a configuration to a domain entity.

    Args:
        worktop: A validated worktop configuration section.

    Returns:
        The immutable WorktopConfiguration.

    Raises:
        InvalidConfigurationError: If the geometry is rejected by the domain.
    """
    dims = worktop.dimensions
    roundings = worktop.roundings
    chamfers = worktop.chamfers
    edges = worktop.edges
    return WorktopConfiguration(
        assembly_type=worktop.assembly_type,
        dimension_a=dims.a,
        dimension_b=dims.b,
        dimension_c=dims.c,
        dimension_d=dims.d,
        rounding_r1=roundings.r1,
        rounding_r2=roundings.r2,
        rounding_r3=roundings.r3,
        rounding_r4=roundings.r4,
        chamfer_l1=chamfers.l1,
        chamfer_l2=chamfers.l2,
        chamfer_l3=chamfers.l3,
        chamfer_l4=chamfers.l4,
        chamfer_l5=chamfers.l5,
        chamfer_l6=chamfers.l6,
        chamfer_l7=chamfers.l7,
        chamfer_l8=chamfers.l8,
        cutouts=tuple(
            Cutout(
                width=c.width,
                height=c.height,
                distance_from_left=c.distance_from_left,
                distance_from_bottom=c.distance_from_bottom,
                region=c.region,
            )
            for c in worktop.cutouts
        ),
        edge_selected_1=edges.edge_1,
        edge_selected_2=edges.edge_2,
        edge_selected_3=edges.edge_3,
        edge_selected_4=edges.edge_4,
        edge_selected_5=edges.edge_5,
        edge_selected_6=edges.edge_6,
        stock_length=worktop.stock_length,
    )


def config_to_worktop(config: WorktopDrawingConfiguration) -> WorktopConfiguration:
    """Convert a full configuration file model to a domain entity."""
    return worktop_to_domain(config.worktop)


def layout_to_settings(layout: LayoutConfig) -> DrawingSettings:
    """Build drawing settings from a layout section."""
    spacing = LayoutSpacing(
        base_offset=layout.base_offset,
        stack_spacing=layout.stack_spacing,
        inter_class_spacing=layout.inter_class_spacing,
        text_gap=layout.text_gap,
        dimension_font_size=layout.dimension_font_size,
        annotation_font_size=layout.annotation_font_size,
        caption_font_size=layout.caption_font_size,
        edge_label_ratio=layout.edge_label_ratio,
        edge_label_spacing=layout.edge_label_spacing,
        frame_padding=layout.frame_padding,
    )
    frame = FrameSettings(
        width=layout.page_width,
        height=layout.page_height,
        margin=layout.page_margin,
    )
    return DrawingSettings(
        spacing=spacing,
        frame=frame,
        offcut_gap=layout.offcut_gap,
        show_direction_arrows=layout.show_direction_arrows,
    )


def config_to_settings(config: WorktopDrawingConfiguration) -> DrawingSettings:
    """Build drawing settings from a configuration's layout section."""
    return layout_to_settings(config.layout)


def _record_cutouts(record: WorktopRecord, assembly: AssemblyType) -> tuple[Cutout, ...]:
    cutouts: list[Cutout] = []
    for index, item in enumerate(record.cutouts, start=1):
        # Records keep half-filled cutout rows; those were never drawn.
        if item.width <= 0 or item.height <= 0:
            logger.info(f"Skipping record cutout {index} without a size")
            continue
        region = (
            Region.SECONDARY
            if item.is_perpendicular and assembly.is_l_shape
            else Region.PRIMARY
        )
        cutouts.append(
            Cutout(
                width=item.width,
                height=item.height,
                distance_from_left=item.distance_from_left,
                distance_from_bottom=item.distance_from_bottom,
                region=region,
            )
        )
    return tuple(cutouts)


def record_to_configuration(record: WorktopRecord) -> WorktopConfiguration:
    """Convert a stored quoting record to a domain entity.

    Secondary dimensions are ignored for straight cuts, null treatments
    become zero, and null edge flags are treated as unselected.

    Args:
        record: A validated WorktopRecord.

    Returns:
        The immutable WorktopConfiguration.

    Raises:
        InvalidConfigurationError: If the geometry is rejected by the domain.
    """
    assembly = record.assembly
    is_l_shape = assembly.is_l_shape
    return WorktopConfiguration(
        assembly_type=assembly,
        dimension_a=record.dimension_a,
        dimension_b=record.dimension_b,
        dimension_c=record.dimension_c if is_l_shape else None,
        dimension_d=record.dimension_d if is_l_shape else None,
        rounding_r1=record.rounding_r1 or 0.0,
        rounding_r2=record.rounding_r2 or 0.0,
        rounding_r3=record.rounding_r3 or 0.0,
        rounding_r4=record.rounding_r4 or 0.0,
        chamfer_l1=record.cut_l1 or 0.0,
        chamfer_l2=record.cut_l2 or 0.0,
        chamfer_l3=record.cut_l3 or 0.0,
        chamfer_l4=record.cut_l4 or 0.0,
        chamfer_l5=record.cut_l5 or 0.0,
        chamfer_l6=record.cut_l6 or 0.0,
        chamfer_l7=record.cut_l7 or 0.0,
        chamfer_l8=record.cut_l8 or 0.0,
        cutouts=_record_cutouts(record, assembly),
        edge_selected_1=bool(record.edge_position1),
        edge_selected_2=bool(record.edge_position2),
        edge_selected_3=bool(record.edge_position3),
        edge_selected_4=bool(record.edge_position4),
        edge_selected_5=bool(record.edge_position5),
        edge_selected_6=bool(record.edge_position6),
    )
