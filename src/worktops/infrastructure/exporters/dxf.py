"""DXF format exporter for worktop drawings.

Generates 2D DXF files (R2010 format) for CNC machining. Geometry is written
in model-space millimetres with the y axis flipped to CAD orientation, so a
DXF viewer shows the worktop unrotated and unscaled, without the page frame.
"""

from __future__ import annotations

import logging
from io import StringIO
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar, cast

import ezdxf
from ezdxf import path as dxf_path
from ezdxf import units
from ezdxf.enums import TextEntityAlignment

from worktops.domain.services import LineSegment, OutlinePath
from worktops.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from ezdxf.document import Drawing
    from ezdxf.layouts import Modelspace

    from worktops.domain.services import WorktopDrawing
    from worktops.domain.value_objects import Point2D, Rect


logger = logging.getLogger(__name__)


# Layer configuration for DXF output
LAYERS = {
    "OUTLINE": {"color": 7, "linetype": "CONTINUOUS"},  # White - worktop pieces
    "EDGES": {"color": 1, "linetype": "CONTINUOUS"},  # Red - edge banding
    "CUTOUTS": {"color": 3, "linetype": "CONTINUOUS"},  # Green - cutouts
    "DIMENSIONS": {"color": 5, "linetype": "CONTINUOUS"},  # Blue - annotations
    "OFFCUT": {"color": 8, "linetype": "DASHED"},  # Grey - stock offcut
}


def _cad(point: Point2D) -> tuple[float, float]:
    return (point.x, -point.y)


def _rect_points(rect: Rect) -> list[tuple[float, float]]:
    return [
        (rect.left, -rect.top),
        (rect.right, -rect.top),
        (rect.right, -rect.bottom),
        (rect.left, -rect.bottom),
    ]


@ExporterRegistry.register("dxf")
class DxfExporter:
    """Exports worktop drawings to DXF format for CNC machining.

    Attributes:
        format_name: "dxf"
        file_extension: "dxf"
        media_type: "application/dxf"
    """

    format_name: ClassVar[str] = "dxf"
    file_extension: ClassVar[str] = "dxf"
    media_type: ClassVar[str] = "application/dxf"

    def __init__(
        self, flatten_distance: float = 0.1, include_annotations: bool = True
    ) -> None:
        """Initialize the DXF exporter.

        Args:
            flatten_distance: Maximum distance in mm between a rounded corner
                and the polyline approximating it.
            include_annotations: Whether to write dimensions and labels.
        """
        if flatten_distance <= 0:
            raise ValueError(
                f"flatten_distance must be positive, got {flatten_distance}"
            )
        self.flatten_distance = flatten_distance
        self.include_annotations = include_annotations

    def export(self, drawing: WorktopDrawing, path: Path) -> None:
        """Export a drawing to a DXF file."""
        doc = self._build_document(drawing)
        doc.saveas(path)
        logger.info(f"Exported DXF to {path}")

    def export_string(self, drawing: WorktopDrawing) -> str:
        """Export a drawing as DXF text."""
        doc = self._build_document(drawing)
        stream = StringIO()
        doc.write(stream)
        return stream.getvalue()

    def _build_document(self, drawing: WorktopDrawing) -> Drawing:
        doc = self._create_document()
        msp = doc.modelspace()

        self._draw_offcut(msp, drawing)
        for outline in drawing.shape.regions:
            self._draw_path(msp, outline.path, "OUTLINE")
        for highlight in drawing.highlights:
            self._draw_path(msp, highlight.path, "EDGES")
        self._draw_cutouts(msp, drawing)
        if self.include_annotations:
            self._draw_annotations(msp, drawing)
        return doc

    def _create_document(self) -> Drawing:
        doc = ezdxf.new("R2010")
        doc.units = units.MM
        self._setup_layers(doc)
        return doc

    def _setup_layers(self, doc: Drawing) -> None:
        for name, props in LAYERS.items():
            layer = doc.layers.add(name, color=cast(int, props["color"]))
            if props["linetype"] == "DASHED":
                if "DASHED" not in doc.linetypes:
                    doc.linetypes.add(
                        "DASHED",
                        pattern=[15.0, 10.0, -5.0],
                        description="Dashed line",
                    )
                layer.dxf.linetype = "DASHED"

    def _draw_path(self, msp: Modelspace, outline: OutlinePath, layer: str) -> None:
        """Draw an outline path, flattening quadratic corners to polylines."""
        if outline.is_empty:
            return
        cad_path = dxf_path.Path(_cad(outline.start))
        for segment in outline.segments:
            if isinstance(segment, LineSegment):
                cad_path.line_to(_cad(segment.end))
            else:
                cad_path.curve3_to(_cad(segment.end), _cad(segment.control))
        if outline.closed:
            cad_path.close()
        dxf_path.render_lwpolylines(
            msp,
            [cad_path],
            distance=self.flatten_distance,
            dxfattribs={"layer": layer},
        )

    def _draw_offcut(self, msp: Modelspace, drawing: WorktopDrawing) -> None:
        offcut = drawing.shape.offcut
        if offcut is None:
            return
        msp.add_lwpolyline(
            _rect_points(offcut), close=True, dxfattribs={"layer": "OFFCUT"}
        )
        cut_x = drawing.shape.cut_line_x
        if cut_x is not None:
            rect = drawing.shape.primary.rect
            msp.add_line(
                (cut_x, -rect.top), (cut_x, -rect.bottom), dxfattribs={"layer": "OFFCUT"}
            )

    def _draw_cutouts(self, msp: Modelspace, drawing: WorktopDrawing) -> None:
        # A quarter turn maps the declared rectangle onto the footprint, so
        # the footprint is the cutout as cut.
        for placed in drawing.placement.placed:
            corners = _rect_points(placed.footprint)
            msp.add_lwpolyline(corners, close=True, dxfattribs={"layer": "CUTOUTS"})
            msp.add_line(corners[0], corners[2], dxfattribs={"layer": "CUTOUTS"})
            msp.add_line(corners[1], corners[3], dxfattribs={"layer": "CUTOUTS"})

    def _draw_annotations(self, msp: Modelspace, drawing: WorktopDrawing) -> None:
        attribs = {"layer": "DIMENSIONS"}
        for dimension in drawing.dimensions:
            for start, end in dimension.extension_lines:
                msp.add_line(_cad(start), _cad(end), dxfattribs=attribs)
            start, end = dimension.dimension_line
            msp.add_line(_cad(start), _cad(end), dxfattribs=attribs)
            self._add_text(
                msp,
                dimension.text,
                dimension.text_position,
                dimension.text_rotation,
                dimension.font_size,
            )
        for text in drawing.texts:
            self._add_text(msp, text.text, text.position, text.rotation, text.font_size)

    @staticmethod
    def _add_text(
        msp: Modelspace,
        content: str,
        position: Point2D,
        rotation: float,
        height: float,
    ) -> None:
        # Clockwise SVG rotation becomes counter-clockwise once y is flipped.
        msp.add_text(
            content,
            height=height,
            rotation=-rotation,
            dxfattribs={"layer": "DIMENSIONS"},
        ).set_placement(_cad(position), align=TextEntityAlignment.MIDDLE_CENTER)
