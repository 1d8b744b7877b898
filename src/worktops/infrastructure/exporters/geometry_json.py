"""JSON geometry summary exporter.

Exports the resolved geometry of a drawing so other tools can consume it
without parsing SVG:
- The configuration as interpreted, with resolved corner treatments
- Outline and edge-highlight path data
- Placed and dropped cutouts
- The label offset schedule and the page transform
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar

from worktops.domain.value_objects import Chamfer, NoTreatment, Radius, Rect
from worktops.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from worktops.domain.services import CornerTreatments, WorktopDrawing
    from worktops.domain.value_objects import CornerTreatment


logger = logging.getLogger(__name__)


# Current schema version for geometry JSON output
SCHEMA_VERSION = "1.0"


def _rect(rect: Rect) -> dict[str, float]:
    return {"x": rect.x, "y": rect.y, "width": rect.width, "height": rect.height}


def _treatment(treatment: CornerTreatment) -> dict[str, Any]:
    match treatment:
        case Radius(radius=radius):
            return {"type": "radius", "radius": radius}
        case Chamfer(horizontal=horizontal, vertical=vertical):
            return {"type": "chamfer", "horizontal": horizontal, "vertical": vertical}
        case NoTreatment():
            return {"type": "none"}


def _treatments(treatments: CornerTreatments) -> dict[str, Any]:
    return {corner.value: _treatment(t) for corner, t in treatments.items()}


@ExporterRegistry.register("json")
class GeometryJsonExporter:
    """Exports the resolved geometry of a drawing as JSON.

    Attributes:
        format_name: "json"
        file_extension: "json"
        media_type: "application/json"
    """

    format_name: ClassVar[str] = "json"
    file_extension: ClassVar[str] = "json"
    media_type: ClassVar[str] = "application/json"

    def __init__(self, include_annotations: bool = True, indent: int = 2) -> None:
        """Initialize the JSON exporter.

        Args:
            include_annotations: Whether to include dimension and text labels.
            indent: JSON indentation level (default 2 spaces).
        """
        self.include_annotations = include_annotations
        self.indent = indent

    def export(self, drawing: WorktopDrawing, path: Path) -> None:
        path.write_text(self.export_string(drawing), encoding="utf-8")
        logger.info(f"Exported geometry JSON to {path}")

    def export_string(self, drawing: WorktopDrawing) -> str:
        return json.dumps(self.build(drawing), indent=self.indent)

    def build(self, drawing: WorktopDrawing) -> dict[str, Any]:
        """Build the JSON-serializable summary of a drawing."""
        configuration = drawing.configuration
        shape = drawing.shape

        result: dict[str, Any] = {
            "schema_version": SCHEMA_VERSION,
            "assembly_type": configuration.assembly_type.value,
            "dimensions": {
                "a": configuration.dimension_a,
                "b": configuration.dimension_b,
                "c": configuration.dimension_c,
                "d": configuration.dimension_d,
            },
            "stock_length": configuration.stock_length,
            "regions": [
                {
                    "region": outline.region.value,
                    "rect": _rect(outline.rect),
                    "treatments": _treatments(outline.treatments),
                    "path": outline.path.to_svg(),
                }
                for outline in shape.regions
            ],
            "offcut": _rect(shape.offcut) if shape.offcut is not None else None,
            "cut_line_x": shape.cut_line_x,
            "edges": [
                {
                    "edge": highlight.edge,
                    "regions": [region.value for region in highlight.regions],
                    "path": highlight.path.to_svg(),
                }
                for highlight in drawing.highlights
            ],
            "cutouts": {
                "placed": [
                    {
                        "index": placed.index,
                        "region": placed.region.value,
                        "footprint": _rect(placed.footprint),
                        "rotation": placed.rotation,
                    }
                    for placed in drawing.placement.placed
                ],
                "dropped": [
                    {"index": dropped.index, "reason": dropped.reason}
                    for dropped in drawing.placement.dropped
                ],
            },
            "schedule": [
                {
                    "side": slot.side.value,
                    "label_class": slot.label_class.value,
                    "offset": slot.offset,
                    "count": slot.count,
                    "near": slot.near,
                    "far": slot.far,
                }
                for slot in drawing.schedule.slots
            ],
            "transform": {
                "box": _rect(drawing.frame.box),
                "scale": drawing.frame.scale,
                "page": asdict(drawing.frame.settings),
                "svg": drawing.frame.svg_transform,
            },
        }

        if self.include_annotations:
            result["annotations"] = {
                "dimensions": [
                    {
                        "side": d.side.value,
                        "label_class": d.label_class.value,
                        "text": d.text,
                    }
                    for d in drawing.dimensions
                ],
                "texts": [{"kind": t.kind.value, "text": t.text} for t in drawing.texts],
            }

        return result
