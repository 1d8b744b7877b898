"""Infrastructure layer - rendering and file export."""

from .svg_renderer import WorktopSvgRenderer

from .exporters import (
    DxfExporter,
    Exporter,
    ExporterRegistry,
    ExportManager,
    GeometryJsonExporter,
    SvgExporter,
)

__all__ = [
    # Rendering
    "WorktopSvgRenderer",
    # Exporter framework
    "DxfExporter",
    "Exporter",
    "ExporterRegistry",
    "ExportManager",
    "GeometryJsonExporter",
    "SvgExporter",
]
