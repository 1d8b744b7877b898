"""Exporter framework for worktop drawings.

This package provides a unified exporter framework with:
- Exporter Protocol: Defines the interface for all exporters
- ExporterRegistry: Central registry for format discovery
- ExportManager: Coordinates multi-format export operations

Registered exporters:
- dxf: DXF format for 2D CNC machining
- json: Geometry summary with resolved treatments, paths and schedule
- svg: The annotated A4 drawing

Usage:
    from worktops.infrastructure.exporters import ExportManager, ExporterRegistry

    formats = ExporterRegistry.available_formats()

    dxf_exporter = ExporterRegistry.get("dxf")(flatten_distance=0.05)

    manager = ExportManager(output_dir=Path("./output"))
    results = manager.export_all(["svg", "dxf"], drawing, project_name="kitchen")
"""

from worktops.infrastructure.exporters.base import (
    Exporter,
    ExporterRegistry,
    ExportManager,
)

# Import exporters to trigger registration
from worktops.infrastructure.exporters.dxf import DxfExporter
from worktops.infrastructure.exporters.geometry_json import GeometryJsonExporter
from worktops.infrastructure.exporters.svg import SvgExporter

__all__ = [
    # Framework
    "Exporter",
    "ExporterRegistry",
    "ExportManager",
    # Registered exporters
    "DxfExporter",
    "GeometryJsonExporter",
    "SvgExporter",
]
