"""SVG exporter for worktop drawings.

This module provides an SVG exporter that wraps WorktopSvgRenderer to
write the annotated drawing as a standalone SVG document.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from worktops.infrastructure.exporters.base import ExporterRegistry
from worktops.infrastructure.svg_renderer import WorktopSvgRenderer

if TYPE_CHECKING:
    from worktops.domain.services import WorktopDrawing


logger = logging.getLogger(__name__)


@ExporterRegistry.register("svg")
class SvgExporter:
    """SVG exporter for worktop drawings.

    Attributes:
        format_name: Identifier for this export format.
        file_extension: File extension for SVG files.
        media_type: MIME type of the document.
    """

    format_name: ClassVar[str] = "svg"
    file_extension: ClassVar[str] = "svg"
    media_type: ClassVar[str] = "image/svg+xml"

    def __init__(
        self,
        show_dimensions: bool = True,
        show_captions: bool = True,
    ) -> None:
        """Initialize the SVG exporter.

        Args:
            show_dimensions: Whether to draw dimension annotations (default True).
            show_captions: Whether to caption cutouts (default True).
        """
        self.renderer = WorktopSvgRenderer(
            show_dimensions=show_dimensions,
            show_captions=show_captions,
        )

    def export(self, drawing: WorktopDrawing, path: Path) -> None:
        """Write the SVG drawing to a file."""
        path.write_text(self.export_string(drawing), encoding="utf-8")
        logger.info(f"Exported SVG to {path}")

    def export_string(self, drawing: WorktopDrawing) -> str:
        return self.renderer.render(drawing)
