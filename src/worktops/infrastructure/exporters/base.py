"""Base exporter framework with Protocol, Registry, and Manager."""

from __future__ import annotations

import logging
from abc import abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar, Protocol, runtime_checkable

if TYPE_CHECKING:
    from worktops.domain.services import WorktopDrawing


logger = logging.getLogger(__name__)


@runtime_checkable
class Exporter(Protocol):
    """Protocol for all drawing exporters.

    Attributes:
        format_name: Registry name of the format (e.g., "svg", "dxf").
        file_extension: File extension without leading dot.
        media_type: MIME type used when the export is served over HTTP.
    """

    format_name: ClassVar[str]
    file_extension: ClassVar[str]
    media_type: ClassVar[str]

    @abstractmethod
    def export(self, drawing: WorktopDrawing, path: Path) -> None:
        """Export a drawing to a file."""
        ...

    def export_string(self, drawing: WorktopDrawing) -> str:
        """Export a drawing as a string.

        Raises:
            NotImplementedError: If the format does not support string export.
        """
        raise NotImplementedError(
            f"Format '{self.format_name}' does not support string export"
        )


class ExporterRegistry:
    """Registry of exporter classes by format name.

    Exporters register themselves with the ``register`` decorator when their
    module is imported; importing ``worktops.infrastructure.exporters``
    registers every built-in format.

    Example:
        @ExporterRegistry.register("svg")
        class SvgDrawingExporter:
            format_name = "svg"
            file_extension = "svg"
            ...
    """

    _exporters: ClassVar[dict[str, type[Exporter]]] = {}

    @classmethod
    def register(cls, format_name: str) -> type:
        """Decorator to register an exporter class under a format name."""

        def decorator(exporter_class: type[Exporter]) -> type[Exporter]:
            if format_name in cls._exporters:
                logger.warning(
                    f"Overwriting existing exporter for format '{format_name}'"
                )
            cls._exporters[format_name] = exporter_class
            logger.debug(f"Registered exporter '{format_name}': {exporter_class.__name__}")
            return exporter_class

        return decorator

    @classmethod
    def get(cls, format_name: str) -> type[Exporter]:
        """Get an exporter class by format name.

        Raises:
            KeyError: If no exporter is registered for the format.
        """
        if format_name not in cls._exporters:
            available = ", ".join(sorted(cls._exporters.keys()))
            raise KeyError(
                f"No exporter registered for format '{format_name}'. "
                f"Available formats: {available or 'none'}"
            )
        return cls._exporters[format_name]

    @classmethod
    def available_formats(cls) -> list[str]:
        return sorted(cls._exporters.keys())

    @classmethod
    def is_registered(cls, format_name: str) -> bool:
        return format_name in cls._exporters

    @classmethod
    def resolve_formats(cls, formats: list[str]) -> list[str]:
        """Expand "all" and check every requested format is registered.

        Duplicates are removed while keeping the first occurrence's order.

        Raises:
            KeyError: If any format is not registered.
        """
        resolved: list[str] = []
        for format_name in formats:
            names = cls.available_formats() if format_name == "all" else [format_name]
            for name in names:
                cls.get(name)
                if name not in resolved:
                    resolved.append(name)
        return resolved

    @classmethod
    def clear(cls) -> None:
        """Clear all registered exporters. Used by tests."""
        cls._exporters.clear()


class ExportManager:
    """Writes a drawing to one or more formats in an output directory.

    Attributes:
        output_dir: Directory where exported files will be saved.
    """

    def __init__(self, output_dir: Path) -> None:
        self.output_dir = Path(output_dir)

    def path_for(self, format_name: str, project_name: str) -> Path:
        """File path used for a format: ``{project}_{format}.{ext}``."""
        exporter_class = ExporterRegistry.get(format_name)
        filename = f"{project_name}_{format_name}.{exporter_class.file_extension}"
        return self.output_dir / filename

    def export_all(
        self,
        formats: list[str],
        drawing: WorktopDrawing,
        project_name: str = "worktop",
    ) -> dict[str, Path]:
        """Export a drawing to several formats.

        Every format is checked before anything is written, so an unknown
        format leaves the output directory untouched.

        Args:
            formats: Format names, or ["all"].
            drawing: The drawing to export.
            project_name: Base name for output files.

        Returns:
            Mapping of format name to written file path.

        Raises:
            KeyError: If any format is not registered.
            OSError: If file operations fail.
        """
        resolved = ExporterRegistry.resolve_formats(formats)
        self.output_dir.mkdir(parents=True, exist_ok=True)

        results: dict[str, Path] = {}
        for format_name in resolved:
            exporter = ExporterRegistry.get(format_name)()
            filepath = self.path_for(format_name, project_name)
            logger.info(f"Exporting to {format_name}: {filepath}")
            exporter.export(drawing, filepath)
            results[format_name] = filepath
        return results

    def export_single(
        self,
        format_name: str,
        drawing: WorktopDrawing,
        project_name: str = "worktop",
    ) -> Path:
        """Export a drawing to a single format and return the file path."""
        return self.export_all([format_name], drawing, project_name)[format_name]
