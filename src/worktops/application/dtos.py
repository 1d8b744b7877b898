"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from worktops.domain.services import DroppedCutout, WorktopDrawing


@dataclass(frozen=True)
class DrawingError:
    """Why a configuration could not be drawn.

    Attributes:
        message: Human-readable description of the problem.
        field_name: Configuration field at fault, when one is known.
    """

    message: str
    field_name: str | None = None

    def __str__(self) -> str:
        if self.field_name is None:
            return self.message
        return f"{self.field_name}: {self.message}"


@dataclass
class DrawingOutput:
    """Output DTO containing one generated drawing.

    Attributes:
        drawing: The generated drawing, or None if generation failed.
        name: Label of the configuration the drawing came from.
        errors: Error messages if generation failed.
        error_details: The same errors with the field at fault, if known.
        warnings: Non-blocking messages, such as dropped cutouts.
    """

    drawing: WorktopDrawing | None
    name: str | None = None
    errors: list[str] = field(default_factory=list)
    error_details: list[DrawingError] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the drawing was generated successfully."""
        return len(self.errors) == 0 and self.drawing is not None

    @property
    def dropped_cutouts(self) -> tuple[DroppedCutout, ...]:
        if self.drawing is None:
            return ()
        return self.drawing.dropped_cutouts
