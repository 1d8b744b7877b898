"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class DroppedCutoutSchema(BaseModel):
    """A cutout left out of the drawing."""

    index: int = Field(..., description="1-based position in the configuration")
    reason: str = Field(..., description="Why the cutout was not drawn")


class DrawingResponseSchema(BaseModel):
    """Response for drawing generation."""

    svg: str = Field(..., description="The SVG document")
    dropped_cutouts: list[DroppedCutoutSchema] = Field(
        default_factory=list, description="Cutouts that were not drawn"
    )
    warnings: list[str] = Field(default_factory=list, description="Warning messages")


class ValidationResultSchema(BaseModel):
    """Response for configuration validation."""

    is_valid: bool = Field(..., description="Whether configuration is valid")
    errors: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation errors"
    )
    warnings: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation warnings"
    )


class ExportFormatsSchema(BaseModel):
    """Response for available export formats."""

    formats: list[str] = Field(..., description="Available export format names")


class ErrorResponseSchema(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error category")
    details: Any = Field(default=None, description="Additional error details")
