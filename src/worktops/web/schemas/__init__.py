"""Pydantic schemas for the REST API."""

from worktops.web.schemas.requests import (
    ConfigValidateRequest,
    GenerateDrawingRequest,
    RecordDrawingRequest,
)
from worktops.web.schemas.responses import (
    DrawingResponseSchema,
    DroppedCutoutSchema,
    ErrorResponseSchema,
    ExportFormatsSchema,
    ValidationResultSchema,
)

__all__ = [
    # Requests
    "ConfigValidateRequest",
    "GenerateDrawingRequest",
    "RecordDrawingRequest",
    # Responses
    "DrawingResponseSchema",
    "DroppedCutoutSchema",
    "ErrorResponseSchema",
    "ExportFormatsSchema",
    "ValidationResultSchema",
]
