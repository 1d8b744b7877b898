"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class GenerateDrawingRequest(BaseModel):
    """Request for drawing a worktop from a full configuration."""

    config: dict[str, Any] = Field(..., description="Full worktop configuration JSON")


class RecordDrawingRequest(BaseModel):
    """Request for drawing a worktop stored by the quoting application."""

    record: dict[str, Any] = Field(..., description="Stored worktop record")


class ConfigValidateRequest(BaseModel):
    """Request for validating a configuration."""

    config: dict[str, Any] = Field(..., description="Worktop configuration JSON")
