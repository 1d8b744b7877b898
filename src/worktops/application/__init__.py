"""Application layer - use cases and orchestration."""

from .commands import GenerateDrawingCommand
from .dtos import DrawingError, DrawingOutput

__all__ = [
    "DrawingError",
    "DrawingOutput",
    "GenerateDrawingCommand",
]
