"""Domain layer - worktop geometry and drawing generation."""

from .entities import (
    DEFAULT_STOCK_LENGTH,
    Cutout,
    InvalidConfigurationError,
    WorktopConfiguration,
)
from .services import (
    DrawingSettings,
    FrameSettings,
    LayoutSpacing,
    WorktopDrawing,
    generate_drawing,
)
from .value_objects import (
    AssemblyType,
    Chamfer,
    Corner,
    NoTreatment,
    Point2D,
    Radius,
    Rect,
    Region,
    Side,
)

__all__ = [
    "DEFAULT_STOCK_LENGTH",
    "AssemblyType",
    "Chamfer",
    "Corner",
    "Cutout",
    "DrawingSettings",
    "FrameSettings",
    "InvalidConfigurationError",
    "LayoutSpacing",
    "NoTreatment",
    "Point2D",
    "Radius",
    "Rect",
    "Region",
    "Side",
    "WorktopConfiguration",
    "generate_drawing",
    "WorktopDrawing",
]
