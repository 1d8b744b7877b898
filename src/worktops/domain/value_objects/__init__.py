"""Value objects for the worktop domain.

This module provides immutable data types used throughout the drawing
pipeline. All classes are re-exported from sub-modules for convenience.
"""

from __future__ import annotations

# Planar geometry
from ._geometry import (
    CLOCKWISE_CORNERS,
    INCOMING_SIDE,
    OUTGOING_SIDE,
    Corner,
    Point2D,
    Rect,
    Side,
)

# Corner treatments
from ._treatments import Chamfer, CornerTreatment, NoTreatment, Radius

# Topology
from ._worktop import AssemblyType, Region

__all__ = [
    # Planar geometry
    "CLOCKWISE_CORNERS",
    "INCOMING_SIDE",
    "OUTGOING_SIDE",
    "Corner",
    "Point2D",
    "Rect",
    "Side",
    # Corner treatments
    "Chamfer",
    "CornerTreatment",
    "NoTreatment",
    "Radius",
    # Topology
    "AssemblyType",
    "Region",
]
