"""Worktop topology enums."""

from __future__ import annotations

from enum import Enum


class AssemblyType(str, Enum):
    """How the worktop blank is cut and joined.

    STRAIGHT_CUT is a single blank cut to length. The two L-shape variants
    join a secondary piece to the primary one; they are mirror images of
    each other in the finished kitchen.
    """

    STRAIGHT_CUT = "StraightCut"
    L_SHAPE_LEFT = "LShapeLeft"
    L_SHAPE_RIGHT = "LShapeRight"

    @property
    def is_l_shape(self) -> bool:
        """Whether the assembly has a secondary rectangle."""
        return self is not AssemblyType.STRAIGHT_CUT


class Region(str, Enum):
    """One of the rectangles making up a worktop."""

    PRIMARY = "primary"
    SECONDARY = "secondary"
