"""Corner treatment variants.

A corner is either left sharp, rounded with a radius, or cut with a
two-leg chamfer. The variants form a closed union, ``CornerTreatment``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True)
class NoTreatment:
    """A sharp, untreated corner."""

    @property
    def horizontal_extent(self) -> float:
        return 0.0

    @property
    def vertical_extent(self) -> float:
        return 0.0

    @property
    def is_active(self) -> bool:
        return False


@dataclass(frozen=True)
class Radius:
    """A rounded corner. Both sides are trimmed by the radius."""

    radius: float

    def __post_init__(self) -> None:
        if self.radius <= 0:
            raise ValueError("Radius must be positive")

    @property
    def horizontal_extent(self) -> float:
        return self.radius

    @property
    def vertical_extent(self) -> float:
        return self.radius

    @property
    def is_active(self) -> bool:
        return True


@dataclass(frozen=True)
class Chamfer:
    """A straight cut across a corner.

    Attributes:
        horizontal: Leg length measured along the corner's horizontal side.
        vertical: Leg length measured along the corner's vertical side.
    """

    horizontal: float
    vertical: float

    def __post_init__(self) -> None:
        if self.horizontal <= 0 or self.vertical <= 0:
            raise ValueError("Chamfer legs must be positive")

    @property
    def horizontal_extent(self) -> float:
        return self.horizontal

    @property
    def vertical_extent(self) -> float:
        return self.vertical

    @property
    def is_active(self) -> bool:
        return True


CornerTreatment: TypeAlias = NoTreatment | Radius | Chamfer
