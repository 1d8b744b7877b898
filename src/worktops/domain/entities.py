"""Domain entities describing a worktop to be drawn."""

from __future__ import annotations

from dataclasses import dataclass, field

from .value_objects import AssemblyType, Region

# Length of an uncut worktop blank in millimetres.
DEFAULT_STOCK_LENGTH = 4100.0

EDGE_COUNT = 6
CORNER_COUNT = 4


class InvalidConfigurationError(ValueError):
    """Raised when a worktop configuration cannot describe a real part.

    Attributes:
        field: Name of the offending configuration field.
        message: Human-readable description of the problem.
    """

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")


@dataclass(frozen=True)
class Cutout:
    """A rectangular cutout (sink, hob) requested in one region.

    Offsets are measured from the region's left and bottom edges. For the
    secondary region of an L-shape they are measured in that region's own
    rotated frame; see ``worktops.domain.services.cutout_placer``.
    """

    width: float
    height: float
    distance_from_left: float = 0.0
    distance_from_bottom: float = 0.0
    region: Region = Region.PRIMARY

    def __post_init__(self) -> None:
        if self.width <= 0:
            raise InvalidConfigurationError("width", "Cutout width must be positive")
        if self.height <= 0:
            raise InvalidConfigurationError("height", "Cutout height must be positive")
        if self.distance_from_left < 0:
            raise InvalidConfigurationError(
                "distance_from_left", "Cutout offset cannot be negative"
            )
        if self.distance_from_bottom < 0:
            raise InvalidConfigurationError(
                "distance_from_bottom", "Cutout offset cannot be negative"
            )


@dataclass(frozen=True)
class WorktopConfiguration:
    """Complete, immutable description of one worktop drawing.

    Attributes:
        assembly_type: Topology of the part.
        dimension_a: Primary length. For a straight cut this is the cut
            position along the blank.
        dimension_b: Primary depth.
        dimension_c: Secondary length (L-shapes only).
        dimension_d: Secondary width (L-shapes only).
        rounding_r1: Radius for corner 1 (0 means none). r2..r4 likewise.
        chamfer_l1: First leg of corner 1's chamfer. Odd legs run along the
            corner's horizontal side, even legs along its vertical side.
        cutouts: Requested cutouts, in label stacking order.
        edge_selected_1: Whether logical edge 1 is edge-banded. 2..6 likewise.
        stock_length: Length of the uncut blank, used for the offcut.
    """

    assembly_type: AssemblyType
    dimension_a: float
    dimension_b: float
    dimension_c: float | None = None
    dimension_d: float | None = None
    rounding_r1: float = 0.0
    rounding_r2: float = 0.0
    rounding_r3: float = 0.0
    rounding_r4: float = 0.0
    chamfer_l1: float = 0.0
    chamfer_l2: float = 0.0
    chamfer_l3: float = 0.0
    chamfer_l4: float = 0.0
    chamfer_l5: float = 0.0
    chamfer_l6: float = 0.0
    chamfer_l7: float = 0.0
    chamfer_l8: float = 0.0
    cutouts: tuple[Cutout, ...] = field(default_factory=tuple)
    edge_selected_1: bool = False
    edge_selected_2: bool = False
    edge_selected_3: bool = False
    edge_selected_4: bool = False
    edge_selected_5: bool = False
    edge_selected_6: bool = False
    stock_length: float = DEFAULT_STOCK_LENGTH

    def __post_init__(self) -> None:
        if not isinstance(self.assembly_type, AssemblyType):
            try:
                object.__setattr__(
                    self, "assembly_type", AssemblyType(self.assembly_type)
                )
            except ValueError:
                raise InvalidConfigurationError(
                    "assembly_type",
                    f"Unknown assembly type {self.assembly_type!r}",
                ) from None
        if not isinstance(self.cutouts, tuple):
            object.__setattr__(self, "cutouts", tuple(self.cutouts))

        self._validate_dimensions()
        self._validate_treatments()

    def _validate_dimensions(self) -> None:
        if self.dimension_a <= 0:
            raise InvalidConfigurationError("dimension_a", "Must be positive")
        if self.dimension_b <= 0:
            raise InvalidConfigurationError("dimension_b", "Must be positive")
        if self.stock_length <= 0:
            raise InvalidConfigurationError("stock_length", "Must be positive")

        has_c = self.dimension_c is not None
        has_d = self.dimension_d is not None

        match self.assembly_type:
            case AssemblyType.STRAIGHT_CUT:
                if has_c or has_d:
                    raise InvalidConfigurationError(
                        "dimension_c" if has_c else "dimension_d",
                        "Only L-shaped assemblies take a secondary dimension",
                    )
                if self.dimension_a > self.stock_length:
                    raise InvalidConfigurationError(
                        "dimension_a",
                        f"Cut position {self.dimension_a} exceeds the stock "
                        f"length {self.stock_length}",
                    )
            case AssemblyType.L_SHAPE_LEFT | AssemblyType.L_SHAPE_RIGHT:
                if not has_c:
                    raise InvalidConfigurationError(
                        "dimension_c", "Required for L-shaped assemblies"
                    )
                if not has_d:
                    raise InvalidConfigurationError(
                        "dimension_d", "Required for L-shaped assemblies"
                    )
                if self.dimension_c <= 0:
                    raise InvalidConfigurationError("dimension_c", "Must be positive")
                if self.dimension_d <= 0:
                    raise InvalidConfigurationError("dimension_d", "Must be positive")
                if (
                    self.assembly_type is AssemblyType.L_SHAPE_LEFT
                    and self.dimension_d >= self.dimension_a
                ):
                    raise InvalidConfigurationError(
                        "dimension_d",
                        "The secondary width must be smaller than dimension_a",
                    )
                if (
                    self.assembly_type is AssemblyType.L_SHAPE_RIGHT
                    and self.dimension_c <= self.dimension_b
                ):
                    raise InvalidConfigurationError(
                        "dimension_c",
                        "The secondary length must be greater than dimension_b",
                    )

    def _validate_treatments(self) -> None:
        for index in range(1, CORNER_COUNT + 1):
            if self.radius(index) < 0:
                raise InvalidConfigurationError(
                    f"rounding_r{index}", "Radius cannot be negative"
                )
        for index in range(1, 2 * CORNER_COUNT + 1):
            if getattr(self, f"chamfer_l{index}") < 0:
                raise InvalidConfigurationError(
                    f"chamfer_l{index}", "Chamfer leg cannot be negative"
                )

    @property
    def is_l_shape(self) -> bool:
        return self.assembly_type.is_l_shape

    def radius(self, corner_number: int) -> float:
        """Raw radius requested for corner 1..4."""
        return getattr(self, f"rounding_r{corner_number}")

    def chamfer_legs(self, corner_number: int) -> tuple[float, float]:
        """Raw (horizontal, vertical) chamfer legs requested for corner 1..4."""
        return (
            getattr(self, f"chamfer_l{2 * corner_number - 1}"),
            getattr(self, f"chamfer_l{2 * corner_number}"),
        )

    def is_edge_selected(self, edge_number: int) -> bool:
        """Whether logical edge 1..6 is selected."""
        if not 1 <= edge_number <= EDGE_COUNT:
            raise ValueError(f"Edge number must be 1..{EDGE_COUNT}, got {edge_number}")
        return getattr(self, f"edge_selected_{edge_number}")

    @property
    def selected_edges(self) -> tuple[int, ...]:
        """Numbers of all selected edges, ascending."""
        return tuple(
            n for n in range(1, EDGE_COUNT + 1) if self.is_edge_selected(n)
        )
