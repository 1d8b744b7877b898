"""Pydantic configuration schema models for worktop drawings.

This module defines the configuration schema for JSON-based worktop
configuration files. It uses Pydantic v2 for validation and serialization.

The AssemblyType and Region enums are reused from the domain layer to ensure
consistency and avoid duplication. ``WorktopRecord`` describes the flat
record stored by the quoting application, which predates the nested schema.
"""

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from worktops.domain.entities import DEFAULT_STOCK_LENGTH, EDGE_COUNT
from worktops.domain.value_objects import AssemblyType, Region

# Supported schema versions for configuration files
# Version 1.0: Initial schema with worktop, output and layout sections
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})

# Output formats that can be requested from a configuration file
VALID_FORMATS: frozenset[str] = frozenset({"svg", "dxf", "json"})

# Assembly names used by the quoting application's stored records
RECORD_ASSEMBLY_TYPES: dict[str, AssemblyType] = {
    "Levágás": AssemblyType.STRAIGHT_CUT,
    "Összemarás Balos": AssemblyType.L_SHAPE_LEFT,
    "Összemarás jobbos": AssemblyType.L_SHAPE_RIGHT,
}


class DimensionsConfig(BaseModel):
    """Outer dimensions of the worktop in millimetres.

    Attributes:
        a: Primary length; the cut position for a straight cut.
        b: Primary depth.
        c: Secondary length (L-shapes only).
        d: Secondary width (L-shapes only).
    """

    model_config = ConfigDict(extra="forbid")

    a: float = Field(..., gt=0, description="Primary length in mm")
    b: float = Field(..., gt=0, description="Primary depth in mm")
    c: float | None = Field(default=None, gt=0, description="Secondary length in mm")
    d: float | None = Field(default=None, gt=0, description="Secondary width in mm")


class RoundingsConfig(BaseModel):
    """Corner radii; 0 leaves the corner sharp."""

    model_config = ConfigDict(extra="forbid")

    r1: float = Field(default=0.0, ge=0)
    r2: float = Field(default=0.0, ge=0)
    r3: float = Field(default=0.0, ge=0)
    r4: float = Field(default=0.0, ge=0)


class ChamfersConfig(BaseModel):
    """Chamfer legs. Corner N uses l(2N-1) horizontally and l(2N) vertically."""

    model_config = ConfigDict(extra="forbid")

    l1: float = Field(default=0.0, ge=0)
    l2: float = Field(default=0.0, ge=0)
    l3: float = Field(default=0.0, ge=0)
    l4: float = Field(default=0.0, ge=0)
    l5: float = Field(default=0.0, ge=0)
    l6: float = Field(default=0.0, ge=0)
    l7: float = Field(default=0.0, ge=0)
    l8: float = Field(default=0.0, ge=0)


class CutoutConfig(BaseModel):
    """A rectangular cutout such as a sink or hob opening.

    Attributes:
        width: Cutout width in mm.
        height: Cutout height in mm.
        distance_from_left: Offset from the region's left edge.
        distance_from_bottom: Offset from the region's bottom edge.
        region: Which piece the cutout is in. Secondary offsets are measured
            in that piece's own rotated frame.
    """

    model_config = ConfigDict(extra="forbid")

    width: float = Field(..., gt=0)
    height: float = Field(..., gt=0)
    distance_from_left: float = Field(default=0.0, ge=0)
    distance_from_bottom: float = Field(default=0.0, ge=0)
    region: Region = Region.PRIMARY


class EdgesConfig(BaseModel):
    """Edge-banding selection for logical edges 1-6."""

    model_config = ConfigDict(extra="forbid")

    edge_1: bool = False
    edge_2: bool = False
    edge_3: bool = False
    edge_4: bool = False
    edge_5: bool = False
    edge_6: bool = False

    @property
    def selected(self) -> tuple[int, ...]:
        return tuple(
            n for n in range(1, EDGE_COUNT + 1) if getattr(self, f"edge_{n}")
        )


class WorktopConfigSchema(BaseModel):
    """Worktop geometry configuration.

    Attributes:
        assembly_type: StraightCut, LShapeLeft or LShapeRight.
        dimensions: Outer dimensions.
        stock_length: Length of the uncut blank.
        roundings: Corner radii.
        chamfers: Corner chamfer legs.
        cutouts: Cutouts in caption order.
        edges: Edge-banding selection.
    """

    model_config = ConfigDict(extra="forbid")

    assembly_type: AssemblyType
    dimensions: DimensionsConfig
    stock_length: float = Field(default=DEFAULT_STOCK_LENGTH, gt=0)
    roundings: RoundingsConfig = Field(default_factory=RoundingsConfig)
    chamfers: ChamfersConfig = Field(default_factory=ChamfersConfig)
    cutouts: list[CutoutConfig] = Field(default_factory=list)
    edges: EdgesConfig = Field(default_factory=EdgesConfig)

    @model_validator(mode="after")
    def validate_geometry(self) -> "WorktopConfigSchema":
        """Check the secondary dimensions against the assembly type."""
        dims = self.dimensions
        match self.assembly_type:
            case AssemblyType.STRAIGHT_CUT:
                if dims.c is not None or dims.d is not None:
                    raise ValueError(
                        "dimensions.c and dimensions.d are only allowed for "
                        "L-shaped assemblies"
                    )
                if dims.a > self.stock_length:
                    raise ValueError(
                        f"dimensions.a ({dims.a}) exceeds stock_length "
                        f"({self.stock_length})"
                    )
            case AssemblyType.L_SHAPE_LEFT | AssemblyType.L_SHAPE_RIGHT:
                if dims.c is None or dims.d is None:
                    raise ValueError(
                        "dimensions.c and dimensions.d are required for "
                        f"{self.assembly_type.value}"
                    )
                if self.assembly_type is AssemblyType.L_SHAPE_LEFT and dims.d >= dims.a:
                    raise ValueError(
                        f"dimensions.d ({dims.d}) must be smaller than "
                        f"dimensions.a ({dims.a}) for LShapeLeft"
                    )
                if self.assembly_type is AssemblyType.L_SHAPE_RIGHT and dims.c <= dims.b:
                    raise ValueError(
                        f"dimensions.c ({dims.c}) must be greater than "
                        f"dimensions.b ({dims.b}) for LShapeRight"
                    )
        return self


class OutputConfig(BaseModel):
    """Configuration for output formats and file paths.

    Attributes:
        formats: Output formats to generate, or ["all"].
        output_dir: Directory for output files.
        project_name: Base name for output files.
    """

    model_config = ConfigDict(extra="forbid")

    formats: list[str] = Field(
        default_factory=lambda: ["svg"], description="List of output formats to generate"
    )
    output_dir: str | None = Field(default=None, description="Directory for output files")
    project_name: str = Field(default="worktop", description="Base name for output files")

    @field_validator("formats")
    @classmethod
    def validate_formats(cls, v: list[str]) -> list[str]:
        """Validate format names in the formats list."""
        invalid = set(v) - VALID_FORMATS - {"all"}
        if invalid:
            raise ValueError(
                f"Invalid formats: {sorted(invalid)}. "
                f"Valid formats: {sorted(VALID_FORMATS)}"
            )
        return v


class LayoutConfig(BaseModel):
    """Overrides for label spacing and the drawing surface.

    All lengths are in millimetres. Defaults match the standard A4 drawing.
    """

    model_config = ConfigDict(extra="forbid")

    base_offset: float = Field(default=100.0, ge=0)
    stack_spacing: float = Field(default=120.0, ge=0)
    inter_class_spacing: float = Field(default=300.0, ge=0)
    text_gap: float = Field(default=60.0, ge=0)
    dimension_font_size: float = Field(default=100.0, gt=0)
    annotation_font_size: float = Field(default=80.0, gt=0)
    caption_font_size: float = Field(default=60.0, gt=0)
    edge_label_ratio: float = Field(default=0.15, ge=0)
    edge_label_spacing: float = Field(default=100.0, ge=0)
    frame_padding: float = Field(default=100.0, ge=0)
    offcut_gap: float = Field(default=25.0, ge=0)
    show_direction_arrows: bool = True
    page_width: float = Field(default=210.0, gt=0)
    page_height: float = Field(default=297.0, gt=0)
    page_margin: float = Field(default=5.0, ge=0)

    @model_validator(mode="after")
    def validate_page(self) -> "LayoutConfig":
        if 2 * self.page_margin >= min(self.page_width, self.page_height):
            raise ValueError("page_margin leaves no drawable area")
        return self


class WorktopDrawingConfiguration(BaseModel):
    """Root configuration model for worktop drawings.

    This is the top-level model that represents a complete worktop
    configuration file. It includes schema versioning for future
    compatibility.

    Attributes:
        schema_version: Version string in format "major.minor" (e.g., "1.0")
        worktop: Worktop geometry configuration
        output: Output format configuration
        layout: Label spacing and drawing surface overrides

    Example:
        >>> config = WorktopDrawingConfiguration(
        ...     schema_version="1.0",
        ...     worktop=WorktopConfigSchema(
        ...         assembly_type="StraightCut",
        ...         dimensions=DimensionsConfig(a=600, b=400),
        ...     ),
        ... )
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    worktop: WorktopConfigSchema
    output: OutputConfig = Field(default_factory=OutputConfig)
    layout: LayoutConfig = Field(default_factory=LayoutConfig)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Validate that schema version is supported.

        Newer minor versions within a supported major version are accepted
        for forward compatibility.
        """
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )


class RecordCutout(BaseModel):
    """A cutout as serialized inside a stored record.

    Records store numbers loosely (often as strings) and mark secondary
    cutouts with ``worktopType: "perpendicular"``.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    width: float = 0.0
    height: float = 0.0
    distance_from_left: float = Field(default=0.0, alias="distanceFromLeft")
    distance_from_bottom: float = Field(default=0.0, alias="distanceFromBottom")
    worktop_type: str | None = Field(default=None, alias="worktopType")

    @field_validator(
        "width", "height", "distance_from_left", "distance_from_bottom", mode="before"
    )
    @classmethod
    def blank_as_zero(cls, v: Any) -> Any:
        if v is None or v == "":
            return 0.0
        return v

    @property
    def is_perpendicular(self) -> bool:
        return self.worktop_type == "perpendicular"


class WorktopRecord(BaseModel):
    """Flat worktop record as stored by the quoting application.

    Unknown columns (ids, prices, timestamps) are ignored. Null treatment
    values mean "none", and ``cutouts`` arrives as a JSON string.
    """

    model_config = ConfigDict(extra="ignore")

    assembly_type: str
    dimension_a: float = Field(..., gt=0)
    dimension_b: float = Field(..., gt=0)
    dimension_c: float | None = None
    dimension_d: float | None = None
    rounding_r1: float | None = Field(default=None, ge=0)
    rounding_r2: float | None = Field(default=None, ge=0)
    rounding_r3: float | None = Field(default=None, ge=0)
    rounding_r4: float | None = Field(default=None, ge=0)
    cut_l1: float | None = Field(default=None, ge=0)
    cut_l2: float | None = Field(default=None, ge=0)
    cut_l3: float | None = Field(default=None, ge=0)
    cut_l4: float | None = Field(default=None, ge=0)
    cut_l5: float | None = Field(default=None, ge=0)
    cut_l6: float | None = Field(default=None, ge=0)
    cut_l7: float | None = Field(default=None, ge=0)
    cut_l8: float | None = Field(default=None, ge=0)
    cutouts: list[RecordCutout] = Field(default_factory=list)
    edge_position1: bool | None = None
    edge_position2: bool | None = None
    edge_position3: bool | None = None
    edge_position4: bool | None = None
    edge_position5: bool | None = None
    edge_position6: bool | None = None

    @field_validator("assembly_type")
    @classmethod
    def validate_assembly_type(cls, v: str) -> str:
        """Accept the record's own assembly names and the canonical ones."""
        if v in RECORD_ASSEMBLY_TYPES or v in {t.value for t in AssemblyType}:
            return v
        valid = sorted(RECORD_ASSEMBLY_TYPES) + [t.value for t in AssemblyType]
        raise ValueError(f"Unknown assembly type '{v}'. Valid types: {valid}")

    @field_validator("cutouts", mode="before")
    @classmethod
    def parse_cutouts(cls, v: Any) -> Any:
        """Decode the JSON-encoded cutout list."""
        if v is None or v == "":
            return []
        if isinstance(v, str):
            try:
                v = json.loads(v)
            except json.JSONDecodeError as e:
                raise ValueError(f"cutouts is not valid JSON: {e.msg}") from e
        if not isinstance(v, list):
            raise ValueError("cutouts must be a JSON array")
        return v

    @property
    def assembly(self) -> AssemblyType:
        if self.assembly_type in RECORD_ASSEMBLY_TYPES:
            return RECORD_ASSEMBLY_TYPES[self.assembly_type]
        return AssemblyType(self.assembly_type)
