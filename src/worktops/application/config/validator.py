"""Validation structures and worktop advisory checks.

Schema validation rejects configurations that cannot describe a real part.
The advisories here flag configurations that are valid but will not be
drawn exactly as written: clamped radii and chamfers, cutouts that do not
fit, and edge or region selections the assembly type ignores.
"""

from dataclasses import dataclass, field
from typing import Any

from worktops.application.config.adapter import config_to_worktop
from worktops.application.config.schema import WorktopDrawingConfiguration
from worktops.domain.entities import (
    CORNER_COUNT,
    InvalidConfigurationError,
    WorktopConfiguration,
)
from worktops.domain.services import (
    CORNER_ASSIGNMENTS,
    build_worktop_shape,
    place_cutouts,
)
from worktops.domain.services.edge_highlight import edge_segments
from worktops.domain.value_objects import Chamfer, NoTreatment, Radius, Region

# Tolerance when comparing requested and resolved sizes, in millimetres
_TOLERANCE = 1e-6


@dataclass
class ValidationError:
    """Represents a blocking validation error.

    Attributes:
        path: JSON path to the invalid field (e.g., "worktop.dimensions.d")
        message: Human-readable description of the error
        value: The invalid value that caused the error
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """Represents a non-blocking validation warning.

    Attributes:
        path: JSON path to the concerning field
        message: Human-readable description of the concern
        suggestion: Optional suggested remediation
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Container for validation errors and warnings.

    Attributes:
        errors: List of blocking validation errors
        warnings: List of non-blocking validation warnings
    """

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the configuration has no blocking errors."""
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """Get the CLI exit code based on validation status.

        Returns:
            0 if valid with no warnings
            1 if there are errors
            2 if valid but has warnings
        """
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(
        self, path: str, message: str, value: Any = None
    ) -> "ValidationResult":
        """Add a validation error and return self for chaining."""
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        """Add a validation warning and return self for chaining."""
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        """Merge another ValidationResult into this one."""
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        return self


def field_path(field_name: str, prefix: str = "worktop") -> str:
    """Map a domain field name to its JSON path in a configuration file.

    Examples:
        >>> field_path("dimension_d")
        'worktop.dimensions.d'
        >>> field_path("chamfer_l3")
        'worktop.chamfers.l3'
    """
    if field_name.startswith("dimension_"):
        return f"{prefix}.dimensions.{field_name.removeprefix('dimension_')}"
    if field_name.startswith("rounding_"):
        return f"{prefix}.roundings.{field_name.removeprefix('rounding_')}"
    if field_name.startswith("chamfer_"):
        return f"{prefix}.chamfers.{field_name.removeprefix('chamfer_')}"
    if field_name in ("width", "height", "distance_from_left", "distance_from_bottom"):
        return f"{prefix}.cutouts"
    return f"{prefix}.{field_name}"


def _check_corner_advisories(
    configuration: WorktopConfiguration, prefix: str
) -> ValidationResult:
    result = ValidationResult()
    shape = build_worktop_shape(configuration)
    assignments = CORNER_ASSIGNMENTS[configuration.assembly_type]

    for number in range(1, CORNER_COUNT + 1):
        region, corner = assignments[number]
        resolved = shape.region(region).treatments.get(corner)
        radius = configuration.radius(number)
        horizontal, vertical = configuration.chamfer_legs(number)
        h_leg, v_leg = 2 * number - 1, 2 * number
        has_chamfer = horizontal > 0 and vertical > 0

        if (horizontal > 0) != (vertical > 0):
            result.add_warning(
                path=f"{prefix}.chamfers.l{h_leg if horizontal > 0 else v_leg}",
                message=f"Corner {number} has only one chamfer leg; it is ignored",
                suggestion=f"Set both l{h_leg} and l{v_leg} to chamfer corner {number}",
            )
        if has_chamfer and radius > 0:
            result.add_warning(
                path=f"{prefix}.roundings.r{number}",
                message=(
                    f"Corner {number} has both a radius and a chamfer; "
                    "the chamfer is used"
                ),
            )

        match resolved:
            case Chamfer():
                if resolved.horizontal < horizontal - _TOLERANCE:
                    result.add_warning(
                        path=f"{prefix}.chamfers.l{h_leg}",
                        message=(
                            f"Chamfer leg l{h_leg} ({horizontal}) is reduced to "
                            f"{resolved.horizontal:.1f} to fit the side"
                        ),
                    )
                if resolved.vertical < vertical - _TOLERANCE:
                    result.add_warning(
                        path=f"{prefix}.chamfers.l{v_leg}",
                        message=(
                            f"Chamfer leg l{v_leg} ({vertical}) is reduced to "
                            f"{resolved.vertical:.1f} to fit the side"
                        ),
                    )
            case Radius():
                if resolved.radius < radius - _TOLERANCE:
                    result.add_warning(
                        path=f"{prefix}.roundings.r{number}",
                        message=(
                            f"Radius r{number} ({radius}) is reduced to "
                            f"{resolved.radius:.1f} to fit the corner"
                        ),
                    )
            case NoTreatment():
                if has_chamfer or radius > 0:
                    result.add_warning(
                        path=f"{prefix}.{'chamfers' if has_chamfer else 'roundings'}",
                        message=f"Corner {number} treatment does not fit and is dropped",
                    )
    return result


def _check_cutout_advisories(
    configuration: WorktopConfiguration, prefix: str
) -> ValidationResult:
    result = ValidationResult()
    shape = build_worktop_shape(configuration)

    if not configuration.is_l_shape:
        for i, cutout in enumerate(configuration.cutouts):
            if cutout.region is Region.SECONDARY:
                result.add_warning(
                    path=f"{prefix}.cutouts[{i}].region",
                    message=(
                        "StraightCut has no secondary piece; the cutout is "
                        "placed on the primary piece"
                    ),
                    suggestion='Use region "primary"',
                )

    for dropped in place_cutouts(shape, configuration.cutouts).dropped:
        result.add_warning(
            path=f"{prefix}.cutouts[{dropped.index - 1}]",
            message=f"Cutout {dropped.index} does not fit and is not drawn: "
            f"{dropped.reason}",
        )
    return result


def _check_edge_advisories(
    configuration: WorktopConfiguration, prefix: str
) -> ValidationResult:
    result = ValidationResult()
    available = edge_segments(build_worktop_shape(configuration))
    for edge in configuration.selected_edges:
        if edge not in available:
            result.add_warning(
                path=f"{prefix}.edges.edge_{edge}",
                message=(
                    f"Edge {edge} does not exist on "
                    f"{configuration.assembly_type.value}; it is ignored"
                ),
            )
        elif not available[edge][1]:
            result.add_warning(
                path=f"{prefix}.edges.edge_{edge}",
                message=f"Edge {edge} has no free length after corner treatments",
            )
    return result


def check_worktop_advisories(
    configuration: WorktopConfiguration, prefix: str = "worktop"
) -> ValidationResult:
    """Check a domain configuration for parts that will be drawn differently.

    Args:
        configuration: A valid WorktopConfiguration.
        prefix: JSON path prefix used in reported paths.

    Returns:
        ValidationResult containing warnings only.
    """
    result = ValidationResult()
    result.merge(_check_corner_advisories(configuration, prefix))
    result.merge(_check_cutout_advisories(configuration, prefix))
    result.merge(_check_edge_advisories(configuration, prefix))
    return result


def validate_config(config: WorktopDrawingConfiguration) -> ValidationResult:
    """Perform full validation of a worktop configuration.

    Args:
        config: A WorktopDrawingConfiguration instance (already validated
            by Pydantic)

    Returns:
        ValidationResult containing any errors or warnings
    """
    result = ValidationResult()
    try:
        configuration = config_to_worktop(config)
    except InvalidConfigurationError as e:
        return result.add_error(field_path(e.field), e.message)
    return result.merge(check_worktop_advisories(configuration))
