"""Configuration schema and loading system for worktop drawings.

This package provides JSON-based configuration loading and validation for
worktop drawings. It includes Pydantic models for schema validation, a
configuration loader with comprehensive error handling, adapters to the
domain layer, and advisory checks.

Public API:
    - WorktopDrawingConfiguration: Root configuration model
    - WorktopConfigSchema: Worktop geometry model
    - WorktopRecord: Flat record stored by the quoting application
    - load_config: Load configuration from a JSON file
    - load_config_from_dict: Load configuration from a dictionary
    - load_record_from_dict: Load a stored record from a dictionary
    - ConfigError: Exception for configuration errors
    - config_to_worktop: Convert a configuration to a domain entity
    - config_to_settings: Build drawing settings from the layout section
    - record_to_configuration: Convert a stored record to a domain entity
    - ValidationResult: Container for validation results
    - validate_config: Perform full configuration validation

Example:
    >>> from pathlib import Path
    >>> from worktops.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("kitchen.json"))
    ...     print(config.worktop.assembly_type)
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from worktops.application.config.adapter import (
    config_to_settings,
    config_to_worktop,
    layout_to_settings,
    record_to_configuration,
    worktop_to_domain,
)
from worktops.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
    load_record_from_dict,
)
from worktops.application.config.schema import (
    SUPPORTED_VERSIONS,
    VALID_FORMATS,
    ChamfersConfig,
    CutoutConfig,
    DimensionsConfig,
    EdgesConfig,
    LayoutConfig,
    OutputConfig,
    RecordCutout,
    RoundingsConfig,
    WorktopConfigSchema,
    WorktopDrawingConfiguration,
    WorktopRecord,
)
from worktops.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    check_worktop_advisories,
    validate_config,
)

__all__ = [
    # Schema
    "SUPPORTED_VERSIONS",
    "VALID_FORMATS",
    "ChamfersConfig",
    "CutoutConfig",
    "DimensionsConfig",
    "EdgesConfig",
    "LayoutConfig",
    "OutputConfig",
    "RecordCutout",
    "RoundingsConfig",
    "WorktopConfigSchema",
    "WorktopDrawingConfiguration",
    "WorktopRecord",
    # Loader
    "ConfigError",
    "load_config",
    "load_config_from_dict",
    "load_record_from_dict",
    # Adapter
    "config_to_settings",
    "config_to_worktop",
    "layout_to_settings",
    "record_to_configuration",
    "worktop_to_domain",
    # Validation
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "check_worktop_advisories",
    "validate_config",
]
