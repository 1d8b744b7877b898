"""Unit tests for GenerateDrawingCommand."""

from typing import Any

import pytest

from worktops.application import DrawingError, DrawingOutput, GenerateDrawingCommand
from worktops.application.config import (
    WorktopDrawingConfiguration,
    load_config_from_dict,
)
from worktops.domain import (
    AssemblyType,
    Cutout,
    DrawingSettings,
    WorktopConfiguration,
)


def _with_oversized_margin(
    config: WorktopDrawingConfiguration,
) -> WorktopDrawingConfiguration:
    # model_copy skips validation, so the frame settings see the bad margin.
    layout = config.layout.model_copy(update={"page_margin": 500.0})
    return config.model_copy(update={"layout": layout})


class TestGenerateDrawingCommand:
    """Tests for GenerateDrawingCommand.execute."""

    def test_execute_domain_configuration(
        self, straight_config: WorktopConfiguration
    ) -> None:
        output = GenerateDrawingCommand().execute(straight_config, name="kitchen")
        assert output.is_valid
        assert output.name == "kitchen"
        assert output.drawing is not None
        assert output.warnings == []

    def test_execute_file_model_uses_layout(
        self, straight_config_data: dict[str, Any]
    ) -> None:
        straight_config_data["layout"] = {"show_direction_arrows": False}
        config = load_config_from_dict(straight_config_data)
        output = GenerateDrawingCommand().execute(config)
        assert output.is_valid
        assert output.drawing.arrows == ()

    def test_explicit_settings_win(self, straight_config: WorktopConfiguration) -> None:
        command = GenerateDrawingCommand()
        output = command.execute(
            straight_config, settings=DrawingSettings(show_direction_arrows=False)
        )
        assert output.drawing.arrows == ()
        assert command.execute(straight_config).drawing.arrows != ()

    def test_dropped_cutouts_become_warnings(self) -> None:
        config = WorktopConfiguration(
            assembly_type=AssemblyType.STRAIGHT_CUT,
            dimension_a=600,
            dimension_b=400,
            cutouts=(Cutout(width=80, height=80), Cutout(width=700, height=80)),
        )
        output = GenerateDrawingCommand().execute(config)
        assert output.is_valid
        assert len(output.warnings) == 1
        assert output.warnings[0].startswith("Cutout 2 was not drawn: ")
        assert [d.index for d in output.dropped_cutouts] == [2]

    def test_rejected_configuration_becomes_error(
        self, straight_config_data: dict[str, Any]
    ) -> None:
        config = _with_oversized_margin(load_config_from_dict(straight_config_data))
        output = GenerateDrawingCommand().execute(config)
        assert not output.is_valid
        assert output.drawing is None
        assert output.errors
        assert output.dropped_cutouts == ()

    def test_rejected_geometry_names_field(
        self, straight_config_data: dict[str, Any]
    ) -> None:
        config = load_config_from_dict(straight_config_data)
        # model_copy skips validation, so the domain sees the bad length.
        dimensions = config.worktop.dimensions.model_copy(update={"a": -10.0})
        worktop = config.worktop.model_copy(update={"dimensions": dimensions})
        output = GenerateDrawingCommand().execute(
            config.model_copy(update={"worktop": worktop})
        )
        assert not output.is_valid
        assert output.error_details == [
            DrawingError("Must be positive", field_name="dimension_a")
        ]
        assert output.errors == ["dimension_a: Must be positive"]

    def test_settings_error_has_no_field(
        self, straight_config_data: dict[str, Any]
    ) -> None:
        config = _with_oversized_margin(load_config_from_dict(straight_config_data))
        (error,) = GenerateDrawingCommand().execute(config).error_details
        assert error.field_name is None
        assert str(error) == error.message


class TestExecuteMany:
    """Tests for GenerateDrawingCommand.execute_many."""

    def test_keeps_input_order(
        self,
        straight_config: WorktopConfiguration,
        l_left_config: WorktopConfiguration,
        l_right_config: WorktopConfiguration,
    ) -> None:
        configs = [l_right_config, straight_config, l_left_config]
        outputs = GenerateDrawingCommand().execute_many(
            configs, max_workers=3, names=["a", "b", "c"]
        )
        assert [o.name for o in outputs] == ["a", "b", "c"]
        assert [o.drawing.configuration for o in outputs] == configs

    def test_failures_reported_per_item(
        self,
        straight_config: WorktopConfiguration,
        straight_config_data: dict[str, Any],
    ) -> None:
        broken = _with_oversized_margin(load_config_from_dict(straight_config_data))
        outputs = GenerateDrawingCommand().execute_many([broken, straight_config])
        assert [o.is_valid for o in outputs] == [False, True]

    def test_names_must_match(self, straight_config: WorktopConfiguration) -> None:
        with pytest.raises(ValueError):
            GenerateDrawingCommand().execute_many([straight_config], names=["a", "b"])


class TestDrawingOutput:
    """Tests for DrawingOutput."""

    def test_without_drawing_is_invalid(self) -> None:
        assert not DrawingOutput(drawing=None).is_valid
