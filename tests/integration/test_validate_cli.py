"""Integration tests for the validate CLI command.

These tests run the validate command end-to-end and check:
- Valid configuration files pass validation
- Load and schema errors fail with exit code 1
- Drawing advisories are reported with exit code 2
"""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from worktops.cli.main import app

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures" / "configs"


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


class TestValidateCommand:
    """Tests for the validate command."""

    def test_valid_config(self, runner: CliRunner) -> None:
        """A clean configuration passes with exit code 0."""
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "valid_straight.json")])

        assert result.exit_code == 0
        assert "Validation passed. Configuration is valid." in result.output

    def test_valid_config_with_warnings(self, runner: CliRunner) -> None:
        """Clamped corners and dropped cutouts give exit code 2."""
        result = runner.invoke(
            app, ["validate", str(FIXTURES_PATH / "valid_with_warnings.json")]
        )

        assert result.exit_code == 2
        assert "Warnings:" in result.output
        assert "worktop.roundings.r1" in result.output
        assert "worktop.cutouts[1]" in result.output
        assert "Validation passed with 2 warning(s)" in result.output

    def test_file_not_found(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "nonexistent.json")])

        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_invalid_json_syntax(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "invalid_json.json")])

        assert result.exit_code == 1
        assert "Invalid JSON syntax" in result.output
        assert "Validation failed." in result.output

    def test_unknown_field_rejected(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "unknown_field.json")])

        assert result.exit_code == 1
        assert "worktop.colour" in result.output

    def test_invalid_geometry(self, runner: CliRunner) -> None:
        """d must stay below a for LShapeLeft."""
        result = runner.invoke(
            app, ["validate", str(FIXTURES_PATH / "invalid_geometry.json")]
        )

        assert result.exit_code == 1
        assert "Errors:" in result.output
        assert "must be smaller" in result.output

    def test_written_config(
        self, runner: CliRunner, straight_config_data: dict, write_config
    ) -> None:
        """Files written at test time are validated the same way."""
        straight_config_data["worktop"]["edges"] = {"edge_6": True}
        path = write_config(straight_config_data)

        result = runner.invoke(app, ["validate", str(path)])

        assert result.exit_code == 2
        assert "worktop.edges.edge_6" in result.output
