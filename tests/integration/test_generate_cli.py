"""Integration tests for the generate and formats CLI commands."""

import json
from pathlib import Path

import ezdxf
import pytest
from typer.testing import CliRunner

from worktops.cli.main import app

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures" / "configs"
STRAIGHT = str(FIXTURES_PATH / "valid_straight.json")
L_SHAPE = str(FIXTURES_PATH / "valid_l_shape_left.json")


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


class TestGenerateCommand:
    """Tests for the generate command."""

    def test_formats_from_config(self, runner: CliRunner, tmp_path: Path) -> None:
        """Without --format the configuration's output.formats are used."""
        result = runner.invoke(app, ["generate", L_SHAPE, "-o", str(tmp_path)])

        assert result.exit_code == 0, result.output
        assert (tmp_path / "corner_svg.svg").exists()
        assert (tmp_path / "corner_dxf.dxf").exists()
        assert f"Exported files for {L_SHAPE}:" in result.output

    def test_explicit_formats(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(
            app, ["generate", STRAIGHT, "-f", "svg,dxf,json", "-o", str(tmp_path)]
        )

        assert result.exit_code == 0, result.output
        svg = (tmp_path / "straight_svg.svg").read_text(encoding="utf-8")
        assert svg.startswith("<svg") or svg.startswith("<?xml")
        doc = ezdxf.readfile(tmp_path / "straight_dxf.dxf")
        assert len(doc.modelspace()) > 0
        data = json.loads((tmp_path / "straight_json.json").read_text(encoding="utf-8"))
        assert data["assembly_type"] == "StraightCut"
        assert "  SVG: " in result.output

    def test_all_formats(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(app, ["generate", STRAIGHT, "-f", "all", "-o", str(tmp_path)])

        assert result.exit_code == 0, result.output
        assert sorted(p.suffix for p in tmp_path.iterdir()) == [".dxf", ".json", ".svg"]

    def test_project_name_override(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(
            app,
            ["generate", STRAIGHT, "-o", str(tmp_path), "--project-name", "order-17"],
        )

        assert result.exit_code == 0, result.output
        assert (tmp_path / "order-17_svg.svg").exists()

    def test_stdout_json(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(
            app, ["generate", STRAIGHT, "-f", "json", "--stdout", "-o", str(tmp_path)]
        )

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["dimensions"]["a"] == 600
        assert list(tmp_path.iterdir()) == []

    def test_stdout_needs_one_format(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["generate", STRAIGHT, "-f", "svg,json", "--stdout"])

        assert result.exit_code == 1
        assert "--stdout requires exactly one format" in result.output

    def test_unknown_format(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(
            app, ["generate", STRAIGHT, "-f", "svg,pdf", "-o", str(tmp_path)]
        )

        assert result.exit_code == 1
        assert "Unknown formats: pdf" in result.output
        assert list(tmp_path.iterdir()) == []

    def test_configuration_error(self, runner: CliRunner, tmp_path: Path) -> None:
        bad = str(FIXTURES_PATH / "unknown_field.json")
        result = runner.invoke(app, ["generate", bad, "-o", str(tmp_path)])

        assert result.exit_code == 1
        assert f"Configuration error in {bad}:" in result.output

    def test_dropped_cutout_warning(self, runner: CliRunner, tmp_path: Path) -> None:
        """Cutouts that do not fit are reported but do not fail the run."""
        config = str(FIXTURES_PATH / "valid_with_warnings.json")
        result = runner.invoke(app, ["generate", config, "-o", str(tmp_path)])

        assert result.exit_code == 0, result.output
        assert f"Warning: {config}: Cutout 2 was not drawn" in result.output
        assert (tmp_path / "worktop_svg.svg").exists()

    def test_multiple_configs_get_suffixes(
        self, runner: CliRunner, tmp_path: Path
    ) -> None:
        result = runner.invoke(
            app, ["generate", STRAIGHT, L_SHAPE, "-f", "svg", "-o", str(tmp_path)]
        )

        assert result.exit_code == 0, result.output
        assert (tmp_path / "straight_valid_straight_svg.svg").exists()
        assert (tmp_path / "corner_valid_l_shape_left_svg.svg").exists()


class TestFormatsCommand:
    """Tests for the formats command."""

    def test_lists_formats(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["formats"])

        assert result.exit_code == 0
        lines = result.output.strip().splitlines()
        assert [line.split("\t")[0] for line in lines] == ["dxf", "json", "svg"]
        assert "svg\t.svg\timage/svg+xml" in lines
