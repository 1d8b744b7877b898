"""Pytest configuration and shared fixtures for worktop tests."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from worktops.domain import AssemblyType, Cutout, WorktopConfiguration


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Domain configurations
# =============================================================================


@pytest.fixture
def straight_config() -> WorktopConfiguration:
    """A 600x400 straight cut with one 80x80 cutout."""
    return WorktopConfiguration(
        assembly_type=AssemblyType.STRAIGHT_CUT,
        dimension_a=600,
        dimension_b=400,
        cutouts=(
            Cutout(width=80, height=80, distance_from_left=50, distance_from_bottom=50),
        ),
    )


@pytest.fixture
def l_left_config() -> WorktopConfiguration:
    """An LShapeLeft worktop with every edge selected."""
    return WorktopConfiguration(
        assembly_type=AssemblyType.L_SHAPE_LEFT,
        dimension_a=800,
        dimension_b=600,
        dimension_c=500,
        dimension_d=300,
        edge_selected_1=True,
        edge_selected_2=True,
        edge_selected_3=True,
        edge_selected_4=True,
        edge_selected_5=True,
        edge_selected_6=True,
    )


@pytest.fixture
def l_right_config() -> WorktopConfiguration:
    """An LShapeRight worktop; the secondary piece is longer than b."""
    return WorktopConfiguration(
        assembly_type=AssemblyType.L_SHAPE_RIGHT,
        dimension_a=800,
        dimension_b=600,
        dimension_c=1200,
        dimension_d=400,
        edge_selected_2=True,
        edge_selected_5=True,
    )


# =============================================================================
# Configuration files
# =============================================================================


@pytest.fixture
def straight_config_data() -> dict[str, Any]:
    """Configuration file content for a simple straight cut."""
    return {
        "schema_version": "1.0",
        "worktop": {
            "assembly_type": "StraightCut",
            "dimensions": {"a": 600, "b": 400},
            "cutouts": [
                {
                    "width": 80,
                    "height": 80,
                    "distance_from_left": 50,
                    "distance_from_bottom": 50,
                }
            ],
            "edges": {"edge_1": True, "edge_2": True},
        },
    }


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[dict[str, Any], str], Path]:
    """Write configuration data to a JSON file under tmp_path."""

    def _write(data: dict[str, Any], name: str = "worktop.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write
