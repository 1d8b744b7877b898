"""Unit tests for corner treatment resolution and fitting."""

import pytest

from worktops.domain import (
    AssemblyType,
    Chamfer,
    Corner,
    NoTreatment,
    Radius,
    Rect,
    Region,
    WorktopConfiguration,
)
from worktops.domain.services import (
    CORNER_ASSIGNMENTS,
    CornerTreatments,
    fit_treatments,
    resolve_corner_treatment,
    resolve_region_treatments,
)
from worktops.domain.services.corner_treatment import corner_number_for


class TestResolveCornerTreatment:
    """Tests for resolve_corner_treatment."""

    def test_no_inputs_is_sharp(self) -> None:
        assert resolve_corner_treatment(0, 0, 0, 600, 400) == NoTreatment()

    def test_radius_applies(self) -> None:
        assert resolve_corner_treatment(50, 0, 0, 600, 400) == Radius(50)

    def test_radius_clamped_to_half_shorter_side(self) -> None:
        assert resolve_corner_treatment(9999, 0, 0, 100, 200) == Radius(50)

    def test_chamfer_wins_over_radius(self) -> None:
        result = resolve_corner_treatment(50, 20, 30, 600, 400)
        assert result == Chamfer(horizontal=20, vertical=30)

    def test_single_leg_falls_back_to_radius(self) -> None:
        assert resolve_corner_treatment(40, 20, 0, 600, 400) == Radius(40)

    def test_single_leg_without_radius_is_sharp(self) -> None:
        assert resolve_corner_treatment(0, 0, 30, 600, 400) == NoTreatment()

    def test_chamfer_legs_clamped_to_sides(self) -> None:
        result = resolve_corner_treatment(0, 900, 500, 600, 400)
        assert result == Chamfer(horizontal=600, vertical=400)


class TestFitTreatments:
    """Tests for fit_treatments."""

    def test_fitting_leaves_small_treatments_alone(self) -> None:
        treatments = CornerTreatments(
            top_left=Chamfer(100, 100), top_right=Radius(50)
        )
        assert fit_treatments(Rect(0, 0, 600, 400), treatments) == treatments

    def test_two_chamfers_scaled_proportionally(self) -> None:
        treatments = CornerTreatments(
            top_left=Chamfer(400, 50), top_right=Chamfer(400, 50)
        )
        fitted = fit_treatments(Rect(0, 0, 600, 400), treatments)
        assert fitted.top_left == Chamfer(300, 50)
        assert fitted.top_right == Chamfer(300, 50)

    def test_chamfer_gives_way_to_radius(self) -> None:
        treatments = CornerTreatments(
            bottom_right=Radius(100), bottom_left=Chamfer(550, 50)
        )
        fitted = fit_treatments(Rect(0, 0, 600, 400), treatments)
        assert fitted.bottom_right == Radius(100)
        assert fitted.bottom_left == Chamfer(500, 50)

    def test_extents_never_exceed_side(self) -> None:
        rect = Rect(0, 0, 300, 200)
        treatments = CornerTreatments(
            top_left=Chamfer(300, 200),
            top_right=Chamfer(300, 200),
            bottom_right=Chamfer(300, 200),
            bottom_left=Chamfer(300, 200),
        )
        fitted = fit_treatments(rect, treatments)
        assert (
            fitted.top_left.horizontal_extent + fitted.top_right.horizontal_extent
            <= rect.width + 1e-9
        )
        assert (
            fitted.top_right.vertical_extent + fitted.bottom_right.vertical_extent
            <= rect.height + 1e-9
        )

    @pytest.mark.parametrize(
        ("first", "second"),
        [("top_left", "bottom_right"), ("top_right", "bottom_left")],
    )
    def test_full_opposite_chamfers_halved(self, first: str, second: str) -> None:
        treatments = CornerTreatments(
            **{first: Chamfer(600, 400), second: Chamfer(600, 400)}
        )
        fitted = fit_treatments(Rect(0, 0, 600, 400), treatments)
        assert getattr(fitted, first) == Chamfer(300, 200)
        assert getattr(fitted, second) == Chamfer(300, 200)

    def test_opposite_chamfer_short_of_full_kept(self) -> None:
        treatments = CornerTreatments(
            top_right=Chamfer(600, 400), bottom_left=Chamfer(600, 399)
        )
        assert fit_treatments(Rect(0, 0, 600, 400), treatments) == treatments


class TestCornerAssignments:
    """Tests for how numbered corners map onto regions."""

    def test_straight_cut_uses_primary_only(self) -> None:
        regions = {region for region, _ in CORNER_ASSIGNMENTS[AssemblyType.STRAIGHT_CUT].values()}
        assert regions == {Region.PRIMARY}

    @pytest.mark.parametrize(
        "assembly", [AssemblyType.L_SHAPE_LEFT, AssemblyType.L_SHAPE_RIGHT]
    )
    def test_l_shape_moves_corners_one_and_three(self, assembly: AssemblyType) -> None:
        assignments = CORNER_ASSIGNMENTS[assembly]
        assert assignments[1] == (Region.SECONDARY, Corner.BOTTOM_RIGHT)
        assert assignments[3] == (Region.SECONDARY, Corner.BOTTOM_LEFT)
        assert assignments[2][0] is Region.PRIMARY
        assert assignments[4][0] is Region.PRIMARY

    def test_corner_number_for_is_inverse(self) -> None:
        assert (
            corner_number_for(
                AssemblyType.STRAIGHT_CUT, Region.PRIMARY, Corner.TOP_RIGHT
            )
            == 4
        )
        assert (
            corner_number_for(
                AssemblyType.L_SHAPE_LEFT, Region.PRIMARY, Corner.TOP_LEFT
            )
            is None
        )


class TestResolveRegionTreatments:
    """Tests for resolve_region_treatments."""

    def test_straight_cut_radius_clamped(self) -> None:
        config = WorktopConfiguration(
            assembly_type=AssemblyType.STRAIGHT_CUT,
            dimension_a=100,
            dimension_b=200,
            rounding_r1=9999,
        )
        treatments = resolve_region_treatments(config)
        assert treatments[Region.PRIMARY].bottom_left == Radius(50)
        assert Region.SECONDARY not in treatments

    def test_l_shape_left_junction_corner_limited(self) -> None:
        config = WorktopConfiguration(
            assembly_type=AssemblyType.L_SHAPE_LEFT,
            dimension_a=800,
            dimension_b=600,
            dimension_c=500,
            dimension_d=700,
            chamfer_l3=400,
            chamfer_l4=50,
        )
        treatments = resolve_region_treatments(config)
        # Only a - d = 100 of the primary bottom is free of the junction.
        assert treatments[Region.PRIMARY].bottom_right == Chamfer(100, 50)

    def test_l_shape_right_junction_corner_limited(self) -> None:
        config = WorktopConfiguration(
            assembly_type=AssemblyType.L_SHAPE_RIGHT,
            dimension_a=800,
            dimension_b=600,
            dimension_c=700,
            dimension_d=400,
            rounding_r1=150,
        )
        treatments = resolve_region_treatments(config)
        assert treatments[Region.SECONDARY].bottom_right == Radius(100)

    def test_l_shape_primary_left_corners_stay_sharp(self) -> None:
        config = WorktopConfiguration(
            assembly_type=AssemblyType.L_SHAPE_LEFT,
            dimension_a=800,
            dimension_b=600,
            dimension_c=500,
            dimension_d=300,
            rounding_r1=50,
            rounding_r2=50,
            rounding_r3=50,
            rounding_r4=50,
        )
        primary = resolve_region_treatments(config)[Region.PRIMARY]
        assert primary.top_left == NoTreatment()
        assert primary.bottom_left == NoTreatment()
