"""Unit tests for outline building and path serialization."""

import pytest

from worktops.domain import (
    AssemblyType,
    Corner,
    NoTreatment,
    Point2D,
    Radius,
    Rect,
    Region,
    Side,
    WorktopConfiguration,
)
from worktops.domain.services import (
    CornerTreatments,
    LineSegment,
    OutlinePath,
    QuadSegment,
    build_region_outline,
    build_worktop_shape,
    format_number,
)


class TestFormatNumber:
    """Tests for format_number."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (600.0, "600"),
            (12.5, "12.5"),
            (0.1234, "0.123"),
            (-0.0001, "0"),
            (-25.0, "-25"),
        ],
    )
    def test_formats(self, value: float, expected: str) -> None:
        assert format_number(value) == expected


class TestOutlinePath:
    """Tests for OutlinePath."""

    def test_disconnected_segments_rejected(self) -> None:
        with pytest.raises(ValueError, match="not connected"):
            OutlinePath(
                segments=(
                    LineSegment(Point2D(0, 0), Point2D(10, 0)),
                    LineSegment(Point2D(20, 0), Point2D(30, 0)),
                )
            )

    def test_closed_path_must_return_to_start(self) -> None:
        with pytest.raises(ValueError, match="Closed path"):
            OutlinePath(
                segments=(LineSegment(Point2D(0, 0), Point2D(10, 0)),), closed=True
            )

    def test_svg_path_data(self) -> None:
        path = OutlinePath(
            segments=(
                LineSegment(Point2D(0, 0), Point2D(10, 0)),
                QuadSegment(Point2D(10, 0), Point2D(20, 0), Point2D(20, 10)),
            )
        )
        assert path.to_svg() == "M 0 0 L 10 0 Q 20 0 20 10"

    def test_empty_path(self) -> None:
        path = OutlinePath(segments=())
        assert path.is_empty
        assert path.to_svg() == ""
        assert path.vertices() == []


class TestBuildRegionOutline:
    """Tests for build_region_outline."""

    def test_sharp_rectangle(self) -> None:
        outline = build_region_outline(
            Region.PRIMARY, Rect(0, 0, 600, 400), CornerTreatments()
        )
        assert outline.path.closed
        assert outline.path.to_svg() == "M 0 0 L 600 0 L 600 400 L 0 400 L 0 0 Z"

    def test_radius_corner_uses_quadratic_segment(self) -> None:
        treatments = CornerTreatments(top_right=Radius(50))
        outline = build_region_outline(Region.PRIMARY, Rect(0, 0, 600, 400), treatments)
        trace = outline.corner(Corner.TOP_RIGHT)
        assert trace.entry == Point2D(550, 0)
        assert trace.exit == Point2D(600, 50)
        assert isinstance(trace.segments[0], QuadSegment)
        assert trace.segments[0].control == Point2D(600, 0)

    def test_sides_end_where_treatments_begin(self) -> None:
        treatments = CornerTreatments(top_left=Radius(30), top_right=Radius(50))
        outline = build_region_outline(Region.PRIMARY, Rect(0, 0, 600, 400), treatments)
        top = outline.side(Side.TOP)
        assert top.start == Point2D(30, 0)
        assert top.end == Point2D(550, 0)

    def test_path_starts_after_top_left(self) -> None:
        outline = build_region_outline(
            Region.PRIMARY,
            Rect(0, 0, 600, 400),
            CornerTreatments(top_left=Radius(40)),
        )
        assert outline.path.start == Point2D(40, 0)
        assert outline.path.end.is_close(outline.path.start)


class TestBuildWorktopShape:
    """Tests for build_worktop_shape."""

    def test_straight_cut_offcut(self, straight_config: WorktopConfiguration) -> None:
        shape = build_worktop_shape(straight_config)
        assert shape.secondary is None
        assert shape.cut_line_x == 600
        assert shape.offcut == Rect(625, 0, 4100 - 600 - 25, 400)

    def test_offcut_excluded_from_bounds(
        self, straight_config: WorktopConfiguration
    ) -> None:
        shape = build_worktop_shape(straight_config)
        assert shape.bounds == Rect(0, 0, 600, 400)

    def test_no_offcut_when_cut_uses_whole_stock(self) -> None:
        config = WorktopConfiguration(
            assembly_type=AssemblyType.STRAIGHT_CUT,
            dimension_a=4100,
            dimension_b=600,
        )
        shape = build_worktop_shape(config)
        assert shape.offcut is None
        assert shape.cut_line_x is None

    def test_custom_offcut_gap(self, straight_config: WorktopConfiguration) -> None:
        shape = build_worktop_shape(straight_config, offcut_gap=0)
        assert shape.offcut is not None
        assert shape.offcut.left == 600

    def test_l_shape_left_layout(self, l_left_config: WorktopConfiguration) -> None:
        shape = build_worktop_shape(l_left_config)
        assert shape.primary.rect == Rect(0, 0, 800, 600)
        assert shape.region(Region.SECONDARY).rect == Rect(0, 600, 300, 500)
        assert shape.bounds == Rect(0, 0, 800, 1100)
        assert shape.offcut is None

    def test_l_shape_right_layout(self, l_right_config: WorktopConfiguration) -> None:
        shape = build_worktop_shape(l_right_config)
        assert shape.primary.rect == Rect(400, 0, 800, 600)
        assert shape.region(Region.SECONDARY).rect == Rect(0, 0, 400, 1200)
        assert shape.bounds == Rect(0, 0, 1200, 1200)

    def test_straight_cut_has_no_secondary_region(
        self, straight_config: WorktopConfiguration
    ) -> None:
        shape = build_worktop_shape(straight_config)
        with pytest.raises(KeyError):
            shape.region(Region.SECONDARY)

    def test_every_outline_is_closed(self, l_left_config: WorktopConfiguration) -> None:
        shape = build_worktop_shape(l_left_config)
        for outline in shape.regions:
            assert outline.path.closed
            assert outline.path.end.is_close(outline.path.start)

    def test_untreated_corners_are_sharp(
        self, straight_config: WorktopConfiguration
    ) -> None:
        shape = build_worktop_shape(straight_config)
        for _, treatment in shape.primary.treatments.items():
            assert treatment == NoTreatment()


def _cross(o: Point2D, a: Point2D, b: Point2D) -> float:
    return (a.x - o.x) * (b.y - o.y) - (a.y - o.y) * (b.x - o.x)


def _within(a: Point2D, b: Point2D, p: Point2D, eps: float) -> bool:
    return (
        min(a.x, b.x) - eps <= p.x <= max(a.x, b.x) + eps
        and min(a.y, b.y) - eps <= p.y <= max(a.y, b.y) + eps
    )


def _segments_touch(
    p1: Point2D, p2: Point2D, q1: Point2D, q2: Point2D, eps: float = 1e-6
) -> bool:
    d1 = _cross(q1, q2, p1)
    d2 = _cross(q1, q2, p2)
    d3 = _cross(p1, p2, q1)
    d4 = _cross(p1, p2, q2)
    if (d1 * d2 < 0 and abs(d1) > eps and abs(d2) > eps) and (
        d3 * d4 < 0 and abs(d3) > eps and abs(d4) > eps
    ):
        return True
    return (
        (abs(d1) <= eps and _within(q1, q2, p1, eps))
        or (abs(d2) <= eps and _within(q1, q2, p2, eps))
        or (abs(d3) <= eps and _within(p1, p2, q1, eps))
        or (abs(d4) <= eps and _within(p1, p2, q2, eps))
    )


_BASE_DIMENSIONS = {
    AssemblyType.STRAIGHT_CUT: {"dimension_a": 600, "dimension_b": 400},
    AssemblyType.L_SHAPE_LEFT: {
        "dimension_a": 800,
        "dimension_b": 600,
        "dimension_c": 500,
        "dimension_d": 300,
    },
    AssemblyType.L_SHAPE_RIGHT: {
        "dimension_a": 800,
        "dimension_b": 600,
        "dimension_c": 1200,
        "dimension_d": 400,
    },
}

_FULL = 99999

_TREATMENT_CASES = {
    "oversized_radii": {f"rounding_r{n}": _FULL for n in range(1, 5)},
    "opposite_full_chamfers_1_4": {
        "chamfer_l1": _FULL,
        "chamfer_l2": _FULL,
        "chamfer_l7": _FULL,
        "chamfer_l8": _FULL,
    },
    "opposite_full_chamfers_2_3": {
        "chamfer_l3": _FULL,
        "chamfer_l4": _FULL,
        "chamfer_l5": _FULL,
        "chamfer_l6": _FULL,
    },
    "adjacent_full_chamfers": {
        "chamfer_l1": _FULL,
        "chamfer_l2": _FULL,
        "chamfer_l3": _FULL,
        "chamfer_l4": _FULL,
    },
    "all_full_chamfers": {f"chamfer_l{n}": _FULL for n in range(1, 9)},
    "radius_and_chamfer_on_one_side": {
        "rounding_r1": _FULL,
        "chamfer_l3": _FULL,
        "chamfer_l4": _FULL,
    },
    "radius_and_chamfer_at_right_side": {
        "rounding_r2": _FULL,
        "chamfer_l7": 500,
        "chamfer_l8": 500,
    },
}


class TestOutlinesStaySimple:
    """Extreme corner treatments never fold an outline onto itself."""

    @pytest.mark.parametrize("assembly", list(_BASE_DIMENSIONS), ids=lambda a: a.value)
    @pytest.mark.parametrize(
        "treatments", list(_TREATMENT_CASES.values()), ids=list(_TREATMENT_CASES)
    )
    def test_no_crossing_or_repeated_segments(
        self, assembly: AssemblyType, treatments: dict[str, float]
    ) -> None:
        config = WorktopConfiguration(
            assembly_type=assembly, **_BASE_DIMENSIONS[assembly], **treatments
        )
        for outline in build_worktop_shape(config).regions:
            points = outline.path.vertices()
            segments = list(zip(points, points[1:]))
            count = len(segments)
            assert count >= 3

            keys = [
                frozenset((round(p.x, 6), round(p.y, 6)) for p in segment)
                for segment in segments
            ]
            assert len(set(keys)) == count, f"repeated segment in {outline.region}"

            for i in range(count):
                for j in range(i + 2, count):
                    if i == 0 and j == count - 1:
                        continue
                    assert not _segments_touch(*segments[i], *segments[j]), (
                        f"{outline.region.value} segments {i} and {j} meet: "
                        f"{segments[i]} / {segments[j]}"
                    )
