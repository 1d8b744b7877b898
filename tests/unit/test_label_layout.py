"""Unit tests for label lane scheduling."""

import pytest

from worktops.domain.services import (
    LabelClass,
    LabelDemand,
    LabelSide,
    LayoutSpacing,
    schedule_labels,
)

SPACING = LayoutSpacing()


def _demand(side: LabelSide, label_class: LabelClass, count: int = 1) -> LabelDemand:
    return LabelDemand(
        side=side,
        label_class=label_class,
        count=count,
        extent=SPACING.extent_for(label_class),
    )


class TestLayoutSpacing:
    """Tests for LayoutSpacing."""

    def test_defaults(self) -> None:
        assert SPACING.base_offset == 100
        assert SPACING.stack_spacing == 120
        assert SPACING.inter_class_spacing == 300
        assert SPACING.edge_label_ratio == 0.15

    def test_extents(self) -> None:
        assert SPACING.extent_for(LabelClass.CHAMFER) == 100
        assert SPACING.extent_for(LabelClass.OUTER_DIMENSION) == 110
        assert SPACING.extent_for(LabelClass.EDGE_ID) == 80

    def test_negative_spacing_rejected(self) -> None:
        with pytest.raises(ValueError, match="stack_spacing"):
            LayoutSpacing(stack_spacing=-1)


class TestScheduleLabels:
    """Tests for schedule_labels."""

    def test_classes_stack_outward_in_order(self) -> None:
        demands = [
            _demand(LabelSide.LEFT, LabelClass.OUTER_DIMENSION),
            _demand(LabelSide.LEFT, LabelClass.EDGE_ID),
            _demand(LabelSide.LEFT, LabelClass.CUTOUT),
            _demand(LabelSide.LEFT, LabelClass.CHAMFER, count=2),
        ]
        schedule = schedule_labels(demands, SPACING, min_dimension=400)

        assert schedule.band(LabelSide.LEFT, LabelClass.CHAMFER) == (0, 320)
        assert schedule.band(LabelSide.LEFT, LabelClass.CUTOUT) == (620, 820)
        assert schedule.band(LabelSide.LEFT, LabelClass.EDGE_ID) == (1120, 1200)
        assert schedule.band(LabelSide.LEFT, LabelClass.OUTER_DIMENSION) == (1300, 1510)
        assert schedule.reach(LabelSide.LEFT) == 1510

    def test_bands_never_overlap(self) -> None:
        demands = [
            _demand(side, label_class, count=3)
            for side in LabelSide
            for label_class in LabelClass
        ]
        schedule = schedule_labels(demands, SPACING, min_dimension=600)
        for side in LabelSide:
            slots = schedule.slots_for(side)
            assert len(slots) == len(LabelClass)
            for inner, outer in zip(slots, slots[1:]):
                assert inner.far < outer.near

    def test_edge_label_keeps_minimum_distance(self) -> None:
        schedule = schedule_labels(
            [_demand(LabelSide.TOP, LabelClass.EDGE_ID)], SPACING, min_dimension=400
        )
        assert schedule.offset(LabelSide.TOP, LabelClass.EDGE_ID) == pytest.approx(60)

    def test_outer_dimension_follows_edge_label_spacing(self) -> None:
        demands = [
            _demand(LabelSide.TOP, LabelClass.EDGE_ID),
            _demand(LabelSide.TOP, LabelClass.OUTER_DIMENSION),
        ]
        schedule = schedule_labels(demands, SPACING, min_dimension=400)
        assert schedule.offset(
            LabelSide.TOP, LabelClass.OUTER_DIMENSION
        ) == pytest.approx(60 + 80 + 100)

    def test_lanes_are_independent(self) -> None:
        demands = [
            _demand(LabelSide.LEFT, LabelClass.CHAMFER),
            _demand(LabelSide.RIGHT, LabelClass.OUTER_DIMENSION),
        ]
        schedule = schedule_labels(demands, SPACING, min_dimension=400)
        assert schedule.offset(LabelSide.RIGHT, LabelClass.OUTER_DIMENSION) == 0

    def test_duplicate_demands_merged(self) -> None:
        demands = [
            _demand(LabelSide.BOTTOM, LabelClass.CUTOUT),
            _demand(LabelSide.BOTTOM, LabelClass.CUTOUT, count=2),
        ]
        schedule = schedule_labels(demands, SPACING, min_dimension=400)
        slot = schedule.slot(LabelSide.BOTTOM, LabelClass.CUTOUT)
        assert slot is not None
        assert slot.count == 3
        assert slot.far == 100 + 2 * 120 + 100

    def test_empty_demands_ignored(self) -> None:
        schedule = schedule_labels(
            [_demand(LabelSide.TOP, LabelClass.CHAMFER, count=0)],
            SPACING,
            min_dimension=400,
        )
        assert schedule.slots == ()
        assert schedule.reach(LabelSide.TOP) == 0
        with pytest.raises(KeyError):
            schedule.offset(LabelSide.TOP, LabelClass.CHAMFER)

    def test_negative_count_rejected(self) -> None:
        with pytest.raises(ValueError):
            LabelDemand(LabelSide.TOP, LabelClass.CHAMFER, count=-1, extent=10)

    def test_shifted_moves_one_lane(self) -> None:
        demands = [
            _demand(LabelSide.SECONDARY_RIGHT, LabelClass.CUTOUT),
            _demand(LabelSide.SECONDARY_RIGHT, LabelClass.EDGE_ID),
            _demand(LabelSide.BOTTOM, LabelClass.EDGE_ID),
        ]
        schedule = schedule_labels(demands, SPACING, min_dimension=600)
        shifted = schedule.shifted(LabelSide.SECONDARY_RIGHT, 250)

        for before, after in zip(
            schedule.slots_for(LabelSide.SECONDARY_RIGHT),
            shifted.slots_for(LabelSide.SECONDARY_RIGHT),
        ):
            assert after.offset == before.offset + 250
            assert (after.near, after.far) == (before.near + 250, before.far + 250)
        assert shifted.reach(LabelSide.SECONDARY_RIGHT) == (
            schedule.reach(LabelSide.SECONDARY_RIGHT) + 250
        )
        bottom = LabelSide.BOTTOM
        assert shifted.slots_for(bottom) == schedule.slots_for(bottom)
