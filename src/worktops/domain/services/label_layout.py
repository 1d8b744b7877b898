"""Label lane scheduling.

Labels around a worktop are organised in lanes, one per free side, and in
classes that are stacked outward from the edge in a fixed order: chamfer
legs first, then cutout positions, then the edge identifier, then the
overall dimension. The schedule is computed once, before any label is
positioned, by folding over the per-lane demands; the result is an
immutable table of offsets in which the bands of different classes on the
same lane never overlap.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, replace
from enum import Enum
from functools import partial, reduce

logger = logging.getLogger(__name__)


class LabelSide(str, Enum):
    """A lane of labels, named after the side it grows out of."""

    LEFT = "left"
    TOP = "top"
    RIGHT = "right"
    BOTTOM = "bottom"
    SECONDARY_RIGHT = "secondary_right"
    SECONDARY_BOTTOM = "secondary_bottom"

    @property
    def is_horizontal(self) -> bool:
        """Whether labels in this lane measure along the x axis."""
        return self in (LabelSide.TOP, LabelSide.BOTTOM, LabelSide.SECONDARY_BOTTOM)

    @property
    def direction(self) -> float:
        """Sign of the outward direction on the lane's perpendicular axis."""
        return -1.0 if self in (LabelSide.LEFT, LabelSide.TOP) else 1.0


class LabelClass(str, Enum):
    """Category of label, declared nearest-to-edge first."""

    CHAMFER = "chamfer"
    CUTOUT = "cutout"
    EDGE_ID = "edge_id"
    OUTER_DIMENSION = "outer_dimension"


_SIDE_ORDER = {side: i for i, side in enumerate(LabelSide)}
_CLASS_ORDER = {label_class: i for i, label_class in enumerate(LabelClass)}


@dataclass(frozen=True)
class LayoutSpacing:
    """Spacing rules for label placement, in millimetres.

    Attributes:
        base_offset: Distance from a class's slot start to its first
            dimension line.
        stack_spacing: Distance between stacked rows of the same class.
        inter_class_spacing: Gap between the bands of consecutive classes.
        text_gap: Distance from a dimension line to its text centre.
        dimension_font_size: Font size of outer dimensions (A/B/C/D).
        annotation_font_size: Font size of chamfer, cutout and edge labels.
        caption_font_size: Font size of cutout captions and radius labels.
        edge_label_ratio: Minimum edge label offset as a fraction of the
            shape's shorter dimension.
        edge_label_spacing: Gap after the edge identifier band.
        frame_padding: Extra margin around the outermost label on each side.
    """

    base_offset: float = 100.0
    stack_spacing: float = 120.0
    inter_class_spacing: float = 300.0
    text_gap: float = 60.0
    dimension_font_size: float = 100.0
    annotation_font_size: float = 80.0
    caption_font_size: float = 60.0
    edge_label_ratio: float = 0.15
    edge_label_spacing: float = 100.0
    frame_padding: float = 100.0

    def __post_init__(self) -> None:
        for name, value in vars(self).items():
            if value < 0:
                raise ValueError(f"Layout spacing '{name}' cannot be negative")

    def dimension_extent(self, font_size: float) -> float:
        """Reach of a dimension's text beyond its dimension line."""
        return self.text_gap + font_size / 2

    def font_size_for(self, label_class: LabelClass) -> float:
        if label_class is LabelClass.OUTER_DIMENSION:
            return self.dimension_font_size
        return self.annotation_font_size

    def extent_for(self, label_class: LabelClass) -> float:
        """Perpendicular extent of one label of the class."""
        if label_class is LabelClass.EDGE_ID:
            return self.annotation_font_size
        return self.dimension_extent(self.font_size_for(label_class))


@dataclass(frozen=True)
class LabelDemand:
    """How many labels of one class a lane needs."""

    side: LabelSide
    label_class: LabelClass
    count: int
    extent: float

    def __post_init__(self) -> None:
        if self.count < 0:
            raise ValueError("Label count cannot be negative")


@dataclass(frozen=True)
class OffsetSlot:
    """Scheduled position of one class within a lane.

    Attributes:
        side: The lane.
        label_class: The class of labels in the slot.
        offset: Perpendicular distance from the edge where the slot begins.
        count: Number of stacked labels.
        near: Inner edge of the band occupied by the labels.
        far: Outer edge of the band occupied by the labels.
    """

    side: LabelSide
    label_class: LabelClass
    offset: float
    count: int
    near: float
    far: float


@dataclass(frozen=True)
class OffsetSchedule:
    """Immutable per-lane offset table."""

    slots: tuple[OffsetSlot, ...] = ()

    def slot(self, side: LabelSide, label_class: LabelClass) -> OffsetSlot | None:
        for slot in self.slots:
            if slot.side is side and slot.label_class is label_class:
                return slot
        return None

    def offset(self, side: LabelSide, label_class: LabelClass) -> float:
        """Start offset of a scheduled slot.

        Raises:
            KeyError: If nothing of that class was scheduled on the lane.
        """
        slot = self.slot(side, label_class)
        if slot is None:
            raise KeyError(f"No {label_class.value} labels scheduled on {side.value}")
        return slot.offset

    def band(self, side: LabelSide, label_class: LabelClass) -> tuple[float, float]:
        """(near, far) interval occupied by a slot's labels."""
        slot = self.slot(side, label_class)
        if slot is None:
            raise KeyError(f"No {label_class.value} labels scheduled on {side.value}")
        return slot.near, slot.far

    def slots_for(self, side: LabelSide) -> tuple[OffsetSlot, ...]:
        return tuple(slot for slot in self.slots if slot.side is side)

    def reach(self, side: LabelSide) -> float:
        """Outermost extent of any label in the lane (0 when empty)."""
        return max((slot.far for slot in self.slots_for(side)), default=0.0)

    def shifted(self, side: LabelSide, amount: float) -> OffsetSchedule:
        """Move every slot of a lane further out by ``amount``."""
        return OffsetSchedule(
            slots=tuple(
                replace(
                    slot,
                    offset=slot.offset + amount,
                    near=slot.near + amount,
                    far=slot.far + amount,
                )
                if slot.side is side
                else slot
                for slot in self.slots
            )
        )


def _running_offset(
    slots: tuple[OffsetSlot, ...], side: LabelSide, spacing: LayoutSpacing
) -> float:
    previous = [slot for slot in slots if slot.side is side]
    if not previous:
        return 0.0
    last = previous[-1]
    if last.label_class is LabelClass.EDGE_ID:
        return last.far + spacing.edge_label_spacing
    return last.far + spacing.inter_class_spacing


def _advance(
    slots: tuple[OffsetSlot, ...],
    demand: LabelDemand,
    spacing: LayoutSpacing,
    min_dimension: float,
) -> tuple[OffsetSlot, ...]:
    running = _running_offset(slots, demand.side, spacing)
    if demand.label_class is LabelClass.EDGE_ID:
        offset = max(running, spacing.edge_label_ratio * min_dimension)
        near, far = offset, offset + demand.extent
    else:
        offset = running
        near = offset
        far = (
            offset
            + spacing.base_offset
            + (demand.count - 1) * spacing.stack_spacing
            + demand.extent
        )
    return slots + (
        OffsetSlot(
            side=demand.side,
            label_class=demand.label_class,
            offset=offset,
            count=demand.count,
            near=near,
            far=far,
        ),
    )


def _merge(demands: Iterable[LabelDemand]) -> list[LabelDemand]:
    merged: dict[tuple[LabelSide, LabelClass], LabelDemand] = {}
    for demand in demands:
        if demand.count == 0:
            continue
        key = (demand.side, demand.label_class)
        existing = merged.get(key)
        if existing is None:
            merged[key] = demand
        else:
            merged[key] = LabelDemand(
                side=demand.side,
                label_class=demand.label_class,
                count=existing.count + demand.count,
                extent=max(existing.extent, demand.extent),
            )
    return sorted(
        merged.values(),
        key=lambda d: (_SIDE_ORDER[d.side], _CLASS_ORDER[d.label_class]),
    )


def schedule_labels(
    demands: Iterable[LabelDemand],
    spacing: LayoutSpacing,
    min_dimension: float,
) -> OffsetSchedule:
    """Compute the offset schedule for all lanes.

    Each class consumes ``base_offset + (count - 1) * stack_spacing +
    extent`` followed by ``inter_class_spacing``. The edge identifier is
    placed at ``max(running offset, edge_label_ratio * min_dimension)`` so
    it keeps a sensible distance even when nothing is closer to the edge.

    Args:
        demands: Label demands; empty ones are ignored and duplicates for the
            same lane and class are merged.
        spacing: Spacing rules.
        min_dimension: The shorter dimension of the whole shape.

    Returns:
        The immutable offset schedule.
    """
    ordered = _merge(demands)
    slots = reduce(
        partial(_advance, spacing=spacing, min_dimension=min_dimension),
        ordered,
        (),
    )
    logger.debug(f"Scheduled {len(slots)} label slots")
    return OffsetSchedule(slots=slots)
