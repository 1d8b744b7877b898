"""Unit tests for fitting drawings onto the page."""

import pytest

from worktops.domain import (
    DrawingSettings,
    FrameSettings,
    Point2D,
    WorktopConfiguration,
    generate_drawing,
)
from worktops.domain.services import LabelSide


class TestFrameSettings:
    """Tests for FrameSettings."""

    def test_a4_defaults(self) -> None:
        settings = FrameSettings()
        assert (settings.width, settings.height, settings.margin) == (210, 297, 5)
        assert settings.view_box == "0 0 210 297"

    def test_margin_must_leave_room(self) -> None:
        with pytest.raises(ValueError, match="no drawable area"):
            FrameSettings(width=100, height=100, margin=50)

    def test_size_must_be_positive(self) -> None:
        with pytest.raises(ValueError):
            FrameSettings(width=0)


class TestComposeFrame:
    """Tests for compose_frame through generate_drawing."""

    @pytest.mark.parametrize(
        "config_fixture", ["straight_config", "l_left_config", "l_right_config"]
    )
    def test_everything_inside_margin(
        self, config_fixture: str, request: pytest.FixtureRequest
    ) -> None:
        config: WorktopConfiguration = request.getfixturevalue(config_fixture)
        frame = generate_drawing(config).frame
        surface = frame.surface_rect()

        assert surface.left >= 5 - 1e-6
        assert surface.top >= 5 - 1e-6
        assert surface.right <= 205 + 1e-6
        assert surface.bottom <= 292 + 1e-6

    def test_box_holds_every_lane(self, straight_config: WorktopConfiguration) -> None:
        drawing = generate_drawing(straight_config)
        box = drawing.frame.box
        bounds = drawing.shape.bounds
        reach = drawing.schedule.reach
        assert box.left == pytest.approx(bounds.left - reach(LabelSide.LEFT) - 100)
        assert box.right == pytest.approx(bounds.right + reach(LabelSide.RIGHT) + 100)
        assert box.bottom == pytest.approx(
            bounds.bottom + reach(LabelSide.BOTTOM) + 100
        )

    def test_offcut_not_framed(self, straight_config: WorktopConfiguration) -> None:
        drawing = generate_drawing(straight_config)
        assert drawing.shape.offcut is not None
        assert drawing.frame.box.right < drawing.shape.offcut.right

    def test_box_centre_lands_on_page_centre(
        self, l_left_config: WorktopConfiguration
    ) -> None:
        frame = generate_drawing(l_left_config).frame
        assert frame.apply(frame.center).is_close(Point2D(105, 148.5), 1e-9)

    def test_quarter_turn_counter_clockwise(
        self, straight_config: WorktopConfiguration
    ) -> None:
        frame = generate_drawing(straight_config).frame
        # Moving right in the model moves up the page.
        origin = frame.apply(frame.center)
        moved = frame.apply(frame.center.offset(dx=100))
        assert moved.y < origin.y
        assert moved.x == pytest.approx(origin.x)

    def test_scale_capped_at_one(self, straight_config: WorktopConfiguration) -> None:
        settings = DrawingSettings(frame=FrameSettings(width=10000, height=10000))
        assert generate_drawing(straight_config, settings).frame.scale == 1.0

    def test_upscale_when_allowed(self, straight_config: WorktopConfiguration) -> None:
        settings = DrawingSettings(
            frame=FrameSettings(width=10000, height=10000, allow_upscale=True)
        )
        assert generate_drawing(straight_config, settings).frame.scale > 1.0

    def test_svg_transform(self, straight_config: WorktopConfiguration) -> None:
        transform = generate_drawing(straight_config).frame.svg_transform
        assert transform.startswith("translate(105 148.5) rotate(-90) scale(0.")
