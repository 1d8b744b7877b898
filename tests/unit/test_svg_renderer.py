"""Unit tests for WorktopSvgRenderer and SvgExporter."""

import xml.etree.ElementTree as ET
from pathlib import Path

from worktops.domain import (
    AssemblyType,
    Cutout,
    Region,
    WorktopConfiguration,
    generate_drawing,
)
from worktops.infrastructure import SvgExporter, WorktopSvgRenderer

NS = {"svg": "http://www.w3.org/2000/svg"}


def _parse(svg: str) -> ET.Element:
    return ET.fromstring(svg)


def _group(root: ET.Element, group_id: str) -> ET.Element | None:
    return root.find(f".//svg:g[@id='{group_id}']", NS)


class TestWorktopSvgRenderer:
    """Tests for the SVG document structure."""

    def test_a4_document(self, straight_config: WorktopConfiguration) -> None:
        root = _parse(WorktopSvgRenderer().render(generate_drawing(straight_config)))
        assert root.get("width") == "210mm"
        assert root.get("height") == "297mm"
        assert root.get("viewBox") == "0 0 210 297"

    def test_drawing_group_uses_frame_transform(
        self, straight_config: WorktopConfiguration
    ) -> None:
        drawing = generate_drawing(straight_config)
        root = _parse(WorktopSvgRenderer().render(drawing))
        group = _group(root, "drawing")
        assert group is not None
        assert group.get("transform") == drawing.frame.svg_transform

    def test_straight_cut_groups(self, straight_config: WorktopConfiguration) -> None:
        root = _parse(WorktopSvgRenderer().render(generate_drawing(straight_config)))
        for group_id in (
            "offcut",
            "outlines",
            "edge-highlights",
            "cutouts",
            "cutout-dimensions",
            "outer-dimensions",
            "arrows",
        ):
            assert _group(root, group_id) is not None, group_id

    def test_outline_per_region(self, l_left_config: WorktopConfiguration) -> None:
        drawing = generate_drawing(l_left_config)
        root = _parse(WorktopSvgRenderer().render(drawing))
        paths = _group(root, "outlines").findall("svg:path", NS)
        assert [p.get("data-region") for p in paths] == ["primary", "secondary"]
        assert paths[0].get("d") == drawing.shape.primary.path.to_svg()
        assert _group(root, "offcut") is None

    def test_edge_highlights(self, l_left_config: WorktopConfiguration) -> None:
        root = _parse(WorktopSvgRenderer().render(generate_drawing(l_left_config)))
        paths = _group(root, "edge-highlights").findall("svg:path", NS)
        assert [p.get("data-edge") for p in paths] == ["1", "2", "3", "4", "5", "6"]
        assert all(p.get("fill") == "none" for p in paths)

    def test_cutout_caption_lines(self, straight_config: WorktopConfiguration) -> None:
        root = _parse(WorktopSvgRenderer().render(generate_drawing(straight_config)))
        cutouts = _group(root, "cutouts")
        assert cutouts.find("svg:g[@data-cutout='1']", NS) is not None
        spans = [span.text for span in cutouts.iter(f"{{{NS['svg']}}}tspan")]
        assert spans == ["Cutout 1", "80×80"]

    def test_secondary_cutout_rotated(self) -> None:
        config = WorktopConfiguration(
            assembly_type=AssemblyType.L_SHAPE_LEFT,
            dimension_a=800,
            dimension_b=600,
            dimension_c=500,
            dimension_d=300,
            cutouts=(Cutout(width=100, height=60, region=Region.SECONDARY),),
        )
        root = _parse(WorktopSvgRenderer().render(generate_drawing(config)))
        group = root.find(".//svg:g[@data-cutout='1']", NS)
        assert group.get("transform").startswith("rotate(90 ")
        rect = group.find("svg:rect", NS)
        assert (rect.get("width"), rect.get("height")) == ("100", "60")

    def test_outer_dimension_text(self, straight_config: WorktopConfiguration) -> None:
        root = _parse(WorktopSvgRenderer().render(generate_drawing(straight_config)))
        texts = [t.text for t in _group(root, "outer-dimensions").iter(f"{{{NS['svg']}}}text")]
        assert sorted(texts) == ["A: 600mm", "B: 400mm"]

    def test_dimensions_can_be_hidden(
        self, straight_config: WorktopConfiguration
    ) -> None:
        renderer = WorktopSvgRenderer(show_dimensions=False, show_captions=False)
        root = _parse(renderer.render(generate_drawing(straight_config)))
        assert _group(root, "outer-dimensions") is None
        assert list(_group(root, "cutouts").iter(f"{{{NS['svg']}}}text")) == []

    def test_custom_colours(self, straight_config: WorktopConfiguration) -> None:
        renderer = WorktopSvgRenderer(outline_fill="#ffeecc")
        svg = renderer.render(generate_drawing(straight_config))
        assert 'fill="#ffeecc"' in svg


class TestSvgExporter:
    """Tests for SvgExporter."""

    def test_export_writes_file(
        self, straight_config: WorktopConfiguration, tmp_path: Path
    ) -> None:
        drawing = generate_drawing(straight_config)
        path = tmp_path / "worktop.svg"
        SvgExporter().export(drawing, path)
        assert path.read_text(encoding="utf-8") == SvgExporter().export_string(drawing)

    def test_media_type(self) -> None:
        assert SvgExporter.media_type == "image/svg+xml"
        assert SvgExporter.file_extension == "svg"
