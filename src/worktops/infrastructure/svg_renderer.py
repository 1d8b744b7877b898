"""SVG rendering of worktop drawings.

The document is a fixed-size sheet. Everything belonging to the worktop is
drawn in model millimetres inside a single group whose transform is the
drawing's frame transform, so the renderer never scales coordinates itself.
"""

from __future__ import annotations

from xml.sax.saxutils import escape

from worktops.domain.services import (
    DimensionAnnotation,
    DirectionArrow,
    EdgeHighlight,
    LabelClass,
    PlacedCutout,
    RegionOutline,
    TextAnnotation,
    TextKind,
    WorktopDrawing,
    format_number,
)
from worktops.domain.value_objects import Point2D, Rect

SVG_NAMESPACE = "http://www.w3.org/2000/svg"
FONT_FAMILY = "Arial, sans-serif"

# Group ids for each class of dimension, in drawing order.
_DIMENSION_GROUPS: dict[LabelClass, str] = {
    LabelClass.CHAMFER: "chamfer-dimensions",
    LabelClass.CUTOUT: "cutout-dimensions",
    LabelClass.OUTER_DIMENSION: "outer-dimensions",
}


def _n(value: float) -> str:
    return format_number(value)


class WorktopSvgRenderer:
    """Renders a WorktopDrawing as a standalone SVG document.

    Attributes:
        outline_fill: Fill colour of the worktop pieces.
        outline_stroke: Stroke colour of the outline.
        highlight_stroke: Stroke colour of edge-banding highlights.
        text_color: Colour of outer dimension text.
        annotation_color: Colour of chamfer and cutout annotations.
        show_dimensions: Whether to draw dimension annotations.
        show_captions: Whether to caption cutouts.
    """

    def __init__(
        self,
        outline_fill: str = "#f5f5f5",
        outline_stroke: str = "#000000",
        highlight_stroke: str = "#4a4a4a",
        text_color: str = "#333333",
        annotation_color: str = "#666666",
        show_dimensions: bool = True,
        show_captions: bool = True,
    ) -> None:
        self.outline_fill = outline_fill
        self.outline_stroke = outline_stroke
        self.highlight_stroke = highlight_stroke
        self.text_color = text_color
        self.annotation_color = annotation_color
        self.show_dimensions = show_dimensions
        self.show_captions = show_captions

    def render(self, drawing: WorktopDrawing) -> str:
        """Generate the SVG document for a drawing.

        Args:
            drawing: The drawing to render.

        Returns:
            SVG document as a string.
        """
        settings = drawing.frame.settings
        parts: list[str] = [
            f'<svg xmlns="{SVG_NAMESPACE}" '
            f'width="{_n(settings.width)}mm" height="{_n(settings.height)}mm" '
            f'viewBox="{settings.view_box}">',
            "  <defs>",
            '    <pattern id="diagonalHatch" patternUnits="userSpaceOnUse" '
            'width="80" height="80">',
            '      <path d="M 0,80 L 80,0" stroke="#999999" stroke-width="4"/>',
            "    </pattern>",
            "  </defs>",
            f'  <g id="drawing" transform="{drawing.frame.svg_transform}">',
        ]

        if drawing.shape.offcut is not None:
            parts.append("    <!-- Offcut -->")
            parts.append(self._render_offcut(drawing))

        parts.append("    <!-- Outlines -->")
        parts.append('    <g id="outlines">')
        parts.extend(self._render_outline(outline) for outline in drawing.shape.regions)
        parts.append("    </g>")

        parts.append('    <g id="edge-highlights">')
        parts.extend(self._render_highlight(h) for h in drawing.highlights)
        parts.append("    </g>")

        parts.append('    <g id="edge-labels">')
        parts.extend(
            self._render_text(t, "#000000", 600)
            for t in drawing.texts
            if t.kind is TextKind.EDGE_ID
        )
        parts.append("    </g>")

        parts.append('    <g id="radius-labels">')
        parts.extend(
            self._render_text(t, self.annotation_color, 400)
            for t in drawing.texts
            if t.kind is TextKind.RADIUS
        )
        parts.append("    </g>")

        parts.append("    <!-- Cutouts -->")
        parts.append('    <g id="cutouts">')
        parts.extend(self._render_cutout(p) for p in drawing.placement.placed)
        if self.show_captions:
            parts.extend(
                self._render_text(t, self.annotation_color, 400)
                for t in drawing.texts
                if t.kind is TextKind.CUTOUT_CAPTION
            )
        parts.append("    </g>")

        if self.show_dimensions:
            for label_class, group_id in _DIMENSION_GROUPS.items():
                parts.append(f'    <g id="{group_id}">')
                parts.extend(
                    self._render_dimension(d)
                    for d in drawing.dimensions
                    if d.label_class is label_class
                )
                parts.append("    </g>")

        if drawing.arrows:
            parts.append('    <g id="arrows">')
            parts.extend(self._render_arrow(a) for a in drawing.arrows)
            parts.append("    </g>")

        parts.append("  </g>")
        parts.append("</svg>")
        return "\n".join(parts)

    def _render_offcut(self, drawing: WorktopDrawing) -> str:
        offcut = drawing.shape.offcut
        assert offcut is not None
        rect = (
            f'x="{_n(offcut.x)}" y="{_n(offcut.y)}" '
            f'width="{_n(offcut.width)}" height="{_n(offcut.height)}"'
        )
        lines = [
            '    <g id="offcut">',
            f'      <rect {rect} fill="rgba(150,150,150,0.2)" stroke="#999999" '
            'stroke-width="2" stroke-dasharray="10,5"/>',
            f'      <rect {rect} fill="url(#diagonalHatch)"/>',
        ]
        cut_x = drawing.shape.cut_line_x
        if cut_x is not None:
            top = drawing.shape.primary.rect.top
            bottom = drawing.shape.primary.rect.bottom
            lines.append(
                f'      <line x1="{_n(cut_x)}" y1="{_n(top)}" '
                f'x2="{_n(cut_x)}" y2="{_n(bottom)}" '
                'stroke="#666666" stroke-width="2" stroke-dasharray="10,5"/>'
            )
        lines.append("    </g>")
        return "\n".join(lines)

    def _render_outline(self, outline: RegionOutline) -> str:
        return (
            f'      <path data-region="{outline.region.value}" '
            f'd="{outline.path.to_svg()}" fill="{self.outline_fill}" '
            f'stroke="{self.outline_stroke}" stroke-width="3"/>'
        )

    def _render_highlight(self, highlight: EdgeHighlight) -> str:
        return (
            f'      <path data-edge="{highlight.edge}" d="{highlight.path.to_svg()}" '
            f'fill="none" stroke="{self.highlight_stroke}" stroke-width="15" '
            'stroke-dasharray="8,4" stroke-opacity="0.7" '
            'stroke-linecap="round" stroke-linejoin="round"/>'
        )

    def _render_cutout(self, placed: PlacedCutout) -> str:
        center = placed.footprint.center
        # Rotated cutouts are drawn at their declared size and turned about
        # the centre, which lands them exactly on the footprint.
        if placed.is_rotated:
            body = Rect(
                center.x - placed.cutout.width / 2,
                center.y - placed.cutout.height / 2,
                placed.cutout.width,
                placed.cutout.height,
            )
            transform = (
                f' transform="rotate({_n(placed.rotation)} '
                f'{_n(center.x)} {_n(center.y)})"'
            )
        else:
            body = placed.footprint
            transform = ""

        return "\n".join(
            [
                f'      <g data-cutout="{placed.index}"{transform}>',
                f'        <rect x="{_n(body.x)}" y="{_n(body.y)}" '
                f'width="{_n(body.width)}" height="{_n(body.height)}" '
                'fill="rgba(100,100,100,0.1)" stroke="#666666" stroke-width="2"/>',
                f'        <line x1="{_n(body.left)}" y1="{_n(body.top)}" '
                f'x2="{_n(body.right)}" y2="{_n(body.bottom)}" '
                'stroke="#999999" stroke-width="1"/>',
                f'        <line x1="{_n(body.right)}" y1="{_n(body.top)}" '
                f'x2="{_n(body.left)}" y2="{_n(body.bottom)}" '
                'stroke="#999999" stroke-width="1"/>',
                "      </g>",
            ]
        )

    def _render_dimension(self, dimension: DimensionAnnotation) -> str:
        is_outer = dimension.label_class is LabelClass.OUTER_DIMENSION
        color = self.text_color if is_outer else self.annotation_color
        weight = 500 if is_outer else 400
        start, end = dimension.dimension_line

        lines = ["      <g>"]
        for a, b in dimension.extension_lines:
            lines.append(f"        {self._line(a, b, '#000000', 1)}")
        lines.append(f"        {self._line(start, end, '#000000', 1.5)}")
        lines.append(
            "  "
            + self._text_element(
                (dimension.text,),
                dimension.text_position,
                dimension.text_rotation,
                dimension.font_size,
                color,
                weight,
            )
        )
        lines.append("      </g>")
        return "\n".join(lines)

    def _render_text(self, text: TextAnnotation, color: str, weight: int) -> str:
        return self._text_element(
            text.lines,
            text.position,
            text.rotation,
            text.font_size,
            color,
            weight,
            anchor=text.anchor,
        )

    def _render_arrow(self, arrow: DirectionArrow) -> str:
        points = " ".join(f"{_n(p.x)},{_n(p.y)}" for p in arrow.head)
        return "\n".join(
            [
                f'      <g data-region="{arrow.region.value}">',
                f"        {self._line(arrow.tail, arrow.shaft_end, self.text_color, 10)}",
                f'        <polygon points="{points}" fill="{self.text_color}"/>',
                "      </g>",
            ]
        )

    @staticmethod
    def _line(a: Point2D, b: Point2D, stroke: str, width: float) -> str:
        return (
            f'<line x1="{_n(a.x)}" y1="{_n(a.y)}" x2="{_n(b.x)}" y2="{_n(b.y)}" '
            f'stroke="{stroke}" stroke-width="{_n(width)}"/>'
        )

    @staticmethod
    def _text_element(
        lines: tuple[str, ...],
        position: Point2D,
        rotation: float,
        font_size: float,
        color: str,
        weight: int,
        anchor: str = "middle",
    ) -> str:
        x, y = _n(position.x), _n(position.y)
        transform = f' transform="rotate({_n(rotation)} {x} {y})"' if rotation else ""
        opening = (
            f'      <text x="{x}" y="{y}" text-anchor="{anchor}" '
            f'dominant-baseline="middle" font-family="{FONT_FAMILY}" '
            f'font-size="{_n(font_size)}" font-weight="{weight}" '
            f'fill="{color}"{transform}>'
        )
        if len(lines) == 1:
            return f"{opening}{escape(lines[0])}</text>"

        # Multi-line text is centred on the position, one line per em.
        first_dy = -(len(lines) - 1) * font_size / 2
        spans = [
            f'<tspan x="{x}" dy="{_n(first_dy if i == 0 else font_size)}">'
            f"{escape(line)}</tspan>"
            for i, line in enumerate(lines)
        ]
        return f"{opening}{''.join(spans)}</text>"
