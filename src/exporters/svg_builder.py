"""
SVG Builder - incremental, forward-only SVG document writer

Writes elements straight to a text stream as they are produced. Group
nesting is tracked only to indent the output; callers are responsible
for pairing every start_group() with an end_group().
"""
from typing import TextIO
from xml.sax.saxutils import escape


def escape_attr(value: str) -> str:
    """Escape a value placed inside a double-quoted attribute."""
    return escape(value, {'"': "&quot;"})


def escape_text(value: str) -> str:
    """Escape element text content."""
    return escape(value)


def _indent(level: int) -> str:
    return "  " * level


class SVGBuilder:
    """Minimal SVG writer

    Write failures of the underlying stream are not caught: the first
    failing write aborts whatever the caller is rendering.
    """

    def __init__(self, stream: TextIO):
        self.stream = stream
        self.depth = 0

    def _write_line(self, content: str):
        self.stream.write(f"{_indent(self.depth)}{content}\n")

    @staticmethod
    def _optional_attrs(id: str = "", css_class: str = "") -> str:
        attrs = ""
        if id:
            attrs += f' id="{escape_attr(id)}"'
        if css_class:
            attrs += f' class="{escape_attr(css_class)}"'
        return attrs

    def write_header(self, width: int, height: int):
        """XML declaration and <svg> root sized to width x height"""
        self.stream.write(
            '<?xml version="1.0" encoding="UTF-8"?>\n'
            f'<svg xmlns="http://www.w3.org/2000/svg" width="{width}" height="{height}" '
            f'viewBox="0 0 {width} {height}">\n'
        )
        self.depth = 1

    def write_footer(self):
        self.depth -= 1
        self.stream.write("</svg>\n")

    def write_style(self, css: str):
        """Style block; *css* is trusted static text and is written verbatim."""
        pad = _indent(self.depth)
        self.stream.write(f"{pad}<style>\n{css}\n{pad}</style>\n")

    def start_group(self, id: str = "", css_class: str = ""):
        self._write_line(f"<g{self._optional_attrs(id, css_class)}>")
        self.depth += 1

    def end_group(self):
        self.depth -= 1
        self._write_line("</g>")

    def write_rect(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        fill: str = "",
        stroke: str = "",
        id: str = "",
        css_class: str = "",
        text: str = "",
    ):
        """Rectangle, optionally followed by a caption centered on it

        Args:
            x, y, width, height: Geometry in pixels
            fill, stroke: Colors (omitted when empty)
            id, css_class: Optional identifying attributes
            text: Caption drawn at the rectangle center with class "clip-label"
        """
        attrs = f'x="{x:.2f}" y="{y:.2f}" width="{width:.2f}" height="{height:.2f}"'
        if fill:
            attrs += f' fill="{escape_attr(fill)}"'
        if stroke:
            attrs += f' stroke="{escape_attr(stroke)}"'
        attrs += self._optional_attrs(id, css_class)
        self._write_line(f"<rect {attrs} />")

        if text:
            self.write_text(x + width / 2, y + height / 2, text, "middle", css_class="clip-label")

    def write_path(self, d: str, fill: str, stroke: str, stroke_width: float, css_class: str = ""):
        # Path data is generated internally and written as-is
        attrs = f'd="{d}"'
        if fill:
            attrs += f' fill="{escape_attr(fill)}"'
        if stroke:
            attrs += f' stroke="{escape_attr(stroke)}"'
        if stroke_width > 0:
            attrs += f' stroke-width="{stroke_width:.2f}"'
        attrs += self._optional_attrs(css_class=css_class)
        self._write_line(f"<path {attrs} />")

    def write_line(
        self,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        stroke: str,
        stroke_width: float,
        css_class: str = "",
    ):
        attrs = f'x1="{x1:.2f}" y1="{y1:.2f}" x2="{x2:.2f}" y2="{y2:.2f}"'
        if stroke:
            attrs += f' stroke="{escape_attr(stroke)}"'
        if stroke_width > 0:
            attrs += f' stroke-width="{stroke_width:.2f}"'
        attrs += self._optional_attrs(css_class=css_class)
        self._write_line(f"<line {attrs} />")

    def write_text(self, x: float, y: float, text: str, anchor: str, id: str = "", css_class: str = ""):
        attrs = f'x="{x:.2f}" y="{y:.2f}"'
        if anchor:
            attrs += f' text-anchor="{escape_attr(anchor)}"'
        attrs += self._optional_attrs(id, css_class)
        attrs += ' dominant-baseline="middle"'
        self._write_line(f"<text {attrs}>{escape_text(text)}</text>")
