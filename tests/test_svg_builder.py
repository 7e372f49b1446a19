"""
Tests for the incremental SVG writer.
"""
import io
import os
import sys
import unittest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from exporters.svg_builder import SVGBuilder, escape_attr, escape_text


class TestEscaping(unittest.TestCase):
    def test_escape_text(self):
        self.assertEqual(escape_text('a & b < c > "d"'), 'a &amp; b &lt; c &gt; "d"')

    def test_escape_attr(self):
        self.assertEqual(escape_attr('a & "b" <c>'), 'a &amp; &quot;b&quot; &lt;c&gt;')


class TestSVGBuilder(unittest.TestCase):
    def setUp(self):
        self.out = io.StringIO()
        self.builder = SVGBuilder(self.out)

    def test_header_and_footer(self):
        self.builder.write_header(640, 480)
        self.assertEqual(self.builder.depth, 1)
        self.builder.write_footer()
        self.assertEqual(self.builder.depth, 0)

        svg = self.out.getvalue()
        self.assertTrue(svg.startswith('<?xml version="1.0" encoding="UTF-8"?>\n'))
        self.assertIn('width="640" height="480" viewBox="0 0 640 480"', svg)
        self.assertTrue(svg.endswith("</svg>\n"))

    def test_groups_track_depth_and_indent(self):
        self.builder.write_header(10, 10)
        self.builder.start_group("outer", "track")
        self.builder.start_group()
        self.assertEqual(self.builder.depth, 3)
        self.builder.write_line(0, 0, 1, 1, "#000", 1)
        self.builder.end_group()
        self.builder.end_group()
        self.builder.write_footer()

        lines = self.out.getvalue().splitlines()
        self.assertIn('  <g id="outer" class="track">', lines)
        self.assertIn("    <g>", lines)
        self.assertIn('      <line x1="0.00" y1="0.00" x2="1.00" y2="1.00" stroke="#000" stroke-width="1.00" />', lines)
        self.assertIn("    </g>", lines)
        self.assertIn("  </g>", lines)
        self.assertEqual(self.builder.depth, 0)

    def test_group_attributes_are_escaped(self):
        self.builder.start_group('a"b', "x<y")
        self.assertIn('<g id="a&quot;b" class="x&lt;y">', self.out.getvalue())

    def test_rect_without_caption(self):
        self.builder.write_rect(1, 2, 3, 4)
        self.assertEqual(self.out.getvalue(), '<rect x="1.00" y="2.00" width="3.00" height="4.00" />\n')

    def test_rect_with_caption(self):
        self.builder.write_rect(10, 20, 100, 40, "#fff", "#000", "r1", "clip", text="Hi & bye")
        svg = self.out.getvalue()
        self.assertIn('fill="#fff" stroke="#000" id="r1" class="clip" />', svg)
        self.assertIn(
            '<text x="60.00" y="40.00" text-anchor="middle" class="clip-label" '
            'dominant-baseline="middle">Hi &amp; bye</text>',
            svg,
        )

    def test_path_is_written_verbatim(self):
        self.builder.write_path("M 0 10 L 10 0", "none", "#FFB84D", 3, "transition")
        self.assertEqual(
            self.out.getvalue(),
            '<path d="M 0 10 L 10 0" fill="none" stroke="#FFB84D" stroke-width="3.00" class="transition" />\n',
        )

    def test_zero_stroke_width_is_omitted(self):
        self.builder.write_line(0, 0, 5, 5, "", 0)
        self.assertNotIn("stroke", self.out.getvalue())

    def test_text_escaping(self):
        self.builder.write_text(0, 0, "<b>", "end", id="t1")
        self.assertIn('text-anchor="end" id="t1"', self.out.getvalue())
        self.assertIn(">&lt;b&gt;</text>", self.out.getvalue())

    def test_style_is_not_escaped(self):
        self.builder.write_header(10, 10)
        self.builder.write_style(".a > .b { fill: red; }")
        self.assertIn("  <style>\n.a > .b { fill: red; }\n  </style>\n", self.out.getvalue())


if __name__ == "__main__":
    unittest.main()
