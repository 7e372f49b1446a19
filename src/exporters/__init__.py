"""
Timeline exporters.

  SVGBuilder   - incremental SVG document writer
  SVGExporter  - timeline to SVG lanes with a time ruler
"""

from exporters.svg_builder import SVGBuilder
from exporters.svg_exporter import SVGExporter

__all__ = ["SVGBuilder", "SVGExporter"]
