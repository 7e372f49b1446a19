"""
SVG Exporter - draw a timeline as stacked horizontal lanes

Write-only visualisation of a Timeline:
- a time ruler along the top
- one lane per track (video and audio lanes use different colors)
- clips as filled rectangles, gaps as dashed rectangles,
  transitions as a diagonal stroke over the neighbouring clips

Usage:
    exporter = SVGExporter(width=1200, height=600)
    exporter.save(timeline, "timeline.svg")
"""
import io
import math
from pathlib import Path
from typing import TextIO

from config import (
    MARGIN_TOP, MARGIN_BOTTOM, MARGIN_LEFT, MARGIN_RIGHT,
    RULER_HEIGHT, TRACK_HEIGHT, MIN_TRACK_HEIGHT, TRACK_LABEL_GAP,
    MIN_CLIP_WIDTH, CLIP_PADDING, CLIP_LABEL_MIN_WIDTH, TRANSITION_STROKE_WIDTH,
    VIDEO_TRACK_COLOR, AUDIO_TRACK_COLOR, TRACK_BG_ALPHA,
    GAP_COLOR, GAP_STROKE_COLOR, CLIP_STROKE_COLOR, TRANSITION_COLOR,
    GRID_COLOR, TRACK_LABEL_BG,
    RULER_INTERVALS, RULER_TARGET_MARKS,
)
from exceptions import (
    TimelineError,
    NoTimelineError,
    DurationUnavailableError,
    NoDurationError,
    NoTracksError,
)
from exporters.svg_builder import SVGBuilder
from models.timeline import Timeline, Track, TrackKind, Clip, Gap, Transition
from runtime_config import get_config
from utils.logger import get_logger, log_performance

logger = get_logger(__name__)

# Errors a duration query may raise (model failure or rational-time arithmetic)
_DURATION_ERRORS = (TimelineError, ValueError)

SVG_STYLES = """
    .track-label {
      font-family: Arial, sans-serif;
      font-size: 12px;
      fill: #333;
      font-weight: bold;
    }
    .clip-label {
      font-family: Arial, sans-serif;
      font-size: 10px;
      fill: white;
      pointer-events: none;
    }
    .ruler-text {
      font-family: Arial, sans-serif;
      font-size: 10px;
      fill: #666;
    }
    .clip {
      stroke: #333;
      stroke-width: 1;
    }
    .gap {
      stroke: #999;
      stroke-width: 1;
      stroke-dasharray: 2,2;
    }
    .transition {
      stroke: #333;
      stroke-width: 2;
      fill: none;
    }
  """


def sanitize_id(name: str) -> str:
    """Turn a display name into a token usable as an XML id.

    Every character outside [A-Za-z0-9_-] becomes one underscore, and
    the result is prefixed with "id_" unless it starts with a letter.
    """
    if not name:
        return "unnamed"

    result = "".join(
        ch if (ch.isascii() and ch.isalnum()) or ch in "_-" else "_"
        for ch in name
    )
    first = result[0]
    if not (first.isascii() and first.isalpha()):
        result = "id_" + result
    return result


def format_time(seconds: float) -> str:
    """Ruler label: "12.5s", "1:05" or "1:01:01"."""
    if seconds < 60:
        return f"{seconds:.1f}s"

    minutes = int(seconds / 60)
    secs = int(seconds) % 60
    if minutes < 60:
        return f"{minutes}:{secs:02d}"

    hours = minutes // 60
    minutes = minutes % 60
    return f"{hours}:{minutes:02d}:{secs:02d}"


def calculate_time_interval(duration_seconds: float) -> float:
    """Pick a ruler step giving roughly RULER_TARGET_MARKS ticks.

    Returns the smallest ladder value not below duration / target, or the
    coarsest one for very long timelines.
    """
    ideal = duration_seconds / RULER_TARGET_MARKS
    for interval in RULER_INTERVALS:
        if interval >= ideal:
            return float(interval)
    return float(RULER_INTERVALS[-1])


class SVGExporter:
    """Timeline to SVG exporter

    Only the canvas size is kept between calls; all layout state lives in
    a single render() call, so one exporter can serve many timelines.
    """

    def __init__(self, width: int | None = None, height: int | None = None):
        """
        Args:
            width: Canvas width in pixels (default: runtime config)
            height: Canvas height in pixels (default: runtime config)
        """
        config = get_config()
        self.width = width if width is not None else config.canvas_width
        self.height = height if height is not None else config.canvas_height

    def set_size(self, width: int, height: int):
        """Set the canvas size used by subsequent renders."""
        self.width = width
        self.height = height

    @property
    def content_width(self) -> float:
        return float(self.width - MARGIN_LEFT - MARGIN_RIGHT)

    @property
    def content_height(self) -> float:
        return float(self.height - MARGIN_TOP - MARGIN_BOTTOM)

    @log_performance
    def render(self, timeline: Timeline, stream: TextIO) -> None:
        """Write *timeline* as an SVG document to *stream*

        The stream is owned by the caller and is neither flushed nor
        closed. Output is incremental: when an error is raised, whatever
        was already written stays in the stream.

        Raises:
            NoTimelineError: timeline is None
            DurationUnavailableError: the total duration cannot be computed
            NoDurationError: the total duration is not positive
            NoTracksError: no track container, or it is empty
        """
        if timeline is None:
            raise NoTimelineError()

        builder = SVGBuilder(stream)
        builder.write_header(self.width, self.height)
        builder.write_style(SVG_STYLES)

        try:
            duration = timeline.duration()
        except _DURATION_ERRORS as e:
            raise DurationUnavailableError(f"failed to get timeline duration: {e}") from e

        duration_seconds = duration.to_seconds()
        if duration_seconds <= 0:
            raise NoDurationError()

        tracks = timeline.tracks
        if tracks is None:
            raise NoTracksError()
        children = list(tracks.children)
        if not children:
            raise NoTracksError()

        logger.debug(
            f"Rendering '{timeline.name}': {len(children)} lanes, "
            f"{duration_seconds:.3f}s on {self.width}x{self.height}"
        )

        # Pixels per second; not clamped, item widths are clamped instead
        time_scale = self.content_width / duration_seconds

        self._draw_time_ruler(builder, duration_seconds, time_scale)

        available_height = self.content_height - RULER_HEIGHT
        track_height = int(available_height / len(children))
        track_height = max(MIN_TRACK_HEIGHT, min(track_height, TRACK_HEIGHT))

        for index, child in enumerate(children):
            if not isinstance(child, Track):
                logger.debug(f"Skipping non-track {type(child).__name__} at index {index}")
                continue
            y_offset = MARGIN_TOP + RULER_HEIGHT + index * track_height
            self._draw_track(builder, child, float(y_offset), float(track_height), time_scale)

        builder.write_footer()

    def to_string(self, timeline: Timeline) -> str:
        """Render *timeline* and return the SVG document as a string."""
        buffer = io.StringIO()
        self.render(timeline, buffer)
        return buffer.getvalue()

    def save(self, timeline: Timeline, output_path: str | Path) -> None:
        """Render *timeline* to an SVG file

        Args:
            timeline: Timeline to draw
            output_path: Output file path (parent directories are created)
        """
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        with open(output_path, 'w', encoding='utf-8') as f:
            self.render(timeline, f)
        logger.info(f"Saved timeline SVG to {output_path}")

    # -- Ruler --------------------------------------------------------------

    def _draw_time_ruler(self, builder: SVGBuilder, duration_seconds: float, time_scale: float):
        """Draw the time ruler at the top"""
        builder.start_group("time-ruler", "ruler")

        ruler_y = float(MARGIN_TOP)
        builder.write_rect(
            float(MARGIN_LEFT), ruler_y, self.content_width, RULER_HEIGHT,
            TRACK_LABEL_BG, GRID_COLOR, css_class="ruler-bg",
        )

        interval = calculate_time_interval(duration_seconds)

        # Ticks at i * interval; the last one may land exactly on the end
        tick_count = math.floor(duration_seconds / interval + 1e-9)
        for i in range(tick_count + 1):
            time = i * interval
            x = MARGIN_LEFT + time * time_scale
            builder.write_line(x, ruler_y, x, ruler_y + RULER_HEIGHT, GRID_COLOR, 1, "tick")
            builder.write_text(x, ruler_y + RULER_HEIGHT / 2, format_time(time), "middle", css_class="ruler-text")

        builder.end_group()

    # -- Tracks -------------------------------------------------------------

    def _draw_track(self, builder: SVGBuilder, track: Track, y_offset: float, height: float, time_scale: float):
        """Draw one lane and the items on it"""
        builder.start_group(f"track-{sanitize_id(track.name)}", "track")

        track_color = AUDIO_TRACK_COLOR if track.kind == TrackKind.AUDIO else VIDEO_TRACK_COLOR

        builder.write_rect(
            float(MARGIN_LEFT), y_offset, self.content_width, height,
            track_color + TRACK_BG_ALPHA, GRID_COLOR, css_class="track-bg",
        )

        label = track.name or f"{TrackKind(track.kind).value} Track"
        builder.write_text(MARGIN_LEFT - TRACK_LABEL_GAP, y_offset + height / 2, label, "end", css_class="track-label")

        current_time = 0.0
        for item in track.children:
            try:
                item_seconds = item.duration().to_seconds()
            except _DURATION_ERRORS as e:
                logger.warning(f"Skipping item '{item.name}' in track '{track.name}': {e}")
                continue

            x = MARGIN_LEFT + current_time * time_scale
            width = max(item_seconds * time_scale, MIN_CLIP_WIDTH)

            if isinstance(item, Clip):
                self._draw_clip(builder, item, x, y_offset, width, height, track_color)
                if item.visible():
                    current_time += item_seconds
            elif isinstance(item, Gap):
                self._draw_gap(builder, item, x, y_offset, width, height)
                if item.visible():
                    current_time += item_seconds
            elif isinstance(item, Transition):
                # Overlaps the neighbouring clips; does not advance time
                self._draw_transition(builder, x, y_offset, width, height)
            else:
                logger.warning(f"Skipping unsupported item type {type(item).__name__} in track '{track.name}'")

        builder.end_group()

    def _draw_clip(self, builder: SVGBuilder, clip: Clip, x: float, y: float,
                   width: float, height: float, track_color: str):
        builder.write_rect(
            x, y + CLIP_PADDING, width, height - 2 * CLIP_PADDING,
            track_color, CLIP_STROKE_COLOR,
            id=f"clip-{sanitize_id(clip.name)}", css_class="clip",
        )

        # Label only when it has room to be read
        if width > CLIP_LABEL_MIN_WIDTH:
            builder.write_text(x + width / 2, y + height / 2, clip.name or "Clip", "middle", css_class="clip-label")

    def _draw_gap(self, builder: SVGBuilder, gap: Gap, x: float, y: float, width: float, height: float):
        builder.write_rect(
            x, y + CLIP_PADDING, width, height - 2 * CLIP_PADDING,
            GAP_COLOR, GAP_STROKE_COLOR,
            id=f"gap-{gap.uuid}", css_class="gap",
        )

    def _draw_transition(self, builder: SVGBuilder, x: float, y: float, width: float, height: float):
        """Diagonal from bottom-left to top-right of the slot"""
        top = y + CLIP_PADDING
        bottom = top + height - 2 * CLIP_PADDING
        d = f"M {x:.2f} {bottom:.2f} L {x + width:.2f} {top:.2f}"
        builder.write_path(d, "none", TRANSITION_COLOR, TRANSITION_STROKE_WIDTH, "transition")
