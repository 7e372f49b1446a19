"""
OpenTimelineIO bridge - build a drawable Timeline from an OTIO timeline.

Only the top level of the OTIO stack is converted: tracks and their
clips, gaps and transitions. Nested compositions, effects and markers
have no counterpart here and are dropped.

OTIO reports gaps as not visible (they are transparent when compositing);
for layout a gap still takes up time, so *enabled* is used instead.
"""
import opentimelineio as otio

from models.timeline import Timeline, Stack, Track, TrackKind, Item, Clip, Gap, Transition
from utils.logger import get_logger

logger = get_logger(__name__)


def _convert_item(child) -> Item | None:
    if isinstance(child, otio.schema.Clip):
        media = child.media_reference
        available = media.available_range if media is not None else None
        return Clip(
            name=child.name,
            source_range=child.source_range,
            available_range=available,
            enabled=child.enabled,
        )
    if isinstance(child, otio.schema.Gap):
        return Gap(name=child.name, source_range=child.source_range, enabled=child.enabled)
    if isinstance(child, otio.schema.Transition):
        return Transition(
            name=child.name,
            transition_type=child.transition_type,
            in_offset=child.in_offset,
            out_offset=child.out_offset,
        )
    return None


def _convert_track(otio_track) -> Track:
    kind = TrackKind.AUDIO if otio_track.kind == otio.schema.TrackKind.Audio else TrackKind.VIDEO
    track = Track(name=otio_track.name, kind=kind)
    for child in otio_track:
        item = _convert_item(child)
        if item is None:
            logger.debug(f"Dropping unsupported {type(child).__name__} in track '{otio_track.name}'")
            continue
        track.add_item(item)
    return track


def from_otio(otio_timeline) -> Timeline:
    """Convert an ``opentimelineio.schema.Timeline`` into a Timeline.

    Args:
        otio_timeline: In-memory OTIO timeline.

    Returns:
        Timeline with one Track per top-level OTIO track.
    """
    stack = Stack()
    for child in otio_timeline.tracks:
        if not isinstance(child, otio.schema.Track):
            logger.debug(f"Dropping top-level {type(child).__name__} '{child.name}'")
            continue
        stack.add_child(_convert_track(child))
    return Timeline(name=otio_timeline.name, tracks=stack)
