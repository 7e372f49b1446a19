"""
Timeline - Tracks, clips, gaps and transitions on a rational timebase.

A read-only view of an editorial timeline, shaped for drawing:

  Timeline → Stack (root track container) → Track → Clip | Gap | Transition

Durations are ``opentimelineio.opentime.RationalTime`` values. Clips and
gaps occupy time on their track; transitions overlap their neighbours
and never add time of their own.
"""
import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, List, Union

from opentimelineio.opentime import RationalTime, TimeRange

from exceptions import TimelineError


class TrackKind(str, Enum):
    """Kind of media a track carries."""
    VIDEO = "Video"
    AUDIO = "Audio"


# ---------------------------------------------------------------------------
# Track Items (base + concrete types)
# ---------------------------------------------------------------------------

@dataclass
class Item:
    """Base for anything placed on a track.

    Attributes:
        name: Display name (may be empty).
        uuid: Unique identifier for this item.
    """
    name: str = ""
    uuid: str = field(default_factory=lambda: str(uuid.uuid4()))

    def duration(self) -> RationalTime:
        raise NotImplementedError

    def visible(self) -> bool:
        return True


@dataclass
class Clip(Item):
    """A piece of media placed on a track.

    *source_range* is the trimmed range used on the timeline; when it is
    missing the media's *available_range* is used instead.
    """
    source_range: Optional[TimeRange] = None
    available_range: Optional[TimeRange] = None
    enabled: bool = True

    def duration(self) -> RationalTime:
        if self.source_range is not None:
            return self.source_range.duration
        if self.available_range is not None:
            return self.available_range.duration
        raise TimelineError(f"cannot compute duration of clip '{self.name}': no source or available range")

    def visible(self) -> bool:
        return self.enabled


@dataclass
class Gap(Item):
    """Empty space on a track. Still occupies time."""
    source_range: TimeRange = field(default_factory=TimeRange)
    enabled: bool = True

    @classmethod
    def with_duration(cls, duration: RationalTime, name: str = "") -> "Gap":
        return cls(name=name, source_range=TimeRange(RationalTime(0, duration.rate), duration))

    def duration(self) -> RationalTime:
        return self.source_range.duration

    def visible(self) -> bool:
        return self.enabled


@dataclass
class Transition(Item):
    """A blend between the neighbouring items.

    Its duration is ``in_offset + out_offset``; the time is borrowed from
    the adjacent clips, so a transition is never visible on its own.
    """
    transition_type: str = "SMPTE_Dissolve"
    in_offset: RationalTime = field(default_factory=RationalTime)
    out_offset: RationalTime = field(default_factory=RationalTime)

    def duration(self) -> RationalTime:
        return self.in_offset + self.out_offset

    def visible(self) -> bool:
        return False


# ---------------------------------------------------------------------------
# Track / Stack
# ---------------------------------------------------------------------------

@dataclass
class Track:
    """A single lane holding an ordered list of items."""
    name: str = ""
    kind: TrackKind = TrackKind.VIDEO
    children: List[Item] = field(default_factory=list)
    uuid: str = field(default_factory=lambda: str(uuid.uuid4()))

    def add_item(self, item: Item) -> None:
        self.children.append(item)

    def duration(self) -> RationalTime:
        """Sum of the clip and gap durations (transitions overlap)."""
        total = RationalTime()
        for child in self.children:
            if isinstance(child, Transition):
                continue
            total = total + child.duration()
        return total


@dataclass
class Stack:
    """Root track container. Children are usually tracks but need not be."""
    children: List[Union[Track, Item]] = field(default_factory=list)

    def add_child(self, child: Union[Track, Item]) -> None:
        self.children.append(child)

    def duration(self) -> RationalTime:
        """Duration of the longest child."""
        longest = RationalTime()
        for child in self.children:
            d = child.duration()
            if d.to_seconds() > longest.to_seconds():
                longest = d
        return longest


# ---------------------------------------------------------------------------
# Timeline
# ---------------------------------------------------------------------------

@dataclass
class Timeline:
    """Top-level timeline holding the root track container."""
    name: str = "Main Timeline"
    tracks: Optional[Stack] = field(default_factory=Stack)
    uuid: str = field(default_factory=lambda: str(uuid.uuid4()))

    def add_track(self, track: Track) -> None:
        if self.tracks is None:
            self.tracks = Stack()
        self.tracks.add_child(track)

    def all_tracks(self) -> List[Track]:
        """Tracks of the root container, skipping anything else."""
        if self.tracks is None:
            return []
        return [c for c in self.tracks.children if isinstance(c, Track)]

    def duration(self) -> RationalTime:
        """Total timeline duration (the longest track)."""
        if self.tracks is None:
            return RationalTime()
        return self.tracks.duration()
