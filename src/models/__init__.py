"""
Timeline data models.

Public API:

  Timeline Layer:
    Timeline, Stack, Track, TrackKind
    Item, Clip, Gap, Transition

  Interop:
    from_otio
"""

from models.timeline import (
    Timeline,
    Stack,
    Track,
    TrackKind,
    Item,
    Clip,
    Gap,
    Transition,
)
from models.otio_bridge import from_otio

__all__ = [
    # Timeline
    "Timeline",
    "Stack",
    "Track",
    "TrackKind",
    "Item",
    "Clip",
    "Gap",
    "Transition",
    # Interop
    "from_otio",
]
