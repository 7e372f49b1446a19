"""
Custom exception classes for timeline export.
"""


class TimelineExportError(Exception):
    """Base exception for all timeline export errors."""
    pass


class TimelineError(TimelineExportError):
    """Raised when the timeline model cannot answer a query (e.g. a duration)."""
    pass


class InvalidTimelineError(TimelineExportError):
    """Raised when a timeline cannot be rendered at all."""
    pass


class NoTimelineError(InvalidTimelineError):
    """Raised when no timeline was given."""

    def __init__(self, message: str = "timeline is None"):
        super().__init__(message)


class DurationUnavailableError(InvalidTimelineError):
    """Raised when the total timeline duration cannot be computed."""
    pass


class NoDurationError(InvalidTimelineError):
    """Raised when the total timeline duration is zero or negative."""

    def __init__(self, message: str = "timeline has no duration"):
        super().__init__(message)


class NoTracksError(InvalidTimelineError):
    """Raised when the timeline has no track container or no tracks in it."""

    def __init__(self, message: str = "timeline has no tracks"):
        super().__init__(message)


__all__ = [
    'TimelineExportError',
    'TimelineError',
    'InvalidTimelineError',
    'NoTimelineError',
    'DurationUnavailableError',
    'NoDurationError',
    'NoTracksError',
]
