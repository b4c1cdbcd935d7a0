"""Time windows and fixed-rate frame sampling."""

from .interval import IntervalLike, TimeInterval, as_interval
from .sampling import frame_count, frame_range

__all__ = [
    "IntervalLike",
    "TimeInterval",
    "as_interval",
    "frame_count",
    "frame_range",
]
