"""Time windows and their placement algebra.

A ``TimeInterval`` is a frozen Equinox module, so every combinator returns a
new value and never touches the interval passed in as *other*.  Combinators
may leave ``start > end`` behind transiently (for example ``end_with`` a window
that finishes before this one starts); :meth:`TimeInterval.validate` catches
that before the interval is sampled.

Endpoints are in seconds.
"""

from __future__ import annotations

import math
from typing import Protocol, Union

import equinox as eqx

from ..errors import DegenerateInterval


class HasInterval(Protocol):
    """Anything carrying an ``interval`` attribute (e.g. an AnimationHandle)."""

    interval: "TimeInterval"


IntervalLike = Union["TimeInterval", HasInterval]


def as_interval(other: IntervalLike) -> "TimeInterval":
    """Return the bare :class:`TimeInterval` behind *other*."""
    if isinstance(other, TimeInterval):
        return other
    return other.interval


class TimeInterval(eqx.Module):
    """Closed-by-value, half-open-when-sampled window ``[start, end)``.

    Parameters
    ----------
    start : float
        Window start in seconds (default 0).
    end : float
        Window end in seconds (default 1).
    """

    start: float
    end: float

    def __init__(self, start: float = 0.0, end: float = 1.0) -> None:
        self.start = float(start)
        self.end = float(end)

    # derived properties --------------------------------------------------

    @property
    def duration_seconds(self) -> float:
        """Window length ``end - start`` (negative if malformed)."""
        return self.end - self.start

    @property
    def is_instant(self) -> bool:
        """True for a zero-duration window."""
        return self.end == self.start

    # combinators ---------------------------------------------------------

    def duration(self, duration: float) -> "TimeInterval":
        """Keep ``start`` and set ``end = start + duration``."""
        return TimeInterval(self.start, self.start + duration)

    def duration_keep_end(self, duration: float) -> "TimeInterval":
        """Keep ``end`` and set ``start = end - duration``."""
        return TimeInterval(self.end - duration, self.end)

    def delay(self, delay: float) -> "TimeInterval":
        """Shift both endpoints by *delay* (may be negative)."""
        return TimeInterval(self.start + delay, self.end + delay)

    def after(self, other: IntervalLike) -> "TimeInterval":
        """Start when *other* ends, preserving this window's duration."""
        other = as_interval(other)
        return TimeInterval(other.end, other.end + self.duration_seconds)

    def start_with(self, other: IntervalLike) -> "TimeInterval":
        """Copy the start of *other*; ``end`` is left alone."""
        return TimeInterval(as_interval(other).start, self.end)

    def end_with(self, other: IntervalLike) -> "TimeInterval":
        """Copy the end of *other*; ``start`` is left alone."""
        return TimeInterval(self.start, as_interval(other).end)

    def synchronize(self, other: IntervalLike) -> "TimeInterval":
        """Copy both endpoints of *other*."""
        other = as_interval(other)
        return TimeInterval(other.start, other.end)

    # sampling ------------------------------------------------------------

    def progress_at(self, time: float) -> float:
        """Fractional completion of the window at *time*, clamped to [0, 1].

        A zero-duration window is fully complete at every instant, so it
        returns ``1.0`` instead of dividing by zero.
        """
        if self.is_instant:
            return 1.0
        progress = (time - self.start) / (self.end - self.start)
        return min(max(progress, 0.0), 1.0)

    def validate(self) -> "TimeInterval":
        """Return ``self`` if the window can be sampled.

        Raises
        ------
        DegenerateInterval
            If an endpoint is not finite or ``start > end``.
        """
        if not (math.isfinite(self.start) and math.isfinite(self.end)):
            raise DegenerateInterval(
                f"Interval endpoints must be finite, got [{self.start}, {self.end}]"
            )
        if self.start > self.end:
            raise DegenerateInterval(
                f"Interval starts after it ends: [{self.start}, {self.end}] "
                f"(duration {self.duration_seconds})"
            )
        return self
