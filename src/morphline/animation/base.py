"""Animation interface, timed handles, and animated entities.

An :class:`Animation` is a pure map ``progress -> VisualState``.  Placing it
in time is the job of :class:`AnimationHandle`, which pairs the evaluator with
a :class:`~morphline.timing.TimeInterval` and forwards every timing
combinator to it.  :class:`AnimatedEntity` ties an object to the handles that
bring it on and off screen.

Being Equinox modules, all three are immutable pytrees: combinators return new
values and the "other" argument of ``after``/``synchronize``/... is only read.
"""

from __future__ import annotations

from abc import abstractmethod

import equinox as eqx

from ..geometry.shapes import VisualState
from ..geometry.types import Renderable
from ..timing.interval import IntervalLike, TimeInterval


def clamp_progress(progress: float) -> float:
    """Clamp *progress* into [0, 1]."""
    return min(max(float(progress), 0.0), 1.0)


# ---------------------------------------------------------------------------
# Animation (abstract evaluator)
# ---------------------------------------------------------------------------


class Animation(eqx.Module):
    """Abstract base for evaluators.

    Subclasses implement ``__call__`` for ``progress`` in [0, 1].  Callers
    should go through :meth:`evaluate`, which clamps first.
    """

    @abstractmethod
    def __call__(self, progress: float) -> VisualState:
        """Visual state at *progress* in [0, 1]."""
        ...

    def evaluate(self, progress: float) -> VisualState:
        """Evaluate at *progress* clamped into [0, 1]."""
        return self(clamp_progress(progress))

    def handle(self, start: float = 0.0, end: float = 1.0) -> "AnimationHandle":
        """Place this animation in the window ``[start, end)`` (default 1 s)."""
        return AnimationHandle(self, TimeInterval(start, end))


# ---------------------------------------------------------------------------
# AnimationHandle
# ---------------------------------------------------------------------------


class AnimationHandle(eqx.Module):
    """An evaluator placed in a time window.

    Parameters
    ----------
    animation : Animation
        The evaluator.
    interval : TimeInterval
        When it runs (default ``[0, 1)``).
    """

    animation: Animation
    interval: TimeInterval = eqx.field(default_factory=TimeInterval)

    @property
    def start(self) -> float:
        return self.interval.start

    @property
    def end(self) -> float:
        return self.interval.end

    def _retimed(self, interval: TimeInterval) -> "AnimationHandle":
        return eqx.tree_at(lambda h: h.interval, self, interval)

    # timing combinators (forwarded to TimeInterval) ----------------------

    def duration(self, duration: float) -> "AnimationHandle":
        return self._retimed(self.interval.duration(duration))

    def duration_keep_end(self, duration: float) -> "AnimationHandle":
        return self._retimed(self.interval.duration_keep_end(duration))

    def delay(self, delay: float) -> "AnimationHandle":
        return self._retimed(self.interval.delay(delay))

    def after(self, other: IntervalLike) -> "AnimationHandle":
        return self._retimed(self.interval.after(other))

    def start_with(self, other: IntervalLike) -> "AnimationHandle":
        return self._retimed(self.interval.start_with(other))

    def end_with(self, other: IntervalLike) -> "AnimationHandle":
        return self._retimed(self.interval.end_with(other))

    def synchronize(self, other: IntervalLike) -> "AnimationHandle":
        return self._retimed(self.interval.synchronize(other))

    # structural transform ------------------------------------------------

    def reverse(self) -> "AnimationHandle":
        """Same window, evaluator played backwards."""
        from .evaluators import Reverse

        return AnimationHandle(Reverse(self.animation), self.interval)

    # evaluation ----------------------------------------------------------

    def progress_at(self, time: float) -> float:
        return self.interval.progress_at(time)

    def animate(self, time: float) -> VisualState:
        """Evaluate at global *time* (local progress clamped to [0, 1])."""
        return self.animation.evaluate(self.progress_at(time))


# ---------------------------------------------------------------------------
# AnimatedEntity
# ---------------------------------------------------------------------------


class AnimatedEntity(eqx.Module):
    """An object with an enter and an exit animation.

    Between ``enter.end`` and ``exit.start`` the object itself is shown.
    ``enter.end <= exit.start`` is the intended layout but is not enforced;
    overlapping windows simply evaluate together.

    Parameters
    ----------
    obj : Renderable
        Steady-state object.
    enter : AnimationHandle
        Animation that brings the object on screen.
    exit : AnimationHandle
        Animation that takes it off.
    """

    obj: Renderable
    enter: AnimationHandle
    exit: AnimationHandle

    @property
    def end_time(self) -> float:
        return self.exit.end

    def with_enter(self, enter: AnimationHandle) -> "AnimatedEntity":
        return eqx.tree_at(lambda e: e.enter, self, enter)

    def with_exit(self, exit: AnimationHandle) -> "AnimatedEntity":
        return eqx.tree_at(lambda e: e.exit, self, exit)

    def lifetime(self, duration: float) -> "AnimatedEntity":
        """Start the exit *duration* seconds after the enter ends.

        The exit animation keeps its own duration.
        """
        exit_duration = self.exit.interval.duration_seconds
        start = self.enter.end + duration
        exit_interval = TimeInterval(start, start + exit_duration)
        return self.with_exit(self.exit._retimed(exit_interval))

    def validate(self) -> "AnimatedEntity":
        """Return ``self`` if both windows can be sampled.

        Raises
        ------
        DegenerateInterval
            If either window is malformed.
        """
        self.enter.interval.validate()
        self.exit.interval.validate()
        return self
