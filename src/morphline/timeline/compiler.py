"""Compile a timeline into per-frame descriptors.

The global timeline ``[0, end_time)`` is sampled at a fixed integer frame
rate.  Each sampled instant gets a :class:`FrameDescriptor` listing the
steady-state objects on screen and the animation handles running at that
instant.  Descriptors hold no pixels: :func:`compose_frame` evaluates the
handles and layers the results, and a renderer turns those into an image.

Per entity the windows are:

- enter handle on ``[enter.start, enter.end)``,
- rendered object on ``[enter.end, exit.start)``,
- exit handle on ``[exit.start, exit.end)``.

Every frame whose instant ``i / fps`` falls in a window carries its payload,
so compiling the same timeline twice gives identical descriptors.
"""

from __future__ import annotations

import logging
import warnings
from typing import TYPE_CHECKING

import equinox as eqx

from ..errors import EmptyTimeline
from ..geometry.shapes import VisualState
from ..animation.base import AnimationHandle
from ..timing.sampling import frame_count, frame_range

if TYPE_CHECKING:
    from .timeline import Timeline

logger = logging.getLogger(__name__)

DEFAULT_PADDING_FRAMES = 10
"""Trailing frames appended after the last window so its end state is held."""


# ---------------------------------------------------------------------------
# FrameDescriptor
# ---------------------------------------------------------------------------


class FrameDescriptor(eqx.Module):
    """What is on screen at one sampled instant.

    Parameters
    ----------
    index : int
        Frame number, ``0``-based.
    time : float
        Sampled instant ``index / fps`` in seconds.
    objects : tuple[VisualState, ...]
        Steady-state payloads: static objects first, then the rendered
        objects of entities between their enter and exit windows.
    active_animations : tuple[AnimationHandle, ...]
        Handles whose window contains ``time``, in registration order.
    """

    index: int
    time: float
    objects: tuple[VisualState, ...] = ()
    active_animations: tuple[AnimationHandle, ...] = ()

    def active_progress(self) -> list[float]:
        """Local progress of every active handle at this frame's instant."""
        return [handle.progress_at(self.time) for handle in self.active_animations]


# ---------------------------------------------------------------------------
# Compilation
# ---------------------------------------------------------------------------


def _check_fps(fps: int) -> int:
    if isinstance(fps, bool) or not isinstance(fps, int) or fps <= 0:
        raise ValueError(f"fps must be a positive integer, got {fps!r}")
    return fps


def _clipped(window: range, total: int) -> range:
    return range(max(window.start, 0), min(window.stop, total))


def compile_timeline(
    timeline: "Timeline",
    fps: int,
    *,
    padding: int = DEFAULT_PADDING_FRAMES,
    require_duration: bool = False,
) -> list[FrameDescriptor]:
    """Sample *timeline* at *fps* into frame descriptors.

    Parameters
    ----------
    timeline : Timeline
        Registered static objects and animated entities.
    fps : int
        Frames per second (positive integer).
    padding : int
        Extra frames after the last window (default
        :data:`DEFAULT_PADDING_FRAMES`).
    require_duration : bool
        Raise instead of compiling a timeline with no animated content.

    Returns
    -------
    list[FrameDescriptor]
        One descriptor per frame, ordered by index.

    Raises
    ------
    ValueError
        If *fps* is not a positive integer or *padding* is negative.
    EmptyTimeline
        If *require_duration* and the timeline's end time is zero.
    """
    fps = _check_fps(fps)
    if padding < 0:
        raise ValueError(f"padding must be non-negative, got {padding}")

    end_time = timeline.end_time
    if end_time <= 0:
        if require_duration:
            raise EmptyTimeline(
                f"Timeline has no animated content (end time {end_time})"
            )
        if timeline.objects and not timeline.entities:
            warnings.warn(
                f"Timeline has {len(timeline.objects)} static object(s) but no "
                f"animated entities; compiling {padding} padding frame(s) only.",
                stacklevel=2,
            )

    total = frame_count(end_time, fps, padding)
    logger.info(
        "Compiling timeline: %.3f s at %d fps -> %d frames", end_time, fps, total
    )

    statics = [obj.render() for obj in timeline.objects]
    objects: list[list[VisualState]] = [list(statics) for _ in range(total)]
    animations: list[list[AnimationHandle]] = [[] for _ in range(total)]

    for entity in timeline.entities:
        enter, exit = entity.enter, entity.exit
        for index in _clipped(frame_range(enter.start, enter.end, fps), total):
            animations[index].append(enter)

        # An empty steady window stays empty; only handles get the
        # single-frame treatment for zero duration.
        if exit.start > enter.end:
            steady = entity.obj.render()
            for index in _clipped(frame_range(enter.end, exit.start, fps), total):
                objects[index].append(steady)

        for index in _clipped(frame_range(exit.start, exit.end, fps), total):
            animations[index].append(exit)

    logger.info("Resolved %d animated entities", len(timeline.entities))

    return [
        FrameDescriptor(
            index=index,
            time=index / fps,
            objects=tuple(objects[index]),
            active_animations=tuple(animations[index]),
        )
        for index in range(total)
    ]


def compose_frame(frame: FrameDescriptor) -> list[VisualState]:
    """Evaluate the active handles of *frame* and layer everything by z-index.

    Steady objects come first, then animation outputs in registration order;
    the sort on ``z_index`` is stable, so equal keys keep that order.
    """
    layers = list(frame.objects)
    layers.extend(handle.animate(frame.time) for handle in frame.active_animations)
    return sorted(layers, key=lambda state: state.z_index)
