"""Fixed-rate sampling of time windows.

Frame ``i`` of a timeline sampled at ``fps`` frames per second sits at the
instant ``i / fps``.  A window ``[start, end)`` covers exactly the frames whose
instant satisfies ``start <= i / fps < end``.

The index bounds start from ``floor``/``ceil`` of ``start * fps`` and
``end * fps`` and are then nudged against the sampled instants themselves,
because the product can land one ulp on the wrong side of an integer (e.g.
``0.1 * 30 == 3.0000000000000004`` while ``3 / 30 == 0.1``).
"""

from __future__ import annotations

import math


def _first_at_or_after(time: float, fps: int) -> int:
    """Smallest frame index ``i >= 0`` with ``i / fps >= time``."""
    index = max(math.floor(time * fps), 0)
    while index / fps < time:
        index += 1
    while index > 0 and (index - 1) / fps >= time:
        index -= 1
    return index


def frame_range(start: float, end: float, fps: int) -> range:
    """Frame indices sampled inside the half-open window ``[start, end)``.

    Parameters
    ----------
    start, end : float
        Window endpoints in seconds.
    fps : int
        Sampling rate in frames per second.

    Returns
    -------
    range
        Ascending frame indices.  Empty when ``start > end``.  A
        zero-duration window yields the single frame at or after *start*.
    """
    if start > end:
        return range(0)
    first = _first_at_or_after(start, fps)
    if start == end:
        return range(first, first + 1)
    last = _first_at_or_after(end, fps)
    return range(first, max(first, last))


def frame_count(end_time: float, fps: int, padding: int = 0) -> int:
    """Number of frames needed to sample ``[0, end_time)`` plus *padding*.

    The padding keeps a few trailing frames after the last window so its
    terminal state is held on screen instead of being cut off.
    """
    if end_time <= 0:
        return padding
    return _first_at_or_after(end_time, fps) + padding
