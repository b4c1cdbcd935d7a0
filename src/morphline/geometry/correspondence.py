"""Point correspondence between polygons with different vertex counts.

To morph an ``m``-gon into an ``n``-gon (``m < n``) both sides need ``n``
points.  The shorter polygon ``S`` gains ``n - m`` synthesized points lying
on its own edges, each paired with one of the longer polygon's ``L`` points:

1. Translate both polygons so their bounding-box top-left is the origin.
2. Anchors: for each point of ``S`` in order, claim the nearest unclaimed
   point of ``L`` (first minimum on ties).
3. Every unclaimed ``L`` point is assigned to the edge of ``S`` it projects
   onto most closely (clamped to the segment, first edge on ties).
4. Walk the edges of ``S``: emit the anchor, then the projected location of
   each point assigned to that edge, in ``L`` order.  ``L`` contributes the
   original point recorded for each slot.
5. Undo the translation of the ``S`` side.

Interpolating the result at ``p = 0`` traces the outline of ``S``; at
``p = 1`` it reproduces the points of ``L``.
"""

from __future__ import annotations

import equinox as eqx
import jax
import jax.numpy as jnp
import numpy as np
from jaxtyping import Array, Float

from ..errors import DegeneratePolygon, MismatchedMorphInput
from .segments import (
    closed_edges,
    distance_matrix,
    lerp,
    project_points_onto_edges,
    top_left,
    translate,
)
from .types import Polygon, as_points


class PointCorrespondence(eqx.Module):
    """Two equal-length point sequences paired slot by slot.

    Parameters
    ----------
    start_points : Float[Array, "n 2"]
        Points at progress 0.
    end_points : Float[Array, "n 2"]
        Points at progress 1.
    """

    start_points: Float[Array, "n 2"]
    end_points: Float[Array, "n 2"]

    def __check_init__(self) -> None:
        if self.start_points.shape != self.end_points.shape:
            raise ValueError(
                f"start_points shape {self.start_points.shape} != "
                f"end_points shape {self.end_points.shape}"
            )

    def __len__(self) -> int:
        return int(self.start_points.shape[0])


@jax.jit
def _greedy_anchors(dist: Float[Array, "m n"]):
    """Row by row, claim the nearest unclaimed column (first minimum on ties).

    Returns the claimed column per row and the ``(n,)`` claimed mask.
    """
    m, n = dist.shape

    def claim(i, carry):
        claimed, anchors = carry
        nearest = jnp.argmin(jnp.where(claimed, jnp.inf, dist[i]))
        return claimed.at[nearest].set(True), anchors.at[i].set(nearest)

    init = (jnp.zeros(n, dtype=bool), jnp.zeros(m, dtype=int))
    claimed, anchors = jax.lax.fori_loop(0, m, claim, init)
    return anchors, claimed


def create_missing_points(
    short: Float[Array, "m 2"],
    long: Float[Array, "n 2"],
) -> tuple[Float[Array, "n 2"], Float[Array, "n 2"]]:
    """Pad *short* up to the length of *long* (see module docstring).

    Parameters
    ----------
    short : Float[Array, "m 2"]
        Points of the polygon with fewer vertices (``m >= 1``).
    long : Float[Array, "n 2"]
        Points of the polygon with more vertices (``n >= m``).

    Returns
    -------
    tuple
        ``(short_out, long_out)``, both of shape ``(n, 2)``.  ``long_out`` is a
        reordering of *long*; ``short_out`` holds the anchors of *short* plus
        the synthesized on-edge points.
    """
    short_origin = top_left(short)
    short_local = translate(short, -short_origin)
    long_local = translate(long, -top_left(long))

    anchors, claimed = _greedy_anchors(distance_matrix(short_local, long_local))
    anchors = np.asarray(anchors)
    unclaimed = np.flatnonzero(~np.asarray(claimed))

    # Remaining long points go to the closest edge of the short polygon.
    per_edge: list[list[tuple[int, np.ndarray]]] = [[] for _ in anchors]
    if unclaimed.size:
        edge_starts, edge_ends = closed_edges(short_local)
        feet, dists = project_points_onto_edges(
            edge_starts, edge_ends, long_local[jnp.asarray(unclaimed)]
        )
        edges = np.asarray(jnp.argmin(dists, axis=1))
        feet = np.asarray(feet)
        for row, (index, edge) in enumerate(zip(unclaimed, edges)):
            per_edge[edge].append((int(index), feet[row, edge]))

    short_np = np.asarray(short_local)
    slots: list[int] = []
    short_points: list[np.ndarray] = []
    for edge, anchor in enumerate(anchors):
        slots.append(int(anchor))
        short_points.append(short_np[edge])
        for index, foot in per_edge[edge]:
            slots.append(index)
            short_points.append(foot)

    short_out = translate(jnp.asarray(np.stack(short_points)), short_origin)
    long_out = long[jnp.asarray(slots)]
    return short_out, long_out


def correspond(
    start: Polygon | Float[Array, "m 2"],
    end: Polygon | Float[Array, "n 2"],
    *,
    strict: bool = False,
) -> PointCorrespondence:
    """Pair the points of *start* and *end* for per-point interpolation.

    Parameters
    ----------
    start, end : Polygon or array
        Source and target shapes (polygons or ``(k, 2)`` point arrays).
    strict : bool
        Require equal point counts instead of synthesizing points.

    Returns
    -------
    PointCorrespondence
        ``max(m, n)`` slots; identity pairing when ``m == n``.

    Raises
    ------
    DegeneratePolygon
        If either side has no points.
    MismatchedMorphInput
        If *strict* and the point counts differ.
    """
    start_points = start.points if isinstance(start, Polygon) else as_points(start)
    end_points = end.points if isinstance(end, Polygon) else as_points(end)
    m, n = start_points.shape[0], end_points.shape[0]

    if m == 0 or n == 0:
        raise DegeneratePolygon(
            f"Cannot morph between polygons with {m} and {n} points"
        )
    if m == n:
        return PointCorrespondence(start_points, end_points)
    if strict:
        raise MismatchedMorphInput(
            f"Strict morph needs equal point counts, got {m} and {n}"
        )

    if m < n:
        padded_start, reordered_end = create_missing_points(start_points, end_points)
        return PointCorrespondence(padded_start, reordered_end)
    padded_end, reordered_start = create_missing_points(end_points, start_points)
    return PointCorrespondence(reordered_start, padded_end)


def interpolate(
    correspondence: PointCorrespondence, progress: float
) -> Float[Array, "n 2"]:
    """Per-slot linear interpolation ``start + (end - start) * progress``."""
    return lerp(correspondence.start_points, correspondence.end_points, progress)
