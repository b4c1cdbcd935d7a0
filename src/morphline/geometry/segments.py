"""Segment and point-set primitives shared by the morph and draw evaluators.

Points are ``(x, y)`` float64 JAX arrays; point sets are ``(n, 2)`` arrays.

The projection primitive clamps onto the *segment*, not the infinite line:

    t* = clip(<p - a, b - a> / |b - a|^2, 0, 1)
    q  = a + t* (b - a)

A zero-length segment (``a == b``) projects everything onto ``a``.
"""

from __future__ import annotations

import jax
import jax.numpy as jnp
from beartype import beartype
from jaxtyping import Array, Float, jaxtyped


def lerp(a, b, t):
    """Point ``t`` of the way from *a* to *b* (``t`` in [0, 1])."""
    return a + (b - a) * t


@jaxtyped(typechecker=beartype)
def project_onto_segment(
    a: Float[Array, "2"],
    b: Float[Array, "2"],
    p: Float[Array, "2"],
) -> tuple[Float[Array, "2"], Float[Array, ""]]:
    """Closest point to *p* on segment ``[a, b]`` and its distance.

    Parameters
    ----------
    a, b : Float[Array, "2"]
        Segment endpoints.
    p : Float[Array, "2"]
        Query point.

    Returns
    -------
    tuple
        ``(q, d)``: the clamped foot point and ``|p - q|``.
    """
    ab = b - a
    length_sq = jnp.dot(ab, ab)
    safe_length_sq = jnp.where(length_sq > 0.0, length_sq, 1.0)
    t = jnp.where(length_sq > 0.0, jnp.dot(p - a, ab) / safe_length_sq, 0.0)
    t = jnp.clip(t, 0.0, 1.0)
    q = lerp(a, b, t)
    return q, jnp.linalg.norm(p - q)


def project_onto_edges(
    starts: Float[Array, "m 2"],
    ends: Float[Array, "m 2"],
    p: Float[Array, "2"],
) -> tuple[Float[Array, "m 2"], Float[Array, "m"]]:
    """Project *p* onto every segment ``[starts[i], ends[i]]`` at once."""
    return jax.vmap(project_onto_segment, in_axes=(0, 0, None))(starts, ends, p)


def closed_edges(points: Float[Array, "m 2"]) -> tuple[Float[Array, "m 2"], Float[Array, "m 2"]]:
    """Edge endpoints of a closed polygon: ``points[i] -> points[(i+1) % m]``."""
    return points, jnp.roll(points, -1, axis=0)


def top_left(points: Float[Array, "n 2"]) -> Float[Array, "2"]:
    """Top-left corner of the axis-aligned bounding box (min x, min y)."""
    return jnp.min(points, axis=0)


def translate(points: Float[Array, "n 2"], offset: Float[Array, "2"]) -> Float[Array, "n 2"]:
    """Shift every point by *offset*."""
    return points + offset


def distance_matrix(a: Float[Array, "m 2"], b: Float[Array, "n 2"]) -> Float[Array, "m n"]:
    """Pairwise Euclidean distances ``|a[i] - b[j]|``."""
    return jnp.linalg.norm(a[:, None, :] - b[None, :, :], axis=-1)


def project_points_onto_edges(
    starts: Float[Array, "m 2"],
    ends: Float[Array, "m 2"],
    points: Float[Array, "k 2"],
) -> tuple[Float[Array, "k m 2"], Float[Array, "k m"]]:
    """Project every point onto every segment in a single batched call."""
    return jax.vmap(project_onto_edges, in_axes=(None, None, 0))(starts, ends, points)
