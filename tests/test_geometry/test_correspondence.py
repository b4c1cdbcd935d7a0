"""Tests for point correspondence between polygons of different sizes."""

import math
import time

import jax.numpy as jnp
import pytest

from morphline.errors import DegeneratePolygon, MismatchedMorphInput
from morphline.geometry import (
    Polygon,
    PointCorrespondence,
    correspond,
    create_missing_points,
    interpolate,
)

def _circle(count: int, radius: float = 100.0) -> Polygon:
    step = 2 * math.pi / count
    return Polygon([(radius * math.cos(k * step), radius * math.sin(k * step)) for k in range(count)])


TRIANGLE_PADDED = jnp.array([[0.0, 0.0], [2.0, 0.0], [1.0, 2.0], [0.8, 1.6]])


# =========================================================================
# create_missing_points
# =========================================================================


class TestCreateMissingPoints:
    """Triangle (0,0),(2,0),(1,2) padded against square (0,0),(2,0),(2,2),(0,2)."""

    def test_known_padding(self, triangle, square):
        short_out, long_out = create_missing_points(triangle.points, square.points)
        assert short_out.shape == (4, 2)
        assert jnp.allclose(short_out, TRIANGLE_PADDED)
        assert jnp.allclose(long_out, square.points)

    def test_long_side_is_a_permutation(self):
        short = jnp.array([[0.0, 0.0], [4.0, 0.0], [2.0, 3.0]])
        long = jnp.array(
            [[0.0, 0.0], [2.0, -0.5], [4.0, 0.0], [3.0, 1.5], [2.0, 3.0], [1.0, 1.5]]
        )
        _, long_out = create_missing_points(short, long)
        assert sorted(map(tuple, long_out.tolist())) == sorted(map(tuple, long.tolist()))

    def test_synthesized_points_lie_on_short_edges(self):
        short = jnp.array([[0.0, 0.0], [4.0, 0.0], [4.0, 4.0], [0.0, 4.0]])
        long = jnp.array(
            [[0.0, 0.0], [2.0, 1.0], [4.0, 0.0], [3.0, 2.0],
             [4.0, 4.0], [2.0, 3.0], [0.0, 4.0], [1.0, 2.0]]
        )
        short_out, long_out = create_missing_points(short, long)
        # every synthesized point sits on the square's boundary
        on_boundary = (
            jnp.isclose(short_out[:, 0], 0.0) | jnp.isclose(short_out[:, 0], 4.0)
            | jnp.isclose(short_out[:, 1], 0.0) | jnp.isclose(short_out[:, 1], 4.0)
        )
        assert bool(jnp.all(on_boundary))
        # inner points project onto edge midpoints, interleaved with the anchors
        assert jnp.allclose(short_out[1], jnp.array([2.0, 0.0]))
        assert jnp.allclose(long_out[1], jnp.array([2.0, 1.0]))

    def test_translation_is_undone(self, triangle, square):
        moved = triangle.shift(10.0, -3.0)
        short_out, _ = create_missing_points(moved.points, square.points)
        assert jnp.allclose(short_out, TRIANGLE_PADDED + jnp.array([10.0, -3.0]))

    def test_short_anchors_keep_their_order(self, triangle, square):
        short_out, _ = create_missing_points(triangle.points, square.points)
        anchors = [row for row in short_out.tolist() if row in triangle.points.tolist()]
        assert anchors == triangle.points.tolist()


# =========================================================================
# correspond
# =========================================================================


class TestCorrespond:
    """Orientation and degenerate inputs."""

    def test_equal_counts_identity(self, square):
        shifted = square.shift(1.0, 1.0)
        result = correspond(square, shifted)
        assert jnp.array_equal(result.start_points, square.points)
        assert jnp.array_equal(result.end_points, shifted.points)

    def test_short_to_long(self, triangle, square):
        result = correspond(triangle, square)
        assert len(result) == 4
        assert jnp.allclose(result.start_points, TRIANGLE_PADDED)
        assert jnp.allclose(result.end_points, square.points)

    def test_long_to_short_keeps_orientation(self, triangle, square):
        result = correspond(square, triangle)
        assert jnp.allclose(result.start_points, square.points)
        assert jnp.allclose(result.end_points, TRIANGLE_PADDED)

    def test_accepts_raw_arrays(self, triangle, square):
        result = correspond(triangle.points, square.points.tolist())
        assert len(result) == 4

    def test_empty_raises(self, square):
        with pytest.raises(DegeneratePolygon):
            correspond(Polygon(), square)
        with pytest.raises(DegeneratePolygon):
            correspond(square, Polygon())

    def test_strict_mismatch_raises(self, triangle, square):
        with pytest.raises(MismatchedMorphInput):
            correspond(triangle, square, strict=True)

    def test_strict_equal_counts_ok(self, square):
        assert len(correspond(square, square, strict=True)) == 4

    def test_single_point_to_polygon(self, square):
        result = correspond(Polygon([(1.0, 1.0)]), square)
        assert len(result) == 4
        assert jnp.allclose(result.start_points, jnp.array([1.0, 1.0]))

    def test_mismatched_shapes_rejected(self):
        with pytest.raises(ValueError, match="shape"):
            PointCorrespondence(jnp.zeros((3, 2)), jnp.zeros((4, 2)))


# =========================================================================
# interpolate
# =========================================================================


class TestInterpolate:

    def test_endpoints(self, triangle, square):
        result = correspond(triangle, square)
        assert jnp.allclose(interpolate(result, 0.0), result.start_points)
        assert jnp.allclose(interpolate(result, 1.0), square.points)

    def test_midpoint(self, triangle, square):
        result = correspond(triangle, square)
        mid = interpolate(result, 0.5)
        assert jnp.allclose(mid[3], jnp.array([0.4, 1.8]))


# =========================================================================
# Scaling
# =========================================================================


class TestScaling:
    """Large morphs stay interactive: one batched pass, not one per vertex."""

    def test_fifty_to_sixty_points(self):
        start = time.perf_counter()
        result = correspond(_circle(50), _circle(60, radius=120.0))
        elapsed = time.perf_counter() - start
        assert len(result) == 60
        assert elapsed < 10.0

    def test_repeated_shapes_reuse_compilation(self):
        correspond(_circle(30), _circle(45))
        start = time.perf_counter()
        for _ in range(5):
            correspond(_circle(30), _circle(45))
        assert time.perf_counter() - start < 5.0

    def test_large_counts_cover_every_long_point(self):
        short, long = _circle(40), _circle(400, radius=80.0)
        result = correspond(short, long)
        assert len(result) == 400
        ends = sorted(map(tuple, result.end_points.tolist()))
        assert ends == sorted(map(tuple, long.points.tolist()))
