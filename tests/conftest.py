"""Shared test fixtures for the morphline test suite.

Float64 enforcement is verified at import time.  Point arrays produced by
the geometry code must stay float64 for the correspondence results to be
reproducible.
"""

import matplotlib

matplotlib.use("Agg")

import jax.numpy as jnp
import pytest

from morphline.geometry import Color, Polygon
from morphline.timeline import Timeline

# ---------------------------------------------------------------------------
# Float64 enforcement check fails LOUD if x64 is not enabled
# ---------------------------------------------------------------------------
_x64_check = jnp.array(1.0)
assert _x64_check.dtype == jnp.float64, (
    f"JAX float64 not enabled!  Got dtype={_x64_check.dtype}.  "
    "Ensure jax.config.update('jax_enable_x64', True) runs before any JAX import."
)


# ---------------------------------------------------------------------------
# Polygon fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def triangle() -> Polygon:
    """Triangle with vertices (0, 0), (2, 0), (1, 2)."""
    return Polygon([(0.0, 0.0), (2.0, 0.0), (1.0, 2.0)])


@pytest.fixture
def square() -> Polygon:
    """Axis-aligned 2x2 square starting at the origin, clockwise in screen space."""
    return Polygon([(0.0, 0.0), (2.0, 0.0), (2.0, 2.0), (0.0, 2.0)])


@pytest.fixture
def red() -> Color:
    return Color.rgb(255, 0, 0)


@pytest.fixture
def blue() -> Color:
    return Color.rgb(0, 0, 255)


# ---------------------------------------------------------------------------
# Timeline fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def timeline() -> Timeline:
    """A fresh, empty timeline."""
    return Timeline()
