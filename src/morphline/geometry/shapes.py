"""Visual-state payloads: what evaluators hand to the renderer.

The compiler never looks inside a shape; it only reads the z-index of the
enclosing :class:`VisualState`.  Renderers (SVG serializer, Pillow
rasterizer) dispatch on the concrete shape type.

All point arrays are NumPy (not JAX) arrays.  This is the boundary between
the JAX geometry code and the rendering backends, so points are converted
once here with ``np.asarray``.
"""

from __future__ import annotations

import equinox as eqx
import numpy as np

from .color import Color


def _freeze_points(points) -> np.ndarray:
    return np.asarray(points, dtype=np.float64).reshape(-1, 2)


class Shape(eqx.Module):
    """Base class of all drawable payloads."""


class PolygonShape(Shape):
    """A closed, filled and stroked polygon."""

    points: np.ndarray
    fill: Color
    stroke: Color
    stroke_width: float

    def __init__(self, points, fill: Color, stroke: Color, stroke_width: float) -> None:
        self.points = _freeze_points(points)
        self.fill = fill
        self.stroke = stroke
        self.stroke_width = float(stroke_width)


class PolylineShape(Shape):
    """An open, stroked, unfilled polyline."""

    points: np.ndarray
    stroke: Color
    stroke_width: float

    def __init__(self, points, stroke: Color, stroke_width: float) -> None:
        self.points = _freeze_points(points)
        self.stroke = stroke
        self.stroke_width = float(stroke_width)


class TextShape(Shape):
    """A single line of text anchored at ``(x, y)``.

    ``anchor`` follows SVG ``text-anchor``: ``"start"``, ``"middle"`` or
    ``"end"``.
    """

    text: str
    x: float
    y: float
    font_size: float
    color: Color
    anchor: str = "middle"


class GroupShape(Shape):
    """Children composited together, then blended with ``opacity``."""

    children: tuple[Shape, ...] = ()
    opacity: float = 1.0


class VisualState(eqx.Module):
    """A shape plus its layering key.  Higher ``z_index`` draws on top."""

    z_index: int
    shape: Shape


class RawSvgShape(Shape):
    """Pre-built SVG markup, passed through to SVG output verbatim.

    Only the SVG backend can draw it; raster backends reject it.
    """

    markup: str
