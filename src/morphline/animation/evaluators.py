"""Built-in evaluators.

- ``NoAnimation``: nothing drawn (object just pops in/out).
- ``Reverse``: plays another evaluator backwards.
- ``Fade``: opacity ramp over a pre-rendered object.
- ``PolygonDraw``: traces a polygon's outline vertex by vertex.
- ``PolygonMorph``: deforms one polygon into another.
- ``TextType``: types text out character by character.
"""

from __future__ import annotations

import math

import jax.numpy as jnp

from ..errors import DegeneratePolygon
from ..geometry.correspondence import PointCorrespondence, correspond, interpolate
from ..geometry.segments import lerp
from ..geometry.shapes import GroupShape, PolygonShape, PolylineShape, VisualState
from ..geometry.types import Polygon, Renderable, Text
from .base import Animation


class NoAnimation(Animation):
    """Draws an empty group at z-index 0."""

    def __call__(self, progress: float) -> VisualState:
        return VisualState(0, GroupShape())


class Reverse(Animation):
    """Delegates to *animation* with progress ``1 - p``."""

    animation: Animation

    def __call__(self, progress: float) -> VisualState:
        return self.animation(1.0 - progress)


class Fade(Animation):
    """Fades a pre-rendered object in (opacity = progress).

    Works on any :class:`Renderable`; the object is rendered once at
    construction.
    """

    rendered: VisualState

    def __init__(self, obj: Renderable) -> None:
        self.rendered = obj.render()

    def __call__(self, progress: float) -> VisualState:
        return VisualState(
            self.rendered.z_index,
            GroupShape(children=(self.rendered.shape,), opacity=float(progress)),
        )


# ---------------------------------------------------------------------------
# Polygon evaluators
# ---------------------------------------------------------------------------


def _require_points(polygon: Polygon, what: str) -> None:
    if len(polygon) == 0:
        raise DegeneratePolygon(f"{what} needs a polygon with at least one point")


class PolygonDraw(Animation):
    """Draws a polygon's outline from the first vertex to the last.

    With ``k`` vertices, progress ``p`` completes ``floor(k * p)`` edges and
    the next edge ``frac(k * p)`` of the way, as an open unfilled polyline.
    At ``p = 1`` the closed, filled polygon is shown.
    """

    polygon: Polygon

    def __init__(self, polygon: Polygon) -> None:
        _require_points(polygon, "PolygonDraw")
        self.polygon = polygon

    def __call__(self, progress: float) -> VisualState:
        points = self.polygon.points
        k = len(self.polygon)
        done = math.floor(k * progress)
        if done >= k:
            return self.polygon.render()

        start = points[done]
        end = points[(done + 1) % k]
        tip = lerp(start, end, k * progress - done)
        traced = jnp.concatenate([points[: done + 1], tip[None, :]], axis=0)

        return VisualState(
            self.polygon.z_index,
            PolylineShape(
                traced,
                stroke=self.polygon.outline_color,
                stroke_width=self.polygon.stroke_width,
            ),
        )


class PolygonMorph(Animation):
    """Morphs *start* into *end*, synthesizing points when counts differ.

    Parameters
    ----------
    start, end : Polygon
        Source and target polygons.
    strict : bool
        Raise :class:`~morphline.errors.MismatchedMorphInput` on unequal point
        counts instead of synthesizing points.
    """

    start: Polygon
    end: Polygon
    correspondence: PointCorrespondence

    def __init__(self, start: Polygon, end: Polygon, *, strict: bool = False) -> None:
        self.start = start
        self.end = end
        self.correspondence = correspond(start, end, strict=strict)

    def __call__(self, progress: float) -> VisualState:
        points = interpolate(self.correspondence, progress)
        return VisualState(
            self.start.z_index,
            PolygonShape(
                points,
                fill=self.start.fill_color.morph(self.end.fill_color, progress),
                stroke=self.start.outline_color.morph(self.end.outline_color, progress),
                stroke_width=lerp(self.start.stroke_width, self.end.stroke_width, progress),
            ),
        )


# ---------------------------------------------------------------------------
# Text evaluators
# ---------------------------------------------------------------------------


class TextType(Animation):
    """Types out text, showing an underscore cursor until complete."""

    text: Text
    cursor: str = "_"

    def __call__(self, progress: float) -> VisualState:
        count = len(self.text.text)
        shown = math.floor(count * progress)
        content = self.text.text[:shown]
        if shown < count:
            content += self.cursor
        return self.text.with_text(content).render()

