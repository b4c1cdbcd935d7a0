"""Drawable objects as Equinox modules.

Objects are immutable: every builder method returns a new object, so a
polygon shared between a steady-state slot and several animations can never
be changed behind their backs.

Layout convention: polygon points are a float64 JAX array of shape
``(n, 2)``; the polygon is closed (last point connects back to the first).
"""

from __future__ import annotations

import enum
from abc import abstractmethod

import equinox as eqx
import jax.numpy as jnp
from jaxtyping import Array, Float

from .bounds import BoundingBox, shape_bounds
from .color import GRAY, WHITE, Color
from .shapes import PolygonShape, RawSvgShape, TextShape, VisualState


# ---------------------------------------------------------------------------
# Renderable (abstract producer of a visual state)
# ---------------------------------------------------------------------------


class Renderable(eqx.Module):
    """Abstract base for anything that renders to a single visual state."""

    @abstractmethod
    def render(self) -> VisualState:
        """Produce the object's visual state (z-index + shape)."""
        ...

    def bounding_box(self) -> BoundingBox | None:
        """Extent of the rendered shape, or ``None`` if it draws nothing."""
        return shape_bounds(self.render().shape)


# ---------------------------------------------------------------------------
# Polygon
# ---------------------------------------------------------------------------


def as_points(points) -> Float[Array, "n 2"]:
    """Convert a sequence of ``(x, y)`` pairs to a float64 ``(n, 2)`` array."""
    return jnp.asarray(points, dtype=jnp.float64).reshape(-1, 2)


class Polygon(Renderable):
    """A closed polygon.

    Parameters
    ----------
    points : sequence of (float, float) or Float[Array, "n 2"]
        Vertices in drawing order.
    fill_color : Color
        Interior color (default white).
    outline_color : Color
        Stroke color (default gray 100).
    stroke_width : float
        Stroke width in pixels (default 10).
    z_index : int
        Layering key (default 0).
    """

    points: Float[Array, "n 2"]
    fill_color: Color
    outline_color: Color
    stroke_width: float
    z_index: int

    def __init__(
        self,
        points=(),
        fill_color: Color = WHITE,
        outline_color: Color = GRAY,
        stroke_width: float = 10.0,
        z_index: int = 0,
    ) -> None:
        self.points = as_points(points)
        self.fill_color = fill_color
        self.outline_color = outline_color
        self.stroke_width = float(stroke_width)
        self.z_index = int(z_index)

    def __len__(self) -> int:
        return int(self.points.shape[0])

    # builders ------------------------------------------------------------

    def add_point(self, x: float, y: float) -> "Polygon":
        """Append a vertex."""
        points = jnp.concatenate([self.points, as_points([(x, y)])], axis=0)
        return eqx.tree_at(lambda p: p.points, self, points)

    def shift(self, x: float, y: float) -> "Polygon":
        """Move every vertex by ``(x, y)``."""
        return eqx.tree_at(lambda p: p.points, self, self.points + jnp.array([x, y]))

    def fill(self, color: Color) -> "Polygon":
        """Set the fill color."""
        return eqx.tree_at(lambda p: p.fill_color, self, color)

    def outline(self, color: Color) -> "Polygon":
        """Set the outline color."""
        return eqx.tree_at(lambda p: p.outline_color, self, color)

    def with_stroke_width(self, stroke_width: float) -> "Polygon":
        """Set the stroke width."""
        return eqx.tree_at(lambda p: p.stroke_width, self, float(stroke_width))

    def with_z_index(self, z_index: int) -> "Polygon":
        """Set the layering key."""
        return eqx.tree_at(lambda p: p.z_index, self, int(z_index))

    def with_points(self, points) -> "Polygon":
        """Same styling, new vertices."""
        return eqx.tree_at(lambda p: p.points, self, as_points(points))

    # rendering -----------------------------------------------------------

    def render(self) -> VisualState:
        return VisualState(
            self.z_index,
            PolygonShape(
                self.points,
                fill=self.fill_color,
                stroke=self.outline_color,
                stroke_width=self.stroke_width,
            ),
        )


# ---------------------------------------------------------------------------
# Text
# ---------------------------------------------------------------------------

AVG_WORD_LENGTH = 5.0
"""Characters per word used to turn a words-per-minute rate into seconds."""


class Direction(enum.Enum):
    """Side of another object to place something on."""

    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"


class Text(Renderable):
    """A single line of text.

    Parameters
    ----------
    text : str
        Content.
    x, y : float
        Anchor position.
    font_size : float
        Font size in pixels (default 100).
    color : Color
        Text color (default white).
    anchor : str
        SVG ``text-anchor`` value (default ``"middle"``).
    z_index : int
        Layering key (default 0).
    """

    text: str
    x: float = 0.0
    y: float = 0.0
    font_size: float = 100.0
    color: Color = eqx.field(default_factory=lambda: WHITE)
    anchor: str = "middle"
    z_index: int = 0

    def at(self, x: float, y: float) -> "Text":
        """Place the anchor at ``(x, y)``."""
        return eqx.tree_at(lambda t: (t.x, t.y), self, (float(x), float(y)))

    def shift(self, x: float, y: float) -> "Text":
        """Move the anchor by ``(x, y)``."""
        return self.at(self.x + x, self.y + y)

    def size(self, font_size: float) -> "Text":
        return eqx.tree_at(lambda t: t.font_size, self, float(font_size))

    def with_color(self, color: Color) -> "Text":
        return eqx.tree_at(lambda t: t.color, self, color)

    def with_anchor(self, anchor: str) -> "Text":
        return eqx.tree_at(lambda t: t.anchor, self, anchor)

    def with_z_index(self, z_index: int) -> "Text":
        return eqx.tree_at(lambda t: t.z_index, self, int(z_index))

    def with_text(self, text: str) -> "Text":
        return eqx.tree_at(lambda t: t.text, self, text)

    def besides(self, other: "Text", direction: Direction) -> "Text":
        """Move the anchor to the *direction* edge of *other*'s bounding box.

        The other coordinate is taken from *other*'s anchor, so text placed
        to the right of a caption shares its baseline.
        """
        box = other.bounding_box()
        if direction is Direction.LEFT:
            return self.at(box.left, other.y)
        if direction is Direction.RIGHT:
            return self.at(box.right, other.y)
        if direction is Direction.UP:
            return self.at(other.x, box.top)
        return self.at(other.x, box.bottom)

    def wpm(self, words_per_minute: float) -> float:
        """Seconds needed to type the text at *words_per_minute*."""
        return len(self.text) / AVG_WORD_LENGTH / words_per_minute * 60.0

    def render(self) -> VisualState:
        return VisualState(
            self.z_index,
            TextShape(
                text=self.text,
                x=self.x,
                y=self.y,
                font_size=self.font_size,
                color=self.color,
                anchor=self.anchor,
            ),
        )


# ---------------------------------------------------------------------------
# Raw SVG
# ---------------------------------------------------------------------------


class RawSvg(Renderable):
    """Hand-written SVG markup, emitted as-is by the SVG backend.

    The markup is not parsed, so it cannot be measured or rasterized.
    """

    markup: str
    z_index: int = 0

    def render(self) -> VisualState:
        return VisualState(self.z_index, RawSvgShape(self.markup))
