"""Axis-aligned bounding boxes of visual states.

Polygons and polylines are measured from their points (stroke excluded).
Text is measured with Pillow's ``ImageDraw.textbbox`` using the same default
font and anchor mapping as the Pillow rasterizer, so layout helpers agree
with what ends up in the pixels.  Raw SVG markup cannot be measured.
"""

from __future__ import annotations

import equinox as eqx
import numpy as np
from PIL import Image, ImageDraw, ImageFont

from .shapes import GroupShape, PolygonShape, PolylineShape, Shape, TextShape

TEXT_ANCHORS = {"start": "ls", "middle": "ms", "end": "rs"}
"""SVG ``text-anchor`` -> Pillow anchor (horizontal part, baseline)."""


def load_font(font_size: float):
    """Pillow default font at *font_size*; no external font files needed."""
    try:
        return ImageFont.load_default(size=font_size)
    except TypeError:
        # Older Pillow without size parameter
        return ImageFont.load_default()


def text_kwargs(font, anchor: str) -> dict[str, str]:
    """``anchor=`` keyword for Pillow text calls (FreeType fonts only)."""
    if isinstance(font, ImageFont.FreeTypeFont):
        return {"anchor": TEXT_ANCHORS.get(anchor, "ms")}
    return {}


class BoundingBox(eqx.Module):
    """Rectangle ``[left, right] x [top, bottom]`` in canvas coordinates.

    ``y`` grows downwards, so ``top <= bottom``.
    """

    left: float
    top: float
    right: float
    bottom: float

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    @property
    def center(self) -> tuple[float, float]:
        return ((self.left + self.right) / 2, (self.top + self.bottom) / 2)

    def union(self, other: "BoundingBox") -> "BoundingBox":
        return BoundingBox(
            min(self.left, other.left),
            min(self.top, other.top),
            max(self.right, other.right),
            max(self.bottom, other.bottom),
        )


def _points_bounds(points: np.ndarray) -> BoundingBox | None:
    if len(points) == 0:
        return None
    left, top = points.min(axis=0)
    right, bottom = points.max(axis=0)
    return BoundingBox(float(left), float(top), float(right), float(bottom))


def _text_bounds(shape: TextShape) -> BoundingBox:
    font = load_font(shape.font_size)
    draw = ImageDraw.Draw(Image.new("L", (1, 1)))
    left, top, right, bottom = draw.textbbox(
        (shape.x, shape.y), shape.text, font=font, **text_kwargs(font, shape.anchor)
    )
    return BoundingBox(float(left), float(top), float(right), float(bottom))


def shape_bounds(shape: Shape) -> BoundingBox | None:
    """Bounding box of *shape*, or ``None`` if it draws nothing.

    Raises
    ------
    TypeError
        For shapes that cannot be measured (e.g. raw SVG markup).
    """
    if isinstance(shape, (PolygonShape, PolylineShape)):
        return _points_bounds(shape.points)
    if isinstance(shape, TextShape):
        return _text_bounds(shape)
    if isinstance(shape, GroupShape):
        boxes = [box for box in map(shape_bounds, shape.children) if box is not None]
        if not boxes:
            return None
        result = boxes[0]
        for box in boxes[1:]:
            result = result.union(box)
        return result
    raise TypeError(f"Cannot measure shape of type {type(shape).__name__}")
