"""SVG serialization of visual states.

Each shape maps to one element:

- ``PolygonShape`` -> ``<polygon>`` (filled and stroked),
- ``PolylineShape`` -> ``<polyline fill="none">``,
- ``TextShape`` -> ``<text>``,
- ``GroupShape`` -> ``<g opacity=...>`` around its children,
- ``RawSvgShape`` -> its markup, unchanged.

Documents use a view box centred on the origin, matching the raster
backend's coordinate convention.
"""
from __future__ import annotations

from typing import Sequence
from xml.sax.saxutils import escape

import numpy as np

from ..geometry.color import Color
from ..geometry.shapes import (
    GroupShape,
    PolygonShape,
    PolylineShape,
    RawSvgShape,
    Shape,
    TextShape,
    VisualState,
)

_ATTR_ENTITIES = {'"': "&quot;"}


def _num(value: float) -> str:
    """Compact number: at most 3 decimals, no trailing zeros."""
    text = f"{float(value):.3f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


def _points(points: np.ndarray) -> str:
    return " ".join(f"{_num(x)},{_num(y)}" for x, y in points)


def to_svg(shape: Shape) -> str:
    """Serialize one shape to an SVG element string.

    Raises
    ------
    TypeError
        If *shape* is not one of the built-in shape types.
    """
    if isinstance(shape, PolygonShape):
        return (
            f'<polygon points="{_points(shape.points)}" '
            f'fill="{shape.fill.as_css()}" stroke="{shape.stroke.as_css()}" '
            f'stroke-width="{_num(shape.stroke_width)}"/>'
        )
    if isinstance(shape, PolylineShape):
        return (
            f'<polyline points="{_points(shape.points)}" fill="none" '
            f'stroke="{shape.stroke.as_css()}" '
            f'stroke-width="{_num(shape.stroke_width)}"/>'
        )
    if isinstance(shape, TextShape):
        return (
            f'<text x="{_num(shape.x)}" y="{_num(shape.y)}" '
            f'font-size="{_num(shape.font_size)}" '
            f'text-anchor="{escape(shape.anchor, _ATTR_ENTITIES)}" '
            f'fill="{shape.color.as_css()}">{escape(shape.text)}</text>'
        )
    if isinstance(shape, GroupShape):
        children = "".join(to_svg(child) for child in shape.children)
        return f'<g opacity="{_num(shape.opacity)}">{children}</g>'
    if isinstance(shape, RawSvgShape):
        return shape.markup
    raise TypeError(f"Cannot serialize shape of type {type(shape).__name__}")


def frame_to_svg(
    layers: Sequence[VisualState],
    width: int,
    height: int,
    background: Color | None = None,
) -> str:
    """Serialize already-ordered layers into a standalone SVG document.

    Parameters
    ----------
    layers : sequence of VisualState
        Layers in draw order (as returned by ``compose_frame``).
    width, height : int
        Document size in pixels.
    background : Color or None
        Optional full-canvas background rectangle.

    Returns
    -------
    str
        The SVG document.
    """
    left, top = -width / 2, -height / 2
    parts = [
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{width}" height="{height}" '
        f'viewBox="{_num(left)} {_num(top)} {width} {height}">'
    ]
    if background is not None:
        parts.append(
            f'<rect x="{_num(left)}" y="{_num(top)}" width="{width}" '
            f'height="{height}" fill="{background.as_css()}"/>'
        )
    parts.extend(to_svg(layer.shape) for layer in layers)
    parts.append("</svg>")
    return "".join(parts)
