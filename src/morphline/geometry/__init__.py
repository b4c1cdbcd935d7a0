"""Drawable objects, visual-state payloads, and polygon correspondence."""

from .bounds import BoundingBox, shape_bounds
from .color import GRAY, TRANSPARENT, WHITE, Color
from .correspondence import (
    PointCorrespondence,
    correspond,
    create_missing_points,
    interpolate,
)
from .segments import lerp, project_onto_edges, project_onto_segment
from .shapes import (
    GroupShape,
    PolygonShape,
    PolylineShape,
    RawSvgShape,
    Shape,
    TextShape,
    VisualState,
)
from .types import Direction, Polygon, RawSvg, Renderable, Text

__all__ = [
    "GRAY",
    "TRANSPARENT",
    "WHITE",
    "BoundingBox",
    "Color",
    "Direction",
    "GroupShape",
    "PointCorrespondence",
    "Polygon",
    "PolygonShape",
    "PolylineShape",
    "RawSvg",
    "RawSvgShape",
    "Renderable",
    "Shape",
    "Text",
    "TextShape",
    "VisualState",
    "correspond",
    "create_missing_points",
    "interpolate",
    "lerp",
    "project_onto_edges",
    "project_onto_segment",
    "shape_bounds",
]
