"""Declarative 2D vector animation: timing algebra, frame scheduling, and
polygon morphing.

Coordinates are in pixels with the origin at the centre of the canvas.
"""

# Float64 enforcement - must happen before any JAX imports that might
# create arrays with default float32 precision.
import jax
jax.config.update("jax_enable_x64", True)

from .errors import (
    DegenerateInterval,
    DegeneratePolygon,
    EmptyTimeline,
    MismatchedMorphInput,
    MorphlineError,
)
from .geometry import Color, Direction, Polygon, RawSvg, Text
from .timing import TimeInterval
from .animation import (
    AnimatedEntity,
    Animation,
    AnimationHandle,
    Fade,
    NoAnimation,
    PolygonDraw,
    PolygonMorph,
    Reverse,
    TextType,
)
from .timeline import FrameDescriptor, Timeline, compile_timeline, compose_frame

__version__ = "0.1.0"

__all__ = [
    "AnimatedEntity",
    "Animation",
    "AnimationHandle",
    "Color",
    "DegenerateInterval",
    "DegeneratePolygon",
    "Direction",
    "EmptyTimeline",
    "Fade",
    "FrameDescriptor",
    "MismatchedMorphInput",
    "MorphlineError",
    "NoAnimation",
    "Polygon",
    "PolygonDraw",
    "PolygonMorph",
    "RawSvg",
    "Reverse",
    "Text",
    "TextType",
    "TimeInterval",
    "Timeline",
    "compile_timeline",
    "compose_frame",
]
