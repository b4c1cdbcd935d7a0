"""Animation evaluators, timed handles, and animated entities."""

from .base import AnimatedEntity, Animation, AnimationHandle, clamp_progress
from .evaluators import Fade, NoAnimation, PolygonDraw, PolygonMorph, Reverse, TextType

__all__ = [
    "AnimatedEntity",
    "Animation",
    "AnimationHandle",
    "Fade",
    "NoAnimation",
    "PolygonDraw",
    "PolygonMorph",
    "Reverse",
    "TextType",
    "clamp_progress",
]
