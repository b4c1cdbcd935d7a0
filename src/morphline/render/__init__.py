"""Output backends: SVG serialization, Pillow rasterization, FFmpeg encoding."""

from .driver import Rasterizer, Renderer, RenderingResult
from .encode import encode_video
from .raster import PillowRasterizer
from .settings import HD, PREVIEW, RenderSettings, get_preset
from .svg import frame_to_svg, to_svg

__all__ = [
    "HD",
    "PREVIEW",
    "PillowRasterizer",
    "Rasterizer",
    "RenderSettings",
    "Renderer",
    "RenderingResult",
    "encode_video",
    "frame_to_svg",
    "get_preset",
    "to_svg",
]
