"""Reference rasterizer built on Pillow.

Coordinates follow the SVG convention (y grows downwards) with the origin at
the centre of the image.  Every layer is drawn onto its own transparent
RGBA image and alpha-composited onto the canvas, so translucent colors and
group opacity blend instead of overwriting pixels.
"""
from __future__ import annotations

from typing import Sequence

import numpy as np
from PIL import Image, ImageDraw

from ..geometry.bounds import load_font, text_kwargs
from ..geometry.color import Color
from ..geometry.shapes import (
    GroupShape,
    PolygonShape,
    PolylineShape,
    Shape,
    TextShape,
    VisualState,
)


class PillowRasterizer:
    """Rasterize ordered layers into an ``(H, W, 3)`` uint8 RGB array.

    Parameters
    ----------
    width, height : int
        Output size in pixels.
    background : Color
        Canvas color (default opaque black).
    """

    def __init__(
        self,
        width: int,
        height: int,
        background: Color | None = None,
    ) -> None:
        self.width = int(width)
        self.height = int(height)
        self.background = background if background is not None else Color.rgb(0, 0, 0)
        self._origin = np.array([self.width / 2, self.height / 2])

    def __call__(self, layers: Sequence[VisualState]) -> np.ndarray:
        canvas = Image.new("RGBA", (self.width, self.height), self.background.as_tuple())
        for layer in layers:
            canvas = Image.alpha_composite(canvas, self._layer(layer.shape))
        return np.asarray(canvas.convert("RGB"))

    # -- drawing ------------------------------------------------------------

    def _blank(self) -> Image.Image:
        return Image.new("RGBA", (self.width, self.height), (0, 0, 0, 0))

    def _xy(self, points: np.ndarray) -> list[tuple[float, float]]:
        return [tuple(p) for p in (points + self._origin).tolist()]

    def _layer(self, shape: Shape) -> Image.Image:
        """Draw *shape* onto a fresh transparent image."""
        image = self._blank()
        if isinstance(shape, GroupShape):
            for child in shape.children:
                image = Image.alpha_composite(image, self._layer(child))
            if shape.opacity < 1.0:
                alpha = image.getchannel("A").point(
                    lambda value: round(value * max(shape.opacity, 0.0))
                )
                image.putalpha(alpha)
            return image

        draw = ImageDraw.Draw(image)
        if isinstance(shape, PolygonShape):
            xy = self._xy(shape.points)
            if len(xy) >= 3:
                draw.polygon(xy, fill=shape.fill.as_tuple())
            if len(xy) >= 2 and shape.stroke_width > 0:
                draw.line(
                    xy + xy[:1],
                    fill=shape.stroke.as_tuple(),
                    width=max(round(shape.stroke_width), 1),
                    joint="curve",
                )
        elif isinstance(shape, PolylineShape):
            xy = self._xy(shape.points)
            if len(xy) >= 2 and shape.stroke_width > 0:
                draw.line(
                    xy,
                    fill=shape.stroke.as_tuple(),
                    width=max(round(shape.stroke_width), 1),
                    joint="curve",
                )
        elif isinstance(shape, TextShape):
            font = load_font(shape.font_size)
            x, y = self._xy(np.array([[shape.x, shape.y]]))[0]
            draw.text(
                (x, y),
                shape.text,
                fill=shape.color.as_tuple(),
                font=font,
                **text_kwargs(font, shape.anchor),
            )
        else:
            raise TypeError(f"Cannot rasterize shape of type {type(shape).__name__}")
        return image
