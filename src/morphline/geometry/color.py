"""RGBA colors with 8-bit integer channels."""

from __future__ import annotations

import math

import equinox as eqx


def _round_channel(value: float) -> int:
    """Round half up and clamp to the 0..255 channel range."""
    return min(max(int(math.floor(value + 0.5)), 0), 255)


class Color(eqx.Module):
    """An RGBA color.

    Parameters
    ----------
    r, g, b : int
        Red, green, blue channels in ``0..255``.
    a : int
        Alpha channel in ``0..255`` (default opaque).
    """

    r: int
    g: int
    b: int
    a: int

    def __init__(self, r: int, g: int, b: int, a: int = 255) -> None:
        self.r = _round_channel(r)
        self.g = _round_channel(g)
        self.b = _round_channel(b)
        self.a = _round_channel(a)

    @classmethod
    def rgb(cls, r: int, g: int, b: int) -> "Color":
        """Opaque color from red, green and blue channels."""
        return cls(r, g, b, 255)

    def darken(self, amount: float) -> "Color":
        """Scale the RGB channels by *amount* (clamped to [0, 1]); alpha kept."""
        amount = min(max(amount, 0.0), 1.0)
        return Color(self.r * amount, self.g * amount, self.b * amount, self.a)

    def morph(self, other: "Color", progress: float) -> "Color":
        """Per-channel linear interpolation towards *other*.

        Channels are rounded rather than truncated so a fade does not drift
        towards darker values.
        """
        def lerp(a: int, b: int) -> float:
            return a + (b - a) * progress

        return Color(
            lerp(self.r, other.r),
            lerp(self.g, other.g),
            lerp(self.b, other.b),
            lerp(self.a, other.a),
        )

    def as_tuple(self) -> tuple[int, int, int, int]:
        """``(r, g, b, a)`` tuple, as Pillow expects."""
        return (self.r, self.g, self.b, self.a)

    def as_css(self) -> str:
        """CSS ``rgba()`` string with alpha scaled to [0, 1]."""
        alpha = round(self.a / 255, 4)
        return f"rgba({self.r}, {self.g}, {self.b}, {alpha})"


WHITE = Color.rgb(255, 255, 255)
GRAY = Color.rgb(100, 100, 100)
TRANSPARENT = Color(0, 0, 0, 0)
