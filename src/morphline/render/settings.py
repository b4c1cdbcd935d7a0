"""Render settings and named presets.

Two built-in presets:
- ``PREVIEW``: 640x360 at 24 fps for quick looks.
- ``HD``: 1920x1080 at 60 fps.

Settings are immutable; derive variants with :func:`dataclasses.replace`.
"""
from __future__ import annotations

import dataclasses
from pathlib import Path

from ..geometry.color import Color
from ..timeline.compiler import DEFAULT_PADDING_FRAMES


@dataclasses.dataclass(frozen=True)
class RenderSettings:
    """Immutable output parameters for a render.

    Parameters
    ----------
    width, height : int
        Canvas size in pixels.  The origin sits at the canvas centre.
    fps : int
        Frames per second.
    background : Color
        Canvas color behind every frame.
    workers : int
        Threads used to compose and rasterize frames (``1`` runs inline).
    output_path : str or Path or None
        Default video path used by :meth:`Renderer.render`.
    padding : int
        Trailing frames held after the last animation ends.
    """

    width: int = 1920
    height: int = 1080
    fps: int = 60
    background: Color = dataclasses.field(default_factory=lambda: Color.rgb(0, 0, 0))
    workers: int = 1
    output_path: str | Path | None = None
    padding: int = DEFAULT_PADDING_FRAMES

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Canvas size must be positive, got {self.width}x{self.height}"
            )
        if self.workers < 1:
            raise ValueError(f"workers must be at least 1, got {self.workers}")

    @property
    def size(self) -> tuple[int, int]:
        """``(width, height)`` in pixels."""
        return (self.width, self.height)


# ---------------------------------------------------------------------------
# Built-in presets
# ---------------------------------------------------------------------------

PREVIEW = RenderSettings(width=640, height=360, fps=24)
"""Low resolution for iterating on a scene."""

HD = RenderSettings(width=1920, height=1080, fps=60)
"""Full HD at the default 60 fps."""

_PRESETS: dict[str, RenderSettings] = {
    "preview": PREVIEW,
    "hd": HD,
}


def get_preset(name: str) -> RenderSettings:
    """Look up named render settings.

    Parameters
    ----------
    name : str
        Preset identifier: ``"preview"`` or ``"hd"``.

    Returns
    -------
    RenderSettings

    Raises
    ------
    ValueError
        If *name* is not a recognized preset.
    """
    try:
        return _PRESETS[name]
    except KeyError:
        available = ", ".join(sorted(_PRESETS))
        raise ValueError(
            f"Unknown preset {name!r}. Available presets: {available}"
        ) from None
