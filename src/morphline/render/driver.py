"""Renderer driver: compile, compose, rasterize, encode.

Frame composition and rasterization are independent per frame, so they are
fanned out over a thread pool with an order-preserving ``map``; encoding
consumes the results strictly in frame order.  Rasterizer errors propagate
unchanged.
"""
from __future__ import annotations

import dataclasses
import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Protocol, Sequence

import numpy as np

from ..geometry.shapes import VisualState
from ..timeline import FrameDescriptor, Timeline, compose_frame
from .encode import encode_video
from .raster import PillowRasterizer
from .settings import RenderSettings

logger = logging.getLogger(__name__)


class Rasterizer(Protocol):
    """Turns ordered layers into an ``(H, W, 3)`` uint8 RGB array."""

    def __call__(self, layers: Sequence[VisualState]) -> np.ndarray: ...


@dataclasses.dataclass(frozen=True)
class RenderingResult:
    """Summary of a finished render.

    Parameters
    ----------
    output_path : Path
        Encoded video file.
    frame_count : int
        Number of frames encoded.
    fps : int
        Frame rate used.
    """

    output_path: Path
    frame_count: int
    fps: int

    @property
    def duration_seconds(self) -> float:
        return self.frame_count / self.fps


class Renderer:
    """Drive a timeline through compilation, rasterization and encoding.

    Parameters
    ----------
    settings : RenderSettings
        Canvas size, frame rate, worker count and default output path.
    timeline : Timeline or None
        Scene to render (a new empty timeline if ``None``).
    rasterizer : Rasterizer or None
        Pixel backend (a :class:`PillowRasterizer` sized from *settings* if
        ``None``).
    """

    def __init__(
        self,
        settings: RenderSettings,
        timeline: Timeline | None = None,
        rasterizer: Rasterizer | None = None,
    ) -> None:
        self.settings = settings
        self.timeline = timeline if timeline is not None else Timeline()
        if rasterizer is None:
            rasterizer = PillowRasterizer(
                settings.width, settings.height, settings.background
            )
        self.rasterizer = rasterizer

    def compile(self) -> list[FrameDescriptor]:
        return self.timeline.compile(self.settings.fps, padding=self.settings.padding)

    def _draw(self, frame: FrameDescriptor) -> np.ndarray:
        return self.rasterizer(compose_frame(frame))

    def render_frames(self) -> list[np.ndarray]:
        """Compile the timeline and rasterize every frame, in frame order."""
        frames = self.compile()
        workers = self.settings.workers
        logger.info("Rasterizing %d frames with %d worker(s)", len(frames), workers)
        if workers == 1:
            return [self._draw(frame) for frame in frames]
        with ThreadPoolExecutor(max_workers=workers) as pool:
            return list(pool.map(self._draw, frames))

    def render(self, output_path: str | Path | None = None) -> RenderingResult:
        """Render the timeline to a video file.

        Parameters
        ----------
        output_path : str or Path or None
            Destination; falls back to ``settings.output_path``.

        Returns
        -------
        RenderingResult

        Raises
        ------
        ValueError
            If neither *output_path* nor ``settings.output_path`` is set.
        RuntimeError
            If FFmpeg is missing or fails.
        """
        output_path = output_path if output_path is not None else self.settings.output_path
        if output_path is None:
            raise ValueError(
                "No output path given and settings.output_path is not set"
            )

        pixels = self.render_frames()
        path = encode_video(
            pixels,
            output_path,
            fps=self.settings.fps,
            width=self.settings.width,
            height=self.settings.height,
        )
        return RenderingResult(output_path=path, frame_count=len(pixels), fps=self.settings.fps)
