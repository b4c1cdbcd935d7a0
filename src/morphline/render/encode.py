"""FFmpeg video encoding.

Frames are streamed to ``ffmpeg`` as raw RGB24 over stdin and encoded with
libx264 into ``yuv420p`` (the pixel format most players accept).  Nothing is
written to disk except the output file.
"""
from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path
from typing import Iterable

import numpy as np

logger = logging.getLogger(__name__)


def _ffmpeg_command(output_path: Path, fps: int, width: int, height: int) -> list[str]:
    return [
        "ffmpeg",
        "-y",
        "-loglevel", "error",
        "-f", "rawvideo",
        "-pix_fmt", "rgb24",
        "-s", f"{width}x{height}",
        "-r", str(fps),
        "-i", "-",
        "-c:v", "libx264",
        "-pix_fmt", "yuv420p",
        str(output_path),
    ]


def encode_video(
    frames: Iterable[np.ndarray],
    output_path: str | Path,
    fps: int,
    width: int,
    height: int,
) -> Path:
    """Encode RGB frames into a video file with FFmpeg.

    Parameters
    ----------
    frames : iterable of np.ndarray
        ``(height, width, 3)`` uint8 frames in presentation order.
    output_path : str or Path
        Destination file; the container follows its extension.
    fps : int
        Frame rate of the output.
    width, height : int
        Frame size in pixels.

    Returns
    -------
    Path
        *output_path*.

    Raises
    ------
    RuntimeError
        If FFmpeg is not found on PATH or exits with an error.
    ValueError
        If a frame does not have shape ``(height, width, 3)``.
    """
    output_path = Path(output_path)

    # Check ffmpeg availability
    if shutil.which("ffmpeg") is None:
        raise RuntimeError(
            "FFmpeg not found on PATH. Install FFmpeg to encode videos. "
            "On Ubuntu: sudo apt install ffmpeg"
        )

    cmd = _ffmpeg_command(output_path, fps, width, height)
    logger.debug("FFmpeg encode: %s", " ".join(cmd))

    expected = (height, width, 3)
    count = 0
    process = subprocess.Popen(
        cmd,
        stdin=subprocess.PIPE,
        stdout=subprocess.DEVNULL,
        stderr=subprocess.PIPE,
    )
    try:
        for frame in frames:
            frame = np.asarray(frame)
            if frame.shape != expected:
                raise ValueError(
                    f"Frame {count} has shape {frame.shape}, expected {expected}"
                )
            try:
                process.stdin.write(np.ascontiguousarray(frame, dtype=np.uint8).tobytes())
            except BrokenPipeError:
                break  # ffmpeg exited early; reported through its return code
            count += 1
    except BaseException:
        process.kill()
        process.wait()
        raise
    finally:
        if process.stdin is not None and not process.stdin.closed:
            try:
                process.stdin.close()
            except BrokenPipeError:
                pass  # ffmpeg already exited; its stderr says why

    stderr = process.stderr.read().decode(errors="replace")
    process.stderr.close()
    returncode = process.wait()
    if returncode != 0:
        logger.error("FFmpeg encoding failed:\n%s", stderr)
        raise RuntimeError(
            f"FFmpeg encoding failed (exit {returncode}). stderr: {stderr[-500:]}"
        )

    logger.info("Video created: %s (%d frames)", output_path, count)
    return output_path
