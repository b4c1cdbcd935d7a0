"""Timeline accumulation and frame compilation."""

from .compiler import (
    DEFAULT_PADDING_FRAMES,
    FrameDescriptor,
    compile_timeline,
    compose_frame,
)
from .timeline import Timeline

__all__ = [
    "DEFAULT_PADDING_FRAMES",
    "FrameDescriptor",
    "Timeline",
    "compile_timeline",
    "compose_frame",
]
