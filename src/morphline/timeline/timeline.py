"""Timeline: an accumulator of static objects and animated entities.

The timeline is a plain Python class (not an eqx.Module): it is the one
mutable piece of the API, collecting registrations before compilation.
"""

from __future__ import annotations

from ..animation.base import AnimatedEntity
from ..geometry.types import Renderable
from .compiler import DEFAULT_PADDING_FRAMES, FrameDescriptor, compile_timeline


class Timeline:
    """Registered objects and entities, in registration order.

    Usage::

        timeline = Timeline()
        square = timeline.add_animated(
            AnimatedEntity(poly, PolygonDraw(poly).handle(), NoAnimation().handle())
        )
        frames = timeline.compile(fps=30)
    """

    def __init__(self) -> None:
        self._objects: list[Renderable] = []
        self._entities: list[AnimatedEntity] = []

    def add_static(self, obj: Renderable) -> Renderable:
        """Register *obj* on every frame and return it unchanged."""
        self._objects.append(obj)
        return obj

    def add_animated(self, entity: AnimatedEntity) -> AnimatedEntity:
        """Register *entity* and return it, for use as a timing reference.

        Raises
        ------
        DegenerateInterval
            If the enter or exit window is malformed.  The entity is not
            registered in that case.
        """
        self._entities.append(entity.validate())
        return entity

    @property
    def objects(self) -> tuple[Renderable, ...]:
        return tuple(self._objects)

    @property
    def entities(self) -> tuple[AnimatedEntity, ...]:
        return tuple(self._entities)

    @property
    def end_time(self) -> float:
        """Latest exit end over all entities (``0.0`` when there are none)."""
        return max((entity.end_time for entity in self._entities), default=0.0)

    def compile(
        self,
        fps: int,
        *,
        padding: int = DEFAULT_PADDING_FRAMES,
        require_duration: bool = False,
    ) -> list[FrameDescriptor]:
        """Shorthand for :func:`compile_timeline` on this timeline."""
        return compile_timeline(
            self, fps, padding=padding, require_duration=require_duration
        )

    def __len__(self) -> int:
        return len(self._objects) + len(self._entities)
