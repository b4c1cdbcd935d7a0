"""Tests for timeline registration, compilation and frame composition."""

import logging

import pytest

from morphline.animation import AnimatedEntity, Fade, NoAnimation, PolygonDraw
from morphline.errors import DegenerateInterval, EmptyTimeline
from morphline.geometry import GroupShape, PolygonShape, PolylineShape
from morphline.timeline import (
    DEFAULT_PADDING_FRAMES,
    FrameDescriptor,
    Timeline,
    compile_timeline,
    compose_frame,
)


def _entity(obj, enter=(0.0, 1.0), exit=(2.0, 3.0)):
    return AnimatedEntity(
        obj,
        PolygonDraw(obj).handle(*enter),
        Fade(obj).handle(*exit).reverse(),
    )


# =========================================================================
# Timeline registration
# =========================================================================


class TestTimeline:
    """Registration returns its argument and validates windows."""

    def test_add_static_returns_object(self, timeline, square):
        assert timeline.add_static(square) is square
        assert timeline.objects == (square,)

    def test_add_animated_returns_entity(self, timeline, square):
        entity = _entity(square)
        assert timeline.add_animated(entity) is entity
        assert timeline.entities == (entity,)
        assert len(timeline) == 1

    def test_end_time(self, timeline, square, triangle):
        assert timeline.end_time == 0.0
        timeline.add_animated(_entity(square, exit=(2.0, 3.0)))
        timeline.add_animated(_entity(triangle, exit=(4.0, 4.5)))
        assert timeline.end_time == 4.5

    def test_malformed_entity_rejected(self, timeline, square):
        timeline.add_animated(_entity(square))
        with pytest.raises(DegenerateInterval):
            timeline.add_animated(_entity(square, exit=(5.0, 4.0)))
        assert len(timeline.entities) == 1
        # timeline stays usable
        assert len(timeline.compile(fps=1, padding=0)) == 3


# =========================================================================
# Compilation
# =========================================================================


class TestCompile:
    """Sampling windows into per-frame descriptors."""

    def test_enter_steady_exit_scenario(self, timeline, square):
        entity = timeline.add_animated(_entity(square))
        frames = compile_timeline(timeline, fps=1, padding=0)

        assert [f.index for f in frames] == [0, 1, 2]
        assert [f.time for f in frames] == [0.0, 1.0, 2.0]

        assert frames[0].active_animations == (entity.enter,)
        assert frames[0].objects == ()

        assert frames[1].active_animations == ()
        assert len(frames[1].objects) == 1
        assert isinstance(frames[1].objects[0].shape, PolygonShape)

        assert frames[2].active_animations == (entity.exit,)
        assert frames[2].objects == ()

    def test_default_padding(self, timeline, square):
        timeline.add_animated(_entity(square))
        frames = timeline.compile(fps=2)
        assert len(frames) == 6 + DEFAULT_PADDING_FRAMES
        assert all(f.active_animations == () and f.objects == () for f in frames[6:])

    def test_statics_on_every_frame(self, timeline, square, triangle):
        timeline.add_static(triangle)
        timeline.add_animated(_entity(square))
        frames = timeline.compile(fps=4, padding=2)
        assert len(frames) == 14
        assert all(len(f.objects) >= 1 for f in frames)
        # the static object is rendered once and shared by every frame
        assert all(f.objects[0] is frames[0].objects[0] for f in frames)

    def test_chained_after(self, timeline, square, triangle):
        first = timeline.add_animated(_entity(square, enter=(0.0, 2.0), exit=(2.0, 2.0)))
        enter = NoAnimation().handle().after(first.enter)
        second = timeline.add_animated(
            AnimatedEntity(triangle, enter, NoAnimation().handle().after(enter))
        )
        assert (second.enter.start, second.enter.end) == (2.0, 3.0)
        frames = timeline.compile(fps=1, padding=0)
        assert second.enter in frames[2].active_animations
        assert second.enter not in frames[1].active_animations

    def test_zero_duration_exit_covers_one_frame(self, timeline, square):
        entity = timeline.add_animated(_entity(square, enter=(0.0, 1.0), exit=(1.0, 1.0)))
        frames = timeline.compile(fps=4, padding=2)
        hits = [f.index for f in frames if entity.exit in f.active_animations]
        assert hits == [4]
        assert frames[4].active_progress() == [1.0]

    def test_windows_clipped_to_frame_count(self, timeline, square):
        entity = timeline.add_animated(_entity(square, enter=(-2.0, 1.0), exit=(1.0, 2.0)))
        frames = timeline.compile(fps=2, padding=0)
        assert len(frames) == 4
        assert [f.index for f in frames if entity.enter in f.active_animations] == [0, 1]

    def test_pure(self, timeline, square, triangle):
        timeline.add_static(triangle)
        timeline.add_animated(_entity(square))
        first = timeline.compile(fps=3)
        second = timeline.compile(fps=3)
        assert len(first) == len(second)
        for a, b in zip(first, second):
            assert (a.index, a.time) == (b.index, b.time)
            assert a.active_animations == b.active_animations
            assert len(a.objects) == len(b.objects)

    @pytest.mark.parametrize("fps", [0, -1, 2.5, True])
    def test_invalid_fps(self, timeline, fps):
        with pytest.raises(ValueError, match="fps"):
            compile_timeline(timeline, fps)

    def test_negative_padding(self, timeline):
        with pytest.raises(ValueError, match="padding"):
            compile_timeline(timeline, 30, padding=-1)

    def test_require_duration(self, timeline):
        with pytest.raises(EmptyTimeline):
            compile_timeline(timeline, 30, require_duration=True)

    def test_empty_timeline_is_padding_only(self, timeline):
        frames = compile_timeline(timeline, 30, padding=5)
        assert len(frames) == 5

    def test_statics_only_warns(self, timeline, square):
        timeline.add_static(square)
        with pytest.warns(UserWarning, match="no animated entities"):
            frames = compile_timeline(timeline, 30, padding=3)
        assert len(frames) == 3

    def test_logs_frame_count(self, timeline, square, caplog):
        timeline.add_animated(_entity(square))
        with caplog.at_level(logging.INFO, logger="morphline.timeline.compiler"):
            timeline.compile(fps=1, padding=0)
        assert "3 frames" in caplog.text


# =========================================================================
# Frame composition
# =========================================================================


class TestComposeFrame:
    """Evaluation at local progress and stable z ordering."""

    def test_evaluates_at_local_progress(self, timeline, square):
        entity = timeline.add_animated(
            AnimatedEntity(square, Fade(square).handle(0.0, 2.0), NoAnimation().handle(3.0, 4.0))
        )
        frames = timeline.compile(fps=2, padding=0)
        layers = compose_frame(frames[1])
        assert len(layers) == 1
        assert isinstance(layers[0].shape, GroupShape)
        assert layers[0].shape.opacity == pytest.approx(0.25)
        assert frames[1].active_animations == (entity.enter,)

    def test_z_order_stable(self, square, triangle):
        low = square.with_z_index(0).render()
        high = triangle.with_z_index(5).render()
        tied = square.with_z_index(0).shift(9.0, 9.0).render()
        draw = PolygonDraw(triangle.with_z_index(0)).handle(0.0, 1.0)
        frame = FrameDescriptor(
            index=0, time=0.5, objects=(high, low, tied), active_animations=(draw,)
        )
        layers = compose_frame(frame)
        assert [layer.z_index for layer in layers] == [0, 0, 0, 5]
        assert layers[0] is low
        assert layers[1] is tied
        assert isinstance(layers[2].shape, PolylineShape)
        assert layers[3] is high

    def test_no_animations(self, square):
        state = square.render()
        assert compose_frame(FrameDescriptor(index=0, time=0.0, objects=(state,))) == [state]
