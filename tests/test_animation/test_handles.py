"""Tests for animation handles and animated entities."""

import pytest

from morphline.animation import AnimatedEntity, AnimationHandle, Fade, NoAnimation, Reverse
from morphline.errors import DegenerateInterval
from morphline.timing import TimeInterval


class TestAnimationHandle:
    """Handles forward the interval algebra and evaluate at global time."""

    def test_default_window(self, square):
        handle = Fade(square).handle()
        assert (handle.start, handle.end) == (0.0, 1.0)

    def test_combinators_return_new_handles(self, square):
        handle = Fade(square).handle()
        moved = handle.delay(2.0).duration(0.5)
        assert (moved.start, moved.end) == (2.0, 2.5)
        assert (handle.start, handle.end) == (0.0, 1.0)
        assert moved.animation(0.5).shape.opacity == handle.animation(0.5).shape.opacity
        assert moved.animation(0.5).z_index == handle.animation(0.5).z_index

    def test_after_accepts_handle_or_interval(self, square):
        first = Fade(square).handle(0.0, 2.0)
        second = NoAnimation().handle().after(first)
        third = NoAnimation().handle().after(TimeInterval(5.0, 6.0))
        assert (second.start, second.end) == (2.0, 3.0)
        assert (third.start, third.end) == (6.0, 7.0)

    def test_synchronize_and_friends(self, square):
        reference = Fade(square).handle(1.0, 4.0)
        handle = NoAnimation().handle(0.0, 2.0)
        assert (handle.start_with(reference).start, handle.start_with(reference).end) == (1.0, 2.0)
        assert handle.end_with(reference).end == 4.0
        synced = handle.synchronize(reference)
        assert (synced.start, synced.end) == (1.0, 4.0)
        keep_end = handle.duration_keep_end(0.5)
        assert (keep_end.start, keep_end.end) == (1.5, 2.0)

    def test_reverse(self, square):
        handle = Fade(square).handle(0.0, 2.0).reverse()
        assert isinstance(handle.animation, Reverse)
        assert (handle.start, handle.end) == (0.0, 2.0)
        assert handle.animate(0.5).shape.opacity == pytest.approx(0.75)

    def test_animate_uses_local_progress(self, square):
        handle = Fade(square).handle(2.0, 4.0)
        assert handle.progress_at(3.0) == pytest.approx(0.5)
        assert handle.animate(3.0).shape.opacity == pytest.approx(0.5)
        assert handle.animate(10.0).shape.opacity == 1.0

    def test_explicit_construction(self, square):
        handle = AnimationHandle(Fade(square))
        assert (handle.start, handle.end) == (0.0, 1.0)


class TestAnimatedEntity:

    def test_lifetime_keeps_exit_duration(self, square):
        entity = AnimatedEntity(
            square,
            Fade(square).handle(0.0, 1.0),
            Fade(square).handle(0.0, 0.5).reverse(),
        ).lifetime(2.0)
        assert (entity.exit.start, entity.exit.end) == (3.0, 3.5)
        assert entity.end_time == 3.5

    def test_with_enter_and_exit(self, square):
        entity = AnimatedEntity(square, NoAnimation().handle(), NoAnimation().handle())
        entity = entity.with_enter(Fade(square).handle(0.0, 2.0))
        entity = entity.with_exit(NoAnimation().handle(4.0, 5.0))
        assert isinstance(entity.enter.animation, Fade)
        assert entity.end_time == 5.0

    def test_validate(self, square):
        good = AnimatedEntity(square, NoAnimation().handle(), NoAnimation().handle(1.0, 2.0))
        assert good.validate() is good
        bad = good.with_exit(NoAnimation().handle(3.0, 2.0))
        with pytest.raises(DegenerateInterval):
            bad.validate()


class TestReverseTwice:

    @pytest.mark.parametrize("progress", [0.0, 0.25, 0.5, 0.75, 1.0])
    def test_reverse_twice_matches_original(self, square, progress):
        handle = Fade(square).handle(0.0, 1.0)
        twice = handle.reverse().reverse()
        assert (twice.start, twice.end) == (handle.start, handle.end)
        assert twice.animate(progress).shape.opacity == pytest.approx(
            handle.animate(progress).shape.opacity
        )
