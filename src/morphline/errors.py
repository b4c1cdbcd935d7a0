"""Exception hierarchy.

Every domain error is also a ``ValueError`` so callers that only guard
against bad arguments keep working.
"""

from __future__ import annotations


class MorphlineError(Exception):
    """Base class for all morphline domain errors."""


class DegenerateInterval(MorphlineError, ValueError):
    """A time window with non-finite endpoints or ``start > end``."""


class DegeneratePolygon(MorphlineError, ValueError):
    """A polygon with no points where at least one point is required."""


class MismatchedMorphInput(MorphlineError, ValueError):
    """Strict morph between polygons with different point counts."""


class EmptyTimeline(MorphlineError, ValueError):
    """A timeline with zero duration where a non-zero one was required."""
