"""Gantt-style chart of a timeline's schedule.

One row per registered entity with its enter, steady and exit phases as
horizontal bars, plus a row spanning the whole timeline for static objects.
Useful for checking ``after``/``synchronize`` chains before rendering.
"""
from __future__ import annotations

import matplotlib.pyplot as plt
from matplotlib.patches import Patch

from ..timeline import Timeline
from ._style import FIG_WIDTH, PHASE_COLORS, apply_style

apply_style()


def _save_or_return(fig: plt.Figure, save_path: str | None) -> plt.Figure:
    """Save figure if save_path given, otherwise return for interactive use."""
    if save_path is not None:
        fig.savefig(save_path)
        plt.close(fig)
    return fig


def _entity_label(index: int, entity) -> str:
    return f"{index}: {type(entity.obj).__name__}"


def plot_timeline(
    timeline: Timeline,
    *,
    title: str | None = None,
    save_path: str | None = None,
    ax: plt.Axes | None = None,
) -> plt.Figure:
    """Plot the enter / steady / exit windows of every entity.

    Parameters
    ----------
    timeline : Timeline
        Timeline to chart.
    title : str or None
        Optional axes title.
    save_path : str or None
        If given, save the figure to this path (format from the extension).
    ax : matplotlib Axes or None
        If given, plot on this axes (for subplot embedding).

    Returns
    -------
    matplotlib Figure
    """
    entities = timeline.entities
    end_time = timeline.end_time

    own_fig = ax is None
    if own_fig:
        rows = len(entities) + (1 if timeline.objects else 0)
        fig, ax = plt.subplots(1, 1, figsize=(FIG_WIDTH, 0.6 + 0.35 * max(rows, 1)))
    else:
        fig = ax.get_figure()

    labels: list[str] = []
    for row, entity in enumerate(entities):
        phases = [
            ("enter", entity.enter.start, entity.enter.end),
            ("steady", entity.enter.end, entity.exit.start),
            ("exit", entity.exit.start, entity.exit.end),
        ]
        for phase, start, end in phases:
            if end > start:
                ax.broken_barh(
                    [(start, end - start)], (row - 0.4, 0.8),
                    facecolors=PHASE_COLORS[phase],
                )
        labels.append(_entity_label(row, entity))

    if timeline.objects:
        row = len(entities)
        ax.broken_barh(
            [(0.0, max(end_time, 1e-9))], (row - 0.4, 0.8),
            facecolors=PHASE_COLORS["static"],
        )
        labels.append(f"static ({len(timeline.objects)})")

    ax.set_yticks(range(len(labels)))
    ax.set_yticklabels(labels)
    ax.invert_yaxis()
    ax.set_xlabel("time [s]")
    ax.set_xlim(0.0, max(end_time, 1.0))
    ax.legend(
        handles=[Patch(color=color, label=phase) for phase, color in PHASE_COLORS.items()],
        loc="lower right",
    )
    if title is not None:
        ax.set_title(title)

    if own_fig:
        fig.tight_layout()
    return _save_or_return(fig, save_path)
