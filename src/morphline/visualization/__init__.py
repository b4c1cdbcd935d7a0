"""Matplotlib charts for inspecting timelines."""

from .timeline_plots import plot_timeline

__all__ = ["plot_timeline"]
