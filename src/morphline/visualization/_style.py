"""Shared matplotlib style for schedule charts.

Colors come from the Okabe-Ito palette so enter, steady and exit phases stay
distinguishable for color-blind readers.
"""
from __future__ import annotations

import matplotlib.pyplot as plt


FIG_WIDTH: float = 6.69   # inches

STYLE_PARAMS: dict[str, object] = {
    "font.size": 10,
    "axes.labelsize": 11,
    "axes.titlesize": 11,
    "legend.fontsize": 9,
    "xtick.labelsize": 9,
    "ytick.labelsize": 9,
    "figure.dpi": 150,
    "savefig.dpi": 300,
    "savefig.bbox": "tight",
    "axes.linewidth": 0.7,
    "xtick.direction": "in",
    "legend.framealpha": 0.9,
    "legend.edgecolor": "0.8",
}

PHASE_COLORS: dict[str, str] = {
    "enter": "#0072B2",   # blue
    "steady": "#009E73",  # green
    "exit": "#D55E00",    # vermilion
    "static": "#999999",  # gray
}


def apply_style() -> None:
    """Apply the package matplotlib style settings."""
    plt.rcParams.update(STYLE_PARAMS)
