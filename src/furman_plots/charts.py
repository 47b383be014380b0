"""Convenience chart functions: figure(), save(), show_palettes()."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle

from .palettes import PALETTE_TABLE
from .style import apply, style_axes
from .theme import TEXT

logger = logging.getLogger(__name__)

OUTPUT_DIR_ENV = "FURMAN_PLOTS_OUTPUT_DIR"


def _charts_dir() -> Path:
    return Path(os.environ.get(OUTPUT_DIR_ENV, Path.cwd() / "charts"))


def figure(
    figsize: tuple[float, float] | None = None,
    variant: str = "standard",
    base_family: str | None = None,
) -> tuple[plt.Figure, plt.Axes]:
    """Create a styled (fig, ax) pair; axis text uses the condensed face when installed."""
    apply(variant, base_family=base_family)
    fig, ax = plt.subplots(figsize=figsize)
    style_axes(ax, base_family)
    return fig, ax


def save(
    fig: plt.Figure,
    filename: str,
    output_dir: str | Path | None = None,
) -> Path:
    """Save a figure to $FURMAN_PLOTS_OUTPUT_DIR (default ./charts) or a custom directory.

    Returns the path to the saved file.
    """
    dest = Path(output_dir) if output_dir else _charts_dir()
    dest.mkdir(parents=True, exist_ok=True)
    path = dest / filename
    fig.savefig(path)
    plt.close(fig)
    logger.info("Saved chart to %s", path)
    return path


def show_palettes(
    filename: str | None = None,
    output_dir: str | Path | None = None,
) -> tuple[plt.Figure, plt.Axes]:
    """Draw every palette as a row of swatches, labelled by name."""
    n = len(PALETTE_TABLE)
    max_cols = max(len(p) for p in PALETTE_TABLE.values())

    fig, ax = figure(figsize=(max_cols + 2.5, 0.5 * n + 1))
    for i, palette in enumerate(PALETTE_TABLE.values()):
        y = n - i - 1
        for j, color in enumerate(palette.colors):
            ax.add_patch(Rectangle((j, y), 1, 0.8, facecolor=color.hex, edgecolor="none"))
        ax.text(-0.2, y + 0.4, palette.name, ha="right", va="center", color=TEXT["medium"])

    ax.set_xlim(0, max_cols)
    ax.set_ylim(0, n)
    ax.set_axis_off()
    ax.set_title("Furman Color Palettes")

    if filename:
        save(fig, filename, output_dir)

    return fig, ax
