"""Translate theme.py constants into matplotlib rcParams."""

from __future__ import annotations

import matplotlib as mpl
import matplotlib.pyplot as plt

from .errors import InvalidArgumentError
from .fonts import resolve_fonts
from .theme import COLORS, FONTS, LAYOUT, PALETTES, TEXT, VARIANTS

COLOR_CYCLE = [COLORS[name] for name in PALETTES["main"][1]]


def _build(variant: dict, base_size: float, fonts: list, grid: bool) -> dict:
    def size(key):
        return round(base_size * variant[key], 1)

    return {
        # Figure
        "figure.figsize": LAYOUT["figsize"],
        "figure.dpi": LAYOUT["dpi"],
        "figure.facecolor": "white",
        "figure.edgecolor": "none",
        "figure.titlesize": size("title"),
        "figure.titleweight": "bold",
        "savefig.dpi": LAYOUT["dpi"],
        "savefig.facecolor": "white",
        "savefig.bbox": "tight",
        "savefig.pad_inches": 0.2,

        # Axes: left-aligned bold title in midnight purple
        "axes.facecolor": "white",
        "axes.edgecolor": TEXT["grid"],
        "axes.linewidth": LAYOUT["spine_width"],
        "axes.titlesize": size("title"),
        "axes.titleweight": "bold",
        "axes.titlecolor": TEXT["dark"],
        "axes.titlelocation": "left",
        "axes.titlepad": variant["titlepad"],
        "axes.labelsize": size("axis_title"),
        "axes.labelcolor": TEXT["dark"],
        "axes.prop_cycle": mpl.cycler(color=COLOR_CYCLE),
        "axes.spines.top": False,
        "axes.spines.right": False,
        "axes.spines.left": False,
        "axes.grid": grid,
        "axes.axisbelow": True,

        # Grid
        "grid.color": TEXT["grid"],
        "grid.alpha": LAYOUT["grid_alpha"],
        "grid.linewidth": 0.6,

        # Ticks
        "xtick.labelsize": size("axis_text"),
        "ytick.labelsize": size("axis_text"),
        "xtick.color": TEXT["grid"],
        "ytick.color": TEXT["grid"],
        "xtick.labelcolor": TEXT["medium"],
        "ytick.labelcolor": TEXT["medium"],
        "xtick.major.width": LAYOUT["spine_width"],
        "ytick.major.width": LAYOUT["spine_width"],

        # Lines
        "lines.linewidth": LAYOUT["line_width"],
        "lines.markersize": 6,

        # Legend
        "legend.frameon": False,
        "legend.framealpha": LAYOUT["legend_alpha"],
        "legend.fontsize": size("legend_text"),
        "legend.title_fontsize": size("legend_title"),
        "legend.labelcolor": TEXT["dark"],

        # Font
        "font.family": "sans-serif",
        "font.sans-serif": fonts,
        "font.size": base_size,
        "text.color": TEXT["dark"],
    }


# Standard theme with fallback fonts only; theme() resolves installed fonts
STYLE: dict = _build(VARIANTS["standard"], VARIANTS["standard"]["base_size"], FONTS["sans"], True)


def theme(
    variant: str = "standard",
    base_size: float | None = None,
    base_family: str | None = None,
    grid: bool | None = None,
) -> dict:
    """rcParams for a theme variant: "standard", "presentation" or "minimal"."""
    try:
        settings = VARIANTS[variant]
    except KeyError:
        raise InvalidArgumentError(f"Unknown theme variant {variant!r}.", VARIANTS) from None

    text_fonts, _ = resolve_fonts(base_family)
    return _build(
        settings,
        base_size if base_size is not None else settings["base_size"],
        text_fonts,
        settings["grid"] if grid is None else grid,
    )


def apply(variant: str = "standard", **kwargs) -> None:
    """Apply a Furman theme to matplotlib globally."""
    plt.rcParams.update(theme(variant, **kwargs))


def theme_context(variant: str = "standard", **kwargs):
    """``with theme_context("presentation"): ...`` scopes the theme to a block."""
    return plt.rc_context(theme(variant, **kwargs))


def style_axes(ax, base_family: str | None = None) -> None:
    """Set axis titles, tick labels and legend text in the graph font.

    rcParams carry a single family, so the condensed face for axis text is
    applied per Axes.
    """
    _, graph_fonts = resolve_fonts(base_family)
    ax.tick_params(axis="both", which="both", labelfontfamily=graph_fonts)
    ax.xaxis.label.set_fontfamily(graph_fonts)
    ax.yaxis.label.set_fontfamily(graph_fonts)
    legend = ax.get_legend()
    if legend is not None:
        for text in legend.get_texts():
            text.set_fontfamily(graph_fonts)
        legend.get_title().set_fontfamily(graph_fonts)
