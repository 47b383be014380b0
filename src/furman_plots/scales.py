"""matplotlib colormaps, norms and color cycles built from Furman palettes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import matplotlib as mpl
import numpy as np
from matplotlib.colors import Colormap, ListedColormap, Normalize, TwoSlopeNorm, to_rgb

from .palettes import (
    PALETTE_TABLE,
    PaletteLike,
    check_limits,
    divergent_stops,
    furman_pal,
    get_palette,
)

# Resolution of continuous colormaps
CONTINUOUS_N = 256


@dataclass(frozen=True)
class ColorScale:
    """A continuous colormap and the norm that places data on it."""

    cmap: Colormap
    norm: Normalize | None = None

    def kwargs(self) -> dict:
        """Keyword arguments for ``ax.scatter``, ``ax.imshow`` and friends."""
        return {"cmap": self.cmap, "norm": self.norm}


def _stretched(anchors: Sequence[str], stops: Sequence[float], n: int) -> list:
    """Sample ``n`` RGB colors with anchors placed at ``stops`` instead of evenly."""
    rgb = np.array([to_rgb(c) for c in anchors])
    x = np.linspace(0.0, 1.0, n)
    channels = [np.interp(x, stops, rgb[:, i]) for i in range(3)]
    return np.column_stack(channels).tolist()


def scale_color(
    palette: PaletteLike = "main",
    discrete: bool = True,
    reverse: bool = False,
    n: int | None = None,
    midpoint: float | None = None,
    limits: Sequence[float] | None = None,
):
    """Build a matplotlib color scale from a palette.

    Discrete scales are a ``ListedColormap`` of ``n`` colors (the anchor count
    by default). Continuous scales are a :class:`ColorScale` with a 256-step
    colormap. For three-anchor palettes a ``midpoint`` centres the middle
    anchor: with ``limits`` the anchors are rescaled so that
    ``limits[0]``, ``midpoint`` and ``limits[1]`` land on the three anchors;
    without ``limits`` a ``TwoSlopeNorm`` centred on ``midpoint`` is used.
    ``limits`` must be ordered low to high; pass ``reverse=True`` to flip.
    """
    p = get_palette(palette)
    if limits is not None:
        limits = check_limits(limits)
    pal = furman_pal(palette, reverse)
    suffix = "_r" if reverse else ""

    if discrete:
        colors = pal(n if n is not None else len(p))
        return ListedColormap(colors, name=f"furman_{p.name}{suffix}")

    name = f"furman_{p.name}{suffix}"
    if midpoint is not None and len(p) == 3:
        if limits is not None:
            stops = divergent_stops(limits, midpoint)
            anchors = pal(3)
            cmap = ListedColormap(_stretched(anchors, stops, CONTINUOUS_N), name=name)
            return ColorScale(cmap, Normalize(vmin=limits[0], vmax=limits[1]))
        cmap = ListedColormap(pal(CONTINUOUS_N), name=name)
        return ColorScale(cmap, TwoSlopeNorm(vcenter=midpoint))

    norm = Normalize(vmin=limits[0], vmax=limits[1]) if limits is not None else None
    return ColorScale(ListedColormap(pal(CONTINUOUS_N), name=name), norm)


# matplotlib draws colour and fill with the same colormap
scale_fill = scale_color


def color_cycle(palette: PaletteLike = "main", n: int | None = None, reverse: bool = False):
    """A cycler for ``axes.prop_cycle``."""
    p = get_palette(palette)
    return mpl.cycler(color=furman_pal(palette, reverse)(n if n is not None else len(p)))


def register_colormaps() -> list[str]:
    """Register ``furman_<name>`` and ``furman_<name>_r`` with matplotlib.

    Safe to call more than once. Returns the registered names.
    """
    names = []
    for palette in PALETTE_TABLE:
        for reverse in (False, True):
            cmap = scale_color(palette, discrete=False, reverse=reverse).cmap
            if cmap.name not in mpl.colormaps:
                mpl.colormaps.register(cmap)
            names.append(cmap.name)
    return names
