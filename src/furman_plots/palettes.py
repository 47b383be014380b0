"""Palette table, interpolation, and palette generator functions.

A palette name resolves to a :class:`PaletteGenerator`, a callable that
returns ``n`` colors. This is the shape matplotlib-facing helpers (see
``scales.py``) expect: ``pal(n) -> list of colors``.
"""

from __future__ import annotations

import functools
import logging
import warnings
from dataclasses import dataclass
from enum import Enum
from typing import Sequence, Union

import numpy as np

from .colors import Color, furman_cols
from .errors import InvalidArgumentError, UnknownPaletteError
from .theme import PALETTES

logger = logging.getLogger(__name__)


class PaletteType(str, Enum):
    CATEGORICAL = "categorical"
    SEQUENTIAL = "sequential"
    DIVERGENT = "divergent"
    MONOCHROME = "monochrome"
    SPECIAL = "special"


@dataclass(frozen=True)
class Palette:
    """An ordered, immutable set of anchor colors."""

    name: str
    type: PaletteType
    colors: tuple[Color, ...]
    description: str = ""

    def __len__(self) -> int:
        return len(self.colors)

    def __iter__(self):
        return iter(self.colors)

    @property
    def hex(self) -> list[str]:
        return [c.hex for c in self.colors]


@dataclass(frozen=True)
class PaletteSummary:
    name: str
    type: PaletteType
    count: int
    description: str


def _build_table() -> dict[str, Palette]:
    table = {}
    for name, (kind, color_names, description) in PALETTES.items():
        table[name] = Palette(
            name=name,
            type=PaletteType(kind),
            colors=tuple(furman_cols(*color_names)),
            description=description,
        )
    return table


# Built once at import, never mutated
PALETTE_TABLE: dict[str, Palette] = _build_table()

PaletteLike = Union[str, Palette]


def get_palette(palette: PaletteLike) -> Palette:
    """Resolve a palette name (or pass through a Palette)."""
    if isinstance(palette, Palette):
        return palette
    try:
        return PALETTE_TABLE[palette]
    except (KeyError, TypeError):
        raise UnknownPaletteError(palette, PALETTE_TABLE) from None


def list_palettes(palette_type: str | PaletteType | None = None) -> list[PaletteSummary]:
    """Summaries of every palette, optionally filtered by type."""
    if palette_type is not None:
        try:
            palette_type = PaletteType(palette_type)
        except ValueError:
            raise InvalidArgumentError(
                f"Unknown palette type {palette_type!r}.",
                [t.value for t in PaletteType],
            ) from None

    return [
        PaletteSummary(p.name, p.type, len(p), p.description)
        for p in PALETTE_TABLE.values()
        if palette_type is None or p.type is palette_type
    ]


def palette_info(palette: PaletteLike) -> dict:
    p = get_palette(palette)
    return {
        "name": p.name,
        "type": p.type.value,
        "count": len(p),
        "description": p.description,
        "colors": {c.name: c.hex for c in p.colors},
    }


def _check_count(n) -> int:
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)) or n < 1:
        raise InvalidArgumentError(f"n must be a positive integer, got {n!r}.")
    return int(n)


def _ramp(anchors: Sequence[Color], n: int) -> list[Color]:
    """Piecewise-linear RGB ramp through evenly spaced anchors.

    Works in exact integer arithmetic: output ``i`` sits at anchor-space
    position ``i * (k - 1) / (n - 1)``, and each channel is rounded half-up.
    Mirrored positions therefore give identical colors.
    """
    k = len(anchors)
    rgb = np.array([c.rgb for c in anchors], dtype=np.int64)
    if k == 1 or n == 1:
        return [Color.from_rgb(*rgb[0].tolist())] * n

    denom = n - 1
    num = np.arange(n, dtype=np.int64) * (k - 1)
    seg = np.minimum(num // denom, k - 2)
    rem = num - seg * denom

    lo = rgb[seg]
    hi = rgb[seg + 1]
    scaled = lo * denom + (hi - lo) * rem[:, None]
    out = (2 * scaled + denom) // (2 * denom)
    return [Color.from_rgb(*row) for row in out.tolist()]


def interpolate(palette: PaletteLike, n: int, reverse: bool = False) -> list[Color]:
    """Expand a palette to ``n`` colors by linear interpolation between anchors.

    When ``n`` equals the anchor count the anchors (with their names) come
    back unchanged.
    """
    p = get_palette(palette)
    n = _check_count(n)
    anchors = list(p.colors)
    if reverse:
        anchors.reverse()
    if n == len(anchors):
        return anchors
    return _ramp(anchors, n)


class PaletteGenerator:
    """Stateless ``n -> colors`` function for one palette and direction."""

    def __init__(self, palette: Palette, reverse: bool = False):
        self.palette = palette
        self.reverse = reverse

    def generate(self, n: int) -> list[str]:
        return [c.hex for c in interpolate(self.palette, n, reverse=self.reverse)]

    __call__ = generate

    def __repr__(self) -> str:
        return f"PaletteGenerator({self.palette.name!r}, reverse={self.reverse})"


@functools.lru_cache(maxsize=64)
def _generator(name: str, reverse: bool) -> PaletteGenerator:
    logger.debug("Creating palette generator %s (reverse=%s)", name, reverse)
    return PaletteGenerator(PALETTE_TABLE[name], reverse)


def furman_pal(palette: PaletteLike = "main", reverse: bool = False) -> PaletteGenerator:
    """Return a function that generates ``n`` interpolated colors from a palette."""
    p = get_palette(palette)
    if isinstance(palette, str):
        return _generator(p.name, bool(reverse))
    return PaletteGenerator(p, bool(reverse))


def clear_cache() -> None:
    """Drop memoized palette generators."""
    _generator.cache_clear()
    logger.debug("Palette generator cache cleared")


def extract_colors(palette: PaletteLike, n: int, reverse: bool = False) -> list[str]:
    """Exactly ``n`` hex colors from a palette."""
    return furman_pal(palette, reverse)(n)


def check_limits(limits: Sequence[float]) -> tuple[float, float]:
    """Validate a (low, high) pair with low <= high."""
    if len(limits) != 2:
        raise InvalidArgumentError(f"limits must be a (low, high) pair, got {limits!r}.")
    low, high = float(limits[0]), float(limits[1])
    if low > high:
        raise InvalidArgumentError(
            f"limits must be ordered low to high, got {tuple(limits)}; "
            "use reverse=True to flip the palette."
        )
    return low, high


def divergent_stops(limits: Sequence[float], midpoint: float) -> list[float]:
    """Positions in [0, 1] for the three anchors of a divergent palette.

    ``limits[0]`` maps to the first anchor, ``midpoint`` to the second and
    ``limits[1]`` to the third. Non-distinct breakpoints are warned about
    and used as-is.
    """
    low, high = check_limits(limits)
    if high == low:
        stops = [0.5, 0.5, 0.5]
    else:
        mid = (float(midpoint) - low) / (high - low)
        stops = [0.0, min(max(mid, 0.0), 1.0), 1.0]

    if len(set(stops)) < 3:
        warnings.warn(
            f"Divergent rescale with limits={tuple(limits)} and midpoint={midpoint} "
            f"gives non-distinct breakpoints {stops}",
            UserWarning,
            stacklevel=2,
        )
    return stops
