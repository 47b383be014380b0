"""Render palettes as hex, rgb(), hsl(), CSS custom properties, or JSON."""

from __future__ import annotations

import json
import logging
import math
from enum import Enum
from fractions import Fraction
from pathlib import Path

from .colors import Color
from .errors import UnsupportedFormatError
from .palettes import PaletteLike, get_palette, interpolate

logger = logging.getLogger(__name__)

CSS_PREFIX = "--furman-"


class ExportFormat(str, Enum):
    HEX = "hex"
    RGB = "rgb"
    HSL = "hsl"
    CSS = "css"
    JSON = "json"


def _format(value) -> ExportFormat:
    if isinstance(value, ExportFormat):
        return value
    try:
        return ExportFormat(str(value).lower())
    except ValueError:
        raise UnsupportedFormatError(value, [f.value for f in ExportFormat]) from None


def _half_up(x: Fraction) -> int:
    return math.floor(x + Fraction(1, 2))


def to_hsl(color: Color) -> tuple[int, int, int]:
    """(hue degrees, saturation %, lightness %) as integers.

    Computed exactly from the 8-bit channels and rounded half-up, so a hue of
    0.5 degrees becomes 1. A hue that rounds to 360 wraps to 0.
    """
    r, g, b = color.rgb
    hi, lo = max(r, g, b), min(r, g, b)
    total = hi + lo
    lightness = Fraction(total * 100, 510)
    if hi == lo:
        return 0, 0, _half_up(lightness)

    d = hi - lo
    sat = Fraction(d * 100, total if total <= 255 else 510 - total)
    if hi == r:
        hue = Fraction(g - b, d) % 6
    elif hi == g:
        hue = Fraction(b - r, d) + 2
    else:
        hue = Fraction(r - g, d) + 4
    return _half_up(hue * 60) % 360, _half_up(sat), _half_up(lightness)


def _keys(palette_name: str, colors: list[Color]) -> list[str]:
    """Color names as export keys, synthesizing ``<palette>_<i>`` where needed."""
    keys = []
    for i, c in enumerate(colors, start=1):
        key = c.name if c.name is not None else f"{palette_name}_{i}"
        if key in keys:
            key = f"{palette_name}_{i}"
        keys.append(key)
    return keys


def _render(fmt: ExportFormat, palette_name: str, colors: list[Color]) -> str:
    if fmt is ExportFormat.HEX:
        return "\n".join(c.hex for c in colors)

    if fmt is ExportFormat.RGB:
        return "\n".join("rgb({}, {}, {})".format(*c.rgb) for c in colors)

    if fmt is ExportFormat.HSL:
        return "\n".join("hsl({}, {}%, {}%)".format(*to_hsl(c)) for c in colors)

    keys = _keys(palette_name, colors)

    if fmt is ExportFormat.CSS:
        lines = [":root {"]
        for key, c in zip(keys, colors):
            slug = key.lower().replace(" ", "-")
            lines.append(f"  {CSS_PREFIX}{slug}: {c.hex};")
        lines.append("}")
        return "\n".join(lines)

    return json.dumps(
        {"palette_name": palette_name, "colors": {k: c.hex for k, c in zip(keys, colors)}},
        indent=2,
    )


def export_palette(
    palette: PaletteLike,
    format: str | ExportFormat = "hex",
    n: int | None = None,
    path: str | Path | None = None,
) -> str:
    """Export a palette as text, optionally interpolated to ``n`` colors.

    If ``path`` is given the text is also written there.
    """
    p = get_palette(palette)
    fmt = _format(format)
    colors = interpolate(p, n) if n is not None else list(p.colors)
    text = _render(fmt, p.name, colors)

    if path is not None:
        path = Path(path)
        with open(path, "w", encoding="utf-8") as f:
            f.write(text + "\n")
        logger.info("Exported palette %s (%s, %d colors) to %s", p.name, fmt.value, len(colors), path)

    return text
