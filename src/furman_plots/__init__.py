"""furman-plots — Furman University theme and color palettes for matplotlib."""

import logging

from .charts import figure, save, show_palettes
from .colors import Color, furman_cols, parse_color
from .contrast import (
    ContrastResult,
    Standard,
    UseCase,
    accessible_combinations,
    check_contrast,
    contrast_ratio,
    luminance,
)
from .errors import (
    FurmanPlotsError,
    InvalidArgumentError,
    UnknownColorError,
    UnknownPaletteError,
    UnsupportedFormatError,
)
from .export import ExportFormat, export_palette
from .fonts import register_fonts
from .palettes import (
    PALETTE_TABLE,
    Palette,
    PaletteGenerator,
    PaletteSummary,
    PaletteType,
    clear_cache,
    divergent_stops,
    extract_colors,
    furman_pal,
    get_palette,
    interpolate,
    list_palettes,
    palette_info,
)
from .scales import ColorScale, color_cycle, register_colormaps, scale_color, scale_fill
from .style import COLOR_CYCLE, STYLE, apply, style_axes, theme, theme_context
from .theme import COLORS, FONTS, LAYOUT, PALETTES

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "figure",
    "save",
    "show_palettes",
    "Color",
    "furman_cols",
    "parse_color",
    "ContrastResult",
    "Standard",
    "UseCase",
    "accessible_combinations",
    "check_contrast",
    "contrast_ratio",
    "luminance",
    "FurmanPlotsError",
    "InvalidArgumentError",
    "UnknownColorError",
    "UnknownPaletteError",
    "UnsupportedFormatError",
    "ExportFormat",
    "export_palette",
    "register_fonts",
    "PALETTE_TABLE",
    "Palette",
    "PaletteGenerator",
    "PaletteSummary",
    "PaletteType",
    "clear_cache",
    "divergent_stops",
    "extract_colors",
    "furman_pal",
    "get_palette",
    "interpolate",
    "list_palettes",
    "palette_info",
    "ColorScale",
    "color_cycle",
    "register_colormaps",
    "scale_color",
    "scale_fill",
    "COLOR_CYCLE",
    "STYLE",
    "apply",
    "style_axes",
    "theme",
    "theme_context",
    "COLORS",
    "FONTS",
    "LAYOUT",
    "PALETTES",
]
