"""Pure data: colors, palettes, fonts, and layout constants for the Furman brand.

No library imports — this module defines the visual identity as plain
Python dicts and lists so any consumer (matplotlib, CSS, JSON) can use it.
"""

# Brand color registry (official hex codes)
COLORS = {
    "purple": "#582c83",
    "midnight purple": "#201547",
    "gray": "#54585a",
    "light blue": "#aadeeb",
    "red": "#e3322b",
    "yellow": "#f2be1a",
    "green": "#669933",
    "light gray": "#f5f5f5",
    "medium gray": "#c0c0c0",
    "royal blue": "#4169e1",
}

# Named palettes: (type, registry names in order, description)
PALETTES = {
    "main": (
        "categorical",
        ["purple", "gray", "light blue", "red", "yellow", "green"],
        "Primary brand colors for unordered groups",
    ),
    "cool": (
        "categorical",
        ["green", "light blue", "gray"],
        "Subdued three-color set for small categorical plots",
    ),
    "gray": (
        "monochrome",
        ["gray", "light gray", "medium gray"],
        "Neutral grays for backgrounds and de-emphasis",
    ),
    "divergent1": (
        "divergent",
        ["red", "light gray", "purple"],
        "Red to purple through a light gray center",
    ),
    "divergent2": (
        "divergent",
        ["royal blue", "light gray", "midnight purple"],
        "Royal blue to midnight purple through a light gray center",
    ),
    "divergent3": (
        "divergent",
        ["red", "light gray", "green"],
        "Red to green through a light gray center",
    ),
    "sequential1": (
        "sequential",
        ["light blue", "royal blue"],
        "Light blue to royal blue",
    ),
    "sequential2": (
        "sequential",
        ["light gray", "midnight purple"],
        "Light gray to midnight purple",
    ),
    "sequential3": (
        "sequential",
        ["light gray", "purple"],
        "Light gray to purple",
    ),
    "evaluate": (
        "special",
        ["red", "yellow", "green"],
        "Performance rating scale: poor, fair, good",
    ),
}

# Reference backgrounds for accessibility checks
BACKGROUNDS = {
    "light": {
        "white": "#ffffff",
        "light gray": COLORS["light gray"],
    },
    "dark": {
        "black": "#000000",
        "midnight purple": COLORS["midnight purple"],
    },
}

# WCAG minimum contrast ratios keyed by (standard, use case)
WCAG_THRESHOLDS = {
    ("AA", "text"): 4.5,
    ("AAA", "text"): 7.0,
    ("AA", "large_text"): 3.0,
    ("AAA", "large_text"): 4.5,
    ("AA", "graphics"): 3.0,
    ("AAA", "graphics"): 3.0,
}

# Text colors used by the theme
TEXT = {
    "dark": COLORS["midnight purple"],   # titles, axis titles, legend
    "medium": COLORS["purple"],          # tick labels, palette labels
    "grid": "#E6E6E6",
}

# IBM Plex is the brand face; matplotlib falls through the list when missing.
FONTS = {
    "brand": "IBM Plex Sans",
    "brand_condensed": "IBM Plex Sans Condensed",
    "sans": [
        "Helvetica Neue", "Helvetica", "Arial",
        "DejaVu Sans", "sans-serif",
    ],
}

# Chart layout constants
LAYOUT = {
    "figsize": (8.0, 5.0),
    "dpi": 100,
    "line_width": 2.0,
    "spine_width": 0.8,
    "grid_alpha": 1.0,
    "legend_alpha": 0.9,
}

# Theme variants: base font size plus relative sizes of each text element
VARIANTS = {
    "standard": {
        "base_size": 12,
        "title": 1.6,
        "axis_title": 1.1,
        "axis_text": 0.9,
        "legend_title": 0.9,
        "legend_text": 0.8,
        "titlepad": 6,
        "grid": True,
    },
    "presentation": {
        "base_size": 16,
        "title": 1.8,
        "axis_title": 1.2,
        "axis_text": 1.0,
        "legend_title": 1.1,
        "legend_text": 1.0,
        "titlepad": 13,
        "grid": True,
    },
    "minimal": {
        "base_size": 11,
        "title": 1.4,
        "axis_title": 1.0,
        "axis_text": 0.9,
        "legend_title": 0.9,
        "legend_text": 0.8,
        "titlepad": 4,
        "grid": False,
    },
}
