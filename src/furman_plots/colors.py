"""Color values and the brand color registry."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Union

from .errors import InvalidArgumentError, UnknownColorError
from .theme import COLORS

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


@dataclass(frozen=True)
class Color:
    """An immutable 24-bit RGB color, stored as lowercase ``#rrggbb``."""

    hex: str
    name: str | None = None

    def __post_init__(self) -> None:
        m = _HEX_RE.match(self.hex)
        if not m:
            raise InvalidArgumentError(f"Invalid hex color {self.hex!r}; expected '#rrggbb'.")
        digits = m.group(1).lower()
        if len(digits) == 3:
            digits = "".join(c * 2 for c in digits)
        object.__setattr__(self, "hex", f"#{digits}")

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int, name: str | None = None) -> Color:
        for channel in (r, g, b):
            if not 0 <= channel <= 255:
                raise InvalidArgumentError(f"RGB channel {channel} outside [0, 255].")
        return cls(f"#{int(r):02x}{int(g):02x}{int(b):02x}", name)

    @property
    def rgb(self) -> tuple[int, int, int]:
        h = self.hex
        return int(h[1:3], 16), int(h[3:5], 16), int(h[5:7], 16)

    @property
    def slug(self) -> str | None:
        """Lowercase name with spaces as hyphens, for CSS properties."""
        if self.name is None:
            return None
        return self.name.lower().replace(" ", "-")

    def __str__(self) -> str:
        return self.hex


ColorLike = Union[str, Color]


def furman_cols(*names: str) -> list[Color]:
    """Look up brand colors by name. With no names, return the whole registry."""
    if not names:
        return [Color(hex_, name) for name, hex_ in COLORS.items()]

    missing = [n for n in names if n not in COLORS]
    if missing:
        raise UnknownColorError(missing, COLORS)
    return [Color(COLORS[n], n) for n in names]


def parse_color(value: ColorLike) -> Color:
    """Accept a Color, a registry name, or a hex string."""
    if isinstance(value, Color):
        return value
    if value in COLORS:
        return Color(COLORS[value], value)
    if _HEX_RE.match(value):
        return Color(value)
    raise UnknownColorError([value], COLORS)
