"""Exception classes raised by furman_plots."""

from __future__ import annotations

from typing import Iterable


def _options(valid: Iterable[str]) -> str:
    return ", ".join(f"'{v}'" for v in valid)


class FurmanPlotsError(Exception):
    """Base class for all furman_plots errors."""


class UnknownColorError(FurmanPlotsError, KeyError):
    """Raised when a color name is not in the registry."""

    def __init__(self, names: Iterable[str], valid: Iterable[str]):
        self.names = list(names)
        self.valid = list(valid)
        missing = ", ".join(f"'{n}'" for n in self.names)
        message = f"Unknown color(s) {missing}. Valid colors: {_options(self.valid)}."
        super().__init__(message)

    def __str__(self) -> str:
        # KeyError would repr() the message
        return self.args[0]


class UnknownPaletteError(FurmanPlotsError, KeyError):
    """Raised when a palette name is not in the palette table."""

    def __init__(self, name: str, valid: Iterable[str]):
        self.name = name
        self.valid = list(valid)
        message = f"Palette '{name}' not found. Available palettes: {_options(self.valid)}."
        super().__init__(message)

    def __str__(self) -> str:
        return self.args[0]


class InvalidArgumentError(FurmanPlotsError, ValueError):
    """Raised for a bad count, standard, use case, variant or color value."""

    def __init__(self, message: str, valid: Iterable[str] | None = None):
        self.valid = list(valid) if valid is not None else None
        if self.valid:
            message = f"{message} Valid options: {_options(self.valid)}."
        super().__init__(message)


class UnsupportedFormatError(FurmanPlotsError, ValueError):
    """Raised when an export format is not recognized."""

    def __init__(self, fmt: str, valid: Iterable[str]):
        self.format = fmt
        self.valid = list(valid)
        message = f"Unsupported export format '{fmt}'. Supported formats: {_options(self.valid)}."
        super().__init__(message)
