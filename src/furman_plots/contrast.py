"""WCAG luminance and contrast checks for brand colors."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from .colors import Color, ColorLike, furman_cols, parse_color
from .errors import InvalidArgumentError
from .palettes import PaletteLike, get_palette
from .theme import BACKGROUNDS, WCAG_THRESHOLDS


class Standard(str, Enum):
    AA = "AA"
    AAA = "AAA"


class UseCase(str, Enum):
    TEXT = "text"
    LARGE_TEXT = "large_text"
    GRAPHICS = "graphics"


@dataclass(frozen=True)
class ContrastResult:
    foreground: Color
    background: Color
    ratio: float
    passes: bool
    standard: Standard
    threshold: float
    use_case: UseCase = UseCase.TEXT


def _standard(value) -> Standard:
    try:
        return Standard(value)
    except ValueError:
        raise InvalidArgumentError(
            f"Unknown contrast standard {value!r}.", [s.value for s in Standard]
        ) from None


def _use_case(value) -> UseCase:
    try:
        return UseCase(value)
    except ValueError:
        raise InvalidArgumentError(
            f"Unknown use case {value!r}.", [u.value for u in UseCase]
        ) from None


def _linear(channel: int) -> float:
    c = channel / 255
    return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4


def luminance(color: ColorLike) -> float:
    """WCAG relative luminance in [0, 1]."""
    r, g, b = parse_color(color).rgb
    return 0.2126 * _linear(r) + 0.7152 * _linear(g) + 0.0722 * _linear(b)


def contrast_ratio(c1: ColorLike, c2: ColorLike) -> float:
    """WCAG contrast ratio, from 1 (identical) to 21 (black on white)."""
    l1, l2 = luminance(c1), luminance(c2)
    return (max(l1, l2) + 0.05) / (min(l1, l2) + 0.05)


def check_contrast(
    palette: PaletteLike,
    backgrounds: ColorLike | Iterable[ColorLike] = ("#ffffff",),
    standard: str | Standard = "AA",
) -> list[ContrastResult]:
    """Contrast of every palette color against every background.

    Uses the normal-text threshold: 4.5 for AA, 7.0 for AAA.
    A single background may be passed bare instead of in a list.
    """
    p = get_palette(palette)
    std = _standard(standard)
    threshold = WCAG_THRESHOLDS[(std.value, UseCase.TEXT.value)]
    if isinstance(backgrounds, (str, Color)):
        backgrounds = [backgrounds]
    bgs = [parse_color(bg) for bg in backgrounds]

    results = []
    for fg in p.colors:
        for bg in bgs:
            ratio = contrast_ratio(fg, bg)
            results.append(ContrastResult(fg, bg, ratio, ratio >= threshold, std, threshold))
    return results


def accessible_combinations(
    standard: str | Standard = "AA",
    use_case: str | UseCase = "text",
) -> list[ContrastResult]:
    """Registry colors that pass against the reference backgrounds, best first."""
    std = _standard(standard)
    case = _use_case(use_case)
    threshold = WCAG_THRESHOLDS[(std.value, case.value)]

    backgrounds = [
        Color(hex_, name)
        for group in BACKGROUNDS.values()
        for name, hex_ in group.items()
    ]

    results = []
    for fg in furman_cols():
        for bg in backgrounds:
            if fg.hex == bg.hex:
                continue
            ratio = contrast_ratio(fg, bg)
            if ratio >= threshold:
                results.append(ContrastResult(fg, bg, ratio, True, std, threshold, case))

    results.sort(key=lambda r: r.ratio, reverse=True)
    return results
