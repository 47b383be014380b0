"""Detect the IBM Plex brand fonts through matplotlib's font manager."""

from __future__ import annotations

import logging
import os

from matplotlib import font_manager

from .theme import FONTS

logger = logging.getLogger(__name__)

SKIP_ENV = "FURMAN_PLOTS_SKIP_FONT_CHECK"


def installed_families() -> set[str]:
    return {f.name for f in font_manager.fontManager.ttflist}


def register_fonts() -> dict[str, bool]:
    """Report whether IBM Plex Sans and IBM Plex Sans Condensed are installed.

    Nothing is registered under a fake name; missing fonts fall back to the
    sans-serif list in the theme. Set FURMAN_PLOTS_SKIP_FONT_CHECK to skip.
    """
    if os.environ.get(SKIP_ENV):
        logger.info("Skipping font check (%s is set)", SKIP_ENV)
        return {}

    families = installed_families()
    found = {}
    for family in (FONTS["brand"], FONTS["brand_condensed"]):
        found[family] = family in families
        if found[family]:
            logger.info("%s found and available for use.", family)
        else:
            logger.info("%s not found. Using system sans-serif font.", family)
    return found


def resolve_fonts(base_family: str | None = None) -> tuple[list[str], list[str]]:
    """Font lists for general text and for axis/legend text.

    An explicit ``base_family`` wins for both. Otherwise IBM Plex Sans is
    used when installed, and the condensed face for axes when available.
    """
    fallback = list(FONTS["sans"])
    if base_family is not None:
        return [base_family] + fallback, [base_family] + fallback

    families = installed_families()
    text = fallback
    graph = fallback
    if FONTS["brand"] in families:
        text = [FONTS["brand"]] + fallback
        graph = text
    if FONTS["brand_condensed"] in families:
        graph = [FONTS["brand_condensed"]] + fallback
    return text, graph
