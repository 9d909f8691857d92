# Copyright (c) 2026 Combinator
# SPDX-License-Identifier: MIT

"""
Per-palette contrast cache.

Decodes every palette entry once (RGB, HSL, luminance) and records
whether it reaches the text-contrast threshold. The pair enumerator
works from these values instead of re-deriving them per pair.

The memoized variant is keyed on (palette, text color, level). All three
are hashable value types, so changing any input produces a new key and a
stale entry can never be returned.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from types import MappingProxyType
from typing import Iterable, Mapping

from combinator.schema import CachedColorData, ColorEntry, ContrastLevel, RGB
from combinator.combine.colorspace import (
    contrast_from_luminance,
    hex_to_rgb,
    luminance,
    rgb_to_hsl,
)

logger = logging.getLogger(__name__)

_CACHE_SIZE = 32


def build_color_cache(
    palette: Iterable[ColorEntry],
    text_color: RGB,
    level: ContrastLevel,
) -> dict[str, CachedColorData]:
    """
    Compute cached color data for every palette entry.

    Pure function of its inputs. When an id appears more than once, the
    first entry wins.

    Args:
        palette: Ordered palette entries
        text_color: Color of the text overlaid on the backgrounds
        level: Required text contrast level

    Returns:
        Dict mapping color id → CachedColorData, in palette order
    """
    threshold = level.threshold
    text_lum = luminance(text_color)

    cache: dict[str, CachedColorData] = {}
    for entry in palette:
        if entry.id in cache:
            continue
        rgb = hex_to_rgb(entry.hex)
        lum = luminance(rgb)
        cache[entry.id] = CachedColorData(
            rgb=rgb,
            hsl=rgb_to_hsl(rgb),
            luminance=lum,
            passes_text_contrast=contrast_from_luminance(lum, text_lum) >= threshold,
        )
    return cache


@lru_cache(maxsize=_CACHE_SIZE)
def _memoized(
    palette: tuple[ColorEntry, ...],
    text_color: RGB,
    level: ContrastLevel,
) -> Mapping[str, CachedColorData]:
    logger.debug(
        "Building color cache: %d entries, text %s, level %s",
        len(palette), text_color.hex, level.value,
    )
    return MappingProxyType(build_color_cache(palette, text_color, level))


def color_cache(
    palette: Iterable[ColorEntry],
    text_color: RGB,
    level: ContrastLevel,
) -> Mapping[str, CachedColorData]:
    """
    Memoized ``build_color_cache``.

    Returns a read-only mapping shared between callers with equal inputs.
    """
    return _memoized(tuple(palette), text_color, level)


def clear_color_cache() -> None:
    """Drop all memoized cache entries."""
    _memoized.cache_clear()


def color_cache_info():
    """lru_cache statistics (hits, misses, maxsize, currsize)."""
    return _memoized.cache_info()


def passes_contrast_map(cache: Mapping[str, CachedColorData]) -> dict[str, bool]:
    """Extract id → passes_text_contrast from a color cache."""
    return {color_id: data.passes_text_contrast for color_id, data in cache.items()}
