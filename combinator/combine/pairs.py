# Copyright (c) 2026 Combinator
# SPDX-License-Identifier: MIT

"""
Candidate pair enumeration.

Builds every admissible background pair from the selected palette colors:

1. Pre-filter: keep selected colors that pass text contrast (O(n))
2. Pairwise tests: vectorized matrices over the survivors (O(n²) cheap ops)
3. Emission: row-major walk of the upper triangle, forward then inverse

Emission order is deterministic: outer loop in palette order, inner loop
over the colors after it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import AbstractSet, Iterable, Mapping

import numpy as np

from combinator.schema import CachedColorData, ColorEntry, Combination
from combinator.combine.colorspace import (
    abs_difference_matrix,
    contrast_matrix,
    hue_distance_matrix,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PairThresholds:
    """Admission thresholds between the two colors of a pair (all inclusive)."""

    # Minimum contrast ratio between the two backgrounds.
    # Pairs at exactly 1.0 are always rejected (visually identical).
    min_bg_contrast: float = 1.0

    # Minimum circular hue distance in degrees (0-180)
    min_hue_distance: float = 0.0

    # Minimum saturation difference (0-100)
    min_sat_distance: float = 0.0

    # Minimum lightness difference (0-100)
    min_lum_distance: float = 0.0

    def clamped(self) -> PairThresholds:
        """Copy with every value forced into its declared range."""
        return PairThresholds(
            min_bg_contrast=max(1.0, float(self.min_bg_contrast)),
            min_hue_distance=_clamp(self.min_hue_distance, 180.0),
            min_sat_distance=_clamp(self.min_sat_distance, 100.0),
            min_lum_distance=_clamp(self.min_lum_distance, 100.0),
        )


def _clamp(value: float, upper: float) -> float:
    return min(max(0.0, float(value)), upper)


def active_colors(
    palette: Iterable[ColorEntry],
    selected_ids: AbstractSet[str],
    cache: Mapping[str, CachedColorData],
) -> list[ColorEntry]:
    """
    Selected palette entries, in palette order.

    Ids that are selected but missing from the palette are ignored, as are
    palette entries missing from the cache. Repeated ids are taken once.
    """
    seen: set[str] = set()
    result = []
    for entry in palette:
        if entry.id in seen or entry.id not in selected_ids or entry.id not in cache:
            continue
        seen.add(entry.id)
        result.append(entry)
    return result


def enumerate_pairs(
    palette: Iterable[ColorEntry],
    selected_ids: AbstractSet[str],
    cache: Mapping[str, CachedColorData],
    thresholds: PairThresholds | None = None,
    exclude_inverse: bool = False,
) -> list[Combination]:
    """
    Enumerate all admissible combinations of the selected colors.

    A pair (c1, c2) is admitted when both colors pass text contrast and:
    - the ids differ and the RGB values differ
    - background contrast is > 1.0 and >= min_bg_contrast
    - hue, saturation and lightness distances reach their minimums

    Args:
        palette: Ordered palette entries
        selected_ids: Ids of the active colors
        cache: Color cache for this palette (see ``color_cache``)
        thresholds: Pair admission thresholds (defaults admit everything
            distinguishable)
        exclude_inverse: If True, emit only (c1, c2); otherwise also emit
            the mirror (c2, c1) right after it

    Returns:
        List of Combination in deterministic emission order
    """
    th = (thresholds or PairThresholds()).clamped()

    valid = [
        entry for entry in active_colors(palette, selected_ids, cache)
        if cache[entry.id].passes_text_contrast
    ]
    n = len(valid)
    if n < 2:
        logger.debug("Pair enumeration skipped: %d valid colors", n)
        return []

    data = [cache[entry.id] for entry in valid]
    rgb = np.array([d.rgb.as_tuple() for d in data], dtype=np.int64)
    lum = np.array([d.luminance for d in data], dtype=np.float64)
    hue = np.array([d.hsl.h for d in data], dtype=np.float64)
    sat = np.array([d.hsl.s for d in data], dtype=np.float64)
    light = np.array([d.hsl.l for d in data], dtype=np.float64)

    bg_contrast = contrast_matrix(lum)
    same_rgb = np.all(rgb[:, np.newaxis, :] == rgb[np.newaxis, :, :], axis=2)

    admitted = (
        ~same_rgb
        & (bg_contrast > 1.0)
        & (bg_contrast >= th.min_bg_contrast)
        & (hue_distance_matrix(hue) >= th.min_hue_distance)
        & (abs_difference_matrix(sat) >= th.min_sat_distance)
        & (abs_difference_matrix(light) >= th.min_lum_distance)
    )
    # Upper triangle only: each unordered pair once, i < j
    admitted &= np.triu(np.ones((n, n), dtype=bool), k=1)

    candidates: list[Combination] = []
    for i, j in np.argwhere(admitted):
        c1, c2 = valid[i], valid[j]
        combo = Combination(c1=c1, c2=c2, hsl1=data[i].hsl, hsl2=data[j].hsl)
        candidates.append(combo)
        if not exclude_inverse:
            candidates.append(combo.inverse())

    logger.debug(
        "Enumerated %d candidates from %d valid colors (exclude_inverse=%s)",
        len(candidates), n, exclude_inverse,
    )
    return candidates
