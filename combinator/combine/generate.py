# Copyright (c) 2026 Combinator
# SPDX-License-Identifier: MIT

"""
Main combination generation API.

This is the primary entry point for the combination pipeline.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import AbstractSet, Iterable, Optional, Union

import numpy as np

from combinator.schema import RGB, ColorEntry, CombinationResult, ContrastLevel
from combinator.combine.cache import color_cache, passes_contrast_map
from combinator.combine.colorspace import hex_to_rgb
from combinator.combine.diversity import filter_diverse
from combinator.combine.pairs import PairThresholds, enumerate_pairs
from combinator.combine.sequence import (
    SequenceConfig,
    SequenceMode,
    sequence_combinations,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerateOptions:
    """Keyword settings for ``generate_combinations``, bundled."""

    min_bg_contrast: float = 1.0
    min_hue_distance: float = 0.0
    min_sat_distance: float = 0.0
    min_lum_distance: float = 0.0
    min_total_distance: float = 0.0
    diverse_sort: bool = True
    exclude_inverse: bool = False
    sequence_mode: SequenceMode = SequenceMode.TIERED
    max_results: int = 0

    @property
    def thresholds(self) -> PairThresholds:
        return PairThresholds(
            min_bg_contrast=self.min_bg_contrast,
            min_hue_distance=self.min_hue_distance,
            min_sat_distance=self.min_sat_distance,
            min_lum_distance=self.min_lum_distance,
        )


def _as_rgb(color: Union[RGB, str]) -> RGB:
    if isinstance(color, RGB):
        return color
    return hex_to_rgb(color)


def _as_level(level: Union[ContrastLevel, str]) -> ContrastLevel:
    if isinstance(level, ContrastLevel):
        return level
    try:
        return ContrastLevel(level)
    except ValueError:
        raise ValueError(
            f"Unknown contrast level {level!r}, expected one of "
            f"{[lvl.value for lvl in ContrastLevel]}"
        ) from None


def generate_combinations(
    palette: Iterable[ColorEntry],
    selected_ids: AbstractSet[str],
    text_color: Union[RGB, str],
    contrast_level: Union[ContrastLevel, str] = ContrastLevel.A,
    *,
    options: Optional[GenerateOptions] = None,
    min_bg_contrast: float = 1.0,  # Contrast between the two backgrounds
    min_hue_distance: float = 0.0,  # Degrees, 0-180
    min_sat_distance: float = 0.0,  # 0-100
    min_lum_distance: float = 0.0,  # 0-100
    min_total_distance: float = 0.0,  # 0 = diversity filter off
    diverse_sort: bool = True,  # Reorder for display
    exclude_inverse: bool = False,  # Treat (a, b) and (b, a) as one
    sequence_mode: SequenceMode = SequenceMode.TIERED,
    sequence_config: Optional[SequenceConfig] = None,
    max_results: int = 0,  # 0 = return everything
    seed: Optional[int] = 42,
    rng: Optional[np.random.Generator] = None,
) -> CombinationResult:
    """
    Generate, filter and order background color combinations.

    Pipeline:
    1. Contrast cache for (palette, text color, level), memoized
    2. Pair enumeration over the selected colors passing text contrast
    3. Diversity filter (membership)
    4. Sequencing (display order only)
    5. Optional display cap

    Args:
        palette: Ordered palette entries
        selected_ids: Ids of the active colors; unknown ids are ignored
        text_color: Text color as RGB or hex string
        contrast_level: ContrastLevel or "A" / "AA" / "AAA"
        options: Bundled settings; when given, overrides the keyword
            thresholds below
        min_bg_contrast: Minimum contrast between the two backgrounds
        min_hue_distance: Minimum circular hue distance
        min_sat_distance: Minimum saturation difference
        min_lum_distance: Minimum lightness difference
        min_total_distance: Diversity filter threshold
        diverse_sort: If False, keep enumeration order
        exclude_inverse: Emit each unordered pair once and compare pairs
            under both orientations
        sequence_mode: TIERED (default) or NEAREST (fast mode)
        sequence_config: Sequencer settings
        max_results: Cap on returned combinations (0 = no cap);
            ``total_count`` is unaffected
        seed: Shuffle seed used when ``rng`` is not given
        rng: Explicit random source for the sequencer

    Returns:
        CombinationResult with the ordered combinations, the count after
        the diversity filter, and per-id text contrast outcomes

    Example:
        >>> from combinator import generate_combinations
        >>> from combinator.palettes import TUNDRA_COLORS
        >>> result = generate_combinations(
        ...     TUNDRA_COLORS, {c.id for c in TUNDRA_COLORS}, "#000000", "A",
        ...     min_bg_contrast=1.4,
        ... )
        >>> result.total_count >= len(result.combinations)
        True
    """
    if options is None:
        options = GenerateOptions(
            min_bg_contrast=min_bg_contrast,
            min_hue_distance=min_hue_distance,
            min_sat_distance=min_sat_distance,
            min_lum_distance=min_lum_distance,
            min_total_distance=min_total_distance,
            diverse_sort=diverse_sort,
            exclude_inverse=exclude_inverse,
            sequence_mode=sequence_mode,
            max_results=max_results,
        )

    palette = tuple(palette)
    text_rgb = _as_rgb(text_color)
    level = _as_level(contrast_level)

    cache = color_cache(palette, text_rgb, level)

    candidates = enumerate_pairs(
        palette,
        selected_ids,
        cache,
        options.thresholds,
        exclude_inverse=options.exclude_inverse,
    )
    accepted = filter_diverse(
        candidates,
        options.min_total_distance,
        exclude_inverse=options.exclude_inverse,
    )

    if options.diverse_sort:
        ordered = sequence_combinations(
            accepted,
            mode=options.sequence_mode,
            config=sequence_config,
            seed=seed,
            rng=rng,
        )
    else:
        ordered = accepted

    if options.max_results > 0:
        ordered = ordered[:options.max_results]

    logger.debug(
        "Generated %d combinations (%d candidates, %d accepted)",
        len(ordered), len(candidates), len(accepted),
    )
    return CombinationResult(
        combinations=tuple(ordered),
        total_count=len(accepted),
        passes_contrast=passes_contrast_map(cache),
    )
