# Copyright (c) 2026 Combinator
# SPDX-License-Identifier: MIT

"""
Diversity filter.

Greedy pass that drops combinations too similar to ones already kept.
Applied AFTER enumeration, BEFORE sequencing: it decides membership,
the sequencer only decides order.
"""

from __future__ import annotations

import logging
from typing import Sequence

from combinator.schema import Combination
from combinator.combine.colorspace import color_distance

logger = logging.getLogger(__name__)


def pair_distance(a: Combination, b: Combination, cross: bool = False) -> float:
    """
    Distance between two combinations.

    Direct pairing compares role 1 with role 1 and role 2 with role 2.
    With ``cross`` the role-swapped pairing is also considered and the
    smaller of the two averages is returned, so a pair and its mirror
    are at distance 0.

    Args:
        a, b: Combinations to compare
        cross: Also consider the cross pairing

    Returns:
        Average member distance (lower = more similar)
    """
    direct = (color_distance(a.hsl1, b.hsl1) + color_distance(a.hsl2, b.hsl2)) / 2.0
    if not cross:
        return direct
    swapped = (color_distance(a.hsl1, b.hsl2) + color_distance(a.hsl2, b.hsl1)) / 2.0
    return min(direct, swapped)


def filter_diverse(
    candidates: Sequence[Combination],
    min_total_distance: float,
    exclude_inverse: bool = False,
) -> list[Combination]:
    """
    Keep combinations at least ``min_total_distance`` from every kept one.

    Candidates are scanned in order; the first is always kept. When
    inverses are retained (``exclude_inverse`` False) only the direct
    orientation is compared, so a pair and its mirror can both survive.

    Args:
        candidates: Combinations in enumeration order
        min_total_distance: Minimum pair distance; <= 0 disables the filter
        exclude_inverse: Treat a pair and its mirror as the same entity

    Returns:
        New list of kept combinations, in candidate order
    """
    if min_total_distance <= 0 or not candidates:
        return list(candidates)

    kept: list[Combination] = []
    for candidate in candidates:
        if all(
            pair_distance(candidate, other, cross=exclude_inverse) >= min_total_distance
            for other in kept
        ):
            kept.append(candidate)

    logger.debug(
        "Diversity filter kept %d of %d (min distance %.1f)",
        len(kept), len(candidates), min_total_distance,
    )
    return kept
