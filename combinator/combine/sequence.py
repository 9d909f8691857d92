# Copyright (c) 2026 Combinator
# SPDX-License-Identifier: MIT

"""
Display sequencing for accepted combinations.

Two strategies:
1. Tiered (default): quality tiers by internal contrast, shuffled, then a
   round-robin greedy pick scored against the recent neighbourhood
2. Nearest: plain greedy walk maximizing distance to the previous item

Both are constructive heuristics, not exact optima. Sequencing only
reorders: the output is always a permutation of the input.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

import numpy as np

from combinator.schema import Combination
from combinator.combine.colorspace import color_distance
from combinator.combine.diversity import pair_distance

logger = logging.getLogger(__name__)


class SequenceMode(Enum):
    """Sequencing strategy."""
    TIERED = "tiered"    # quality tiers + neighbourhood scoring
    NEAREST = "nearest"  # previous-item greedy walk (fast mode)


@dataclass(frozen=True)
class SequenceConfig:
    """Configuration for display sequencing."""

    # Items beyond this are appended unsequenced
    max_items: int = 500

    # Number of quality tiers (4 = quartiles)
    tiers: int = 4

    # Candidates considered per pick, taken from the head of a tier
    lookahead: int = 20

    # Placed items scored against, most recent first
    history: int = 6

    # Weight multiplier per step back in history (1, 0.5, 0.25, ...)
    decay: float = 0.5

    # Placed items whose color ids count as "recently used"
    recent_window: int = 8

    # Score bonus per member id not used recently (either role)
    fresh_bonus: float = 15.0


def internal_distance(combo: Combination) -> float:
    """Distance between the two members of a combination."""
    return color_distance(combo.hsl1, combo.hsl2)


def quality_tiers(
    combinations: Sequence[Combination],
    n_tiers: int = 4,
) -> list[list[Combination]]:
    """
    Split combinations into tiers by internal distance.

    Tier 0 holds the most internally diverse pairs. Ordering inside a tier
    follows descending internal distance; ties keep input order.
    """
    if not combinations:
        return []
    n_tiers = max(1, min(n_tiers, len(combinations)))
    scores = np.array([internal_distance(c) for c in combinations], dtype=np.float64)
    order = np.argsort(-scores, kind="stable")
    return [
        [combinations[i] for i in chunk]
        for chunk in np.array_split(order, n_tiers)
    ]


def _neighbourhood_score(
    candidate: Combination,
    placed: Sequence[Combination],
    recent_ids: set[str],
    weights: Sequence[float],
    fresh_bonus: float,
) -> float:
    score = 0.0
    if placed:
        total = 0.0
        used = 0.0
        for k, weight in enumerate(weights, start=1):
            if k > len(placed):
                break
            total += weight * pair_distance(candidate, placed[-k], cross=True)
            used += weight
        score = total / used
    if candidate.c1.id not in recent_ids:
        score += fresh_bonus
    if candidate.c2.id not in recent_ids:
        score += fresh_bonus
    return score


def tiered_sort(
    combinations: Sequence[Combination],
    config: Optional[SequenceConfig] = None,
    rng: Optional[np.random.Generator] = None,
) -> list[Combination]:
    """
    Quality-tiered, neighbourhood-aware ordering.

    Steps:
    1. Sequence at most ``max_items``; the rest is appended afterwards
    2. Partition into quality tiers by internal distance
    3. Shuffle each tier
    4. Round-robin over non-empty tiers; from the first ``lookahead`` items
       of the current tier pick the best neighbourhood score
    5. Append leftover tier contents, then the overflow

    Args:
        combinations: Items to order
        config: Sequencing settings (uses defaults if None)
        rng: Random source for the per-tier shuffle

    Returns:
        New list, a permutation of ``combinations``
    """
    if len(combinations) <= 1:
        return list(combinations)

    cfg = config or SequenceConfig()
    rng = rng if rng is not None else np.random.default_rng()

    cap = max(1, cfg.max_items)
    head = list(combinations[:cap])
    overflow = list(combinations[cap:])

    tiers = []
    for tier in quality_tiers(head, cfg.tiers):
        tiers.append([tier[i] for i in rng.permutation(len(tier))])

    weights = [cfg.decay ** k for k in range(max(1, cfg.history))]
    lookahead = max(1, cfg.lookahead)

    placed: list[Combination] = []
    recent: deque[Combination] = deque(maxlen=max(0, cfg.recent_window))
    turn = 0

    while len(placed) < cap and any(tiers):
        while not tiers[turn % len(tiers)]:
            turn += 1
        tier = tiers[turn % len(tiers)]

        recent_ids = {color_id for combo in recent for color_id in combo.ids}
        best_idx = 0
        best_score = -1.0
        for idx, candidate in enumerate(tier[:lookahead]):
            score = _neighbourhood_score(
                candidate, placed, recent_ids, weights, cfg.fresh_bonus
            )
            if score > best_score:
                best_score = score
                best_idx = idx

        chosen = tier.pop(best_idx)
        placed.append(chosen)
        recent.append(chosen)
        turn += 1

    leftover = [combo for tier in tiers for combo in tier]
    logger.debug(
        "Tiered sort placed %d, leftover %d, overflow %d",
        len(placed), len(leftover), len(overflow),
    )
    return placed + leftover + overflow


def nearest_neighbor_sort(
    combinations: Sequence[Combination],
    config: Optional[SequenceConfig] = None,
) -> list[Combination]:
    """
    Greedy walk: each next item is the one farthest from the previous.

    Distance sums both member distances under the closer of the direct and
    cross pairings. Cheaper than the tiered sort and fully deterministic;
    suited to small result sets.
    """
    if len(combinations) <= 1:
        return list(combinations)

    cfg = config or SequenceConfig()
    pool = list(combinations)
    ordered = [pool.pop(0)]
    limit = min(max(1, cfg.max_items), len(combinations))

    while pool and len(ordered) < limit:
        last = ordered[-1]
        best_idx = 0
        best_dist = -1.0
        for idx, candidate in enumerate(pool):
            dist = 2.0 * pair_distance(last, candidate, cross=True)
            if dist > best_dist:
                best_dist = dist
                best_idx = idx
        ordered.append(pool.pop(best_idx))

    return ordered + pool


def sequence_combinations(
    combinations: Sequence[Combination],
    *,
    mode: SequenceMode = SequenceMode.TIERED,
    config: Optional[SequenceConfig] = None,
    seed: Optional[int] = 42,
    rng: Optional[np.random.Generator] = None,
) -> list[Combination]:
    """
    Order combinations for display.

    Args:
        combinations: Accepted combinations
        mode: TIERED (default) or NEAREST
        config: Sequencing settings
        seed: Seed for the shuffle when ``rng`` is not given
            (None for a fresh, non-reproducible order)
        rng: Explicit random source; overrides ``seed``

    Returns:
        New list, a permutation of ``combinations``. Empty and
        single-item inputs come back unchanged.
    """
    if len(combinations) <= 1:
        return list(combinations)

    if mode == SequenceMode.NEAREST:
        return nearest_neighbor_sort(combinations, config)

    if rng is None:
        rng = np.random.default_rng(seed)
    return tiered_sort(combinations, config, rng)
