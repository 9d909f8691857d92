# Copyright (c) 2026 Combinator
# SPDX-License-Identifier: MIT

"""
Schema definitions for palette combinations.

All types in this module are immutable (frozen dataclasses).
"""

from combinator.schema.combination import (
    CONTRAST_THRESHOLDS,
    HSL,
    RGB,
    CachedColorData,
    ColorEntry,
    Combination,
    CombinationResult,
    ContrastLevel,
)

__all__ = [
    # Contrast levels
    "ContrastLevel",
    "CONTRAST_THRESHOLDS",
    # Color types
    "RGB",
    "HSL",
    "ColorEntry",
    "CachedColorData",
    # Pair types
    "Combination",
    "CombinationResult",
]
