# Copyright (c) 2026 Combinator
# SPDX-License-Identifier: MIT

"""
Combinator -- accessible two-tone background combinations from a palette.

Enumerates color pairs that both carry the overlaid text at a chosen
contrast level, prunes near-duplicates, and orders the survivors so
neighbouring items look different.

Quick start::

    from combinator import generate_combinations
    from combinator.palettes import TUNDRA_COLORS

    result = generate_combinations(
        TUNDRA_COLORS,
        {c.id for c in TUNDRA_COLORS},
        text_color="#000000",
        contrast_level="A",
        min_bg_contrast=1.4,
    )
    result.total_count
    result.combinations[0].c1.hex
"""

from __future__ import annotations

import logging

__version__ = "1.0.0"

from combinator.combine import GenerateOptions, generate_combinations
from combinator.combine.sequence import SequenceConfig, SequenceMode
from combinator.schema import (
    HSL,
    RGB,
    ColorEntry,
    Combination,
    CombinationResult,
    ContrastLevel,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Core API
    "generate_combinations",
    "GenerateOptions",
    "CombinationResult",
    # Types (commonly needed)
    "ColorEntry",
    "Combination",
    "ContrastLevel",
    "RGB",
    "HSL",
    # Sequencing
    "SequenceMode",
    "SequenceConfig",
    # Version
    "__version__",
]
