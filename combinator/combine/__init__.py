# Copyright (c) 2026 Combinator
# SPDX-License-Identifier: MIT

"""
Combination pipeline for Combinator.

Contrast cache → pair enumeration → diversity filter → sequencing.
All operations are pure and deterministic for a fixed seed.
"""

from combinator.combine.generate import GenerateOptions, generate_combinations

__all__ = ["generate_combinations", "GenerateOptions"]
