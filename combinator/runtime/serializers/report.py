# Copyright (c) 2026 Combinator
# SPDX-License-Identifier: MIT

"""
Plain-text report serializer.

Lists combinations one per line with their background contrast, headed
by an honest "Showing N of M" count.
"""

from __future__ import annotations

from typing import Optional, Union

from combinator.schema import HSL, RGB, CombinationResult
from combinator.combine.colorspace import contrast, hex_to_rgb


def to_report(
    result: CombinationResult,
    *,
    text_color: Optional[Union[RGB, str]] = None,
    limit: Optional[int] = None,
    describe: bool = False,
) -> str:
    """Serialize a CombinationResult as a plain-text listing.

    Args:
        result: The CombinationResult to serialize.
        text_color: If given, append each member's contrast against it.
        limit: Maximum number of combination lines (None = all).
        describe: Append an approximate color name for each member.

    Returns:
        Multi-line string.

    Example::

        Showing 2 of 2 combinations
          1. tundra-magenta (#FF00FF) / tundra-cyan (#00FFFF)  bg 1.24:1
          2. tundra-cyan (#00FFFF) / tundra-magenta (#FF00FF)  bg 1.24:1
    """
    combos = result.combinations if limit is None else result.combinations[:limit]

    lines = [f"Showing {len(combos)} of {result.total_count} combinations"]

    text_rgb = None
    if text_color is not None:
        text_rgb = text_color if isinstance(text_color, RGB) else hex_to_rgb(text_color)

    for i, combo in enumerate(combos, 1):
        rgb1 = hex_to_rgb(combo.c1.hex)
        rgb2 = hex_to_rgb(combo.c2.hex)
        line = (
            f"{i:>3}. {combo.c1.id} ({rgb1.hex}) / {combo.c2.id} ({rgb2.hex})"
            f"  bg {contrast(rgb1, rgb2):.2f}:1"
        )
        if text_rgb is not None:
            line += (
                f"  text {contrast(rgb1, text_rgb):.2f}:1"
                f" / {contrast(rgb2, text_rgb):.2f}:1"
            )
        if describe:
            line += f"  [{describe_hsl(combo.hsl1)} / {describe_hsl(combo.hsl2)}]"
        lines.append(line)

    if not combos:
        lines.append("  (no combinations)")

    passing = sum(1 for ok in result.passes_contrast.values() if ok)
    lines.append(
        f"{passing} of {len(result.passes_contrast)} palette colors pass text contrast"
    )
    return "\n".join(lines)


def describe_hsl(hsl: HSL) -> str:
    """Generate a short human-readable color name."""
    if hsl.s < 10.0:
        if hsl.l > 90.0:
            return "White"
        if hsl.l < 10.0:
            return "Black"
        if hsl.l < 35.0:
            return "Dark gray"
        if hsl.l > 75.0:
            return "Light gray"
        return "Gray"

    name = _hue_to_name(hsl.h)
    if hsl.l > 75.0:
        return f"Light {name.lower()}"
    if hsl.l < 25.0:
        return f"Dark {name.lower()}"
    return name


def _hue_to_name(hue: float) -> str:
    """Convert HSL hue angle to an approximate color name.

    HSL hue wheel (approximate ranges used here):
      0-14, 345-359: Red
      15-44: Orange
      45-69: Yellow
      70-159: Green
      160-199: Cyan
      200-254: Blue
      255-289: Purple
      290-344: Pink
    """
    if hue < 15 or hue >= 345:
        return "Red"
    elif hue < 45:
        return "Orange"
    elif hue < 70:
        return "Yellow"
    elif hue < 160:
        return "Green"
    elif hue < 200:
        return "Cyan"
    elif hue < 255:
        return "Blue"
    elif hue < 290:
        return "Purple"
    else:
        return "Pink"
