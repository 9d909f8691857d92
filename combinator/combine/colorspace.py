# Copyright (c) 2026 Combinator
# SPDX-License-Identifier: MIT

"""
Color math: hex ↔ RGB ↔ HSL, relative luminance, contrast, distance.

References:
- Relative luminance / contrast ratio: WCAG 2.x definitions
- HSL: standard min/max conversion

Scalar functions operate on schema types. The batch helpers operate on
NumPy arrays of values already produced by the scalar functions and only
combine them with exact arithmetic (+, -, /, abs, min, max), so a batch
result always equals the corresponding scalar result.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray

from combinator.schema import HSL, RGB


# =============================================================================
# Hex ↔ RGB ↔ HSL
# =============================================================================


def hex_to_rgb(hex_color: str) -> RGB:
    """
    Convert hex color string to RGB.

    Args:
        hex_color: Hex string like "#3941C8" or "3941C8"

    Returns:
        RGB with 8-bit channels
    """
    hex_color = hex_color.lstrip("#")
    r = int(hex_color[0:2], 16)
    g = int(hex_color[2:4], 16)
    b = int(hex_color[4:6], 16)
    return RGB(r, g, b)


def rgb_to_hex(rgb: RGB) -> str:
    """Format RGB as "#RRGGBB"."""
    return rgb.hex


def rgb_to_hsl(rgb: RGB) -> HSL:
    """
    Convert RGB to HSL.

    Gray colors (max == min) have no hue: h and s are both 0.

    Returns:
        HSL with h in [0, 360), s and l in [0, 100]
    """
    r, g, b = rgb.r / 255.0, rgb.g / 255.0, rgb.b / 255.0
    hi = max(r, g, b)
    lo = min(r, g, b)
    l = (hi + lo) / 2.0

    if hi == lo:
        return HSL(h=0.0, s=0.0, l=l * 100.0)

    d = hi - lo
    s = d / (2.0 - hi - lo) if l > 0.5 else d / (hi + lo)

    if hi == r:
        h = (g - b) / d + (6.0 if g < b else 0.0)
    elif hi == g:
        h = (b - r) / d + 2.0
    else:
        h = (r - g) / d + 4.0
    h /= 6.0

    return HSL(h=(h * 360.0) % 360.0, s=s * 100.0, l=l * 100.0)


# =============================================================================
# Luminance & Contrast
# =============================================================================


def _linearize(channel: int) -> float:
    """
    sRGB 8-bit channel → linear light.

    Piecewise curve:
    - For values <= 0.03928: value/12.92
    - Otherwise: ((value + 0.055) / 1.055) ^ 2.4
    """
    c = channel / 255.0
    if c <= 0.03928:
        return c / 12.92
    return math.pow((c + 0.055) / 1.055, 2.4)


def luminance(rgb: RGB) -> float:
    """Relative luminance of an sRGB color, 0.0 (black) to 1.0 (white)."""
    return (
        0.2126 * _linearize(rgb.r)
        + 0.7152 * _linearize(rgb.g)
        + 0.0722 * _linearize(rgb.b)
    )


def contrast_from_luminance(l1: float, l2: float) -> float:
    """Contrast ratio of two relative luminances."""
    lighter = max(l1, l2)
    darker = min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)


def contrast(rgb1: RGB, rgb2: RGB) -> float:
    """
    Contrast ratio between two colors.

    Always >= 1.0 and symmetric in its arguments. Identical colors give
    exactly 1.0; black on white gives 21.0.
    """
    return contrast_from_luminance(luminance(rgb1), luminance(rgb2))


# =============================================================================
# Perceptual Distance
# =============================================================================


def circular_hue_distance(h1: float, h2: float) -> float:
    """Shortest distance between two hues on the color wheel, in [0, 180]."""
    d = abs(h1 - h2)
    return min(d, 360.0 - d)


def color_distance(hsl1: HSL, hsl2: HSL) -> float:
    """
    Perceptual distance between two HSL colors.

    Euclidean distance over three axes scaled to 0-100:
    - hue: circular distance (0-180) divided by 1.8
    - saturation: absolute difference
    - lightness: absolute difference

    Returns:
        Distance in [0, ~173.2] (lower = more similar)
    """
    hue = circular_hue_distance(hsl1.h, hsl2.h) / 1.8
    sat = abs(hsl1.s - hsl2.s)
    light = abs(hsl1.l - hsl2.l)
    return math.sqrt(hue * hue + sat * sat + light * light)


# =============================================================================
# Batch helpers (vectorized pairwise matrices)
# =============================================================================


def luminance_batch(rgbs: list[RGB]) -> NDArray[np.float64]:
    """
    Relative luminance for a sequence of colors.

    Computed with the scalar function per color so values match
    ``luminance`` exactly.
    """
    return np.array([luminance(rgb) for rgb in rgbs], dtype=np.float64)


def contrast_matrix(lum: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Pairwise contrast ratios.

    Args:
        lum: Array of shape (N,) with relative luminances

    Returns:
        Symmetric array of shape (N, N); the diagonal is 1.0
    """
    lum = np.asarray(lum, dtype=np.float64)
    lighter = np.maximum(lum[:, np.newaxis], lum[np.newaxis, :])
    darker = np.minimum(lum[:, np.newaxis], lum[np.newaxis, :])
    return (lighter + 0.05) / (darker + 0.05)


def hue_distance_matrix(hues: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Pairwise circular hue distances.

    Args:
        hues: Array of shape (N,) with hues in degrees

    Returns:
        Symmetric array of shape (N, N) with values in [0, 180]
    """
    hues = np.asarray(hues, dtype=np.float64)
    d = np.abs(hues[:, np.newaxis] - hues[np.newaxis, :])
    return np.minimum(d, 360.0 - d)


def abs_difference_matrix(values: NDArray[np.float64]) -> NDArray[np.float64]:
    """Pairwise absolute differences for a 1-D array."""
    values = np.asarray(values, dtype=np.float64)
    return np.abs(values[:, np.newaxis] - values[np.newaxis, :])
