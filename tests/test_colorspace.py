# Copyright (c) 2026 Combinator
# SPDX-License-Identifier: MIT

"""Tests for color math (hex ↔ RGB ↔ HSL, luminance, contrast, distance)."""

import itertools
import math

import numpy as np
import pytest

from combinator.schema import HSL, RGB
from combinator.combine.colorspace import (
    abs_difference_matrix,
    circular_hue_distance,
    color_distance,
    contrast,
    contrast_matrix,
    hex_to_rgb,
    hue_distance_matrix,
    luminance,
    luminance_batch,
    rgb_to_hex,
    rgb_to_hsl,
)


SAMPLE_RGBS = [
    RGB(0, 0, 0),
    RGB(255, 255, 255),
    RGB(255, 0, 0),
    RGB(0, 255, 0),
    RGB(0, 0, 255),
    RGB(128, 128, 128),
    RGB(12, 200, 99),
    RGB(250, 238, 33),
    RGB(75, 138, 196),
]


class TestHexConversion:

    def test_hex_to_rgb(self):
        assert hex_to_rgb("#FF8000") == RGB(255, 128, 0)

    def test_hex_without_hash(self):
        assert hex_to_rgb("0B00F5") == RGB(11, 0, 245)

    def test_lowercase_hex(self):
        assert hex_to_rgb("#f8fafc") == RGB(248, 250, 252)

    def test_rgb_to_hex_uppercase(self):
        assert rgb_to_hex(RGB(11, 0, 245)) == "#0B00F5"

    def test_roundtrip(self):
        for rgb in SAMPLE_RGBS:
            assert hex_to_rgb(rgb_to_hex(rgb)) == rgb


class TestRGBToHSL:

    def test_primary_red(self):
        hsl = rgb_to_hsl(RGB(255, 0, 0))
        assert hsl.h == pytest.approx(0.0)
        assert hsl.s == pytest.approx(100.0)
        assert hsl.l == pytest.approx(50.0)

    def test_primary_green(self):
        assert rgb_to_hsl(RGB(0, 255, 0)).h == pytest.approx(120.0)

    def test_primary_blue(self):
        assert rgb_to_hsl(RGB(0, 0, 255)).h == pytest.approx(240.0)

    def test_yellow(self):
        hsl = rgb_to_hsl(RGB(255, 255, 0))
        assert hsl.h == pytest.approx(60.0)
        assert hsl.s == 100.0
        assert hsl.l == 50.0

    def test_magenta_wraps_below_360(self):
        hsl = rgb_to_hsl(RGB(255, 0, 255))
        assert hsl.h == pytest.approx(300.0)

    def test_gray_has_no_saturation(self):
        for v in (0, 1, 64, 128, 254, 255):
            hsl = rgb_to_hsl(RGB(v, v, v))
            assert hsl.s == 0.0
            assert hsl.h == 0.0

    def test_white_and_black_lightness(self):
        assert rgb_to_hsl(RGB(255, 255, 255)).l == 100.0
        assert rgb_to_hsl(RGB(0, 0, 0)).l == 0.0

    def test_ranges(self):
        for rgb in SAMPLE_RGBS:
            hsl = rgb_to_hsl(rgb)
            assert 0.0 <= hsl.h < 360.0
            assert 0.0 <= hsl.s <= 100.0
            assert 0.0 <= hsl.l <= 100.0


class TestLuminanceContrast:

    def test_black_luminance_zero(self):
        assert luminance(RGB(0, 0, 0)) == 0.0

    def test_white_luminance_one(self):
        assert luminance(RGB(255, 255, 255)) == pytest.approx(1.0)

    def test_linear_segment(self):
        """Channel values at or below the knee use the linear segment."""
        expected = 0.7152 * (10 / 255) / 12.92
        assert luminance(RGB(0, 10, 0)) == pytest.approx(expected, abs=1e-12)

    def test_black_on_white(self):
        assert contrast(RGB(0, 0, 0), RGB(255, 255, 255)) == pytest.approx(21.0)

    def test_red_on_white_below_aa(self):
        ratio = contrast(RGB(255, 0, 0), RGB(255, 255, 255))
        assert 3.0 < ratio < 4.5

    def test_identity_is_one(self):
        for rgb in SAMPLE_RGBS:
            assert contrast(rgb, rgb) == 1.0

    def test_symmetry(self):
        for a, b in itertools.product(SAMPLE_RGBS, repeat=2):
            assert contrast(a, b) == contrast(b, a)

    def test_never_below_one(self):
        for a, b in itertools.product(SAMPLE_RGBS, repeat=2):
            assert contrast(a, b) >= 1.0


class TestDistance:

    def test_hue_distance_wraps(self):
        assert circular_hue_distance(10.0, 350.0) == pytest.approx(20.0)

    def test_hue_distance_opposite(self):
        assert circular_hue_distance(0.0, 180.0) == 180.0

    def test_hue_distance_symmetric_and_bounded(self):
        hues = [0.0, 1.5, 45.0, 90.0, 179.9, 180.0, 270.0, 359.9]
        for h1, h2 in itertools.product(hues, repeat=2):
            d = circular_hue_distance(h1, h2)
            assert d == circular_hue_distance(h2, h1)
            assert 0.0 <= d <= 180.0

    def test_identical_colors_zero(self):
        hsl = HSL(200.0, 40.0, 60.0)
        assert color_distance(hsl, hsl) == 0.0

    def test_maximum_distance(self):
        d = color_distance(HSL(0.0, 0.0, 0.0), HSL(180.0, 100.0, 100.0))
        assert d == pytest.approx(math.sqrt(3) * 100.0)

    def test_hue_axis_normalized(self):
        """A full 180° hue swing weighs the same as a full saturation swing."""
        hue_only = color_distance(HSL(0.0, 50.0, 50.0), HSL(180.0, 50.0, 50.0))
        sat_only = color_distance(HSL(0.0, 0.0, 50.0), HSL(0.0, 100.0, 50.0))
        assert hue_only == pytest.approx(sat_only)


class TestBatchHelpers:
    """Batch matrices must equal the scalar functions exactly."""

    def test_luminance_batch_matches_scalar(self):
        lum = luminance_batch(SAMPLE_RGBS)
        assert lum.shape == (len(SAMPLE_RGBS),)
        for i, rgb in enumerate(SAMPLE_RGBS):
            assert lum[i] == luminance(rgb)

    def test_contrast_matrix_matches_scalar(self):
        m = contrast_matrix(luminance_batch(SAMPLE_RGBS))
        for i, j in itertools.product(range(len(SAMPLE_RGBS)), repeat=2):
            assert m[i, j] == contrast(SAMPLE_RGBS[i], SAMPLE_RGBS[j])

    def test_contrast_matrix_diagonal(self):
        m = contrast_matrix(luminance_batch(SAMPLE_RGBS))
        np.testing.assert_array_equal(np.diag(m), np.ones(len(SAMPLE_RGBS)))

    def test_hue_matrix_matches_scalar(self):
        hues = np.array([0.0, 30.0, 200.0, 350.0])
        m = hue_distance_matrix(hues)
        for i, j in itertools.product(range(4), repeat=2):
            assert m[i, j] == circular_hue_distance(hues[i], hues[j])

    def test_abs_difference_matrix(self):
        m = abs_difference_matrix(np.array([0.0, 25.0, 100.0]))
        np.testing.assert_array_equal(
            m, np.array([[0, 25, 100], [25, 0, 75], [100, 75, 0]], dtype=np.float64)
        )
