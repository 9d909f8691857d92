# Copyright (c) 2026 Combinator
# SPDX-License-Identifier: MIT

"""Tests for candidate pair enumeration."""

import pytest

from combinator.schema import RGB, ColorEntry, ContrastLevel
from combinator.combine.cache import build_color_cache
from combinator.combine.colorspace import contrast, hex_to_rgb
from combinator.combine.pairs import PairThresholds, active_colors, enumerate_pairs
from combinator.palettes import TAILWIND_COLORS


def _entry(color_id, hex):
    return ColorEntry(name=color_id, shade="base", hex=hex, id=color_id)


def _enumerate(palette, text="#000000", level=ContrastLevel.A, selected=None, **kwargs):
    cache = build_color_cache(palette, hex_to_rgb(text), level)
    if selected is None:
        selected = {c.id for c in palette}
    return enumerate_pairs(palette, selected, cache, **kwargs)


def _ids(combos):
    return [combo.ids for combo in combos]


# White, yellow and cyan all carry black text at level A
W = _entry("W", "#FFFFFF")
Y = _entry("Y", "#FFFF00")
C = _entry("C", "#00FFFF")
LIGHTS = (W, Y, C)


class TestEmission:

    def test_order_forward_then_inverse(self):
        combos = _enumerate(LIGHTS)
        assert _ids(combos) == [
            ("W", "Y"), ("Y", "W"),
            ("W", "C"), ("C", "W"),
            ("Y", "C"), ("C", "Y"),
        ]

    def test_exclude_inverse(self):
        combos = _enumerate(LIGHTS, exclude_inverse=True)
        assert _ids(combos) == [("W", "Y"), ("W", "C"), ("Y", "C")]

    def test_hsl_attached(self):
        combos = _enumerate(LIGHTS, exclude_inverse=True)
        assert combos[0].hsl1.l == 100.0
        assert combos[0].hsl2.l == 50.0

    def test_follows_palette_order_not_selection_order(self):
        combos = _enumerate((C, W), exclude_inverse=True)
        assert _ids(combos) == [("C", "W")]

    def test_deterministic(self):
        assert _enumerate(LIGHTS) == _enumerate(LIGHTS)


class TestScenarios:

    def test_single_passing_color_gives_nothing(self):
        """White text at AA: only black passes, so no pair can form."""
        palette = (
            _entry("A", "#000000"),
            _entry("B", "#FFFFFF"),
            _entry("C", "#FF0000"),
        )
        assert _enumerate(palette, text="#FFFFFF", level=ContrastLevel.AA) == []

    def test_two_passing_colors_give_pair_and_mirror(self):
        """Black text at level A: white and yellow both pass."""
        combos = _enumerate((W, Y))
        assert _ids(combos) == [("W", "Y"), ("Y", "W")]

    def test_black_background_fails_black_text(self):
        palette = (_entry("A", "#000000"), _entry("B", "#FFFFFF"))
        assert _enumerate(palette, text="#000000") == []

    def test_analogous_hues_fail_max_hue_distance(self):
        palette = (
            _entry("red", "#FF0000"),
            _entry("orange", "#FF8000"),
            _entry("yellow", "#FFFF00"),
        )
        thresholds = PairThresholds(min_hue_distance=180)
        assert _enumerate(palette, thresholds=thresholds) == []

    def test_opposite_hues_pass_max_hue_distance(self):
        palette = (_entry("red", "#FF0000"), _entry("cyan", "#00FFFF"))
        thresholds = PairThresholds(min_hue_distance=180)
        assert _ids(_enumerate(palette, thresholds=thresholds)) == [
            ("red", "cyan"), ("cyan", "red"),
        ]


class TestRejections:

    def test_identical_rgb_with_different_ids(self):
        palette = (_entry("w1", "#FFFFFF"), _entry("w2", "#ffffff"), Y)
        combos = _enumerate(palette)
        assert _ids(combos) == [
            ("w1", "Y"), ("Y", "w1"),
            ("w2", "Y"), ("Y", "w2"),
        ]

    def test_never_self_paired(self):
        for combo in _enumerate(LIGHTS):
            assert combo.c1.id != combo.c2.id

    def test_min_bg_contrast(self):
        # W/C is ~1.25:1, the other pairs are below 1.2:1
        combos = _enumerate(LIGHTS, thresholds=PairThresholds(min_bg_contrast=1.2))
        assert _ids(combos) == [("W", "C"), ("C", "W")]

    def test_min_sat_distance(self):
        combos = _enumerate(
            LIGHTS, exclude_inverse=True,
            thresholds=PairThresholds(min_sat_distance=50),
        )
        assert _ids(combos) == [("W", "Y"), ("W", "C")]

    def test_min_lum_distance_is_inclusive(self):
        combos = _enumerate(
            LIGHTS, exclude_inverse=True,
            thresholds=PairThresholds(min_lum_distance=50),
        )
        assert _ids(combos) == [("W", "Y"), ("W", "C")]

    def test_min_lum_distance_above_gap(self):
        combos = _enumerate(LIGHTS, thresholds=PairThresholds(min_lum_distance=60))
        assert combos == []

    def test_min_hue_distance(self):
        combos = _enumerate(
            LIGHTS, exclude_inverse=True,
            thresholds=PairThresholds(min_hue_distance=100),
        )
        assert _ids(combos) == [("W", "C"), ("Y", "C")]

    def test_failing_colors_excluded(self):
        palette = LIGHTS + (_entry("black", "#000000"),)
        for combo in _enumerate(palette):
            assert "black" not in combo.ids


class TestSelection:

    def test_only_selected_colors(self):
        combos = _enumerate(LIGHTS, selected={"W", "C"})
        assert _ids(combos) == [("W", "C"), ("C", "W")]

    def test_unknown_ids_ignored(self):
        combos = _enumerate(LIGHTS, selected={"W", "Y", "nope"}, exclude_inverse=True)
        assert _ids(combos) == [("W", "Y")]

    def test_empty_selection(self):
        assert _enumerate(LIGHTS, selected=set()) == []

    def test_active_colors_dedupes(self):
        palette = (W, W, Y)
        cache = build_color_cache(palette, RGB(0, 0, 0), ContrastLevel.A)
        assert active_colors(palette, {"W", "Y"}, cache) == [W, Y]


class TestThresholdClamping:

    def test_negative_values_become_lower_bounds(self):
        th = PairThresholds(
            min_bg_contrast=-3, min_hue_distance=-1,
            min_sat_distance=-5, min_lum_distance=-10,
        ).clamped()
        assert th == PairThresholds()

    def test_upper_bounds(self):
        th = PairThresholds(
            min_hue_distance=400, min_sat_distance=150, min_lum_distance=101,
        ).clamped()
        assert th.min_hue_distance == 180.0
        assert th.min_sat_distance == 100.0
        assert th.min_lum_distance == 100.0

    def test_negative_thresholds_do_not_crash(self):
        thresholds = PairThresholds(min_bg_contrast=0.0, min_hue_distance=-20)
        assert _enumerate(LIGHTS, thresholds=thresholds) == _enumerate(LIGHTS)


class TestTailwindProperties:

    @pytest.fixture(scope="class")
    def combos(self):
        return _enumerate(
            TAILWIND_COLORS, text="#FFFFFF", level=ContrastLevel.AA,
            thresholds=PairThresholds(min_bg_contrast=1.5, min_hue_distance=30),
        )

    def test_nonempty(self, combos):
        assert combos

    def test_members_pass_text_contrast(self, combos):
        white = RGB(255, 255, 255)
        for combo in combos:
            assert contrast(hex_to_rgb(combo.c1.hex), white) >= 4.5
            assert contrast(hex_to_rgb(combo.c2.hex), white) >= 4.5

    def test_pair_constraints(self, combos):
        for combo in combos:
            rgb1 = hex_to_rgb(combo.c1.hex)
            rgb2 = hex_to_rgb(combo.c2.hex)
            assert rgb1 != rgb2
            assert contrast(rgb1, rgb2) >= 1.5

    def test_every_pair_has_its_mirror(self, combos):
        keys = set(_ids(combos))
        for a, b in keys:
            assert (b, a) in keys
