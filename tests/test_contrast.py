"""Tests for furman_plots.contrast — WCAG luminance and contrast."""

import pytest

from furman_plots.colors import Color, furman_cols
from furman_plots.contrast import (
    Standard,
    UseCase,
    accessible_combinations,
    check_contrast,
    contrast_ratio,
    luminance,
)
from furman_plots.errors import InvalidArgumentError, UnknownPaletteError
from furman_plots.theme import COLORS


class TestLuminance:
    def test_white(self):
        assert luminance("#ffffff") == 1.0

    def test_black(self):
        assert luminance("#000000") == 0.0

    def test_low_channel_uses_linear_segment(self):
        # 10/255 = 0.0392 is under the 0.03928 cutoff
        assert luminance("#0a0a0a") == pytest.approx((10 / 255) / 12.92)

    def test_green_weighted_most(self):
        assert luminance("#00ff00") > luminance("#ff0000") > luminance("#0000ff")

    def test_accepts_registry_names(self):
        assert luminance("light gray") == luminance("#f5f5f5")


class TestContrastRatio:
    def test_black_white(self):
        assert contrast_ratio("#000000", "#ffffff") == 21.0

    def test_order_independent(self):
        assert contrast_ratio("#582c83", "#f2be1a") == contrast_ratio("#f2be1a", "#582c83")

    @pytest.mark.parametrize("hex_", list(COLORS.values()))
    def test_same_color(self, hex_):
        assert contrast_ratio(hex_, hex_) == 1.0


class TestCheckContrast:
    def test_main_on_white(self):
        results = check_contrast("main", ["#ffffff"], "AA")
        assert len(results) == 6
        by_name = {r.foreground.name: r for r in results}
        assert by_name["yellow"].passes is False
        assert by_name["purple"].passes is True
        assert by_name["purple"].threshold == 4.5
        assert by_name["purple"].standard is Standard.AA

    def test_cross_product(self):
        results = check_contrast("cool", ["#ffffff", "#000000"])
        assert len(results) == 6
        assert [r.background.hex for r in results[:2]] == ["#ffffff", "#000000"]

    def test_single_background_string(self):
        results = check_contrast("main", "#ffffff")
        assert len(results) == 6
        assert all(r.background.hex == "#ffffff" for r in results)

    def test_single_background_name_and_color(self):
        assert len(check_contrast("cool", "midnight purple")) == 3
        assert len(check_contrast("cool", Color("#000000"))) == 3

    def test_aaa_is_stricter(self):
        aa = sum(r.passes for r in check_contrast("main", ["#ffffff"], "AA"))
        aaa = sum(r.passes for r in check_contrast("main", ["#ffffff"], Standard.AAA))
        assert aaa <= aa

    def test_bad_standard(self):
        with pytest.raises(InvalidArgumentError) as exc:
            check_contrast("main", ["#ffffff"], "A")
        assert "AAA" in str(exc.value)

    def test_unknown_palette(self):
        with pytest.raises(UnknownPaletteError):
            check_contrast("nonexistent")


class TestAccessibleCombinations:
    def test_sorted_descending(self):
        results = accessible_combinations()
        ratios = [r.ratio for r in results]
        assert ratios == sorted(ratios, reverse=True)

    def test_all_pass_threshold(self):
        for r in accessible_combinations("AAA", "text"):
            assert r.passes
            assert r.ratio >= 7.0
            assert r.use_case is UseCase.TEXT

    def test_graphics_threshold(self):
        results = accessible_combinations("AA", "graphics")
        assert all(r.threshold == 3.0 for r in results)
        assert len(results) >= len(accessible_combinations("AA", "text"))

    def test_large_text_aaa_matches_aa_text(self):
        pairs = lambda rs: {(r.foreground.hex, r.background.hex) for r in rs}
        assert pairs(accessible_combinations("AAA", "large_text")) == pairs(
            accessible_combinations("AA", "text")
        )

    def test_excludes_same_color(self):
        for r in accessible_combinations("AA", "graphics"):
            assert r.foreground.hex != r.background.hex

    def test_purple_on_white_present(self):
        results = accessible_combinations()
        assert any(r.foreground.name == "purple" and r.background.hex == "#ffffff" for r in results)

    def test_only_registry_foregrounds(self):
        registry = {c.hex for c in furman_cols()}
        assert {r.foreground.hex for r in accessible_combinations()} <= registry

    def test_bad_use_case(self):
        with pytest.raises(InvalidArgumentError):
            accessible_combinations("AA", "icons")

    def test_bad_standard(self):
        with pytest.raises(InvalidArgumentError):
            accessible_combinations("B")
