"""
Unit tests for the Color value model
"""

import dataclasses

import pytest

from color_service.models.color import Color


class TestColorConstruction:
    """Test construction defaults and clamping"""

    def test_defaults_to_black(self):
        assert Color().get_components() == [0, 0, 0]

    def test_missing_and_nan_components_become_zero(self):
        color = Color(None, float("nan"), "abc")

        assert color.get_components() == [0, 0, 0]

    def test_components_are_clamped(self):
        color = Color(-5, 300, 128)

        assert color.r == 0
        assert color.g == 255
        assert color.b == 128

    def test_float_components_are_truncated(self):
        assert Color(10.9, 0.2, 254.99).get_components() == [10, 0, 254]

    def test_color_is_immutable(self):
        color = Color(1, 2, 3)

        with pytest.raises(dataclasses.FrozenInstanceError):
            color.r = 10


class TestColorComponents:
    """Test component replacement"""

    def test_with_component_clamps_low_values(self):
        assert Color(100, 100, 100).with_red(-5).r == 0

    def test_with_component_clamps_high_values(self):
        assert Color(100, 100, 100).with_red(300).r == 255

    def test_with_component_returns_new_color(self):
        original = Color(10, 20, 30)

        updated = original.with_green(200).with_blue(None)

        assert original.get_components() == [10, 20, 30]
        assert updated.get_components() == [10, 200, 0]

    def test_with_unknown_component_raises(self):
        with pytest.raises(ValueError):
            Color().with_component("a", 10)

    def test_components_order_is_rgb(self):
        assert Color(1, 2, 3).get_components() == [1, 2, 3]


class TestColorHex:
    """Test hex encoding and parsing"""

    @pytest.mark.parametrize("hex_color", ["#b4da55", "B4DA55", "#00ff7F", "000000", "#FFFFFF"])
    def test_full_hex_round_trip(self, hex_color):
        expected = "#" + hex_color.lstrip("#").lower()

        assert Color.from_hex(hex_color).to_hex() == expected

    def test_shorthand_hex_is_expanded(self):
        assert Color.from_hex("03F").to_hex() == "#0033ff"
        assert Color.from_hex("#fff").to_hex() == "#ffffff"

    @pytest.mark.parametrize("hex_color", ["zzz", "12", "1234567", "", "#", "##ffffff", "b4da5g", " b4da55"])
    def test_invalid_hex_returns_none(self, hex_color):
        assert Color.from_hex(hex_color) is None

    def test_non_string_returns_none(self):
        assert Color.from_hex(None) is None

    def test_hex_components(self):
        assert Color.from_hex("B4DA55").get_components() == [180, 218, 85]

    def test_to_hex_zero_pads(self):
        assert Color(5, 0, 15).to_hex() == "#05000f"


class TestColorAverage:
    """Test the brightness metric"""

    def test_average_is_not_rounded(self):
        assert Color(1, 1, 2).average == pytest.approx(4 / 3)

    def test_white_is_brighter_than_black(self):
        assert Color(255, 255, 255).average > Color(0, 0, 0).average
