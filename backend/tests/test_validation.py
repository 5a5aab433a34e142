"""
Unit tests for permissive color input handling.
"""

import pytest

from huekit.services.colors.codec import RGB, hex_to_rgb
from huekit.services.colors.validation import (
    detect_input_format, expand_shorthand_hex, looks_like_hex, looks_like_rgb,
    parse_color_input, parse_rgb
)


class TestLooksLikeHex:
    """Test the loose hex predicate."""

    @pytest.mark.parametrize("value", ["#abc", "abc", "#A1B2C3", "a1b2c3", "  #fff  "])
    def test_accepts(self, value):
        assert looks_like_hex(value)

    @pytest.mark.parametrize("value", ["", "#", "#ab", "#abcd", "#12345", "#1234567", "#ggg", "##abc", None])
    def test_rejects(self, value):
        assert not looks_like_hex(value)

    def test_loose_and_strict_disagree_on_shorthand(self):
        """Test shorthand looks valid but does not strictly parse."""
        assert looks_like_hex("#abc")
        assert hex_to_rgb("#abc") is None


class TestLooksLikeRgb:
    """Test the loose RGB predicate and parser."""

    @pytest.mark.parametrize("value", ["255, 0, 128", "255 0 128", "0,0,0", " 10 ,20, 30 ", "12.5 0 255"])
    def test_accepts(self, value):
        assert looks_like_rgb(value)

    @pytest.mark.parametrize("value", ["", "1, 2", "1, 2, 3, 4", "256, 0, 0", "-1, 0, 0", "a, b, c", "nan, 0, 0", None])
    def test_rejects(self, value):
        assert not looks_like_rgb(value)

    def test_parse_rgb(self):
        """Test RGB text parses into channels, rounding fractions half up."""
        assert parse_rgb("255, 0, 128") == RGB(255, 0, 128)
        assert parse_rgb("12.5 0 254.4") == RGB(13, 0, 254)
        assert parse_rgb("300, 0, 0") is None


class TestParseColorInput:
    """Test free-form input parsing."""

    def test_expand_shorthand(self):
        assert expand_shorthand_hex("#abc") == "#aabbcc"
        assert expand_shorthand_hex("F0A") == "#FF00AA"
        assert expand_shorthand_hex("123456") == "#123456"
        assert expand_shorthand_hex("xyz") is None

    def test_hex_inputs(self):
        """Test six-digit and shorthand hex."""
        assert parse_color_input("#ff0080") == RGB(255, 0, 128)
        assert parse_color_input(" ff0080 ") == RGB(255, 0, 128)
        assert parse_color_input("#abc") == RGB(170, 187, 204)

    def test_rgb_inputs(self):
        assert parse_color_input("10, 20, 30") == RGB(10, 20, 30)

    def test_incomplete_input_yields_none(self):
        """Test mid-edit input is absent, not an error."""
        for value in ["", "#", "#12", "#12345", "255, 0", "rgb(1,2,3)"]:
            assert parse_color_input(value) is None

    def test_detect_input_format(self):
        assert detect_input_format("#abc") == "HEX"
        assert detect_input_format("1 2 3") == "RGB"
        assert detect_input_format("blue") is None
