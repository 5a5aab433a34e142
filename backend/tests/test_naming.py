"""
Unit tests for nearest named color lookup.
"""

import math

import pytest

from huekit.services.colors.codec import RGB, hex_to_rgb
from huekit.services.colors.naming import (
    NAMED_COLORS, UNKNOWN_MATCH, ColorMatch, LocalColorNamer, coerce_rgb,
    get_closest_color_name, rgb_distance
)


class TestNamedColorTable:
    """Test the fixed table."""

    def test_table_entries_are_valid_hex(self):
        assert len(NAMED_COLORS) == 139
        for hex_code, name in NAMED_COLORS.items():
            assert hex_to_rgb(hex_code) is not None, hex_code
            assert name

    def test_table_order_starts_with_basics(self):
        assert list(NAMED_COLORS.values())[:4] == ["Black", "White", "Red", "Lime"]


class TestClosestColorName:
    """Test Euclidean nearest-match lookup."""

    def test_exact_match(self):
        match = get_closest_color_name("#000000")
        assert match.name == "Black"
        assert match.distance == 0
        assert match.hex == "#000000"

    def test_near_black(self):
        match = get_closest_color_name("#010101")
        assert match.name == "Black"
        assert match.distance == pytest.approx(math.sqrt(3))

    def test_case_and_prefix_insensitive(self):
        assert get_closest_color_name("ff6347").name == "Tomato"
        assert get_closest_color_name("#FF6347").name == "Tomato"

    def test_rgb_and_tuple_inputs(self):
        assert get_closest_color_name(RGB(0, 0, 255)).name == "Blue"
        assert get_closest_color_name((250, 250, 250)).name == get_closest_color_name("#fafafa").name

    def test_every_table_entry_names_itself(self):
        for hex_code, name in NAMED_COLORS.items():
            match = get_closest_color_name(hex_code)
            assert match.distance == 0
            assert match.name == name

    def test_distance_is_minimum_over_table(self):
        query = RGB(100, 149, 230)
        match = get_closest_color_name(query)
        expected = min(rgb_distance(query, hex_to_rgb(h)) for h in NAMED_COLORS)
        assert match.distance == pytest.approx(expected)

    @pytest.mark.parametrize("bad", ["", "#12345", "#ZZZZZZ", "#abc", None, (1, 2), (300, 0, 0), 42])
    def test_invalid_input_is_unknown(self, bad):
        """Test unreadable input gives the Unknown result instead of raising."""
        match = get_closest_color_name(bad)
        assert match == UNKNOWN_MATCH
        assert match.name == "Unknown"
        assert match.distance == 0
        assert match.hex is None


class TestHelpers:
    def test_coerce_rgb(self):
        assert coerce_rgb("#0a0b0c") == RGB(10, 11, 12)
        assert coerce_rgb(RGB(1, 2, 3)) == RGB(1, 2, 3)
        assert coerce_rgb([1, 2, 3]) == RGB(1, 2, 3)
        assert coerce_rgb((1.5, 2, 3)) is None

    def test_rgb_distance(self):
        assert rgb_distance(RGB(0, 0, 0), RGB(3, 4, 0)) == 5

    def test_local_namer_matches_function(self):
        namer = LocalColorNamer()
        assert namer.source == "local"
        assert namer.name("#808080") == get_closest_color_name("#808080")
        assert isinstance(namer.name("#808080"), ColorMatch)
