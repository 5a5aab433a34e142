"""
HueKit Nearest Color Naming

Maps an arbitrary color to the closest entry of a fixed named-color table by
Euclidean distance in RGB space. The table order is part of the contract:
on equal distances the entry listed first wins.
"""

import math
from dataclasses import dataclass
from typing import Dict, Optional, Sequence, Union

from .codec import RGB, hex_to_rgb, normalize_hex

ColorInput = Union[str, RGB, Sequence[int]]

UNKNOWN_COLOR_NAME = "Unknown"

NAMED_COLORS: Dict[str, str] = {
    "#000000": "Black",
    "#FFFFFF": "White",
    "#FF0000": "Red",
    "#00FF00": "Lime",
    "#0000FF": "Blue",
    "#FFFF00": "Yellow",
    "#00FFFF": "Cyan",
    "#FF00FF": "Magenta",
    "#C0C0C0": "Silver",
    "#808080": "Gray",
    "#800000": "Maroon",
    "#808000": "Olive",
    "#008000": "Green",
    "#800080": "Purple",
    "#008080": "Teal",
    "#000080": "Navy",
    "#FFA500": "Orange",
    "#FFC0CB": "Pink",
    "#A52A2A": "Brown",
    "#F0E68C": "Khaki",
    "#E6E6FA": "Lavender",
    "#FFE4E1": "Misty Rose",
    "#F5DEB3": "Wheat",
    "#D2691E": "Chocolate",
    "#FF6347": "Tomato",
    "#FF69B4": "Hot Pink",
    "#CD5C5C": "Indian Red",
    "#F08080": "Light Coral",
    "#FA8072": "Salmon",
    "#E9967A": "Dark Salmon",
    "#FFA07A": "Light Salmon",
    "#DC143C": "Crimson",
    "#B22222": "Firebrick",
    "#8B0000": "Dark Red",
    "#FFB6C1": "Light Pink",
    "#FF1493": "Deep Pink",
    "#C71585": "Medium Violet Red",
    "#DB7093": "Pale Violet Red",
    "#FFF0F5": "Lavender Blush",
    "#FF7F50": "Coral",
    "#FF4500": "Orange Red",
    "#FFD700": "Gold",
    "#FFFFE0": "Light Yellow",
    "#FFFACD": "Lemon Chiffon",
    "#FAFAD2": "Light Goldenrod Yellow",
    "#FFEFD5": "Papaya Whip",
    "#FFE4B5": "Moccasin",
    "#FFDAB9": "Peach Puff",
    "#EEE8AA": "Pale Goldenrod",
    "#BDB76B": "Dark Khaki",
    "#90EE90": "Light Green",
    "#98FB98": "Pale Green",
    "#8FBC8F": "Dark Sea Green",
    "#00FA9A": "Medium Spring Green",
    "#00FF7F": "Spring Green",
    "#3CB371": "Medium Sea Green",
    "#2E8B57": "Sea Green",
    "#228B22": "Forest Green",
    "#006400": "Dark Green",
    "#9ACD32": "Yellow Green",
    "#32CD32": "Lime Green",
    "#7FFF00": "Chartreuse",
    "#7CFC00": "Lawn Green",
    "#ADFF2F": "Green Yellow",
    "#40E0D0": "Turquoise",
    "#48D1CC": "Medium Turquoise",
    "#AFEEEE": "Pale Turquoise",
    "#B0E0E6": "Powder Blue",
    "#ADD8E6": "Light Blue",
    "#87CEEB": "Sky Blue",
    "#87CEFA": "Light Sky Blue",
    "#00BFFF": "Deep Sky Blue",
    "#1E90FF": "Dodger Blue",
    "#6495ED": "Cornflower Blue",
    "#4169E1": "Royal Blue",
    "#0000CD": "Medium Blue",
    "#00008B": "Dark Blue",
    "#191970": "Midnight Blue",
    "#7B68EE": "Medium Slate Blue",
    "#6A5ACD": "Slate Blue",
    "#483D8B": "Dark Slate Blue",
    "#D8BFD8": "Thistle",
    "#DDA0DD": "Plum",
    "#EE82EE": "Violet",
    "#DA70D6": "Orchid",
    "#BA55D3": "Medium Orchid",
    "#9370DB": "Medium Purple",
    "#8A2BE2": "Blue Violet",
    "#9400D3": "Dark Violet",
    "#9932CC": "Dark Orchid",
    "#8B008B": "Dark Magenta",
    "#4B0082": "Indigo",
    "#F5F5DC": "Beige",
    "#FFE4C4": "Bisque",
    "#FFEBCD": "Blanched Almond",
    "#DEB887": "Burlywood",
    "#D2B48C": "Tan",
    "#BC8F8F": "Rosy Brown",
    "#F4A460": "Sandy Brown",
    "#DAA520": "Goldenrod",
    "#B8860B": "Dark Goldenrod",
    "#CD853F": "Peru",
    "#8B4513": "Saddle Brown",
    "#A0522D": "Sienna",
    "#696969": "Dim Gray",
    "#708090": "Slate Gray",
    "#778899": "Light Slate Gray",
    "#2F4F4F": "Dark Slate Gray",
    "#DCDCDC": "Gainsboro",
    "#D3D3D3": "Light Gray",
    "#A9A9A9": "Dark Gray",
    "#FFFAF0": "Floral White",
    "#FDF5E6": "Old Lace",
    "#FAF0E6": "Linen",
    "#FAEBD7": "Antique White",
    "#F5F5F5": "White Smoke",
    "#FFF5EE": "Seashell",
    "#F0FFF0": "Honeydew",
    "#F5FFFA": "Mint Cream",
    "#F0FFFF": "Azure",
    "#F0F8FF": "Alice Blue",
    "#E0FFFF": "Light Cyan",
    "#FFFFF0": "Ivory",
    "#7FFFD4": "Aquamarine",
    "#66CDAA": "Medium Aquamarine",
    "#00CED1": "Dark Turquoise",
    "#20B2AA": "Light Sea Green",
    "#008B8B": "Dark Cyan",
    "#5F9EA0": "Cadet Blue",
    "#4682B4": "Steel Blue",
    "#B0C4DE": "Light Steel Blue",
    "#556B2F": "Dark Olive Green",
    "#6B8E23": "Olive Drab",
    "#663399": "Rebecca Purple",
    "#FF8C00": "Dark Orange",
    "#FFDEAD": "Navajo White",
    "#FFF8DC": "Cornsilk",
    "#F8F8FF": "Ghost White",
    "#FFFAFA": "Snow",
}


@dataclass(frozen=True)
class ColorMatch:
    """Result of a color name lookup."""
    name: str
    distance: float
    hex: Optional[str] = None


UNKNOWN_MATCH = ColorMatch(name=UNKNOWN_COLOR_NAME, distance=0.0)

# Parsed once; NAMED_COLORS is never mutated
_NAMED_RGB = [(hex_to_rgb(hex_code), hex_code, name) for hex_code, name in NAMED_COLORS.items()]


def coerce_rgb(color: ColorInput) -> Optional[RGB]:
    """
    Accept a hex string, an RGB, or an (r, g, b) sequence.

    Returns:
        RGB, or None when the input cannot be read as a color
    """
    if isinstance(color, RGB):
        return color
    if isinstance(color, str):
        return hex_to_rgb(color)
    try:
        r, g, b = color
    except (TypeError, ValueError):
        return None
    if not all(isinstance(v, int) and 0 <= v <= 255 for v in (r, g, b)):
        return None
    return RGB(r, g, b)


def rgb_distance(a: RGB, b: RGB) -> float:
    """Euclidean distance between two RGB colors."""
    return math.sqrt((a.r - b.r) ** 2 + (a.g - b.g) ** 2 + (a.b - b.b) ** 2)


def get_closest_color_name(color: ColorInput) -> ColorMatch:
    """
    Find the closest named color.

    Args:
        color: Hex string, RGB, or (r, g, b) sequence

    Returns:
        ColorMatch with the table name, distance and table hex; UNKNOWN_MATCH
        for unreadable input
    """
    rgb = coerce_rgb(color)
    if rgb is None:
        return UNKNOWN_MATCH

    best_name = UNKNOWN_COLOR_NAME
    best_hex = None
    best_distance = math.inf

    for named_rgb, hex_code, name in _NAMED_RGB:
        distance = rgb_distance(rgb, named_rgb)
        if distance < best_distance:
            best_distance = distance
            best_name = name
            best_hex = hex_code

    return ColorMatch(name=best_name, distance=best_distance, hex=normalize_hex(best_hex))


class LocalColorNamer:
    """Names colors from the built-in table."""

    source = "local"

    def name(self, color: ColorInput) -> ColorMatch:
        return get_closest_color_name(color)
