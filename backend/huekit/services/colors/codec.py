"""
HueKit Color Codec

Conversion between HEX strings, RGB triples and HSL triples using the
standard web model with integer channel precision. Parsers signal bad input
by returning None; numeric inputs are clamped rather than rejected.
"""

import math
import re
from dataclasses import dataclass
from typing import Optional, Union

Number = Union[int, float]

HEX_PATTERN = re.compile(r"#?([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})")


@dataclass(frozen=True)
class RGB:
    """Red/green/blue channels, integers in [0, 255]."""
    r: int
    g: int
    b: int


@dataclass(frozen=True)
class HSL:
    """Hue in degrees [0, 360), saturation and lightness in percent [0, 100]."""
    h: Number
    s: Number
    l: Number


def round_half_up(value: Number) -> int:
    """Round to the nearest integer with halves going up (browser Math.round)."""
    return int(math.floor(value + 0.5))


def clamp(value: Number, low: Number = 0, high: Number = 100) -> Number:
    """Clamp value into [low, high]."""
    return min(high, max(low, value))


def wrap_hue(h: Number) -> Number:
    """Wrap a hue in degrees into [0, 360)."""
    h = h % 360
    # Tiny negative floats wrap to exactly 360.0
    return 0 if h >= 360 else h


def hex_to_rgb(hex_color: str) -> Optional[RGB]:
    """
    Parse a strict 6-digit hex color.

    Args:
        hex_color: Color as RRGGBB with an optional leading '#', any case

    Returns:
        RGB triple, or None when the text is not exactly six hex digits
    """
    if not isinstance(hex_color, str):
        return None

    match = HEX_PATTERN.fullmatch(hex_color)
    if match is None:
        return None

    r, g, b = (int(group, 16) for group in match.groups())
    return RGB(r, g, b)


def rgb_to_hex(r: Number, g: Number, b: Number) -> str:
    """
    Format RGB channels as a lowercase '#rrggbb' string.

    Each channel is clamped to [0, 255] and rounded before formatting.
    """
    channels = [round_half_up(clamp(v, 0, 255)) for v in (r, g, b)]
    return "#" + "".join(f"{v:02x}" for v in channels)


def normalize_hex(hex_color: str) -> Optional[str]:
    """Return the canonical '#rrggbb' form of a strict hex color, or None."""
    rgb = hex_to_rgb(hex_color)
    if rgb is None:
        return None
    return rgb_to_hex(rgb.r, rgb.g, rgb.b)


def rgb_to_hsl(r: Number, g: Number, b: Number) -> HSL:
    """
    Convert RGB channels to HSL.

    Args:
        r, g, b: Channels in [0, 255] (clamped if outside)

    Returns:
        HSL with h in integer degrees and s, l in integer percent
    """
    r = clamp(r, 0, 255) / 255
    g = clamp(g, 0, 255) / 255
    b = clamp(b, 0, 255) / 255

    max_c = max(r, g, b)
    min_c = min(r, g, b)
    l = (max_c + min_c) / 2

    h = 0.0
    s = 0.0

    if max_c != min_c:
        delta = max_c - min_c
        s = delta / (2 - max_c - min_c) if l > 0.5 else delta / (max_c + min_c)

        if max_c == r:
            h = (g - b) / delta + (6 if g < b else 0)
        elif max_c == g:
            h = (b - r) / delta + 2
        else:
            h = (r - g) / delta + 4
        h *= 60

    return HSL(
        h=round_half_up(h) % 360,
        s=round_half_up(s * 100),
        l=round_half_up(l * 100),
    )


def _hue_to_channel(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(h: Number, s: Number, l: Number) -> RGB:
    """
    Convert HSL to RGB.

    Args:
        h: Hue in degrees (wrapped into [0, 360))
        s: Saturation percent (clamped to [0, 100])
        l: Lightness percent (clamped to [0, 100])

    Returns:
        RGB with channels rounded to integers in [0, 255]
    """
    h = wrap_hue(h) / 360
    s = clamp(s) / 100
    l = clamp(l) / 100

    if s == 0:
        r = g = b = l
    else:
        q = l * (1 + s) if l < 0.5 else l + s - l * s
        p = 2 * l - q
        r = _hue_to_channel(p, q, h + 1 / 3)
        g = _hue_to_channel(p, q, h)
        b = _hue_to_channel(p, q, h - 1 / 3)

    return RGB(*(round_half_up(clamp(v * 255, 0, 255)) for v in (r, g, b)))


def hsl_to_hex(h: Number, s: Number, l: Number) -> str:
    """Convert HSL straight to a '#rrggbb' string."""
    rgb = hsl_to_rgb(h, s, l)
    return rgb_to_hex(rgb.r, rgb.g, rgb.b)


def rgb_to_css(rgb: RGB) -> str:
    return f"rgb({rgb.r}, {rgb.g}, {rgb.b})"


def hsl_to_css(hsl: HSL) -> str:
    return f"hsl({_format_number(hsl.h)}, {_format_number(hsl.s)}%, {_format_number(hsl.l)}%)"


def _format_number(value: Number) -> str:
    # 45.0 -> "45", 40.5 -> "40.5"
    if float(value).is_integer():
        return str(int(value))
    return f"{value:g}"
