"""
HueKit Input Validation

Permissive predicates used while a user is still typing, kept apart from the
strict parsers in the codec. A value can "look like" a color without parsing
to one (e.g. 3-digit hex shorthand is accepted here but rejected by
hex_to_rgb).
"""

import math
import re
from typing import List, Literal, Optional

from .codec import RGB, hex_to_rgb, round_half_up

InputFormat = Literal["HEX", "RGB"]

LOOSE_HEX_PATTERN = re.compile(r"[0-9a-fA-F]{3}|[0-9a-fA-F]{6}")
RGB_SEPARATOR = re.compile(r"[\s,]+")


def _strip_hash(value: str) -> str:
    value = value.strip()
    return value[1:] if value.startswith("#") else value


def looks_like_hex(value: str) -> bool:
    """True for 3 or 6 hex digits, optional '#', surrounding whitespace ignored."""
    if not isinstance(value, str):
        return False
    return LOOSE_HEX_PATTERN.fullmatch(_strip_hash(value)) is not None


def _split_rgb(value: str) -> Optional[List[float]]:
    if not isinstance(value, str):
        return None

    parts = [p for p in RGB_SEPARATOR.split(value.strip()) if p]
    if len(parts) != 3:
        return None

    numbers = []
    for part in parts:
        try:
            n = float(part)
        except ValueError:
            return None
        # NaN fails the range check as well
        if math.isnan(n) or not 0 <= n <= 255:
            return None
        numbers.append(n)
    return numbers


def looks_like_rgb(value: str) -> bool:
    """True for three numbers in [0, 255] separated by commas and/or spaces."""
    return _split_rgb(value) is not None


def parse_rgb(value: str) -> Optional[RGB]:
    """
    Parse 'r, g, b' or 'r g b' text.

    Returns:
        RGB with fractional channels rounded, or None if the text does not
        hold exactly three in-range numbers
    """
    numbers = _split_rgb(value)
    if numbers is None:
        return None
    return RGB(*(round_half_up(n) for n in numbers))


def expand_shorthand_hex(value: str) -> Optional[str]:
    """Expand '#abc' to '#aabbcc'; six-digit input is returned with a '#'."""
    if not looks_like_hex(value):
        return None

    digits = _strip_hash(value)
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    return "#" + digits


def detect_input_format(value: str) -> Optional[InputFormat]:
    if looks_like_hex(value):
        return "HEX"
    if looks_like_rgb(value):
        return "RGB"
    return None


def parse_color_input(value: str) -> Optional[RGB]:
    """
    Parse free-form color input from a text box.

    Hex (including 3-digit shorthand) is tried first, then RGB text.
    Returns None when neither applies so callers can keep the last good color.
    """
    input_format = detect_input_format(value)
    if input_format == "HEX":
        return hex_to_rgb(expand_shorthand_hex(value))
    if input_format == "RGB":
        return parse_rgb(value)
    return None
