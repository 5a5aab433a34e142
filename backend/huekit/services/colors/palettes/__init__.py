"""
HueKit Palette Generator

Derives ordered palettes (tints, shades, analogous, complementary,
split-complementary, triadic, tetradic, monochromatic) from a base HSL color.
Hue arithmetic wraps modulo 360; saturation and lightness are clamped to
[0, 100] after every adjustment. Each recipe is a named module constant so
the offsets in use can be audited and swapped.
"""

import random
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from ..codec import HSL, Number, clamp, round_half_up, wrap_hue

DEFAULT_JITTER = 5


@dataclass(frozen=True)
class LightnessRecipe:
    """Lightness offsets applied in order, with an optional saturation falloff."""
    offsets: Tuple[int, ...]
    direction: int  # +1 lightens (tints), -1 darkens (shades)
    saturation_factor: float = 0.0  # saturation drops by offset * factor


@dataclass(frozen=True)
class PaletteGroup:
    """An ordered, titled palette derived from one base color."""
    kind: "PaletteKind"
    title: str
    colors: Tuple[HSL, ...]


class PaletteKind(str, Enum):
    TINTS = "tints"
    SHADES = "shades"
    ANALOGOUS = "analogous"
    COMPLEMENTARY = "complementary"
    SPLIT_COMPLEMENTARY = "split_complementary"
    TRIADIC = "triadic"
    TETRADIC = "tetradic"
    MONOCHROMATIC = "monochromatic"


TINTS_SIMPLE = LightnessRecipe(offsets=(10, 25, 40, 55, 70), direction=1)
TINTS_REFINED = LightnessRecipe(offsets=(15, 30, 45, 60, 75), direction=1, saturation_factor=0.3)
SHADES_SIMPLE = LightnessRecipe(offsets=(10, 25, 40, 55, 70), direction=-1)
SHADES_REFINED = LightnessRecipe(offsets=(15, 30, 45, 60, 75), direction=-1, saturation_factor=0.25)

ANALOGOUS_OFFSETS: Tuple[int, ...] = (-30, -15, 15, 30)
ANALOGOUS_WITH_BASE_OFFSETS: Tuple[int, ...] = (-30, -15, 0, 15, 30)
COMPLEMENTARY_OFFSETS: Tuple[int, ...] = (0, 180)
SPLIT_COMPLEMENTARY_OFFSETS: Tuple[int, ...] = (0, 150, 210)
TRIADIC_OFFSETS: Tuple[int, ...] = (0, 120, 240)
TETRADIC_OFFSETS: Tuple[int, ...] = (0, 90, 180, 270)

# (saturation delta, lightness delta), darkest-last
MONOCHROMATIC_STEPS: Tuple[Tuple[int, int], ...] = (
    (-30, 30),
    (-15, 15),
    (0, 0),
    (15, -15),
    (30, -30),
)

PALETTE_TITLES: Dict[PaletteKind, str] = {
    PaletteKind.TINTS: "Tints",
    PaletteKind.SHADES: "Shades",
    PaletteKind.ANALOGOUS: "Analogous",
    PaletteKind.COMPLEMENTARY: "Complementary",
    PaletteKind.SPLIT_COMPLEMENTARY: "Split Complementary",
    PaletteKind.TRIADIC: "Triadic",
    PaletteKind.TETRADIC: "Tetradic",
    PaletteKind.MONOCHROMATIC: "Monochromatic",
}

PALETTE_DESCRIPTIONS: Dict[PaletteKind, str] = {
    PaletteKind.TINTS: "Lighter variations of the same hue",
    PaletteKind.SHADES: "Darker variations of the same hue",
    PaletteKind.ANALOGOUS: "Harmonious neighboring hues",
    PaletteKind.COMPLEMENTARY: "High-contrast opposing colors",
    PaletteKind.SPLIT_COMPLEMENTARY: "The two neighbors of the complement",
    PaletteKind.TRIADIC: "Three hues evenly spaced around the wheel",
    PaletteKind.TETRADIC: "Four hues evenly spaced around the wheel",
    PaletteKind.MONOCHROMATIC: "One hue across saturation and lightness",
}

# Display order of palette groups
PALETTE_ORDER: Tuple[PaletteKind, ...] = tuple(PaletteKind)


def rotate_hue(h: Number, degrees: Number) -> Number:
    """
    Rotate a hue by the given degrees.

    Args:
        h: Hue in degrees
        degrees: Rotation (can be negative)

    Returns:
        Rotated hue in [0, 360)
    """
    return wrap_hue(h + degrees)


def hue_separation(h1: Number, h2: Number) -> Number:
    """Shortest angular distance between two hues, in [0, 180]."""
    diff = abs(wrap_hue(h1) - wrap_hue(h2))
    return min(diff, 360 - diff)


def _hue_offsets(base: HSL, offsets: Iterable[int]) -> List[HSL]:
    return [HSL(rotate_hue(base.h, offset), base.s, base.l) for offset in offsets]


def _apply_lightness_recipe(base: HSL, recipe: LightnessRecipe) -> List[HSL]:
    colors = []
    for offset in recipe.offsets:
        s = clamp(base.s - offset * recipe.saturation_factor)
        l = clamp(base.l + recipe.direction * offset)
        colors.append(HSL(base.h, s, l))
    return colors


def generate_tints(base: HSL, recipe: LightnessRecipe = TINTS_SIMPLE) -> List[HSL]:
    """Lighter variants of the base, one per recipe offset."""
    return _apply_lightness_recipe(base, recipe)


def generate_shades(base: HSL, recipe: LightnessRecipe = SHADES_SIMPLE) -> List[HSL]:
    """Darker variants of the base, one per recipe offset."""
    return _apply_lightness_recipe(base, recipe)


def _jitter(value: Number, rng: random.Random, amount: Number) -> int:
    return round_half_up(value + rng.uniform(-amount, amount))


def generate_analogous(
    base: HSL,
    offsets: Sequence[int] = ANALOGOUS_OFFSETS,
    rng: Optional[random.Random] = None,
    jitter: Number = DEFAULT_JITTER,
) -> List[HSL]:
    """
    Neighboring hues of the base.

    Args:
        base: Base color
        offsets: Hue offsets in degrees
        rng: Random source for creative variation; None gives exact output
        jitter: Maximum offset applied to each of h, s and l when rng is set

    Returns:
        One color per offset, in offset order
    """
    colors = _hue_offsets(base, offsets)
    if rng is None or jitter <= 0:
        return colors

    return [
        HSL(
            wrap_hue(_jitter(c.h, rng, jitter)),
            clamp(_jitter(c.s, rng, jitter)),
            clamp(_jitter(c.l, rng, jitter)),
        )
        for c in colors
    ]


def generate_complementary(base: HSL) -> List[HSL]:
    """The base and its opposite hue."""
    return _hue_offsets(base, COMPLEMENTARY_OFFSETS)


def generate_split_complementary(base: HSL) -> List[HSL]:
    """The base and the two hues 30 degrees either side of its complement."""
    return _hue_offsets(base, SPLIT_COMPLEMENTARY_OFFSETS)


def generate_triadic(base: HSL) -> List[HSL]:
    return _hue_offsets(base, TRIADIC_OFFSETS)


def generate_tetradic(base: HSL) -> List[HSL]:
    return _hue_offsets(base, TETRADIC_OFFSETS)


def generate_monochromatic(base: HSL) -> List[HSL]:
    """Five steps trading saturation against lightness around the base."""
    return [
        HSL(base.h, clamp(base.s + ds), clamp(base.l + dl))
        for ds, dl in MONOCHROMATIC_STEPS
    ]


def generate_palette(
    kind: PaletteKind,
    base: HSL,
    rng: Optional[random.Random] = None,
    jitter: Number = DEFAULT_JITTER,
) -> List[HSL]:
    """
    Generate one palette kind from a base color.

    Raises:
        ValueError: If kind is not a known palette kind
    """
    kind = PaletteKind(kind)

    if kind == PaletteKind.ANALOGOUS:
        return generate_analogous(base, rng=rng, jitter=jitter)

    generators = {
        PaletteKind.TINTS: generate_tints,
        PaletteKind.SHADES: generate_shades,
        PaletteKind.COMPLEMENTARY: generate_complementary,
        PaletteKind.SPLIT_COMPLEMENTARY: generate_split_complementary,
        PaletteKind.TRIADIC: generate_triadic,
        PaletteKind.TETRADIC: generate_tetradic,
        PaletteKind.MONOCHROMATIC: generate_monochromatic,
    }
    return generators[kind](base)


def generate_palette_groups(
    base: HSL,
    kinds: Optional[Iterable[PaletteKind]] = None,
    rng: Optional[random.Random] = None,
    jitter: Number = DEFAULT_JITTER,
) -> List[PaletteGroup]:
    """
    Generate titled palette groups for a base color.

    Groups come back in PALETTE_ORDER regardless of the order of kinds;
    duplicate kinds are ignored.
    """
    requested = set(PALETTE_ORDER) if kinds is None else {PaletteKind(k) for k in kinds}

    groups = []
    for kind in PALETTE_ORDER:
        if kind not in requested:
            continue
        colors = generate_palette(kind, base, rng=rng, jitter=jitter)
        groups.append(PaletteGroup(kind=kind, title=PALETTE_TITLES[kind], colors=tuple(colors)))
    return groups
