"""
HueKit Palette Swatches

Renders palette groups as PNG swatches for preview and export: either one
labeled row per group ("grouped") or a single unlabeled strip ("strip").
"""

import base64
import io
from typing import Any, Dict, List, Sequence

from PIL import Image, ImageDraw

from ..codec import HSL, hsl_to_hex, hsl_to_rgb
from . import PaletteGroup

SWATCH_FORMATS = ("grouped", "strip")
BACKGROUND = (255, 255, 255)
LABEL_HEIGHT = 16


def create_color_chip(color: HSL, chip_size: int = 40) -> Image.Image:
    """Create a solid square chip for one color."""
    rgb = hsl_to_rgb(color.h, color.s, color.l)
    return Image.new("RGB", (chip_size, chip_size), (rgb.r, rgb.g, rgb.b))


def create_color_row(colors: Sequence[HSL], chip_size: int = 40, spacing: int = 2) -> Image.Image:
    """
    Create a horizontal row of color chips.

    Args:
        colors: Colors in display order
        chip_size: Size of each chip in pixels
        spacing: Gap between chips in pixels

    Returns:
        PIL Image of the row (a single background chip when colors is empty)
    """
    if not colors:
        return Image.new("RGB", (chip_size, chip_size), BACKGROUND)

    row_width = len(colors) * chip_size + (len(colors) - 1) * spacing
    row = Image.new("RGB", (row_width, chip_size), BACKGROUND)

    x_pos = 0
    for color in colors:
        row.paste(create_color_chip(color, chip_size), (x_pos, 0))
        x_pos += chip_size + spacing

    return row


def create_labeled_swatch(
    groups: Sequence[PaletteGroup],
    chip_size: int = 40,
    spacing: int = 2,
    row_spacing: int = 4,
) -> Image.Image:
    """Stack one titled row per non-empty group."""
    rows = [(group.title, create_color_row(group.colors, chip_size, spacing)) for group in groups if group.colors]

    if not rows:
        return Image.new("RGB", (chip_size, chip_size), BACKGROUND)

    width = max(row.width for _, row in rows)
    height = sum(LABEL_HEIGHT + row.height + row_spacing for _, row in rows) - row_spacing

    swatch = Image.new("RGB", (width, height), BACKGROUND)
    draw = ImageDraw.Draw(swatch)

    y_pos = 0
    for title, row in rows:
        draw.text((2, y_pos), title, fill=(0, 0, 0))
        y_pos += LABEL_HEIGHT
        swatch.paste(row, (0, y_pos))
        y_pos += row.height + row_spacing

    return swatch


def render_palette_swatch(
    groups: Sequence[PaletteGroup],
    format_type: str = "grouped",
    chip_size: int = 40,
    spacing: int = 2,
) -> str:
    """
    Render palette groups as a base64-encoded PNG.

    Args:
        groups: Palette groups in display order
        format_type: "grouped" for labeled rows or "strip" for one row
        chip_size: Size of each chip in pixels
        spacing: Gap between chips in pixels

    Returns:
        Base64-encoded PNG image string

    Raises:
        ValueError: If format_type is not a supported format
    """
    if format_type not in SWATCH_FORMATS:
        raise ValueError(f"Unsupported swatch format: {format_type}")

    if format_type == "strip":
        colors: List[HSL] = [color for group in groups for color in group.colors]
        swatch = create_color_row(colors, chip_size, spacing)
    else:
        swatch = create_labeled_swatch(groups, chip_size, spacing)

    buffer = io.BytesIO()
    swatch.save(buffer, format="PNG")
    return base64.b64encode(buffer.getvalue()).decode("utf-8")


def create_swatch_metadata(
    groups: Sequence[PaletteGroup],
    format_type: str,
    chip_size: int,
    spacing: int,
) -> Dict[str, Any]:
    """Describe what a rendered swatch contains."""
    return {
        "format": format_type,
        "chip_size_px": chip_size,
        "spacing_px": spacing,
        "total_colors": sum(len(group.colors) for group in groups),
        "groups": {group.kind.value: len(group.colors) for group in groups if group.colors},
        "color_mapping": {
            group.kind.value: [hsl_to_hex(c.h, c.s, c.l) for c in group.colors]
            for group in groups
            if group.colors
        },
    }
