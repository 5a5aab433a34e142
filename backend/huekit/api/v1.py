"""
HueKit v1 API Routes
Color conversion, naming and palette endpoints.
"""
import random
import time
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from huekit.config import config
from huekit.schemas import (
    ColorNameResponse,
    ColorRepresentation,
    ConvertResponse,
    PaletteGroupModel,
    PaletteResponse,
)
from huekit.services.colors.codec import HSL, RGB, rgb_to_hsl, wrap_hue
from huekit.services.colors.naming import ColorMatch
from huekit.services.colors.palettes import (
    PALETTE_DESCRIPTIONS,
    PaletteKind,
    generate_palette_groups,
)
from huekit.services.colors.palettes.swatches import create_swatch_metadata, render_palette_swatch
from huekit.services.colors.remote_naming import RemoteNamingError, get_color_namer
from huekit.services.colors.validation import detect_input_format, parse_color_input
from huekit.utils.ids import generate_request_id
from huekit.utils.logging import get_logger
from huekit.utils.metrics import get_metrics

router = APIRouter(prefix="/v1", tags=["Colors"])

_namer = None


def get_namer():
    """Shared color namer built from configuration."""
    global _namer
    if _namer is None:
        _namer = get_color_namer(config)
    return _namer


def _parse_or_400(value: str, request_id: str) -> RGB:
    rgb = parse_color_input(value)
    if rgb is None:
        get_metrics().increment_failure_count("invalid_color")
        get_logger().warning("Unparseable color input", extra={"request_id": request_id, "input": value})
        raise HTTPException(status_code=400, detail=f"Unrecognized color value: {value!r}. Expected hex or 'r, g, b'")
    return rgb


def _name_color(namer, rgb: RGB, request_id: str) -> ColorNameResponse:
    try:
        match: ColorMatch = namer.name(rgb)
    except RemoteNamingError as e:
        get_metrics().increment_failure_count("remote_naming")
        get_logger().error("Color naming failed", extra={"request_id": request_id, "error": str(e)})
        raise HTTPException(status_code=502, detail="Color naming service unavailable")

    return ColorNameResponse(
        name=match.name,
        distance=match.distance,
        hex=match.hex,
        source=namer.source,
    )


def _finish(operation: str, request_id: str, start_time: float, **extra):
    duration_ms = (time.time() - start_time) * 1000
    get_metrics().record_timing(operation, duration_ms)
    get_logger().info(
        f"{operation} completed",
        extra={"request_id": request_id, "duration_ms": round(duration_ms, 2), **extra},
    )


@router.get("/colors/convert", response_model=ConvertResponse)
def convert_color(
    value: str = Query(..., min_length=1, max_length=64, description="Hex (#rrggbb, #rgb) or 'r, g, b' text"),
    namer=Depends(get_namer),
):
    """
    Convert a typed color into every notation.

    - **value**: hex with or without '#', 3 or 6 digits, or RGB text such as
      '255, 128, 0'
    """
    request_id = generate_request_id()
    start_time = time.time()
    get_metrics().increment_request_count("convert")

    rgb = _parse_or_400(value, request_id)
    response = ConvertResponse(
        input=value,
        input_format=detect_input_format(value),
        color=ColorRepresentation.from_rgb(rgb),
        name=_name_color(namer, rgb, request_id),
    )

    _finish("convert", request_id, start_time, hex=response.color.hex)
    return response


@router.get("/colors/from-hsl", response_model=ConvertResponse)
def convert_hsl(
    h: float = Query(..., allow_inf_nan=False, description="Hue in degrees, wrapped into [0, 360)"),
    s: float = Query(..., ge=0, le=100, description="Saturation percent"),
    l: float = Query(..., ge=0, le=100, description="Lightness percent"),
    namer=Depends(get_namer),
):
    """Convert an HSL triple into every notation."""
    request_id = generate_request_id()
    start_time = time.time()
    get_metrics().increment_request_count("from_hsl")

    color = ColorRepresentation.from_hsl(HSL(wrap_hue(h), s, l))
    rgb = RGB(color.rgb.r, color.rgb.g, color.rgb.b)
    response = ConvertResponse(
        input=f"hsl({h}, {s}%, {l}%)",
        input_format=None,
        color=color,
        name=_name_color(namer, rgb, request_id),
    )

    _finish("from_hsl", request_id, start_time, hex=color.hex)
    return response


@router.get("/colors/name", response_model=ColorNameResponse)
def name_color(
    value: str = Query(..., min_length=1, max_length=64, description="Hex or 'r, g, b' text"),
    namer=Depends(get_namer),
):
    """Closest named color for a typed color."""
    request_id = generate_request_id()
    start_time = time.time()
    get_metrics().increment_request_count("name")

    rgb = _parse_or_400(value, request_id)
    response = _name_color(namer, rgb, request_id)

    _finish("name", request_id, start_time, name=response.name, source=response.source)
    return response


@router.get("/palettes", response_model=PaletteResponse)
def get_palettes(
    value: str = Query(..., min_length=1, max_length=64, description="Base color as hex or 'r, g, b' text"),
    kinds: Optional[List[PaletteKind]] = Query(None, description="Palette kinds to include (default: all)"),
    jitter_seed: Optional[int] = Query(None, description="Seed for analogous jitter; omit for exact output"),
    include_swatch: bool = Query(False, description="Include a base64 PNG swatch"),
    swatch_format: str = Query("grouped", pattern="^(grouped|strip)$", description="Swatch layout"),
):
    """
    Generate palette groups from a base color.

    Groups are returned in fixed display order: Tints, Shades, Analogous,
    Complementary, Split Complementary, Triadic, Tetradic, Monochromatic.
    """
    request_id = generate_request_id()
    start_time = time.time()
    get_metrics().increment_request_count("palettes")

    rgb = _parse_or_400(value, request_id)
    base = rgb_to_hsl(rgb.r, rgb.g, rgb.b)
    rng = random.Random(jitter_seed) if jitter_seed is not None else None

    groups = generate_palette_groups(base, kinds=kinds, rng=rng, jitter=config.ANALOGOUS_JITTER)

    response = PaletteResponse(
        base=ColorRepresentation.from_rgb(rgb),
        groups=[
            PaletteGroupModel(
                kind=group.kind.value,
                title=group.title,
                description=PALETTE_DESCRIPTIONS[group.kind],
                colors=[ColorRepresentation.from_hsl(c) for c in group.colors],
            )
            for group in groups
        ],
        jitter_seed=jitter_seed,
    )

    if include_swatch:
        response.swatch_png_b64 = render_palette_swatch(
            groups,
            format_type=swatch_format,
            chip_size=config.SWATCH_CHIP_SIZE,
            spacing=config.SWATCH_SPACING,
        )
        response.swatch_metadata = create_swatch_metadata(
            groups, swatch_format, config.SWATCH_CHIP_SIZE, config.SWATCH_SPACING
        )

    _finish("palettes", request_id, start_time, base_hex=response.base.hex, groups=len(groups))
    return response
