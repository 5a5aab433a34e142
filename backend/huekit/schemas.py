"""
HueKit API Schemas
Pydantic models for color conversion, naming and palette responses.
"""
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from huekit.services.colors.codec import HSL, RGB, hsl_to_css, hsl_to_rgb, rgb_to_css, rgb_to_hex, rgb_to_hsl


class HealthResponse(BaseModel):
    """Health check response."""
    ok: bool = Field(True, description="Service health status")
    version: str = Field(..., description="Service version")
    service: str = Field("huekit-colors", description="Service name")


class ErrorResponse(BaseModel):
    """Error response."""
    detail: str = Field(..., description="Error message")


class RGBModel(BaseModel):
    """RGB channels."""
    r: int = Field(..., ge=0, le=255)
    g: int = Field(..., ge=0, le=255)
    b: int = Field(..., ge=0, le=255)


class HSLModel(BaseModel):
    """HSL components; fractional values appear only in refined recipes."""
    h: float = Field(..., ge=0, lt=360, description="Hue in degrees")
    s: float = Field(..., ge=0, le=100, description="Saturation percent")
    l: float = Field(..., ge=0, le=100, description="Lightness percent")


class ColorRepresentation(BaseModel):
    """One color in every supported notation."""
    hex: str = Field(..., pattern=r"^#[0-9a-f]{6}$", description="Lowercase hex code #rrggbb")
    rgb: RGBModel
    hsl: HSLModel
    css_rgb: str = Field(..., description="CSS rgb() text")
    css_hsl: str = Field(..., description="CSS hsl() text")

    @classmethod
    def from_rgb(cls, rgb: RGB) -> "ColorRepresentation":
        hsl = rgb_to_hsl(rgb.r, rgb.g, rgb.b)
        return cls._build(rgb, hsl)

    @classmethod
    def from_hsl(cls, hsl: HSL) -> "ColorRepresentation":
        return cls._build(hsl_to_rgb(hsl.h, hsl.s, hsl.l), hsl)

    @classmethod
    def _build(cls, rgb: RGB, hsl: HSL) -> "ColorRepresentation":
        return cls(
            hex=rgb_to_hex(rgb.r, rgb.g, rgb.b),
            rgb=RGBModel(r=rgb.r, g=rgb.g, b=rgb.b),
            hsl=HSLModel(h=hsl.h, s=hsl.s, l=hsl.l),
            css_rgb=rgb_to_css(rgb),
            css_hsl=hsl_to_css(hsl),
        )


class ColorNameResponse(BaseModel):
    """Closest named color."""
    name: str = Field(..., description="Closest color name, 'Unknown' for unreadable input")
    distance: float = Field(..., ge=0.0, description="Euclidean RGB distance to the named color")
    hex: Optional[str] = Field(None, description="Hex of the matched named color")
    source: str = Field(..., description="Configured namer backend: 'local' or 'remote'")


class ConvertResponse(BaseModel):
    """Conversion result for a parsed color input."""
    input: str = Field(..., description="Raw input value")
    input_format: Optional[str] = Field(None, description="'HEX', 'RGB' or None for HSL input")
    color: ColorRepresentation
    name: ColorNameResponse


class PaletteGroupModel(BaseModel):
    """An ordered palette of one kind."""
    kind: str
    title: str
    description: str
    colors: List[ColorRepresentation]


class PaletteResponse(BaseModel):
    """Palette groups derived from a base color."""
    base: ColorRepresentation
    groups: List[PaletteGroupModel]
    jitter_seed: Optional[int] = Field(None, description="Seed used for analogous jitter, if any")
    swatch_png_b64: Optional[str] = Field(None, description="Base64-encoded PNG swatch of the groups")
    swatch_metadata: Optional[Dict[str, Any]] = None
