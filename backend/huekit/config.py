"""
HueKit Configuration
Manages environment variables and defaults for the color service.
"""
import os
from typing import Literal


class Config:
    """Configuration class for HueKit services."""

    # Logging
    LOG_LEVEL: str = os.environ.get("HUEKIT_LOG_LEVEL", "INFO")

    # Color naming
    NAMER_BACKEND: Literal["local", "remote"] = os.environ.get("HUEKIT_NAMER_BACKEND", "local")
    REMOTE_NAMER_URL: str = os.environ.get("HUEKIT_REMOTE_NAMER_URL", "https://www.thecolorapi.com")
    REMOTE_NAMER_TIMEOUT: float = float(os.environ.get("HUEKIT_REMOTE_NAMER_TIMEOUT", "5"))
    REMOTE_NAMER_FALLBACK: bool = bool(int(os.environ.get("HUEKIT_REMOTE_NAMER_FALLBACK", "1")))

    # Palette generation
    ANALOGOUS_JITTER: int = int(os.environ.get("HUEKIT_ANALOGOUS_JITTER", "5"))

    # Swatches
    SWATCH_CHIP_SIZE: int = int(os.environ.get("HUEKIT_SWATCH_CHIP_SIZE", "40"))
    SWATCH_SPACING: int = int(os.environ.get("HUEKIT_SWATCH_SPACING", "2"))

    # CORS settings
    ALLOWED_ORIGINS: str = os.environ.get("HUEKIT_ALLOWED_ORIGINS", "http://localhost:3000")

    SUPPORTED_NAMER_BACKENDS = ("local", "remote")
    SUPPORTED_SWATCH_FORMATS = ("grouped", "strip")

    @classmethod
    def validate_namer_backend(cls, backend: str) -> bool:
        """Validate color namer backend."""
        return backend in cls.SUPPORTED_NAMER_BACKENDS

    @classmethod
    def validate_swatch_format(cls, format_type: str) -> bool:
        """Validate swatch format."""
        return format_type in cls.SUPPORTED_SWATCH_FORMATS

    @classmethod
    def validate_chip_size(cls, chip_size: int) -> bool:
        """Validate swatch chip size in pixels."""
        return 8 <= chip_size <= 256

    @classmethod
    def allowed_origins(cls) -> list:
        return [origin.strip() for origin in cls.ALLOWED_ORIGINS.split(",") if origin.strip()]


# Global config instance
config = Config()
