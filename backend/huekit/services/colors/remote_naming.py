"""
HueKit Remote Color Naming

Delegates color naming to an HTTP color-naming service (The Color API
compatible: GET /id?hex=RRGGBB) behind the same ColorMatch contract as the
local table. Failures can fall back to another namer.
"""

from typing import Any, Dict, Optional

import requests

from huekit.config import Config
from huekit.utils.logging import get_logger
from huekit.utils.metrics import get_metrics

from .codec import normalize_hex, rgb_to_hex
from .naming import UNKNOWN_MATCH, ColorInput, ColorMatch, LocalColorNamer, coerce_rgb


class RemoteNamingError(Exception):
    """Remote color-naming service failed or returned an unusable payload."""
    pass


class RemoteColorNamer:
    """Names colors by asking a remote color-naming service."""

    source = "remote"

    def __init__(
        self,
        base_url: str,
        timeout: float = 5.0,
        fallback: Optional[LocalColorNamer] = None,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.fallback = fallback
        self.session = session or requests.Session()

    def name(self, color: ColorInput) -> ColorMatch:
        """
        Look up the name of a color remotely.

        Returns:
            ColorMatch from the service, from the fallback namer when the
            service fails and a fallback is set, or UNKNOWN_MATCH for
            unreadable input (no request is made)

        Raises:
            RemoteNamingError: If the service fails and no fallback is set
        """
        rgb = coerce_rgb(color)
        if rgb is None:
            return UNKNOWN_MATCH

        hex_color = rgb_to_hex(rgb.r, rgb.g, rgb.b)
        try:
            return self._fetch(hex_color)
        except RemoteNamingError as e:
            if self.fallback is None:
                raise
            get_logger().warning(
                "Remote color naming failed, using fallback",
                extra={"hex": hex_color, "error": str(e)},
            )
            get_metrics().increment_namer_fallback_count()
            return self.fallback.name(rgb)

    def _fetch(self, hex_color: str) -> ColorMatch:
        url = f"{self.base_url}/id"
        try:
            response = self.session.get(
                url,
                params={"hex": hex_color.lstrip("#").upper()},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise RemoteNamingError(f"Color naming request failed: {e}") from e

        if response.status_code != 200:
            raise RemoteNamingError(f"Color naming service returned {response.status_code}")

        try:
            payload = response.json()
        except ValueError as e:
            raise RemoteNamingError("Color naming service returned invalid JSON") from e

        return parse_color_api_payload(payload)


def parse_color_api_payload(payload: Dict[str, Any]) -> ColorMatch:
    """
    Turn a color-naming service response into a ColorMatch.

    Raises:
        RemoteNamingError: If the name block is missing or malformed
    """
    name_block = payload.get("name") if isinstance(payload, dict) else None
    if not isinstance(name_block, dict) or not name_block.get("value"):
        raise RemoteNamingError("Color naming response has no name")

    try:
        distance = float(name_block.get("distance", 0))
    except (TypeError, ValueError) as e:
        raise RemoteNamingError("Color naming response has a bad distance") from e

    closest_hex = name_block.get("closest_named_hex")
    return ColorMatch(
        name=str(name_block["value"]),
        distance=distance,
        hex=normalize_hex(closest_hex) if isinstance(closest_hex, str) else None,
    )


def get_color_namer(config: Config):
    """
    Build the namer selected by configuration.

    Raises:
        ValueError: If NAMER_BACKEND is not a supported backend
    """
    if not config.validate_namer_backend(config.NAMER_BACKEND):
        raise ValueError(f"Unsupported color namer backend: {config.NAMER_BACKEND}")

    if config.NAMER_BACKEND == "remote":
        return RemoteColorNamer(
            base_url=config.REMOTE_NAMER_URL,
            timeout=config.REMOTE_NAMER_TIMEOUT,
            fallback=LocalColorNamer() if config.REMOTE_NAMER_FALLBACK else None,
        )
    return LocalColorNamer()
