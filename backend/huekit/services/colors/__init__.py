"""
HueKit Colors Module

Provides HEX/RGB/HSL conversion, permissive input parsing, palette
generation, swatch rendering and nearest-color naming.
"""

__version__ = "1.0.0"
