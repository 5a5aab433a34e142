"""
HueKit color engine: HEX/RGB/HSL conversion, palette generation and
nearest-color naming, served over a small FastAPI app.
"""

__version__ = "1.0.0"
