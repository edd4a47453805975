"""
PaletteKit Colors Module

Provides hex parsing, OKLab/OKLCH conversion, WCAG contrast scoring,
color vision deficiency simulation and k-means palette extraction.
"""

from .codec import RGB, MalformedColorInput, hex_to_rgb, rgb_to_hex
from .contrast import WCAGLevel, classify_contrast, contrast_ratio, relative_luminance
from .conversion import OKLCH, OKLab, oklch_to_css, oklch_to_rgb, rgb_to_oklch
from .cvd import CVDType, simulate, simulate_hex, simulate_palette
from .extraction import ExtractionConfig, InvalidPaletteSize, extract_palette

__all__ = [
    "RGB",
    "OKLab",
    "OKLCH",
    "CVDType",
    "WCAGLevel",
    "ExtractionConfig",
    "MalformedColorInput",
    "InvalidPaletteSize",
    "hex_to_rgb",
    "rgb_to_hex",
    "rgb_to_oklch",
    "oklch_to_rgb",
    "oklch_to_css",
    "relative_luminance",
    "contrast_ratio",
    "classify_contrast",
    "simulate",
    "simulate_hex",
    "simulate_palette",
    "extract_palette",
]
