"""
Color vision deficiency (CVD) simulation.

Fixed 3x3 approximations applied directly to gamma-encoded channels scaled
to [0, 1]. This is a lightweight preview model, not a physiological LMS
simulation.

Achromatomaly is a 50/50 blend of each channel with the achromatopsia gray.
Every caller (single colors, palette previews, swatches) goes through
:func:`simulate`, so the blend is the same everywhere.
"""

from enum import Enum
from typing import Dict, List, Sequence, Tuple

from loguru import logger

from .codec import RGB, hex_to_rgb, rgb_to_hex, round_half_up, to_rgb

Matrix = Tuple[Tuple[float, float, float], ...]


class CVDType(str, Enum):
    """Supported vision deficiency simulations."""
    NORMAL = "normal"
    PROTANOPIA = "protanopia"
    PROTANOMALY = "protanomaly"
    DEUTERANOPIA = "deuteranopia"
    DEUTERANOMALY = "deuteranomaly"
    TRITANOPIA = "tritanopia"
    TRITANOMALY = "tritanomaly"
    ACHROMATOPSIA = "achromatopsia"
    ACHROMATOMALY = "achromatomaly"


CVD_MATRICES: Dict[CVDType, Matrix] = {
    CVDType.PROTANOPIA: ((0.567, 0.433, 0.0), (0.558, 0.442, 0.0), (0.0, 0.242, 0.758)),
    CVDType.PROTANOMALY: ((0.817, 0.183, 0.0), (0.333, 0.667, 0.0), (0.0, 0.125, 0.875)),
    CVDType.DEUTERANOPIA: ((0.625, 0.375, 0.0), (0.7, 0.3, 0.0), (0.0, 0.3, 0.7)),
    CVDType.DEUTERANOMALY: ((0.8, 0.2, 0.0), (0.258, 0.742, 0.0), (0.0, 0.142, 0.858)),
    CVDType.TRITANOPIA: ((0.95, 0.05, 0.0), (0.0, 0.433, 0.567), (0.0, 0.475, 0.525)),
    CVDType.TRITANOMALY: ((0.967, 0.033, 0.0), (0.0, 0.733, 0.267), (0.0, 0.183, 0.817)),
}

GRAY_WEIGHTS = (0.299, 0.587, 0.114)

CVD_LABELS: Dict[CVDType, str] = {
    CVDType.NORMAL: "Original Palette",
    CVDType.PROTANOPIA: "Protanopia (Red-blind)",
    CVDType.PROTANOMALY: "Protanomaly (Red-weak)",
    CVDType.DEUTERANOPIA: "Deuteranopia (Green-blind)",
    CVDType.DEUTERANOMALY: "Deuteranomaly (Green-weak)",
    CVDType.TRITANOPIA: "Tritanopia (Blue-blind)",
    CVDType.TRITANOMALY: "Tritanomaly (Blue-weak)",
    CVDType.ACHROMATOPSIA: "Achromatopsia (Complete)",
    CVDType.ACHROMATOMALY: "Achromatomaly (Partial)",
}

_ALIASES = {"original": CVDType.NORMAL}


def parse_cvd_type(name, strict: bool = False) -> CVDType:
    """
    Resolve a CVD name (case-insensitive, ``original`` == ``normal``).

    Unknown names fall back to NORMAL unless ``strict`` is set, in which
    case ValueError is raised.
    """
    if isinstance(name, CVDType):
        return name
    key = str(name).strip().lower()
    if key in _ALIASES:
        return _ALIASES[key]
    try:
        return CVDType(key)
    except ValueError:
        if strict:
            raise ValueError(f"Unknown CVD type: {name!r}")
        logger.warning(f"Unknown CVD type {name!r}, showing original colors")
        return CVDType.NORMAL


def _gray(rgb: RGB) -> float:
    wr, wg, wb = GRAY_WEIGHTS
    return wr * rgb.r + wg * rgb.g + wb * rgb.b


def simulate(rgb: Sequence[float], cvd_type) -> RGB:
    """
    Simulate how ``rgb`` appears under a vision deficiency.

    Args:
        rgb: 8-bit (r, g, b)
        cvd_type: CVDType or its name

    Returns:
        Transformed 8-bit RGB
    """
    color = to_rgb(rgb)
    kind = parse_cvd_type(cvd_type)

    if kind is CVDType.NORMAL:
        return color

    if kind is CVDType.ACHROMATOPSIA:
        gray = _gray(color)
        return to_rgb((gray, gray, gray))

    if kind is CVDType.ACHROMATOMALY:
        gray = round_half_up(_gray(color))
        return to_rgb([(channel + gray) / 2 for channel in color])

    unit = [channel / 255.0 for channel in color]
    out = []
    for row in CVD_MATRICES[kind]:
        value = row[0] * unit[0] + row[1] * unit[1] + row[2] * unit[2]
        out.append(max(0.0, min(1.0, value)) * 255.0)
    return to_rgb(out)


def simulate_hex(hex_color: str, cvd_type) -> str:
    """Hex-in, hex-out variant of :func:`simulate`."""
    return rgb_to_hex(simulate(hex_to_rgb(hex_color), cvd_type))


def simulate_palette(hex_colors: Sequence[str], cvd_type) -> List[str]:
    """Simulate every color of a palette, preserving order."""
    kind = parse_cvd_type(cvd_type)
    return [simulate_hex(color, kind) for color in hex_colors]
