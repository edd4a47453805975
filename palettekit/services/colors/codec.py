"""
Hex color codec.

Parses and serializes ``#RRGGBB`` strings and rounds/clamps RGB triples.
Parsing is lenient by default: malformed input decodes to black. Callers
that need validation pass ``strict=True`` and handle MalformedColorInput.
Output hex is always uppercase.
"""

import math
import re
from typing import NamedTuple, Sequence, Tuple

from loguru import logger

HEX_PATTERN = re.compile(r"#?([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})")
_NON_HEX = re.compile(r"[^#0-9a-fA-F]")

BLACK_HEX = "#000000"


class MalformedColorInput(ValueError):
    """Raised by strict parsing when a string is not a 6-digit hex color."""
    pass


class RGB(NamedTuple):
    """8-bit sRGB color, each channel an int in [0, 255]."""
    r: int
    g: int
    b: int


BLACK = RGB(0, 0, 0)


def round_half_up(value: float) -> int:
    """Round to nearest integer with .5 going up; NaN rounds to 0."""
    if not math.isfinite(value):
        return 0
    return int(math.floor(value + 0.5))


def clamp_channel(value: float) -> int:
    """Round and clamp a channel value into [0, 255]."""
    return max(0, min(255, round_half_up(float(value))))


def to_rgb(values: Sequence[float]) -> RGB:
    """Build an RGB from any 3-sequence of numbers (ints, floats, numpy)."""
    r, g, b = (clamp_channel(v) for v in values)
    return RGB(r, g, b)


def hex_to_rgb(hex_color: str, strict: bool = False) -> RGB:
    """
    Convert hex color string to RGB.

    Accepts ``#RRGGBB`` or ``RRGGBB`` in any letter case.

    Args:
        hex_color: Hex color string
        strict: Raise MalformedColorInput instead of returning black

    Returns:
        RGB tuple; black for malformed input in lenient mode
    """
    match = HEX_PATTERN.fullmatch(hex_color) if isinstance(hex_color, str) else None
    if match is None:
        if strict:
            raise MalformedColorInput(f"Invalid hex color format: {hex_color!r}")
        logger.debug(f"Malformed hex color {hex_color!r}, using black")
        return BLACK
    return RGB(*(int(group, 16) for group in match.groups()))


def rgb_to_hex(rgb: Sequence[float]) -> str:
    """Convert RGB channels (rounded and clamped) to ``#RRGGBB``."""
    r, g, b = to_rgb(rgb)
    return f"#{r:02X}{g:02X}{b:02X}"


def normalize_hex(hex_color: str, strict: bool = False) -> str:
    """Parse and re-serialize a hex color, e.g. ``ff0000`` -> ``#FF0000``."""
    return rgb_to_hex(hex_to_rgb(hex_color, strict=strict))


def sanitize_hex(value: str) -> str:
    """
    Strip everything but ``#`` and hex digits, then normalize.

    Anything that is not ``#RRGGBB`` after stripping becomes black.
    """
    if not isinstance(value, str) or not value:
        return BLACK_HEX
    cleaned = _NON_HEX.sub("", value)
    if re.fullmatch(r"#[0-9a-fA-F]{6}", cleaned) is None:
        return BLACK_HEX
    return cleaned.upper()


def rgb_to_unit(rgb: Sequence[float]) -> Tuple[float, float, float]:
    """Scale 8-bit channels to [0, 1]."""
    r, g, b = to_rgb(rgb)
    return (r / 255.0, g / 255.0, b / 255.0)
