"""
Color space conversion: sRGB <-> linear RGB <-> OKLab <-> OKLCH.

OKLCH lightness is kept in [0, 1] (not percent); CSS rendering multiplies
by 100. Hue is in degrees, normalized to [0, 360), and is 0 for
achromatic colors.
"""

import math
from typing import NamedTuple, Sequence, Tuple

from .codec import RGB, hex_to_rgb, rgb_to_hex, to_rgb

# Linear sRGB -> LMS
LMS_MATRIX = (
    (0.4122214708, 0.5363325363, 0.0514459929),
    (0.2119034982, 0.6806995451, 0.1073969566),
    (0.0883024619, 0.2817188376, 0.6299787005),
)

# Cube-rooted LMS -> OKLab
OKLAB_MATRIX = (
    (0.2104542553, 0.7936177850, -0.0040720468),
    (1.9779984951, -2.4285922050, 0.4505937099),
    (0.0259040371, 0.7827717662, -0.8086757660),
)

# OKLab -> cube-rooted LMS
OKLAB_INV_MATRIX = (
    (1.0, 0.3963377774, 0.2158037573),
    (1.0, -0.1055613458, -0.0638541728),
    (1.0, -0.0894841775, -1.2914855480),
)

# LMS -> linear sRGB
LMS_INV_MATRIX = (
    (4.0767416621, -3.3077115913, 0.2309699292),
    (-1.2684380046, 2.6097574011, -0.3413193965),
    (-0.0041960863, -0.7034186147, 1.7076147010),
)

# Below this chroma the hue angle is numerical noise
ACHROMATIC_CHROMA = 1e-6


class OKLab(NamedTuple):
    """Cartesian OKLab coordinates."""
    l: float
    a: float
    b: float


class OKLCH(NamedTuple):
    """Polar OKLab: lightness [0, 1], chroma >= 0, hue degrees [0, 360)."""
    l: float
    c: float
    h: float


def _mul(matrix, vec: Sequence[float]) -> Tuple[float, float, float]:
    return tuple(row[0] * vec[0] + row[1] * vec[1] + row[2] * vec[2] for row in matrix)


def _finite(value: float) -> float:
    return value if math.isfinite(value) else 0.0


def srgb_to_linear(v: float) -> float:
    """Remove the sRGB transfer curve from a channel in [0, 1]."""
    if v <= 0.04045:
        return v / 12.92
    return ((v + 0.055) / 1.055) ** 2.4


def linear_to_srgb(v: float) -> float:
    """Apply the sRGB transfer curve to a linear channel."""
    if v <= 0.0031308:
        return v * 12.92
    return 1.055 * v ** (1 / 2.4) - 0.055


def normalize_hue(h: float) -> float:
    """Normalize a hue angle into [0, 360); NaN becomes 0."""
    if not math.isfinite(h):
        return 0.0
    h = h % 360.0
    # -1e-15 % 360 == 360.0 in floating point
    return 0.0 if h >= 360.0 else h


def linear_rgb_to_oklab(rgb_linear: Sequence[float]) -> OKLab:
    """Convert linear sRGB in [0, 1] to OKLab."""
    lms = _mul(LMS_MATRIX, rgb_linear)
    lms_ = [math.copysign(abs(x) ** (1 / 3), x) for x in lms]
    return OKLab(*_mul(OKLAB_MATRIX, lms_))


def oklab_to_linear_rgb(lab: OKLab) -> Tuple[float, float, float]:
    """Convert OKLab to (possibly out-of-gamut) linear sRGB."""
    lms_ = _mul(OKLAB_INV_MATRIX, lab)
    lms = [x * x * x for x in lms_]
    return _mul(LMS_INV_MATRIX, lms)


def oklab_to_oklch(lab: OKLab) -> OKLCH:
    """Polar-convert OKLab, clamping L to [0, 1] and zeroing achromatic hue."""
    l, a, b = (_finite(x) for x in lab)
    c = math.sqrt(a * a + b * b)
    h = 0.0 if c < ACHROMATIC_CHROMA else normalize_hue(math.degrees(math.atan2(b, a)))
    return OKLCH(max(0.0, min(1.0, l)), max(0.0, c), h)


def oklch_to_oklab(lch: OKLCH) -> OKLab:
    """Convert OKLCH to Cartesian OKLab."""
    l, c, h = (_finite(x) for x in lch)
    h_rad = math.radians(h)
    return OKLab(l, c * math.cos(h_rad), c * math.sin(h_rad))


def rgb_to_oklch(rgb: Sequence[float]) -> OKLCH:
    """
    Convert 8-bit sRGB to OKLCH.

    Args:
        rgb: (r, g, b) channels in [0, 255]

    Returns:
        OKLCH with l in [0, 1], c >= 0, h in [0, 360)
    """
    linear = [srgb_to_linear(channel / 255.0) for channel in to_rgb(rgb)]
    return oklab_to_oklch(linear_rgb_to_oklab(linear))


def oklch_to_rgb(lch: OKLCH) -> RGB:
    """
    Convert OKLCH to 8-bit sRGB.

    Out-of-gamut colors are clipped channel-wise.
    """
    l, c, h = (_finite(x) for x in lch)
    lab = oklch_to_oklab(OKLCH(max(0.0, min(1.0, l)), max(0.0, c), h))
    linear = oklab_to_linear_rgb(lab)
    return to_rgb([linear_to_srgb(v) * 255.0 for v in linear])


def hex_to_oklch(hex_color: str) -> OKLCH:
    return rgb_to_oklch(hex_to_rgb(hex_color))


def oklch_to_hex(lch: OKLCH) -> str:
    return rgb_to_hex(oklch_to_rgb(lch))


def oklch_to_css(lch: OKLCH) -> str:
    """Render as CSS ``oklch(L% C H)``, e.g. ``oklch(62.8% 0.258 29.2)``."""
    l, c, h = lch
    return f"oklch({l * 100:.1f}% {c:.3f} {h:.1f})"
