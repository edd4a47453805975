"""
WCAG 2.1 relative luminance and contrast ratio.

Luminance linearizes with the published WCAG threshold of 0.03928; the OKLCH
conversion uses 0.04045. No 8-bit channel value falls between the two.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from .codec import hex_to_rgb, to_rgb

WCAG_LINEAR_THRESHOLD = 0.03928
LUMINANCE_WEIGHTS = (0.2126, 0.7152, 0.0722)

AA_LARGE_RATIO = 3.0
AA_RATIO = 4.5
AAA_RATIO = 7.0

WHITE_HEX = "#FFFFFF"
BLACK_HEX = "#000000"


class WCAGLevel(str, Enum):
    """Highest WCAG level a contrast ratio satisfies."""
    FAIL = "fail"
    AA_LARGE = "aa_large"  # large text only
    AA = "aa"
    AAA = "aaa"


@dataclass(frozen=True)
class AccessibilityReport:
    """Contrast of one color against white and black text."""
    contrast_white: float
    contrast_black: float
    wcag_aa_large: bool
    wcag_aa: bool
    wcag_aaa: bool


def _linearize(channel: float) -> float:
    v = channel / 255.0
    if v <= WCAG_LINEAR_THRESHOLD:
        return v / 12.92
    return ((v + 0.055) / 1.055) ** 2.4


def relative_luminance(rgb: Sequence[float]) -> float:
    """WCAG relative luminance of an 8-bit sRGB color, in [0, 1]."""
    r, g, b = (_linearize(c) for c in to_rgb(rgb))
    wr, wg, wb = LUMINANCE_WEIGHTS
    return wr * r + wg * g + wb * b


def contrast_ratio(hex_a: str, hex_b: str) -> float:
    """
    WCAG contrast ratio between two hex colors.

    Symmetric in its arguments; ranges from 1.0 (same color) to 21.0
    (black on white). Malformed hex is read as black.
    """
    lum_a = relative_luminance(hex_to_rgb(hex_a))
    lum_b = relative_luminance(hex_to_rgb(hex_b))
    lighter, darker = max(lum_a, lum_b), min(lum_a, lum_b)
    return (lighter + 0.05) / (darker + 0.05)


def classify_contrast(ratio: float) -> WCAGLevel:
    """Map a contrast ratio to the highest WCAG level it reaches."""
    if ratio >= AAA_RATIO:
        return WCAGLevel.AAA
    if ratio >= AA_RATIO:
        return WCAGLevel.AA
    if ratio >= AA_LARGE_RATIO:
        return WCAGLevel.AA_LARGE
    return WCAGLevel.FAIL


def best_text_color(hex_color: str) -> str:
    """Pick white or black text for a background, whichever contrasts more."""
    on_white = contrast_ratio(hex_color, WHITE_HEX)
    on_black = contrast_ratio(hex_color, BLACK_HEX)
    return WHITE_HEX if on_white > on_black else BLACK_HEX


def accessibility_report(hex_color: str) -> AccessibilityReport:
    """
    Score a color against white and black text.

    Each WCAG flag holds when either white or black text reaches the
    threshold on this color.
    """
    on_white = contrast_ratio(hex_color, WHITE_HEX)
    on_black = contrast_ratio(hex_color, BLACK_HEX)
    best = max(on_white, on_black)
    return AccessibilityReport(
        contrast_white=on_white,
        contrast_black=on_black,
        wcag_aa_large=best >= AA_LARGE_RATIO,
        wcag_aa=best >= AA_RATIO,
        wcag_aaa=best >= AAA_RATIO,
    )
