"""
Swatch Rendering Module

Renders a palette as a horizontal strip of color chips, optionally as seen
under a simulated vision deficiency, encoded as a base64 PNG.
"""

import base64
from typing import List, Optional, Sequence, Tuple

import cv2
import numpy as np
from loguru import logger

from palettekit.config import config

from .codec import hex_to_rgb
from .contrast import best_text_color
from .cvd import CVDType, simulate_palette


def hex_to_bgr(hex_color: str) -> Tuple[int, int, int]:
    """Convert hex color to BGR tuple for OpenCV."""
    r, g, b = hex_to_rgb(hex_color)
    return (b, g, r)


def render_swatch_strip(hex_colors: Sequence[str],
                        chip_size: Optional[int] = None,
                        highlight_index: Optional[int] = None,
                        cvd_type=CVDType.NORMAL,
                        border_width: int = 2) -> str:
    """
    Render a horizontal strip of color swatches.

    Args:
        hex_colors: Palette as hex strings
        chip_size: Size of each square chip in pixels (default from config)
        highlight_index: Chip to outline (e.g. the selected color)
        cvd_type: Deficiency to simulate before drawing
        border_width: Width of the highlight outline in pixels

    Returns:
        Base64-encoded PNG image string

    Raises:
        ValueError: Empty palette
        RuntimeError: PNG encoding failed
    """
    if not hex_colors:
        raise ValueError("Empty hex_colors list provided")

    if chip_size is None:
        chip_size = config.SWATCH_CHIP

    shown: List[str] = simulate_palette(hex_colors, cvd_type)
    k = len(shown)
    logger.debug(f"Rendering swatch strip with {k} colors, chip_size={chip_size}, cvd={cvd_type}")

    img = np.zeros((chip_size, chip_size * k, 3), dtype=np.uint8)
    for i, hex_color in enumerate(shown):
        img[:, i * chip_size:(i + 1) * chip_size, :] = hex_to_bgr(hex_color)

    if highlight_index is not None and 0 <= highlight_index < k:
        x_start = highlight_index * chip_size
        # Outline in whichever of black/white reads best on the chip
        outline = hex_to_bgr(best_text_color(shown[highlight_index]))
        cv2.rectangle(
            img,
            (x_start, 0),
            (x_start + chip_size - 1, chip_size - 1),
            outline,
            border_width,
        )

    success, buffer = cv2.imencode(".png", img)
    if not success:
        raise RuntimeError("Failed to encode swatch strip as PNG")

    b64_string = base64.b64encode(buffer.tobytes()).decode("ascii")
    logger.debug(f"Encoded swatch strip: {chip_size * k}×{chip_size} -> {len(b64_string)} chars")
    return b64_string
