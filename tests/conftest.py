"""
Test configuration and fixtures for PaletteKit tests.
"""
import io

import numpy as np
import pytest
from PIL import Image


def make_rgba(height, width, color, alpha=255):
    """Create a solid (H, W, 4) uint8 RGBA image."""
    img = np.zeros((height, width, 4), dtype=np.uint8)
    img[:, :, :3] = color
    img[:, :, 3] = alpha
    return img


@pytest.fixture
def rgba_image():
    """Factory for solid RGBA images."""
    return make_rgba


@pytest.fixture
def black_white_2x2():
    """2×2 image: top row black, bottom row white."""
    img = make_rgba(2, 2, (0, 0, 0))
    img[1, :, :3] = 255
    return img


@pytest.fixture
def red_blue_halves():
    """100×100 image, left half red, right half blue."""
    img = make_rgba(100, 100, (255, 0, 0))
    img[:, 50:, :3] = (0, 0, 255)
    return img


@pytest.fixture
def eight_color_image():
    """80×10 image with eight well-separated vertical bands."""
    colors = [
        (0, 0, 0), (255, 255, 255), (255, 0, 0), (0, 255, 0),
        (0, 0, 255), (255, 255, 0), (0, 255, 255), (255, 0, 255),
    ]
    img = make_rgba(10, 80, (0, 0, 0))
    for i, color in enumerate(colors):
        img[:, i * 10:(i + 1) * 10, :3] = color
    return img


@pytest.fixture
def png_bytes():
    """Factory encoding an RGBA/RGB numpy image as PNG bytes with Pillow."""
    def _encode(img, mode="RGBA"):
        buf = io.BytesIO()
        Image.fromarray(np.ascontiguousarray(img if mode == "RGBA" else img[:, :, :3])).save(buf, format="PNG")
        return buf.getvalue()
    return _encode


@pytest.fixture
def seeded_rng():
    """Deterministic numpy generator."""
    return np.random.default_rng(42)
