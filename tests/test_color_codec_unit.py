"""
Unit tests for the hex color codec.
"""

import numpy as np
import pytest

from palettekit.services.colors.codec import (
    RGB, MalformedColorInput, hex_to_rgb, normalize_hex, rgb_to_hex,
    rgb_to_unit, round_half_up, sanitize_hex
)


class TestHexToRgb:
    """Test lenient and strict hex parsing"""

    def test_basic_colors(self):
        assert hex_to_rgb("#FF0000") == RGB(255, 0, 0)
        assert hex_to_rgb("#00ff00") == RGB(0, 255, 0)
        assert hex_to_rgb("0000FF") == RGB(0, 0, 255)
        assert hex_to_rgb("#1f4E79") == (31, 78, 121)

    def test_invalid_input_decodes_to_black(self):
        """Malformed strings fall back to black instead of raising"""
        assert hex_to_rgb("not-a-color") == RGB(0, 0, 0)
        assert hex_to_rgb("#FFF") == RGB(0, 0, 0)
        assert hex_to_rgb("#GGGGGG") == RGB(0, 0, 0)
        assert hex_to_rgb("#FF00000") == RGB(0, 0, 0)
        assert hex_to_rgb("") == RGB(0, 0, 0)
        assert hex_to_rgb(None) == RGB(0, 0, 0)

    def test_trailing_newline_rejected(self):
        assert hex_to_rgb("#FF0000\n") == RGB(0, 0, 0)

    def test_strict_mode_raises(self):
        with pytest.raises(MalformedColorInput):
            hex_to_rgb("not-a-color", strict=True)
        with pytest.raises(ValueError):
            hex_to_rgb("#12345", strict=True)

    def test_strict_mode_accepts_valid(self):
        assert hex_to_rgb("#abcdef", strict=True) == RGB(171, 205, 239)


class TestRgbToHex:
    """Test RGB to hex serialization"""

    def test_uppercase_output(self):
        assert rgb_to_hex((255, 0, 0)) == "#FF0000"
        assert rgb_to_hex((171, 205, 239)) == "#ABCDEF"
        assert rgb_to_hex((0, 0, 0)) == "#000000"

    def test_rounds_and_clamps(self):
        assert rgb_to_hex((254.6, -3, 300)) == "#FF00FF"
        assert rgb_to_hex((127.5, 0.49, 10.5)) == "#80000B"

    def test_numpy_input(self):
        assert rgb_to_hex(np.array([31, 78, 121])) == "#1F4E79"
        assert rgb_to_hex(np.array([10.4, 42.0, 67.2])) == "#0A2A43"

    def test_nan_becomes_zero(self):
        assert rgb_to_hex((float("nan"), 255, 255)) == "#00FFFF"

    def test_hex_round_trip(self):
        for rgb in [(0, 0, 0), (255, 255, 255), (1, 2, 3), (211, 181, 143), (45, 117, 96)]:
            assert hex_to_rgb(rgb_to_hex(rgb)) == rgb


class TestHelpers:
    """Test normalization and sanitizing helpers"""

    def test_round_half_up(self):
        assert round_half_up(0.5) == 1
        assert round_half_up(2.5) == 3
        assert round_half_up(2.49) == 2
        assert round_half_up(float("inf")) == 0

    def test_normalize_hex(self):
        assert normalize_hex("ff0000") == "#FF0000"
        assert normalize_hex("#aBcDeF") == "#ABCDEF"
        assert normalize_hex("junk") == "#000000"

    def test_sanitize_hex(self):
        assert sanitize_hex(" #ab-cd ef ") == "#ABCDEF"
        assert sanitize_hex("#1F4E79") == "#1F4E79"
        assert sanitize_hex("xyz") == "#000000"
        assert sanitize_hex("") == "#000000"
        assert sanitize_hex("abcdef") == "#000000"

    def test_rgb_to_unit(self):
        assert rgb_to_unit((255, 0, 51)) == pytest.approx((1.0, 0.0, 0.2))
