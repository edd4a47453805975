"""
Unit tests for color vision deficiency simulation.
"""

import pytest

from palettekit.services.colors.codec import RGB
from palettekit.services.colors.cvd import (
    CVD_LABELS, CVD_MATRICES, CVDType, parse_cvd_type, simulate,
    simulate_hex, simulate_palette
)

SAMPLE_COLORS = [(255, 0, 0), (0, 255, 0), (0, 0, 255), (31, 78, 121), (200, 150, 10)]


class TestIdentity:
    """Test the normal / original view"""

    def test_normal_is_identity(self):
        for rgb in SAMPLE_COLORS:
            assert simulate(rgb, CVDType.NORMAL) == rgb

    def test_original_alias(self):
        assert parse_cvd_type("original") is CVDType.NORMAL
        assert simulate((12, 34, 56), "original") == RGB(12, 34, 56)


class TestMatrixTypes:
    """Test matrix-based deficiencies"""

    def test_protanopia_red(self):
        """(0.567*255, 0.558*255, 0) rounds to (145, 142, 0)"""
        assert simulate((255, 0, 0), CVDType.PROTANOPIA) == RGB(145, 142, 0)
        assert simulate_hex("#FF0000", "protanopia") == "#918E00"

    def test_tritanopia_blue(self):
        assert simulate((0, 0, 255), CVDType.TRITANOPIA) == RGB(0, 145, 134)

    def test_white_is_preserved(self):
        """Every matrix row sums to 1, so white stays white"""
        for kind in CVD_MATRICES:
            assert simulate((255, 255, 255), kind) == RGB(255, 255, 255), kind

    def test_black_is_preserved(self):
        for kind in CVDType:
            assert simulate((0, 0, 0), kind) == RGB(0, 0, 0), kind

    def test_deterministic(self):
        for kind in CVDType:
            for rgb in SAMPLE_COLORS:
                assert simulate(rgb, kind) == simulate(rgb, kind)

    def test_output_in_range(self):
        for kind in CVDType:
            for rgb in SAMPLE_COLORS:
                out = simulate(rgb, kind)
                assert all(0 <= ch <= 255 for ch in out)


class TestAchromatic:
    """Test grayscale deficiencies"""

    def test_achromatopsia(self):
        assert simulate((255, 0, 0), CVDType.ACHROMATOPSIA) == RGB(76, 76, 76)
        assert simulate((255, 255, 255), CVDType.ACHROMATOPSIA) == RGB(255, 255, 255)

    def test_achromatomaly_half_blend(self):
        """Each channel is averaged with the rounded gray (76)"""
        assert simulate((255, 0, 0), CVDType.ACHROMATOMALY) == RGB(166, 38, 38)

    def test_achromatomaly_keeps_grays(self):
        assert simulate((128, 128, 128), CVDType.ACHROMATOMALY) == RGB(128, 128, 128)


class TestPalette:
    """Test palette-level helpers"""

    def test_simulate_palette_preserves_order(self):
        palette = ["#ff0000", "#00FF00", "#0000FF"]
        out = simulate_palette(palette, "achromatopsia")
        assert len(out) == 3
        assert out[0] == "#4C4C4C"
        assert all(c[1:3] == c[3:5] == c[5:7] for c in out)

    def test_simulate_palette_normal_normalizes_case(self):
        assert simulate_palette(["#abcdef"], CVDType.NORMAL) == ["#ABCDEF"]

    def test_parse_cvd_type(self):
        assert parse_cvd_type("Protanopia") is CVDType.PROTANOPIA
        assert parse_cvd_type(CVDType.TRITANOMALY) is CVDType.TRITANOMALY
        assert parse_cvd_type("bogus") is CVDType.NORMAL
        with pytest.raises(ValueError):
            parse_cvd_type("bogus", strict=True)

    def test_every_type_has_label(self):
        assert set(CVD_LABELS) == set(CVDType)
        assert CVD_LABELS[CVDType.PROTANOPIA] == "Protanopia (Red-blind)"
