"""
PaletteKit Export Schemas
Pydantic models for the palette documents handed to design tools.
"""
from typing import List

from pydantic import BaseModel, Field

HEX_PATTERN = r"^#[0-9A-F]{6}$"


class AccessibilityInfo(BaseModel):
    """Contrast of a color against white and black text."""
    contrast_white: str = Field(
        ...,
        pattern=r"^\d+\.\d{2}$",
        description="Contrast ratio against white, two decimals"
    )
    contrast_black: str = Field(
        ...,
        pattern=r"^\d+\.\d{2}$",
        description="Contrast ratio against black, two decimals"
    )
    wcag_aa_large: bool = Field(..., description="White or black text reaches 3.0:1")
    wcag_aa: bool = Field(..., description="White or black text reaches 4.5:1")
    wcag_aaa: bool = Field(..., description="White or black text reaches 7.0:1")


class ColorDocument(BaseModel):
    """One palette color with all of its representations."""
    name: str = Field(..., description="Display name, e.g. 'Color 1'")
    hex: str = Field(..., pattern=HEX_PATTERN, description="Hex color code #RRGGBB")
    oklch: str = Field(..., description="CSS oklch() string")
    rgb: List[int] = Field(
        ...,
        min_length=3,
        max_length=3,
        description="8-bit channels [r, g, b]"
    )
    rgb_normalized: List[float] = Field(
        ...,
        min_length=3,
        max_length=3,
        description="Channels scaled to [0, 1]"
    )
    accessibility: AccessibilityInfo


class PaletteDocument(BaseModel):
    """Exported palette."""
    name: str = Field("Accessible Color Palette", description="Palette name")
    description: str = Field(
        "Color palette extracted from image",
        description="Free-form description"
    )
    generated_at: str = Field(..., description="UTC ISO-8601 generation timestamp")
    colors: List[ColorDocument] = Field(default_factory=list)
