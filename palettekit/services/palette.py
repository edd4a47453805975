"""
Palette assembly and export.

Glue between the color core and callers: decodes an image, extracts a
palette, annotates each color with OKLCH and contrast data, and produces
the hex-list and document export formats.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import List, Optional, Sequence

from palettekit.schemas import AccessibilityInfo, ColorDocument, PaletteDocument
from palettekit.services.colors.codec import hex_to_rgb, normalize_hex, rgb_to_unit
from palettekit.services.colors.contrast import accessibility_report, contrast_ratio
from palettekit.services.colors.conversion import OKLCH, oklch_to_css, rgb_to_oklch
from palettekit.services.colors.extraction import ExtractionConfig, extract_palette
from palettekit.services.imaging import ImageSource, decode_image, get_image_dimensions
from palettekit.utils.ids import generate_extraction_id
from palettekit.utils.logging import get_logger


@dataclass(frozen=True)
class PaletteColor:
    """A palette entry annotated for display."""
    hex: str
    oklch: OKLCH
    contrast_white: float
    contrast_black: float

    @property
    def oklch_css(self) -> str:
        return oklch_to_css(self.oklch)


def describe_color(hex_color: str) -> PaletteColor:
    """Annotate one color with its OKLCH value and black/white contrast."""
    hex_color = normalize_hex(hex_color)
    return PaletteColor(
        hex=hex_color,
        oklch=rgb_to_oklch(hex_to_rgb(hex_color)),
        contrast_white=contrast_ratio(hex_color, "#FFFFFF"),
        contrast_black=contrast_ratio(hex_color, "#000000"),
    )


def build_palette(hex_colors: Sequence[str]) -> List[PaletteColor]:
    return [describe_color(color) for color in hex_colors]


def extract_palette_from_image(source: ImageSource, k: Optional[int] = None,
                               config: Optional[ExtractionConfig] = None,
                               max_edge: Optional[int] = None) -> List[PaletteColor]:
    """
    Decode an image and return its annotated palette.

    Args:
        source: Anything :func:`decode_image` accepts
        k: Palette size (defaults to config.k)
        config: Extraction knobs
        max_edge: Downscale bound before sampling

    Returns:
        Annotated palette in centroid order (empty for out-of-range k)

    Raises:
        ValueError: If the image cannot be decoded
    """
    log = get_logger().bind(extraction_id=generate_extraction_id())

    rgba = decode_image(source, max_edge=max_edge)
    width, height = get_image_dimensions(rgba)
    log.info("Image decoded", extra={"width": width, "height": height})

    palette = build_palette(extract_palette(rgba, k=k, config=config))
    log.info("Palette extracted", extra={"palette_size": len(palette)})
    return palette


def export_hex_list(colors: Sequence) -> str:
    """Join hex codes as ``#AAAAAA, #BBBBBB`` for the clipboard."""
    return ", ".join(_hex_of(color) for color in colors)


def _hex_of(color) -> str:
    return color.hex if isinstance(color, PaletteColor) else normalize_hex(color)


def export_palette_document(colors: Sequence,
                            name: str = "Accessible Color Palette",
                            description: str = "Color palette extracted from image",
                            generated_at: Optional[datetime] = None) -> PaletteDocument:
    """
    Build the structured export document.

    Args:
        colors: PaletteColor entries or hex strings
        name: Palette name
        description: Palette description
        generated_at: Timestamp (defaults to now, UTC)

    Returns:
        PaletteDocument; serialize with ``model_dump_json(indent=2)``
    """
    generated_at = generated_at or datetime.now(timezone.utc)

    entries = []
    for index, color in enumerate(colors, start=1):
        hex_color = _hex_of(color)
        rgb = hex_to_rgb(hex_color)
        report = accessibility_report(hex_color)
        entries.append(ColorDocument(
            name=f"Color {index}",
            hex=hex_color,
            oklch=oklch_to_css(rgb_to_oklch(rgb)),
            rgb=list(rgb),
            rgb_normalized=list(rgb_to_unit(rgb)),
            accessibility=AccessibilityInfo(
                contrast_white=f"{report.contrast_white:.2f}",
                contrast_black=f"{report.contrast_black:.2f}",
                wcag_aa_large=report.wcag_aa_large,
                wcag_aa=report.wcag_aa,
                wcag_aaa=report.wcag_aaa,
            ),
        ))

    return PaletteDocument(
        name=name,
        description=description,
        generated_at=generated_at.isoformat(),
        colors=entries,
    )
