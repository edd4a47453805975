"""
PaletteKit Configuration
Manages environment variables and defaults for the ambient services
(logging, image decoding, swatch rendering).

The color core never reads this module; its knobs live in
``palettekit.services.colors.extraction.ExtractionConfig``.
"""
import os


class Config:
    """Configuration class for PaletteKit services."""

    # Logging
    LOG_LEVEL: str = os.environ.get("PALETTEKIT_LOG_LEVEL", "INFO")

    # Image decoding
    MAX_EDGE: int = int(os.environ.get("PALETTEKIT_MAX_EDGE", "400"))
    MAX_SOURCE_EDGE: int = int(os.environ.get("PALETTEKIT_MAX_SOURCE_EDGE", "16384"))
    MAX_FILE_MB: int = int(os.environ.get("PALETTEKIT_MAX_FILE_MB", "10"))

    # Swatch rendering
    SWATCH_CHIP: int = int(os.environ.get("PALETTEKIT_SWATCH_CHIP", "40"))

    # Image formats accepted by the decoder, as raw bytes or data URLs
    SUPPORTED_IMAGE_FORMATS = ["jpeg", "png", "gif", "webp", "bmp"]

    @classmethod
    def validate_max_edge(cls, max_edge: int) -> bool:
        """Validate downscale bound."""
        return 16 <= max_edge <= 4096


# Global config instance
config = Config()
