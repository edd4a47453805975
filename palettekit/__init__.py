"""
PaletteKit

Accessible color palette extraction: dominant colors from images, OKLCH
conversion, vision deficiency previews and WCAG contrast scoring.
"""

__version__ = "1.0.0"
