"""
PaletteKit Imaging Utilities
Decodes encoded images into the RGBA pixel buffers the palette extractor
consumes, with dimension checks and a bounded downscale.
"""
import base64
import binascii
import io
import os
import re
from typing import BinaryIO, Optional, Tuple, Union

import cv2
import numpy as np
from loguru import logger
from PIL import Image, UnidentifiedImageError

from palettekit.config import config

ImageSource = Union[bytes, bytearray, str, os.PathLike, BinaryIO]

_DATA_URL = re.compile(r"^data:image/([a-z]+);base64,", re.IGNORECASE)
_WHITESPACE = re.compile(r"\s+")


def decode_data_url(data_url: str) -> bytes:
    """
    Decode a ``data:image/<type>;base64,`` URL to raw bytes.

    Raises:
        ValueError: Unsupported image type or invalid base64 payload
    """
    match = _DATA_URL.match(data_url)
    if match is None or match.group(1).lower() not in config.SUPPORTED_IMAGE_FORMATS:
        raise ValueError(
            f"Unsupported data URL. Supported: {', '.join(config.SUPPORTED_IMAGE_FORMATS)}"
        )
    try:
        # MIME-style payloads wrap lines every 76 characters
        payload = _WHITESPACE.sub("", data_url[match.end():])
        return base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ValueError(f"Invalid base64 image data: {str(e)}") from e


def _read_source(source: ImageSource) -> bytes:
    if isinstance(source, (bytes, bytearray)):
        return bytes(source)
    if isinstance(source, str) and source.startswith("data:"):
        return decode_data_url(source)
    if isinstance(source, (str, os.PathLike)):
        try:
            with open(source, "rb") as fh:
                return fh.read()
        except OSError as e:
            raise ValueError(f"Failed to read image file: {str(e)}") from e
    return source.read()


def validate_file_size(size_bytes: int, max_file_mb: Optional[int] = None) -> None:
    """
    Reject encoded images larger than the configured upload limit.

    Raises:
        ValueError: If size_bytes exceeds max_file_mb megabytes
    """
    if max_file_mb is None:
        max_file_mb = config.MAX_FILE_MB
    if size_bytes > max_file_mb * 1024 * 1024:
        raise ValueError(f"File too large. Maximum size: {max_file_mb}MB")


def validate_format(image_format: Optional[str]) -> None:
    """
    Reject image formats outside config.SUPPORTED_IMAGE_FORMATS.

    Raises:
        ValueError: For unsupported or unknown formats
    """
    if (image_format or "").lower() not in config.SUPPORTED_IMAGE_FORMATS:
        raise ValueError(
            f"Unsupported image format {image_format}. "
            f"Supported: {', '.join(config.SUPPORTED_IMAGE_FORMATS)}"
        )


def validate_dimensions(width: int, height: int, max_source_edge: Optional[int] = None) -> None:
    """
    Reject images that are empty or larger than the accepted source size.

    Raises:
        ValueError: If either side is outside 1..max_source_edge
    """
    if max_source_edge is None:
        max_source_edge = config.MAX_SOURCE_EDGE
    if not (1 <= width <= max_source_edge and 1 <= height <= max_source_edge):
        raise ValueError(
            f"Invalid image dimensions {width}×{height}. "
            f"Each side must be within 1..{max_source_edge}px"
        )


def resize_long_edge(img_rgba: np.ndarray, max_edge: Optional[int] = None) -> np.ndarray:
    """
    Resize image so the longest edge is at most max_edge pixels.

    Images already within bounds are returned unchanged (never upscaled).

    Args:
        img_rgba: Input image (H, W, 4)
        max_edge: Maximum edge size (default from config)

    Returns:
        Resized image
    """
    if max_edge is None:
        max_edge = config.MAX_EDGE

    height, width = img_rgba.shape[:2]
    current_max = max(height, width)

    if current_max <= max_edge:
        return img_rgba

    scale = max_edge / current_max
    new_width = max(1, int(width * scale))
    new_height = max(1, int(height * scale))

    # INTER_AREA averages source pixels when shrinking
    return cv2.resize(img_rgba, (new_width, new_height), interpolation=cv2.INTER_AREA)


def decode_image(source: ImageSource, max_edge: Optional[int] = None) -> np.ndarray:
    """
    Decode an encoded image to an RGBA pixel buffer.

    Args:
        source: Encoded bytes, a file path, a binary file object or a
            ``data:image/...;base64,`` URL
        max_edge: Downscale bound for the longest side (default from config)

    Returns:
        (H, W, 4) uint8 RGBA array

    Raises:
        ValueError: For unreadable, undecodable, oversized or
            unsupported images
    """
    if max_edge is not None and not config.validate_max_edge(max_edge):
        raise ValueError(f"max_edge must be within 16..4096, got {max_edge}")

    file_bytes = _read_source(source)
    if not file_bytes:
        raise ValueError("Empty image data")
    validate_file_size(len(file_bytes))

    try:
        with Image.open(io.BytesIO(file_bytes)) as pil_image:
            validate_format(pil_image.format)
            validate_dimensions(*pil_image.size)
            rgba = np.array(pil_image.convert("RGBA"))
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as e:
        raise ValueError(f"Failed to decode image: {str(e)}") from e

    height, width = rgba.shape[:2]
    resized = resize_long_edge(rgba, max_edge)
    logger.info(
        f"Decoded image {width}×{height} -> {resized.shape[1]}×{resized.shape[0]}"
    )
    return resized


def get_image_dimensions(img: np.ndarray) -> Tuple[int, int]:
    """
    Get image width and height.

    Returns:
        Tuple of (width, height)
    """
    height, width = img.shape[:2]
    return width, height
