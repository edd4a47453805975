"""
Dominant color extraction for decoded images.

This module implements the palette pipeline: stride sampling of opaque
pixels followed by fixed-iteration Lloyd's k-means in RGB space. Centroids
are returned in cluster order, not sorted by dominance or hue.
"""

import time
from dataclasses import dataclass
from typing import List, Optional, Union

import numpy as np
from loguru import logger

from .codec import rgb_to_hex

PixelBuffer = Union[bytes, bytearray, memoryview, np.ndarray]

NEUTRAL_GRAY = np.array([128, 128, 128], dtype=np.int64)


class InvalidPaletteSize(ValueError):
    """Raised by strict extraction when k cannot be honored."""
    pass


@dataclass(frozen=True)
class ExtractionConfig:
    """
    Knobs for palette extraction.

    Attributes:
        k: Palette size used when the caller passes none
        sample_cap: Approximate upper bound on sampled pixels
        iterations: Lloyd's rounds; always run in full
        alpha_threshold: Pixels with alpha <= this are skipped
        max_k: Largest palette size served
        seed: Seed for centroid initialization (None = fresh entropy)
        rng: Injected generator; takes precedence over ``seed``
    """
    k: int = 8
    sample_cap: int = 10000
    iterations: int = 20
    alpha_threshold: int = 128
    max_k: int = 20
    seed: Optional[int] = None
    rng: Optional[np.random.Generator] = None

    def generator(self) -> np.random.Generator:
        """Return the random source for centroid initialization."""
        if self.rng is not None:
            return self.rng
        return np.random.default_rng(self.seed)


DEFAULT_CONFIG = ExtractionConfig()


def _as_pixel_array(buffer: PixelBuffer) -> np.ndarray:
    """Flatten a pixel buffer to (N, 3) or (N, 4) uint8 rows."""
    if isinstance(buffer, (bytes, bytearray, memoryview)):
        arr = np.frombuffer(buffer, dtype=np.uint8)
    else:
        arr = np.asarray(buffer)

    if arr.ndim == 1:
        if arr.size % 4 != 0:
            raise ValueError(f"Flat RGBA buffer length {arr.size} is not a multiple of 4")
        return arr.reshape(-1, 4)

    channels = arr.shape[-1]
    if channels not in (3, 4):
        raise ValueError(f"Expected 3 or 4 channels, got shape {arr.shape}")
    return arr.reshape(-1, channels)


def sample_pixels(buffer: PixelBuffer,
                  sample_cap: int = DEFAULT_CONFIG.sample_cap,
                  alpha_threshold: int = DEFAULT_CONFIG.alpha_threshold) -> np.ndarray:
    """
    Stride-sample opaque pixels for clustering.

    Every ``step``-th pixel is visited, with
    ``step = max(1, total_pixels // sample_cap)``; visited pixels whose alpha
    is not above ``alpha_threshold`` are dropped. Three-channel input has no
    alpha and is treated as opaque.

    Args:
        buffer: Raw RGBA bytes or an (H, W, C) / (N, C) / flat array
        sample_cap: Approximate maximum number of visited pixels
        alpha_threshold: Alpha cut-off for opacity

    Returns:
        (N, 3) int64 array of RGB samples (possibly empty)
    """
    pixels = _as_pixel_array(buffer)
    total = pixels.shape[0]
    step = max(1, total // max(1, sample_cap))

    visited = pixels[::step]
    if visited.shape[1] == 4:
        visited = visited[visited[:, 3].astype(np.int64) > alpha_threshold]

    samples = visited[:, :3].astype(np.int64)
    logger.debug(f"Sampled {len(samples)}/{total} pixels with step={step}")
    return samples


def kmeans_centroids(samples: np.ndarray, k: int, iterations: int,
                     rng: np.random.Generator) -> np.ndarray:
    """
    Fixed-iteration Lloyd's k-means over RGB samples.

    Initial centroids are ``k`` samples drawn uniformly with replacement; an
    empty sample set starts (and stays) at neutral gray. Each round assigns
    every sample to the nearest centroid by squared Euclidean distance
    (ties go to the lowest index) and replaces each centroid with the
    half-up rounded mean of its members. A centroid with no members keeps
    its previous value, so duplicates in the output are possible.

    Args:
        samples: (N, 3) RGB samples
        k: Number of clusters
        iterations: Rounds to run; there is no convergence check
        rng: Random source for initialization

    Returns:
        (k, 3) int64 centroids in cluster order
    """
    samples = np.asarray(samples, dtype=np.int64).reshape(-1, 3)
    if len(samples) == 0:
        return np.tile(NEUTRAL_GRAY, (k, 1))

    centroids = samples[rng.integers(0, len(samples), size=k)].copy()

    for _ in range(iterations):
        # (N, k) squared distances
        diff = samples[:, None, :] - centroids[None, :, :]
        labels = np.argmin(np.einsum("nkc,nkc->nk", diff, diff), axis=1)

        counts = np.bincount(labels, minlength=k)
        sums = np.zeros((k, 3), dtype=np.int64)
        np.add.at(sums, labels, samples)

        occupied = counts > 0
        means = sums[occupied] / counts[occupied, None]
        centroids[occupied] = np.floor(means + 0.5).astype(np.int64)

    return centroids


def extract_palette(buffer: PixelBuffer, k: Optional[int] = None,
                    config: Optional[ExtractionConfig] = None,
                    strict: bool = False) -> List[str]:
    """
    Extract ``k`` representative colors from a decoded pixel buffer.

    Args:
        buffer: Row-major RGBA pixels (see :func:`sample_pixels`)
        k: Palette size (defaults to ``config.k``)
        config: Extraction knobs (defaults to ExtractionConfig())
        strict: Raise InvalidPaletteSize instead of returning []

    Returns:
        Uppercase ``#RRGGBB`` strings in centroid order. Empty when k is out
        of range, the buffer holds no pixels, or k exceeds the sample count.
        A buffer of only transparent pixels yields k neutral grays.
    """
    config = config or DEFAULT_CONFIG
    k = config.k if k is None else k

    def _reject(reason: str) -> List[str]:
        if strict:
            raise InvalidPaletteSize(reason)
        logger.warning(f"Returning empty palette: {reason}")
        return []

    if k <= 0 or k > config.max_k:
        return _reject(f"k={k} outside 1..{config.max_k}")

    pixels = _as_pixel_array(buffer)
    if pixels.shape[0] == 0:
        return _reject("pixel buffer is empty")

    logger.info(f"Starting palette extraction with k={k}, {pixels.shape[0]} pixels")
    start_time = time.time()

    samples = sample_pixels(pixels, config.sample_cap, config.alpha_threshold)
    if len(samples) == 0:
        logger.warning("No opaque pixels sampled, falling back to neutral gray")
    elif k > len(samples):
        return _reject(f"k={k} exceeds {len(samples)} sampled pixels")

    logger.debug(f"Clustering {len(samples)} samples into k={k} for {config.iterations} iterations")
    centroids = kmeans_centroids(samples, k, config.iterations, config.generator())
    palette = [rgb_to_hex(center) for center in centroids]

    duration_ms = (time.time() - start_time) * 1000
    logger.info(f"Palette extraction finished in {duration_ms:.1f}ms: {palette}")
    return palette
