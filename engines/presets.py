"""Parametric mask generators (low/high/band-pass and notch)."""

import logging

import numpy as np

from utils.constants import (
    GRID_SIZE, LOW_HIGH_FALLOFF, BAND_FALLOFF, NOTCH_FALLOFF, NOTCH_FEATHER,
    STRIPE_OFFSET, STRIPE_NOTCH_RADIUS,
)

logger = logging.getLogger(__name__)


def reset_mask(size: int = GRID_SIZE) -> np.ndarray:
    """All-pass mask."""
    return np.ones((size, size), dtype=np.float64)


def _distance_grid(size: int, cx: float, cy: float) -> np.ndarray:
    """Euclidean distance of every cell (x, y) from (cx, cy)."""
    y, x = np.mgrid[0:size, 0:size].astype(np.float64)
    return np.sqrt((x - cx) ** 2 + (y - cy) ** 2)


def _falloff(excess: np.ndarray, width: float) -> np.ndarray:
    return np.exp(-((excess / width) ** 2))


def low_pass(radius: float = 100, size: int = GRID_SIZE) -> np.ndarray:
    """Keep frequencies within ``radius`` of DC, Gaussian-like roll-off outside."""
    center = size / 2
    dist = _distance_grid(size, center, center)
    mask = np.where(dist <= radius, 1.0, _falloff(dist - radius, LOW_HIGH_FALLOFF))
    logger.info("Low-pass mask (radius=%s)", radius)
    return mask


def high_pass(radius: float = 50, size: int = GRID_SIZE) -> np.ndarray:
    """Keep frequencies at least ``radius`` from DC."""
    center = size / 2
    dist = _distance_grid(size, center, center)
    mask = np.where(dist >= radius, 1.0, _falloff(radius - dist, LOW_HIGH_FALLOFF))
    logger.info("High-pass mask (radius=%s)", radius)
    return mask


def band_pass(inner: float = 50, outer: float = 150, size: int = GRID_SIZE) -> np.ndarray:
    """Keep the ring inner <= d <= outer, roll off on both sides."""
    if inner > outer:
        raise ValueError(f"Inner radius {inner} exceeds outer radius {outer}")
    center = size / 2
    dist = _distance_grid(size, center, center)
    mask = np.ones((size, size), dtype=np.float64)
    below = dist < inner
    above = dist > outer
    mask[below] = _falloff(inner - dist[below], BAND_FALLOFF)
    mask[above] = _falloff(dist[above] - outer, BAND_FALLOFF)
    logger.info("Band-pass mask (inner=%s, outer=%s)", inner, outer)
    return mask


def notch(
    mask: np.ndarray,
    x1: float, y1: float,
    x2: float, y2: float,
    radius: float = 15
) -> np.ndarray:
    """Suppress two (usually symmetric) spectrum locations on top of ``mask``.

    Cells within ``radius`` of either point become 0. Cells in the feather
    ring are multiplied by a falloff, point 1 taking precedence.
    """
    size = mask.shape[0]
    d1 = _distance_grid(size, x1, y1)
    d2 = _distance_grid(size, x2, y2)
    outer = radius + NOTCH_FEATHER
    
    result = mask.astype(np.float64, copy=True)
    hole = (d1 <= radius) | (d2 <= radius)
    ring1 = ~hole & (d1 <= outer)
    ring2 = ~hole & ~ring1 & (d2 <= outer)
    
    result[ring1] *= _falloff(outer - d1[ring1], NOTCH_FALLOFF)
    result[ring2] *= _falloff(outer - d2[ring2], NOTCH_FALLOFF)
    result[hole] = 0.0
    logger.info("Notch at (%s, %s) / (%s, %s), radius=%s", x1, y1, x2, y2, radius)
    return result


def remove_vertical_stripes(mask: np.ndarray) -> np.ndarray:
    """Notch pair offset along the vertical frequency axis."""
    c = mask.shape[0] // 2
    return notch(mask, c, c - STRIPE_OFFSET, c, c + STRIPE_OFFSET, STRIPE_NOTCH_RADIUS)


def remove_horizontal_stripes(mask: np.ndarray) -> np.ndarray:
    """Notch pair offset along the horizontal frequency axis."""
    c = mask.shape[0] // 2
    return notch(mask, c - STRIPE_OFFSET, c, c + STRIPE_OFFSET, c, STRIPE_NOTCH_RADIUS)
