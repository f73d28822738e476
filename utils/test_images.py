"""Synthetic RGBA test images for spectrum demos."""

import numpy as np

from utils.constants import GRID_SIZE


def _gray_to_rgba(gray: np.ndarray) -> np.ndarray:
    value = np.clip(np.round(gray), 0, 255).astype(np.uint8)
    img = np.empty(value.shape + (4,), dtype=np.uint8)
    img[:, :, :3] = value[:, :, None]
    img[:, :, 3] = 255
    return img


def generate_checkerboard(size: int = GRID_SIZE, block_size: int = 32) -> np.ndarray:
    """High-contrast checkerboard - energy on a diagonal lattice of harmonics."""
    idx = np.arange(size) // block_size
    cells = (idx[:, None] + idx[None, :]) % 2
    return _gray_to_rgba(np.where(cells == 0, 30.0, 220.0))


def generate_stripes(
    size: int = GRID_SIZE,
    cycles: int = 30,
    axis: str = 'horizontal',
    base: float = 128.0,
    amplitude: float = 60.0
) -> np.ndarray:
    """Sinusoidal stripes with ``cycles`` periods across the image.
    
    'horizontal' stripes vary along y and put their energy at
    (N/2, N/2 +/- cycles) in the shifted spectrum; 'vertical' stripes vary
    along x.
    """
    t = base + amplitude * np.cos(2 * np.pi * cycles * np.arange(size) / size)
    if axis == 'horizontal':
        gray = np.repeat(t[:, None], size, axis=1)
    elif axis == 'vertical':
        gray = np.repeat(t[None, :], size, axis=0)
    else:
        raise ValueError(f"Unknown stripe axis: {axis}")
    return _gray_to_rgba(gray)


def generate_gradient(size: int = GRID_SIZE) -> np.ndarray:
    """Smooth diagonal gradient - energy concentrated near DC."""
    i, j = np.mgrid[0:size, 0:size]
    t = (i + j) / (2 * size - 2)
    return _gray_to_rgba(40 + t * 180)


def generate_striped_scene(size: int = GRID_SIZE, cycles: int = 30) -> np.ndarray:
    """Gradient overlaid with horizontal stripes - the stripe-removal demo."""
    scene = generate_gradient(size)[:, :, 0].astype(np.float64)
    pattern = 25.0 * np.cos(2 * np.pi * cycles * np.arange(size) / size)
    return _gray_to_rgba(scene + pattern[:, None])
