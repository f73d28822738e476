"""Quadrant swap that moves the zero frequency to the grid center."""

from typing import Tuple

import numpy as np

from engines.fft_engine import GridConfigurationError


def fft_shift(real: np.ndarray, imag: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """Move element (x, y) to ((x + W/2) mod W, (y + H/2) mod H).

    For even W and H this is its own inverse.
    """
    if real.shape != imag.shape:
        raise GridConfigurationError(
            f"Real/imag shape mismatch: {real.shape} vs {imag.shape}"
        )
    h, w = real.shape
    if h % 2 or w % 2:
        raise GridConfigurationError(f"Shift needs even dimensions, got {w}x{h}")
    offset = (h // 2, w // 2)
    return np.roll(real, offset, axis=(0, 1)), np.roll(imag, offset, axis=(0, 1))


# Self-inverse on even grids
ifft_shift = fft_shift
