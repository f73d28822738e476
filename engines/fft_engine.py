"""Separable 2D FFT: 1D transforms over rows, then over columns."""

import logging

import numpy as np
from scipy.fft import fft, ifft

logger = logging.getLogger(__name__)


class GridConfigurationError(ValueError):
    """Buffer geometry the transform grid cannot accept."""


def is_power_of_two(n: int) -> bool:
    return n > 0 and (n & (n - 1)) == 0


def validate_grid(shape: tuple) -> int:
    """Check for a square power-of-two grid and return its side length."""
    if len(shape) != 2:
        raise GridConfigurationError(f"Expected a 2D grid, got shape {shape}")
    h, w = shape
    if h != w:
        raise GridConfigurationError(f"Grid must be square, got {w}x{h}")
    if not is_power_of_two(h):
        raise GridConfigurationError(f"Grid size must be a power of two, got {h}")
    return h


def _row_pass(data: np.ndarray, inverse: bool = False) -> np.ndarray:
    """1D transform of every row."""
    kernel = ifft if inverse else fft
    return kernel(data, axis=1)


def _column_pass(data: np.ndarray, inverse: bool = False) -> np.ndarray:
    """1D transform of every column."""
    kernel = ifft if inverse else fft
    return kernel(data, axis=0)


def forward_2d(real: np.ndarray):
    """Forward 2D FFT of a real grid.

    Returns ``(real, imag)`` planes of the unshifted spectrum (DC at [0, 0]).
    """
    validate_grid(real.shape)
    rows = _row_pass(real.astype(np.complex128))
    full = _column_pass(rows)
    logger.debug("Forward transform on %dx%d grid", real.shape[1], real.shape[0])
    return full.real.copy(), full.imag.copy()


def inverse_2d_complex(real: np.ndarray, imag: np.ndarray) -> np.ndarray:
    """Inverse 2D FFT returning the complex spatial grid."""
    validate_grid(real.shape)
    if imag.shape != real.shape:
        raise GridConfigurationError(
            f"Real/imag shape mismatch: {real.shape} vs {imag.shape}"
        )
    data = real.astype(np.complex128)
    data.imag = imag
    rows = _row_pass(data, inverse=True)
    return _column_pass(rows, inverse=True)


def inverse_2d(real: np.ndarray, imag: np.ndarray) -> np.ndarray:
    """Inverse 2D FFT collapsed to per-pixel magnitude.

    Phase is dropped here: any imaginary residue left after masking is
    treated as reconstruction error.
    """
    spatial = inverse_2d_complex(real, imag)
    logger.debug("Inverse transform on %dx%d grid", real.shape[1], real.shape[0])
    return np.hypot(spatial.real, spatial.imag)
