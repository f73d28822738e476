"""Log-magnitude spectrum display and shared display-buffer helpers."""

import numpy as np

from models.render_result import SpectrumView
from models.spectrum import ComplexSpectrum


def to_rgba(intensity: np.ndarray) -> np.ndarray:
    """Broadcast a 0-255 intensity grid to opaque gray RGBA (uint8)."""
    gray = np.clip(np.round(intensity), 0, 255).astype(np.uint8)
    rgba = np.empty(gray.shape + (4,), dtype=np.uint8)
    rgba[:, :, 0] = gray
    rgba[:, :, 1] = gray
    rgba[:, :, 2] = gray
    rgba[:, :, 3] = 255
    return rgba


def stretch_min_max(values: np.ndarray):
    """Map values to 0-255 over their own min..max range.

    Returns ``(intensity, min, max)``; a flat grid maps to all zeros.
    """
    vmin = float(values.min())
    vmax = float(values.max())
    if vmax == vmin:
        return np.zeros_like(values, dtype=np.float64), vmin, vmax
    return (values - vmin) / (vmax - vmin) * 255.0, vmin, vmax


def masked_log_magnitude(spectrum: ComplexSpectrum, mask: np.ndarray) -> np.ndarray:
    return np.log(spectrum.magnitude() + 1.0) * mask


def render_spectrum(spectrum: ComplexSpectrum, mask: np.ndarray) -> SpectrumView:
    """Masked log-magnitude spectrum as a display buffer."""
    values = masked_log_magnitude(spectrum, mask)
    intensity, vmin, vmax = stretch_min_max(values)
    return SpectrumView(
        rgba=to_rgba(intensity),
        intensity=intensity,
        min_value=vmin,
        max_value=vmax
    )
