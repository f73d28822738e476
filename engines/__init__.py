"""Spectrum engines - pure computation, no GUI dependencies."""

from .grayscale import rgba_to_luminance
from .fft_engine import GridConfigurationError, validate_grid, forward_2d, inverse_2d
from .spectrum_shift import fft_shift, ifft_shift
from .presets import (
    reset_mask, low_pass, high_pass, band_pass, notch,
    remove_vertical_stripes, remove_horizontal_stripes,
)
from .mask_editor import apply_brush, interpolate_stroke, handle_pointer
from .visualizer import render_spectrum, to_rgba
from .pipeline import load_spectrum, reconstruct, compute_stats, recompute
from .session import FrequencySession

__all__ = [
    'rgba_to_luminance',
    'GridConfigurationError',
    'validate_grid',
    'forward_2d',
    'inverse_2d',
    'fft_shift',
    'ifft_shift',
    'reset_mask',
    'low_pass',
    'high_pass',
    'band_pass',
    'notch',
    'remove_vertical_stripes',
    'remove_horizontal_stripes',
    'apply_brush',
    'interpolate_stroke',
    'handle_pointer',
    'render_spectrum',
    'to_rgba',
    'load_spectrum',
    'reconstruct',
    'compute_stats',
    'recompute',
    'FrequencySession',
]
