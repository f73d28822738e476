"""Image load and mask-change recompute pipelines."""

import logging

import numpy as np

from models.render_result import PipelineResult, ReconstructionView, Stats
from models.spectrum import ComplexSpectrum
from engines.grayscale import rgba_to_luminance
from engines.fft_engine import GridConfigurationError, forward_2d, inverse_2d, validate_grid
from engines.spectrum_shift import fft_shift, ifft_shift
from engines.visualizer import render_spectrum, to_rgba
from utils.constants import ACTIVE_THRESHOLD, GRID_SIZE
from utils.metrics import Timer

logger = logging.getLogger(__name__)


def load_spectrum(rgba: np.ndarray, size: int = GRID_SIZE) -> ComplexSpectrum:
    """Grayscale -> forward FFT -> shift for an NxN pixel buffer."""
    if rgba.ndim != 3 or rgba.shape[:2] != (size, size) or rgba.shape[2] not in (3, 4):
        raise GridConfigurationError(
            f"Expected {size}x{size} RGBA buffer, got shape {rgba.shape}"
        )
    validate_grid(rgba.shape[:2])
    gray = rgba_to_luminance(rgba)
    real, imag = fft_shift(*forward_2d(gray))
    logger.info("Spectrum built for %dx%d image", size, size)
    return ComplexSpectrum(real=real, imag=imag)


def _check_mask(spectrum: ComplexSpectrum, mask: np.ndarray) -> None:
    if mask.shape != spectrum.shape:
        raise GridConfigurationError(
            f"Mask shape {mask.shape} does not match spectrum {spectrum.shape}"
        )


def reconstruct(spectrum: ComplexSpectrum, mask: np.ndarray) -> ReconstructionView:
    """Mask -> unshift -> inverse FFT -> magnitude -> 0..max display stretch."""
    _check_mask(spectrum, mask)
    masked_real = spectrum.real * mask
    masked_imag = spectrum.imag * mask
    magnitude = inverse_2d(*ifft_shift(masked_real, masked_imag))
    
    max_value = float(magnitude.max())
    if max_value == 0.0:
        intensity = np.zeros_like(magnitude)
    else:
        intensity = magnitude / max_value * 255.0
    
    return ReconstructionView(
        rgba=to_rgba(intensity),
        intensity=intensity,
        magnitude=magnitude,
        max_value=max_value
    )


def active_percentage(mask: np.ndarray) -> float:
    """Share of mask cells above the active threshold, in percent."""
    return float(np.count_nonzero(mask > ACTIVE_THRESHOLD)) / mask.size * 100.0


def compute_stats(mask: np.ndarray, spectrum_max: float) -> Stats:
    return Stats(active_percentage=active_percentage(mask), max_magnitude=float(spectrum_max))


def recompute(spectrum: ComplexSpectrum, mask: np.ndarray) -> PipelineResult:
    """Rebuild every derived view for one (spectrum, mask) snapshot."""
    _check_mask(spectrum, mask)
    timer = Timer()
    
    spectrum_view = timer.measure_spectrum(render_spectrum, spectrum, mask)
    reconstruction = timer.measure_reconstruct(reconstruct, spectrum, mask)
    stats = compute_stats(mask, spectrum_view.max_value)
    
    logger.debug(
        "Recompute: active=%.1f%% spectrum=%.2fms reconstruct=%.2fms",
        stats.active_percentage, timer.spectrum_time_ms, timer.reconstruct_time_ms
    )
    return PipelineResult(
        spectrum_view=spectrum_view,
        reconstruction=reconstruction,
        stats=stats,
        render_time_ms=timer.spectrum_time_ms + timer.reconstruct_time_ms
    )
