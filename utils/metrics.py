"""Metrics: reconstruction fidelity (PSNR, SSIM) and render timing."""

import time
import numpy as np
from skimage.metrics import peak_signal_noise_ratio, structural_similarity
from typing import Dict


def compute_psnr_ssim(original_gray: np.ndarray, reconstructed: np.ndarray) -> Dict[str, float]:
    """Compare the source luminance against the reconstructed magnitude image."""
    original = np.clip(original_gray.astype(np.float64), 0, 255)
    recon = np.clip(reconstructed.astype(np.float64), 0, 255)
    
    if np.array_equal(original, recon):
        return {'psnr': float('inf'), 'ssim': 1.0}
    
    psnr = peak_signal_noise_ratio(original, recon, data_range=255)
    ssim = structural_similarity(original, recon, data_range=255)
    return {
        'psnr': float(psnr),
        'ssim': float(ssim)
    }


class Timer:
    """Simple timer for the two halves of a recompute."""
    
    def __init__(self):
        self.spectrum_time_ms = 0.0
        self.reconstruct_time_ms = 0.0
    
    def measure_spectrum(self, func, *args, **kwargs):
        start = time.perf_counter()
        result = func(*args, **kwargs)
        self.spectrum_time_ms = (time.perf_counter() - start) * 1000.0
        return result
    
    def measure_reconstruct(self, func, *args, **kwargs):
        start = time.perf_counter()
        result = func(*args, **kwargs)
        self.reconstruct_time_ms = (time.perf_counter() - start) * 1000.0
        return result
