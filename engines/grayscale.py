"""Luminance extraction from RGBA pixel buffers."""

import numpy as np

from utils.constants import LUMA_WEIGHTS


def rgba_to_luminance(rgba: np.ndarray) -> np.ndarray:
    """RGB(A) to luminance using ITU-R BT.601 weights; alpha is ignored."""
    if rgba.ndim != 3 or rgba.shape[2] not in (3, 4):
        raise ValueError(f"Expected HxWx3 or HxWx4 pixel buffer, got shape {rgba.shape}")
    R = rgba[:, :, 0].astype(np.float64)
    G = rgba[:, :, 1].astype(np.float64)
    B = rgba[:, :, 2].astype(np.float64)
    return LUMA_WEIGHTS[0] * R + LUMA_WEIGHTS[1] * G + LUMA_WEIGHTS[2] * B
