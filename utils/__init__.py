"""Shared utilities."""

from .constants import GRID_SIZE
from .metrics import compute_psnr_ssim, Timer
from .test_images import (
    generate_checkerboard, generate_stripes, generate_gradient, generate_striped_scene
)
from .image_io import load_image, crop_to_grid, load_grid_image, save_image

__all__ = [
    'GRID_SIZE',
    'compute_psnr_ssim',
    'Timer',
    'generate_checkerboard',
    'generate_stripes',
    'generate_gradient',
    'generate_striped_scene',
    'load_image',
    'crop_to_grid',
    'load_grid_image',
    'save_image',
]
