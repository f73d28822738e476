"""Image I/O and grid cropping using OpenCV."""

import logging

import cv2
import numpy as np

from utils.constants import GRID_SIZE

logger = logging.getLogger(__name__)


def load_image(path: str) -> np.ndarray:
    """Load image as RGBA uint8."""
    img = cv2.imread(path, cv2.IMREAD_COLOR)
    if img is None:
        raise ValueError(f"Could not load image from {path}")
    return cv2.cvtColor(img, cv2.COLOR_BGR2RGBA)


def crop_to_grid(image: np.ndarray, size: int = GRID_SIZE) -> np.ndarray:
    """Center crop to a size x size square.
    
    Images at least ``size`` on the short side keep native resolution (the
    central window is cut out); smaller ones have their central square
    resized up.
    """
    h, w = image.shape[:2]
    side = min(h, w)
    if side >= size:
        y0 = (h - size) // 2
        x0 = (w - size) // 2
        return image[y0:y0 + size, x0:x0 + size].copy()
    
    y0 = (h - side) // 2
    x0 = (w - side) // 2
    square = image[y0:y0 + side, x0:x0 + side]
    logger.info("Upscaling %dx%d center square to %dx%d", side, side, size, size)
    return cv2.resize(square, (size, size), interpolation=cv2.INTER_LINEAR)


def load_grid_image(path: str, size: int = GRID_SIZE) -> np.ndarray:
    """Load and crop an image to the transform grid."""
    return crop_to_grid(load_image(path), size)


def save_image(rgba: np.ndarray, path: str) -> None:
    """Save RGBA display buffer."""
    if not cv2.imwrite(path, cv2.cvtColor(rgba, cv2.COLOR_RGBA2BGRA)):
        raise ValueError(f"Could not write image to {path}")
    logger.info("Saved %s", path)
