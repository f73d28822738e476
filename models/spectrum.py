"""Shift-centered complex spectrum and inspected points."""

from dataclasses import dataclass
import numpy as np


@dataclass(frozen=True)
class ComplexSpectrum:
    """Shift-centered 2D spectrum stored as separate real/imag planes.

    Both planes are made read-only on construction; a new image produces a
    new spectrum instead of an in-place update.
    """
    
    real: np.ndarray
    imag: np.ndarray
    
    def __post_init__(self):
        if self.real.shape != self.imag.shape:
            raise ValueError(
                f"Real/imag shape mismatch: {self.real.shape} vs {self.imag.shape}"
            )
        self.real.setflags(write=False)
        self.imag.setflags(write=False)
    
    @property
    def shape(self) -> tuple:
        return self.real.shape
    
    @property
    def size(self) -> int:
        return self.real.shape[0]
    
    def magnitude(self) -> np.ndarray:
        return np.hypot(self.real, self.imag)


@dataclass(frozen=True)
class SelectedPoint:
    """Spectrum cell picked by the inspect tool (unmasked values)."""
    
    x: int
    y: int
    magnitude: float
    phase: float
