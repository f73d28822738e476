"""Display buffers and statistics produced on each recompute."""

from dataclasses import dataclass
import numpy as np


@dataclass
class SpectrumView:
    """Log-magnitude spectrum display (min/max stretched)."""
    
    rgba: np.ndarray
    intensity: np.ndarray
    min_value: float
    max_value: float


@dataclass
class ReconstructionView:
    """Inverse-transformed image display (0..max stretched)."""
    
    rgba: np.ndarray
    intensity: np.ndarray
    magnitude: np.ndarray
    max_value: float


@dataclass
class Stats:
    active_percentage: float
    max_magnitude: float


@dataclass
class PipelineResult:
    """Everything the render loop needs for one (spectrum, mask) snapshot."""
    
    spectrum_view: SpectrumView
    reconstruction: ReconstructionView
    stats: Stats
    
    # Runtime
    render_time_ms: float = 0.0
