"""Interactive editing session: owns spectrum, mask, gesture state and display cache."""

import logging
from dataclasses import replace
from typing import Optional

import numpy as np

from models.interaction import PointerEvent, StrokeContext, Tool
from models.render_result import PipelineResult
from models.spectrum import ComplexSpectrum, SelectedPoint
from models.tool_settings import ToolSettings
from engines import presets
from engines.mask_editor import handle_pointer
from engines.pipeline import load_spectrum, recompute
from utils.constants import GRID_SIZE

logger = logging.getLogger(__name__)


class FrequencySession:
    """State behind one spectrum editor view.
    
    Mask edits replace ``mask`` with a new array; ``render`` recomputes only
    when the (spectrum, mask) pair differs from the cached one. How often
    ``render`` runs is left to the caller.
    """
    
    def __init__(self, size: int = GRID_SIZE, settings: Optional[ToolSettings] = None):
        self.size = size
        self.settings = settings or ToolSettings()
        self.spectrum: Optional[ComplexSpectrum] = None
        self.mask: Optional[np.ndarray] = None
        self.selected_point: Optional[SelectedPoint] = None
        self.context = StrokeContext()
        self._cache_key = None
        self._cache: Optional[PipelineResult] = None
    
    @property
    def has_image(self) -> bool:
        return self.spectrum is not None
    
    def _require_image(self):
        if self.spectrum is None:
            raise RuntimeError("No image loaded")
    
    def load_image(self, rgba: np.ndarray) -> None:
        self.spectrum = load_spectrum(rgba, self.size)
        self.mask = presets.reset_mask(self.size)
        self.selected_point = None
        self.context = StrokeContext()
        self._cache_key = None
        self._cache = None
        logger.info("Image loaded into %dx%d session", self.size, self.size)
    
    # --- Tool settings ---
    
    def set_tool(self, tool) -> None:
        self.settings = replace(self.settings, tool=Tool(tool))
        self.context = StrokeContext(None, self.context.hover_position)
    
    def set_brush_radius(self, radius: int) -> None:
        self.settings = replace(self.settings, brush_radius=radius)
    
    def set_brush_strength(self, strength: float) -> None:
        self.settings = replace(self.settings, brush_strength=strength)
    
    # --- Mask editing ---
    
    def handle_pointer(self, event: PointerEvent) -> bool:
        """Feed a pointer event; returns True when the mask changed."""
        if self.mask is None:
            return False
        outcome = handle_pointer(event, self.mask, self.spectrum, self.settings, self.context)
        self.context = outcome.context
        if outcome.selected_point is not None:
            self.selected_point = outcome.selected_point
        if outcome.changed:
            self.mask = outcome.mask
        return outcome.changed
    
    def clear_selection(self) -> None:
        self.selected_point = None
    
    def reset_mask(self) -> None:
        self._require_image()
        self.mask = presets.reset_mask(self.size)
        logger.debug("Mask reset")
    
    def apply_low_pass(self, radius: float = 100) -> None:
        self._require_image()
        self.mask = presets.low_pass(radius, self.size)
    
    def apply_high_pass(self, radius: float = 50) -> None:
        self._require_image()
        self.mask = presets.high_pass(radius, self.size)
    
    def apply_band_pass(self, inner: float = 50, outer: float = 150) -> None:
        self._require_image()
        self.mask = presets.band_pass(inner, outer, self.size)
    
    def apply_notch(self, x1, y1, x2, y2, radius: float = 15) -> None:
        self._require_image()
        self.mask = presets.notch(self.mask, x1, y1, x2, y2, radius)
    
    def remove_vertical_stripes(self) -> None:
        self._require_image()
        self.mask = presets.remove_vertical_stripes(self.mask)
    
    def remove_horizontal_stripes(self) -> None:
        self._require_image()
        self.mask = presets.remove_horizontal_stripes(self.mask)
    
    # --- Rendering ---
    
    def render(self) -> PipelineResult:
        """Derived views for the current (spectrum, mask), cached by identity."""
        self._require_image()
        key = (self.spectrum, self.mask)
        if self._cache is not None and self._cache_key is not None \
                and self._cache_key[0] is key[0] and self._cache_key[1] is key[1]:
            return self._cache
        self._cache = recompute(self.spectrum, self.mask)
        logger.debug("Render took %.1fms", self._cache.render_time_ms)
        self._cache_key = key
        return self._cache
