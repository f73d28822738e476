"""Data models for spectra, tool settings, pointer interaction and render results."""

from .spectrum import ComplexSpectrum, SelectedPoint
from .tool_settings import ToolSettings
from .interaction import Tool, EventKind, PointerEvent, StrokeContext, EditOutcome
from .render_result import SpectrumView, ReconstructionView, Stats, PipelineResult

__all__ = [
    'ComplexSpectrum',
    'SelectedPoint',
    'ToolSettings',
    'Tool',
    'EventKind',
    'PointerEvent',
    'StrokeContext',
    'EditOutcome',
    'SpectrumView',
    'ReconstructionView',
    'Stats',
    'PipelineResult',
]
