"""Pointer-driven mask editing: inspect, enhance and suppress tools."""

import logging
import math
from typing import Iterator, Optional, Tuple

import numpy as np

from models.interaction import EditOutcome, EventKind, PointerEvent, StrokeContext, Tool
from models.spectrum import ComplexSpectrum, SelectedPoint
from models.tool_settings import ToolSettings

logger = logging.getLogger(__name__)


def in_bounds(x: float, y: float, size: int) -> bool:
    return 0 <= x < size and 0 <= y < size


def apply_brush(mask: np.ndarray, cx: float, cy: float, radius: int, value: float) -> bool:
    """Stamp a filled disk of ``value`` into ``mask`` in place.

    Only integer cells with (nx-cx)^2 + (ny-cy)^2 <= r^2 inside the grid are
    touched. Returns True if at least one cell changed value.
    """
    h, w = mask.shape
    x0 = max(int(math.floor(cx - radius)), 0)
    x1 = min(int(math.ceil(cx + radius)), w - 1)
    y0 = max(int(math.floor(cy - radius)), 0)
    y1 = min(int(math.ceil(cy + radius)), h - 1)
    if x0 > x1 or y0 > y1:
        return False
    
    ys, xs = np.ogrid[y0:y1 + 1, x0:x1 + 1]
    disk = (xs - cx) ** 2 + (ys - cy) ** 2 <= radius * radius
    region = mask[y0:y1 + 1, x0:x1 + 1]
    changed = bool(np.any(region[disk] != value))
    if changed:
        region[disk] = value
    return changed


def interpolate_stroke(
    start: Tuple[float, float],
    end: Tuple[float, float]
) -> Iterator[Tuple[float, float]]:
    """Points from start to end at most one grid unit apart (endpoints included)."""
    x0, y0 = start
    x1, y1 = end
    steps = math.ceil(math.hypot(x1 - x0, y1 - y0))
    for i in range(steps + 1):
        t = 0.0 if steps == 0 else i / steps
        yield x0 + (x1 - x0) * t, y0 + (y1 - y0) * t


def inspect_point(spectrum: ComplexSpectrum, x: int, y: int) -> SelectedPoint:
    re = float(spectrum.real[y, x])
    im = float(spectrum.imag[y, x])
    return SelectedPoint(x=x, y=y, magnitude=math.hypot(re, im), phase=math.atan2(im, re))


def _handle_inspect(event, mask, spectrum, settings, context) -> EditOutcome:
    selected = None
    if event.kind is EventKind.PRESS and in_bounds(event.x, event.y, mask.shape[0]):
        selected = inspect_point(spectrum, event.x, event.y)
    return EditOutcome(mask=mask, context=context, selected_point=selected)


def _handle_brush(event, mask, spectrum, settings, context) -> EditOutcome:
    current = (event.x, event.y)
    if not in_bounds(event.x, event.y, mask.shape[0]):
        # Off-grid samples break the stroke
        return EditOutcome(mask=mask, context=StrokeContext(None, context.hover_position))
    
    value = settings.stamp_value
    new_mask = mask.copy()
    if context.last_position is not None:
        points = interpolate_stroke(context.last_position, current)
    else:
        points = iter([current])
    
    changed = False
    for px, py in points:
        if apply_brush(new_mask, px, py, settings.brush_radius, value):
            changed = True
    
    next_context = StrokeContext(current, context.hover_position)
    if not changed:
        return EditOutcome(mask=mask, context=next_context)
    logger.debug("%s stroke to %s committed", settings.tool.value, current)
    return EditOutcome(mask=new_mask, context=next_context, changed=True)


_HANDLERS = {
    Tool.INSPECT: _handle_inspect,
    Tool.ENHANCE: _handle_brush,
    Tool.SUPPRESS: _handle_brush,
}


def handle_pointer(
    event: PointerEvent,
    mask: np.ndarray,
    spectrum: Optional[ComplexSpectrum],
    settings: ToolSettings,
    context: StrokeContext
) -> EditOutcome:
    """Translate one pointer event into a (possibly new) mask and gesture state."""
    if event.kind in (EventKind.RELEASE, EventKind.LEAVE):
        return EditOutcome(mask=mask, context=StrokeContext())
    
    hover = context.hover_position
    if in_bounds(event.x, event.y, mask.shape[0]):
        hover = (event.x, event.y)
    context = StrokeContext(context.last_position, hover)
    
    if not event.button_held:
        return EditOutcome(mask=mask, context=StrokeContext(None, hover))
    
    if settings.tool is Tool.INSPECT and spectrum is None:
        return EditOutcome(mask=mask, context=context)
    return _HANDLERS[settings.tool](event, mask, spectrum, settings, context)
