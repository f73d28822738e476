"""Pointer events and per-gesture editing state."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

import numpy as np

from models.spectrum import SelectedPoint


class Tool(str, Enum):
    INSPECT = 'point'
    ENHANCE = 'brush'
    SUPPRESS = 'eraser'


class EventKind(str, Enum):
    PRESS = 'press'
    MOVE = 'move'
    RELEASE = 'release'
    LEAVE = 'leave'


@dataclass(frozen=True)
class PointerEvent:
    """Pointer sample already mapped to transform-grid coordinates."""
    
    kind: EventKind
    x: int
    y: int
    button_held: bool = False


@dataclass(frozen=True)
class StrokeContext:
    """Transient gesture state, owned by whoever drives the pointer loop."""
    
    last_position: Optional[Tuple[int, int]] = None
    hover_position: Optional[Tuple[int, int]] = None


@dataclass(frozen=True)
class EditOutcome:
    """Result of feeding one pointer event to the mask editor.
    
    ``mask`` is a new array when ``changed`` is True, otherwise the
    caller's original instance.
    """
    
    mask: np.ndarray
    context: StrokeContext
    selected_point: Optional[SelectedPoint] = None
    changed: bool = False
