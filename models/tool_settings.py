"""Mask editing tool settings."""

from dataclasses import dataclass

from models.interaction import Tool
from utils.constants import (
    BRUSH_RADIUS_MIN, BRUSH_RADIUS_MAX, BRUSH_STRENGTH_MIN, BRUSH_STRENGTH_MAX
)


@dataclass(frozen=True)
class ToolSettings:
    """Active tool plus brush geometry."""
    
    tool: Tool = Tool.INSPECT
    brush_radius: int = 10
    brush_strength: float = 2.0
    
    def __post_init__(self):
        if not isinstance(self.tool, Tool):
            object.__setattr__(self, 'tool', Tool(self.tool))
        if not (BRUSH_RADIUS_MIN <= self.brush_radius <= BRUSH_RADIUS_MAX):
            raise ValueError(
                f"Brush radius must be {BRUSH_RADIUS_MIN}-{BRUSH_RADIUS_MAX}, got {self.brush_radius}"
            )
        if int(self.brush_radius) != self.brush_radius:
            raise ValueError(f"Brush radius must be an integer, got {self.brush_radius}")
        if not (BRUSH_STRENGTH_MIN <= self.brush_strength <= BRUSH_STRENGTH_MAX):
            raise ValueError(
                f"Brush strength must be {BRUSH_STRENGTH_MIN}-{BRUSH_STRENGTH_MAX}, got {self.brush_strength}"
            )
    
    @property
    def stamp_value(self) -> float:
        """Mask value written by the current brush tool."""
        return float(self.brush_strength) if self.tool is Tool.ENHANCE else 0.0
