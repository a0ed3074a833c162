"""Animation engine: grid slicing and frame playback."""

from __future__ import annotations

from .grid import (
    Grid,
    Single,
    Span,
    Range,
    RangeSpec,
    parse_range,
    slice_by_frame_size,
    slice_by_count,
)
from .animation import AnimationState
from .system import AnimationSystem

__all__ = [
    "Grid",
    "Single",
    "Span",
    "Range",
    "RangeSpec",
    "parse_range",
    "slice_by_frame_size",
    "slice_by_count",
    "AnimationState",
    "AnimationSystem",
]
