"""animat: sprite animation playback and atlas grid slicing."""

from __future__ import annotations

import logging

from .types import (
    AnimatError,
    InvalidDimension,
    InvalidRange,
    OutOfBounds,
    InvalidConfig,
    InvalidDelta,
    Region,
    RegionSequence,
    RenderParams,
    AnimationConfig,
    DEFAULT_INTERVAL,
)
from .engine import (
    Grid,
    Single,
    Span,
    parse_range,
    slice_by_frame_size,
    slice_by_count,
    AnimationState,
    AnimationSystem,
)
from .renderer import SpriteRenderer, HeadlessRenderer

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "AnimatError",
    "InvalidDimension",
    "InvalidRange",
    "OutOfBounds",
    "InvalidConfig",
    "InvalidDelta",
    "Region",
    "RegionSequence",
    "RenderParams",
    "AnimationConfig",
    "DEFAULT_INTERVAL",
    "Grid",
    "Single",
    "Span",
    "parse_range",
    "slice_by_frame_size",
    "slice_by_count",
    "AnimationState",
    "AnimationSystem",
    "SpriteRenderer",
    "HeadlessRenderer",
]
