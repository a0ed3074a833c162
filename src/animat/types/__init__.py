"""Type definitions for animat."""

from .errors import (
    AnimatError,
    InvalidDimension,
    InvalidRange,
    OutOfBounds,
    InvalidConfig,
    InvalidDelta,
)
from .regions import (
    Region,
    RegionSequence,
    RenderParams,
)
from .config import (
    AnimationConfig,
    DEFAULT_INTERVAL,
)

__all__ = [
    # Errors
    "AnimatError",
    "InvalidDimension",
    "InvalidRange",
    "OutOfBounds",
    "InvalidConfig",
    "InvalidDelta",
    # Regions
    "Region",
    "RegionSequence",
    "RenderParams",
    # Config
    "AnimationConfig",
    "DEFAULT_INTERVAL",
]
