"""Construction-time animation options."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from .errors import InvalidConfig

DEFAULT_INTERVAL = 0.1


@dataclass(frozen=True)
class AnimationConfig:
    """Playback options applied when an animation is created."""

    interval: float = DEFAULT_INTERVAL
    speed: float = 1.0
    playing: bool = True
    flip_horizontal: bool = False
    flip_vertical: bool = False

    def __post_init__(self):
        if not (self.interval > 0 and math.isfinite(self.interval)):
            raise InvalidConfig(f"Invalid interval: {self.interval!r}", self.interval)
        if not (self.speed > 0 and math.isfinite(self.speed)):
            raise InvalidConfig(f"Invalid speed multiplier: {self.speed!r}", self.speed)
        effective = self.interval / self.speed
        if not (effective > 0 and math.isfinite(effective)):
            raise InvalidConfig(
                f"Interval {self.interval!r} at speed {self.speed!r} "
                f"gives frame time {effective!r}",
                effective,
            )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AnimationConfig":
        """Create config from a dictionary, ignoring unknown keys."""
        return cls(
            interval=data.get("interval", DEFAULT_INTERVAL),
            speed=data.get("speed", 1.0),
            playing=bool(data.get("playing", True)),
            flip_horizontal=bool(data.get("flip_horizontal", False)),
            flip_vertical=bool(data.get("flip_vertical", False)),
        )
