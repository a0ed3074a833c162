"""Animation system that drives a set of animations each tick."""

from __future__ import annotations

import logging
import math
from typing import Optional

from animat.types import InvalidConfig, InvalidDelta

from .animation import AnimationState

logger = logging.getLogger(__name__)


class AnimationSystem:
    """System that advances every registered animation over time."""

    def __init__(self, max_dt: Optional[float] = None):
        """Initialize the system.

        Args:
            max_dt: Upper bound applied to each tick's delta, or None for no cap.
        """
        if max_dt is not None and not max_dt > 0:
            raise InvalidConfig(f"Invalid max_dt: {max_dt!r}", max_dt)
        self.max_dt = max_dt
        self._animations: dict[str, AnimationState] = {}

    def add(self, name: str, animation: AnimationState) -> AnimationState:
        """Register an animation under a name, replacing any previous one."""
        if name in self._animations:
            logger.debug(f"Replacing animation: {name}")
        self._animations[name] = animation
        return animation

    def remove(self, name: str) -> Optional[AnimationState]:
        """Unregister an animation.

        Returns:
            The removed animation, or None if the name was unknown.
        """
        return self._animations.pop(name, None)

    def get(self, name: str) -> Optional[AnimationState]:
        return self._animations.get(name)

    @property
    def names(self) -> list[str]:
        return list(self._animations)

    def __len__(self) -> int:
        return len(self._animations)

    def __contains__(self, name: object) -> bool:
        return name in self._animations

    def update(self, dt: float) -> None:
        """Advance all animations.

        Args:
            dt: Delta time in seconds.

        Raises:
            InvalidDelta: If dt is negative or not finite.
        """
        if not (math.isfinite(dt) and dt >= 0):
            raise InvalidDelta(f"Invalid time step: {dt!r}", dt)
        if self.max_dt is not None and dt > self.max_dt:
            dt = self.max_dt

        for animation in self._animations.values():
            animation.advance(dt)
