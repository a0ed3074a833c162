"""Time-driven frame playback for sprite animations."""

from __future__ import annotations

import logging
import math
import numbers
from typing import TYPE_CHECKING, Iterable, Optional

from animat.types import (
    AnimationConfig,
    DEFAULT_INTERVAL,
    InvalidConfig,
    InvalidDelta,
    OutOfBounds,
    Region,
    RegionSequence,
    RenderParams,
)

if TYPE_CHECKING:
    from animat.renderer.base import SpriteRenderer

logger = logging.getLogger(__name__)


class AnimationState:
    """Looping playback over a sequence of atlas regions.

    The frame sequence is stored as a tuple and may be shared between any
    number of animations. Everything else (clock, speed, flags) belongs to
    this instance.
    """

    def __init__(self, frames: Iterable[Region], interval: float = DEFAULT_INTERVAL):
        """Initialize the animation.

        Args:
            frames: Regions in playback order.
            interval: Seconds each frame is shown at speed 1.

        Raises:
            InvalidConfig: If there are no frames or the interval is not positive.
        """
        frames = frames if isinstance(frames, tuple) else tuple(frames)
        if not frames:
            raise InvalidConfig("Animation requires at least one frame", frames)
        _check_interval(interval)

        self._frames: RegionSequence = frames
        self._interval = interval
        self._speed = 1.0
        self._effective_interval = interval
        self._current_index = 0
        self._elapsed = 0.0
        self._playing = True
        self._flip_horizontal = False
        self._flip_vertical = False

        logger.debug(f"Animation created: {len(frames)} frames, interval {interval}")

    @classmethod
    def from_config(
        cls, frames: Iterable[Region], config: Optional[AnimationConfig] = None
    ) -> "AnimationState":
        """Create an animation with its options taken from a config."""
        config = config or AnimationConfig()
        anim = cls(frames, config.interval)
        anim.set_speed(config.speed)
        anim.set_flip_horizontal(config.flip_horizontal)
        anim.set_flip_vertical(config.flip_vertical)
        if not config.playing:
            anim.pause()
        return anim

    @property
    def frames(self) -> RegionSequence:
        return self._frames

    @property
    def frame_count(self) -> int:
        return len(self._frames)

    @property
    def current_index(self) -> int:
        return self._current_index

    @property
    def elapsed(self) -> float:
        """Time accumulated towards the next frame."""
        return self._elapsed

    @property
    def interval(self) -> float:
        """Base frame interval, before the speed multiplier."""
        return self._interval

    @property
    def speed(self) -> float:
        return self._speed

    @property
    def effective_interval(self) -> float:
        """Seconds each frame is actually shown."""
        return self._effective_interval

    @property
    def playing(self) -> bool:
        return self._playing

    @property
    def flip_horizontal(self) -> bool:
        return self._flip_horizontal

    @property
    def flip_vertical(self) -> bool:
        return self._flip_vertical

    def advance(self, dt: float) -> None:
        """Advance the animation by dt seconds.

        A single call may step over several frames when dt is longer than
        the effective interval.

        Args:
            dt: Delta time in seconds.

        Raises:
            InvalidDelta: If dt is negative or not finite.
        """
        if not (math.isfinite(dt) and dt >= 0):
            raise InvalidDelta(f"Invalid time step: {dt!r}", dt)
        if not self._playing:
            return

        self._elapsed += dt
        if self._elapsed < self._effective_interval:
            return

        # Every whole interval elapsed is one frame
        steps, self._elapsed = divmod(self._elapsed, self._effective_interval)
        if not 0 <= self._elapsed < self._effective_interval:
            self._elapsed = 0.0
        self._current_index = (self._current_index + int(steps)) % len(self._frames)

    def current_region(self) -> Region:
        """Get the region for the frame being shown."""
        return self._frames[self._current_index]

    def reset(self) -> None:
        """Rewind to the first frame. Does not change play/pause state."""
        self._elapsed = 0.0
        self._current_index = 0

    def pause(self) -> None:
        self._playing = False

    def resume(self) -> None:
        self._playing = True

    def set_frame(self, index: int) -> None:
        """Jump to a frame without touching the accumulated time.

        Raises:
            OutOfBounds: If index is not a valid frame index.
        """
        if isinstance(index, bool) or not isinstance(index, numbers.Integral):
            raise OutOfBounds(f"Frame index must be an integer: {index!r}", index)
        if not 0 <= index < len(self._frames):
            raise OutOfBounds(
                f"Frame index {index} out of bounds (0-{len(self._frames) - 1})", index
            )
        self._current_index = int(index)

    def set_flip_horizontal(self, state: bool) -> None:
        self._flip_horizontal = bool(state)

    def set_flip_vertical(self, state: bool) -> None:
        self._flip_vertical = bool(state)

    def set_interval(self, interval: float) -> None:
        """Set the base frame interval in seconds.

        Raises:
            InvalidConfig: If interval is not positive and finite.
        """
        _check_interval(interval)
        effective = _effective_interval(interval, self._speed)
        self._interval = interval
        self._effective_interval = effective
        logger.debug(f"Interval set to {interval}, effective {self._effective_interval}")

    def set_speed(self, multiplier: float) -> None:
        """Set the playback speed multiplier.

        Raises:
            InvalidConfig: If multiplier is not positive and finite.
        """
        if not (multiplier > 0 and math.isfinite(multiplier)):
            raise InvalidConfig(f"Invalid speed multiplier: {multiplier!r}", multiplier)
        # Always derived from the base interval so repeated changes cannot drift
        effective = _effective_interval(self._interval, multiplier)
        self._speed = multiplier
        self._effective_interval = effective
        logger.debug(f"Speed set to {multiplier}, effective {self._effective_interval}")

    def render_params(
        self,
        scale_x: float = 1.0,
        scale_y: float = 1.0,
        origin_x: float = 0.0,
        origin_y: float = 0.0,
    ) -> RenderParams:
        """Get the draw parameters for the current frame.

        Mirroring negates the scale and moves the origin to the opposite
        edge, so the flipped sprite covers the same footprint.

        Args:
            scale_x: Requested horizontal scale.
            scale_y: Requested vertical scale.
            origin_x: Requested origin offset inside the frame.
            origin_y: Requested origin offset inside the frame.

        Returns:
            RenderParams with mirroring applied.
        """
        region = self.current_region()
        if self._flip_horizontal:
            scale_x = -scale_x
            origin_x = -origin_x + region.width
        if self._flip_vertical:
            scale_y = -scale_y
            origin_y = -origin_y + region.height
        return RenderParams(region, scale_x, scale_y, origin_x, origin_y)

    def draw(
        self,
        renderer: SpriteRenderer,
        atlas: object,
        x: float,
        y: float,
        rotation: float = 0.0,
        scale_x: float = 1.0,
        scale_y: float = 1.0,
        origin_x: float = 0.0,
        origin_y: float = 0.0,
    ) -> None:
        """Draw the current frame through a renderer.

        Args:
            renderer: Anything implementing SpriteRenderer.
            atlas: The renderer's handle for the atlas texture.
            x: Screen X position.
            y: Screen Y position.
            rotation: Rotation in radians.
            scale_x: Horizontal scale.
            scale_y: Vertical scale.
            origin_x: Origin offset inside the frame.
            origin_y: Origin offset inside the frame.
        """
        params = self.render_params(scale_x, scale_y, origin_x, origin_y)
        renderer.draw(
            atlas,
            params.region,
            x,
            y,
            rotation,
            params.scale_x,
            params.scale_y,
            params.origin_x,
            params.origin_y,
        )

    def clone(self) -> "AnimationState":
        """Create a copy with the same frames and settings but a fresh clock."""
        anim = AnimationState(self._frames, self._interval)
        anim.set_speed(self._speed)
        anim.set_flip_horizontal(self._flip_horizontal)
        anim.set_flip_vertical(self._flip_vertical)
        if not self._playing:
            anim.pause()
        return anim

    def __repr__(self) -> str:
        return (
            f"AnimationState(frame={self._current_index}/{len(self._frames)}, "
            f"interval={self._effective_interval}, playing={self._playing})"
        )


def _check_interval(interval: float) -> None:
    if not (interval > 0 and math.isfinite(interval)):
        raise InvalidConfig(f"Invalid interval: {interval!r}", interval)


def _effective_interval(interval: float, speed: float) -> float:
    effective = interval / speed
    if not (effective > 0 and math.isfinite(effective)):
        raise InvalidConfig(
            f"Interval {interval!r} at speed {speed!r} gives frame time {effective!r}",
            effective,
        )
    return effective
