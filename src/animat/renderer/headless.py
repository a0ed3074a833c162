"""Headless renderer for testing."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from animat.types import Region

from .transform import affine_transform, quad_corners


@dataclass(frozen=True)
class DrawCall:
    """One recorded call to HeadlessRenderer.draw."""

    atlas: object
    region: Region
    x: float
    y: float
    rotation: float
    scale_x: float
    scale_y: float
    origin_x: float
    origin_y: float

    def transform(self) -> np.ndarray:
        return affine_transform(
            self.x,
            self.y,
            self.rotation,
            self.scale_x,
            self.scale_y,
            self.origin_x,
            self.origin_y,
        )

    def corners(self) -> np.ndarray:
        """Get the screen-space corners of the drawn quad."""
        return quad_corners(
            self.region,
            self.x,
            self.y,
            self.rotation,
            self.scale_x,
            self.scale_y,
            self.origin_x,
            self.origin_y,
        )


class HeadlessRenderer:
    """A renderer that records draw calls instead of drawing.

    Used for testing and demo environments.
    """

    def __init__(self):
        self.calls: list[DrawCall] = []
        self._draw_count = 0

    def clear(self) -> None:
        """Forget the calls recorded so far."""
        self.calls.clear()

    def draw(
        self,
        atlas: object,
        region: Region,
        x: float,
        y: float,
        rotation: float = 0.0,
        scale_x: float = 1.0,
        scale_y: float = 1.0,
        origin_x: float = 0.0,
        origin_y: float = 0.0,
    ) -> None:
        self.calls.append(
            DrawCall(atlas, region, x, y, rotation, scale_x, scale_y, origin_x, origin_y)
        )
        self._draw_count += 1

    @property
    def draw_count(self) -> int:
        """Total draw calls since creation, including cleared ones."""
        return self._draw_count

    @property
    def last_call(self) -> DrawCall | None:
        return self.calls[-1] if self.calls else None

    def get_summary(self) -> str:
        """Describe the recorded calls, one line each."""
        lines = []
        for call in self.calls:
            rx, ry, rw, rh = call.region.viewport
            lines.append(
                f"region=({rx:g},{ry:g},{rw:g},{rh:g}) at ({call.x:g},{call.y:g}) "
                f"scale=({call.scale_x:g},{call.scale_y:g}) "
                f"origin=({call.origin_x:g},{call.origin_y:g})"
            )
        return "\n".join(lines)
