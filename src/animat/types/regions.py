"""Atlas region and render parameter types."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Region:
    """A rectangle within a texture atlas, in atlas pixels."""

    x: float
    y: float
    width: float
    height: float
    atlas_width: float
    atlas_height: float

    @property
    def viewport(self) -> tuple[float, float, float, float]:
        """Get the rectangle as (x, y, width, height)."""
        return (self.x, self.y, self.width, self.height)

    @property
    def uv(self) -> tuple[float, float, float, float]:
        """Get normalized texture coordinates as (u0, v0, u1, v1)."""
        return (
            self.x / self.atlas_width,
            self.y / self.atlas_height,
            (self.x + self.width) / self.atlas_width,
            (self.y + self.height) / self.atlas_height,
        )

    def texture_coords(self) -> np.ndarray:
        """Get the normalized corners of the region.

        Returns:
            A 4x2 array, clockwise from the top-left corner.
        """
        u0, v0, u1, v1 = self.uv
        return np.array([[u0, v0], [u1, v0], [u1, v1], [u0, v1]], dtype=np.float64)


# Playback order is insertion order.
RegionSequence = tuple[Region, ...]


@dataclass(frozen=True)
class RenderParams:
    """Everything a renderer needs to draw the current frame.

    Scale and origin already include any mirroring.
    """

    region: Region
    scale_x: float
    scale_y: float
    origin_x: float
    origin_y: float

    def transform(self, x: float, y: float, rotation: float = 0.0) -> np.ndarray:
        """Get the 3x3 affine transform for drawing at (x, y)."""
        from animat.renderer.transform import affine_transform

        return affine_transform(
            x, y, rotation, self.scale_x, self.scale_y, self.origin_x, self.origin_y
        )

    def corners(self, x: float, y: float, rotation: float = 0.0) -> np.ndarray:
        """Get the screen-space corners of the quad drawn at (x, y)."""
        from animat.renderer.transform import quad_corners

        return quad_corners(
            self.region,
            x,
            y,
            rotation,
            self.scale_x,
            self.scale_y,
            self.origin_x,
            self.origin_y,
        )
