"""Interfaces for the rendering side of animat.

animat never rasterizes anything itself. A renderer receives the atlas
handle, the region to draw and the full transform, and does the rest.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from animat.types import Region


@runtime_checkable
class Atlas(Protocol):
    """A texture atlas of known pixel size."""

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...


@runtime_checkable
class SpriteRenderer(Protocol):
    """Something that can draw a region of an atlas."""

    def draw(
        self,
        atlas: object,
        region: Region,
        x: float,
        y: float,
        rotation: float,
        scale_x: float,
        scale_y: float,
        origin_x: float,
        origin_y: float,
    ) -> None: ...
