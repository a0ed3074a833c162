"""Renderer package for animat."""

from __future__ import annotations

from .base import Atlas, SpriteRenderer
from .transform import affine_transform, quad_corners
from .headless import DrawCall, HeadlessRenderer

__all__ = [
    "Atlas",
    "SpriteRenderer",
    "affine_transform",
    "quad_corners",
    "DrawCall",
    "HeadlessRenderer",
]
