"""Affine transforms for drawing atlas regions."""

from __future__ import annotations

import math

import numpy as np

from animat.types import Region


def affine_transform(
    x: float,
    y: float,
    rotation: float = 0.0,
    scale_x: float = 1.0,
    scale_y: float = 1.0,
    origin_x: float = 0.0,
    origin_y: float = 0.0,
) -> np.ndarray:
    """Build the 3x3 transform mapping frame-local pixels to the screen.

    The origin is moved to (0, 0), then the frame is scaled, rotated and
    finally translated to (x, y).

    Returns:
        A 3x3 float64 matrix for column vectors.
    """
    cos_r = math.cos(rotation)
    sin_r = math.sin(rotation)

    translate = np.array([[1.0, 0.0, x], [0.0, 1.0, y], [0.0, 0.0, 1.0]])
    rotate = np.array([[cos_r, -sin_r, 0.0], [sin_r, cos_r, 0.0], [0.0, 0.0, 1.0]])
    scale = np.diag([scale_x, scale_y, 1.0])
    to_origin = np.array([[1.0, 0.0, -origin_x], [0.0, 1.0, -origin_y], [0.0, 0.0, 1.0]])

    return translate @ rotate @ scale @ to_origin


def quad_corners(
    region: Region,
    x: float,
    y: float,
    rotation: float = 0.0,
    scale_x: float = 1.0,
    scale_y: float = 1.0,
    origin_x: float = 0.0,
    origin_y: float = 0.0,
) -> np.ndarray:
    """Get the screen-space corners of a region drawn with a transform.

    Returns:
        A 4x2 array in the same corner order as Region.texture_coords().
    """
    w, h = region.width, region.height
    local = np.array(
        [[0.0, w, w, 0.0], [0.0, 0.0, h, h], [1.0, 1.0, 1.0, 1.0]]
    )
    matrix = affine_transform(x, y, rotation, scale_x, scale_y, origin_x, origin_y)
    return (matrix @ local)[:2].T
