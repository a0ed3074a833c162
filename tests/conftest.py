"""Pytest configuration and fixtures."""

from __future__ import annotations

import pytest

from animat.engine import AnimationState, Grid
from animat.renderer import HeadlessRenderer
from animat.types import Region


@pytest.fixture
def grid() -> Grid:
    """A 4x2 grid of 10x20 frames."""
    return Grid.from_frame_size(40, 40, 10, 20)


@pytest.fixture
def frames(grid) -> tuple[Region, ...]:
    """The four frames of the first row."""
    return grid.frames("1-4", 1)


@pytest.fixture
def animation(frames) -> AnimationState:
    """A four frame animation with a binary-exact interval."""
    return AnimationState(frames, interval=0.125)


@pytest.fixture
def renderer() -> HeadlessRenderer:
    return HeadlessRenderer()
