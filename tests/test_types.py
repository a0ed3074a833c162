"""Tests for type definitions."""

from __future__ import annotations

import dataclasses
import math

import numpy as np
import pytest

from animat.types import (
    AnimatError,
    AnimationConfig,
    DEFAULT_INTERVAL,
    InvalidConfig,
    InvalidDimension,
    InvalidRange,
    OutOfBounds,
    Region,
    RenderParams,
)


class TestRegion:
    """Tests for Region."""

    def test_viewport(self):
        """Test viewport returns the rectangle."""
        region = Region(10, 20, 30, 40, 100, 200)
        assert region.viewport == (10, 20, 30, 40)

    def test_uv_is_normalized(self):
        """Test uv divides by the atlas size."""
        region = Region(25, 50, 25, 50, 100, 200)
        assert region.uv == (0.25, 0.25, 0.5, 0.5)

    def test_texture_coords_corner_order(self):
        """Test texture coords run clockwise from top-left."""
        region = Region(0, 0, 50, 100, 100, 200)
        expected = np.array([[0.0, 0.0], [0.5, 0.0], [0.5, 0.5], [0.0, 0.5]])
        np.testing.assert_allclose(region.texture_coords(), expected)

    def test_region_is_immutable(self):
        """Test regions cannot be modified."""
        region = Region(0, 0, 10, 10, 100, 100)
        with pytest.raises(dataclasses.FrozenInstanceError):
            region.x = 5

    def test_regions_compare_by_value(self):
        """Test equal rectangles are equal regions."""
        assert Region(0, 0, 10, 10, 100, 100) == Region(0, 0, 10, 10, 100, 100)


class TestRenderParams:
    """Tests for RenderParams geometry."""

    def test_corners_without_mirroring(self):
        """Test unmirrored quad corners sit at the draw position."""
        params = RenderParams(Region(0, 0, 10, 20, 40, 40), 1, 1, 0, 0)
        expected = np.array([[100, 50], [110, 50], [110, 70], [100, 70]])
        np.testing.assert_allclose(params.corners(100, 50), expected)

    def test_transform_is_translation_when_identity(self):
        """Test identity scale and origin yield a pure translation."""
        params = RenderParams(Region(0, 0, 10, 20, 40, 40), 1, 1, 0, 0)
        matrix = params.transform(5, 7)
        np.testing.assert_allclose(matrix, [[1, 0, 5], [0, 1, 7], [0, 0, 1]])


class TestErrors:
    """Tests for the error hierarchy."""

    @pytest.mark.parametrize(
        "error_cls", [InvalidDimension, InvalidRange, OutOfBounds, InvalidConfig]
    )
    def test_errors_are_value_errors(self, error_cls):
        """Test every error can be caught as ValueError and AnimatError."""
        error = error_cls("bad", 42)
        assert isinstance(error, AnimatError)
        assert isinstance(error, ValueError)
        assert error.value == 42
        assert str(error) == "bad"


class TestAnimationConfig:
    """Tests for AnimationConfig."""

    def test_defaults(self):
        """Test default config values."""
        config = AnimationConfig()
        assert config.interval == DEFAULT_INTERVAL == 0.1
        assert config.speed == 1.0
        assert config.playing is True
        assert config.flip_horizontal is False
        assert config.flip_vertical is False

    @pytest.mark.parametrize("interval", [0, -0.1, math.inf, math.nan])
    def test_rejects_non_positive_interval(self, interval):
        """Test config validates the interval."""
        with pytest.raises(InvalidConfig):
            AnimationConfig(interval=interval)

    def test_rejects_non_positive_speed(self):
        """Test config validates the speed."""
        with pytest.raises(InvalidConfig):
            AnimationConfig(speed=0)

    def test_rejects_infinite_speed(self):
        """Test an infinite speed is rejected."""
        with pytest.raises(InvalidConfig):
            AnimationConfig(speed=math.inf)

    def test_rejects_zero_frame_time(self):
        """Test interval and speed must leave a positive frame time."""
        with pytest.raises(InvalidConfig):
            AnimationConfig(interval=1e-300, speed=1e100)

    def test_from_dict(self):
        """Test creating config from a dictionary."""
        config = AnimationConfig.from_dict(
            {"interval": 0.25, "speed": 2, "flip_horizontal": True, "unknown": 1}
        )
        assert config.interval == 0.25
        assert config.speed == 2
        assert config.flip_horizontal is True
        assert config.flip_vertical is False

    def test_from_empty_dict_uses_defaults(self):
        """Test missing keys fall back to defaults."""
        assert AnimationConfig.from_dict({}) == AnimationConfig()
