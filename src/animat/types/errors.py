"""Exceptions raised by animat.

Every error is an input-validation failure raised at the call that broke
the contract. They all derive from ``ValueError`` so callers that only care
about "bad argument" can catch that.
"""

from __future__ import annotations

from typing import Any


class AnimatError(ValueError):
    """Base class for all animat errors."""

    def __init__(self, message: str, value: Any = None):
        super().__init__(message)
        self.value = value


class InvalidDimension(AnimatError):
    """Non-positive atlas or frame size."""


class InvalidRange(AnimatError):
    """Malformed or inverted column/row range."""


class OutOfBounds(AnimatError):
    """Range or frame index outside the valid bounds."""


class InvalidConfig(AnimatError):
    """Non-positive interval or speed, or an empty frame sequence."""


class InvalidDelta(AnimatError):
    """Negative or non-finite time step passed to ``advance``."""
