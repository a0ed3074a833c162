"""Utilities for animat."""

from __future__ import annotations

from .logging_config import ColoredFormatter, setup_logging

__all__ = [
    "ColoredFormatter",
    "setup_logging",
]
