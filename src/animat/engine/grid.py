"""Slicing a texture atlas into a grid of frame regions.

Column and row ranges are 1-based and inclusive, written either as a single
number (``4``) or as a ``"start-end"`` string (``"1-6"``). Regions come out
row-major: left to right, then top to bottom.
"""

from __future__ import annotations

import logging
import numbers
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

from animat.types import (
    InvalidDimension,
    InvalidRange,
    OutOfBounds,
    Region,
    RegionSequence,
)

if TYPE_CHECKING:
    from animat.renderer.base import Atlas

logger = logging.getLogger(__name__)

_SPAN_PATTERN = re.compile(r"(\d+)-(\d+)")


@dataclass(frozen=True)
class Single:
    """A range covering exactly one column or row."""

    index: int

    @property
    def bounds(self) -> tuple[int, int]:
        return (self.index, self.index)


@dataclass(frozen=True)
class Span:
    """An inclusive range of columns or rows."""

    start: int
    end: int

    def __post_init__(self):
        if self.start > self.end:
            raise InvalidRange(
                f"Invalid range format: {self.start}-{self.end}", (self.start, self.end)
            )

    @property
    def bounds(self) -> tuple[int, int]:
        return (self.start, self.end)


Range = Union[Single, Span]
RangeSpec = Union[int, str, Single, Span]


def parse_range(spec: RangeSpec) -> Range:
    """Parse a column/row range spec.

    Args:
        spec: An int, a "start-end" string, or an already parsed range.

    Returns:
        The parsed Single or Span.

    Raises:
        InvalidRange: If the spec is malformed or inverted.
    """
    if isinstance(spec, (Single, Span)):
        return spec
    # bool is an int subclass but never a meaningful index
    if isinstance(spec, bool):
        raise InvalidRange(f"Invalid range format: {spec!r}", spec)
    if isinstance(spec, int):
        return Single(spec)
    if isinstance(spec, str):
        match = _SPAN_PATTERN.fullmatch(spec)
        if match is None:
            raise InvalidRange(f"Invalid range format: {spec!r}", spec)
        return Span(int(match.group(1)), int(match.group(2)))
    raise InvalidRange(f"Invalid range format: {spec!r}", spec)


def _check_bounds(parsed: Range, count: int, axis: str) -> tuple[int, int]:
    start, end = parsed.bounds
    if start < 1 or end > count:
        raise OutOfBounds(
            f"{axis.capitalize()} range out of bounds: {start}-{end} (1-{count})",
            (start, end),
        )
    return start, end


@dataclass(frozen=True)
class Grid:
    """One way of cutting an atlas into equally sized cells.

    Build it with ``from_frame_size``, ``from_counts`` or ``for_atlas``
    rather than directly.
    """

    atlas_width: float
    atlas_height: float
    frame_width: float
    frame_height: float
    column_count: int
    row_count: int

    @classmethod
    def from_frame_size(
        cls,
        atlas_width: float,
        atlas_height: float,
        frame_width: float,
        frame_height: float,
    ) -> "Grid":
        """Create a grid from an explicit frame size.

        Raises:
            InvalidDimension: If any size is not positive or the frame
                does not fit in the atlas.
        """
        _check_atlas(atlas_width, atlas_height)
        if not (frame_width > 0 and frame_height > 0):
            raise InvalidDimension(
                f"Invalid frame dimensions: {frame_width}x{frame_height}",
                (frame_width, frame_height),
            )
        column_count = int(atlas_width // frame_width)
        row_count = int(atlas_height // frame_height)
        if column_count < 1 or row_count < 1:
            raise InvalidDimension(
                f"Frame {frame_width}x{frame_height} does not fit atlas "
                f"{atlas_width}x{atlas_height}",
                (frame_width, frame_height),
            )
        return cls(
            atlas_width, atlas_height, frame_width, frame_height, column_count, row_count
        )

    @classmethod
    def from_counts(
        cls,
        atlas_width: float,
        atlas_height: float,
        column_count: int,
        row_count: int,
    ) -> "Grid":
        """Create a grid by dividing the atlas into columns and rows.

        Raises:
            InvalidDimension: If a count is not a positive integer or the
                derived frame size is not positive.
        """
        _check_atlas(atlas_width, atlas_height)
        if not (_is_count(column_count) and _is_count(row_count)):
            raise InvalidDimension(
                f"Column/row counts must be integers: {column_count!r}x{row_count!r}",
                (column_count, row_count),
            )
        if not (column_count > 0 and row_count > 0):
            raise InvalidDimension(
                f"Invalid number of columns/rows: {column_count}x{row_count}",
                (column_count, row_count),
            )
        frame_width = atlas_width / column_count
        frame_height = atlas_height / row_count
        if not (frame_width > 0 and frame_height > 0):
            raise InvalidDimension(
                f"Invalid frame dimensions: {frame_width}x{frame_height}",
                (frame_width, frame_height),
            )
        return cls(
            atlas_width,
            atlas_height,
            frame_width,
            frame_height,
            int(column_count),
            int(row_count),
        )

    @classmethod
    def for_atlas(cls, atlas: Atlas, column_count: int, row_count: int) -> "Grid":
        """Create a grid from anything with ``width`` and ``height``.

        A Pillow image or a renderer's texture handle both qualify.
        """
        return cls.from_counts(atlas.width, atlas.height, column_count, row_count)

    def frames(self, columns: RangeSpec, rows: RangeSpec) -> RegionSequence:
        """Cut the regions covered by a column range and a row range.

        Args:
            columns: Column range, e.g. ``"1-6"`` or ``3``.
            rows: Row range, e.g. ``"1-2"`` or ``1``.

        Returns:
            Regions in row-major order.

        Raises:
            InvalidRange: If a range is malformed or inverted.
            OutOfBounds: If a range falls outside the grid.
        """
        start_col, end_col = _check_bounds(parse_range(columns), self.column_count, "column")
        start_row, end_row = _check_bounds(parse_range(rows), self.row_count, "row")

        regions = tuple(
            Region(
                x=(col - 1) * self.frame_width,
                y=(row - 1) * self.frame_height,
                width=self.frame_width,
                height=self.frame_height,
                atlas_width=self.atlas_width,
                atlas_height=self.atlas_height,
            )
            for row in range(start_row, end_row + 1)
            for col in range(start_col, end_col + 1)
        )
        logger.debug(
            f"Sliced {len(regions)} frames: columns {start_col}-{end_col}, "
            f"rows {start_row}-{end_row}"
        )
        return regions


def _is_count(value: object) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def _check_atlas(atlas_width: float, atlas_height: float) -> None:
    if not (atlas_width > 0 and atlas_height > 0):
        raise InvalidDimension(
            f"Invalid atlas dimensions: {atlas_width}x{atlas_height}",
            (atlas_width, atlas_height),
        )


def slice_by_frame_size(
    atlas_width: float,
    atlas_height: float,
    frame_width: float,
    frame_height: float,
    columns: RangeSpec,
    rows: RangeSpec,
) -> RegionSequence:
    """Slice an atlas whose cells have a known pixel size."""
    grid = Grid.from_frame_size(atlas_width, atlas_height, frame_width, frame_height)
    return grid.frames(columns, rows)


def slice_by_count(
    atlas_width: float,
    atlas_height: float,
    column_count: int,
    row_count: int,
    columns: RangeSpec,
    rows: RangeSpec,
) -> RegionSequence:
    """Slice an atlas laid out as a known number of columns and rows."""
    grid = Grid.from_counts(atlas_width, atlas_height, column_count, row_count)
    return grid.frames(columns, rows)
