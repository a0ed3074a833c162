"""Tests for logging setup."""

from __future__ import annotations

import logging

import pytest

from animat.engine import Grid
from animat.utils import ColoredFormatter, setup_logging


@pytest.fixture
def animat_logger():
    logger = logging.getLogger("animat")
    saved = (logger.level, list(logger.handlers))
    yield logger
    logger.setLevel(saved[0])
    logger.handlers[:] = saved[1]


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_sets_level_by_name(self, animat_logger):
        """Test level names are accepted."""
        setup_logging("debug")
        assert animat_logger.level == logging.DEBUG

    def test_does_not_stack_handlers(self, animat_logger):
        """Test calling twice keeps a single handler."""
        before = len(animat_logger.handlers)
        setup_logging()
        setup_logging()
        assert len(animat_logger.handlers) == before + 1

    def test_unknown_level_rejected(self, animat_logger):
        """Test unknown level names raise."""
        with pytest.raises(ValueError):
            setup_logging("chatty")

    def test_colored_formatter_wraps_level(self):
        """Test the level name is wrapped in colour codes."""
        record = logging.LogRecord("animat", logging.WARNING, __file__, 1, "hi", None, None)
        output = ColoredFormatter("%(levelname)s %(message)s").format(record)
        assert output == "\033[33mWARNING\033[0m hi"

    def test_colored_formatter_leaves_record_plain(self):
        """Test colouring does not leak into the shared record."""
        record = logging.LogRecord("animat", logging.ERROR, __file__, 1, "oops", None, None)
        ColoredFormatter("%(levelname)s %(message)s").format(record)
        assert record.levelname == "ERROR"
        assert logging.Formatter("%(levelname)s").format(record) == "ERROR"

    def test_colored_formatter_custom_level_uncoloured(self):
        """Test levels without a colour are formatted plainly."""
        record = logging.LogRecord("animat", 25, __file__, 1, "note", None, None)
        output = ColoredFormatter("%(levelname)s %(message)s").format(record)
        assert "\033[" not in output


class TestLibraryLogging:
    """Tests for log records emitted by the library."""

    def test_slicing_logs_debug(self, caplog):
        """Test slicing emits a debug record."""
        with caplog.at_level(logging.DEBUG, logger="animat"):
            Grid.from_frame_size(40, 40, 10, 20).frames("1-2", 1)
        assert any("Sliced 2 frames" in r.getMessage() for r in caplog.records)
