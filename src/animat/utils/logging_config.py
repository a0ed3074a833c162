"""Logging setup for scripts using animat.

The library itself only creates loggers; handlers are left to the
application. ``setup_logging`` is a convenience for demos and tools.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

DEFAULT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class ColoredFormatter(logging.Formatter):
    """Formatter that wraps the level name in an ANSI colour."""

    LEVEL_COLORS = {
        logging.DEBUG: 36,
        logging.INFO: 32,
        logging.WARNING: 33,
        logging.ERROR: 31,
        logging.CRITICAL: 35,
    }

    def formatMessage(self, record: logging.LogRecord) -> str:
        code = self.LEVEL_COLORS.get(record.levelno)
        if code is None:
            return super().formatMessage(record)
        # The original record keeps its plain level name
        tinted = logging.makeLogRecord(record.__dict__)
        tinted.levelname = f"\033[{code}m{record.levelname}\033[0m"
        return super().formatMessage(tinted)


def setup_logging(
    level: Union[int, str] = logging.INFO,
    colored: bool = True,
    fmt: Optional[str] = None,
) -> logging.Logger:
    """Attach a console handler to the ``animat`` logger.

    Calling it again replaces the handler instead of adding a second one.

    Args:
        level: Logging level, as a number or a name like "DEBUG".
        colored: Whether to colour level names.
        fmt: Format string, DEFAULT_FORMAT if omitted.

    Returns:
        The configured ``animat`` logger.
    """
    logger = logging.getLogger("animat")
    if isinstance(level, str):
        name = level
        level = logging.getLevelName(name.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown logging level: {name!r}")
    logger.setLevel(level)

    for handler in list(logger.handlers):
        if getattr(handler, "_animat_handler", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler()
    formatter_cls = ColoredFormatter if colored else logging.Formatter
    handler.setFormatter(formatter_cls(fmt or DEFAULT_FORMAT))
    handler._animat_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)

    return logger
