"""Loguru sinks for applications that use envspaces.

Library code logs through the stdlib loggers returned by
:func:`envspaces.utils.logging.get_component_logger`. Calling
:func:`setup_logging` installs loguru sinks and routes those stdlib records
into them, tagging each record with the originating logger name.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from loguru import logger as _logger

from ..core.constants import PACKAGE_NAME

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
    "<cyan>{extra[component]}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {extra[component]} | {message}"

__all__ = ["InterceptHandler", "setup_logging", "get_logger", "CONSOLE_FORMAT", "FILE_FORMAT"]


class InterceptHandler(logging.Handler):
    """Forward stdlib records to loguru, keeping the stdlib logger name."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: Any = _logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Skip logging-module frames so loguru reports the real call site
        frame, depth = logging.currentframe(), 2
        while frame is not None and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        _logger.bind(component=record.name).opt(
            depth=depth, exception=record.exc_info
        ).log(level, record.getMessage())


def _sink_options(level: str, serialize: bool, fmt: str) -> Dict[str, Any]:
    return {
        "level": level,
        "format": fmt,
        "serialize": serialize,
        "backtrace": False,
        "diagnose": False,
    }


def setup_logging(
    *,
    level: str = "INFO",
    console: bool = True,
    file_path: Optional[str | Path] = None,
    rotation: Optional[str | int] = None,
    retention: Optional[str | int] = None,
    serialize: bool = False,
) -> List[int]:
    """Replace all loguru sinks and bridge envspaces' stdlib loggers into them.

    Args:
        level: Minimum level for every sink and for the stdlib root logger.
        console: Add a stderr sink.
        file_path: Add a file sink at this path.
        rotation: Loguru rotation policy for the file sink, e.g. ``"10 MB"``.
        retention: Loguru retention policy for rotated files.
        serialize: Emit JSON records instead of formatted text.

    Returns:
        list[int]: Loguru ids of the sinks that were added.
    """
    lvl = level.upper()
    _logger.remove()
    _logger.configure(extra={"component": PACKAGE_NAME})

    sink_ids: List[int] = []
    if console:
        sink_ids.append(_logger.add(sys.stderr, **_sink_options(lvl, serialize, CONSOLE_FORMAT)))
    if file_path:
        sink_ids.append(
            _logger.add(
                str(file_path),
                rotation=rotation,
                retention=retention,
                **_sink_options(lvl, serialize, FILE_FORMAT),
            )
        )

    _bridge_stdlib(lvl)
    return sink_ids


def _bridge_stdlib(level: str) -> None:
    logging.root.handlers = [InterceptHandler()]
    logging.root.setLevel(logging.getLevelName(level) if level != "TRACE" else logging.DEBUG)
    # Package loggers must propagate to the root intercept handler
    for name in list(logging.Logger.manager.loggerDict):
        if name == PACKAGE_NAME or name.startswith(f"{PACKAGE_NAME}."):
            package_logger = logging.getLogger(name)
            package_logger.handlers = []
            package_logger.propagate = True


def get_logger():
    """Return the loguru logger that :func:`setup_logging` configures."""
    return _logger
