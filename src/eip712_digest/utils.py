"""
Shared helpers: package logger and diagnostic context.
"""

import inspect
import logging
import sys
from typing import Optional, Union

LOGGER_NAME = "eip712_digest"
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s"

logger = logging.getLogger(LOGGER_NAME)
logger.addHandler(logging.NullHandler())


def setup_logger(level: Union[int, str] = "INFO", stream=None) -> logging.Logger:
    """
    Attach a stream handler to the package logger.

    Library code never configures logging on import; applications (and the
    bundled examples) call this once at start-up. Calling it again only
    updates the level.

    Args:
        level: Logging level name or number (e.g. ``"DEBUG"``).
        stream: Target stream, defaults to ``sys.stderr``.

    Returns:
        The configured package logger.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    if not any(getattr(h, "_eip712_handler", False) for h in logger.handlers):
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._eip712_handler = True
        logger.addHandler(handler)

    logger.setLevel(level)
    return logger


def error_context(skip: int = 1) -> Optional[str]:
    """Return ``file:line in function`` of the caller ``skip`` frames up."""
    frame = inspect.currentframe()
    try:
        for _ in range(skip + 1):
            if frame is None:
                return None
            frame = frame.f_back
        if frame is None:
            return None
        info = inspect.getframeinfo(frame, context=0)
        return f"{info.filename}:{info.lineno} in {info.function}"
    finally:
        del frame
