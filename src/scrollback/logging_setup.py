"""Logging bootstrap for scrollback.

All package loggers propagate to the ``scrollback`` logger, which is wired
here and nowhere else. The headless CLI logs to stderr through Rich; the
terminal UI swaps stderr for its in-app log panel.
"""

import logging
import os
from dataclasses import dataclass
from logging.handlers import RotatingFileHandler
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "scrollback"


@dataclass(frozen=True)
class LoggingRuntime:
    """Resolved logging configuration."""

    level_name: str
    level: int
    file_path: str | None


_RUNTIME: LoggingRuntime | None = None


def parse_level(raw: str | None) -> tuple[str, int]:
    """Normalize a level name; unknown names fall back to INFO."""
    normalized = str(raw or "INFO").strip().upper()
    level = logging.getLevelName(normalized)
    if not isinstance(level, int):
        level = logging.INFO
    return logging.getLevelName(level), level


def _make_console_handler(level: int) -> logging.Handler:
    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setLevel(level)
    return handler


def _make_file_handler(level: int, file_path: str) -> logging.Handler:
    handler = RotatingFileHandler(
        file_path,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
    )
    return handler


def configure(
    level: str | None = None,
    *,
    console: bool = True,
    extra_handlers: list[logging.Handler] | None = None,
) -> LoggingRuntime:
    """Configure the scrollback logger hierarchy.

    Idempotent: repeated calls return the originally configured runtime.

    Args:
        level: Level name; defaults to SCROLLBACK_LOG_LEVEL or INFO
        console: Attach a stderr handler (disable inside the terminal UI)
        extra_handlers: Additional handlers, e.g. the UI log panel

    Environment variables:
        SCROLLBACK_LOG_LEVEL: Default level name
        SCROLLBACK_LOG_FILE: Also write to this rotating log file
    """
    global _RUNTIME
    if _RUNTIME is not None:
        return _RUNTIME

    level_name, numeric = parse_level(level or os.getenv("SCROLLBACK_LOG_LEVEL"))
    file_path = os.getenv("SCROLLBACK_LOG_FILE") or None

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(numeric)
    logger.propagate = False
    logger.handlers.clear()
    if console:
        logger.addHandler(_make_console_handler(numeric))
    if file_path is not None:
        Path(file_path).parent.mkdir(parents=True, exist_ok=True)
        logger.addHandler(_make_file_handler(numeric, file_path))
    for handler in extra_handlers or []:
        logger.addHandler(handler)

    logging.captureWarnings(True)

    _RUNTIME = LoggingRuntime(level_name=level_name, level=numeric, file_path=file_path)
    return _RUNTIME


def get_runtime() -> LoggingRuntime | None:
    """Return the configured runtime, if ``configure()`` has run."""
    return _RUNTIME


def reset() -> None:
    """Detach all handlers so ``configure()`` can run again."""
    global _RUNTIME
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
    _RUNTIME = None
