"""Logging bootstrap for hosts embedding the catalog store.

// [LAW:single-enforcer] Handler wiring for the story_nav logger happens here only.

Console output goes through rich; a plain file handler is added only when a
log file is configured. The store and diagnostics modules just call
logging.getLogger(__name__) and inherit whatever is wired here.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "story_nav"


@dataclass(frozen=True)
class LoggingRuntime:
    """Resolved logging configuration."""

    level: int
    file_path: str | None


_RUNTIME: LoggingRuntime | None = None


def resolve_level(raw: object) -> int:
    """Level name or number to an int; anything unrecognized is INFO."""
    if isinstance(raw, int) and not isinstance(raw, bool):
        return raw
    level = logging.getLevelName(str(raw or "INFO").strip().upper())
    return level if isinstance(level, int) else logging.INFO


def configure(
    settings: dict | None = None,
    console: Console | None = None,
) -> LoggingRuntime:
    """Wire the story_nav logger once; later calls return the first runtime.

    Level: STORY_NAV_LOG_LEVEL, else settings["logLevel"], else INFO.
    File: STORY_NAV_LOG_FILE, else settings["logFile"], else none.
    """
    global _RUNTIME
    if _RUNTIME is not None:
        return _RUNTIME

    settings = settings or {}
    level = resolve_level(os.environ.get("STORY_NAV_LOG_LEVEL") or settings.get("logLevel"))
    file_path = os.environ.get("STORY_NAV_LOG_FILE") or settings.get("logFile") or None

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    logger.propagate = False
    logger.handlers.clear()

    console_handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )
    console_handler.setLevel(level)
    logger.addHandler(console_handler)

    if file_path:
        Path(file_path).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(file_path, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s")
        )
        logger.addHandler(file_handler)

    _RUNTIME = LoggingRuntime(level=level, file_path=str(file_path) if file_path else None)
    return _RUNTIME


def get_runtime() -> LoggingRuntime | None:
    return _RUNTIME


def reset() -> None:
    """Remove the handlers configure() added and forget the runtime."""
    global _RUNTIME
    logger = logging.getLogger(ROOT_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    _RUNTIME = None
