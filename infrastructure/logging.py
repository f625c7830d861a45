"""Logging initialization utilities using loguru."""

from __future__ import annotations

from pathlib import Path
import sys

import appdirs
from loguru import logger

from core.models import DEFAULT_APP_NAME


def get_log_directory(app_name: str = DEFAULT_APP_NAME) -> str:
    """Get the per-user log directory path."""
    return appdirs.user_log_dir(app_name, appauthor=False)


def init_logging(log_dir: str | None = None, level: str = "INFO") -> None:
    """Log to stderr and, if `log_dir` is given, to rotating files under it."""
    logger.remove()
    logger.add(sys.stderr, level=level, format="{level: <8} | {message}")
    if log_dir is None:
        return

    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)
    logger.add(
        str(log_path / "settings_{time:YYYYMMDD}.log"),
        rotation="10 MB",
        retention="10 days",
        compression="zip",
        backtrace=False,
        diagnose=False,
        level=level,
    )
