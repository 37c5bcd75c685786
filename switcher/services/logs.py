"""
Goal: Set up loguru logging: a stderr sink for diagnostics and a rolling log file
under the switcher's log folder. Called once from the CLI entry point.
"""

import sys
from pathlib import Path

from loguru import logger

from switcher.settings import LOG_DIR, LOG_LEVEL


def configure_logging(level: str = LOG_LEVEL, log_dir: Path = LOG_DIR) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level, colorize=True, backtrace=False, diagnose=False)
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        # A read-only home shouldn't stop the overlay from opening
        logger.warning("Log folder unavailable ({}); logging to stderr only", exc)
        return
    logger.add(
        str(Path(log_dir) / "{time:YYYY-MM-DD}.log"),
        rotation="00:00",
        retention="14 days",
        level="INFO",
        backtrace=False,
        diagnose=False,
        serialize=False,
        enqueue=True,
    )
