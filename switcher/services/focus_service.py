"""
Goal: Thin wrapper for asking aerospace to focus a window (fire-and-forget).
"""

from typing import Optional

from loguru import logger

from switcher.adapters.aerospace import spawn_focus
from switcher.settings import FOCUS_DELAY_SECONDS, MAX_FOCUS_DELAY_SECONDS


def request_focus(window_id: str, delay: Optional[float] = None) -> None:
    if delay is None:
        wait = FOCUS_DELAY_SECONDS
    else:
        wait = min(max(0.0, delay), MAX_FOCUS_DELAY_SECONDS)
    logger.info("Focusing window {} in {:.2f}s", window_id, wait)
    spawn_focus(window_id, delay=wait)
