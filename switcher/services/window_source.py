"""
Goal: Get the window list off the UI thread, exactly once.

- fetch_windows(): run aerospace and parse its output; never raises, an empty list means "nothing to show".
- WindowHandoff: one-shot slot between the fetch thread and the overlay tick (write once, take once, never block).
- start_fetch(): spawn the background thread that fills the slot.
"""

from __future__ import annotations

import threading
from typing import Callable, List, Optional

from loguru import logger

from switcher.adapters import aerospace
from switcher.models.schemas import WindowRecord


def fetch_windows(binary: Optional[str] = None) -> List[WindowRecord]:
    try:
        result = aerospace.run_list_windows(binary)
    except OSError as exc:
        logger.error("Failed to execute aerospace command: {}", exc)
        return []

    if result.returncode != 0:
        logger.error(
            "Aerospace command failed (exit {}): {}",
            result.returncode,
            (result.stderr or "").strip(),
        )
        return []

    windows = aerospace.parse_window_output(result.stdout or "")
    logger.info("Fetched {} windows", len(windows))
    return windows


class WindowHandoff:
    """Single-use slot: the fetch thread puts one list, the UI thread takes it once."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._value: Optional[List[WindowRecord]] = None
        self._delivered = False

    def put(self, windows: List[WindowRecord]) -> None:
        with self._lock:
            if self._delivered:
                raise RuntimeError("window list already handed off")
            self._delivered = True
            self._value = list(windows)

    def take(self) -> Optional[List[WindowRecord]]:
        """Non-blocking; returns the list on the first call after delivery, else None."""
        with self._lock:
            value, self._value = self._value, None
            return value


def start_fetch(
    handoff: WindowHandoff,
    fetch: Callable[[], List[WindowRecord]] = fetch_windows,
) -> threading.Thread:
    def _worker() -> None:
        handoff.put(fetch())

    # Daemon: if the overlay closes first, the result is simply never read
    thread = threading.Thread(target=_worker, name="window-fetch", daemon=True)
    thread.start()
    return thread
