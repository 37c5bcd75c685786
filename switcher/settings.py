"""
Goal: Centralized configuration for the switcher (binary path, timings, log location, look).
Everything can be nudged from the environment; bad values quietly fall back to defaults.
"""

import os
from pathlib import Path


def _validate_seconds(value: str, default: float, low: float, high: float) -> float:
    """Parse a duration in seconds and keep it inside [low, high]."""
    try:
        seconds = float(value)
    except ValueError:
        return default
    if low <= seconds <= high:
        return seconds
    return default


def _validate_level(level: str, default: str) -> str:
    """Only accept loguru's built-in level names."""
    allowed = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}
    level = (level or "").strip().upper()
    return level if level in allowed else default


# The window manager CLI we talk to
AEROSPACE_BIN = os.getenv("SWITCHER_AEROSPACE_BIN", "").strip() or "aerospace"

# Give up waiting for the window list after this long and show what we have (nothing)
LOAD_TIMEOUT_SECONDS = _validate_seconds(
    os.getenv("SWITCHER_LOAD_TIMEOUT", "2.0"), 2.0, 0.001, 60.0
)

# Grace period so the closing overlay hands focus back before aerospace moves it
MAX_FOCUS_DELAY_SECONDS = 5.0
FOCUS_DELAY_SECONDS = _validate_seconds(
    os.getenv("SWITCHER_FOCUS_DELAY", "0.05"), 0.05, 0.0, MAX_FOCUS_DELAY_SECONDS
)

# Logging
LOG_LEVEL = _validate_level(os.getenv("SWITCHER_LOG_LEVEL", "WARNING"), "WARNING")
LOG_DIR = Path(
    os.getenv("SWITCHER_LOG_DIR")
    or str(Path.home() / ".cache" / "aerospace-switcher" / "logs")
)

# Overlay geometry (pixels) and redraw cadence
WINDOW_WIDTH = 500
WINDOW_HEIGHT = 400
SEARCH_BOX_HEIGHT = 32
ITEM_HEIGHT = 28
MAX_LIST_HEIGHT = 400
PADDING_TOP = 8
FRAME_INTERVAL_MS = 16

# Dark, slightly see-through theme
BG_COLOR = "#1e1e1e"
ENTRY_BG_COLOR = "#2b2b2b"
TEXT_COLOR = "#dcdcdc"
MUTED_TEXT_COLOR = "#b4b4b4"
SELECTED_BG_COLOR = "#4682b4"
WINDOW_ALPHA = 0.94
