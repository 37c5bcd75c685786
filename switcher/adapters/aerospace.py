"""
Goal: Talk to the aerospace CLI.
- Run `aerospace list-windows --all` and parse its `id | name | info` lines.
- Fire a detached `aerospace focus --window-id <id>` (optionally after a short sleep).

Notes:
- Output lines with fewer than three fields are noise and get dropped without a word.
- Anything after the second `|` belongs to the info field.
- The focus process runs in its own session so it survives the overlay exiting.
"""

from __future__ import annotations

import shlex
import subprocess
from typing import Iterable, List, Optional

from loguru import logger

from switcher.models.schemas import WindowRecord
from switcher.settings import AEROSPACE_BIN, FOCUS_DELAY_SECONDS

FIELD_SEPARATOR = "|"


def list_windows_command(binary: Optional[str] = None) -> List[str]:
    return [binary or AEROSPACE_BIN, "list-windows", "--all"]


def focus_command(window_id: str, binary: Optional[str] = None) -> List[str]:
    return [binary or AEROSPACE_BIN, "focus", "--window-id", window_id]


def run_list_windows(binary: Optional[str] = None) -> subprocess.CompletedProcess[str]:
    """Run the enumerate command; raises OSError if it can't be launched."""
    return subprocess.run(
        list_windows_command(binary),
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        text=True,
        encoding="utf-8",
        errors="replace",
        check=False,
    )


def parse_window_line(line: str) -> Optional[WindowRecord]:
    parts = line.split(FIELD_SEPARATOR, 2)
    if len(parts) < 3:
        return None
    return WindowRecord(id=parts[0].strip(), name=parts[1].strip(), info=parts[2].strip())


def parse_window_lines(lines: Iterable[str]) -> List[WindowRecord]:
    """Turn raw output lines into records, keeping aerospace's order."""
    windows: List[WindowRecord] = []
    for line in lines:
        if not line.strip():
            continue
        record = parse_window_line(line)
        if record is not None:
            windows.append(record)
    return windows


def parse_window_output(stdout: str) -> List[WindowRecord]:
    return parse_window_lines(stdout.splitlines())


def spawn_focus(
    window_id: str,
    delay: float = FOCUS_DELAY_SECONDS,
    binary: Optional[str] = None,
) -> bool:
    """
    Start the focus command without waiting for it. Returns True if a process was launched.
    Failures are never raised; the caller has nobody to tell.
    """
    cmd = focus_command(window_id, binary)
    # plain fixed-point seconds; some sleep builds reject "1e-05"
    delay = round(max(0.0, delay), 3)
    if delay > 0:
        cmd = ["sh", "-c", f"sleep {delay:.3f} && {shlex.join(cmd)}"]
    try:
        subprocess.Popen(
            cmd,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
            close_fds=True,
        )
    except OSError as exc:
        logger.debug("Focus request for window {} not started: {}", window_id, exc)
        return False
    return True
