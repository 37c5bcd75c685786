"""
Goal: The switcher's brain, with no tkinter in sight.

Owns the query, the ranked list, the selection and the loading flag. The overlay calls
`poll()` once per frame and forwards key presses; everything here runs on the UI thread.

Loading -> Ready happens once, either when the fetch thread delivers a list or when the
load timeout passes (then the list stays empty). Ready never goes back to Loading.

Every re-rank puts the selection back on the top result, even if the previously
selected window is still in the list.
"""

from __future__ import annotations

import time
from enum import Enum
from typing import Callable, List, Optional

from loguru import logger

from switcher.models.schemas import WindowRecord
from switcher.services.filter_engine import rank
from switcher.services.window_source import WindowHandoff
from switcher.settings import LOAD_TIMEOUT_SECONDS


class LoadState(str, Enum):
    LOADING = "loading"
    READY = "ready"


class SwitcherController:
    """State machine behind the overlay."""

    def __init__(
        self,
        handoff: WindowHandoff,
        *,
        focus_window: Callable[[str], None],
        close: Callable[[], None],
        load_timeout: float = LOAD_TIMEOUT_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._handoff = handoff
        self._focus_window = focus_window
        self._close = close
        self._load_timeout = load_timeout
        self._clock = clock

        self.all_windows: List[WindowRecord] = []
        self.query = ""
        self.ranked_indices: List[int] = []
        self.selected: Optional[int] = None
        self.state = LoadState.LOADING
        self.loading_started_at = clock()
        self.pending_focus_id: Optional[str] = None
        self.closed = False

    @property
    def loading(self) -> bool:
        return self.state is LoadState.LOADING

    # ---- per-frame ----

    def poll(self) -> bool:
        """Check the handoff and the timeout; True if this call finished loading."""
        if not self.loading:
            return False

        fetched = self._handoff.take()
        if fetched is not None:
            self.all_windows = fetched
            logger.debug("Window list arrived with {} entries", len(fetched))
        elif self._clock() - self.loading_started_at > self._load_timeout:
            logger.warning(
                "No window list after {:.1f}s; showing an empty list", self._load_timeout
            )
        else:
            return False

        self.state = LoadState.READY
        self.refilter()
        return True

    # ---- query & ranking ----

    def refilter(self) -> None:
        self.ranked_indices = rank(self.all_windows, self.query)
        self.selected = 0

    def set_query(self, text: str) -> bool:
        """Store new query text; re-rank only when it actually changed."""
        if text == self.query:
            return False
        self.query = text
        self.refilter()
        return True

    def visible_windows(self) -> List[WindowRecord]:
        return [self.all_windows[idx] for idx in self.ranked_indices]

    def selected_window(self) -> Optional[WindowRecord]:
        if self.selected is None or not 0 <= self.selected < len(self.ranked_indices):
            return None
        return self.all_windows[self.ranked_indices[self.selected]]

    # ---- navigation ----

    def select_next(self) -> None:
        count = len(self.ranked_indices)
        if not count:
            return
        current = self.selected if self.selected is not None else -1
        self.selected = (current + 1) % count

    def select_previous(self) -> None:
        count = len(self.ranked_indices)
        if not count:
            return
        current = self.selected if self.selected is not None else 0
        self.selected = (current - 1) % count

    # ---- actions ----

    def commit(self) -> bool:
        """Focus the selected window and close. Does nothing if no row is selected."""
        window = self.selected_window()
        if window is None:
            return False
        self.pending_focus_id = window.id
        window_id, self.pending_focus_id = self.pending_focus_id, None
        self._focus_window(window_id)
        self._request_close()
        return True

    def commit_row(self, row: int) -> bool:
        """Pointer pick: move the selection to `row`, then commit."""
        if not 0 <= row < len(self.ranked_indices):
            return False
        self.selected = row
        return self.commit()

    def cancel(self) -> None:
        self._request_close()

    def _request_close(self) -> None:
        if self.closed:
            return
        self.closed = True
        self._close()
