r"""
Goal: A tiny always-on-top overlay for switching aerospace windows.
- Type to fuzzy-filter, Up/Down (or Ctrl+N/J, Ctrl+P/K) to move, Enter or click to focus, Esc to bail.
- The window list is fetched on a background thread; the UI never waits for it.

Notes:
- All state lives in SwitcherController; this file only draws it and forwards key presses.
- A ~60 fps `after()` tick polls the fetch handoff and keeps the search box as the focused widget.
- Key handlers return "break" so Tk's default Entry bindings (Ctrl+K kills the line, etc.) don't fire.
"""

from __future__ import annotations

import tkinter as tk
from typing import Optional, Tuple

from loguru import logger

from switcher.controller import SwitcherController
from switcher.services.focus_service import request_focus
from switcher.services.window_source import WindowHandoff, start_fetch
from switcher.settings import (
    BG_COLOR,
    ENTRY_BG_COLOR,
    FRAME_INTERVAL_MS,
    ITEM_HEIGHT,
    MAX_LIST_HEIGHT,
    MUTED_TEXT_COLOR,
    PADDING_TOP,
    SEARCH_BOX_HEIGHT,
    SELECTED_BG_COLOR,
    TEXT_COLOR,
    WINDOW_ALPHA,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
)

MONO_FONT = ("Menlo", 13)

# Upper-case twins keep the Ctrl chords working with Caps Lock on
NEXT_KEYS = ("<Down>", "<Control-n>", "<Control-N>", "<Control-j>", "<Control-J>")
PREVIOUS_KEYS = ("<Up>", "<Control-p>", "<Control-P>", "<Control-k>", "<Control-K>")
COMMIT_KEYS = ("<Return>", "<KP_Enter>")
CANCEL_KEYS = ("<Escape>",)


def click_lands_on_row(y: int, bbox: Optional[Tuple[int, int, int, int]]) -> bool:
    """True if a click at `y` is inside the row box; nearest() snaps clicks below the last row onto it."""
    return bool(bbox) and y <= bbox[1] + bbox[3]


class SwitcherOverlay(tk.Tk):
    """Undecorated search box plus result list, centered on screen."""

    def __init__(self) -> None:
        super().__init__()
        self.title("Aerospace Window Switcher")
        self._running = True

        handoff = WindowHandoff()
        start_fetch(handoff)
        self.controller = SwitcherController(
            handoff, focus_window=request_focus, close=self._on_close
        )

        self._place_window()
        self._build_ui()
        self._bind_keys()
        # Take OS focus once on open; after that only widget focus is nudged
        self.after_idle(self.entry.focus_force)
        self.after(FRAME_INTERVAL_MS, self._tick)

    def _place_window(self) -> None:
        x = max(0, (self.winfo_screenwidth() - WINDOW_WIDTH) // 2)
        y = max(0, (self.winfo_screenheight() - WINDOW_HEIGHT) // 3)
        self.geometry(f"{WINDOW_WIDTH}x{WINDOW_HEIGHT}+{x}+{y}")
        self.resizable(False, False)
        self.overrideredirect(True)
        self.attributes("-topmost", True)
        try:
            self.attributes("-alpha", WINDOW_ALPHA)
        except tk.TclError:
            # Some X servers have no compositor; an opaque overlay is fine
            pass
        self.configure(bg=BG_COLOR)

    def _build_ui(self) -> None:
        # Search box
        self.query_var = tk.StringVar(value="")
        entry_frame = tk.Frame(self, bg=BG_COLOR, height=SEARCH_BOX_HEIGHT)
        entry_frame.pack(fill="x", padx=8, pady=(PADDING_TOP, 8))
        self.entry = tk.Entry(
            entry_frame,
            textvariable=self.query_var,
            font=MONO_FONT,
            bg=ENTRY_BG_COLOR,
            fg=TEXT_COLOR,
            insertbackground=TEXT_COLOR,
            relief="flat",
            highlightthickness=1,
            highlightbackground="#3c3c3c",
            highlightcolor=SELECTED_BG_COLOR,
        )
        self.entry.pack(fill="x", ipady=8, ipadx=8)
        self.query_var.trace_add("write", self._on_query_changed)

        # Loading placeholder (shown until the controller is ready)
        self.loading_label = tk.Label(
            self,
            text="Loading windows...",
            bg=BG_COLOR,
            fg=MUTED_TEXT_COLOR,
            font=MONO_FONT,
        )
        self.loading_label.pack(fill="both", expand=True)

        # Result list
        self.list_frame = tk.Frame(self, bg=BG_COLOR)
        rows = max(1, min(MAX_LIST_HEIGHT, WINDOW_HEIGHT - SEARCH_BOX_HEIGHT) // ITEM_HEIGHT)
        self.listbox = tk.Listbox(
            self.list_frame,
            height=rows,
            font=MONO_FONT,
            bg=BG_COLOR,
            fg=TEXT_COLOR,
            selectbackground=SELECTED_BG_COLOR,
            selectforeground=TEXT_COLOR,
            activestyle="none",
            relief="flat",
            highlightthickness=0,
            borderwidth=0,
            exportselection=False,
            takefocus=0,
        )
        scrollbar = tk.Scrollbar(self.list_frame, command=self.listbox.yview)
        self.listbox.configure(yscrollcommand=scrollbar.set)
        self.listbox.pack(side="left", fill="both", expand=True)
        scrollbar.pack(side="right", fill="y")
        self.listbox.bind("<ButtonRelease-1>", self._on_row_click)

        self.protocol("WM_DELETE_WINDOW", self._on_close)

    def _bind_keys(self) -> None:
        for seq in NEXT_KEYS:
            self.entry.bind(seq, self._on_next)
        for seq in PREVIOUS_KEYS:
            self.entry.bind(seq, self._on_previous)
        for seq in COMMIT_KEYS:
            self.entry.bind(seq, self._on_commit)
        for seq in CANCEL_KEYS:
            self.bind_all(seq, self._on_cancel)

    # ---- event handlers ----

    def _on_query_changed(self, *_args: object) -> None:
        if self.controller.set_query(self.query_var.get()) and not self.controller.loading:
            self._render_list()

    def _on_next(self, _event: tk.Event) -> str:
        self.controller.select_next()
        self._render_selection()
        return "break"

    def _on_previous(self, _event: tk.Event) -> str:
        self.controller.select_previous()
        self._render_selection()
        return "break"

    def _on_commit(self, _event: tk.Event) -> str:
        self.controller.commit()
        return "break"

    def _on_cancel(self, _event: tk.Event) -> str:
        self.controller.cancel()
        return "break"

    def _on_row_click(self, event: tk.Event) -> None:
        if not self.listbox.size():
            return
        row = self.listbox.nearest(event.y)
        if click_lands_on_row(event.y, self.listbox.bbox(row)):
            self.controller.commit_row(row)

    def _on_close(self) -> None:
        if not self._running:
            return
        self._running = False
        # Let the current handler finish before tearing the widgets down
        self.after_idle(self.destroy)

    # ---- per-frame tick ----

    def _tick(self) -> None:
        if not self._running:
            return
        if self.controller.poll():
            self.loading_label.pack_forget()
            self.list_frame.pack(fill="both", expand=True, padx=8, pady=(0, 8))
            self._render_list()
        if self.focus_get() is not self.entry:
            self.entry.focus_set()
        self.after(FRAME_INTERVAL_MS, self._tick)

    # ---- rendering ----

    def _render_list(self) -> None:
        self.listbox.delete(0, tk.END)
        for window in self.controller.visible_windows():
            self.listbox.insert(tk.END, window.label)
        self._render_selection()

    def _render_selection(self) -> None:
        self.listbox.selection_clear(0, tk.END)
        selected = self.controller.selected
        if selected is None or not self.listbox.size():
            return
        self.listbox.selection_set(selected)
        self.listbox.activate(selected)
        self.listbox.see(selected)


# -----------------------------
# Main entry
# -----------------------------


def main() -> None:
    overlay = SwitcherOverlay()
    logger.debug("Overlay open")
    overlay.mainloop()
    logger.debug("Overlay closed")


if __name__ == "__main__":
    main()
