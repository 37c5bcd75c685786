r"""
Goal: Friendly, typed CLI for the aerospace window switcher.

- Export `app` (tests import this).
- No subcommand (or `show`) opens the overlay; that's what a hotkey binding should run.
- `list` prints what the overlay would show, ranked for an optional query. Handy for scripts and debugging.
- `focus` sends the same fire-and-forget focus request the overlay sends on Enter.
"""

from __future__ import annotations

import json
from typing import Optional

import typer
from loguru import logger

from switcher.services import focus_service, window_source
from switcher.services.filter_engine import rank
from switcher.services.logs import configure_logging
from switcher.settings import MAX_FOCUS_DELAY_SECONDS

app = typer.Typer(
    help="Aerospace window switcher",
    add_completion=False,
    invoke_without_command=True,
    rich_markup_mode="rich",
)


def _open_overlay() -> None:
    # tkinter import is deferred so `list`/`focus` work on machines without Tk
    from switcher.launcher_gui import main as overlay_main

    overlay_main()


@app.callback(help="Aerospace window switcher")
def _root_callback(ctx: typer.Context) -> None:
    configure_logging()
    if ctx.invoked_subcommand is None:
        _open_overlay()


@app.command("show")
def show() -> None:
    """Open the switcher overlay."""
    _open_overlay()


@app.command("list")
def list_windows(
    query: str = typer.Option("", "--query", "-q", help="Fuzzy filter, same as typing in the overlay"),
    as_json: bool = typer.Option(False, "--json", help="Print a JSON array instead of lines"),
) -> None:
    windows = window_source.fetch_windows()
    ranked = [windows[idx] for idx in rank(windows, query)]
    if as_json:
        typer.echo(json.dumps([w.model_dump() for w in ranked], indent=2))
        return
    for window in ranked:
        typer.echo(f"{window.id} | {window.name} | {window.info}")
    if not ranked:
        logger.info("No windows matched {!r}", query)
        raise typer.Exit(1)


@app.command("focus")
def focus(
    window_id: str = typer.Argument(..., help="aerospace window id"),
    delay: Optional[float] = typer.Option(
        None, min=0.0, max=MAX_FOCUS_DELAY_SECONDS, help="Seconds to wait before focusing"
    ),
) -> None:
    if not window_id.strip():
        typer.echo("window id must not be empty")
        raise typer.Exit(2)
    focus_service.request_focus(window_id.strip(), delay=delay)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
