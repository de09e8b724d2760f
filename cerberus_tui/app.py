"""Application entry point and page router."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from cerberus_tui.home import draw_home
from cerberus_tui.home_events import handle_home_events
from cerberus_tui.navigation import Page, PageKind, TransitionKind
from cerberus_tui.settings import draw_settings
from cerberus_tui.settings_events import handle_settings_events
from cerberus_tui.terminal import Terminal


def run_app(terminal: Terminal) -> None:
    """Route between pages until one of them asks to quit."""
    page = Page.home()

    while True:
        terminal.clear()
        if page.kind is PageKind.HOME:
            transition = handle_home_events(terminal)
            redraw = draw_home
        else:
            transition = handle_settings_events(terminal, page)
            redraw = lambda term, current=page: draw_settings(term, current.submenu)  # noqa: E731

        if transition.kind is TransitionKind.TO:
            page = transition.page
        elif transition.kind is TransitionKind.QUIT:
            return
        else:
            redraw(terminal)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the interactive interface on the controlling terminal."""
    parser = argparse.ArgumentParser(prog="cerberus", description="Terminal toolbox.")
    parser.parse_args(argv)

    terminal = Terminal()
    error: Optional[BaseException] = None
    with terminal.session():
        try:
            run_app(terminal)
        except Exception as exc:
            error = exc
    if error is not None:
        print(repr(error))
    return 0