"""Event loop of the settings page."""

from __future__ import annotations

from cerberus_tui.navigation import Page, PageKind, SettingsMenu, Transition
from cerberus_tui.settings import draw_settings
from cerberus_tui.terminal import KeyEvent, Terminal, ensure_size

_SUBMENU_KEYS = {
    "g": SettingsMenu.GENERAL,
    "a": SettingsMenu.ADVANCED,
}


def handle_settings_events(terminal: Terminal, page: Page) -> Transition:
    """Run the settings page, switching ``page.submenu`` in place."""
    if page.kind is not PageKind.SETTINGS:
        raise ValueError(f"not a settings page: {page!r}")

    while True:
        terminal.clear()
        ensure_size(terminal)
        draw_settings(terminal, page.submenu)

        event = terminal.read_event()
        if not isinstance(event, KeyEvent):
            continue
        if event.code == "q":
            return Transition.quit()
        if event.code == "h":
            return Transition.to(Page.home())
        if event.code in _SUBMENU_KEYS:
            page.submenu = _SUBMENU_KEYS[event.code]