"""Drawing of the settings page."""

from __future__ import annotations

from cerberus_tui.navigation import SettingsMenu
from cerberus_tui.terminal import Terminal

SUBMENU_TITLES = {
    SettingsMenu.GENERAL: "General Settings",
    SettingsMenu.ADVANCED: "Advanced Settings",
}


def draw_settings(terminal: Terminal, submenu: SettingsMenu) -> None:
    """Draw the settings page with the title of the current submenu."""
    try:
        title = SUBMENU_TITLES[submenu]
    except (KeyError, TypeError):
        raise ValueError(f"unknown settings submenu: {submenu!r}") from None
    terminal.move_to(0, 0)
    terminal.write("Settings Page")
    terminal.move_to(0, 1)
    terminal.write("Press 'g' for General, 'a' for Advanced, 'h' to go to Home, 'q' to quit.")
    terminal.move_to(0, 2)
    terminal.write(f"Current submenu: {title}")