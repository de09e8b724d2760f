"""Event loop of the home page: a scrollable tool menu."""

from __future__ import annotations

from typing import Sequence

from cerberus_tui.home import HOME_MENU, draw_home_footer, draw_home_header
from cerberus_tui.navigation import Page, SettingsMenu, Transition
from cerberus_tui.terminal import (
    DOWN,
    ENTER,
    UP,
    Color,
    KeyEvent,
    MouseEvent,
    MouseKind,
    Terminal,
    ensure_size,
)

VISIBLE_ROWS = 13
MENU_OFFSET = 12


class MenuCursor:
    """Selection and scroll position within a list of menu entries."""

    def __init__(self, items: Sequence[str], visible_rows: int = VISIBLE_ROWS):
        if not items:
            raise ValueError("a menu needs at least one entry")
        if visible_rows < 1:
            raise ValueError("a menu needs at least one visible row")
        self.items = tuple(items)
        self.visible_rows = visible_rows
        self.start_index = 0
        self.active_index = 0

    def move_up(self) -> None:
        if self.active_index > 0:
            self.active_index -= 1
        elif self.start_index > 0:
            self.start_index -= 1

    def move_down(self) -> None:
        if self.active_index < self.visible_rows - 1 and self.active_index < len(self.items) - 1:
            self.active_index += 1
        elif self.start_index + self.visible_rows < len(self.items):
            self.start_index += 1

    def click(self, row: int, offset: int) -> None:
        """Select the entry drawn on a screen row, if the row holds one."""
        if offset <= row < offset + self.visible_rows:
            relative_row = row - offset
            if relative_row < len(self.items):
                self.active_index = relative_row

    def visible(self) -> list[tuple[int, str, bool]]:
        """Return (row, entry, is_active) for every entry shown on screen."""
        window = self.items[self.start_index:self.start_index + self.visible_rows]
        return [(row, line, row == self.active_index) for row, line in enumerate(window)]

    def selected(self) -> str:
        return self.items[self.active_index]


def draw_menu(terminal: Terminal, cursor: MenuCursor, offset: int = MENU_OFFSET) -> None:
    """Draw the visible menu entries starting at screen row ``offset``."""
    for row, line, active in cursor.visible():
        terminal.move_to(0, row + offset)
        if active:
            terminal.set_bold()
            terminal.set_foreground(Color.CYAN)
            terminal.write(f"> {line}  ")
            terminal.reset_attributes()
            terminal.set_foreground(Color.WHITE)
        else:
            terminal.write(f"  {line}\n")


def _page_for(entry: str) -> Page:
    # Every tool currently leads back to the home page.
    return Page.home()


def handle_home_events(terminal: Terminal) -> Transition:
    """Run the home page until an event leads elsewhere."""
    terminal.enable_mouse()
    cursor = MenuCursor(HOME_MENU, VISIBLE_ROWS)

    while True:
        terminal.clear()
        ensure_size(terminal)
        draw_home_header(terminal)
        draw_menu(terminal, cursor, MENU_OFFSET)
        draw_home_footer(terminal)

        event = terminal.read_event()
        if isinstance(event, KeyEvent):
            if event.code == "q":
                terminal.disable_mouse()
                return Transition.quit()
            if event.code == "s":
                terminal.disable_mouse()
                return Transition.to(Page.settings(SettingsMenu.GENERAL))
            if event.code == UP:
                cursor.move_up()
            elif event.code == DOWN:
                cursor.move_down()
            elif event.code == ENTER:
                terminal.disable_mouse()
                return Transition.to(_page_for(cursor.selected()))
        elif isinstance(event, MouseEvent):
            if event.kind is MouseKind.LEFT_DOWN:
                cursor.click(event.row, MENU_OFFSET)
            elif event.kind is MouseKind.SCROLL_UP:
                cursor.move_up()
            elif event.kind is MouseKind.SCROLL_DOWN:
                cursor.move_down()