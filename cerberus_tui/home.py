"""Drawing of the home page frame."""

from __future__ import annotations

from cerberus_tui.terminal import Color, Terminal

HOME_MENU = (
    "Web Scanner",
    "Framework Scanner",
    "Geo IP",
    "Network Tools",
)

_SEPARATOR = "#------------------------------------------------------------------------------#"

_BANNER = (
    "       .  :  :  :   :  :  :: .:   @@   ::   @@   .:  :  :  .   :  .  :   .     ",
    "                                 @@@@      @@@@                                ",
    "                                @@@ @@    @@@@@@                               ",
    "                                @@@ @@@@@@@@ @@@                               ",
    "     :  .   :  :  .      .  .   @@  CERBERUS  @@   .  :      .  .  .   .  .    ",
    "       .  :  :  :.  :  :  :: .: @@@@@@@@@@@@@@@@  :  :  :  .   .  :  :   .     ",
)

_FOOTER = (
    _SEPARATOR,
    "#    [q] Quit [s] Settings || use your mouse, or arrow to select the tools     #",
    _SEPARATOR,
)


def draw_home(terminal: Terminal) -> None:
    """Draw the banner at the top and the key help at the bottom."""
    draw_home_header(terminal)
    draw_home_footer(terminal)


def draw_home_header(terminal: Terminal) -> None:
    for row, line in enumerate(_BANNER, start=1):
        terminal.move_to(0, row)
        terminal.write(line)
    terminal.set_foreground(Color.WHITE)
    terminal.move_to(0, len(_BANNER) + 1)
    terminal.write(_SEPARATOR)


def draw_home_footer(terminal: Terminal) -> None:
    for row, line in enumerate(_FOOTER, start=40):
        terminal.move_to(0, row)
        terminal.write(line)
    terminal.reset_attributes()