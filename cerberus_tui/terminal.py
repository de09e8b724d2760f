"""ANSI terminal driver: drawing commands, screen sessions and input events."""

from __future__ import annotations

import contextlib
import enum
import os
import re
import sys
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, TextIO, Union

try:
    import termios
    import tty
except ImportError:  # pragma: no cover - platforms without termios
    termios = None
    tty = None

MIN_COLUMNS = 80
MIN_ROWS = 43

UP = "up"
DOWN = "down"
LEFT = "left"
RIGHT = "right"
ENTER = "enter"
ESC = "esc"
TAB = "tab"
BACKSPACE = "backspace"

_ESCAPE = "\x1b"
_CSI = "\x1b["
_ALTERNATE_SCREEN_ON = "\x1b[?1049h"
_ALTERNATE_SCREEN_OFF = "\x1b[?1049l"
_HIDE_CURSOR = "\x1b[?25l"
_SHOW_CURSOR = "\x1b[?25h"
_MOUSE_MODES = (1000, 1002, 1006)

_ARROWS = {"A": UP, "B": DOWN, "C": RIGHT, "D": LEFT}
_MOUSE_RE = re.compile(r"\x1b\[<(\d+);(\d+);(\d+)([Mm])")
_CSI_RE = re.compile(r"\x1b\[[0-9;?]*[@-~]")
_SS3_RE = re.compile(r"\x1bO[@-~]")


class Color(enum.Enum):
    """Foreground colours, as 256-colour palette indexes."""

    BLACK = 0
    RED = 9
    GREEN = 10
    YELLOW = 11
    BLUE = 12
    MAGENTA = 13
    CYAN = 14
    WHITE = 15


@dataclass(frozen=True)
class KeyEvent:
    """A key press: a single character or one of the named keys."""

    code: str


class MouseKind(enum.Enum):
    LEFT_DOWN = "left_down"
    SCROLL_UP = "scroll_up"
    SCROLL_DOWN = "scroll_down"
    OTHER = "other"


@dataclass(frozen=True)
class MouseEvent:
    """A mouse action at a zero-based screen position."""

    kind: MouseKind
    column: int
    row: int


Event = Union[KeyEvent, MouseEvent]


def _mouse_event(button: int, x: int, y: int, final: str) -> MouseEvent:
    pressed = final == "M"
    if button & 64:
        kind = MouseKind.SCROLL_DOWN if button & 1 else MouseKind.SCROLL_UP
    elif pressed and not button & 32 and button & 3 == 0:
        kind = MouseKind.LEFT_DOWN
    else:
        kind = MouseKind.OTHER
    return MouseEvent(kind, max(x - 1, 0), max(y - 1, 0))


def parse_input(data: Union[bytes, bytearray, str]) -> list[Event]:
    """Decode raw terminal input into key and mouse events."""
    text = bytes(data).decode("utf-8", errors="replace") if isinstance(data, (bytes, bytearray)) else data
    events: list[Event] = []
    pos = 0
    while pos < len(text):
        char = text[pos]
        if char == _ESCAPE:
            mouse = _MOUSE_RE.match(text, pos)
            if mouse:
                button, x, y = (int(mouse.group(i)) for i in (1, 2, 3))
                events.append(_mouse_event(button, x, y, mouse.group(4)))
                pos = mouse.end()
                continue
            sequence = _CSI_RE.match(text, pos) or _SS3_RE.match(text, pos)
            if sequence:
                seq = sequence.group()
                if len(seq) == 3 and seq[-1] in _ARROWS:
                    events.append(KeyEvent(_ARROWS[seq[-1]]))
                pos = sequence.end()
                continue
            events.append(KeyEvent(ESC))
            pos += 1
            continue
        if char in "\r\n":
            events.append(KeyEvent(ENTER))
        elif char == "\t":
            events.append(KeyEvent(TAB))
        elif char in "\x7f\x08":
            events.append(KeyEvent(BACKSPACE))
        elif char >= " ":
            events.append(KeyEvent(char))
        pos += 1
    return events


def _stdin_events() -> Iterator[Event]:
    fd = sys.stdin.fileno()
    while True:
        data = os.read(fd, 1024)
        if not data:
            return
        yield from parse_input(data)


class Terminal:
    """Writes ANSI commands to an output stream and reads input events."""

    def __init__(self, output: Optional[TextIO] = None, events: Optional[Iterable[Event]] = None):
        self._output = output if output is not None else sys.stdout
        self._reads_stdin = events is None
        self._events: Optional[Iterator[Event]] = None if events is None else iter(events)

    def _emit(self, text: str) -> None:
        self._output.write(text)
        self._output.flush()

    def move_to(self, column: int, row: int) -> None:
        self._emit(f"{_CSI}{row + 1};{column + 1}H")

    def write(self, text: str) -> None:
        self._emit(text)

    def clear(self) -> None:
        self._emit(f"{_CSI}2J")

    def set_foreground(self, color: Color) -> None:
        self._emit(f"{_CSI}38;5;{color.value}m")

    def set_bold(self) -> None:
        self._emit(f"{_CSI}1m")

    def reset_attributes(self) -> None:
        self._emit(f"{_CSI}0m")

    def set_size(self, columns: int, rows: int) -> None:
        self._emit(f"{_CSI}8;{rows};{columns}t")

    def enable_mouse(self) -> None:
        self._emit("".join(f"{_CSI}?{mode}h" for mode in _MOUSE_MODES))

    def disable_mouse(self) -> None:
        self._emit("".join(f"{_CSI}?{mode}l" for mode in reversed(_MOUSE_MODES)))

    def read_event(self) -> Event:
        """Return the next input event; raise EOFError when input is exhausted."""
        if self._events is None:
            self._events = _stdin_events()
        try:
            return next(self._events)
        except StopIteration:
            raise EOFError("no more input events") from None

    def _enter_raw_mode(self):
        if not self._reads_stdin or termios is None or not sys.stdin.isatty():
            return None
        fd = sys.stdin.fileno()
        saved = termios.tcgetattr(fd)
        tty.setraw(fd)
        return fd, saved

    @contextlib.contextmanager
    def session(self) -> Iterator["Terminal"]:
        """Enter raw mode and the alternate screen, restoring both on exit."""
        raw = self._enter_raw_mode()
        try:
            self._emit(_ALTERNATE_SCREEN_ON)
            self.enable_mouse()
            self._emit(_HIDE_CURSOR)
            yield self
        finally:
            if raw is not None:
                fd, saved = raw
                termios.tcsetattr(fd, termios.TCSADRAIN, saved)
            self._emit(_ALTERNATE_SCREEN_OFF)
            self.disable_mouse()
            self._emit(_SHOW_CURSOR)


def ensure_size(terminal: Terminal) -> None:
    """Ask the terminal to resize itself to the minimum layout size."""
    terminal.set_size(MIN_COLUMNS, MIN_ROWS)