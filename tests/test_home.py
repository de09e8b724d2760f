import io
import re

from cerberus_tui.home import draw_home, draw_home_footer, draw_home_header
from cerberus_tui.terminal import Color, Terminal


def _screen(text):
    rows = {}
    row = col = 0
    for part in re.split(r"(\x1b\[[0-9;?]*[A-Za-z])", text):
        move = re.fullmatch(r"\x1b\[(\d+);(\d+)H", part)
        if move:
            row, col = int(move.group(1)) - 1, int(move.group(2)) - 1
            continue
        if part.startswith("\x1b"):
            continue
        line = rows.setdefault(row, [])
        for char in part:
            while len(line) <= col:
                line.append(" ")
            line[col] = char
            col += 1
    return {r: "".join(chars) for r, chars in rows.items()}


def _draw(func):
    out = io.StringIO()
    func(Terminal(out, []))
    return out.getvalue()


def test_header_ends_with_separator():
    screen = _screen(_draw(draw_home_header))
    assert screen[7].startswith("#---")
    assert screen[7].endswith("-#")
    assert set(screen[7][1:-1]) == {"-"}


def test_header_sets_white_before_separator():
    output = _draw(draw_home_header)
    white_out = io.StringIO()
    Terminal(white_out, []).set_foreground(Color.WHITE)
    assert output.index(white_out.getvalue()) < output.index("#---")


def test_footer_resets_attributes_last():
    output = _draw(draw_home_footer)
    reset_out = io.StringIO()
    Terminal(reset_out, []).reset_attributes()
    assert output.endswith(reset_out.getvalue())


def test_home_is_header_and_footer():
    combined = _screen(_draw(draw_home))
    header = _screen(_draw(draw_home_header))
    footer = _screen(_draw(draw_home_footer))
    assert combined == {**header, **footer}