import io
import sys

import pytest

from cerberus_tui.app import main, run_app
from cerberus_tui.terminal import DOWN, ENTER, KeyEvent, Terminal


def _terminal(events):
    out = io.StringIO()
    return Terminal(out, events), out


def test_quit_from_home():
    terminal, out = _terminal([KeyEvent("q")])
    assert run_app(terminal) is None
    assert "CERBERUS" in out.getvalue()
    assert "Settings Page" not in out.getvalue()


def test_settings_round_trip_then_quit():
    events = [KeyEvent("s"), KeyEvent("a"), KeyEvent("h"), KeyEvent("q")]
    terminal, out = _terminal(events)
    run_app(terminal)
    text = out.getvalue()
    assert "Current submenu: General Settings" in text
    assert "Current submenu: Advanced Settings" in text
    assert text.rfind("CERBERUS") > text.rfind("Settings Page")


def test_quit_from_settings():
    terminal, out = _terminal([KeyEvent("s"), KeyEvent("q")])
    run_app(terminal)
    assert out.getvalue().split("\x1b[2J")[-1].count("Settings Page") == 1


def test_menu_entry_returns_home():
    terminal, out = _terminal([KeyEvent(DOWN), KeyEvent(ENTER), KeyEvent("q")])
    run_app(terminal)
    assert "> Web Scanner  " in out.getvalue().split("\x1b[2J")[-1]


def test_exhausted_input_propagates():
    terminal, _ = _terminal([KeyEvent("s")])
    with pytest.raises(EOFError):
        run_app(terminal)


def test_main_runs_session_and_quits(tmp_path, monkeypatch):
    source = tmp_path / "input"
    source.write_bytes(b"q")
    out = io.StringIO()
    with source.open("r") as stdin:
        monkeypatch.setattr(sys, "stdin", stdin)
        monkeypatch.setattr(sys, "stdout", out)
        assert main([]) == 0
    text = out.getvalue()
    assert "CERBERUS" in text
    assert text.startswith("\x1b[?1049h")
    assert "EOFError" not in text


def test_main_reports_error_after_session(tmp_path, monkeypatch):
    source = tmp_path / "input"
    source.write_bytes(b"")
    out = io.StringIO()
    with source.open("r") as stdin:
        monkeypatch.setattr(sys, "stdin", stdin)
        monkeypatch.setattr(sys, "stdout", out)
        assert main([]) == 0
    text = out.getvalue()
    assert "EOFError" in text
    assert text.index("EOFError") > text.index("\x1b[?1049l")