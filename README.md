# cerberus-tui

A full-screen terminal menu. It draws a banner and a footer, and between them
it lists a set of tools. You pick an entry with the keyboard or the mouse. A
second page shows settings.

## Installation

```
pip install .
```

The package has no runtime dependencies. It needs a POSIX terminal that
understands ANSI escape sequences and xterm (SGR) mouse reporting.

## Running

```
cerberus
```

On start the program does the following:

- puts the terminal into raw mode, when standard input is a terminal
- switches to the alternate screen
- turns on mouse reporting and hides the cursor

On every redraw it asks the terminal to resize itself to 80 columns by 43
rows. When you quit, it puts the terminal back the way it was. If an error
stops the program, the error is printed after the screen has been restored.

### Home page

| Input                      | Action                        |
|----------------------------|-------------------------------|
| `Up` / scroll wheel up     | move the selection up         |
| `Down` / scroll wheel down | move the selection down       |
| left mouse click on a row  | select that row               |
| `Enter`                    | choose the selected entry     |
| `s`                        | open the settings page        |
| `q`                        | quit                          |

The menu lists these entries:

- Web Scanner
- Framework Scanner
- Geo IP
- Network Tools

### Settings page

| Key | Action                     |
|-----|----------------------------|
| `g` | show the General submenu   |
| `a` | show the Advanced submenu  |
| `h` | return to the home page    |
| `q` | quit                       |

The settings page opens on the General submenu.

## What it does not do

The menu entries are names only. None of the tools is part of this package.
Choosing an entry with `Enter` brings you back to the home page. There is no
web scanner, framework scanner, Geo IP lookup or network tool behind the
menu. The settings page shows only the name of the current submenu. It holds
no settings and stores nothing.

## Using the pieces from Python

`cerberus_tui.terminal.Terminal(output, events)` writes ANSI commands to any
text stream and takes its input from any iterable of events. With no
arguments it writes to standard output and reads from standard input.
`read_event()` raises `EOFError` once the events run out.
`cerberus_tui.terminal.parse_input` turns raw terminal bytes into `KeyEvent`
and `MouseEvent` values. Named keys use the constants `UP`, `DOWN`, `LEFT`,
`RIGHT`, `ENTER`, `ESC`, `TAB` and `BACKSPACE` from the same module.

You can drive a page without a real terminal:

```python
import io

from cerberus_tui.home_events import handle_home_events
from cerberus_tui.navigation import TransitionKind
from cerberus_tui.terminal import DOWN, KeyEvent, Terminal

out = io.StringIO()
terminal = Terminal(out, [KeyEvent(DOWN), KeyEvent("q")])
transition = handle_home_events(terminal)
assert transition.kind is TransitionKind.QUIT
```

`handle_home_events(terminal)` and
`cerberus_tui.settings_events.handle_settings_events(terminal, page)` both
return a `cerberus_tui.navigation.Transition`. The transition either names the
next `Page` or says that the application should quit.
`handle_settings_events` changes `page.submenu` in place.
`cerberus_tui.app.run_app(terminal)` routes between the pages until one of
them asks to quit.

`cerberus_tui.home_events.MenuCursor` holds the selection and scroll logic of
the menu. Its methods are `move_up`, `move_down`, `click`, `visible` and
`selected`. The drawing functions are `draw_home`, `draw_home_header` and
`draw_home_footer` in `cerberus_tui.home`, `draw_menu` in
`cerberus_tui.home_events`, and `draw_settings` in `cerberus_tui.settings`.

## Tests

```
pip install .[test]
pytest
```