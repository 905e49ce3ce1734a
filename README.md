# kwimy

Keyboard-driven terminal screens for a guided system installer.

kwimy draws the screens an installer walks a user through: choosing a
disk, a keyboard layout and a timezone, typing a hostname or a password,
picking an NVIDIA driver, confirming a step, and reviewing the choices
before installation starts. Most screens show a summary panel on the right
that marks which steps are done (`[OK]` with the chosen value), which one
is current and which are still pending.

Drawing is built on a small widget layer, `kwimy.widgets`, that renders
paragraphs, bordered blocks, lists and gauges into an in-memory `Frame`.
Screens can therefore be driven and inspected without a real terminal.
`kwimy.terminal.Terminal` puts frames on screen and reads keys through
`blessed`.

## Screens

| Module                | Screen class            | Entry point                                      | Returns |
|-----------------------|-------------------------|--------------------------------------------------|---------|
| `kwimy.disk`          | `DiskScreen`            | `run_disk_selector`                              | `SelectionAction` with the disk index |
| `kwimy.search_select` | `SearchSelectScreen`    | `run_keymap_selector`, `run_timezone_selector`   | `SelectionAction` with the item index |
| `kwimy.text_input`    | `TextInputScreen`       | `run_text_input`                                 | `SelectionAction` with the typed text |
| `kwimy.selectors`     | `NvidiaScreen`          | `run_nvidia_selector`                            | `SelectionAction` with an `NvidiaVariant`, or back / skip / quit |
| `kwimy.confirm`       | `ConfirmScreen`         | `run_confirm_selector`                           | `ConfirmAction` |
| `kwimy.review`        | `ReviewScreen`          | `run_review`                                     | `ReviewAction` |
| `kwimy.network`       | `NetworkRequiredScreen` | `run_network_required`                           | `NetworkAction` |

`SelectionAction` (in `kwimy.model`) has a `kind` from `ActionKind`
(`SUBMIT`, `BACK`, `SKIP`, `QUIT`) and a `value` that only a submit
carries. `run_disk_selector`, `run_keymap_selector` and
`run_timezone_selector` return a quit action at once when given an empty
list.

Two helpers draw a screen once without waiting for keys:
`render_timezone_loading` (the "Loading timezone" screen) and
`render_text_input` (the text input screen without its cursor).

## Keys

- Up / Down move the cursor, Enter selects.
- Esc goes back one step.
- Ctrl+Q quits.
- On the keymap and timezone lists, typing printable ASCII filters the
  list, ignoring ASCII case; Backspace removes a character; `/` or Ctrl+U
  clear the search; PgUp / PgDn move by 15; Home / End jump to the ends.
  The submitted index refers to the full, unfiltered list.
- On the text input screen, Backspace deletes the last character and
  Ctrl+U clears the input. A masked input shows one `*` per byte.
- On the confirmation screen `1` and `2` answer Yes and No directly.
- On the NVIDIA screen `S` skips; on the review screen `S` returns
  `ReviewAction.EDIT` to start over.
- On the network screen `R` retries.

## Using a screen

```python
from kwimy.model import InstallSummary
from kwimy.search_select import run_timezone_selector
from kwimy.terminal import Terminal

zones = ["Europe/Berlin", "Europe/Paris", "Asia/Tokyo"]
summary = InstallSummary(current_index=4)

with Terminal() as terminal:
    action = run_timezone_selector(terminal, zones, 0, summary)

print(action.kind, action.value)
```

`run_disk_selector` takes strings, or objects with a `label` attribute or
a `label()` method.

## Driving a screen without a terminal

Every screen has `handle_key(key)`, which returns an action once the user
has decided and `None` otherwise, and `draw(frame)`:

```python
from kwimy.search_select import SearchSelectScreen
from kwimy.terminal import KeyCode, KeyEvent
from kwimy.widgets import Frame

screen = SearchSelectScreen("Select timezone", "Timezones",
                            ["Europe/Berlin", "Europe/Paris", "Asia/Tokyo"])
for ch in "tok":
    screen.handle_key(KeyEvent(KeyCode.CHAR, ch))
action = screen.handle_key(KeyEvent(KeyCode.ENTER))   # submits index 2

frame = Frame(120, 40)
screen.draw(frame)
print(frame.row_text(0))
```

`kwimy.terminal.run_screen(terminal, screen)` is the loop the `run_*`
functions use: it draws the screen, polls for a key every 100 ms and
stops at the first action. A screen with a `tick(now)` method (the text
input, for its blinking cursor) is ticked on every round.

## Helpers

`kwimy.common` holds the pieces the screens share:

```python
from kwimy.common import filter_items

filter_items(["Europe/Paris", "Asia/Tokyo"], "PAR")   # [0]
filter_items(["Europe/Paris", "Asia/Tokyo"], "")      # [0, 1]
```

`split_main_and_summary` divides an area 74/26 between the main content
and the summary panel, `aligned_summary_area` lines the panel up with a
widget in the main column, and `summary_lines` builds the panel's lines
from an `InstallSummary`.

## What it does not do

kwimy only draws screens and reports the user's choices. It does not
partition disks, install packages, configure the network or detect
hardware and timezones itself. It has no screen for choosing
applications, for scanning and joining Wi-Fi networks, or for showing
installation progress, and it installs no command: the calling program
decides which screen to show and what to do with each action.

## Tests

The test suite uses pytest and runs without a terminal; install the
`test` extra to get it.