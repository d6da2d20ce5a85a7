# nerdlog

Pure-Python building blocks for a terminal log viewer. The package has no
runtime dependencies. It needs Python 3.10 or later.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What's inside

### `nerdlog.blhistory`

`BLHistory` is an in-memory history that works like a browser's back and
forward list.

- `add(text)` puts a new `HistoryItem` after the current one and makes it
  current. If you had gone back in the history, every newer item is dropped.
- `prev()` and `next()` step back and forward. Each returns the new current
  `HistoryItem`, which has `text` and `time` fields. At either end they return
  `None`.

### `nerdlog.clhistory`

`CLHistory(filename=None)` is a shell-like command-line history.

- If `filename` is given, the history is loaded from that file. A missing file
  counts as an empty history. `add(text)` appends every new item to the file.
- With no filename, the history is kept only in memory.
- `prev(text)` and `next(text)` take the text currently being edited and
  return `(item, has_more)`. They skip entries equal to that text. Stepping
  past the newest entry with `next` gives back the text that was being edited
  when navigation began.
- `reset()` ends navigation. `add()` ends it too.

Each item is stored on one line:

```
:<unix nanoseconds>:<byte length of text>:<extra length>:<extra><text>\n
```

`marshal_item(item)` encodes a `HistoryItem` (fields `text` and `time_ns`) to
these bytes, always writing an extra length of 0. `decode_history(stream)`
reads every item from a binary stream and skips any extra data. Malformed
input raises `HistoryDecodeError`, a subclass of `ValueError`. The error
message says which item failed.

### `nerdlog.options`

- `Options` is a dataclass with two fields. `timezone` defaults to the local
  zone. `max_num_lines` defaults to 250.
- `SharedOptions(options)` wraps an `Options` behind a lock. It provides
  `get_timezone()`, `get_max_num_lines()`, `get_all()` (which returns a copy),
  and `call(func)`, which runs `func(options)` under the lock and returns its
  result.
- `option_meta_by_name(name)` returns an `OptionMeta` with `get`, `set` and
  `help`, or `None` for an unknown name. Aliases are resolved. The known
  options are:
  - `timezone`: accepts `UTC`, `Local` or an IANA zone name. An unknown zone
    raises `ValueError`.
  - `maxnumlines`: takes an integer of at least 2. Anything else raises
    `ValueError`.
  - `numlines`: an alias of `maxnumlines`.

All of these are listed in `ALL_OPTIONS`.

```python
from nerdlog.options import Options, SharedOptions, option_meta_by_name

shared = SharedOptions(Options())
meta = option_meta_by_name("numlines")
shared.call(lambda o: meta.set(o, "500"))
assert shared.get_max_num_lines() == 500
```

### `nerdlog.msgsize`

- `optimal_message_view_size(screen_width, extra_width, extra_height, text)`
  returns the `(width, height)` a message box needs for `text`. The width is
  the longest line plus `extra_width`, capped at `screen_width`. The height is
  `extra_height` plus the number of wrapped lines. Whitespace around the text
  is ignored when counting lines.
- The helpers `max_line_length(text)` and `num_lines(text, screen_width)` are
  also available.
- Lengths are measured in UTF-8 bytes.

### `nerdlog.textfmt`

- `clear_tview_formatting(text)` removes markup tags such as `[yellow]`,
  `[:red]` and `[-]`. `[[` produces a literal `[`. An escaped tag such as
  `[red[]` comes out as `[red]`.
- `highlight_rune(text, index, prefix, suffix)` wraps the character at `index`
  in `prefix` and `suffix`. An index out of range leaves the text unchanged.

### `nerdlog.scale`

- `get_optimal_scale(start, end, bin_size, width, snapper)` chooses how many
  data bins each chart bar holds and how wide each bar is. It picks the
  largest and most detailed histogram that fits in `width` dots.
  - `snapper` receives a number of bins per bar and may return a larger,
    rounder number.
  - The range may be widened to whole bars.
  - The result is a `HistogramScale`, or `None` if nothing can be drawn.
- `dots_to_lines(dots)` renders a `[y][x]` grid of booleans as text. Each 2×2
  group of dots becomes one quadrant block character.

### `nerdlog.histogram`

`Histogram` models a timeline histogram over an integer axis, such as Unix
seconds.

- Configure it with `set_range`, `set_bin_size`, `set_data` (a mapping from
  bin start to value), `set_snapper`, `set_x_marks` and `set_selected_func`.
  The setters return the histogram, so calls can be chained. The snapper
  defaults to the identity.
- `field_data(width, height, focused)` returns a `FieldData` for a field of
  the given size in dots, or `None` if the field is too small. The result
  holds:
  - the dot grid;
  - the scale;
  - the selection and cursor marker rows;
  - the value under the cursor;
  - the sum of the selected values.
- `handle_key(key)` moves the cursor and manages the selection. It accepts
  single characters and key names:
  - `h` / `l` and `Left` / `Right` move by one bar.
  - `b` / `w` / `e` and `PgUp` / `PgDn` jump between x-axis marks.
  - `g` / `G` and `Home` / `End` go to the start or end.
  - `v`, space and `Enter` start a selection. Pressed again, they finish it
    and pass `(start, end)` to the selected-function.
  - `q` and `Esc` cancel the selection.
  - `o` swaps the selection's ends.

  Unknown keys are ignored.
- `get_selection()` returns the selection as `(start, end)` with `end`
  exclusive, or `(0, 0)` when no selection is active. A selection start of 0
  means "no selection", so position 0 cannot be used as a selection start.

## What it does not do

This package is a library. It has no command to run, no terminal screen and no
drawing code. `Histogram` and `scale` compute what to draw but do not draw it.
It also does not connect to hosts or fetch logs, and it has no clipboard
support.

## Example

```python
from nerdlog.blhistory import BLHistory

h = BLHistory()
h.add("first")
h.add("second")
assert h.prev().text == "first"
assert h.next().text == "second"
assert h.next() is None
```