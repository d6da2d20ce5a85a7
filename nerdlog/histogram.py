"""Interactive histogram model: cursor, selection and dot-field rendering data."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional

from nerdlog.scale import get_optimal_scale


def _trunc_mod(a, b):
    """Remainder whose sign follows the dividend, like C-style integer division."""
    r = abs(a) % abs(b)
    return r if a >= 0 else -r


@dataclass
class FieldData:
    """Everything needed to draw one frame of the histogram."""

    # The chart field as [y][x] booleans, two dots per character each way.
    dots: list
    data_bins_in_chart_bar: int
    chart_bar_width: int
    # How many messages a single dot represents.
    dot_y_scale: int
    # The actual max value among the chart bars.
    max_value: int
    # The max value as per chart, never smaller than max_value.
    y_scale: int
    effective_width_dots: int
    effective_width_runes: int
    # Two rows of dots marking the selection and the cursor, cut down to
    # the selected part and starting at sel_scale_offset.
    sel_scale_dots: list = field(default_factory=list)
    sel_scale_offset: int = -1
    # Value of the bar under the cursor.
    cursor_val: int = 0
    # Sum of all the selected bars.
    selected_vals_sum: int = 0


class Histogram:
    """Histogram over an integer axis (typically Unix seconds).

    A selection start of 0 means that no selection is in progress, so the
    axis is not expected to contain 0 as a meaningful position.
    """

    def __init__(self):
        self._start = 0
        self._end = 0
        self._bin_size = 0
        self._data: dict[int, int] = {}
        self._snapper: Callable[[int], int] = lambda n: n
        self._marks: list[int] = []
        self._selected: Optional[Callable[[int, int], None]] = None
        self._cursor = 0
        self._selection_start = 0
        self._fld_data: Optional[FieldData] = None

    @property
    def start(self):
        return self._start

    @property
    def end(self):
        return self._end

    @property
    def cursor(self):
        return self._cursor

    def set_range(self, start, end):
        """Set the axis range; resets the cursor to the last bar and drops the selection."""
        self._start = start
        self._end = end
        self._cursor = self._align_cursor(end - self._bar_span(), ceiling=False)
        self._selection_start = 0
        return self

    def set_bin_size(self, bin_size):
        self._bin_size = bin_size
        return self

    def set_data(self, data):
        """Set the data: a mapping from the start of each bin to its value."""
        self._data = dict(data)
        return self

    def set_snapper(self, snapper):
        """Set the callable that snaps data bins per chart bar to nicer values."""
        self._snapper = snapper
        return self

    def set_x_marks(self, marks):
        """Set the positions of the marks on the X axis, in ascending order."""
        self._marks = list(marks)
        return self

    def set_selected_func(self, handler):
        """Set ``handler(start, end)`` called when a selection is finished."""
        self._selected = handler
        return self

    def get_selection(self):
        """Return ``(start, end)`` of the active selection, end exclusive; (0, 0) if none."""
        if self._selection_start == 0:
            return 0, 0

        sel_start, sel_end = sorted((self._selection_start, self._cursor))
        return sel_start, sel_end + self._bar_span()

    def is_selection_active(self):
        return self._selection_start != 0

    def _bins_in_bar(self):
        return 1 if self._fld_data is None else self._fld_data.data_bins_in_chart_bar

    def _bar_span(self):
        return self._bin_size * self._bins_in_bar()

    def _align_cursor(self, cursor, ceiling):
        divisor = self._bar_span()
        offset = cursor - self._start
        remainder = _trunc_mod(offset, divisor)
        offset -= remainder
        if ceiling and remainder > 0:
            offset += divisor
        return offset + self._start

    def field_data(self, width, height, focused):
        """Compute the dot field of the given size in dots, or None if it's too small.

        The range may get widened to snap to whole chart bars, and the cursor
        is re-aligned to the resulting bars.
        """
        if height <= 0:
            return None

        scale = get_optimal_scale(
            self._start, self._end, self._bin_size, width, self._snapper
        )
        if scale is None:
            return None

        fld = self._gen_field_data(scale, width, height, focused)
        self._fld_data = fld
        self._cursor = self._align_cursor(self._cursor, ceiling=False)
        return fld

    def _gen_field_data(self, scale, width, height, focused):
        self._start = scale.start
        self._end = scale.end
        num_data_bins = scale.num_data_bins
        bins_in_bar = scale.data_bins_in_chart_bar
        bar_width = scale.chart_bar_width
        bin_size = self._bin_size

        def bin_positions(idx):
            return [self._start + (idx + i) * bin_size for i in range(bins_in_bar)]

        sel_start, sel_end = self.get_selection()
        if sel_start == 0 or sel_end == 0:
            sel_start = self._cursor
            sel_end = self._cursor + bins_in_bar * bin_size

        bars = []
        for x_data in range(0, num_data_bins, bins_in_bar):
            positions = bin_positions(x_data)
            bars.append((
                sum(self._data.get(p, 0) for p in positions),
                any(sel_start <= p < sel_end for p in positions),
                self._cursor in positions,
            ))

        max_value = max((val for val, _, _ in bars), default=0)
        dot_y_scale = -(-max_value // height)

        dots = [[False] * width for _ in range(height)]
        sel_scale = [[False] * width for _ in range(2)]

        sel_offset_start = -1
        sel_offset_end = -1
        offset_last = -1
        cursor_val = 0
        selected_vals_sum = 0

        for bar_idx, (val, sel, crs) in enumerate(bars):
            x_chart = bar_idx * bar_width
            columns = [x for x in range(x_chart, x_chart + bar_width) if x < width]

            if crs:
                cursor_val = val
            if sel:
                selected_vals_sum += val

            invert = focused and sel
            for y in range(height):
                on = val > y * dot_y_scale
                # Once a dot is off, the rest of the column is off too,
                # unless the column gets inverted.
                if not on and not invert:
                    break
                if invert:
                    on = not on
                if on:
                    for x in columns:
                        dots[height - y - 1][x] = True

            for x in columns:
                offset_last = x + (x & 1)

                if sel:
                    if sel_offset_start == -1:
                        sel_offset_start = x - (x & 1)
                    sel_scale[0][x] = True
                elif sel_offset_start != -1 and sel_offset_end == -1:
                    sel_offset_end = offset_last

                if crs:
                    sel_scale[1][x] = True

        if sel_offset_end == -1:
            sel_offset_end = offset_last

        if sel_offset_start == -1:
            sel_scale = [[], []]
        else:
            sel_scale = [
                (row[:sel_offset_end] if sel_offset_end != -1 else row)[sel_offset_start:]
                for row in sel_scale
            ]

        effective_width_dots = num_data_bins // bins_in_bar * bar_width
        effective_width_runes = -(-effective_width_dots // 2)

        return FieldData(
            dots=dots,
            data_bins_in_chart_bar=bins_in_bar,
            chart_bar_width=bar_width,
            dot_y_scale=dot_y_scale,
            max_value=max_value,
            y_scale=dot_y_scale * height,
            effective_width_dots=effective_width_dots,
            effective_width_runes=effective_width_runes,
            sel_scale_dots=sel_scale,
            sel_scale_offset=sel_offset_start,
            cursor_val=cursor_val,
            selected_vals_sum=selected_vals_sum,
        )

    def handle_key(self, key):
        """Handle a key press.

        ``key`` is either a single character, or a name such as ``"Left"``,
        ``"Ctrl+Left"``, ``"Right"``, ``"Ctrl+Right"``, ``"PgUp"``, ``"PgDn"``,
        ``"Home"``, ``"End"``, ``"Ctrl+A"``, ``"Ctrl+E"``, ``"Enter"``,
        ``"Esc"``, ``"Alt+b"`` or ``"Alt+f"``. Unknown keys are ignored.
        """
        max_cursor = self._align_cursor(self._end - self._bar_span(), ceiling=True)

        def move_left():
            self._cursor = max(self._cursor - self._bar_span(), self._start)

        def move_right():
            self._cursor = min(self._cursor + self._bar_span(), max_cursor)

        def move_left_long():
            target = self._start
            for mark in self._marks:
                if mark >= self._cursor:
                    break
                target = mark
            self._cursor = self._align_cursor(target, ceiling=False)

        def move_right_long():
            # The cursor may enclose a mark, so step off it first.
            move_right()
            for mark in self._marks:
                if mark > max_cursor:
                    break
                if mark >= self._cursor:
                    self._cursor = self._align_cursor(mark, ceiling=False)
                    return
            self._cursor = max_cursor

        def move_beginning():
            self._cursor = self._start

        def move_end():
            self._cursor = max_cursor

        def selection_end():
            self._selection_start = 0

        def selection_apply_and_toggle():
            if self._selection_start != 0:
                if self._selected is not None:
                    self._selected(*self.get_selection())
                selection_end()
            else:
                self._selection_start = self._cursor

        def swap_ends():
            if self._selection_start > 0:
                self._cursor, self._selection_start = self._selection_start, self._cursor

        actions = {
            "h": move_left,
            "Left": move_left,
            "l": move_right,
            "Right": move_right,
            "b": move_left_long,
            "Alt+b": move_left_long,
            "Ctrl+Left": move_left_long,
            "PgUp": move_left_long,
            "w": move_right_long,
            "e": move_right_long,
            "Alt+f": move_right_long,
            "Ctrl+Right": move_right_long,
            "PgDn": move_right_long,
            "g": move_beginning,
            "^": move_beginning,
            "Home": move_beginning,
            "Ctrl+A": move_beginning,
            "G": move_end,
            "$": move_end,
            "End": move_end,
            "Ctrl+E": move_end,
            "v": selection_apply_and_toggle,
            " ": selection_apply_and_toggle,
            "Enter": selection_apply_and_toggle,
            "q": selection_end,
            "Esc": selection_end,
            "o": swap_ends,
        }

        action = actions.get(key)
        if action is not None:
            action()