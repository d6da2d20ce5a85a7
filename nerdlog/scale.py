"""Scale computation and quadrant-block rendering for histograms."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import zip_longest

# Quadrant blocks indexed by a 4-bit id: top-left, top-right, bottom-left,
# bottom-right, from the most significant bit down.
_QBLOCKS = " ▗▖▄▝▐▞▟▘▚▌▙▀▜▛█"


@dataclass(frozen=True)
class HistogramScale:
    """Key parameters for drawing a histogram; see get_optimal_scale."""

    # Range start, possibly moved earlier by snapping; callers must use it.
    start: int
    # Range end, possibly moved later by snapping; callers must use it.
    end: int
    # Total number of data bins covered by the histogram.
    num_data_bins: int
    # How many data bins a single chart bar represents.
    data_bins_in_chart_bar: int
    # Width of one chart bar in chart dots (two dots per character).
    chart_bar_width: int


def _bins_per_bar(num_data_bins, width, snapper):
    return snapper(-(-num_data_bins // width))


def get_optimal_scale(start, end, bin_size, width, snapper):
    """Compute the scale that makes the histogram as large and detailed as possible.

    ``bin_size`` is the finest resolution of the data, ``width`` the
    available width in chart dots, and ``snapper`` takes a number of data
    bins per chart bar and returns a possibly larger, "nicer" one.

    Returns None if the histogram cannot be drawn at all.
    """
    if width <= 0:
        return None

    num_data_bins = (end - start) // bin_size
    if num_data_bins <= 0:
        return None

    bins_per_bar = _bins_per_bar(num_data_bins, width, snapper)
    divisor = bins_per_bar * bin_size

    start_remainder = start % divisor
    if start_remainder > 0:
        start -= start_remainder

    end_remainder = end % divisor
    if end_remainder > 0:
        end += divisor - end_remainder

    # The range was expanded, so everything has to be recalculated.
    if start_remainder > 0 or end_remainder > 0:
        num_data_bins = (end - start) // bin_size
        bins_per_bar = _bins_per_bar(num_data_bins, width, snapper)

    num_bars = num_data_bins // bins_per_bar
    if num_bars == 0:
        return None

    return HistogramScale(
        start=start,
        end=end,
        num_data_bins=num_data_bins,
        data_bins_in_chart_bar=bins_per_bar,
        chart_bar_width=width // num_bars,
    )


def dots_to_lines(dots):
    """Render a ``[y][x]`` grid of booleans as lines of quadrant blocks.

    Every 2x2 group of dots becomes one character; a missing trailing row
    or column counts as unset.
    """
    lines = []
    rows = list(dots)
    for top, bottom in zip_longest(rows[0::2], rows[1::2], fillvalue=()):
        chars = []
        width = max(len(top), len(bottom))
        for x in range(0, width, 2):
            quad = (
                _dot(top, x),
                _dot(top, x + 1),
                _dot(bottom, x),
                _dot(bottom, x + 1),
            )
            block_id = sum(1 << (3 - bit) for bit, on in enumerate(quad) if on)
            chars.append(_QBLOCKS[block_id])
        lines.append("".join(chars))
    return lines


def _dot(row, x):
    return x < len(row) and bool(row[x])