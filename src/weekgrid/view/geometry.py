# SPDX-License-Identifier: MIT

from weekgrid.time import duration_in_hours

HOURS_IN_DAY = 24


def top_percent(start_in_hours: float) -> float:
    """Vertical offset of an event within its day, in percent."""
    return start_in_hours * 100 / HOURS_IN_DAY


def height_percent(duration: int) -> float:
    """Height of an event lasting `duration` milliseconds, in percent of a day."""
    return duration_in_hours(duration) * 100 / HOURS_IN_DAY


def horizontal_percent(
    bin: int, width: int, number_of_bins: int
) -> tuple[float, float]:
    """
    Left and right insets of an event within its day, in percent.

    Args:
        bin: The event's column
        width: Number of columns the event spans
        number_of_bins: Total number of columns in the event's day

    Returns:
        Tuple of (left, right)
    """
    bin_width = 100 / number_of_bins
    left = bin * bin_width
    right = 100 - left - width * bin_width
    return left, right


def column_span(
    bin: int, width: int, number_of_bins: int, available_width: int
) -> tuple[int, int]:
    """
    Character offset and length of an event in a day `available_width` wide.

    Boundaries are computed per column so that neighbouring events never
    share a character and the columns of a day fill the whole width.
    """
    start = bin * available_width // number_of_bins
    end = (bin + width) * available_width // number_of_bins
    return start, end - start
