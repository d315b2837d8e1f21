"""Sizing of the search results table and the surrounding interface."""

from __future__ import annotations

from typing import Sequence

_DEFAULT_TABLE_HEIGHT = 20
_FALLBACK_FULL_SCREEN_HEIGHT = 30
_FULL_SCREEN_CHROME = 15
_ENTRIES_PER_ROW = 5
_COMPACT_HEIGHT = 25
_EXTRA_COMPACT_HEIGHT = 15
_GROWTH_SLACK = 5


def _display_len(value: str) -> int:
    return len(value.encode("utf-8"))


def calculate_column_widths(rows: Sequence[Sequence[str]], num_columns: int) -> list[int]:
    """The widest cell, in UTF-8 bytes, of each of ``num_columns`` columns."""
    widths = [0] * num_columns
    for row in rows:
        if len(row) > num_columns:
            raise ValueError(f"row has {len(row)} cells but only {num_columns} columns exist")
        for idx, value in enumerate(row):
            widths[idx] = max(widths[idx], _display_len(value))
    return widths


def fit_column_widths(
    rows: Sequence[Sequence[str]],
    column_names: Sequence[str],
    maximum_rows: Sequence[Sequence[str]],
    terminal_width: int,
) -> list[int]:
    """Choose a width for each column so the table fits the terminal.

    Columns start wide enough for ``rows`` and their titles, grow towards a
    little past the widest cell in ``maximum_rows`` while there is room, and
    the widest column is shrunk repeatedly while the table is too wide.
    With no rows to measure, a single blank row is assumed.
    """
    num_columns = len(column_names)
    if not rows or not rows[0]:
        rows = [[" "] * num_columns]

    widths = calculate_column_widths(rows, num_columns)
    total = (num_columns + 1) * 2
    for idx, name in enumerate(column_names):
        widths[idx] = max(widths[idx], _display_len(name))
        total += widths[idx]

    maximum_widths = calculate_column_widths(maximum_rows, num_columns)

    while total < terminal_width - num_columns:
        previous_total = total
        for idx in range(num_columns):
            if widths[idx] < maximum_widths[idx] + _GROWTH_SLACK:
                widths[idx] += 1
                total += 1
        if total == previous_total:
            break

    while total > terminal_width and num_columns:
        largest = max(range(num_columns), key=lambda idx: widths[idx])
        widths[largest] -= 1
        total -= 1

    return widths


def table_height(full_screen: bool, terminal_height: int | None) -> int:
    """Rows of the table; ``terminal_height`` is None when it is unknown."""
    if not full_screen:
        return _DEFAULT_TABLE_HEIGHT
    if terminal_height is None:
        return _FALLBACK_FULL_SCREEN_HEIGHT
    return max(terminal_height - _FULL_SCREEN_CHROME, _DEFAULT_TABLE_HEIGHT)


def num_entries_needed(full_screen: bool, terminal_height: int | None) -> int:
    """How many entries to fetch, leaving room for ones filtered out later."""
    return table_height(full_screen, terminal_height) * _ENTRIES_PER_ROW


def is_compact_height(terminal_height: int | None, force_compact: bool) -> bool:
    """Whether to drop spacing lines; an unknown height counts as tall."""
    if force_compact:
        return True
    if terminal_height is None:
        return False
    return terminal_height < _COMPACT_HEIGHT


def is_extra_compact_height(terminal_height: int | None, force_compact: bool) -> bool:
    """Whether to hide messages and help; an unknown height counts as tall."""
    if force_compact:
        return True
    if terminal_height is None:
        return False
    return terminal_height < _EXTRA_COMPACT_HEIGHT