"""Column width calculation and row padding that ignore ANSI escape sequences."""
from __future__ import annotations

from typing import List, Optional, Sequence

from ..datatypes import TabulateOptions
from .terminal import ANSI_ESCAPE_RE


def strip_ansi(text: str) -> str:
    """Return ``text`` with every ANSI escape sequence removed."""
    return ANSI_ESCAPE_RE.sub("", text)


def visible_length(text: str) -> int:
    """
    Compute the visible character length of a string excluding ANSI escape sequences.

    Returns:
        The number of printable characters in `text` after removing ANSI escape sequences.
    """
    return len(strip_ansi(text))


def column_widths(rows: Sequence[Sequence[str]], min_width: int = 0) -> List[int]:
    """
    Return the widest visible cell per column index across ``rows``.

    Rows may be jagged: a short row simply does not contribute to the columns
    it lacks. Every column is at least ``min_width`` wide.
    """
    widths: List[int] = []
    for row in rows:
        for col, cell in enumerate(row):
            length = visible_length(cell)
            if col >= len(widths):
                widths.append(max(min_width, length))
            elif length > widths[col]:
                widths[col] = length
    return widths


def pad_row(
    row: Sequence[str],
    widths: Sequence[int],
    padding_char: str = " ",
    padding_count: int = 0,
) -> List[str]:
    """
    Right-pad every cell except the last so the columns line up.

    Each padded cell gains ``(widths[col] - visible_length(cell)) + padding_count``
    copies of ``padding_char``. Cells wider than their column only receive the
    padding. Embedded color codes are kept intact.
    """
    padded: List[str] = []
    last = len(row) - 1
    for col, cell in enumerate(row):
        if col == last:
            padded.append(cell)
            continue
        width = widths[col] if col < len(widths) else 0
        diff = max(0, width - visible_length(cell))
        padded.append(cell + padding_char * (diff + padding_count))
    return padded


def divider_row(widths: Sequence[int], div_char: str = "-", min_width: int = 0) -> List[str]:
    """Return one run of ``div_char`` per column, sized to that column's width."""
    return [div_char * max(width, min_width) for width in widths]


def tabulate(
    rows: Sequence[Sequence[str]],
    headers: Optional[Sequence[str]] = None,
    options: Optional[TabulateOptions] = None,
) -> List[str]:
    """
    Align ``rows`` into columns and return one joined string per line.

    When ``headers`` is non-empty a header line and a divider line are placed
    above the data. Trailing whitespace is never added after the last cell.
    """
    opts = options or TabulateOptions()
    body = [list(row) for row in rows]
    if headers:
        widths = column_widths([list(headers), *body], opts.min_width)
        body = [list(headers), divider_row(widths, opts.divider_char, opts.min_width), *body]
    else:
        widths = column_widths(body, opts.min_width)
    return [
        "".join(pad_row(row, widths, opts.pad_char, opts.padding))
        for row in body
    ]


class ColumnLayout:
    """Column layout calculator bound to a set of ``TabulateOptions``."""

    def __init__(self, options: Optional[TabulateOptions] = None) -> None:
        self.options = options or TabulateOptions()

    def column_widths(self, rows: Sequence[Sequence[str]]) -> List[int]:
        return column_widths(rows, self.options.min_width)

    def divider_row(self, widths: Sequence[int]) -> List[str]:
        return divider_row(widths, self.options.divider_char, self.options.min_width)

    def pad_row(self, row: Sequence[str], widths: Sequence[int]) -> List[str]:
        return pad_row(row, widths, self.options.pad_char, self.options.padding)

    def tabulate(
        self,
        rows: Sequence[Sequence[str]],
        headers: Optional[Sequence[str]] = None,
    ) -> List[str]:
        return tabulate(rows, headers, self.options)


__all__ = [
    "ColumnLayout",
    "column_widths",
    "divider_row",
    "pad_row",
    "strip_ansi",
    "tabulate",
    "visible_length",
]
