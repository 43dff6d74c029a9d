"""Plain message, error, and table formatting."""

from __future__ import annotations

from typing import List, Optional, Sequence

from .datatypes import TabulateOptions
from .layout.columns import ColumnLayout
from .protocols import LayoutCalculator

ERROR_PREFIX = "Error: "


def _interpolate(text: str, args: Sequence[object]) -> str:
    if args:
        return text % tuple(args)
    return text


class Formatter:
    """Formats strings for simple and consistent console output."""

    def __init__(
        self,
        options: Optional[TabulateOptions] = None,
        *,
        layout: Optional[LayoutCalculator] = None,
    ) -> None:
        self.options = options or TabulateOptions()
        self.layout: LayoutCalculator = (
            layout if layout is not None else ColumnLayout(self.options)
        )

    def msg(self, text: object, *args: object) -> str:
        """
        Return ``text`` followed by a newline.

        ``%``-style placeholders in ``text`` are filled from ``args`` when any
        are given, in the manner of ``logging`` messages.
        """
        return f"{_interpolate(str(text), args)}\n"

    def error(self, text: object, *args: object) -> str:
        """Same as :meth:`msg` with an ``"Error: "`` prefix."""
        return f"{ERROR_PREFIX}{_interpolate(str(text), args)}\n"

    def tabulate(
        self,
        rows: Sequence[Sequence[str]],
        headers: Optional[Sequence[str]] = None,
    ) -> List[str]:
        """
        Align ``rows`` into equally spaced columns, one string per line.

        Column widths ignore ANSI color codes so colored cells line up with plain
        ones. With ``headers`` a header line and a dashed divider lead the table.
        """
        return self.layout.tabulate(rows, headers)


__all__ = ["ERROR_PREFIX", "Formatter"]
