"""Capability interfaces consumed by the stencil engine."""

from __future__ import annotations

from typing import List, Optional, Protocol, Sequence, Tuple


class Colorizer(Protocol):
    """Maps a text value and a color name onto a colorized string."""

    def colorize(self, text: str, color_name: str) -> Tuple[str, bool]:
        """Return ``(colored_text, ok)``; ``ok`` is False when the color is unknown."""
        ...


class LayoutCalculator(Protocol):
    """Column width and row synthesis used by tabulation."""

    def column_widths(self, rows: Sequence[Sequence[str]]) -> List[int]: ...

    def divider_row(self, widths: Sequence[int]) -> List[str]: ...

    def pad_row(self, row: Sequence[str], widths: Sequence[int]) -> List[str]: ...

    def tabulate(
        self,
        rows: Sequence[Sequence[str]],
        headers: Optional[Sequence[str]] = None,
    ) -> List[str]: ...
