"""Apply registered stencils to data maps."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Mapping, Optional, Set

from .datatypes import TableStencil, TemplateStencil
from .errors import TemplateError
from .layout import columns
from .layout.template import render_template
from .layout.terminal import AnsiColorizer
from .protocols import Colorizer
from .registry import StencilRegistry

logger = logging.getLogger(__name__)


class Stenciller:
    """
    Colorize and lay out data maps according to registered stencils.

    A template stencil colors any data value whose key appears in its color map
    and interpolates the result into its template. A table stencil colors each
    row the same way, orders the values by its column order, and prepends a
    header row plus divider when headers are defined.
    """

    def __init__(
        self,
        registry: Optional[StencilRegistry] = None,
        colorizer: Optional[Colorizer] = None,
        *,
        divider_char: str = "-",
        min_width: int = 0,
    ) -> None:
        self.registry = registry if registry is not None else StencilRegistry()
        self.colorizer: Colorizer = colorizer if colorizer is not None else AnsiColorizer()
        self.divider_char = divider_char
        self.min_width = min_width
        self._unknown_colors: Set[str] = set()

    # ------------------------------------------------------------------
    # Registration pass-throughs
    # ------------------------------------------------------------------

    def add_template_stencil(
        self,
        stencil_id: str,
        template: str,
        colors: Optional[Mapping[str, str]] = None,
    ) -> TemplateStencil:
        return self.registry.add_template_stencil(stencil_id, template, colors)

    def add_table_stencil(
        self,
        stencil_id: str,
        headers: Optional[Iterable[str]] = None,
        column_order: Optional[Iterable[str]] = None,
        colors: Optional[Mapping[str, str]] = None,
    ) -> TableStencil:
        return self.registry.add_table_stencil(stencil_id, headers, column_order, colors)

    def find_template_stencil(self, stencil_id: str) -> TemplateStencil:
        return self.registry.find_template_stencil(stencil_id)

    def find_table_stencil(self, stencil_id: str) -> TableStencil:
        return self.registry.find_table_stencil(stencil_id)

    # ------------------------------------------------------------------
    # Application
    # ------------------------------------------------------------------

    def color_row(self, colors: Mapping[str, str], data: Mapping[str, object]) -> Dict[str, str]:
        """
        Return a copy of ``data`` with the values named in ``colors`` colorized.

        Values are converted to ``str``. Keys without a color, or whose color the
        colorizer does not know, keep their original text. Unknown color names
        are logged once each.
        """
        colored: Dict[str, str] = {}
        for key, value in data.items():
            text = "" if value is None else str(value)
            color_name = colors.get(key)
            if color_name:
                colored_text, ok = self.colorizer.colorize(text, color_name)
                if ok:
                    text = colored_text
                elif color_name not in self._unknown_colors:
                    self._unknown_colors.add(color_name)
                    logger.info("Unknown color %r for field %r; using plain value", color_name, key)
            colored[key] = text
        return colored

    def apply_template_stencil(self, stencil_id: str, data: Mapping[str, object]) -> str:
        """
        Render the template stencil ``stencil_id`` with ``data``.

        Raises:
            StencilNotFoundError: If no template stencil has that id.
            TemplateError: If the stencil's template is malformed.
        """
        stencil = self.registry.find_template_stencil(stencil_id)
        colored = self.color_row(stencil.colors, data)
        try:
            return render_template(stencil.template, colored)
        except TemplateError as exc:
            raise TemplateError(
                f"template stencil {stencil_id!r}: {exc.reason}", stencil_id=stencil_id
            ) from exc

    def positional_row(self, stencil: TableStencil, colored: Mapping[str, str]) -> List[str]:
        """Order ``colored`` values by the stencil's column order; absent keys give ""."""
        return [colored.get(key, "") for key in stencil.column_order]

    def apply_table_stencil(
        self,
        stencil_id: str,
        rows: Iterable[Mapping[str, object]],
    ) -> List[List[str]]:
        """
        Build the rows of the table stencil ``stencil_id`` from ``rows``.

        Each data map is colorized and reordered into one cell per column-order
        key; keys outside the column order are dropped. With headers defined the
        result starts with the header row, padded with empty cells up to the
        column order length, and a divider row whose cells match the visible
        width of each column (never narrower than ``min_width``).

        Raises:
            StencilNotFoundError: If no table stencil has that id.
        """
        stencil = self.registry.find_table_stencil(stencil_id)
        body = [
            self.positional_row(stencil, self.color_row(stencil.colors, row))
            for row in rows
        ]
        logger.debug("Applied table stencil %r to %d rows", stencil_id, len(body))
        if not stencil.headers:
            return body
        headers = list(stencil.headers)
        headers.extend([""] * (len(stencil.column_order) - len(headers)))
        widths = columns.column_widths([headers, *body], self.min_width)
        divider = columns.divider_row(widths, self.divider_char, self.min_width)
        return [headers, divider, *body]
