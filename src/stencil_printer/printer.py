"""Print formatted and stencilled strings to a Rich console."""

from __future__ import annotations

from typing import Iterable, List, Mapping, Optional, Sequence

from rich.console import Console
from rich.text import Text

from .datatypes import PrinterConfig, TableStencil, TemplateStencil
from .formatter import Formatter
from .layout.terminal import CAPABILITY_256, AnsiColorizer
from .protocols import Colorizer
from .registry import StencilRegistry
from .stenciller import Stenciller


def build_colorizer(config: PrinterConfig) -> AnsiColorizer:
    """Create the ANSI colorizer described by ``config.color``."""
    capability = CAPABILITY_256 if config.color.force_256 else None
    return AnsiColorizer(no_color=config.color.no_color, capability=capability)


class Printer:
    """
    Writes messages, tables, and stencil output to a Rich ``Console``.

    Every printing method has an ``s``-prefixed twin (``smsg``, ``stabulate``,
    ``stable_stencil`` ...) that returns the formatted text instead of writing
    it. Strings carrying ANSI color codes are handed to the console through
    ``Text.from_ansi`` so Rich decides how colors reach the terminal.
    """

    def __init__(
        self,
        console: Console | None = None,
        *,
        config: Optional[PrinterConfig] = None,
        colorizer: Optional[Colorizer] = None,
        registry: Optional[StencilRegistry] = None,
    ) -> None:
        self.config = config or PrinterConfig()
        self.console = console or Console(
            no_color=self.config.color.no_color,
            highlight=False,
        )
        self.formatter = Formatter(self.config.tabulate)
        self.stenciller = Stenciller(
            registry,
            colorizer if colorizer is not None else build_colorizer(self.config),
            divider_char=self.config.tabulate.divider_char,
            min_width=self.config.tabulate.min_width,
        )

    @property
    def registry(self) -> StencilRegistry:
        return self.stenciller.registry

    def _write(self, text: str = "") -> None:
        """
        Write a line to the console.

        A single trailing newline is dropped since the console ends every line
        itself; an empty ``text`` emits a blank line.
        """
        if text.endswith("\n"):
            text = text[:-1]
        if text:
            self.console.print(Text.from_ansi(text), soft_wrap=True)
        else:
            self.console.print()

    # ------------------------------------------------------------------
    # Messages
    # ------------------------------------------------------------------

    def msg(self, text: object, *args: object) -> None:
        self._write(self.formatter.msg(text, *args))

    def smsg(self, text: object, *args: object) -> str:
        return self.formatter.msg(text, *args)

    def error(self, text: object, *args: object) -> None:
        self._write(self.formatter.error(text, *args))

    def serror(self, text: object, *args: object) -> str:
        return self.formatter.error(text, *args)

    def linefeed(self) -> None:
        self._write()

    # ------------------------------------------------------------------
    # Tables
    # ------------------------------------------------------------------

    def tabulate(
        self,
        rows: Sequence[Sequence[str]],
        headers: Optional[Sequence[str]] = None,
    ) -> None:
        """
        Print ``rows`` aligned into columns as per the configured tabulate options.

        Each row is written on its own line with cells padded so that elements
        appear vertically aligned, regardless of embedded color codes.
        """
        for line in self.stabulate(rows, headers):
            self._write(line)

    def stabulate(
        self,
        rows: Sequence[Sequence[str]],
        headers: Optional[Sequence[str]] = None,
    ) -> List[str]:
        return self.formatter.tabulate(rows, headers)

    # ------------------------------------------------------------------
    # Stencils
    # ------------------------------------------------------------------

    def add_tmpl_stencil(
        self,
        stencil_id: str,
        template: str,
        colors: Optional[Mapping[str, str]] = None,
    ) -> TemplateStencil:
        """Add a template stencil with the passed id, template, and colors."""
        return self.stenciller.add_template_stencil(stencil_id, template, colors)

    def add_table_stencil(
        self,
        stencil_id: str,
        headers: Optional[Iterable[str]] = None,
        column_order: Optional[Iterable[str]] = None,
        colors: Optional[Mapping[str, str]] = None,
    ) -> TableStencil:
        """Add a table stencil with the passed id, headers, column order, and colors."""
        return self.stenciller.add_table_stencil(stencil_id, headers, column_order, colors)

    def tmpl_stencil(self, stencil_id: str, data: Mapping[str, object]) -> None:
        """
        Apply the template stencil ``stencil_id`` to ``data`` and print the result.

        Data values whose key matches the stencil's color map are colorized
        before being interpolated into the template.

        Raises:
            StencilNotFoundError: If no template stencil has that id.
            TemplateError: If the stencil's template is malformed.
        """
        self._write(self.stmpl_stencil(stencil_id, data))

    def stmpl_stencil(self, stencil_id: str, data: Mapping[str, object]) -> str:
        return self.stenciller.apply_template_stencil(stencil_id, data)

    def table_stencil(self, stencil_id: str, rows: Iterable[Mapping[str, object]]) -> None:
        """
        Apply the table stencil ``stencil_id`` to ``rows``, then tabulate and print.

        Raises:
            StencilNotFoundError: If no table stencil has that id.
        """
        for line in self.stable_stencil(stencil_id, rows):
            self._write(line)

    def stable_stencil(
        self,
        stencil_id: str,
        rows: Iterable[Mapping[str, object]],
    ) -> List[str]:
        table = self.stenciller.apply_table_stencil(stencil_id, rows)
        return self.formatter.tabulate(table)


__all__ = ["Printer", "build_colorizer"]
