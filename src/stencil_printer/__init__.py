"""Colorized, aligned console output built from reusable stencils."""

from __future__ import annotations

import threading
from typing import Iterable, List, Mapping, Optional, Sequence

from .config_loader import load_config
from .datatypes import ColorConfig, PrinterConfig, TableStencil, TabulateOptions, TemplateStencil
from .errors import (
    ConfigError,
    DuplicateIDError,
    EmptyIDError,
    StencilError,
    StencilErrorKind,
    StencilNotFoundError,
    TemplateError,
)
from .formatter import Formatter
from .layout.columns import ColumnLayout
from .layout.terminal import AnsiColorizer
from .printer import Printer
from .prompter import Prompter
from .protocols import Colorizer, LayoutCalculator
from .registry import StencilRegistry
from .stenciller import Stenciller

_default_lock = threading.Lock()
_default_printer: Optional[Printer] = None


def default_printer() -> Printer:
    """Return the process-wide printer, creating it on first use."""
    global _default_printer
    with _default_lock:
        if _default_printer is None:
            _default_printer = Printer()
        return _default_printer


def set_default_printer(printer: Optional[Printer]) -> None:
    """Replace the process-wide printer; ``None`` resets it to a fresh one on next use."""
    global _default_printer
    with _default_lock:
        _default_printer = printer


def msg(text: object, *args: object) -> None:
    default_printer().msg(text, *args)


def error(text: object, *args: object) -> None:
    default_printer().error(text, *args)


def linefeed() -> None:
    default_printer().linefeed()


def tabulate(rows: Sequence[Sequence[str]], headers: Optional[Sequence[str]] = None) -> None:
    default_printer().tabulate(rows, headers)


def add_tmpl_stencil(
    stencil_id: str,
    template: str,
    colors: Optional[Mapping[str, str]] = None,
) -> TemplateStencil:
    return default_printer().add_tmpl_stencil(stencil_id, template, colors)


def add_table_stencil(
    stencil_id: str,
    headers: Optional[Iterable[str]] = None,
    column_order: Optional[Iterable[str]] = None,
    colors: Optional[Mapping[str, str]] = None,
) -> TableStencil:
    return default_printer().add_table_stencil(stencil_id, headers, column_order, colors)


def tmpl_stencil(stencil_id: str, data: Mapping[str, object]) -> None:
    default_printer().tmpl_stencil(stencil_id, data)


def stmpl_stencil(stencil_id: str, data: Mapping[str, object]) -> str:
    return default_printer().stmpl_stencil(stencil_id, data)


def table_stencil(stencil_id: str, rows: Iterable[Mapping[str, object]]) -> None:
    default_printer().table_stencil(stencil_id, rows)


def stable_stencil(stencil_id: str, rows: Iterable[Mapping[str, object]]) -> List[str]:
    return default_printer().stable_stencil(stencil_id, rows)


__all__ = (
    "AnsiColorizer",
    "ColorConfig",
    "Colorizer",
    "ColumnLayout",
    "ConfigError",
    "DuplicateIDError",
    "EmptyIDError",
    "Formatter",
    "LayoutCalculator",
    "Printer",
    "PrinterConfig",
    "Prompter",
    "StencilError",
    "StencilErrorKind",
    "StencilNotFoundError",
    "StencilRegistry",
    "Stenciller",
    "TableStencil",
    "TabulateOptions",
    "TemplateError",
    "TemplateStencil",
    "add_table_stencil",
    "add_tmpl_stencil",
    "default_printer",
    "error",
    "linefeed",
    "load_config",
    "msg",
    "set_default_printer",
    "stable_stencil",
    "stmpl_stencil",
    "table_stencil",
    "tabulate",
    "tmpl_stencil",
)
