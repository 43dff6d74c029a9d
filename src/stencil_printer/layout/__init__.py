"""Terminal colors, column layout, and template interpolation helpers."""
from .columns import (
    ColumnLayout,
    column_widths,
    divider_row,
    pad_row,
    strip_ansi,
    tabulate,
    visible_length,
)
from .template import parse_template, placeholder_keys, render_template
from .terminal import ANSI_ESCAPE_RE, ANSI_RESET, AnsiColorizer

__all__ = [
    "ANSI_ESCAPE_RE",
    "ANSI_RESET",
    "AnsiColorizer",
    "ColumnLayout",
    "column_widths",
    "divider_row",
    "pad_row",
    "parse_template",
    "placeholder_keys",
    "render_template",
    "strip_ansi",
    "tabulate",
    "visible_length",
]
