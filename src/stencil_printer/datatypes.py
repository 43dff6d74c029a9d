"""Configuration and stencil record dataclasses."""
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Tuple


def _frozen_colors(colors: Mapping[str, str]) -> Mapping[str, str]:
    return MappingProxyType(dict(colors))


@dataclass
class TabulateOptions:
    """Spacing used when aligning rows into columns."""

    min_width: int = 0
    padding: int = 4
    pad_char: str = " "
    divider_char: str = "-"


@dataclass
class ColorConfig:
    """Terminal color behaviour for the ANSI colorizer."""

    no_color: bool = False
    force_256: bool = False


@dataclass
class PrinterConfig:
    """Top-level printer configuration loaded from TOML."""

    tabulate: TabulateOptions = field(default_factory=TabulateOptions)
    color: ColorConfig = field(default_factory=ColorConfig)


@dataclass(frozen=True)
class TemplateStencil:
    """Named template string plus the colors applied to its fields."""

    id: str
    template: str
    colors: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "colors", _frozen_colors(self.colors))


@dataclass(frozen=True)
class TableStencil:
    """Named column layout: header labels, key order, and field colors."""

    id: str
    headers: Tuple[str, ...] = ()
    column_order: Tuple[str, ...] = ()
    colors: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "headers", tuple(str(h) for h in self.headers))
        object.__setattr__(self, "column_order", tuple(self.column_order))
        object.__setattr__(self, "colors", _frozen_colors(self.colors))

    @property
    def width(self) -> int:
        """Number of columns produced for every data row."""
        return len(self.column_order)
