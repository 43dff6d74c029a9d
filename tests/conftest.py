from __future__ import annotations

import io
from typing import Dict, List, Tuple

import pytest
from rich.console import Console

from stencil_printer.registry import StencilRegistry
from stencil_printer.stenciller import Stenciller


class StubColorizer:
    """Colorizer double that wraps known colors in 16-color SGR codes."""

    CODES: Dict[str, int] = {"red": 31, "green": 32, "blue": 34}

    def __init__(self) -> None:
        self.calls: List[Tuple[str, str]] = []

    def colorize(self, text: str, color_name: str) -> Tuple[str, bool]:
        self.calls.append((text, color_name))
        code = self.CODES.get(color_name)
        if code is None:
            return text, False
        return f"\x1b[{code}m{text}\x1b[0m", True


@pytest.fixture(autouse=True)
def _clean_color_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep terminal detection independent of the developer's shell."""

    for name in ("NO_COLOR", "COLORTERM", "TERM", "STENCIL_PRINTER_FORCE_256_COLOR"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def stub_colorizer() -> StubColorizer:
    return StubColorizer()


@pytest.fixture
def registry() -> StencilRegistry:
    return StencilRegistry()


@pytest.fixture
def stenciller(registry: StencilRegistry, stub_colorizer: StubColorizer) -> Stenciller:
    return Stenciller(registry, stub_colorizer)


@pytest.fixture
def console_buffer() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def plain_console(console_buffer: io.StringIO) -> Console:
    """Rich console that records plain text, as when output is piped."""

    return Console(
        file=console_buffer,
        force_terminal=False,
        no_color=True,
        highlight=False,
        width=120,
    )
