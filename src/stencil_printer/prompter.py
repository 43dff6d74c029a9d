"""Interactive prompts backed by ``rich.prompt``."""

from __future__ import annotations

from typing import Optional, Sequence, TextIO

from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm, IntPrompt, Prompt
from rich.text import Text


class Prompter:
    """Gets input from the user on the given console."""

    def __init__(self, console: Console | None = None, *, stream: Optional[TextIO] = None) -> None:
        self.console = console or Console(highlight=False)
        self.stream = stream

    def select(self, label: str, items: Sequence[str]) -> int:
        """
        Print ``items`` as a numbered list and return the zero-based index picked.

        Items may carry ANSI color codes, such as the lines produced by
        ``Printer.stable_stencil``.

        Raises:
            ValueError: If ``items`` is empty.
        """
        if not items:
            raise ValueError("select requires at least one item")
        for number, item in enumerate(items, start=1):
            line = Text(f"{number:>3}. ")
            line.append_text(Text.from_ansi(item))
            self.console.print(line, soft_wrap=True)
        choices = [str(number) for number in range(1, len(items) + 1)]
        picked = IntPrompt.ask(
            escape(label),
            console=self.console,
            choices=choices,
            show_choices=False,
            stream=self.stream,
        )
        return picked - 1

    def confirm(self, label: str, *, default: bool = False) -> bool:
        """Ask a yes/no question."""
        return Confirm.ask(
            escape(label),
            console=self.console,
            default=default,
            stream=self.stream,
        )

    def ask(self, label: str, *, default: Optional[str] = None) -> str:
        """Ask for free-form input; ``default`` is returned on an empty answer."""
        if default is None:
            return Prompt.ask(escape(label), console=self.console, stream=self.stream)
        return Prompt.ask(
            escape(label),
            console=self.console,
            default=default,
            stream=self.stream,
        )


__all__ = ["Prompter"]
