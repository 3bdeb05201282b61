"""Interactive prompt providers.

The pipeline never talks to the terminal directly; it asks a
:class:`Prompter`. ``TyperPrompter`` is used from the CLI on a TTY and
``NonInteractivePrompter`` everywhere else.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Protocol, runtime_checkable

import typer
from rich.console import Console

from docsmith.exceptions import PromptUnavailableError

logger = logging.getLogger(__name__)


@runtime_checkable
class Prompter(Protocol):
    """Capability used by the stages to ask the user something."""

    def select(self, message: str, choices: Sequence[str]) -> str: ...

    def confirm(self, message: str, *, default: bool = False) -> bool: ...

    def text(self, message: str, *, default: str | None = None) -> str: ...


class TyperPrompter:
    """Ask questions on the terminal through ``typer.prompt``."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def select(self, message: str, choices: Sequence[str]) -> str:
        if not choices:
            msg = "select() needs at least one choice"
            raise ValueError(msg)
        self.console.print(f"[bold cyan]{message}[/bold cyan]")
        for number, choice in enumerate(choices, start=1):
            self.console.print(f"  [cyan]{number}[/cyan]) {choice}")
        while True:
            picked = typer.prompt("Choice", default=1, type=int)
            if 1 <= picked <= len(choices):
                return choices[picked - 1]
            self.console.print(f"[red]Pick a number between 1 and {len(choices)}[/red]")

    def confirm(self, message: str, *, default: bool = False) -> bool:
        return typer.confirm(message, default=default)

    def text(self, message: str, *, default: str | None = None) -> str:
        return typer.prompt(message, default=default)


class NonInteractivePrompter:
    """Answer with defaults; fail on questions that have none."""

    def select(self, message: str, choices: Sequence[str]) -> str:
        raise PromptUnavailableError(message)

    def confirm(self, message: str, *, default: bool = False) -> bool:
        logger.debug("Non-interactive: answering %r with %s", message, default)
        return default

    def text(self, message: str, *, default: str | None = None) -> str:
        if default is None:
            raise PromptUnavailableError(message)
        return default


__all__ = ["NonInteractivePrompter", "Prompter", "TyperPrompter"]
