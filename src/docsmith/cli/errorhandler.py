"""CLI error handling utilities."""

from collections.abc import Generator
from contextlib import contextmanager

import typer
from rich.console import Console

from docsmith.config.exceptions import ConfigError
from docsmith.exceptions import (
    BuildError,
    CleanError,
    MissingIndexError,
    MissingSourceError,
    NoTemplateError,
    PromptUnavailableError,
    PublishError,
    ScaffoldError,
)

console = Console(stderr=True)

_HEADLINES: tuple[tuple[type[Exception], str], ...] = (
    (MissingSourceError, "📁 Missing Source Folder"),
    (NoTemplateError, "🎨 No Site Template"),
    (MissingIndexError, "📄 Missing Index"),
    (ScaffoldError, "🛠️ Scaffolding Failed"),
    (CleanError, "🧹 Clean Failed"),
    (BuildError, "🏗️ Build Failed"),
    (PublishError, "🚀 Publish Failed"),
    (PromptUnavailableError, "⌨️ Input Needed"),
    (ConfigError, "⚙️ Configuration Error"),
)


@contextmanager
def handle_cli_errors(*, debug: bool = False) -> Generator[None, None, None]:
    """Context manager to handle CLI errors gracefully.

    Args:
        debug: If True, print full traceback. If False, print user-friendly error.

    """
    try:
        yield
    except (KeyboardInterrupt, SystemExit, typer.Exit):
        raise
    except Exception as e:
        if debug:
            console.print_exception(show_locals=False)
            raise typer.Exit(1) from e

        for error_type, headline in _HEADLINES:
            if isinstance(e, error_type):
                console.print(f"[bold red]{headline}:[/bold red] {e}")
                if isinstance(e, PromptUnavailableError):
                    console.print("Run in a terminal, or answer it up front (e.g. [bold]--template[/bold]).")
                raise typer.Exit(1) from e

        console.print(f"[bold red]💥 An unexpected error occurred:[/bold red] {e}")
        console.print("[dim]Run with [bold]--debug[/bold] for more details.[/dim]")
        raise typer.Exit(1) from e
