"""Main Typer application for docsmith."""

import logging
import sys
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from docsmith.cli.errorhandler import handle_cli_errors
from docsmith.config import BuildParams, build_params, load_site_config
from docsmith.exceptions import NoTemplateError
from docsmith.logging_setup import configure_logging
from docsmith.pipeline import SiteBuilder
from docsmith.prompts import NonInteractivePrompter, Prompter, TyperPrompter
from docsmith.templates import discover_templates, resolve_template_dir

app = typer.Typer(
    name="docsmith",
    help="Build a static documentation site from a folder of markdown",
    add_completion=False,
)

console = Console()
logger = logging.getLogger(__name__)

ProjectArg = Annotated[
    Path,
    typer.Argument(help="Project root holding the manifest and docsmith.yml"),
]
ConfigOpt = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="Config file (defaults to docsmith.yml in the project root)"),
]
SourceOpt = Annotated[str | None, typer.Option("--source", "-s", help="Markdown source folder")]
DestinationOpt = Annotated[str | None, typer.Option("--destination", "-d", help="Output folder")]
TemplateOpt = Annotated[
    str | None,
    typer.Option("--template", "-t", help="Template to use when several are declared"),
]
ScaffoldOpt = Annotated[
    bool,
    typer.Option("--scaffold", help="Create index.md from the template's init files when it is missing"),
]
InteractiveOpt = Annotated[
    bool,
    typer.Option(
        "--interactive/--no-interactive",
        "-i",
        help="Ask questions on the terminal (auto-disabled in non-TTY environments)",
    ),
]
DebugOpt = Annotated[bool, typer.Option("--debug", help="Show full tracebacks")]


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Show debug messages")] = False,
    quiet: Annotated[bool, typer.Option("--quiet", "-q", help="Only show warnings and errors")] = False,
) -> None:
    """Configure logging for every command."""
    level = None
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    configure_logging(level)


def _prompter(interactive: bool) -> Prompter:
    is_tty = sys.stdin.isatty() and sys.stdout.isatty()
    if interactive and is_tty:
        return TyperPrompter(console)
    return NonInteractivePrompter()


def _params(
    project: Path,
    config: Path | None,
    *,
    source: str | None = None,
    destination: str | None = None,
    template: str | None = None,
    scaffold: bool = False,
    publish: bool | None = None,
) -> BuildParams:
    site_config = load_site_config(project.resolve(), config)
    return build_params(
        project,
        site_config,
        source=source,
        destination=destination,
        template=template,
        missing_index="scaffold" if scaffold else None,
        publish=publish,
    )


@app.command()
def build(
    project: ProjectArg = Path(),
    *,
    config: ConfigOpt = None,
    source: SourceOpt = None,
    destination: DestinationOpt = None,
    template: TemplateOpt = None,
    scaffold: ScaffoldOpt = False,
    publish: Annotated[
        bool | None,
        typer.Option(
            "--publish/--no-publish",
            help="Publish to GitHub Pages without asking, or never (default: ask)",
        ),
    ] = None,
    interactive: InteractiveOpt = True,
    debug: DebugOpt = False,
) -> None:
    """Check, build and optionally publish the documentation site."""
    with handle_cli_errors(debug=debug):
        params = _params(
            project,
            config,
            source=source,
            destination=destination,
            template=template,
            scaffold=scaffold,
            publish=publish,
        )
        outcome = SiteBuilder(params, _prompter(interactive)).build()

    status = "\n🚀 Published to GitHub Pages" if outcome.published else ""
    console.print(
        Panel(
            f"[bold green]✅ Website generated[/bold green]\n\n📁 {outcome.result.destination}{status}",
            border_style="green",
        )
    )


@app.command()
def check(
    project: ProjectArg = Path(),
    *,
    config: ConfigOpt = None,
    source: SourceOpt = None,
    template: TemplateOpt = None,
    scaffold: ScaffoldOpt = False,
    interactive: InteractiveOpt = True,
    debug: DebugOpt = False,
) -> None:
    """Verify the source folder, the site template and the index page."""
    with handle_cli_errors(debug=debug):
        params = _params(project, config, source=source, template=template, scaffold=scaffold)
        SiteBuilder(params, _prompter(interactive)).check()

    console.print(f"[green]✅ Ready to build with template {params.selected_template}[/green]")


@app.command()
def templates(
    project: ProjectArg = Path(),
    *,
    config: ConfigOpt = None,
    debug: DebugOpt = False,
) -> None:
    """List the site templates declared by the project."""
    with handle_cli_errors(debug=debug):
        params = _params(project, config)
        names = discover_templates(params.manifest, params.template_prefix)

    if not names:
        console.print(f"[yellow]No '{params.template_prefix}*' dependency in {params.manifest}[/yellow]")
        return

    table = Table(title="Site templates")
    table.add_column("Name", style="cyan")
    table.add_column("Location")
    for name in names:
        try:
            location = str(resolve_template_dir(name, params.template_paths))
        except NoTemplateError as e:
            location = f"[red]{e}[/red]"
        table.add_row(name, location)
    console.print(table)
