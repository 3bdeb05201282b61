"""Preconditions checked before anything is deleted or written."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from docsmith.exceptions import MissingIndexError, MissingSourceError, NoTemplateError
from docsmith.scaffolding import scaffold_source
from docsmith.templates import discover_templates, normalize_name, resolve_template_dir

if TYPE_CHECKING:
    from docsmith.config.params import BuildParams
    from docsmith.prompts import Prompter

logger = logging.getLogger(__name__)


def check_source(params: BuildParams) -> None:
    """Fail with MissingSourceError unless the source folder exists."""
    logger.info("Checking if %s folder exists...", params.source)
    if not params.source.is_dir():
        logger.info("[red]%s folder does not exist, unable to create website[/red]", params.source)
        raise MissingSourceError(params.source)
    logger.info("%s folder found!", params.source)


def use_template(params: BuildParams, name: str) -> None:
    """Record ``name`` as the selected template and resolve its directory."""
    logger.info("Using template: [yellow]%s[/yellow]", name)
    params.selected_template = name
    params.template_source = resolve_template_dir(name, params.template_paths)


def select_template(params: BuildParams, templates: list[str], prompter: Prompter) -> str:
    """Pick one template among several, asking only when needed."""
    if params.template_name:
        wanted = normalize_name(params.template_name)
        for name in templates:
            if normalize_name(name) == wanted:
                return name
        msg = f"Template {params.template_name} is not among the declared templates: {', '.join(templates)}"
        raise NoTemplateError(msg)
    if len(templates) == 1:
        return templates[0]
    return prompter.select("Several site templates found, which one should be used?", templates)


def check_template(params: BuildParams, prompter: Prompter) -> None:
    """Find the site template among the manifest's dependencies."""
    logger.info("Searching for site templates in dependencies")
    templates = discover_templates(params.manifest, params.template_prefix)
    if not templates:
        msg = f"There is no template in your dependencies, add one! (expected a '{params.template_prefix}*' package)"
        raise NoTemplateError(msg)

    logger.info("Templates found: %d", len(templates))
    use_template(params, select_template(params, templates, prompter))


def check_index(params: BuildParams, prompter: Prompter) -> None:
    """Require ``index.md``, scaffolding it first when configured to."""
    if params.index_path.is_file():
        logger.info("index.md file found!")
        return

    logger.info("[red]index.md not found at %s folder[/red]", params.source)
    if params.missing_index != "scaffold":
        raise MissingIndexError(params.source)

    logger.info("Scaffolding %s from template %s", params.source, params.selected_template)
    scaffold_source(params, prompter)
    if not params.index_path.is_file():
        raise MissingIndexError(params.source)


def check(params: BuildParams, prompter: Prompter) -> None:
    """Run every precondition in order."""
    check_source(params)
    check_template(params, prompter)
    check_index(params, prompter)


__all__ = ["check", "check_index", "check_source", "check_template", "select_template", "use_template"]
