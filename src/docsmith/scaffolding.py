"""Scaffold a missing entry document from the template's init files.

Files ending in ``.jinja`` are rendered with the answers gathered from the
user and written without the suffix; other files are copied verbatim.
Existing files in the source folder are never overwritten, and nothing is
written unless every template renders.
"""

from __future__ import annotations

import logging
import re
import shutil
from typing import TYPE_CHECKING, Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError

from docsmith.exceptions import ScaffoldError
from docsmith.markdown.frontmatter import dump_frontmatter

if TYPE_CHECKING:
    from pathlib import Path

    from docsmith.config.params import BuildParams
    from docsmith.prompts import Prompter

logger = logging.getLogger(__name__)

TEMPLATE_SUFFIX = ".jinja"


def _slug(value: str) -> str:
    return re.sub(r"[^a-z0-9]+", "-", value.lower()).strip("-")


def ask_index_data(prompter: Prompter, default_name: str) -> dict[str, Any]:
    """Ask for the tool name, claim and package name of a new site."""
    tool_name = prompter.text("Tool name", default=default_name)
    claim = prompter.text("Tool claim (one line tagline)", default="")
    package_name = prompter.text("Package name", default=_slug(tool_name) or default_name)
    return {"toolName": tool_name, "claim": claim, "packageName": package_name}


def _init_files(init_dir: Path) -> list[Path]:
    if not init_dir.is_dir():
        return []
    return sorted(path for path in init_dir.rglob("*") if path.is_file())


def _render_init_files(init_dir: Path, source: Path, answers: dict[str, Any]) -> dict[Path, str | Path]:
    """Map each missing target to its rendered text, or to the file to copy.

    Every template is rendered here so that a failing one leaves the source
    folder untouched.
    """
    env = Environment(
        loader=FileSystemLoader(str(init_dir)),
        autoescape=False,
        keep_trailing_newline=True,
        undefined=StrictUndefined,
    )
    planned: dict[Path, str | Path] = {}
    for path in _init_files(init_dir):
        relative = path.relative_to(init_dir)
        rendered = path.suffix == TEMPLATE_SUFFIX
        target = source / (relative.with_suffix("") if rendered else relative)
        if target.exists():
            logger.info("[yellow]%s already exists, leaving it untouched[/yellow]", target)
            continue
        planned[target] = env.get_template(relative.as_posix()).render(**answers) if rendered else path
    return planned


def _write_planned(planned: dict[Path, str | Path]) -> list[Path]:
    for target, payload in planned.items():
        target.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(payload, str):
            target.write_text(payload, encoding="utf-8")
        else:
            shutil.copyfile(payload, target)
    return list(planned)


def scaffold_source(params: BuildParams, prompter: Prompter) -> list[Path]:
    """Create the entry document (and other init files) in ``params.source``.

    Stores the answers in ``params.index_data`` so the configurator can
    expose them as site metadata.

    Returns:
        The files written

    Raises:
        ScaffoldError: If an init template fails to render or a file cannot be written

    """
    answers = ask_index_data(prompter, params.project_root.name)
    source = params.source
    try:
        planned = _render_init_files(params.init_dir, source, answers)
        source.mkdir(parents=True, exist_ok=True)
        written = _write_planned(planned)
        if not params.index_path.exists():
            body = f"# {answers['toolName']}\n\n{answers['claim']}\n".rstrip() + "\n"
            params.index_path.write_text(dump_frontmatter(answers, body), encoding="utf-8")
            written.append(params.index_path)
    except (OSError, TemplateError) as e:
        raise ScaffoldError(source, e) from e

    params.index_data = answers
    for path in written:
        logger.info("Created %s", path)
    return written


__all__ = ["ask_index_data", "scaffold_source"]
