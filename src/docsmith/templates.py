"""Discovery of site templates among the project's declared dependencies.

A site template is any dependency whose name starts with the configured
prefix (``docsmith-template-`` by default). Its directory provides
``layouts/``, ``assets/`` and optionally ``init/`` scaffold files.
"""

from __future__ import annotations

import importlib.util
import logging
import re
import tomllib
from pathlib import Path

from docsmith.exceptions import NoTemplateError

logger = logging.getLogger(__name__)

_REQUIREMENT_NAME = re.compile(r"^\s*([A-Za-z0-9][A-Za-z0-9._-]*)")


def normalize_name(name: str) -> str:
    """Normalize a distribution name the way package indexes do."""
    return re.sub(r"[-_.]+", "-", name).lower()


def _requirement_names(lines: list[str]) -> list[str]:
    names = []
    for line in lines:
        stripped = line.split("#", 1)[0].strip()
        if not stripped or stripped.startswith("-"):
            continue
        match = _REQUIREMENT_NAME.match(stripped)
        if match:
            names.append(match.group(1))
    return names


def read_manifest_dependencies(manifest: Path) -> list[str]:
    """Return the dependency names declared in ``manifest``.

    ``pyproject.toml`` files contribute ``[project].dependencies``; any
    other file is read as a requirements list.

    Raises:
        NoTemplateError: If the manifest is missing or unreadable

    """
    if not manifest.is_file():
        msg = f"Package manifest {manifest} not found, cannot look for site templates"
        raise NoTemplateError(msg)

    if manifest.suffix == ".toml":
        try:
            data = tomllib.loads(manifest.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError as e:
            msg = f"Package manifest {manifest} is not valid TOML: {e}"
            raise NoTemplateError(msg) from e
        dependencies = data.get("project", {}).get("dependencies", [])
        return _requirement_names([str(dep) for dep in dependencies])

    return _requirement_names(manifest.read_text(encoding="utf-8").splitlines())


def filter_templates(names: list[str], prefix: str) -> list[str]:
    """Keep the names matching the template naming convention, in order."""
    wanted = normalize_name(prefix)
    templates: list[str] = []
    for name in names:
        if normalize_name(name).startswith(wanted) and name not in templates:
            templates.append(name)
    return templates


def discover_templates(manifest: Path, prefix: str) -> list[str]:
    """List the site templates declared by the project."""
    return filter_templates(read_manifest_dependencies(manifest), prefix)


def resolve_template_dir(name: str, search_paths: list[Path] | None = None) -> Path:
    """Locate the directory of template ``name``.

    Each search path is tried first (``<path>/<name>`` or its import
    name), then the installed package of the same import name.

    Raises:
        NoTemplateError: If the template cannot be located

    """
    import_name = normalize_name(name).replace("-", "_")
    for base in search_paths or []:
        for candidate in (base / name, base / import_name):
            if candidate.is_dir():
                return candidate

    try:
        spec = importlib.util.find_spec(import_name)
    except (ImportError, ValueError) as e:
        logger.debug("find_spec(%s) failed: %s", import_name, e)
        spec = None

    if spec is not None and spec.submodule_search_locations:
        return Path(next(iter(spec.submodule_search_locations)))

    msg = f"Template {name} is declared but not installed (no package '{import_name}' found)"
    raise NoTemplateError(msg)


__all__ = [
    "discover_templates",
    "filter_templates",
    "normalize_name",
    "read_manifest_dependencies",
    "resolve_template_dir",
]
