"""The transforms applied, in order, to the files of a build.

Each transform takes the file map and the build parameters and mutates
them in place.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from docsmith.build.files import MARKDOWN_SUFFIX, FileMap, SiteFile
from docsmith.build.navigation import build_tree
from docsmith.markdown.rendering import render_html

if TYPE_CHECKING:
    from docsmith.config.params import BuildParams

logger = logging.getLogger(__name__)

Transform = Callable[[FileMap, "BuildParams"], None]

ENTRY_DOCUMENT = "index.md"


def inject_site_metadata(files: FileMap, params: BuildParams) -> None:
    """Take the tool name, package and claim from the entry document.

    Values already present in the site metadata win.
    """
    entry = files.get(ENTRY_DOCUMENT)
    if entry is None:
        msg = f"{ENTRY_DOCUMENT} is not part of the build, check the ignore patterns"
        raise LookupError(msg)

    app_metadata = entry.metadata
    metadata = params.extra_metadata
    metadata["toolName"] = metadata.get("toolName") or app_metadata.get("toolName")
    metadata["toolPackage"] = metadata.get("toolPackage") or app_metadata.get("packageName")
    metadata["toolClaim"] = metadata.get("toolClaim") or app_metadata.get("claim")


def assign_root_paths(files: FileMap, params: BuildParams) -> None:
    """Give every file a ``rootPath`` leading back to the site root."""
    for relative, site_file in files.items():
        site_file.metadata["rootPath"] = "../" * relative.count("/")


def render_markdown(files: FileMap, params: BuildParams) -> None:
    """Convert ``.md`` files to ``.html``.

    Rendered pages without a ``layout`` key get ``default_layout``; HTML
    written by hand is only wrapped when it names a layout itself.
    """
    for relative in sorted(files):
        if not relative.endswith(MARKDOWN_SUFFIX):
            continue
        html_path = relative[: -len(MARKDOWN_SUFFIX)] + ".html"
        if html_path in files:
            msg = f"{relative} and {html_path} would both produce {html_path}"
            raise ValueError(msg)
        site_file = files.pop(relative)
        metadata = site_file.metadata
        if params.default_layout:
            metadata.setdefault("layout", params.default_layout)
        files[html_path] = SiteFile(render_html(site_file.text).encode("utf-8"), metadata)


def build_navigation(files: FileMap, params: BuildParams) -> None:
    """Expose the folder-shaped navigation as ``navs.main`` and per-page ``nav_path``."""
    root_title = params.extra_metadata.get("toolName") or "Home"
    root, trails = build_tree(files, root_title=str(root_title))
    for relative, trail in trails.items():
        files[relative].metadata["nav_path"] = trail
    params.extra_metadata["navs"] = {"main": root}


def apply_layouts(files: FileMap, params: BuildParams) -> None:
    """Wrap every HTML page naming a ``layout`` in it; every page records its ``path``."""
    if params.environment is None:
        msg = "Layout engine is not configured"
        raise RuntimeError(msg)

    for relative in sorted(files):
        if not relative.endswith(".html"):
            continue
        site_file = files[relative]
        site_file.metadata["path"] = relative
        layout = site_file.metadata.get("layout")
        if not layout:
            continue
        template = params.environment.get_template(str(layout))
        context = {**params.extra_metadata, **site_file.metadata, "contents": site_file.text}
        site_file.contents = template.render(context).encode("utf-8")


def copy_assets(files: FileMap, params: BuildParams) -> None:
    """Add the template's static assets; source files with the same path win."""
    assets_dir = params.assets_dir
    if not assets_dir.is_dir():
        logger.debug("Template has no %s folder", assets_dir)
        return

    for path in sorted(assets_dir.rglob("*")):
        if not path.is_file():
            continue
        relative = path.relative_to(assets_dir).as_posix()
        if relative in files:
            logger.debug("Keeping source file %s over template asset", relative)
            continue
        files[relative] = SiteFile(path.read_bytes())


TRANSFORMS: tuple[tuple[str, Transform], ...] = (
    ("site metadata", inject_site_metadata),
    ("root paths", assign_root_paths),
    ("markdown", render_markdown),
    ("navigation", build_navigation),
    ("layouts", apply_layouts),
    ("assets", copy_assets),
)


__all__ = [
    "TRANSFORMS",
    "apply_layouts",
    "assign_root_paths",
    "build_navigation",
    "copy_assets",
    "inject_site_metadata",
    "render_markdown",
]
