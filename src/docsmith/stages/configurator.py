"""Prepare the destination, the layout engine and the site metadata."""

from __future__ import annotations

import logging
import shutil
from collections.abc import Container
from typing import TYPE_CHECKING, Any

from jinja2 import Environment, FileSystemLoader

from docsmith.exceptions import CleanError

if TYPE_CHECKING:
    from docsmith.config.params import BuildParams

logger = logging.getLogger(__name__)


def is_in(value: Any, collection: Container[Any] | None) -> bool:
    """Membership test exposed to layouts as ``isIn``."""
    return collection is not None and value in collection


def clean_destination(params: BuildParams) -> None:
    """Remove the previous build output.

    Raises:
        CleanError: If the folder cannot be removed, or removing it would
            take the sources or the project with it

    """
    destination = params.destination.resolve()
    logger.info("Cleaning %s folder...", destination)

    protected = (params.source.resolve(), params.project_root.resolve())
    if destination in protected or params.source.resolve().is_relative_to(destination):
        logger.info("[red]Error cleaning %s folder[/red]", destination)
        raise CleanError(destination, "it holds the sources or the project itself")

    if destination.exists():
        try:
            if destination.is_dir() and not destination.is_symlink():
                shutil.rmtree(destination)
            else:
                destination.unlink()
        except OSError as e:
            logger.info("[red]Error cleaning %s folder[/red]", destination)
            raise CleanError(destination, e.strerror or str(e)) from e

    logger.info("%s folder clean", destination)


def configure_layouts(params: BuildParams) -> Environment:
    """Create the Jinja2 environment used for page layouts.

    Project layout folders shadow the template's own ``layouts`` folder.
    """
    search_path = [str(path) for path in params.layout_paths]
    search_path.append(str(params.layouts_dir))
    logger.debug("Layout search path: %s", search_path)

    environment = Environment(
        loader=FileSystemLoader(search_path),
        autoescape=False,
        keep_trailing_newline=True,
    )
    environment.globals["isIn"] = is_in
    params.environment = environment
    return environment


def configure_metadata(params: BuildParams) -> dict[str, Any]:
    """Assemble the metadata shared by every page."""
    metadata: dict[str, Any] = dict(params.metadata)
    metadata["targets"] = list(params.targets)

    # Answers given while scaffolding an index
    if params.index_data:
        metadata.update(params.index_data)

    metadata["isIn"] = is_in
    params.extra_metadata = metadata
    return metadata


def configure(params: BuildParams) -> None:
    """Run the configuration steps in order."""
    params.extra_metadata = {}
    clean_destination(params)
    configure_layouts(params)
    configure_metadata(params)


__all__ = ["clean_destination", "configure", "configure_layouts", "configure_metadata", "is_in"]
