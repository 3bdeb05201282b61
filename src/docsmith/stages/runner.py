"""Run the transform chain and write the site."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from docsmith.build.files import BuildResult, read_source_tree, write_files
from docsmith.build.transforms import TRANSFORMS
from docsmith.exceptions import BuildError, DocsmithError

if TYPE_CHECKING:
    from docsmith.config.params import BuildParams

logger = logging.getLogger(__name__)


def run(params: BuildParams) -> BuildResult:
    """Build the site described by ``params`` into its destination.

    Raises:
        BuildError: Wrapping the first failure of reading, a transform, or writing

    """
    try:
        files = read_source_tree(params.source, params.ignore)
    except (OSError, ValueError) as e:
        raise BuildError("read sources", e) from e
    logger.debug("Read %d files from %s", len(files), params.source)

    for name, transform in TRANSFORMS:
        logger.debug("Applying %s", name)
        try:
            transform(files, params)
        except DocsmithError:
            raise
        except Exception as e:
            raise BuildError(name, e) from e

    try:
        write_files(files, params.destination)
    except OSError as e:
        raise BuildError("write", e) from e

    logger.info("[green]Website generated at %s[/green]", params.destination)
    return BuildResult(destination=params.destination, files=files, metadata=params.extra_metadata)


__all__ = ["run"]
