"""Sequencing of the build stages.

Stages run strictly in order and the first exception stops the
pipeline; there is no retry and nothing is rolled back.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from docsmith import stages
from docsmith.config import build_params, load_site_config
from docsmith.prompts import NonInteractivePrompter, Prompter

if TYPE_CHECKING:
    from docsmith.build.files import BuildResult
    from docsmith.config.params import BuildParams

logger = logging.getLogger(__name__)


@dataclass
class BuildOutcome:
    """Result of a full ``build``: the site, and whether it was published."""

    result: BuildResult
    published: bool


class SiteBuilder:
    """Drive one invocation through check, configure, run and publish."""

    def __init__(self, params: BuildParams, prompter: Prompter | None = None) -> None:
        self.params = params
        self.prompter = prompter or NonInteractivePrompter()

    def check(self) -> None:
        stages.check(self.params, self.prompter)

    def configure(self) -> None:
        stages.configure(self.params)

    def run(self) -> BuildResult:
        return stages.run(self.params)

    def publish(self) -> bool:
        return stages.publish(self.params, self.prompter)

    def build(self, *, publish: bool = True) -> BuildOutcome:
        """Run every stage.

        Args:
            publish: Set to False to stop after writing the site

        """
        self.check()
        self.configure()
        result = self.run()
        published = self.publish() if publish else False
        return BuildOutcome(result=result, published=published)


def build_site(
    project_root: Path,
    *,
    prompter: Prompter | None = None,
    config_path: Path | None = None,
    publish: bool | None = None,
    **overrides: object,
) -> BuildOutcome:
    """Load ``docsmith.yml`` from ``project_root`` and build the site.

    ``overrides`` are forwarded to :func:`docsmith.config.build_params`.
    """
    config = load_site_config(project_root, config_path)
    params = build_params(project_root, config, publish=publish, **overrides)
    return SiteBuilder(params, prompter).build()


__all__ = ["BuildOutcome", "SiteBuilder", "build_site"]
