"""The stages of a site build: check, configure, run, publish."""

from docsmith.stages.configurator import configure
from docsmith.stages.publisher import publish
from docsmith.stages.runner import run
from docsmith.stages.validator import check

__all__ = ["check", "configure", "publish", "run"]
