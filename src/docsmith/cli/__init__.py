"""Command line interface for docsmith."""

from docsmith.cli.main import app

__all__ = ["app"]
